"""Core components."""

from .callbacks import bind, invoke
from .capabilities import NEXT_ONLY, Capabilities
from .enums import CursorState, EndPolicyKind, Operation
from .exceptions import AbortSignal, CursorError, ProtocolViolation
from .results import MISSING, Done, IterationResult, Pending, or_none
from .validation import ensure_result

__all__ = [
    # Results
    "IterationResult",
    "Pending",
    "Done",
    "MISSING",
    "or_none",
    "ensure_result",
    # Capabilities
    "Capabilities",
    "NEXT_ONLY",
    # Enums
    "CursorState",
    "EndPolicyKind",
    "Operation",
    # Exceptions
    "CursorError",
    "ProtocolViolation",
    "AbortSignal",
    # Callbacks
    "bind",
    "invoke",
]
