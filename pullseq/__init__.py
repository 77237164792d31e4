"""pullseq - Composable lazy-sequence operators over a pull-based cursor protocol."""

from .consumers import first, first_or_default, reduce, to_array
from .core import (
    MISSING,
    AbortSignal,
    Capabilities,
    CursorError,
    CursorState,
    Done,
    EndPolicyKind,
    IterationResult,
    Operation,
    Pending,
    ProtocolViolation,
    ensure_result,
)
from .factory import CursorFactory
from .models import CursorOptions, EndOfIteration, SequenceCursorOptions
from .operators import (
    FilterCursor,
    LimitCursor,
    MapCursor,
    TapCursor,
    filter_cursor,
    limit,
    map_cursor,
    reiterate,
    tap,
)
from .runtime import (
    Cursor,
    ForeignCursor,
    NativeCursor,
    PrimitiveCursor,
    RelayCursor,
    SequenceCursor,
    as_cursor,
    create,
    from_sequence,
    relay,
)

__version__ = "0.1.0"

__all__ = [
    # Results
    "IterationResult",
    "Pending",
    "Done",
    "MISSING",
    "ensure_result",
    # Cursors
    "Cursor",
    "Capabilities",
    "CursorState",
    "Operation",
    "RelayCursor",
    "relay",
    "PrimitiveCursor",
    "create",
    "SequenceCursor",
    "from_sequence",
    "NativeCursor",
    "ForeignCursor",
    "as_cursor",
    "CursorFactory",
    # Combinators
    "FilterCursor",
    "filter_cursor",
    "MapCursor",
    "map_cursor",
    "TapCursor",
    "tap",
    "reiterate",
    "LimitCursor",
    "limit",
    # Consumers
    "reduce",
    "first",
    "first_or_default",
    "to_array",
    # Options
    "CursorOptions",
    "SequenceCursorOptions",
    "EndOfIteration",
    "EndPolicyKind",
    # Exceptions
    "CursorError",
    "ProtocolViolation",
    "AbortSignal",
]
