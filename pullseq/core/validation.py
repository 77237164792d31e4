"""Shape checks for iteration results returned by producers.

Producers are anything whose output a cursor relays without having created it
itself: caller-supplied step functions, early-stop and abort handlers,
end-of-iteration callbacks, and duck-typed source cursors. Their output is
checked here before it can reach a termination cache.
"""

from __future__ import annotations

import logging
from collections.abc import Mapping
from typing import Any

from .enums import Operation
from .exceptions import ProtocolViolation
from .results import IterationResult

logger = logging.getLogger(__name__)

_SCALARS = (str, bytes, bytearray, int, float, complex, bool)
_ABSENT = object()


def _violation(operation: str, message: str, raw: Any) -> ProtocolViolation:
    logger.warning(
        "protocol_violation",
        extra={"operation": operation, "result_type": type(raw).__name__},
    )
    return ProtocolViolation(message, operation=operation, result=raw)


def ensure_result(operation: str | Operation, raw: Any) -> IterationResult[Any]:
    """Validate and normalize a producer's output.

    Args:
        operation: Name of the operation that produced ``raw``
        raw: Value claimed to be an iteration result

    Returns:
        ``raw`` itself when it already is an ``IterationResult``, otherwise an
        ``IterationResult`` built from its ``done`` / ``value`` members

    Raises:
        ProtocolViolation: If ``raw`` is not a structured object, or has
            neither a boolean ``done`` nor a ``value``
    """
    if isinstance(raw, IterationResult):
        return raw

    name = operation.value if isinstance(operation, Operation) else operation
    if raw is None or isinstance(raw, _SCALARS):
        raise _violation(name, f"iterator.{name}() returned a non-object value", raw)

    if isinstance(raw, Mapping):
        done = raw.get("done", _ABSENT)
        value = raw.get("value", _ABSENT)
    else:
        done = getattr(raw, "done", _ABSENT)
        value = getattr(raw, "value", _ABSENT)

    if not isinstance(done, bool) and value is _ABSENT:
        raise _violation(
            name,
            f"object returned by iterator.{name}() does not implement the iteration result interface",
            raw,
        )

    return IterationResult(None if value is _ABSENT else value, done is True)
