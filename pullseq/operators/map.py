"""Map combinator.

Only yielded values go through the mapper. Terminal values are final
results, not sequence data, and pass through unmapped.

Early-stop and abort differ from a plain relay: when the source answers
``return_`` or ``throw`` with a non-terminal result, the map cursor
terminates itself with ``Done(None)`` but still hands that last value to the
caller, mapped, as a ``Pending``. Every later call returns ``Done(None)``.
"""

from __future__ import annotations

from collections.abc import Callable
from typing import Any

from ..core.callbacks import bind, invoke
from ..core.enums import Operation
from ..core.results import MISSING, Done, IterationResult, Pending
from ..core.validation import ensure_result
from ..runtime.relay import RelayCursor
from ..runtime.telemetry import log_forced_termination


class MapCursor(RelayCursor):
    """Transforms yielded values with a mapper function."""

    def __init__(self, source: Any, mapper: Callable[..., Any], this_arg: Any = MISSING) -> None:
        super().__init__(source)
        self._mapper = bind(mapper, this_arg)

    def _advance(self, arg: Any) -> IterationResult[Any]:
        result = self._pull(arg)
        if result.done:
            return result
        return Pending(invoke(self._mapper, result.value, arg=arg))

    def _return(self, value: Any) -> IterationResult[Any]:
        if not self._source.capabilities.can_return:
            return Done(None)
        result = ensure_result(Operation.RETURN, invoke(self._source.return_, arg=value))
        return self._surface(result, Operation.RETURN)

    def _throw(self, error: Any) -> IterationResult[Any]:
        if not self._source.capabilities.can_throw:
            return Done(None)
        result = ensure_result(Operation.THROW, invoke(self._source.throw, arg=error))
        return self._surface(result, Operation.THROW)

    def _surface(self, result: IterationResult[Any], operation: Operation) -> IterationResult[Any]:
        if result.done:
            return result
        self._terminate(Done(None), operation)
        log_forced_termination(cursor=self, operation=operation.value)
        return Pending(self._mapper(result.value))


def map_cursor(source: Any, mapper: Callable[..., Any], this_arg: Any = MISSING) -> MapCursor:
    """Wrap ``source`` so each yielded value is replaced by ``mapper(value)``.

    The mapper receives the ``next`` argument as a second parameter when one
    was passed.
    """
    return MapCursor(source, mapper, this_arg)
