"""Relay construction for wrapper cursors.

Architecture:
    A relay wraps a source cursor and replaces its ``next`` step, while its
    ``return_`` and ``throw`` are synthesized here instead of being written per
    combinator:
    - Capabilities are copied from the source: the relay supports early-stop
      or abort only if the source does
    - ``return_`` forwards to the source. A terminal source result is cached
      and returned. A non-terminal one is replaced by ``Done(value)``, so
      early-stop always terminates at the relay boundary
    - ``throw`` forwards to the source. A terminal source result is cached
      and returned. A non-terminal one is returned uncached: the source
      absorbed the abort and iteration continues
    - Every source result is validated before it is relayed

See Also:
    - Cursor: Termination cache and capability gate
    - operators: filter, map, tap and limit built on relays
"""

from __future__ import annotations

from collections.abc import Callable
from typing import Any

from ..core.callbacks import bind, invoke
from ..core.capabilities import Capabilities
from ..core.enums import Operation
from ..core.results import MISSING, Done, IterationResult, or_none
from ..core.validation import ensure_result
from .adapters import as_cursor
from .cursor import Cursor
from .telemetry import log_abort_absorbed, log_forced_termination


class RelayCursor(Cursor[Any]):
    """Cursor that relays early-stop and abort to a source cursor."""

    def __init__(self, source: Any) -> None:
        source = as_cursor(source)
        super().__init__(Capabilities.of(source.capabilities))
        self._source = source

    @property
    def source(self) -> Cursor[Any]:
        return self._source

    def _pull(self, arg: Any = MISSING) -> IterationResult[Any]:
        """Advance the source with the same optional argument."""
        return ensure_result(Operation.NEXT, invoke(self._source.next, arg=arg))

    def _return(self, value: Any) -> IterationResult[Any]:
        result = ensure_result(Operation.RETURN, invoke(self._source.return_, arg=value))
        if result.done:
            return result
        log_forced_termination(cursor=self, operation=Operation.RETURN.value)
        return Done(or_none(value))

    def _throw(self, error: Any) -> IterationResult[Any]:
        result = ensure_result(Operation.THROW, invoke(self._source.throw, arg=error))
        if not result.done:
            log_abort_absorbed(cursor=self)
        return result


class StepRelay(RelayCursor):
    """Relay whose ``next`` step is a plain function of the source cursor."""

    def __init__(self, source: Any, step: Callable[..., Any], this_arg: Any = MISSING) -> None:
        super().__init__(source)
        self._step = bind(step, this_arg)

    def _advance(self, arg: Any) -> IterationResult[Any]:
        return ensure_result(Operation.NEXT, invoke(self._step, self._source, arg=arg))


def relay(source: Any, step: Callable[..., Any], this_arg: Any = MISSING) -> RelayCursor:
    """Build a wrapper cursor from a custom ``next`` step.

    Args:
        source: Cursor (or anything ``as_cursor`` adopts) to wrap
        step: Called as ``step(source)`` or ``step(source, arg)``; must return
            an iteration result
        this_arg: Optional object the step is bound to

    Returns:
        Cursor with the step as ``next`` and relayed ``return_`` / ``throw``
    """
    return StepRelay(source, step, this_arg)
