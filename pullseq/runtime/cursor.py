"""Cursor base class.

Architecture:
    ``Cursor`` owns the parts of the protocol every cursor shares:
    - The termination cache: the first terminal result any operation returns
      is stored on the instance, and every later call to any operation
      returns it without doing further work
    - The capability gate: ``return_`` and ``throw`` raise
      ``NotImplementedError`` unless the cursor's ``Capabilities`` enable them
    - Python iteration: a cursor is an iterator; ``StopIteration`` carries the
      final value

    Subclasses implement ``_advance`` and, when they declare the capability,
    ``_return`` / ``_throw``. Terminal results they return are cached by the
    base class.

See Also:
    - RelayCursor: Base for wrappers that forward to a source cursor
    - SequenceCursor: Cursor over a fixed sequence
    - PrimitiveCursor: Cursor built from caller-supplied functions
"""

from __future__ import annotations

from typing import Any, Generic, TypeVar

from ..core.capabilities import NEXT_ONLY, Capabilities
from ..core.enums import CursorState, Operation
from ..core.results import MISSING, IterationResult
from .telemetry import log_cursor_terminated

Y = TypeVar("Y")


class Cursor(Generic[Y]):
    """Stateful handle over one pass of a lazy sequence."""

    def __init__(self, capabilities: Capabilities = NEXT_ONLY) -> None:
        self._capabilities = capabilities
        # Written once, by _terminate
        self._terminal: IterationResult[Any] | None = None

    @property
    def capabilities(self) -> Capabilities:
        return self._capabilities

    @property
    def state(self) -> CursorState:
        return CursorState.ACTIVE if self._terminal is None else CursorState.TERMINATED

    @property
    def terminal(self) -> IterationResult[Any] | None:
        """The cached terminal result, or ``None`` while the cursor is active."""
        return self._terminal

    @property
    def is_terminated(self) -> bool:
        return self._terminal is not None

    # --------- protocol operations ----------
    def next(self, arg: Any = MISSING) -> IterationResult[Any]:
        """Advance the cursor.

        Args:
            arg: Optional value forwarded to the producer. Omitting it is
                distinct from passing ``None``.

        Returns:
            ``Pending`` with the next value, or the terminal ``Done``
        """
        if self._terminal is not None:
            return self._terminal
        result = self._advance(arg)
        if result.done:
            return self._terminate(result, Operation.NEXT)
        return result

    def return_(self, value: Any = MISSING) -> IterationResult[Any]:
        """Request early termination.

        Raises:
            NotImplementedError: If the cursor does not support early-stop
        """
        self._require(self._capabilities.can_return, Operation.RETURN)
        if self._terminal is not None:
            return self._terminal
        result = self._return(value)
        if result.done:
            return self._terminate(result, Operation.RETURN)
        return result

    def throw(self, error: Any = MISSING) -> IterationResult[Any]:
        """Signal an abort condition.

        The result is ``Pending`` when the producer recovered and iteration may
        continue.

        Raises:
            NotImplementedError: If the cursor does not support abort
        """
        self._require(self._capabilities.can_throw, Operation.THROW)
        if self._terminal is not None:
            return self._terminal
        result = self._throw(error)
        if result.done:
            return self._terminate(result, Operation.THROW)
        return result

    # --------- subclass hooks ----------
    def _advance(self, arg: Any) -> IterationResult[Any]:
        raise NotImplementedError

    def _return(self, value: Any) -> IterationResult[Any]:
        raise NotImplementedError

    def _throw(self, error: Any) -> IterationResult[Any]:
        raise NotImplementedError

    def _terminate(self, result: IterationResult[Any], operation: Operation) -> IterationResult[Any]:
        """Write the termination cache if it is empty and return the cached result."""
        if self._terminal is None:
            self._terminal = result
            log_cursor_terminated(cursor=self, operation=operation.value)
        return self._terminal

    def _require(self, supported: bool, operation: Operation) -> None:
        if not supported:
            raise NotImplementedError(
                f"{operation.value} is not implemented for this {type(self).__name__}"
            )

    # --------- native iteration ----------
    def __iter__(self) -> Cursor[Y]:
        return self

    def __next__(self) -> Y:
        result = self.next()
        if result.done:
            raise StopIteration(result.value)
        return result.value

    def __repr__(self) -> str:
        ops = ",".join(self._capabilities.describe())
        return f"<{type(self).__name__} {self.state.value} ops={ops}>"
