"""Cursors over a fixed, ordered sequence.

A ``SequenceCursor`` yields the elements of a window of the sequence from left
to right, then terminates once through its end-of-iteration policy:

- ``on_end_of_iteration``: callback producing the terminal result; it
  receives the ``next`` argument when one was passed
- ``end_of_iteration_value``: fixed terminal value
- otherwise ``Done(None)``

The policy is resolved from the options once, at construction.
"""

from __future__ import annotations

from collections.abc import Mapping, Sequence
from typing import Any

from ..core.callbacks import bind, invoke
from ..core.enums import EndPolicyKind, Operation
from ..core.results import MISSING, Done, IterationResult, Pending
from ..core.validation import ensure_result
from ..models.options import EndOfIteration, SequenceCursorOptions, coerce_options
from .primitive import HandlerCursor


class SequenceCursor(HandlerCursor):
    """Finite cursor over ``items[start_index:start_index + count]``."""

    def __init__(
        self,
        items: Sequence[Any],
        options: SequenceCursorOptions | None = None,
        this_arg: Any = MISSING,
    ) -> None:
        options = options if options is not None else SequenceCursorOptions()
        super().__init__(options, this_arg)
        self._items = items
        self._index, self._stop = options.window(len(items))
        self._end = options.end_of_iteration
        self._on_end = bind(self._end.callback, this_arg) if self._end.callback is not None else None

    @property
    def index(self) -> int:
        """Index of the next element to yield."""
        return self._index

    @property
    def end_policy(self) -> EndOfIteration:
        return self._end

    def _advance(self, arg: Any) -> IterationResult[Any]:
        if self._index < self._stop:
            value = self._items[self._index]
            self._index += 1
            return Pending(value)
        return self._end_of_iteration(arg)

    def _end_of_iteration(self, arg: Any) -> IterationResult[Any]:
        if self._end.kind is EndPolicyKind.CALLBACK:
            result = ensure_result(Operation.NEXT, invoke(self._on_end, arg=arg))
            # End of sequence terminates even if the callback says otherwise
            return result if result.done else Done(result.value)
        if self._end.kind is EndPolicyKind.VALUE:
            return Done(self._end.value)
        return Done(None)


def from_sequence(
    items: Sequence[Any],
    options: SequenceCursorOptions | Mapping[str, Any] | None = None,
    this_arg: Any = MISSING,
    **kwargs: Any,
) -> SequenceCursor:
    """Create a cursor over a fixed sequence.

    Args:
        items: Sequence to iterate; it is not copied
        options: ``SequenceCursorOptions``, or a mapping of its fields
        this_arg: Optional object every handler is bound to
        **kwargs: Option fields, overriding ``options``

    Returns:
        The new cursor

    Example:
        >>> cursor = from_sequence([10, 20, 30, 40], start_index=1, count=2)
        >>> list(cursor)
        [20, 30]
    """
    return SequenceCursor(items, coerce_options(SequenceCursorOptions, options, **kwargs), this_arg)
