"""Filter combinator."""

from __future__ import annotations

from collections.abc import Callable
from typing import Any

from ..core.callbacks import bind, invoke
from ..core.results import MISSING, IterationResult
from ..runtime.relay import RelayCursor


class FilterCursor(RelayCursor):
    """Yields only the source values that satisfy a predicate.

    The predicate is called as ``predicate(value)``, or
    ``predicate(value, arg)`` when ``next`` was called with an argument.
    Rejected values are skipped by advancing the source again with the same
    argument; skipping stops as soon as the source terminates.
    """

    def __init__(self, source: Any, predicate: Callable[..., Any], this_arg: Any = MISSING) -> None:
        super().__init__(source)
        self._predicate = bind(predicate, this_arg)

    def _advance(self, arg: Any) -> IterationResult[Any]:
        result = self._pull(arg)
        while not result.done and not invoke(self._predicate, result.value, arg=arg):
            result = self._pull(arg)
        return result


def filter_cursor(source: Any, predicate: Callable[..., Any], this_arg: Any = MISSING) -> FilterCursor:
    """Wrap ``source`` so that only values matching ``predicate`` are yielded.

    Example:
        >>> from pullseq import from_sequence, to_array
        >>> to_array(filter_cursor(from_sequence([1, 2, 3, 4, 5]), lambda v: v % 2 == 0))
        [2, 4]
    """
    return FilterCursor(source, predicate, this_arg)
