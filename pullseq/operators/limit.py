"""Limit combinator."""

from __future__ import annotations

import math
from typing import Any

from ..core.results import Done, IterationResult
from ..runtime.relay import RelayCursor


def _normalize_count(count: Any) -> float:
    if isinstance(count, bool) or not isinstance(count, int | float) or math.isnan(count):
        return 0
    return count


class LimitCursor(RelayCursor):
    """Yields at most ``count`` source values, then terminates with ``Done(None)``.

    The iteration counter belongs to this wrapper and counts every ``next``
    call that reaches the step, including the one that ends iteration.
    """

    def __init__(self, source: Any, count: Any) -> None:
        super().__init__(source)
        self._count = _normalize_count(count)
        self._iterations = 0

    @property
    def count(self) -> float:
        return self._count

    @property
    def iterations(self) -> int:
        return self._iterations

    def _advance(self, arg: Any) -> IterationResult[Any]:
        self._iterations += 1
        if self._iterations > self._count:
            return Done(None)
        return self._pull(arg)


def limit(source: Any, count: Any) -> LimitCursor:
    """Wrap ``source`` to yield at most ``count`` values.

    Non-numeric and NaN counts are treated as 0.
    """
    return LimitCursor(source, count)
