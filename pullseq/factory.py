"""Cursor factory facade.

Architecture:
    ``CursorFactory`` bundles the library behind one object: an instance holds
    a fixed sequence and creates cursors over it, and the class exposes every
    combinator and consumer as a static method. It adds no behavior of its
    own; each method delegates to the module-level function of the same
    purpose.

Example:
    >>> factory = CursorFactory([1, 2, 3, 4, 5])
    >>> evens = CursorFactory.filter(factory.cursor(), lambda v: v % 2 == 0)
    >>> CursorFactory.to_array(CursorFactory.map(evens, lambda v: v * 10))
    [20, 40]
"""

from __future__ import annotations

from collections.abc import Mapping, Sequence
from typing import Any, Generic, TypeVar

from . import consumers
from .core.results import MISSING
from .models.options import SequenceCursorOptions
from .operators import filter_cursor, limit, map_cursor, tap
from .runtime.primitive import create
from .runtime.sequence import SequenceCursor, from_sequence

T = TypeVar("T")


class CursorFactory(Generic[T]):
    """Creates cursors over a fixed sequence."""

    def __init__(self, items: Sequence[T]) -> None:
        self._items = items

    @property
    def items(self) -> Sequence[T]:
        return self._items

    def cursor(
        self,
        options: SequenceCursorOptions | Mapping[str, Any] | None = None,
        this_arg: Any = MISSING,
        **kwargs: Any,
    ) -> SequenceCursor:
        """Create a new cursor over the held sequence.

        See ``from_sequence`` for the accepted options.
        """
        return from_sequence(self._items, options, this_arg, **kwargs)

    def __len__(self) -> int:
        return len(self._items)

    def __repr__(self) -> str:
        return f"CursorFactory(items={len(self._items)})"

    create = staticmethod(create)
    filter = staticmethod(filter_cursor)
    map = staticmethod(map_cursor)
    reiterate = staticmethod(tap)
    tap = staticmethod(tap)
    limit = staticmethod(limit)
    reduce = staticmethod(consumers.reduce)
    first = staticmethod(consumers.first)
    first_or_default = staticmethod(consumers.first_or_default)
    to_array = staticmethod(consumers.to_array)
