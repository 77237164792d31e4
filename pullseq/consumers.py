"""Eager consumers that drive a cursor to completion.

Consumers call ``next()`` without an argument in a loop until the source
terminates (or, for ``first`` / ``to_array``, until they have what they need).
They do not close the source on early exit. Over an unbounded source they
never return; bound it with ``limit`` first.
"""

from __future__ import annotations

import math
from collections.abc import Callable
from typing import Any, TypeVar

from .core.callbacks import bind
from .core.results import MISSING
from .runtime.adapters import as_cursor

A = TypeVar("A")


def reduce(source: Any, initial: A, reducer: Callable[..., A], this_arg: Any = MISSING) -> A:
    """Fold the yielded values of ``source`` with ``reducer(acc, value)``.

    Args:
        source: Cursor, or anything ``as_cursor`` adopts
        initial: Starting accumulator, returned as-is for an empty source
        reducer: Called with the accumulator and each yielded value
        this_arg: Optional object the reducer is bound to

    Returns:
        The final accumulator
    """
    cursor = as_cursor(source)
    reducer = bind(reducer, this_arg)
    acc = initial
    result = cursor.next()
    while not result.done:
        acc = reducer(acc, result.value)
        result = cursor.next()
    return acc


def _find(cursor: Any, predicate: Callable[..., Any] | None) -> tuple[bool, Any]:
    result = cursor.next()
    if predicate is None:
        return (False, None) if result.done else (True, result.value)
    while not result.done:
        if predicate(result.value):
            return True, result.value
        result = cursor.next()
    return False, None


def first(
    source: Any,
    predicate: Callable[..., Any] | None = None,
    this_arg: Any = MISSING,
) -> Any:
    """Return the first yielded value (matching ``predicate``, if given).

    Returns:
        The value, or ``None`` when the source ends without one
    """
    predicate = bind(predicate, this_arg) if predicate is not None else None
    _, value = _find(as_cursor(source), predicate)
    return value


def first_or_default(
    source: Any,
    if_empty: Any,
    predicate: Callable[..., Any] | None = None,
    this_arg: Any = MISSING,
) -> Any:
    """Like ``first``, but fall back to ``if_empty``.

    ``if_empty`` is called to produce the default when it is callable.
    """
    predicate = bind(predicate, this_arg) if predicate is not None else None
    found, value = _find(as_cursor(source), predicate)
    if found:
        return value
    return if_empty() if callable(if_empty) else if_empty


def _valid_limit(limit: Any) -> bool:
    return not isinstance(limit, bool) and isinstance(limit, int | float) and not math.isnan(limit)


def to_array(source: Any, limit: Any = None) -> list[Any]:
    """Collect yielded values into a list.

    Args:
        source: Cursor, or anything ``as_cursor`` adopts
        limit: Maximum number of values; non-numeric, NaN or ``None`` means
            collect until the source terminates

    Returns:
        Yielded values in order
    """
    cursor = as_cursor(source)
    items: list[Any] = []
    bounded = _valid_limit(limit)
    while not bounded or len(items) < limit:
        result = cursor.next()
        if result.done:
            break
        items.append(result.value)
    return items
