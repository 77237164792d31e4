"""Adapters between cursors and other iteration protocols.

Architecture:
    Combinators and consumers accept more than ``Cursor`` instances. Sources
    are adopted once, at wrap time, through ``as_cursor``:
    - ``Cursor``: used as-is
    - Python iterators and generators: wrapped in ``NativeCursor``
    - Duck-typed cursors (objects with a callable ``next``): wrapped in
      ``ForeignCursor``, whose results are validated on every call
    - Other iterables: ``iter()`` is taken and wrapped in ``NativeCursor``

    Capabilities of the wrapped object are probed here, once, and fixed in the
    adapter's ``Capabilities``.
"""

from __future__ import annotations

from collections.abc import Iterator
from typing import Any

from ..core.callbacks import invoke
from ..core.capabilities import Capabilities
from ..core.enums import Operation
from ..core.exceptions import AbortSignal
from ..core.results import MISSING, Done, IterationResult, Pending, or_none
from ..core.validation import ensure_result
from .cursor import Cursor


def _callable_attr(obj: Any, *names: str) -> Any:
    for name in names:
        attr = getattr(obj, name, None)
        if callable(attr):
            return attr
    return None


def _as_exception(error: Any) -> BaseException | type[BaseException]:
    if isinstance(error, BaseException):
        return error
    if isinstance(error, type) and issubclass(error, BaseException):
        return error
    return AbortSignal(or_none(error))


class NativeCursor(Cursor[Any]):
    """Cursor over a Python iterator or generator.

    ``next(arg)`` is delivered with ``send`` when the iterator supports it,
    except on the first pull: a generator that has not started cannot receive
    a value, so that argument is dropped.
    Generators also support early-stop (``close``) and abort (``throw``).
    """

    def __init__(self, iterator: Iterator[Any]) -> None:
        super().__init__(
            Capabilities(
                can_return=_callable_attr(iterator, "close") is not None,
                can_throw=_callable_attr(iterator, "throw") is not None,
            )
        )
        self._iterator = iterator
        self._send = _callable_attr(iterator, "send")
        self._started = False

    def _advance(self, arg: Any) -> IterationResult[Any]:
        try:
            if arg is MISSING or self._send is None or not self._started:
                value = next(self._iterator)
            else:
                value = self._send(arg)
        except StopIteration as exc:
            return Done(exc.value)
        self._started = True
        return Pending(value)

    def _return(self, value: Any) -> IterationResult[Any]:
        self._iterator.close()  # type: ignore[attr-defined]
        return Done(or_none(value))

    def _throw(self, error: Any) -> IterationResult[Any]:
        try:
            value = self._iterator.throw(_as_exception(error))  # type: ignore[attr-defined]
        except StopIteration as exc:
            return Done(exc.value)
        self._started = True
        return Pending(value)


class ForeignCursor(Cursor[Any]):
    """Cursor over a duck-typed object exposing ``next`` and optionally
    ``return_`` (or ``return``) and ``throw``.
    """

    def __init__(self, obj: Any) -> None:
        self._next = _callable_attr(obj, "next")
        if self._next is None:
            raise TypeError(f"{type(obj).__name__} object has no callable 'next'")
        self._return_fn = _callable_attr(obj, "return_", "return")
        self._throw_fn = _callable_attr(obj, "throw")
        super().__init__(
            Capabilities(
                can_return=self._return_fn is not None,
                can_throw=self._throw_fn is not None,
            )
        )
        self._wrapped = obj

    def _advance(self, arg: Any) -> IterationResult[Any]:
        return ensure_result(Operation.NEXT, invoke(self._next, arg=arg))

    def _return(self, value: Any) -> IterationResult[Any]:
        return ensure_result(Operation.RETURN, invoke(self._return_fn, arg=value))

    def _throw(self, error: Any) -> IterationResult[Any]:
        return ensure_result(Operation.THROW, invoke(self._throw_fn, arg=error))


def as_cursor(obj: Any) -> Cursor[Any]:
    """Adopt ``obj`` as a cursor.

    Raises:
        TypeError: If ``obj`` is neither a cursor, a duck-typed cursor, nor
            iterable
    """
    if isinstance(obj, Cursor):
        return obj
    if hasattr(obj, "__next__"):
        return NativeCursor(obj)
    if _callable_attr(obj, "next") is not None:
        return ForeignCursor(obj)
    if hasattr(obj, "__iter__"):
        return NativeCursor(iter(obj))
    raise TypeError(f"cannot use {type(obj).__name__} object as a cursor")
