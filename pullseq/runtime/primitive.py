"""Cursors built directly from caller-supplied functions.

There is no wrapped source here: the caller's functions are the cursor's
operations. Their output is validated before it is trusted.
"""

from __future__ import annotations

from collections.abc import Callable, Mapping
from typing import Any

from ..core.callbacks import bind, invoke
from ..core.capabilities import Capabilities
from ..core.enums import Operation
from ..core.results import MISSING, Done, IterationResult, or_none
from ..core.validation import ensure_result
from ..models.options import CursorOptions, coerce_options
from .cursor import Cursor


class HandlerCursor(Cursor[Any]):
    """Cursor whose early-stop and abort come from ``CursorOptions`` handlers.

    ``handle_return=True`` builds ``Done(value)`` from the value passed to
    ``return_`` (``None`` when omitted). A custom return handler that does not
    terminate is overridden with the same ``Done(value)``. Abort results are
    relayed as-is; only terminal ones are cached.
    """

    def __init__(self, options: CursorOptions, this_arg: Any = MISSING) -> None:
        super().__init__(
            Capabilities(
                can_return=options.supports_return,
                can_throw=options.supports_throw,
            )
        )
        self._options = options
        self._on_return = (
            bind(options.handle_return, this_arg) if callable(options.handle_return) else None
        )
        self._on_throw = bind(options.on_throw, this_arg) if options.on_throw is not None else None

    @property
    def options(self) -> CursorOptions:
        return self._options

    def _return(self, value: Any) -> IterationResult[Any]:
        if self._on_return is None:
            return Done(or_none(value))
        result = ensure_result(Operation.RETURN, invoke(self._on_return, arg=value))
        return result if result.done else Done(or_none(value))

    def _throw(self, error: Any) -> IterationResult[Any]:
        return ensure_result(Operation.THROW, invoke(self._on_throw, arg=error))


class PrimitiveCursor(HandlerCursor):
    """Cursor whose ``next`` is a caller-supplied step function."""

    def __init__(
        self,
        on_next: Callable[..., Any],
        options: CursorOptions,
        this_arg: Any = MISSING,
    ) -> None:
        super().__init__(options, this_arg)
        self._on_next = bind(on_next, this_arg)

    def _advance(self, arg: Any) -> IterationResult[Any]:
        return ensure_result(Operation.NEXT, invoke(self._on_next, arg=arg))


def create(
    on_next: Callable[..., Any],
    options: CursorOptions | Mapping[str, Any] | None = None,
    this_arg: Any = MISSING,
    **kwargs: Any,
) -> PrimitiveCursor:
    """Create a cursor from a step function.

    Args:
        on_next: Called as ``on_next()`` or ``on_next(arg)``; returns an
            iteration result (an ``IterationResult``, or any object or mapping
            with ``done`` / ``value``)
        options: ``CursorOptions``, or a mapping of its fields
        this_arg: Optional object every callback is bound to
        **kwargs: Option fields, overriding ``options``

    Returns:
        The new cursor

    Raises:
        ProtocolViolation: When a callback returns a malformed result (raised
            from the cursor operation that invoked it)

    Example:
        >>> ticks = iter(range(1, 5))
        >>> cursor = create(lambda: {"value": next(ticks, None)}, handle_return=True)
        >>> cursor.next()
        Pending(1)
        >>> cursor.return_("stopped")
        Done('stopped')
    """
    return PrimitiveCursor(on_next, coerce_options(CursorOptions, options, **kwargs), this_arg)
