"""Tap combinator ("reiterate")."""

from __future__ import annotations

from collections.abc import Callable
from typing import Any

from ..core.callbacks import bind, invoke
from ..core.results import MISSING, IterationResult
from ..runtime.relay import RelayCursor


class TapCursor(RelayCursor):
    """Calls a side-effecting callback with each yielded value, then relays
    the value unchanged. Terminal results skip the callback.
    """

    def __init__(self, source: Any, callback: Callable[..., Any], this_arg: Any = MISSING) -> None:
        super().__init__(source)
        self._callback = bind(callback, this_arg)

    def _advance(self, arg: Any) -> IterationResult[Any]:
        result = self._pull(arg)
        if not result.done:
            invoke(self._callback, result.value, arg=arg)
        return result


def tap(source: Any, callback: Callable[..., Any], this_arg: Any = MISSING) -> TapCursor:
    """Wrap ``source`` to observe each yielded value with ``callback``."""
    return TapCursor(source, callback, this_arg)


reiterate = tap
