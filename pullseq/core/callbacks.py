"""Callback binding and optional-argument invocation."""

from __future__ import annotations

from collections.abc import Callable
from functools import partial
from typing import Any

from .results import MISSING


def bind(fn: Callable[..., Any], this_arg: Any = MISSING) -> Callable[..., Any]:
    """Bind ``fn`` to ``this_arg``.

    A bound callback receives ``this_arg`` as its first positional argument,
    the way a plain function behaves once attached to an object as a method.
    Without ``this_arg`` the callback is returned unchanged.
    """
    if this_arg is MISSING:
        return fn
    return partial(fn, this_arg)


def invoke(fn: Callable[..., Any], *leading: Any, arg: Any = MISSING) -> Any:
    """Call ``fn(*leading)``, appending ``arg`` only when it was supplied."""
    if arg is MISSING:
        return fn(*leading)
    return fn(*leading, arg)
