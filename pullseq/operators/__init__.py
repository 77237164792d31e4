"""Combinators that wrap a source cursor.

Every combinator is built on ``RelayCursor``: it replaces the ``next`` step
and inherits relayed early-stop and abort (map refines both). A combinator
supports ``return_`` / ``throw`` exactly when its source does.
"""

from __future__ import annotations

from .filter import FilterCursor, filter_cursor
from .limit import LimitCursor, limit
from .map import MapCursor, map_cursor
from .tap import TapCursor, reiterate, tap

__all__ = [
    "FilterCursor",
    "filter_cursor",
    "MapCursor",
    "map_cursor",
    "TapCursor",
    "tap",
    "reiterate",
    "LimitCursor",
    "limit",
]
