"""Cursor runtime: base class, relays, factories and adapters.

Architecture:
    - cursor.py: ``Cursor`` base with termination cache and capability gate
    - relay.py: Relay construction for wrapper cursors
    - primitive.py: Cursors built from caller-supplied functions (``create``)
    - sequence.py: Cursors over fixed sequences (``from_sequence``)
    - adapters.py: Python iterators and duck-typed cursors as cursors
    - telemetry.py: Structured lifecycle logging
"""

from __future__ import annotations

from .adapters import ForeignCursor, NativeCursor, as_cursor
from .cursor import Cursor
from .primitive import HandlerCursor, PrimitiveCursor, create
from .relay import RelayCursor, StepRelay, relay
from .sequence import SequenceCursor, from_sequence

__all__ = [
    "Cursor",
    "RelayCursor",
    "StepRelay",
    "relay",
    "HandlerCursor",
    "PrimitiveCursor",
    "create",
    "SequenceCursor",
    "from_sequence",
    "NativeCursor",
    "ForeignCursor",
    "as_cursor",
]
