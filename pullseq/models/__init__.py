"""Option models for cursor construction.

Architecture:
    This module exports the Pydantic v2 option models used by the cursor
    factories. All models are immutable (frozen=True); a cursor reads its
    options once, at construction.
"""

from .options import (
    CursorOptions,
    EndOfIteration,
    SequenceCursorOptions,
    coerce_options,
)

__all__ = [
    "CursorOptions",
    "EndOfIteration",
    "SequenceCursorOptions",
    "coerce_options",
]
