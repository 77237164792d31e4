"""Capability descriptor for cursors.

Architecture:
    A cursor always supports ``next``. Early-stop (``return_``) and abort
    (``throw``) are optional. Which of them a cursor supports is decided once,
    when the cursor is constructed, and recorded in a ``Capabilities``
    descriptor. Wrapper cursors copy the descriptor of the cursor they wrap,
    so a wrapper exposes an operation if and only if its source does.

Design Decisions:
    - Frozen dataclass: capabilities never change after construction
    - Queried, not probed: callers read ``cursor.capabilities`` instead of
      inspecting attributes on every call
"""

from __future__ import annotations

from dataclasses import dataclass


@dataclass(frozen=True, slots=True)
class Capabilities:
    """Optional operations supported by a cursor.

    Attributes:
        can_return: Cursor implements early-stop (``return_``)
        can_throw: Cursor implements abort (``throw``)
    """

    can_return: bool = False
    can_throw: bool = False

    @classmethod
    def of(cls, other: Capabilities) -> Capabilities:
        """Capabilities of a wrapper around a cursor with ``other`` capabilities."""
        return cls(can_return=other.can_return, can_throw=other.can_throw)

    def describe(self) -> list[str]:
        """List supported operation names, ``next`` included."""
        names = ["next"]
        if self.can_return:
            names.append("return")
        if self.can_throw:
            names.append("throw")
        return names


NEXT_ONLY = Capabilities()
