"""Iteration result model.

Every cursor operation returns an ``IterationResult``. It has two shapes:

- ``Pending(value)``: a yielded value, iteration continues.
- ``Done(value)``: terminal, iteration has ended with a final value.

The ``MISSING`` sentinel marks an omitted optional argument, so that
``cursor.next()`` and ``cursor.next(None)`` stay distinguishable all the way
through a combinator chain.
"""

from __future__ import annotations

from dataclasses import dataclass
from enum import Enum
from typing import Any, Final, Generic, TypeVar

Y = TypeVar("Y")


class _Missing(Enum):
    """Marker type for an omitted optional argument."""

    MISSING = "MISSING"

    def __repr__(self) -> str:
        return "MISSING"

    def __bool__(self) -> bool:
        return False


MISSING: Final = _Missing.MISSING


@dataclass(frozen=True, slots=True)
class IterationResult(Generic[Y]):
    """Result of a single cursor operation.

    Attributes:
        value: Yielded value, or the final value when ``done`` is true
        done: Whether iteration has ended
    """

    value: Y
    done: bool = False

    @property
    def pending(self) -> bool:
        return not self.done

    def __repr__(self) -> str:
        kind = "Done" if self.done else "Pending"
        return f"{kind}({self.value!r})"


def Pending(value: Any) -> IterationResult[Any]:  # noqa: N802
    """Create a non-terminal result carrying a yielded value."""
    return IterationResult(value, False)


def Done(value: Any = None) -> IterationResult[Any]:  # noqa: N802
    """Create a terminal result carrying the final value."""
    return IterationResult(value, True)


def or_none(value: Any) -> Any:
    """Map an omitted argument to ``None``."""
    return None if value is MISSING else value
