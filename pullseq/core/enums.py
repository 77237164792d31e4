"""Core enumerations shared by cursors and option models."""

from enum import Enum


class CursorState(str, Enum):
    """Lifecycle state of a cursor.

    A cursor starts ``ACTIVE`` and moves to ``TERMINATED`` the first time one
    of its operations produces a terminal result. It never moves back.
    """

    ACTIVE = "active"
    TERMINATED = "terminated"


class EndPolicyKind(str, Enum):
    """How a sequence-backed cursor builds its terminal result."""

    CALLBACK = "callback"  # on_end_of_iteration(...)
    VALUE = "value"  # fixed end_of_iteration_value
    DEFAULT = "default"  # Done(None)


class Operation(str, Enum):
    """Cursor operation names, as reported in errors and logs."""

    NEXT = "next"
    RETURN = "return"
    THROW = "throw"
