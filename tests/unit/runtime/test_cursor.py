"""Unit tests for the Cursor base class."""

import pytest

from pullseq import Capabilities, Cursor, CursorState, Done, Pending


class Countdown(Cursor):
    """Counts down to zero, then terminates with a final value."""

    def __init__(self, start, final="liftoff"):
        super().__init__(Capabilities(can_return=True))
        self.remaining = start
        self.final = final
        self.advance_calls = 0

    def _advance(self, arg):
        self.advance_calls += 1
        if self.remaining == 0:
            return Done(self.final)
        self.remaining -= 1
        return Pending(self.remaining + 1)

    def _return(self, value):
        return Done(value)


def test_termination_is_cached():
    """Test the first terminal result is replayed without further work."""
    cursor = Countdown(1)
    assert cursor.next() == Pending(1)
    assert cursor.state is CursorState.ACTIVE
    assert cursor.next() == Done("liftoff")
    assert cursor.state is CursorState.TERMINATED
    assert cursor.terminal == Done("liftoff")

    for _ in range(3):
        assert cursor.next() == Done("liftoff")
    assert cursor.advance_calls == 2


def test_return_after_termination_replays_cache():
    """Test that early-stop on a terminated cursor returns the cached result."""
    cursor = Countdown(0)
    cursor.next()
    assert cursor.return_("ignored") == Done("liftoff")


def test_return_terminates():
    """Test early-stop caches its result for later calls."""
    cursor = Countdown(5)
    assert cursor.return_("stop") == Done("stop")
    assert cursor.is_terminated
    assert cursor.next() == Done("stop")


def test_unsupported_operation_raises():
    """Test throw is gated by capabilities."""
    cursor = Countdown(1)
    with pytest.raises(NotImplementedError, match="throw"):
        cursor.throw(ValueError())


def test_native_iteration():
    """Test a cursor is a Python iterator carrying the final value."""
    cursor = Countdown(3)
    assert list(cursor) == [3, 2, 1]

    cursor = Countdown(0, final="done")
    with pytest.raises(StopIteration) as exc_info:
        next(cursor)
    assert exc_info.value.value == "done"


def test_repr_shows_state_and_operations():
    cursor = Countdown(0)
    assert repr(cursor) == "<Countdown active ops=next,return>"
    cursor.next()
    assert "terminated" in repr(cursor)
