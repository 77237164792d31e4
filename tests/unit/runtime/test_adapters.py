"""Unit tests for native and duck-typed cursor adapters."""

import pytest

from pullseq import (
    AbortSignal,
    Done,
    ForeignCursor,
    NativeCursor,
    Pending,
    ProtocolViolation,
    as_cursor,
    filter_cursor,
    from_sequence,
)


def numbers(final="finished"):
    yield 1
    yield 2
    return final


class TestAsCursor:
    """Test source adoption."""

    def test_cursor_is_used_as_is(self):
        cursor = from_sequence([1])
        assert as_cursor(cursor) is cursor

    def test_iterable_is_wrapped(self):
        cursor = as_cursor([1, 2])
        assert isinstance(cursor, NativeCursor)
        assert list(cursor) == [1, 2]

    def test_generator_is_wrapped(self):
        assert isinstance(as_cursor(numbers()), NativeCursor)

    def test_duck_typed_cursor_is_wrapped(self):
        class Duck:
            def next(self, *args):
                return {"done": True, "value": "quack"}

        cursor = as_cursor(Duck())
        assert isinstance(cursor, ForeignCursor)
        assert cursor.next() == Done("quack")

    def test_unadoptable_object(self):
        with pytest.raises(TypeError, match="int"):
            as_cursor(42)


class TestNativeCursor:
    """Test Python iterators and generators as cursors."""

    def test_generator_return_value_is_final_value(self):
        cursor = as_cursor(numbers())
        assert cursor.next() == Pending(1)
        assert cursor.next() == Pending(2)
        assert cursor.next() == Done("finished")
        assert cursor.next() == Done("finished")

    def test_plain_iterator_capabilities(self):
        cursor = as_cursor(iter([1]))
        assert not cursor.capabilities.can_return
        assert not cursor.capabilities.can_throw

    def test_generator_capabilities(self):
        cursor = as_cursor(numbers())
        assert cursor.capabilities.can_return
        assert cursor.capabilities.can_throw

    def test_next_argument_is_sent(self):
        def doubler():
            received = yield "ready"
            while True:
                received = yield received * 2

        cursor = as_cursor(doubler())
        assert cursor.next() == Pending("ready")
        assert cursor.next(5) == Pending(10)
        assert cursor.next(21) == Pending(42)

    def test_first_pull_argument_dropped_for_fresh_generator(self):
        """Test a generator that has not started receives no value on its first pull."""

        def echo():
            received = yield "ready"
            while True:
                received = yield received

        cursor = as_cursor(echo())
        assert cursor.next("early") == Pending("ready")
        assert cursor.next("later") == Pending("later")

    def test_combinator_forwards_argument_to_fresh_generator(self):
        seen = []

        def keep_odd(value, arg):
            seen.append(arg)
            return value % 2 == 1

        def counter():
            step = 1
            value = 0
            while True:
                value += step
                step = (yield value) or 1

        cursor = filter_cursor(counter(), keep_odd)
        assert cursor.next(2) == Pending(1)
        assert cursor.next(2) == Pending(3)
        assert seen == [2, 2]

    def test_next_argument_dropped_without_send(self):
        cursor = as_cursor(iter([1, 2]))
        assert cursor.next("ignored") == Pending(1)

    def test_return_closes_generator(self):
        closed = []

        def tracked():
            try:
                yield 1
                yield 2
            finally:
                closed.append(True)

        cursor = as_cursor(tracked())
        cursor.next()
        assert cursor.return_("early") == Done("early")
        assert closed == [True]
        assert cursor.next() == Done("early")

    def test_throw_recovered_by_generator(self):
        def resilient():
            while True:
                try:
                    yield "value"
                except ValueError as exc:
                    yield f"recovered from {exc}"

        cursor = as_cursor(resilient())
        cursor.next()
        assert cursor.throw(ValueError("bad")) == Pending("recovered from bad")
        assert not cursor.is_terminated

    def test_throw_ending_generator(self):
        def stoppable():
            try:
                yield 1
            except AbortSignal as signal:
                return signal.payload

        cursor = as_cursor(stoppable())
        cursor.next()
        assert cursor.throw("cancelled") == Done("cancelled")
        assert cursor.next() == Done("cancelled")

    def test_unhandled_throw_propagates(self):
        cursor = as_cursor(numbers())
        cursor.next()
        with pytest.raises(KeyError):
            cursor.throw(KeyError("k"))


class TestForeignCursor:
    """Test duck-typed cursors."""

    def test_return_attribute_named_return(self):
        """Test an object exposing 'return' (not return_) supports early-stop."""
        Duck = type(
            "Duck",
            (),
            {
                "next": lambda self, *args: {"value": 1},
                "return": lambda self, *args: {"done": True, "value": args},
            },
        )
        cursor = as_cursor(Duck())
        assert cursor.capabilities.can_return
        assert not cursor.capabilities.can_throw
        assert cursor.return_("v") == Done(("v",))

    def test_results_are_validated(self):
        class Broken:
            def next(self, *args):
                return None

        cursor = ForeignCursor(Broken())
        with pytest.raises(ProtocolViolation):
            cursor.next()

    def test_missing_next(self):
        with pytest.raises(TypeError):
            ForeignCursor(object())
