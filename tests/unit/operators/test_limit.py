"""Unit tests for the limit combinator."""

import math

import pytest

from pullseq import Done, LimitCursor, Pending, create, from_sequence, limit, to_array


def counting_source(calls):
    def step():
        calls.append(1)
        return Pending(len(calls))

    return create(step, handle_return=True)


def test_zero_limit_yields_nothing():
    cursor = limit(from_sequence([1, 2, 3]), 0)
    assert isinstance(cursor, LimitCursor)
    assert cursor.next() == Done(None)


def test_limit_truncates_longer_source():
    """Test exactly count values, then Done(None) regardless of the source."""
    cursor = limit(from_sequence(list(range(10)), end_of_iteration_value="END"), 3)
    assert to_array(cursor) == [0, 1, 2]
    assert cursor.next() == Done(None)


def test_source_is_not_pulled_past_the_limit():
    calls = []
    cursor = limit(counting_source(calls), 2)
    assert [cursor.next() for _ in range(4)] == [Pending(1), Pending(2), Done(None), Done(None)]
    assert len(calls) == 2


def test_shorter_source_terminal_passes_through():
    cursor = limit(from_sequence([1], end_of_iteration_value="END"), 5)
    assert cursor.next() == Pending(1)
    assert cursor.next() == Done("END")


@pytest.mark.parametrize("count", ["3", None, math.nan, True])
def test_non_numeric_count_is_zero(count):
    cursor = limit(from_sequence([1, 2]), count)
    assert cursor.count == 0
    assert cursor.next() == Done(None)


def test_counter_counts_every_step():
    cursor = limit(from_sequence([1, 2, 3]), 2)
    cursor.next()
    cursor.next()
    cursor.next()
    assert cursor.iterations == 3
    cursor.next()
    assert cursor.iterations == 3


def test_bounds_unbounded_generators():
    def naturals():
        n = 0
        while True:
            yield n
            n += 1

    assert to_array(limit(naturals(), 4)) == [0, 1, 2, 3]


def test_early_stop_is_relayed():
    calls = []
    cursor = limit(counting_source(calls), 5)
    assert cursor.return_("halt") == Done("halt")
    assert cursor.next() == Done("halt")
    assert calls == []
