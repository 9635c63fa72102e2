from collections import Counter
import statistics

import pytest
from hypothesis import assume, given
from hypothesis import strategies as st

from algonotes.arrays import (
    binary_search,
    longest_mountain,
    max_profit,
    median_of_sorted,
    minimum_abs_difference,
    rotate_right,
    sorted_squares,
    three_sum,
)

ints = st.integers(min_value=-50, max_value=50)


def test_binary_search_source_example():
    assert binary_search([2, 4, 6, 8, 10, 12, 14], 10) == 4


@given(st.sets(ints))
def test_binary_search_finds_every_member(members):
    values = sorted(members)
    for value in values:
        assert values[binary_search(values, value)] == value


def test_binary_search_missing_raises():
    with pytest.raises(ValueError):
        binary_search([2, 4, 6], 5)
    with pytest.raises(ValueError):
        binary_search([], 1)


@given(st.lists(ints))
def test_sorted_squares_matches_sorted(values):
    values.sort()
    assert sorted_squares(values) == sorted(v * v for v in values)


@given(st.lists(ints, min_size=1), st.integers(min_value=0, max_value=30))
def test_rotate_right_moves_each_item(values, k):
    rotated = rotate_right(values, k)
    size = len(values)
    for index, value in enumerate(values):
        assert rotated[(index + k) % size] == value


@given(st.lists(ints, min_size=1), st.integers(min_value=0, max_value=30))
def test_rotate_right_round_trip(values, k):
    size = len(values)
    once = rotate_right(values, k)
    assert rotate_right(once, size - k % size) == values
    assert rotate_right(values, size) == values


def test_rotate_right_empty():
    assert rotate_right([], 3) == []


@given(st.lists(ints))
def test_max_profit_is_best_pair(prices):
    profit = max_profit(prices)
    assert profit >= 0
    gains = [
        later - earlier
        for i, earlier in enumerate(prices)
        for later in prices[i + 1:]
    ]
    assert all(gain <= profit for gain in gains)
    assert profit == 0 or profit in gains


def test_max_profit_falling_prices():
    assert max_profit([9, 7, 5, 3]) == 0
    assert max_profit([]) == 0


def test_three_sum_example():
    assert three_sum([-1, 0, 1, 2, -1, -4]) == [(-1, -1, 2), (-1, 0, 1)]


@given(st.lists(st.integers(min_value=-10, max_value=10), max_size=15))
def test_three_sum_invariants(nums):
    triples = three_sum(nums)
    assert len(set(triples)) == len(triples)
    assert triples == sorted(triples)
    available = Counter(nums)
    for triple in triples:
        assert sum(triple) == 0
        assert list(triple) == sorted(triple)
        assert Counter(triple) <= available


@given(
    st.integers(min_value=1, max_value=6),
    st.integers(min_value=1, max_value=6),
)
def test_longest_mountain_single_peak(rise, fall):
    values = list(range(rise + 1)) + list(range(rise - 1, rise - 1 - fall, -1))
    assert longest_mountain(values) == len(values)
    assert longest_mountain([rise + 10] + values + [rise + 10]) == len(values)


@given(st.lists(ints))
def test_longest_mountain_bounds(values):
    length = longest_mountain(values)
    assert length == 0 or 3 <= length <= len(values)
    assert longest_mountain(sorted(values)) == 0


@given(st.lists(ints))
def test_minimum_abs_difference_invariants(values):
    pairs = minimum_abs_difference(values)
    if len(values) < 2:
        assert pairs == []
        return
    ordered = sorted(values)
    smallest = min(b - a for a, b in zip(ordered, ordered[1:]))
    assert pairs
    assert pairs == sorted(pairs)
    for a, b in pairs:
        assert b - a == smallest
        assert a in values and b in values


@given(st.lists(ints), st.lists(ints))
def test_median_of_sorted_matches_statistics(first, second):
    assume(first or second)
    first.sort()
    second.sort()
    assert median_of_sorted(first, second) == statistics.median(first + second)


def test_median_of_sorted_empty_raises():
    with pytest.raises(ValueError):
        median_of_sorted([], [])