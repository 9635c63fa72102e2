import pytest
from hypothesis import given
from hypothesis import strategies as st

from algonotes.dynamic import knapsack, longest_increasing_subsequence, max_subarray_sum


def test_max_subarray_source_example():
    assert max_subarray_sum([-2, -3, 4, -1, -2, 1, 5, -3]) == 7


@given(values=st.lists(st.integers(0, 100), min_size=1))
def test_max_subarray_all_non_negative_is_total(values):
    assert max_subarray_sum(values) == sum(values)


@given(values=st.lists(st.integers(-100, -1), min_size=1))
def test_max_subarray_all_negative_is_largest(values):
    assert max_subarray_sum(values) == max(values)


@given(values=st.lists(st.integers(-100, 100), min_size=1))
def test_max_subarray_bounds(values):
    result = max_subarray_sum(values)
    assert result >= max(values)
    assert result >= sum(values)


def test_max_subarray_empty_raises():
    with pytest.raises(ValueError):
        max_subarray_sum([])


def test_knapsack_classic():
    assert knapsack(50, [10, 20, 30], [60, 100, 120]) == 220


@given(
    items=st.lists(st.tuples(st.integers(1, 20), st.integers(0, 50)), max_size=8),
)
def test_knapsack_everything_fits(items):
    weights = [w for w, _ in items]
    values = [v for _, v in items]
    assert knapsack(sum(weights), weights, values) == sum(values)


@given(
    items=st.lists(st.tuples(st.integers(1, 20), st.integers(0, 50)), max_size=8),
    capacity=st.integers(0, 60),
)
def test_knapsack_monotonic_and_bounded(items, capacity):
    weights = [w for w, _ in items]
    values = [v for _, v in items]
    result = knapsack(capacity, weights, values)
    assert 0 <= result <= sum(values)
    assert knapsack(capacity + 1, weights, values) >= result


def test_knapsack_zero_capacity():
    assert knapsack(0, [1, 2], [10, 20]) == 0


def test_knapsack_mismatched_lengths():
    with pytest.raises(ValueError):
        knapsack(10, [1, 2], [5])


def test_knapsack_negative_capacity():
    with pytest.raises(ValueError):
        knapsack(-1, [1], [1])


def test_lis_source_example():
    assert longest_increasing_subsequence([20, 32, 19, 43, 31, 60, 51, 70]) == [
        20, 32, 43, 51, 70,
    ]


def test_lis_empty():
    assert longest_increasing_subsequence([]) == []


@given(values=st.lists(st.integers(-50, 50), unique=True).map(sorted))
def test_lis_of_increasing_is_itself(values):
    assert longest_increasing_subsequence(values) == values


def _is_subsequence(sub, values):
    remaining = iter(values)
    return all(any(item == other for other in remaining) for item in sub)


@given(values=st.lists(st.integers(-20, 20), max_size=30))
def test_lis_is_increasing_subsequence(values):
    result = longest_increasing_subsequence(values)
    assert all(a < b for a, b in zip(result, result[1:]))
    assert _is_subsequence(result, values)
    if values:
        assert len(result) >= 1
        assert len(result) >= len(longest_increasing_subsequence(values[:-1]))


@given(values=st.lists(st.integers(-20, 20), min_size=1, max_size=30))
def test_lis_non_increasing_gives_single(values):
    descending = sorted(values, reverse=True)
    assert len(longest_increasing_subsequence(descending)) == 1