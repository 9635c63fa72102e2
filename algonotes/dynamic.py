"""Classic dynamic-programming problems over integer sequences."""

from __future__ import annotations

from collections.abc import Iterable, Sequence


def max_subarray_sum(values: Iterable[int]) -> int:
    """Return the largest sum of a non-empty contiguous run (Kadane's algorithm)."""
    best: int | None = None
    current = 0
    for value in values:
        current += value
        if best is None or current > best:
            best = current
        if current < 0:
            current = 0
    if best is None:
        raise ValueError("max_subarray_sum() needs at least one value")
    return best


def knapsack(capacity: int, weights: Sequence[int], values: Sequence[int]) -> int:
    """Return the best total value of items whose weights fit in ``capacity`` (0/1 knapsack)."""
    if capacity < 0:
        raise ValueError("capacity must not be negative")
    if len(weights) != len(values):
        raise ValueError("weights and values must have the same length")
    best = [0] * (capacity + 1)
    for weight, value in zip(weights, values):
        for room in range(capacity, weight - 1, -1):
            if weight <= room:
                best[room] = max(best[room], best[room - weight] + value)
    return best[capacity]


def longest_increasing_subsequence(values: Iterable[int]) -> list[int]:
    """Return one longest strictly increasing subsequence of the values."""
    items = list(values)
    if not items:
        return []
    lengths: list[int] = []
    for index, item in enumerate(items):
        lengths.append(
            1 + max((lengths[j] for j in range(index) if items[j] < item), default=0)
        )
    remaining = max(lengths)
    chosen: list[int] = []
    for item, length in zip(reversed(items), reversed(lengths)):
        if length == remaining and (not chosen or item < chosen[-1]):
            chosen.append(item)
            remaining -= 1
            if remaining == 0:
                break
    chosen.reverse()
    return chosen