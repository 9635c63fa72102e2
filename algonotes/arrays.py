"""Searching and two-pointer routines over integer arrays."""

from __future__ import annotations

import math
from collections.abc import Iterable, Sequence


def binary_search(values: Sequence[int], target: int) -> int:
    """Return an index of ``target`` in the ascending ``values``.

    Raises ValueError when the target is absent.
    """
    low, high = 0, len(values) - 1
    while low <= high:
        mid = low + (high - low) // 2
        if values[mid] == target:
            return mid
        if values[mid] < target:
            low = mid + 1
        else:
            high = mid - 1
    raise ValueError(f"{target!r} is not in the sequence")


def sorted_squares(values: Iterable[int]) -> list[int]:
    """Return the squares of an ascending sequence, themselves in ascending order."""
    items = list(values)
    result = [0] * len(items)
    left, right = 0, len(items) - 1
    for position in reversed(range(len(items))):
        left_square = items[left] * items[left]
        right_square = items[right] * items[right]
        if left_square > right_square:
            result[position] = left_square
            left += 1
        else:
            result[position] = right_square
            right -= 1
    return result


def rotate_right(values: Iterable[int], k: int) -> list[int]:
    """Return the values rotated ``k`` positions to the right."""
    items = list(values)
    if not items:
        return []
    split = len(items) - k % len(items)
    return items[split:] + items[:split]


def max_profit(prices: Iterable[int]) -> int:
    """Return the best gain from one buy followed by one later sell, or 0."""
    iterator = iter(prices)
    buy = next(iterator, None)
    if buy is None:
        return 0
    best = 0
    for price in iterator:
        if buy < price:
            best = max(best, price - buy)
        else:
            buy = price
    return best


def three_sum(nums: Iterable[int]) -> list[tuple[int, int, int]]:
    """Return every distinct ascending triple of the values that sums to zero."""
    items = sorted(nums)
    size = len(items)
    found: list[tuple[int, int, int]] = []
    for first, value in enumerate(items):
        if first > 0 and value == items[first - 1]:
            continue
        low, high = first + 1, size - 1
        while low < high:
            total = value + items[low] + items[high]
            if total > 0:
                high -= 1
            elif total < 0:
                low += 1
            else:
                found.append((value, items[low], items[high]))
                low += 1
                high -= 1
                while low < high and items[low] == items[low - 1]:
                    low += 1
                while low < high and items[high] == items[high + 1]:
                    high -= 1
    return found


def _mountain_span(values: Sequence[int], peak: int) -> int:
    start = end = peak
    while start > 0 and values[start - 1] < values[start]:
        start -= 1
    while end < len(values) - 1 and values[end + 1] < values[end]:
        end += 1
    return end - start + 1


def longest_mountain(values: Iterable[int]) -> int:
    """Return the length of the longest strictly rising then falling run, or 0."""
    items = list(values)
    if len(items) < 3:
        return 0
    best = max(
        (
            _mountain_span(items, peak)
            for peak in range(1, len(items) - 1)
            if items[peak - 1] < items[peak] > items[peak + 1]
        ),
        default=0,
    )
    return best if best >= 3 else 0


def minimum_abs_difference(values: Iterable[int]) -> list[tuple[int, int]]:
    """Return the ascending pairs of sorted neighbours whose gap is the smallest."""
    items = sorted(values)
    neighbours = list(zip(items, items[1:]))
    if not neighbours:
        return []
    smallest = min(abs(b - a) for a, b in neighbours)
    return [(a, b) for a, b in neighbours if abs(b - a) == smallest]


def median_of_sorted(first: Sequence[int], second: Sequence[int]) -> float:
    """Return the median of two ascending sequences taken together, in logarithmic time."""
    if len(first) > len(second):
        first, second = second, first
    n1, n2 = len(first), len(second)
    total = n1 + n2
    if total == 0:
        raise ValueError("median_of_sorted() needs at least one value")
    left_size = (total + 1) // 2
    low, high = 0, n1
    while low <= high:
        cut1 = (low + high) // 2
        cut2 = left_size - cut1
        left1 = first[cut1 - 1] if cut1 > 0 else -math.inf
        left2 = second[cut2 - 1] if cut2 > 0 else -math.inf
        right1 = first[cut1] if cut1 < n1 else math.inf
        right2 = second[cut2] if cut2 < n2 else math.inf
        if left1 <= right2 and left2 <= right1:
            if total % 2 == 1:
                return float(max(left1, left2))
            return (max(left1, left2) + min(right1, right2)) / 2.0
        if left1 > right2:
            high = cut1 - 1
        else:
            low = cut1 + 1
    raise ValueError("median_of_sorted() needs both sequences in ascending order")