"""Union-find, range-sum trees and a least-recently-used cache."""

from __future__ import annotations

from collections import OrderedDict
from collections.abc import Hashable, Iterable
from typing import Any


class DisjointSet:
    """Disjoint-set forest over ``0..size-1`` with path compression and union by rank."""

    def __init__(self, size: int) -> None:
        if size < 0:
            raise ValueError("size must not be negative")
        self._parent = list(range(size))
        self._rank = [0] * size

    def __len__(self) -> int:
        return len(self._parent)

    def _check(self, x: int) -> None:
        if not 0 <= x < len(self._parent):
            raise IndexError(f"element {x} is outside 0..{len(self._parent) - 1}")

    def find(self, x: int) -> int:
        """Return the representative of the set holding ``x``."""
        self._check(x)
        root = x
        while self._parent[root] != root:
            root = self._parent[root]
        while self._parent[x] != root:
            following = self._parent[x]
            self._parent[x] = root
            x = following
        return root

    def union(self, a: int, b: int) -> bool:
        """Merge the sets of ``a`` and ``b``; return False if they were already one."""
        root_a, root_b = self.find(a), self.find(b)
        if root_a == root_b:
            return False
        if self._rank[root_a] < self._rank[root_b]:
            root_a, root_b = root_b, root_a
        self._parent[root_b] = root_a
        if self._rank[root_a] == self._rank[root_b]:
            self._rank[root_a] += 1
        return True


class FenwickTree:
    """Binary indexed tree over positions ``1..size`` for point updates and prefix sums."""

    def __init__(self, size: int) -> None:
        if size < 0:
            raise ValueError("size must not be negative")
        self._size = size
        self._tree = [0] * (size + 1)

    def __len__(self) -> int:
        return self._size

    def add(self, index: int, value: int) -> None:
        """Add ``value`` at the 1-based position ``index``."""
        if not 1 <= index <= self._size:
            raise IndexError(f"index {index} is outside 1..{self._size}")
        while index <= self._size:
            self._tree[index] += value
            index += index & -index

    def prefix_sum(self, index: int) -> int:
        """Return the sum of positions ``1..index``; ``index`` 0 gives 0."""
        if not 0 <= index <= self._size:
            raise IndexError(f"index {index} is outside 0..{self._size}")
        total = 0
        while index > 0:
            total += self._tree[index]
            index -= index & -index
        return total

    def range_sum(self, left: int, right: int) -> int:
        """Return the sum of positions ``left..right``, both 1-based and inclusive."""
        return self.prefix_sum(right) - self.prefix_sum(left - 1)


class SegmentTree:
    """Range-sum segment tree over a fixed-length sequence, indexed from 0."""

    def __init__(self, values: Iterable[int]) -> None:
        items = list(values)
        if not items:
            raise ValueError("a segment tree needs at least one value")
        self._size = len(items)
        self._tree: list[Any] = [0] * (4 * self._size)
        self._build(items, 1, 0, self._size - 1)

    def __len__(self) -> int:
        return self._size

    def _build(self, items: list[int], node: int, low: int, high: int) -> None:
        if low == high:
            self._tree[node] = items[low]
            return
        middle = (low + high) // 2
        self._build(items, 2 * node, low, middle)
        self._build(items, 2 * node + 1, middle + 1, high)
        self._tree[node] = self._tree[2 * node] + self._tree[2 * node + 1]

    def _check(self, index: int) -> None:
        if not 0 <= index < self._size:
            raise IndexError(f"index {index} is outside 0..{self._size - 1}")

    def _query(self, node: int, low: int, high: int, left: int, right: int) -> int:
        if right < low or high < left:
            return 0
        if left <= low and high <= right:
            return self._tree[node]
        middle = (low + high) // 2
        return self._query(2 * node, low, middle, left, right) + self._query(
            2 * node + 1, middle + 1, high, left, right
        )

    def query(self, left: int, right: int) -> int:
        """Return the sum of positions ``left..right`` inclusive; an empty range gives 0."""
        if left > right:
            return 0
        self._check(left)
        self._check(right)
        return self._query(1, 0, self._size - 1, left, right)

    def update(self, index: int, value: int) -> None:
        """Set position ``index`` to ``value``."""
        self._check(index)
        node, low, high = 1, 0, self._size - 1
        path = []
        while low != high:
            path.append(node)
            middle = (low + high) // 2
            if index <= middle:
                node, high = 2 * node, middle
            else:
                node, low = 2 * node + 1, middle + 1
        self._tree[node] = value
        for parent in reversed(path):
            self._tree[parent] = self._tree[2 * parent] + self._tree[2 * parent + 1]


class LRUCache:
    """Fixed-capacity mapping that evicts the least recently used key when full."""

    def __init__(self, capacity: int) -> None:
        if capacity < 1:
            raise ValueError("capacity must be at least 1")
        self._capacity = capacity
        self._entries: OrderedDict[Hashable, Any] = OrderedDict()

    def __len__(self) -> int:
        return len(self._entries)

    def __contains__(self, key: object) -> bool:
        return key in self._entries

    @property
    def capacity(self) -> int:
        return self._capacity

    def get(self, key: Hashable) -> Any:
        """Return the value for ``key`` and mark it most recently used, else None."""
        if key not in self._entries:
            return None
        self._entries.move_to_end(key)
        return self._entries[key]

    def put(self, key: Hashable, value: Any) -> None:
        """Store ``value`` under ``key``, evicting the least recently used key if full."""
        if key in self._entries:
            self._entries[key] = value
            self._entries.move_to_end(key)
            return
        if len(self._entries) == self._capacity:
            self._entries.popitem(last=False)
        self._entries[key] = value