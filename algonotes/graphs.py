"""Graph traversals, shortest paths, orderings and grid filling."""

from __future__ import annotations

import heapq
import math
from collections import deque
from collections.abc import Iterable, Sequence
from typing import Any

from algonotes.structures import DisjointSet


class CycleError(ValueError):
    """The graph has a cycle, so it has no topological order."""


def _check_node(adjacency: Sequence[Any], node: int) -> None:
    if not 0 <= node < len(adjacency):
        raise IndexError(f"node {node} is outside 0..{len(adjacency) - 1}")


def bfs(adjacency: Sequence[Iterable[int]], start: int) -> list[int]:
    """Return the nodes reachable from ``start`` in breadth-first order."""
    _check_node(adjacency, start)
    visited = {start}
    queue = deque([start])
    order: list[int] = []
    while queue:
        node = queue.popleft()
        order.append(node)
        for neighbour in adjacency[node]:
            if neighbour not in visited:
                visited.add(neighbour)
                queue.append(neighbour)
    return order


def dfs(adjacency: Sequence[Iterable[int]], start: int) -> list[int]:
    """Return the nodes reachable from ``start`` in depth-first preorder."""
    _check_node(adjacency, start)
    visited = {start}
    order = [start]
    stack = [iter(adjacency[start])]
    while stack:
        for neighbour in stack[-1]:
            if neighbour not in visited:
                visited.add(neighbour)
                order.append(neighbour)
                stack.append(iter(adjacency[neighbour]))
                break
        else:
            stack.pop()
    return order


def dijkstra(
    adjacency: Sequence[Iterable[tuple[int, float]]], start: int
) -> list[float]:
    """Return shortest distances from ``start``; unreachable nodes get ``math.inf``."""
    _check_node(adjacency, start)
    distances: list[float] = [math.inf] * len(adjacency)
    distances[start] = 0
    heap: list[tuple[float, int]] = [(0, start)]
    while heap:
        distance, node = heapq.heappop(heap)
        if distance > distances[node]:
            continue
        for neighbour, weight in adjacency[node]:
            candidate = distance + weight
            if candidate < distances[neighbour]:
                distances[neighbour] = candidate
                heapq.heappush(heap, (candidate, neighbour))
    return distances


def topological_order(adjacency: Sequence[Iterable[int]]) -> list[int]:
    """Return a topological order of a directed graph (Kahn's algorithm).

    Raises CycleError when the graph is not acyclic.
    """
    successors = [list(targets) for targets in adjacency]
    indegree = [0] * len(successors)
    for targets in successors:
        for target in targets:
            indegree[target] += 1
    queue = deque(node for node, degree in enumerate(indegree) if degree == 0)
    order: list[int] = []
    while queue:
        node = queue.popleft()
        order.append(node)
        for target in successors[node]:
            indegree[target] -= 1
            if indegree[target] == 0:
                queue.append(target)
    if len(order) != len(successors):
        raise CycleError("the graph contains a cycle")
    return order


def kruskal_mst(
    vertex_count: int, edges: Iterable[Sequence[int]]
) -> tuple[int, list[tuple[int, int, int]]]:
    """Return the total weight and the edges of a minimum spanning forest."""
    forest = DisjointSet(vertex_count)
    chosen: list[tuple[int, int, int]] = []
    total = 0
    for u, v, weight in sorted((tuple(edge) for edge in edges), key=lambda e: e[2]):
        if forest.union(u, v):
            chosen.append((u, v, weight))
            total += weight
    return total, chosen


def count_provinces(matrix: Sequence[Sequence[int]]) -> int:
    """Return the number of connected groups in an adjacency matrix."""
    size = len(matrix)
    visited = [False] * size
    provinces = 0
    for origin in range(size):
        if visited[origin]:
            continue
        provinces += 1
        visited[origin] = True
        stack = [origin]
        while stack:
            node = stack.pop()
            for other, linked in enumerate(matrix[node]):
                if linked == 1 and not visited[other]:
                    visited[other] = True
                    stack.append(other)
    return provinces


def flood_fill(
    image: Sequence[Sequence[int]], row: int, col: int, color: int
) -> list[list[int]]:
    """Return a copy of the image with the 4-connected region at (row, col) recoloured."""
    grid = [list(line) for line in image]
    if not (0 <= row < len(grid) and 0 <= col < len(grid[row])):
        raise IndexError(f"pixel ({row}, {col}) is outside the image")
    old = grid[row][col]
    if old == color:
        return grid
    grid[row][col] = color
    stack = [(row, col)]
    while stack:
        r, c = stack.pop()
        for nr, nc in ((r + 1, c), (r - 1, c), (r, c + 1), (r, c - 1)):
            if 0 <= nr < len(grid) and 0 <= nc < len(grid[nr]) and grid[nr][nc] == old:
                grid[nr][nc] = color
                stack.append((nr, nc))
    return grid