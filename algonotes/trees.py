"""Binary tree nodes and their traversals."""

from __future__ import annotations

from collections import deque
from dataclasses import dataclass
from itertools import groupby
from typing import Any


@dataclass(eq=False)
class TreeNode:
    """A binary tree node."""

    value: Any
    left: TreeNode | None = None
    right: TreeNode | None = None


def inorder(root: TreeNode | None) -> list[Any]:
    """Return the values in left, root, right order."""
    values: list[Any] = []
    stack: list[TreeNode] = []
    node = root
    while stack or node is not None:
        while node is not None:
            stack.append(node)
            node = node.left
        node = stack.pop()
        values.append(node.value)
        node = node.right
    return values


def preorder(root: TreeNode | None) -> list[Any]:
    """Return the values in root, left, right order."""
    values: list[Any] = []
    stack = [root] if root is not None else []
    while stack:
        node = stack.pop()
        values.append(node.value)
        if node.right is not None:
            stack.append(node.right)
        if node.left is not None:
            stack.append(node.left)
    return values


def postorder(root: TreeNode | None) -> list[Any]:
    """Return the values in left, right, root order."""
    values: list[Any] = []
    stack = [root] if root is not None else []
    while stack:
        node = stack.pop()
        values.append(node.value)
        if node.left is not None:
            stack.append(node.left)
        if node.right is not None:
            stack.append(node.right)
    values.reverse()
    return values


def level_order(root: TreeNode | None) -> list[Any]:
    """Return the values level by level, left to right."""
    values: list[Any] = []
    queue = deque([root] if root is not None else [])
    while queue:
        node = queue.popleft()
        values.append(node.value)
        if node.left is not None:
            queue.append(node.left)
        if node.right is not None:
            queue.append(node.right)
    return values


def vertical_traversal(root: TreeNode | None) -> list[list[Any]]:
    """Group values by column, left to right; within a column by row, then by value."""
    placed: list[tuple[int, int, Any]] = []
    stack = [(root, 0, 0)] if root is not None else []
    while stack:
        node, row, col = stack.pop()
        placed.append((col, row, node.value))
        if node.left is not None:
            stack.append((node.left, row + 1, col - 1))
        if node.right is not None:
            stack.append((node.right, row + 1, col + 1))
    placed.sort()
    return [
        [value for _, _, value in column]
        for _, column in groupby(placed, key=lambda entry: entry[0])
    ]