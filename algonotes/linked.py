"""Singly linked list helpers and a doubly linked list."""

from __future__ import annotations

from collections.abc import Iterable, Iterator
from dataclasses import dataclass
from typing import Any


@dataclass(eq=False, repr=False)
class ListNode:
    """A node of a singly linked list."""

    value: Any
    next: ListNode | None = None

    def __repr__(self) -> str:
        return f"ListNode({self.value!r})"


def linked_list_from(values: Iterable[Any]) -> ListNode | None:
    """Build a singly linked list holding the values in order; empty input gives None."""
    head: ListNode | None = None
    tail: ListNode | None = None
    for value in values:
        node = ListNode(value)
        if tail is None:
            head = node
        else:
            tail.next = node
        tail = node
    return head


def has_cycle(head: ListNode | None) -> bool:
    """Return True when following ``next`` from ``head`` loops forever."""
    slow = fast = head
    while fast is not None and fast.next is not None:
        slow = slow.next  # type: ignore[union-attr]
        fast = fast.next.next
        if slow is fast:
            return True
    return False


def to_list(head: ListNode | None) -> list[Any]:
    """Return the values of a singly linked list in order.

    Raises ValueError when the list has a cycle.
    """
    if has_cycle(head):
        raise ValueError("the linked list contains a cycle")
    values: list[Any] = []
    node = head
    while node is not None:
        values.append(node.value)
        node = node.next
    return values


def reverse_list(head: ListNode | None) -> ListNode | None:
    """Reverse a singly linked list in place and return its new head."""
    previous: ListNode | None = None
    node = head
    while node is not None:
        following = node.next
        node.next = previous
        previous = node
        node = following
    return previous


@dataclass(eq=False, repr=False)
class _DoublyNode:
    value: Any
    prev: _DoublyNode | None = None
    next: _DoublyNode | None = None


class DoublyLinkedList:
    """A list with links in both directions and insertion at either end."""

    def __init__(self, values: Iterable[Any] = ()) -> None:
        self._head: _DoublyNode | None = None
        self._tail: _DoublyNode | None = None
        self._size = 0
        for value in values:
            self.push_back(value)

    def __len__(self) -> int:
        return self._size

    def __iter__(self) -> Iterator[Any]:
        node = self._head
        while node is not None:
            yield node.value
            node = node.next

    def __reversed__(self) -> Iterator[Any]:
        node = self._tail
        while node is not None:
            yield node.value
            node = node.prev

    def __repr__(self) -> str:
        return f"DoublyLinkedList({list(self)!r})"

    def push_front(self, value: Any) -> None:
        """Insert ``value`` at the beginning."""
        node = _DoublyNode(value, next=self._head)
        if self._head is None:
            self._tail = node
        else:
            self._head.prev = node
        self._head = node
        self._size += 1

    def push_back(self, value: Any) -> None:
        """Insert ``value`` at the end."""
        node = _DoublyNode(value, prev=self._tail)
        if self._tail is None:
            self._head = node
        else:
            self._tail.next = node
        self._tail = node
        self._size += 1