"""A singly linked list, plus loop detection on chains of nodes."""

from __future__ import annotations

from collections.abc import Iterable, Iterator
from dataclasses import dataclass
from typing import Any


@dataclass(eq=False)
class Node:
    """One link of a singly linked chain."""

    data: Any
    next: Node | None = None


class SinglyLinkedList:
    """A singly linked list with head and tail references; positions count from 1."""

    def __init__(self, values: Iterable[Any] = ()) -> None:
        self.head: Node | None = None
        self.tail: Node | None = None
        for value in values:
            self.insert_at_tail(value)

    def insert_at_head(self, value: Any) -> None:
        """Put ``value`` in front of the first node."""
        self.head = Node(value, self.head)
        if self.tail is None:
            self.tail = self.head

    def insert_at_tail(self, value: Any) -> None:
        """Put ``value`` after the last node."""
        node = Node(value)
        if self.tail is None:
            self.head = self.tail = node
        else:
            self.tail.next = node
            self.tail = node

    def _node_at(self, position: int) -> Node:
        if position < 1:
            raise IndexError(f"position {position} out of range")
        node = self.head
        for _ in range(position - 1):
            if node is None:
                break
            node = node.next
        if node is None:
            raise IndexError(f"position {position} out of range")
        return node

    def insert_at_position(self, position: int, value: Any) -> None:
        """Insert ``value`` so that it ends up at ``position``.

        Positions run from 1 to one past the current length.
        """
        if position == 1:
            self.insert_at_head(value)
            return
        before = self._node_at(position - 1)
        if before.next is None:
            self.insert_at_tail(value)
            return
        before.next = Node(value, before.next)

    def delete_at_position(self, position: int) -> Any:
        """Remove the node at ``position`` and return its value."""
        if position == 1:
            if self.head is None:
                raise IndexError("delete from an empty list")
            removed = self.head
            self.head = removed.next
            removed.next = None
            if self.head is None:
                self.tail = None
            return removed.data
        before = self._node_at(position - 1)
        removed = before.next
        if removed is None:
            raise IndexError(f"position {position} out of range")
        before.next = removed.next
        removed.next = None
        if removed is self.tail:
            self.tail = before
        return removed.data

    def __iter__(self) -> Iterator[Any]:
        node = self.head
        while node is not None:
            yield node.data
            node = node.next

    def __repr__(self) -> str:
        return f"SinglyLinkedList({list(self)!r})"


def is_circular(head: Node | None) -> bool:
    """Return True if following ``next`` from ``head`` comes back to ``head``.

    An empty chain counts as circular.
    """
    if head is None:
        return True
    seen: set[int] = set()
    node = head.next
    while node is not None and node is not head:
        if id(node) in seen:
            return False
        seen.add(id(node))
        node = node.next
    return node is head


def detect_loop(head: Node | None) -> bool:
    """Return True if the chain from ``head`` revisits any node."""
    seen: set[int] = set()
    node = head
    while node is not None:
        if id(node) in seen:
            return True
        seen.add(id(node))
        node = node.next
    return False


def floyd_detect_loop(head: Node | None) -> Node | None:
    """Return the node where a slow and a fast walker meet, or None without a loop."""
    slow = fast = head
    while slow is not None and fast is not None:
        fast = fast.next
        if fast is not None:
            fast = fast.next
        slow = slow.next
        if slow is fast:
            return slow
    return None


def loop_start(head: Node | None) -> Node | None:
    """Return the first node of the loop, or None when there is no loop."""
    meeting = floyd_detect_loop(head)
    if meeting is None:
        return None
    slow = head
    while slow is not meeting:
        slow = slow.next
        meeting = meeting.next
    return slow


def remove_loop(head: Node | None) -> None:
    """Break the loop, if any, so that the chain ends after its last distinct node."""
    start = loop_start(head)
    if start is None:
        return
    node = start
    while node.next is not start:
        node = node.next
    node.next = None