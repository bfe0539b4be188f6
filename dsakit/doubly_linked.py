"""A doubly linked list addressed by 1-based positions."""

from __future__ import annotations

from collections.abc import Iterable, Iterator
from dataclasses import dataclass
from typing import Any


@dataclass(eq=False)
class DoublyNode:
    """One link of a doubly linked chain."""

    data: Any
    prev: DoublyNode | None = None
    next: DoublyNode | None = None


class DoublyLinkedList:
    """A doubly linked list with head and tail references; positions count from 1."""

    def __init__(self, values: Iterable[Any] = ()) -> None:
        self.head: DoublyNode | None = None
        self.tail: DoublyNode | None = None
        for value in values:
            self.insert_at_tail(value)

    def insert_at_head(self, value: Any) -> None:
        """Put ``value`` in front of the first node."""
        node = DoublyNode(value)
        if self.head is None:
            self.head = self.tail = node
            return
        node.next = self.head
        self.head.prev = node
        self.head = node

    def insert_at_tail(self, value: Any) -> None:
        """Put ``value`` after the last node."""
        node = DoublyNode(value)
        if self.tail is None:
            self.head = self.tail = node
            return
        self.tail.next = node
        node.prev = self.tail
        self.tail = node

    def _node_at(self, position: int) -> DoublyNode:
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
        node = DoublyNode(value, prev=before, next=before.next)
        before.next.prev = node
        before.next = node

    def delete_at_position(self, position: int) -> Any:
        """Remove the node at ``position`` and return its value."""
        if self.head is None:
            raise IndexError("delete from an empty list")
        node = self._node_at(position)
        if node.prev is None:
            self.head = node.next
        else:
            node.prev.next = node.next
        if node.next is None:
            self.tail = node.prev
        else:
            node.next.prev = node.prev
        node.prev = node.next = None
        return node.data

    def __len__(self) -> int:
        return sum(1 for _ in self)

    def __iter__(self) -> Iterator[Any]:
        node = self.head
        while node is not None:
            yield node.data
            node = node.next

    def __reversed__(self) -> Iterator[Any]:
        node = self.tail
        while node is not None:
            yield node.data
            node = node.prev

    def __repr__(self) -> str:
        return f"DoublyLinkedList({list(self)!r})"