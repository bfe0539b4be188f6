"""A circular singly linked list."""

from __future__ import annotations

from collections.abc import Iterable, Iterator
from dataclasses import dataclass
from typing import Any


@dataclass(eq=False)
class _Node:
    data: Any
    next: _Node | None = None


class CircularLinkedList:
    """A ring of nodes, iterated once round from a reference node."""

    def __init__(self, values: Iterable[Any] = ()) -> None:
        self._start: _Node | None = None
        for value in values:
            self._append(value)

    def _nodes(self) -> Iterator[_Node]:
        if self._start is None:
            return
        node = self._start
        while True:
            yield node
            node = node.next
            if node is self._start:
                return

    def _append(self, value: Any) -> None:
        if self._start is None:
            self.prepend(value)
            return
        *_, last = self._nodes()
        last.next = _Node(value, self._start)

    def insert_after(self, element: Any, value: Any) -> None:
        """Insert ``value`` after the first node holding ``element``.

        In an empty list ``element`` is ignored and ``value`` becomes the only node.
        """
        if self._start is None:
            self.prepend(value)
            return
        for node in self._nodes():
            if node.data == element:
                node.next = _Node(value, node.next)
                return
        raise ValueError(f"{element!r} is not in the list")

    def prepend(self, value: Any) -> None:
        """Make ``value`` the first node of the ring."""
        node = _Node(value)
        if self._start is None:
            node.next = node
        else:
            *_, last = self._nodes()
            node.next = self._start
            last.next = node
        self._start = node

    def delete(self, value: Any) -> None:
        """Remove the first node holding ``value``, searching after the start node first.

        Removing the start node moves the start to the node before it.
        """
        if self._start is None:
            raise ValueError("delete from an empty list")
        previous = self._start
        current = previous.next
        while current.data != value:
            if current is self._start:
                raise ValueError(f"{value!r} is not in the list")
            previous, current = current, current.next
        previous.next = current.next
        if current is previous:
            self._start = None
        elif current is self._start:
            self._start = previous
        current.next = None

    def __iter__(self) -> Iterator[Any]:
        return (node.data for node in self._nodes())

    def __len__(self) -> int:
        return sum(1 for _ in self._nodes())

    def __repr__(self) -> str:
        return f"CircularLinkedList({list(self)!r})"