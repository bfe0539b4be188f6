"""A binary max-heap and an in-place heap sort."""

from __future__ import annotations

from collections.abc import Iterable, Iterator, MutableSequence
from typing import Any


class MaxHeap:
    """A max-heap stored as an implicit binary tree in a list."""

    def __init__(self, values: Iterable[Any] = ()) -> None:
        self._items: list[Any] = []
        for value in values:
            self.insert(value)

    def insert(self, value: Any) -> None:
        """Add ``value`` and sift it up until its parent is not smaller."""
        items = self._items
        items.append(value)
        index = len(items) - 1
        while index > 0:
            parent = (index - 1) // 2
            if items[parent] < items[index]:
                items[parent], items[index] = items[index], items[parent]
                index = parent
            else:
                break

    def peek(self) -> Any:
        """Return the largest value without removing it."""
        if not self._items:
            raise IndexError("peek from an empty heap")
        return self._items[0]

    def to_list(self) -> list[Any]:
        """Return the values in heap-array order."""
        return list(self._items)

    def __len__(self) -> int:
        return len(self._items)

    def __iter__(self) -> Iterator[Any]:
        return iter(self._items)

    def __repr__(self) -> str:
        return f"MaxHeap({self._items!r})"


def _sift_down(items: MutableSequence[Any], index: int, size: int) -> None:
    while True:
        largest = index
        for child in (2 * index + 1, 2 * index + 2):
            if child < size and items[child] > items[largest]:
                largest = child
        if largest == index:
            return
        items[index], items[largest] = items[largest], items[index]
        index = largest


def heap_sort(items: MutableSequence[Any]) -> MutableSequence[Any]:
    """Sort ``items`` ascending in place with heap sort and return it."""
    size = len(items)
    for index in reversed(range(size // 2)):
        _sift_down(items, index, size)
    for end in reversed(range(1, size)):
        items[0], items[end] = items[end], items[0]
        _sift_down(items, 0, end)
    return items