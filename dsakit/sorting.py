"""Classic comparison sorts that reorder a list in place."""

from __future__ import annotations

import heapq
from collections.abc import MutableSequence
from typing import Any


def partition(items: MutableSequence[Any], start: int, end: int) -> int:
    """Partition ``items[start:end + 1]`` around its first element.

    The pivot ends at the returned index with every smaller-or-equal item
    to its left and every larger item to its right.
    """
    pivot = items[start]
    pivot_index = start + sum(1 for value in items[start + 1:end + 1] if value <= pivot)
    items[pivot_index], items[start] = items[start], items[pivot_index]

    low, high = start, end
    while low < pivot_index < high:
        while items[low] <= pivot:
            low += 1
        while items[high] > pivot:
            high -= 1
        if low < pivot_index < high:
            items[low], items[high] = items[high], items[low]
            low += 1
            high -= 1
    return pivot_index


def quick_sort(items: MutableSequence[Any]) -> MutableSequence[Any]:
    """Sort ``items`` in place with quicksort and return it."""
    pending = [(0, len(items) - 1)]
    while pending:
        start, end = pending.pop()
        if start >= end:
            continue
        pivot_index = partition(items, start, end)
        pending.append((pivot_index + 1, end))
        pending.append((start, pivot_index - 1))
    return items


def merge_sort(items: MutableSequence[Any]) -> MutableSequence[Any]:
    """Sort ``items`` in place with a stable merge sort and return it."""

    def solve(start: int, end: int) -> None:
        if end - start < 2:
            return
        mid = (start + end) // 2
        solve(start, mid)
        solve(mid, end)
        items[start:end] = list(heapq.merge(items[start:mid], items[mid:end]))

    solve(0, len(items))
    return items


def bubble_sort(items: MutableSequence[Any]) -> MutableSequence[Any]:
    """Sort ``items`` in place with bubble sort, stopping once a pass swaps nothing."""
    size = len(items)
    for done in range(1, size):
        swapped = False
        for j in range(size - done):
            if items[j] > items[j + 1]:
                items[j], items[j + 1] = items[j + 1], items[j]
                swapped = True
        if not swapped:
            break
    return items


def insertion_sort(items: MutableSequence[Any]) -> MutableSequence[Any]:
    """Sort ``items`` in place with insertion sort and return it."""
    for i in range(1, len(items)):
        value = items[i]
        j = i - 1
        while j >= 0 and items[j] > value:
            items[j + 1] = items[j]
            j -= 1
        items[j + 1] = value
    return items


def selection_sort(items: MutableSequence[Any]) -> MutableSequence[Any]:
    """Sort ``items`` in place with selection sort and return it."""
    size = len(items)
    for i in range(size - 1):
        smallest = min(range(i, size), key=items.__getitem__)
        items[smallest], items[i] = items[i], items[smallest]
    return items