"""Binary-search techniques over sorted and rotated sequences."""

from __future__ import annotations

import math
from collections.abc import Sequence


def binary_search(items: Sequence[int], key: int, start: int = 0, end: int | None = None) -> int:
    """Return an index of ``key`` within ``items[start:end + 1]``, or -1."""
    if end is None:
        end = len(items) - 1
    low, high = start, end
    while low <= high:
        mid = (low + high) // 2
        if items[mid] == key:
            return mid
        if key > items[mid]:
            low = mid + 1
        else:
            high = mid - 1
    return -1


def _occurrence(items: Sequence[int], key: int, *, leftmost: bool) -> int:
    low, high = 0, len(items) - 1
    found = -1
    while low <= high:
        mid = (low + high) // 2
        if items[mid] == key:
            found = mid
            if leftmost:
                high = mid - 1
            else:
                low = mid + 1
        elif key > items[mid]:
            low = mid + 1
        else:
            high = mid - 1
    return found


def first_occurrence(items: Sequence[int], key: int) -> int:
    """Return the lowest index of ``key`` in sorted ``items``, or -1."""
    return _occurrence(items, key, leftmost=True)


def last_occurrence(items: Sequence[int], key: int) -> int:
    """Return the highest index of ``key`` in sorted ``items``, or -1."""
    return _occurrence(items, key, leftmost=False)


def first_and_last_position(items: Sequence[int], key: int) -> tuple[int, int]:
    """Return the first and last index of ``key``; both -1 when absent."""
    return first_occurrence(items, key), last_occurrence(items, key)


def get_pivot(items: Sequence[int]) -> int:
    """Return the index of the smallest element of a rotated sorted sequence.

    A sequence that is not rotated gives its last index.
    """
    low, high = 0, len(items) - 1
    while low < high:
        mid = (low + high) // 2
        if items[mid] >= items[0]:
            low = mid + 1
        else:
            high = mid
    return low


def find_position(items: Sequence[int], key: int) -> int:
    """Return the index of ``key`` in a rotated sorted sequence, or -1."""
    if not items:
        return -1
    pivot = get_pivot(items)
    last = len(items) - 1
    if items[pivot] <= key <= items[last]:
        return binary_search(items, key, pivot, last)
    return binary_search(items, key, 0, pivot - 1)


def sqrt_integer(n: int) -> int:
    """Return the integer square root of a non-negative ``n``."""
    if n < 0:
        raise ValueError("square root of a negative number")
    low, high = 0, n
    answer = 0
    while low <= high:
        mid = (low + high) // 2
        square = mid * mid
        if square == n:
            return mid
        if square < n:
            answer = mid
            low = mid + 1
        else:
            high = mid - 1
    return answer


def sqrt_precise(n: int, precision: int = 3) -> float:
    """Return the square root of ``n`` truncated to ``precision`` decimal digits."""
    answer = float(sqrt_integer(n))
    factor = 1.0
    for _ in range(precision):
        factor /= 10
        candidate = answer
        while candidate * candidate < n:
            answer = candidate
            candidate += factor
    return answer


def aggressive_cows(stalls: Sequence[int], cows: int) -> int:
    """Return the largest minimum distance at which ``cows`` can be stalled."""
    if cows < 2:
        raise ValueError("at least two cows are needed")
    if cows > len(stalls):
        raise ValueError("more cows than stalls")
    ordered = sorted(stalls)

    def can_place(distance: int) -> bool:
        placed = 1
        last = ordered[0]
        for position in ordered[1:]:
            if position - last >= distance:
                placed += 1
                if placed == cows:
                    return True
                last = position
        return False

    low, high = 0, ordered[-1] - ordered[0]
    best = -1
    while low <= high:
        mid = (low + high) // 2
        if can_place(mid):
            best = mid
            low = mid + 1
        else:
            high = mid - 1
    return best


def allocate_books(pages: Sequence[int], students: int) -> int:
    """Return the smallest possible maximum of pages given to one student.

    Books are handed out in order as contiguous runs.
    """
    if students < 1:
        raise ValueError("at least one student is needed")

    def can_allocate(limit: int) -> bool:
        count = 1
        current = 0
        for book in pages:
            if current + book <= limit:
                current += book
            else:
                count += 1
                if count > students or book > limit:
                    return False
                current = book
        return True

    low, high = 0, sum(pages)
    best = -1
    while low <= high:
        mid = (low + high) // 2
        if can_allocate(mid):
            best = mid
            high = mid - 1
        else:
            low = mid + 1
    return best


def median_of_two(first: Sequence[int], second: Sequence[int]) -> float:
    """Return the median of two sorted sequences taken together."""
    if len(first) > len(second):
        first, second = second, first
    small, large = len(first), len(second)
    if small + large == 0:
        raise ValueError("median of empty input")
    half = (small + large + 1) // 2

    low, high = 0, small
    while low <= high:
        cut_first = (low + high) // 2
        cut_second = half - cut_first
        left_first = first[cut_first - 1] if cut_first > 0 else -math.inf
        left_second = second[cut_second - 1] if cut_second > 0 else -math.inf
        right_first = first[cut_first] if cut_first < small else math.inf
        right_second = second[cut_second] if cut_second < large else math.inf

        if left_first <= right_second and left_second <= right_first:
            left = max(left_first, left_second)
            if (small + large) % 2 == 0:
                return (left + min(right_first, right_second)) / 2
            return float(left)
        if left_first > right_second:
            high = cut_first - 1
        else:
            low = cut_first + 1
    raise ValueError("inputs must be sorted")