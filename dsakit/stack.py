"""Monotonic-stack problems: nearest smaller elements and largest rectangle."""

from __future__ import annotations

from collections.abc import Iterable, Sequence


def _nearest_smaller(values: Sequence[int], order: Iterable[int]) -> list[int]:
    result = [-1] * len(values)
    stack: list[int] = []
    for index in order:
        while stack and values[stack[-1]] >= values[index]:
            stack.pop()
        result[index] = stack[-1] if stack else -1
        stack.append(index)
    return result


def next_smaller_indices(values: Sequence[int]) -> list[int]:
    """For each item, the index of the nearest strictly smaller item to its right, or -1."""
    return _nearest_smaller(values, reversed(range(len(values))))


def previous_smaller_indices(values: Sequence[int]) -> list[int]:
    """For each item, the index of the nearest strictly smaller item to its left, or -1."""
    return _nearest_smaller(values, range(len(values)))


def next_smaller_element(values: Sequence[int]) -> list[int]:
    """For each item, the nearest strictly smaller value to its right, or -1."""
    return [values[index] if index != -1 else -1 for index in next_smaller_indices(values)]


def largest_rectangle_area(heights: Sequence[int]) -> int:
    """Return the area of the largest rectangle inside a histogram; 0 when empty."""
    size = len(heights)
    following = next_smaller_indices(heights)
    preceding = previous_smaller_indices(heights)
    return max(
        (
            height * ((size if right == -1 else right) - left - 1)
            for height, left, right in zip(heights, preceding, following)
        ),
        default=0,
    )