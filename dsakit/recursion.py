"""Enumerating subsequences and subsets by include/exclude recursion."""

from __future__ import annotations

from collections.abc import Iterable, Iterator, Sequence
from typing import Any, TypeVar

T = TypeVar("T")


def _choose(items: Sequence[T], index: int, chosen: tuple[T, ...]) -> Iterator[tuple[T, ...]]:
    """Yield every selection of ``items[index:]`` appended to ``chosen``.

    At each position the selection without the item comes before the one with it.
    """
    if index >= len(items):
        yield chosen
        return
    yield from _choose(items, index + 1, chosen)
    yield from _choose(items, index + 1, chosen + (items[index],))


def subsequences(text: str) -> list[str]:
    """Return every non-empty subsequence of ``text``, duplicates included."""
    return ["".join(picked) for picked in _choose(text, 0, ()) if picked]


def subsets(items: Iterable[Any]) -> list[list[Any]]:
    """Return every subset of ``items``, the empty one first, keeping item order."""
    return [list(picked) for picked in _choose(list(items), 0, ())]