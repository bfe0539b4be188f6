"""A prefix tree over upper-case ASCII words."""

from __future__ import annotations

import string
from collections.abc import Iterable
from dataclasses import dataclass, field


@dataclass
class _TrieNode:
    char: str
    children: dict[str, _TrieNode] = field(default_factory=dict)
    terminal: bool = False


def _validate(word: str) -> None:
    if any(ch not in string.ascii_uppercase for ch in word):
        raise ValueError(f"word must contain only letters A-Z: {word!r}")


class Trie:
    """A trie storing words made of the letters A to Z."""

    def __init__(self, words: Iterable[str] = ()) -> None:
        self._root = _TrieNode("")
        for word in words:
            self.insert_word(word)

    def insert_word(self, word: str) -> None:
        """Add ``word`` to the trie."""
        _validate(word)
        node = self._root
        for ch in word:
            node = node.children.setdefault(ch, _TrieNode(ch))
        node.terminal = True

    def search_word(self, word: str) -> bool:
        """Return True if ``word`` was inserted as a whole word."""
        _validate(word)
        node = self._root
        for ch in word:
            child = node.children.get(ch)
            if child is None:
                return False
            node = child
        return node.terminal

    def __contains__(self, word: object) -> bool:
        return isinstance(word, str) and self.search_word(word)