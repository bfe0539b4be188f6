"""An unbalanced binary search tree with successor-based deletion."""

from __future__ import annotations

from collections.abc import Iterable, Iterator
from dataclasses import dataclass
from typing import Any


@dataclass
class _Node:
    key: Any
    left: _Node | None = None
    right: _Node | None = None


def _insert(node: _Node | None, key: Any) -> _Node:
    if node is None:
        return _Node(key)
    if key < node.key:
        node.left = _insert(node.left, key)
    else:
        node.right = _insert(node.right, key)
    return node


def _delete(node: _Node | None, key: Any) -> _Node | None:
    if node is None:
        return None
    if node.key > key:
        node.left = _delete(node.left, key)
        return node
    if node.key < key:
        node.right = _delete(node.right, key)
        return node
    if node.left is None:
        return node.right
    if node.right is None:
        return node.left

    parent, successor = node, node.right
    while successor.left is not None:
        parent, successor = successor, successor.left
    if parent is node:
        parent.right = successor.right
    else:
        parent.left = successor.right
    node.key = successor.key
    return node


class BinarySearchTree:
    """A binary search tree; equal keys go to the right."""

    def __init__(self, keys: Iterable[Any] = ()) -> None:
        self.root: _Node | None = None
        for key in keys:
            self.insert(key)

    def insert(self, key: Any) -> None:
        """Add ``key`` to the tree."""
        self.root = _insert(self.root, key)

    def delete(self, key: Any) -> None:
        """Remove one occurrence of ``key``; absent keys are ignored."""
        self.root = _delete(self.root, key)

    def inorder(self) -> list[Any]:
        """Return the keys in ascending order."""
        return list(self)

    def __iter__(self) -> Iterator[Any]:
        stack: list[_Node] = []
        node = self.root
        while stack or node is not None:
            while node is not None:
                stack.append(node)
                node = node.left
            node = stack.pop()
            yield node.key
            node = node.right