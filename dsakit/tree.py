"""Binary trees: construction from several input forms, traversals and height."""

from __future__ import annotations

from collections import deque
from collections.abc import Iterable, Iterator
from dataclasses import dataclass
from typing import Optional

NULL_MARKER = -1


@dataclass
class TreeNode:
    """A node of a binary tree holding an integer."""

    data: int
    left: Optional[TreeNode] = None
    right: Optional[TreeNode] = None


def build_tree(text: str) -> TreeNode | None:
    """Build a tree from a level-order string of integers, with ``N`` for a missing child.

    An empty string, or one that starts with ``N``, gives an empty tree.
    """
    if not text or text[0] == "N":
        return None
    tokens = text.split()
    if not tokens:
        raise ValueError("no values in tree description")
    root = TreeNode(int(tokens[0]))
    queue: deque[TreeNode] = deque([root])
    index = 1
    while queue and index < len(tokens):
        current = queue.popleft()
        token = tokens[index]
        if token != "N":
            current.left = TreeNode(int(token))
            queue.append(current.left)
        index += 1
        if index >= len(tokens):
            break
        token = tokens[index]
        if token != "N":
            current.right = TreeNode(int(token))
            queue.append(current.right)
        index += 1
    return root


def build_tree_preorder(values: Iterable[int]) -> TreeNode | None:
    """Build a tree from values in pre-order, where -1 stands for a missing node."""
    stream = iter(values)

    def build() -> TreeNode | None:
        try:
            value = next(stream)
        except StopIteration:
            raise ValueError("ran out of values while building the tree") from None
        if value == NULL_MARKER:
            return None
        node = TreeNode(value)
        node.left = build()
        node.right = build()
        return node

    return build()


def build_from_level_order(values: Iterable[int]) -> TreeNode:
    """Build a tree from a root value followed by left and right child values, level by level.

    Every child value of -1 means that child is missing; the root is always created.
    """
    stream = iter(values)

    def take() -> int:
        try:
            return next(stream)
        except StopIteration:
            raise ValueError("ran out of values while building the tree") from None

    root = TreeNode(take())
    queue: deque[TreeNode] = deque([root])
    while queue:
        current = queue.popleft()
        left = take()
        if left != NULL_MARKER:
            current.left = TreeNode(left)
            queue.append(current.left)
        right = take()
        if right != NULL_MARKER:
            current.right = TreeNode(right)
            queue.append(current.right)
    return root


def level_order(root: TreeNode | None) -> list[list[int]]:
    """Return the tree's values grouped by level, top to bottom, each left to right."""
    levels: list[list[int]] = []
    current = [root] if root is not None else []
    while current:
        levels.append([node.data for node in current])
        current = [
            child
            for node in current
            for child in (node.left, node.right)
            if child is not None
        ]
    return levels


def _inorder(node: TreeNode | None) -> Iterator[int]:
    if node is not None:
        yield from _inorder(node.left)
        yield node.data
        yield from _inorder(node.right)


def _preorder(node: TreeNode | None) -> Iterator[int]:
    if node is not None:
        yield node.data
        yield from _preorder(node.left)
        yield from _preorder(node.right)


def _postorder(node: TreeNode | None) -> Iterator[int]:
    if node is not None:
        yield from _postorder(node.left)
        yield from _postorder(node.right)
        yield node.data


def inorder(root: TreeNode | None) -> list[int]:
    """Return the values in left, node, right order."""
    return list(_inorder(root))


def preorder(root: TreeNode | None) -> list[int]:
    """Return the values in node, left, right order."""
    return list(_preorder(root))


def postorder(root: TreeNode | None) -> list[int]:
    """Return the values in left, right, node order."""
    return list(_postorder(root))


def height(root: TreeNode | None) -> int:
    """Return the number of nodes on the longest root-to-leaf path; 0 when empty."""
    if root is None:
        return 0
    return max(height(root.left), height(root.right)) + 1