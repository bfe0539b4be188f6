"""Boundary, vertical-order and zig-zag traversals of a binary tree."""

from __future__ import annotations

from collections import defaultdict, deque
from collections.abc import Iterator

from dsakit.tree import TreeNode, level_order


def _is_leaf(node: TreeNode) -> bool:
    return node.left is None and node.right is None


def _left_edge(node: TreeNode | None) -> Iterator[int]:
    while node is not None and not _is_leaf(node):
        yield node.data
        node = node.left if node.left is not None else node.right


def _right_edge(node: TreeNode | None) -> Iterator[int]:
    while node is not None and not _is_leaf(node):
        yield node.data
        node = node.right if node.right is not None else node.left


def _leaves(node: TreeNode | None) -> Iterator[int]:
    if node is None:
        return
    if _is_leaf(node):
        yield node.data
        return
    yield from _leaves(node.left)
    yield from _leaves(node.right)


def boundary(root: TreeNode | None) -> list[int]:
    """Return the boundary anticlockwise from the root.

    The root comes first, then the left edge without its leaf, then every leaf
    left to right, then the right edge bottom-up without its leaf.
    """
    if root is None:
        return []
    result = [root.data]
    result.extend(_left_edge(root.left))
    result.extend(_leaves(root.left))
    result.extend(_leaves(root.right))
    result.extend(reversed(list(_right_edge(root.right))))
    return result


def vertical_order(root: TreeNode | None) -> list[int]:
    """Return the values column by column, left to right.

    Within a column, values go by depth, and nodes at the same depth keep
    their level-order position.
    """
    if root is None:
        return []
    columns: defaultdict[int, defaultdict[int, list[int]]] = defaultdict(
        lambda: defaultdict(list)
    )
    queue: deque[tuple[TreeNode, int, int]] = deque([(root, 0, 0)])
    while queue:
        node, distance, level = queue.popleft()
        columns[distance][level].append(node.data)
        if node.left is not None:
            queue.append((node.left, distance - 1, level + 1))
        if node.right is not None:
            queue.append((node.right, distance + 1, level + 1))
    return [
        value
        for distance in sorted(columns)
        for level in sorted(columns[distance])
        for value in columns[distance][level]
    ]


def zigzag(root: TreeNode | None) -> list[int]:
    """Return the values level by level, alternating left-to-right and right-to-left."""
    result: list[int] = []
    for depth, level in enumerate(level_order(root)):
        result.extend(reversed(level) if depth % 2 else level)
    return result