"""Left, right, top and bottom views of a binary tree."""

from __future__ import annotations

from collections import deque
from collections.abc import Callable

from dsakit.tree import TreeNode


def _side_view(
    root: TreeNode | None,
    children: Callable[[TreeNode], tuple[TreeNode | None, TreeNode | None]],
) -> list[int]:
    view: list[int] = []

    def visit(node: TreeNode | None, level: int) -> None:
        if node is None:
            return
        if level == len(view):
            view.append(node.data)
        for child in children(node):
            visit(child, level + 1)

    visit(root, 0)
    return view


def left_view(root: TreeNode | None) -> list[int]:
    """Return the first node seen on each level from the left."""
    return _side_view(root, lambda node: (node.left, node.right))


def right_view(root: TreeNode | None) -> list[int]:
    """Return the first node seen on each level from the right."""
    return _side_view(root, lambda node: (node.right, node.left))


def _vertical_view(root: TreeNode | None, keep_first: bool) -> list[int]:
    if root is None:
        return []
    by_distance: dict[int, int] = {}
    queue: deque[tuple[TreeNode, int]] = deque([(root, 0)])
    while queue:
        node, distance = queue.popleft()
        if not keep_first or distance not in by_distance:
            by_distance[distance] = node.data
        if node.left is not None:
            queue.append((node.left, distance - 1))
        if node.right is not None:
            queue.append((node.right, distance + 1))
    return [by_distance[distance] for distance in sorted(by_distance)]


def top_view(root: TreeNode | None) -> list[int]:
    """Return, left to right, the highest node at each horizontal distance."""
    return _vertical_view(root, keep_first=True)


def bottom_view(root: TreeNode | None) -> list[int]:
    """Return, left to right, the last node in level order at each horizontal distance."""
    return _vertical_view(root, keep_first=False)