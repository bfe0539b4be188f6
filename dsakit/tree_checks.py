"""Structural checks on binary trees: balance, diameter, identity and sum trees."""

from __future__ import annotations

from dsakit.tree import TreeNode


def _balance(node: TreeNode | None) -> tuple[bool, int]:
    if node is None:
        return True, 0
    left_ok, left_height = _balance(node.left)
    right_ok, right_height = _balance(node.right)
    balanced = left_ok and right_ok and abs(left_height - right_height) <= 1
    return balanced, max(left_height, right_height) + 1


def is_balanced(root: TreeNode | None) -> bool:
    """Return True if at every node the subtree heights differ by at most one."""
    return _balance(root)[0]


def _diameter(node: TreeNode | None) -> tuple[int, int]:
    if node is None:
        return 0, 0
    left_diameter, left_height = _diameter(node.left)
    right_diameter, right_height = _diameter(node.right)
    through = left_height + right_height + 1
    return (
        max(left_diameter, right_diameter, through),
        max(left_height, right_height) + 1,
    )


def diameter(root: TreeNode | None) -> int:
    """Return the number of nodes on the longest path between two nodes; 0 when empty."""
    return _diameter(root)[0]


def is_identical(first: TreeNode | None, second: TreeNode | None) -> bool:
    """Return True if both trees have the same shape and the same values."""
    if first is None or second is None:
        return first is None and second is None
    return (
        first.data == second.data
        and is_identical(first.left, second.left)
        and is_identical(first.right, second.right)
    )


def _sum_tree(node: TreeNode | None) -> tuple[bool, int]:
    if node is None:
        return True, 0
    if node.left is None and node.right is None:
        return True, node.data
    left_ok, left_sum = _sum_tree(node.left)
    right_ok, right_sum = _sum_tree(node.right)
    if left_ok and right_ok and node.data == left_sum + right_sum:
        return True, node.data + left_sum + right_sum
    return False, 0


def is_sum_tree(root: TreeNode | None) -> bool:
    """Return True if every inner node equals the sum of the values below it.

    Leaves and the empty tree count as sum trees.
    """
    return _sum_tree(root)[0]