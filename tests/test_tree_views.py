import pytest

from dsakit.tree import build_tree, height, level_order
from dsakit.tree_views import bottom_view, left_view, right_view, top_view

COMPLETE = "1 2 3 4 5 6 7"


@pytest.mark.parametrize("view", [left_view, right_view, top_view, bottom_view])
def test_empty_tree(view):
    assert view(None) == []


def test_top_view_worked_example():
    assert top_view(build_tree(COMPLETE)) == [4, 2, 1, 3, 7]


def test_bottom_view_worked_example():
    assert bottom_view(build_tree(COMPLETE)) == [4, 2, 6, 3, 7]


@pytest.mark.parametrize("text", [COMPLETE, "1 2 3 N 4 N N 5", "10 N 20 N 30", "1 2 N 3"])
def test_side_views_match_level_edges(text):
    root = build_tree(text)
    levels = level_order(root)
    assert left_view(root) == [level[0] for level in levels]
    assert right_view(root) == [level[-1] for level in levels]
    assert len(left_view(root)) == height(root)


def test_left_chain_views():
    values = [1, 2, 3]
    root = build_tree("1 2 N 3")
    assert top_view(root) == list(reversed(values))
    assert bottom_view(root) == list(reversed(values))
    assert left_view(root) == values
    assert right_view(root) == values


def test_right_chain_views():
    values = [10, 20, 30]
    root = build_tree("10 N 20 N 30")
    assert top_view(root) == values
    assert bottom_view(root) == values
    assert left_view(root) == values


def test_single_node():
    root = build_tree("42")
    assert left_view(root) == right_view(root) == top_view(root) == bottom_view(root) == [42]