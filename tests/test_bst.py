import random

import pytest

from dsakit.bst import BinarySearchTree

SAMPLE = [50, 30, 20, 40, 70, 60]


@pytest.fixture
def tree():
    return BinarySearchTree(SAMPLE)


def test_inorder_is_sorted(tree):
    assert tree.inorder() == sorted(SAMPLE)


def test_delete_leaf(tree):
    tree.delete(20)
    assert tree.inorder() == [30, 40, 50, 60, 70]


def test_delete_sequence_from_sample(tree):
    tree.delete(20)
    tree.delete(70)
    assert tree.inorder() == [30, 40, 50, 60]
    tree.delete(50)
    assert tree.inorder() == [30, 40, 60]


def test_delete_root_with_two_children_promotes_successor(tree):
    tree.delete(50)
    assert tree.root.key == 60
    assert tree.inorder() == [20, 30, 40, 60, 70]


def test_delete_absent_key_is_noop(tree):
    tree.delete(999)
    assert tree.inorder() == sorted(SAMPLE)


def test_empty_tree():
    tree = BinarySearchTree()
    assert tree.inorder() == []
    tree.delete(1)
    assert list(tree) == []


def test_duplicates_kept(tree):
    tree.insert(40)
    assert tree.inorder() == sorted(SAMPLE + [40])
    tree.delete(40)
    assert tree.inorder() == sorted(SAMPLE)


@pytest.mark.parametrize("seed", range(5))
def test_random_insert_delete(seed):
    rng = random.Random(seed)
    keys = [rng.randint(0, 50) for _ in range(40)]
    tree = BinarySearchTree(keys)
    remaining = sorted(keys)
    assert tree.inorder() == remaining
    for key in rng.sample(keys, 20):
        tree.delete(key)
        remaining.remove(key)
        assert tree.inorder() == remaining


def test_iter_matches_inorder(tree):
    assert list(iter(tree)) == tree.inorder()