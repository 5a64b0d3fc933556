import math
import random

from dsbasics.avl import AVLTree

SOURCE_KEYS = [10, 20, 30, 40, 50, 25]


def assert_balanced_height(tree, count):
    height = tree.height()
    if count == 0:
        assert height == 0
        return
    assert count <= 2**height - 1
    assert height <= 1.4405 * math.log2(count + 2)


def test_source_example_inorder():
    tree = AVLTree(SOURCE_KEYS)
    assert tree.inorder() == sorted(SOURCE_KEYS)


def test_source_example_delete_and_search():
    tree = AVLTree(SOURCE_KEYS)
    tree.delete(40)
    assert tree.inorder() == sorted(k for k in SOURCE_KEYS if k != 40)
    assert 25 in tree
    assert 40 not in tree


def test_duplicates_ignored():
    tree = AVLTree([3, 1, 3, 2, 1])
    assert tree.inorder() == [1, 2, 3]


def test_delete_missing_key_changes_nothing():
    tree = AVLTree(SOURCE_KEYS)
    tree.delete(999)
    assert tree.inorder() == sorted(SOURCE_KEYS)


def test_empty_tree():
    tree = AVLTree()
    assert tree.inorder() == []
    assert tree.height() == 0
    assert 5 not in tree


def test_sequential_inserts_stay_balanced():
    tree = AVLTree(range(1000))
    assert tree.inorder() == list(range(1000))
    assert_balanced_height(tree, 1000)


def test_delete_everything():
    keys = list(range(200))
    tree = AVLTree(keys)
    for key in keys:
        tree.delete(key)
    assert tree.inorder() == []
    assert tree.height() == 0


def test_random_operations_against_set():
    rng = random.Random(1234)
    tree = AVLTree()
    reference = set()
    for _ in range(2000):
        key = rng.randrange(300)
        if rng.random() < 0.6:
            tree.insert(key)
            reference.add(key)
        else:
            tree.delete(key)
            reference.discard(key)
    assert tree.inorder() == sorted(reference)
    assert_balanced_height(tree, len(reference))
    for key in range(300):
        assert (key in tree) == (key in reference)