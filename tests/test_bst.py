import pytest

from dsbasics.bst import BinarySearchTree

VALUES = [5, 3, 8, 2, 4, 10]


def test_inorder_is_sorted_values():
    tree = BinarySearchTree(VALUES)
    assert tree.inorder() == sorted(VALUES)


def test_duplicates_are_ignored():
    tree = BinarySearchTree([7, 3, 7, 9, 3, 1])
    assert tree.inorder() == sorted({7, 3, 9, 1})


def test_insert_reports_duplicate():
    tree = BinarySearchTree()
    assert tree.insert(4) is True
    assert tree.insert(4) is False


def test_contains():
    tree = BinarySearchTree(VALUES)
    assert all(value in tree for value in VALUES)
    assert 6 not in tree
    assert 100 not in tree


def test_empty_tree():
    tree = BinarySearchTree()
    assert tree.inorder() == []
    assert 1 not in tree


def test_kth_smallest_source_example():
    tree = BinarySearchTree(VALUES)
    assert tree.kth_smallest(3) == 4


def test_kth_smallest_matches_sorted_order():
    tree = BinarySearchTree(VALUES)
    ordered = sorted(VALUES)
    for k in range(1, len(VALUES) + 1):
        assert tree.kth_smallest(k) == ordered[k - 1]


@pytest.mark.parametrize("k", [0, -1, 7])
def test_kth_smallest_out_of_range(k):
    tree = BinarySearchTree(VALUES)
    with pytest.raises(IndexError):
        tree.kth_smallest(k)


def test_deep_tree_from_sorted_input():
    values = list(range(5000))
    tree = BinarySearchTree(values)
    assert tree.inorder() == values
    assert tree.kth_smallest(5000) == 4999