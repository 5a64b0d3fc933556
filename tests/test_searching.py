import pytest

from dsbasics.searching import binary_search, linear_search


def test_linear_search_found_and_missing():
    numbers = [5, 3, 9, 1]
    assert linear_search(numbers, 9) is True
    assert linear_search(numbers, 4) is False


def test_linear_search_empty():
    assert linear_search([], 1) is False


def test_linear_search_accepts_iterator():
    assert linear_search(iter([2, 4, 6]), 6) is True


@pytest.mark.parametrize("size", [1, 2, 7, 16, 33])
def test_binary_search_finds_every_element(size):
    items = [3 * i - 10 for i in range(size)]
    for target in items:
        index = binary_search(items, target)
        assert items[index] == target


def test_binary_search_missing_returns_none():
    items = [1, 3, 5, 7, 9]
    for target in (0, 2, 4, 10):
        assert binary_search(items, target) is None


def test_binary_search_empty():
    assert binary_search([], 5) is None


def test_binary_search_with_duplicates_hits_a_match():
    items = [1, 2, 2, 2, 3]
    index = binary_search(items, 2)
    assert items[index] == 2