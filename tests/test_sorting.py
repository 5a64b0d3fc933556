import random

import pytest

from dsbasics.sorting import (
    heap_sort,
    insertion_sort,
    merge_sort,
    quick_sort,
    sort_string,
)

FIXED_CASES = [
    ([], []),
    ([1], [1]),
    ([2, 1], [1, 2]),
    ([5, 4, 3, 2, 1], [1, 2, 3, 4, 5]),
    ([1, 2, 3, 4, 5], [1, 2, 3, 4, 5]),
    ([3, 3, 3], [3, 3, 3]),
    ([0, -5, 12, -5, 7, 0, 99, -100], [-100, -5, -5, 0, 0, 7, 12, 99]),
]


def _random_lists():
    rng = random.Random(1234)
    return [[rng.randint(-50, 50) for _ in range(size)] for size in range(0, 60, 7)]


@pytest.mark.parametrize("data, expected", FIXED_CASES)
def test_insertion_sort_fixed(data, expected):
    assert insertion_sort(data) == expected


@pytest.mark.parametrize("data, expected", FIXED_CASES)
def test_merge_sort_fixed(data, expected):
    assert merge_sort(data) == expected


@pytest.mark.parametrize("data, expected", FIXED_CASES)
def test_quick_sort_fixed(data, expected):
    assert quick_sort(data) == expected


@pytest.mark.parametrize("data, expected", FIXED_CASES)
def test_heap_sort_fixed(data, expected):
    assert heap_sort(data) == expected


def test_insertion_sort_random():
    for data in _random_lists():
        assert insertion_sort(data) == sorted(data)


def test_merge_sort_random():
    for data in _random_lists():
        assert merge_sort(data) == sorted(data)


def test_quick_sort_random():
    for data in _random_lists():
        assert quick_sort(data) == sorted(data)


def test_heap_sort_random():
    for data in _random_lists():
        assert heap_sort(data) == sorted(data)


def test_inputs_left_unchanged():
    data = [9, 1, 8, 2, 7]
    snapshot = list(data)
    assert insertion_sort(data) == [1, 2, 7, 8, 9]
    assert merge_sort(data) == [1, 2, 7, 8, 9]
    assert quick_sort(data) == [1, 2, 7, 8, 9]
    assert heap_sort(data) == [1, 2, 7, 8, 9]
    assert data == snapshot


def test_accepts_generators():
    assert insertion_sort(x for x in (3, 1, 2)) == [1, 2, 3]
    assert merge_sort(x for x in (3, 1, 2)) == [1, 2, 3]
    assert quick_sort(x for x in (3, 1, 2)) == [1, 2, 3]
    assert heap_sort(x for x in (3, 1, 2)) == [1, 2, 3]


@pytest.mark.parametrize(
    "text, expected",
    [
        ("computer", "cemoprtu"),
        ("", ""),
        ("a", "a"),
        ("zyxZYX", "XYZxyz"),
        ("hello world", " dehllloorw"),
    ],
)
def test_sort_string(text, expected):
    assert sort_string(text) == expected