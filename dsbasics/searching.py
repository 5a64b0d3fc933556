"""Linear and binary search."""

from collections.abc import Iterable, Sequence
from typing import Optional


def linear_search(items: Iterable[int], target: int) -> bool:
    """Return True if ``target`` occurs in ``items``."""
    return any(item == target for item in items)


def binary_search(items: Sequence[int], target: int) -> Optional[int]:
    """Return an index of ``target`` in the ascending ``items``, or None."""
    low, high = 0, len(items) - 1
    while low <= high:
        mid = (low + high) // 2
        value = items[mid]
        if value == target:
            return mid
        if value < target:
            low = mid + 1
        else:
            high = mid - 1
    return None