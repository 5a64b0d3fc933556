"""Parity checks and counting of repeated elements."""

from collections import Counter, defaultdict
from collections.abc import Hashable, Iterable, Sequence
from typing import TypeVar

T = TypeVar("T", bound=Hashable)


def parity(number: int) -> str:
    """Return ``"Even"`` or ``"Odd"`` for ``number``."""
    remainder = number % 2
    if remainder == 0:
        return "Even"
    return "Odd"


def repeat_counts(items: Iterable[T]) -> dict[T, int]:
    """Map each value occurring more than once to its count, by first appearance."""
    return {value: count for value, count in Counter(items).items() if count > 1}


def repeated_indices(items: Sequence[T]) -> dict[T, list[int]]:
    """Map each repeated value to all the indices where it occurs."""
    positions: dict[T, list[int]] = defaultdict(list)
    for index, value in enumerate(items):
        positions[value].append(index)
    return {value: idx for value, idx in positions.items() if len(idx) > 1}


def repeated_exactly_twice(items: Iterable[T]) -> list[T]:
    """Return the values occurring exactly twice, by first appearance."""
    return [value for value, count in Counter(items).items() if count == 2]