"""Fixed-size integer hash table with linear probing."""

from collections.abc import Iterator
from typing import Optional


class TableFullError(Exception):
    """Raised when no free slot remains for a new key."""


class LinearProbingTable:
    """Open-addressing table storing integer keys at ``key % size``."""

    def __init__(self, size: int = 10) -> None:
        if size < 1:
            raise ValueError("table size must be positive")
        self._slots: list[Optional[int]] = [None] * size

    def _probe(self, key: int) -> Iterator[int]:
        size = len(self._slots)
        start = key % size
        for offset in range(size):
            yield (start + offset) % size

    def insert(self, key: int) -> int:
        """Store ``key`` in the first free slot and return its index."""
        for index in self._probe(key):
            if self._slots[index] is None:
                self._slots[index] = key
                return index
        raise TableFullError(f"Hash Table is Full! Cannot insert {key}")

    def __contains__(self, key: object) -> bool:
        if not isinstance(key, int):
            return False
        for index in self._probe(key):
            stored = self._slots[index]
            if stored is None:
                return False
            if stored == key:
                return True
        return False

    def __iter__(self) -> Iterator[int]:
        """Yield the stored keys in slot order."""
        return (key for key in self._slots if key is not None)

    def display(self) -> str:
        """Return a listing of every slot, one line each."""
        lines = ["Hash Table:"]
        lines.extend(
            f"Index {index}: {'Empty' if key is None else key}"
            for index, key in enumerate(self._slots)
        )
        return "\n".join(lines)