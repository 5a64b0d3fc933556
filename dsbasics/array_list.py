"""Array with a fixed capacity and positional insertion and deletion."""

from collections.abc import Iterator


class ArrayFullError(Exception):
    """Raised when inserting into a full array."""


class BoundedArray:
    """Sequence of integers holding at most ``capacity`` elements."""

    def __init__(self, capacity: int = 100) -> None:
        if capacity < 1:
            raise ValueError("capacity must be positive")
        self.capacity = capacity
        self._items: list[int] = []

    def insert(self, position: int, value: int) -> None:
        """Insert ``value`` at ``position`` (0 to current length)."""
        if len(self._items) == self.capacity:
            raise ArrayFullError("Array is full! Cannot insert.")
        if not 0 <= position <= len(self._items):
            raise IndexError("Invalid position!")
        self._items.insert(position, value)

    def delete(self, position: int) -> int:
        """Remove and return the element at ``position``."""
        if not self._items:
            raise IndexError("Array is empty! Cannot delete.")
        if not 0 <= position < len(self._items):
            raise IndexError("Invalid position!")
        return self._items.pop(position)

    def __iter__(self) -> Iterator[int]:
        return iter(self._items)

    def __len__(self) -> int:
        return len(self._items)