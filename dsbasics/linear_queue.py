"""Array-backed linear queue whose slots are reused only once it empties."""

from collections.abc import Iterator
from typing import Any


class QueueFullError(Exception):
    """Raised when enqueueing into a full queue."""


class LinearQueue:
    """FIFO queue over ``capacity`` slots.

    Dequeued slots are not reclaimed until the queue becomes empty, so the
    queue reports full once the last slot has been used.
    """

    def __init__(self, capacity: int = 5) -> None:
        if capacity < 1:
            raise ValueError("capacity must be positive")
        self.capacity = capacity
        self._slots: list[Any] = []
        self._front = 0

    def enqueue(self, value: Any) -> None:
        """Append ``value`` at the rear; raise QueueFullError when full."""
        if self.is_full():
            raise QueueFullError("Queue is full!")
        self._slots.append(value)

    def dequeue(self) -> Any:
        """Remove and return the front value; raise IndexError when empty."""
        if not len(self):
            raise IndexError("Queue is empty!")
        item = self._slots[self._front]
        self._front += 1
        if self._front == len(self._slots):
            self._slots = []
            self._front = 0
        return item

    def is_full(self) -> bool:
        return len(self._slots) == self.capacity

    def __iter__(self) -> Iterator[Any]:
        return iter(self._slots[self._front:])

    def __len__(self) -> int:
        return len(self._slots) - self._front