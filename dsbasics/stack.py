"""Stack with a fixed capacity."""

from typing import Any


class StackFullError(Exception):
    """Raised when pushing onto a full stack."""


class BoundedStack:
    """Last-in, first-out stack holding at most ``capacity`` items."""

    def __init__(self, capacity: int = 10) -> None:
        if capacity < 1:
            raise ValueError("capacity must be positive")
        self.capacity = capacity
        self._items: list[Any] = []

    def push(self, item: Any) -> None:
        """Put ``item`` on top; raise StackFullError when full."""
        if self.is_full():
            raise StackFullError("Stack Overflow")
        self._items.append(item)

    def pop(self) -> Any:
        """Remove and return the top item; raise IndexError when empty."""
        if not self._items:
            raise IndexError("Stack Underflow")
        return self._items.pop()

    def peek(self) -> Any:
        """Return the top item; raise IndexError when empty."""
        if not self._items:
            raise IndexError("Stack is empty")
        return self._items[-1]

    def is_full(self) -> bool:
        return len(self._items) == self.capacity

    def __len__(self) -> int:
        return len(self._items)