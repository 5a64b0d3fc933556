"""Unbalanced binary search tree of distinct values."""

from __future__ import annotations

from collections.abc import Iterable, Iterator
from dataclasses import dataclass
from typing import Any, Optional


@dataclass
class _Node:
    value: Any
    left: Optional[_Node] = None
    right: Optional[_Node] = None


class BinarySearchTree:
    """Binary search tree that ignores duplicate insertions."""

    def __init__(self, values: Iterable[Any] = ()) -> None:
        self._root: Optional[_Node] = None
        self._size = 0
        for value in values:
            self.insert(value)

    def insert(self, value: Any) -> bool:
        """Add ``value``; return False if it was already present."""
        if self._root is None:
            self._root = _Node(value)
            self._size += 1
            return True
        node = self._root
        while True:
            if value < node.value:
                if node.left is None:
                    node.left = _Node(value)
                    break
                node = node.left
            elif value > node.value:
                if node.right is None:
                    node.right = _Node(value)
                    break
                node = node.right
            else:
                return False
        self._size += 1
        return True

    def __contains__(self, value: object) -> bool:
        node = self._root
        while node is not None:
            if node.value == value:
                return True
            node = node.left if value < node.value else node.right
        return False

    def _walk(self) -> Iterator[Any]:
        pending: list[_Node] = []
        node = self._root
        while pending or node is not None:
            while node is not None:
                pending.append(node)
                node = node.left
            node = pending.pop()
            yield node.value
            node = node.right

    def inorder(self) -> list[Any]:
        """Return the stored values in ascending order."""
        return list(self._walk())

    def kth_smallest(self, k: int) -> Any:
        """Return the ``k``-th smallest value, counting from 1.

        Raises IndexError when the tree holds fewer than ``k`` values or
        ``k`` is not positive.
        """
        if k < 1 or k > self._size:
            raise IndexError(f"There are less than {k} nodes in the tree.")
        for position, value in enumerate(self._walk(), start=1):
            if position == k:
                return value
        raise IndexError(f"There are less than {k} nodes in the tree.")