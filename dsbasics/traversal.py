"""Depth-first traversals of a binary tree."""

from __future__ import annotations

from dataclasses import dataclass
from typing import Any, Optional


@dataclass
class TreeNode:
    """Binary tree node."""

    value: Any
    left: Optional[TreeNode] = None
    right: Optional[TreeNode] = None


def preorder(root: Optional[TreeNode]) -> list[Any]:
    """Return values in root, left, right order."""
    result = []
    pending = [root] if root is not None else []
    while pending:
        node = pending.pop()
        result.append(node.value)
        if node.right is not None:
            pending.append(node.right)
        if node.left is not None:
            pending.append(node.left)
    return result


def inorder(root: Optional[TreeNode]) -> list[Any]:
    """Return values in left, root, right order."""
    result = []
    pending: list[TreeNode] = []
    node = root
    while pending or node is not None:
        while node is not None:
            pending.append(node)
            node = node.left
        node = pending.pop()
        result.append(node.value)
        node = node.right
    return result


def postorder(root: Optional[TreeNode]) -> list[Any]:
    """Return values in left, right, root order."""
    result = []
    pending = [root] if root is not None else []
    while pending:
        node = pending.pop()
        result.append(node.value)
        if node.left is not None:
            pending.append(node.left)
        if node.right is not None:
            pending.append(node.right)
    result.reverse()
    return result