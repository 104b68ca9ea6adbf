"""Binary tree nodes, building from level order, and the four classic traversals."""

from __future__ import annotations

from collections import deque
from dataclasses import dataclass
from typing import Iterable, Optional

_MISSING = object()


@dataclass(eq=False, repr=False)
class TreeNode:
    """A binary tree node; ``next_right`` may link it to its right neighbour on a level."""

    data: int
    left: Optional[TreeNode] = None
    right: Optional[TreeNode] = None
    next_right: Optional[TreeNode] = None

    def __repr__(self) -> str:
        return f"TreeNode({self.data!r})"


def from_level_order(values: Iterable[Optional[int]]) -> Optional[TreeNode]:
    """Build a tree from values in level order, where None marks a missing child."""
    items = iter(values)
    first = next(items, None)
    if first is None:
        return None
    root = TreeNode(first)
    queue = deque([root])
    while queue:
        node = queue.popleft()
        value = next(items, _MISSING)
        if value is _MISSING:
            break
        if value is not None:
            node.left = TreeNode(value)
            queue.append(node.left)
        value = next(items, _MISSING)
        if value is _MISSING:
            break
        if value is not None:
            node.right = TreeNode(value)
            queue.append(node.right)
    return root


def inorder(root: Optional[TreeNode]) -> list[int]:
    """Return the node values in left, node, right order."""
    result: list[int] = []
    stack: list[TreeNode] = []
    node = root
    while stack or node is not None:
        while node is not None:
            stack.append(node)
            node = node.left
        node = stack.pop()
        result.append(node.data)
        node = node.right
    return result


def preorder(root: Optional[TreeNode]) -> list[int]:
    """Return the node values in node, left, right order."""
    result: list[int] = []
    stack = [root] if root is not None else []
    while stack:
        node = stack.pop()
        result.append(node.data)
        if node.right is not None:
            stack.append(node.right)
        if node.left is not None:
            stack.append(node.left)
    return result


def postorder(root: Optional[TreeNode]) -> list[int]:
    """Return the node values in left, right, node order."""
    result: list[int] = []
    stack = [root] if root is not None else []
    while stack:
        node = stack.pop()
        result.append(node.data)
        if node.left is not None:
            stack.append(node.left)
        if node.right is not None:
            stack.append(node.right)
    result.reverse()
    return result


def level_order(root: Optional[TreeNode]) -> list[int]:
    """Return the node values level by level, left to right."""
    result: list[int] = []
    queue = deque([root] if root is not None else [])
    while queue:
        node = queue.popleft()
        result.append(node.data)
        if node.left is not None:
            queue.append(node.left)
        if node.right is not None:
            queue.append(node.right)
    return result