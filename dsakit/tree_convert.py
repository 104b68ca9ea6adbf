"""Relinking a binary tree in place into doubly linked lists in inorder."""

from __future__ import annotations

from itertools import pairwise
from typing import Optional

from dsakit.trees import TreeNode


def _inorder_nodes(root: Optional[TreeNode]) -> list[TreeNode]:
    result: list[TreeNode] = []
    stack: list[TreeNode] = []
    node = root
    while stack or node is not None:
        while node is not None:
            stack.append(node)
            node = node.left
        node = stack.pop()
        result.append(node)
        node = node.right
    return result


def _link(nodes: list[TreeNode]) -> None:
    for before, after in pairwise(nodes):
        before.right = after
        after.left = before


def to_dll(root: Optional[TreeNode]) -> Optional[TreeNode]:
    """Turn the tree into a doubly linked list in inorder; ``left`` is previous, ``right`` next.

    Returns the head, the leftmost node.
    """
    nodes = _inorder_nodes(root)
    if not nodes:
        return None
    _link(nodes)
    nodes[0].left = None
    nodes[-1].right = None
    return nodes[0]


def to_circular_dll(root: Optional[TreeNode]) -> Optional[TreeNode]:
    """Turn the tree into a circular doubly linked list in inorder; return its head."""
    nodes = _inorder_nodes(root)
    if not nodes:
        return None
    _link(nodes)
    nodes[0].left = nodes[-1]
    nodes[-1].right = nodes[0]
    return nodes[0]