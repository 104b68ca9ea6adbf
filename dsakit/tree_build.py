"""Building binary trees from traversals, serialising them, and balancing sorted lists."""

from __future__ import annotations

from collections import Counter
from typing import Optional, Sequence

from dsakit.linked_list import ListNode, to_values
from dsakit.trees import TreeNode, inorder as _inorder, preorder as _preorder


def _check_traversals(inorder: Sequence[int], other: Sequence[int]) -> None:
    if len(inorder) != len(other):
        raise ValueError("traversals differ in length")
    if Counter(inorder) != Counter(other):
        raise ValueError("traversals hold different values")


def _locate(inorder: Sequence[int], value: int, start: int, end: int) -> int:
    for index in range(start, end + 1):
        if inorder[index] == value:
            return index
    raise ValueError(f"traversals are inconsistent at value {value!r}")


def from_inorder_postorder(
    inorder: Sequence[int], postorder: Sequence[int]
) -> Optional[TreeNode]:
    """Rebuild a tree from its inorder and postorder traversals."""
    in_values = list(inorder)
    post_values = list(postorder)
    _check_traversals(in_values, post_values)
    pos = len(post_values) - 1

    def build(start: int, end: int) -> Optional[TreeNode]:
        nonlocal pos
        if start > end:
            return None
        value = post_values[pos]
        pos -= 1
        node = TreeNode(value)
        split = _locate(in_values, value, start, end)
        node.right = build(split + 1, end)
        node.left = build(start, split - 1)
        return node

    return build(0, len(in_values) - 1)


def from_inorder_preorder(
    inorder: Sequence[int], preorder: Sequence[int]
) -> Optional[TreeNode]:
    """Rebuild a tree from its inorder and preorder traversals."""
    in_values = list(inorder)
    pre_values = list(preorder)
    _check_traversals(in_values, pre_values)
    pos = 0

    def build(start: int, end: int) -> Optional[TreeNode]:
        nonlocal pos
        if start > end:
            return None
        value = pre_values[pos]
        pos += 1
        node = TreeNode(value)
        split = _locate(in_values, value, start, end)
        node.left = build(start, split - 1)
        node.right = build(split + 1, end)
        return node

    return build(0, len(in_values) - 1)


def serialize(root: Optional[TreeNode]) -> list[int]:
    """Store a tree as its inorder traversal followed by its preorder traversal."""
    return _inorder(root) + _preorder(root)


def deserialize(values: Sequence[int]) -> Optional[TreeNode]:
    """Rebuild a tree from the list that :func:`serialize` produced."""
    items = list(values)
    if len(items) % 2:
        raise ValueError("serialized tree must have an even number of values")
    half = len(items) // 2
    return from_inorder_preorder(items[:half], items[half:])


def sorted_list_to_bst(head: Optional[ListNode]) -> Optional[TreeNode]:
    """Build a height-balanced BST from an ascending linked list.

    The root of each subtree is the upper middle of its range.
    """
    values = to_values(head)

    def build(start: int, end: int) -> Optional[TreeNode]:
        if start > end:
            return None
        mid = (start + end + 1) // 2
        node = TreeNode(values[mid])
        node.left = build(start, mid - 1)
        node.right = build(mid + 1, end)
        return node

    return build(0, len(values) - 1)