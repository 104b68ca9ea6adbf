"""Binary search trees: insertion, deletion, checks, construction and selection."""

from __future__ import annotations

import heapq
from typing import Iterable, NamedTuple, Optional

from dsakit.trees import TreeNode, inorder


def insert(root: Optional[TreeNode], value: int) -> TreeNode:
    """Insert ``value`` into the tree and return the root; duplicates are ignored."""
    node = TreeNode(value)
    if root is None:
        return node
    curr = root
    while True:
        if value < curr.data:
            if curr.left is None:
                curr.left = node
                return root
            curr = curr.left
        elif value > curr.data:
            if curr.right is None:
                curr.right = node
                return root
            curr = curr.right
        else:
            return root


def build_bst(values: Iterable[int]) -> Optional[TreeNode]:
    """Insert the values one after another into an empty tree; return its root."""
    root: Optional[TreeNode] = None
    for value in values:
        root = insert(root, value)
    return root


def min_node(root: Optional[TreeNode]) -> TreeNode:
    """Return the leftmost node of a non-empty tree."""
    if root is None:
        raise ValueError("empty tree has no minimum")
    node = root
    while node.left is not None:
        node = node.left
    return node


def max_node(root: Optional[TreeNode]) -> TreeNode:
    """Return the rightmost node of a non-empty tree."""
    if root is None:
        raise ValueError("empty tree has no maximum")
    node = root
    while node.right is not None:
        node = node.right
    return node


def delete(root: Optional[TreeNode], value: int) -> Optional[TreeNode]:
    """Remove ``value`` from the tree, if present, and return the new root."""
    if root is None:
        return None
    if value < root.data:
        root.left = delete(root.left, value)
    elif value > root.data:
        root.right = delete(root.right, value)
    else:
        if root.left is None:
            return root.right
        if root.right is None:
            return root.left
        successor = min_node(root.right).data
        root.data = successor
        root.right = delete(root.right, successor)
    return root


def inorder_predecessor(root: TreeNode) -> Optional[TreeNode]:
    """Return the largest node of the left subtree of ``root``, or None."""
    return None if root.left is None else max_node(root.left)


def inorder_successor(root: TreeNode) -> Optional[TreeNode]:
    """Return the smallest node of the right subtree of ``root``, or None."""
    return None if root.right is None else min_node(root.right)


def is_bst(root: Optional[TreeNode]) -> bool:
    """Tell whether every node is strictly between all its left and right descendants."""
    stack: list[tuple[Optional[TreeNode], Optional[int], Optional[int]]] = [
        (root, None, None)
    ]
    while stack:
        node, low, high = stack.pop()
        if node is None:
            continue
        if (low is not None and node.data <= low) or (
            high is not None and node.data >= high
        ):
            return False
        stack.append((node.left, low, node.data))
        stack.append((node.right, node.data, high))
    return True


class _Info(NamedTuple):
    is_bst: bool
    size: int
    low: Optional[int]
    high: Optional[int]


def largest_bst_size(root: Optional[TreeNode]) -> int:
    """Return the number of nodes in the largest subtree that is a BST."""
    best = 0

    def visit(node: Optional[TreeNode]) -> _Info:
        nonlocal best
        if node is None:
            return _Info(True, 0, None, None)
        left = visit(node.left)
        right = visit(node.right)
        size = left.size + right.size + 1
        ok = (
            left.is_bst
            and right.is_bst
            and (left.high is None or left.high < node.data)
            and (right.low is None or right.low > node.data)
        )
        low = node.data if left.low is None else min(left.low, node.data)
        high = node.data if right.high is None else max(right.high, node.data)
        if left.high is not None:
            high = max(high, left.high)
        if right.low is not None:
            low = min(low, right.low)
        if ok:
            best = max(best, size)
        return _Info(ok, size, low, high)

    visit(root)
    return best


def bst_from_preorder(values: Iterable[int]) -> Optional[TreeNode]:
    """Rebuild a BST from its preorder; raise ValueError if no BST has that preorder."""
    items = list(values)
    pos = 0

    def build(low: Optional[int], high: Optional[int]) -> Optional[TreeNode]:
        nonlocal pos
        if pos >= len(items):
            return None
        value = items[pos]
        if (low is not None and value < low) or (high is not None and value > high):
            return None
        pos += 1
        node = TreeNode(value)
        node.left = build(low, value)
        node.right = build(value, high)
        return node

    root = build(None, None)
    if pos != len(items):
        raise ValueError("values are not the preorder of a binary search tree")
    return root


def balance(root: Optional[TreeNode]) -> Optional[TreeNode]:
    """Return a new BST of minimum height holding the same values."""
    values = inorder(root)

    def build(start: int, end: int) -> Optional[TreeNode]:
        if start > end:
            return None
        mid = start + (end - start) // 2
        node = TreeNode(values[mid])
        node.left = build(start, mid - 1)
        node.right = build(mid + 1, end)
        return node

    return build(0, len(values) - 1)


def merge_sorted(first: Iterable[int], second: Iterable[int]) -> list[int]:
    """Merge two ascending sequences into one ascending list."""
    return list(heapq.merge(first, second))


def kth_smallest(root: Optional[TreeNode], k: int) -> int:
    """Return the ``k``-th smallest value (1-based); raise IndexError if there is none."""
    values = inorder(root)
    if not 1 <= k <= len(values):
        raise IndexError(f"k must lie between 1 and {len(values)}")
    return values[k - 1]