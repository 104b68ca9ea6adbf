"""Views of a binary tree: top, bottom, left, boundary, per-level and per-column summaries."""

from __future__ import annotations

from collections import defaultdict, deque
from itertools import pairwise
from typing import Iterator, Optional

from dsakit.trees import TreeNode


def _by_column(root: Optional[TreeNode]) -> Iterator[tuple[int, TreeNode]]:
    """Yield ``(horizontal distance, node)`` pairs in level order."""
    queue = deque([(0, root)] if root is not None else [])
    while queue:
        distance, node = queue.popleft()
        yield distance, node
        if node.left is not None:
            queue.append((distance - 1, node.left))
        if node.right is not None:
            queue.append((distance + 1, node.right))


def _levels(root: Optional[TreeNode]) -> Iterator[list[TreeNode]]:
    """Yield the nodes of each level, left to right, from the root down."""
    level = [root] if root is not None else []
    while level:
        yield level
        level = [
            child
            for node in level
            for child in (node.left, node.right)
            if child is not None
        ]


def _is_leaf(node: TreeNode) -> bool:
    return node.left is None and node.right is None


def bottom_view(root: Optional[TreeNode]) -> list[int]:
    """Return, column by column from the left, the last node met in level order."""
    columns: dict[int, int] = {}
    for distance, node in _by_column(root):
        columns[distance] = node.data
    return [columns[distance] for distance in sorted(columns)]


def top_view(root: Optional[TreeNode]) -> list[int]:
    """Return, column by column from the left, the first node met in level order."""
    columns: dict[int, int] = {}
    for distance, node in _by_column(root):
        columns.setdefault(distance, node.data)
    return [columns[distance] for distance in sorted(columns)]


def vertical_sums(root: Optional[TreeNode]) -> list[int]:
    """Return the sum of each vertical column, from the leftmost column to the rightmost."""
    columns: defaultdict[int, int] = defaultdict(int)
    for distance, node in _by_column(root):
        columns[distance] += node.data
    return [columns[distance] for distance in sorted(columns)]


def left_view(root: Optional[TreeNode]) -> list[int]:
    """Return the leftmost value of every level."""
    return [level[0].data for level in _levels(root)]


def level_maximums(root: Optional[TreeNode]) -> list[int]:
    """Return the largest value of every level."""
    return [max(node.data for node in level) for level in _levels(root)]


def connect_levels(root: Optional[TreeNode]) -> None:
    """Set ``next_right`` of every node to its right neighbour on the level, or None."""
    for level in _levels(root):
        for before, after in pairwise(level):
            before.next_right = after
        level[-1].next_right = None


def _leaves(root: Optional[TreeNode]) -> list[int]:
    result: list[int] = []
    stack = [root] if root is not None else []
    while stack:
        node = stack.pop()
        if _is_leaf(node):
            result.append(node.data)
            continue
        if node.right is not None:
            stack.append(node.right)
        if node.left is not None:
            stack.append(node.left)
    return result


def boundary_traversal(root: Optional[TreeNode]) -> list[int]:
    """Return the boundary anticlockwise from the root.

    The root comes first, then the left edge top-down without its leaf, then
    all leaves left to right, then the right edge bottom-up without its leaf.
    """
    if root is None:
        return []
    result = [root.data]

    node = root.left
    while node is not None and not _is_leaf(node):
        result.append(node.data)
        node = node.left if node.left is not None else node.right

    result.extend(_leaves(root.left))
    result.extend(_leaves(root.right))

    right_edge: list[int] = []
    node = root.right
    while node is not None and not _is_leaf(node):
        right_edge.append(node.data)
        node = node.right if node.right is not None else node.left
    result.extend(reversed(right_edge))
    return result