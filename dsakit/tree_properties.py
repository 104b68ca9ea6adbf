"""Properties of binary trees: height, diameter, sum properties and ancestors."""

from __future__ import annotations

from typing import Optional

from dsakit.trees import TreeNode


def height(root: Optional[TreeNode]) -> int:
    """Return the number of nodes on the longest root-to-leaf path."""
    if root is None:
        return 0
    return max(height(root.left), height(root.right)) + 1


def diameter(root: Optional[TreeNode]) -> int:
    """Return the number of nodes on the longest path between any two nodes."""
    best = 0

    def visit(node: Optional[TreeNode]) -> int:
        nonlocal best
        if node is None:
            return 0
        left = visit(node.left)
        right = visit(node.right)
        best = max(best, left + right + 1)
        return max(left, right) + 1

    visit(root)
    return best


def has_children_sum_property(root: Optional[TreeNode]) -> bool:
    """Tell whether every non-leaf node equals the sum of its children's values."""
    if root is None or (root.left is None and root.right is None):
        return True
    children = sum(child.data for child in (root.left, root.right) if child is not None)
    return (
        root.data == children
        and has_children_sum_property(root.left)
        and has_children_sum_property(root.right)
    )


def is_sum_tree(root: Optional[TreeNode]) -> bool:
    """Tell whether every non-leaf node equals the sum of all nodes in its subtrees."""

    def visit(node: Optional[TreeNode]) -> tuple[bool, int]:
        if node is None:
            return True, 0
        if node.left is None and node.right is None:
            return True, node.data
        left_ok, left_sum = visit(node.left)
        right_ok, right_sum = visit(node.right)
        ok = left_ok and right_ok and node.data == left_sum + right_sum
        return ok, left_sum + right_sum + node.data

    return visit(root)[0]


def to_sum_tree(root: Optional[TreeNode]) -> None:
    """Replace each value in place by the sum of its descendants' original values."""

    def visit(node: Optional[TreeNode]) -> int:
        if node is None:
            return 0
        original = node.data
        node.data = visit(node.left) + visit(node.right)
        return node.data + original

    visit(root)


def _path_to(root: Optional[TreeNode], value: int) -> Optional[list[TreeNode]]:
    if root is None:
        return None
    if root.data == value:
        return [root]
    for child in (root.left, root.right):
        path = _path_to(child, value)
        if path is not None:
            path.append(root)
            return path
    return None


def kth_ancestor(root: Optional[TreeNode], k: int, node: int) -> Optional[int]:
    """Return the value ``k`` levels above the first node holding ``node``.

    Returns None when the node has fewer than ``k`` ancestors; raises
    ValueError when no node holds ``node`` or ``k`` is below 1.
    """
    if k < 1:
        raise ValueError("k must be at least 1")
    path = _path_to(root, node)
    if path is None:
        raise ValueError(f"no node holds {node}")
    return path[k].data if k < len(path) else None