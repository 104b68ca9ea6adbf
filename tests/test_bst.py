import math

import pytest
from hypothesis import given
from hypothesis import strategies as st

from dsakit.bst import (
    balance,
    bst_from_preorder,
    build_bst,
    delete,
    inorder_predecessor,
    inorder_successor,
    insert,
    is_bst,
    kth_smallest,
    largest_bst_size,
    max_node,
    merge_sorted,
    min_node,
)
from dsakit.trees import from_level_order, inorder, preorder

values_strategy = st.lists(st.integers(-1000, 1000), min_size=1, max_size=50)


def _height(node):
    if node is None:
        return 0
    return 1 + max(_height(node.left), _height(node.right))


@given(values_strategy)
def test_build_gives_sorted_unique_inorder(values):
    root = build_bst(values)
    assert inorder(root) == sorted(set(values))
    assert is_bst(root)


def test_insert_into_empty_tree():
    root = insert(None, 7)
    assert root.data == 7
    assert inorder(root) == [7]


def test_insert_ignores_duplicate():
    root = build_bst([5, 3, 8])
    assert inorder(insert(root, 3)) == [3, 5, 8]


@given(values_strategy, st.data())
def test_delete_removes_value(values, data):
    target = data.draw(st.sampled_from(values))
    root = delete(build_bst(values), target)
    assert inorder(root) == sorted(set(values) - {target})
    assert is_bst(root)


@given(values_strategy)
def test_delete_missing_value_keeps_tree(values):
    root = delete(build_bst(values), 5000)
    assert inorder(root) == sorted(set(values))


def test_delete_from_empty_tree():
    assert delete(None, 1) is None


@given(values_strategy)
def test_min_and_max(values):
    root = build_bst(values)
    assert min_node(root).data == min(values)
    assert max_node(root).data == max(values)


def test_min_max_of_empty_tree_raise():
    with pytest.raises(ValueError):
        min_node(None)
    with pytest.raises(ValueError):
        max_node(None)


@given(values_strategy)
def test_predecessor_and_successor_of_root(values):
    root = build_bst(values)
    smaller = [v for v in values if v < root.data]
    larger = [v for v in values if v > root.data]
    pred = inorder_predecessor(root)
    succ = inorder_successor(root)
    assert (pred.data if pred else None) == (max(smaller) if smaller else None)
    assert (succ.data if succ else None) == (min(larger) if larger else None)


def test_is_bst_rejects_bad_trees():
    assert not is_bst(from_level_order([5, 6, 7]))
    assert not is_bst(from_level_order([10, 5, 15, 1, 12]))
    assert not is_bst(from_level_order([5, 5]))
    assert is_bst(None)


@given(values_strategy)
def test_largest_bst_of_bst_is_whole_tree(values):
    assert largest_bst_size(build_bst(values)) == len(set(values))


def test_largest_bst_in_mixed_tree():
    root = from_level_order([10, 5, 15, 1, 8, None, 7])
    assert largest_bst_size(root) == 3


def test_largest_bst_sees_deep_violation():
    root = from_level_order([10, 5, 15, 1, 12])
    assert largest_bst_size(root) == 3


def test_largest_bst_of_empty_tree():
    assert largest_bst_size(None) == 0


@given(values_strategy)
def test_bst_from_preorder_round_trip(values):
    order = preorder(build_bst(values))
    root = bst_from_preorder(order)
    assert preorder(root) == order
    assert is_bst(root)


def test_bst_from_invalid_preorder_raises():
    with pytest.raises(ValueError):
        bst_from_preorder([5, 10, 3])


def test_bst_from_empty_preorder():
    assert bst_from_preorder([]) is None


@given(values_strategy)
def test_balance_keeps_values_and_minimises_height(values):
    root = build_bst(values)
    balanced = balance(root)
    count = len(set(values))
    assert inorder(balanced) == inorder(root)
    assert is_bst(balanced)
    assert _height(balanced) == math.ceil(math.log2(count + 1))


def test_balance_of_empty_tree():
    assert balance(None) is None


@given(
    st.lists(st.integers(), max_size=30).map(sorted),
    st.lists(st.integers(), max_size=30).map(sorted),
)
def test_merge_sorted(first, second):
    assert merge_sorted(first, second) == sorted(first + second)


@given(values_strategy, st.data())
def test_kth_smallest(values, data):
    unique = sorted(set(values))
    k = data.draw(st.integers(1, len(unique)))
    assert kth_smallest(build_bst(values), k) == unique[k - 1]


@pytest.mark.parametrize("k", [0, 4])
def test_kth_smallest_out_of_range(k):
    with pytest.raises(IndexError):
        kth_smallest(build_bst([2, 1, 3]), k)