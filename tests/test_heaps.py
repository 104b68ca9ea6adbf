import pytest
from hypothesis import given
from hypothesis import strategies as st

from dsakit.heaps import (
    MaxHeap,
    MinHeap,
    build_max_heap,
    build_min_heap,
    heap_sort,
    heapify_max,
    heapify_min,
    kth_largest,
    kth_smallest,
    merge_heaps,
    min_operations,
)

ints = st.lists(st.integers(min_value=-1000, max_value=1000))
nonempty = st.lists(st.integers(min_value=-1000, max_value=1000), min_size=1)


def _is_heap(values, above_or_equal):
    return all(
        above_or_equal(values[(i - 1) // 2], values[i]) for i in range(1, len(values))
    )


def _is_max_heap(values):
    return _is_heap(values, lambda a, b: a >= b)


def _is_min_heap(values):
    return _is_heap(values, lambda a, b: a <= b)


def test_heap_sort_source_example():
    values = [34, 23, 13, 45, 52, 67]
    assert heap_sort(values) == sorted(values)


@given(ints)
def test_heap_sort_sorts(values):
    assert heap_sort(values) == sorted(values)


@given(ints)
def test_build_max_heap(values):
    heap = build_max_heap(values)
    assert _is_max_heap(heap)
    assert sorted(heap) == sorted(values)


@given(ints)
def test_build_min_heap(values):
    heap = build_min_heap(values)
    assert _is_min_heap(heap)
    assert sorted(heap) == sorted(values)


def test_heapify_max_source_example():
    values = [54, 53, 60, 34, 72, 55, 85, 90]
    for index in reversed(range(len(values) // 2)):
        heapify_max(values, len(values), index)
    assert _is_max_heap(values)
    assert values[0] == 90


def test_heapify_min_source_example():
    values = [54, 53, 60, 34, 72, 55, 85, 20]
    for index in reversed(range(len(values) // 2)):
        heapify_min(values, len(values), index)
    assert _is_min_heap(values)
    assert values[0] == 20


def test_heapify_stays_within_size():
    values = [1, 5, 9]
    heapify_max(values, 2, 0)
    assert values[0] == 5
    assert values[2] == 9


def test_heapify_rejects_oversized_size():
    with pytest.raises(ValueError):
        heapify_max([1, 2], 3, 0)


@given(ints, ints)
def test_merge_heaps(a, b):
    merged = merge_heaps(build_max_heap(a), build_max_heap(b))
    assert _is_max_heap(merged)
    assert sorted(merged) == sorted(a + b)


@given(nonempty, st.data())
def test_kth_smallest_and_largest(values, data):
    k = data.draw(st.integers(min_value=1, max_value=len(values)))
    assert kth_smallest(values, k) == sorted(values)[k - 1]
    assert kth_largest(values, k) == sorted(values)[len(values) - k]


@pytest.mark.parametrize("k", [0, 10])
def test_kth_rejects_bad_k(k):
    values = [2, 5, 7, 12, 14, 23, 56, 17, 19]
    with pytest.raises(ValueError):
        kth_smallest(values, k)
    with pytest.raises(ValueError):
        kth_largest(values, k)


@pytest.mark.parametrize(
    ("values", "k", "expected"),
    [([1, 10, 12, 9, 2, 3], 6, 2), ([5, 4, 6, 4], 4, 0), ([1, 2], 10, -1)],
)
def test_min_operations(values, k, expected):
    assert min_operations(values, k) == expected


def test_min_operations_empty():
    with pytest.raises(ValueError):
        min_operations([], 3)


def test_max_heap_source_sequence():
    heap = MaxHeap()
    for value in (23, 42, 83, 12, 17):
        heap.insert(value)
    assert heap.delete() == 83
    assert heap.delete() == 42
    heap.insert(35)
    assert list(heap) == [35, 23, 17, 12]
    assert len(heap) == 4


@given(ints)
def test_max_heap_deletes_in_descending_order(values):
    heap = MaxHeap(values)
    assert _is_max_heap(list(heap))
    out = [heap.delete() for _ in range(len(values))]
    assert out == sorted(values, reverse=True)
    assert len(heap) == 0


@given(ints)
def test_min_heap_deletes_in_ascending_order(values):
    heap = MinHeap()
    for value in values:
        heap.insert(value)
    assert _is_min_heap(list(heap))
    assert len(heap) == len(values)
    out = [heap.delete() for _ in range(len(values))]
    assert out == sorted(values)


@pytest.mark.parametrize("cls", [MaxHeap, MinHeap])
def test_delete_from_empty_heap(cls):
    with pytest.raises(IndexError):
        cls().delete()