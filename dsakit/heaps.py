"""Binary heaps: sift-down, heap construction, heap sort and heap-based selection."""

from __future__ import annotations

import heapq
from typing import Callable, Iterable, Iterator, MutableSequence, Sequence

_Order = Callable[[int, int], bool]


def _greater(a: int, b: int) -> bool:
    return a > b


def _less(a: int, b: int) -> bool:
    return a < b


def _sift_down(
    values: MutableSequence[int], size: int, index: int, above: _Order
) -> None:
    if not 0 <= size <= len(values):
        raise ValueError(f"size {size} is outside 0..{len(values)}")
    while True:
        best = index
        for child in (2 * index + 1, 2 * index + 2):
            if child < size and above(values[child], values[best]):
                best = child
        if best == index:
            return
        values[index], values[best] = values[best], values[index]
        index = best


def _sift_up(values: MutableSequence[int], index: int, above: _Order) -> None:
    while index > 0:
        parent = (index - 1) // 2
        if not above(values[index], values[parent]):
            return
        values[index], values[parent] = values[parent], values[index]
        index = parent


def heapify_max(values: MutableSequence[int], size: int, index: int) -> None:
    """Sift ``values[index]`` down so the subtree is a max-heap within ``values[:size]``."""
    _sift_down(values, size, index, _greater)


def heapify_min(values: MutableSequence[int], size: int, index: int) -> None:
    """Sift ``values[index]`` down so the subtree is a min-heap within ``values[:size]``."""
    _sift_down(values, size, index, _less)


def build_max_heap(values: Iterable[int]) -> list[int]:
    """Return the values arranged as a 0-based array max-heap."""
    heap = list(values)
    for index in reversed(range(len(heap) // 2)):
        heapify_max(heap, len(heap), index)
    return heap


def build_min_heap(values: Iterable[int]) -> list[int]:
    """Return the values arranged as a 0-based array min-heap."""
    heap = list(values)
    for index in reversed(range(len(heap) // 2)):
        heapify_min(heap, len(heap), index)
    return heap


def heap_sort(values: Iterable[int]) -> list[int]:
    """Return the values sorted ascending, using an in-place max-heap."""
    heap = build_max_heap(values)
    for end in range(len(heap) - 1, 0, -1):
        heap[0], heap[end] = heap[end], heap[0]
        heapify_max(heap, end, 0)
    return heap


def merge_heaps(first: Iterable[int], second: Iterable[int]) -> list[int]:
    """Merge two max-heaps into a single max-heap."""
    return build_max_heap([*first, *second])


def _check_k(values: Sequence[int], k: int) -> None:
    if not 1 <= k <= len(values):
        raise ValueError(f"k must lie between 1 and {len(values)}")


def kth_smallest(values: Sequence[int], k: int) -> int:
    """Return the ``k``-th smallest value (1-based), keeping a max-heap of size ``k``."""
    _check_k(values, k)
    kept: list[int] = []
    for value in values:
        heapq.heappush(kept, -value)
        if len(kept) > k:
            heapq.heappop(kept)
    return -kept[0]


def kth_largest(values: Sequence[int], k: int) -> int:
    """Return the ``k``-th largest value (1-based), keeping a min-heap of size ``k``."""
    _check_k(values, k)
    kept: list[int] = []
    for value in values:
        heapq.heappush(kept, value)
        if len(kept) > k:
            heapq.heappop(kept)
    return kept[0]


def min_operations(values: Iterable[int], k: int) -> int:
    """Count merges of the two smallest values until all are at least ``k``.

    Returns -1 when that cannot be reached.
    """
    heap = list(values)
    if not heap:
        raise ValueError("values must not be empty")
    heapq.heapify(heap)
    operations = 0
    while heap[0] < k and len(heap) >= 2:
        heapq.heappush(heap, heapq.heappop(heap) + heapq.heappop(heap))
        operations += 1
    return operations if heap[0] >= k else -1


class _ArrayHeap:
    _above: _Order

    def __init__(self, values: Iterable[int] = ()) -> None:
        self._items: list[int] = []
        for value in values:
            self.insert(value)

    def insert(self, value: int) -> None:
        """Add ``value`` to the heap."""
        self._items.append(value)
        _sift_up(self._items, len(self._items) - 1, type(self)._above)

    def delete(self) -> int:
        """Remove and return the root; raise IndexError when the heap is empty."""
        if not self._items:
            raise IndexError("delete from empty heap")
        root = self._items[0]
        last = self._items.pop()
        if self._items:
            self._items[0] = last
            _sift_down(self._items, len(self._items), 0, type(self)._above)
        return root

    def __iter__(self) -> Iterator[int]:
        return iter(list(self._items))

    def __len__(self) -> int:
        return len(self._items)


class MaxHeap(_ArrayHeap):
    """A max-heap kept in an array; iteration yields the array in level order."""

    _above = staticmethod(_greater)

    def insert(self, value: int) -> None:
        """Add ``value`` to the heap."""
        super().insert(value)

    def delete(self) -> int:
        """Remove and return the largest value; raise IndexError when empty."""
        return super().delete()

    def __iter__(self) -> Iterator[int]:
        return super().__iter__()

    def __len__(self) -> int:
        return super().__len__()


class MinHeap(_ArrayHeap):
    """A min-heap kept in an array; iteration yields the array in level order."""

    _above = staticmethod(_less)

    def insert(self, value: int) -> None:
        """Add ``value`` to the heap."""
        super().insert(value)

    def delete(self) -> int:
        """Remove and return the smallest value; raise IndexError when empty."""
        return super().delete()

    def __iter__(self) -> Iterator[int]:
        return super().__iter__()

    def __len__(self) -> int:
        return super().__len__()