"""Binary search and its variants on sorted, rotated and mountain sequences."""

from __future__ import annotations

from typing import Optional, Sequence


def binary_search(
    values: Sequence[int], target: int, start: int = 0, end: Optional[int] = None
) -> int:
    """Find ``target`` in ascending ``values[start:end + 1]``; return its index or -1."""
    if end is None:
        end = len(values) - 1
    while start <= end:
        mid = start + (end - start) // 2
        if values[mid] == target:
            return mid
        if values[mid] > target:
            end = mid - 1
        else:
            start = mid + 1
    return -1


def find_pivot(values: Sequence[int]) -> int:
    """Return the index of the largest element of a rotated ascending sequence.

    Returns -1 when the sequence is not rotated.
    """
    start, end = 0, len(values) - 1
    while start <= end:
        mid = start + (end - start) // 2
        if mid < end and values[mid] > values[mid + 1]:
            return mid
        if mid > start and values[mid] < values[mid - 1]:
            return mid - 1
        if values[mid] < values[start]:
            end = mid - 1
        else:
            start = mid + 1
    return -1


def search_rotated(values: Sequence[int], target: int) -> int:
    """Find ``target`` in a rotated ascending sequence; return its index or -1."""
    if not values:
        return -1
    pivot = find_pivot(values)
    if pivot == -1:
        return binary_search(values, target)
    if target < values[0]:
        found = binary_search(values, target, pivot + 1, len(values) - 1)
        if found != -1:
            return found
    return binary_search(values, target, 0, pivot)


def mountain_peak(values: Sequence[int]) -> int:
    """Return the peak value of a sequence that rises and then falls."""
    if not values:
        raise ValueError("empty sequence has no peak")
    start, end = 0, len(values) - 1
    while start < end:
        mid = start + (end - start) // 2
        if values[mid] > values[mid + 1]:
            end = mid
        else:
            start = mid + 1
    return values[start]


def is_allocation_possible(pages: Sequence[int], students: int, limit: int) -> bool:
    """Tell whether contiguous books fit ``students`` readers with at most ``limit`` pages each."""
    count = 1
    total = 0
    for book in pages:
        if total + book <= limit:
            total += book
        else:
            count += 1
            if count > students or book > limit:
                return False
            total = book
    return True


def allocate_pages(pages: Sequence[int], students: int) -> int:
    """Return the smallest possible maximum of pages any one student must read."""
    if students < 1:
        raise ValueError("students must be at least 1")
    low, high = 0, sum(pages)
    answer = -1
    while low <= high:
        mid = low + (high - low) // 2
        if is_allocation_possible(pages, students, mid):
            answer = mid
            high = mid - 1
        else:
            low = mid + 1
    return answer