import pytest
from hypothesis import given
from hypothesis import strategies as st

from dsakit.searching import (
    allocate_pages,
    binary_search,
    find_pivot,
    is_allocation_possible,
    mountain_peak,
    search_rotated,
)

sorted_unique = st.lists(st.integers(-1000, 1000), min_size=1, max_size=30, unique=True).map(
    sorted
)


def test_binary_search_example():
    values = [2, 5, 8, 11, 14, 19, 21, 32, 45, 98, 110]
    assert values[binary_search(values, 19)] == 19


@given(sorted_unique)
def test_binary_search_finds_every_element(values):
    for value in values:
        assert binary_search(values, value) == values.index(value)


@given(sorted_unique, st.integers(-1000, 1000))
def test_binary_search_missing(values, target):
    if target in values:
        assert values[binary_search(values, target)] == target
    else:
        assert binary_search(values, target) == -1


def test_binary_search_respects_range():
    values = [1, 2, 3, 4, 5]
    assert binary_search(values, 1, 2, 4) == -1


def test_find_pivot_unrotated():
    assert find_pivot([1, 2, 3, 4]) == -1


@given(sorted_unique, st.data())
def test_find_pivot_on_rotation(values, data):
    k = data.draw(st.integers(1, len(values)))
    rotated = values[k:] + values[:k]
    pivot = find_pivot(rotated)
    if k == len(values):
        assert pivot == -1
    else:
        assert rotated[pivot] == max(values)


def test_search_rotated_example():
    nums = [9, 12, 15, 16, 19, 2, 4, 5, 6, 8]
    assert nums[search_rotated(nums, 5)] == 5
    assert nums[search_rotated(nums, 16)] == 16
    assert search_rotated(nums, 7) == -1


@given(sorted_unique, st.data())
def test_search_rotated_finds_all(values, data):
    k = data.draw(st.integers(0, len(values) - 1))
    rotated = values[k:] + values[:k]
    for value in values:
        assert rotated[search_rotated(rotated, value)] == value


def test_search_rotated_empty():
    assert search_rotated([], 3) == -1


def test_mountain_peak_example():
    assert mountain_peak([2, 7, 12, 16, 18, 15, 13, 5, 1]) == 18


@given(st.lists(st.integers(-100, 100), min_size=1, max_size=20, unique=True), st.data())
def test_mountain_peak_is_maximum(values, data):
    ordered = sorted(values)
    peak = ordered[-1]
    rest = ordered[:-1]
    split = data.draw(st.integers(0, len(rest)))
    chosen = data.draw(st.permutations(rest))
    left = sorted(chosen[:split])
    right = sorted(chosen[split:], reverse=True)
    assert mountain_peak(left + [peak] + right) == peak


def test_mountain_peak_empty():
    with pytest.raises(ValueError):
        mountain_peak([])


def test_allocate_pages_example():
    assert allocate_pages([12, 34, 67, 90], 2) == 113


@given(st.lists(st.integers(1, 100), min_size=1, max_size=8), st.data())
def test_allocate_pages_is_minimal(pages, data):
    students = data.draw(st.integers(1, len(pages)))
    result = allocate_pages(pages, students)
    assert max(pages) <= result <= sum(pages)
    assert is_allocation_possible(pages, students, result)
    assert not is_allocation_possible(pages, students, result - 1)


def test_allocate_pages_one_student_reads_all():
    pages = [3, 1, 4, 1, 5]
    assert allocate_pages(pages, 1) == sum(pages)


def test_allocate_pages_rejects_no_students():
    with pytest.raises(ValueError):
        allocate_pages([1, 2], 0)