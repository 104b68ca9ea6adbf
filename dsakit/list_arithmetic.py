"""Arithmetic on non-negative numbers stored as linked lists of decimal digits.

The most significant digit comes first. The inputs are left untouched.
"""

from __future__ import annotations

from itertools import dropwhile, zip_longest
from typing import Optional

from dsakit.linked_list import ListNode, from_values, to_values


def add_lists(
    first: Optional[ListNode], second: Optional[ListNode]
) -> Optional[ListNode]:
    """Return the digit list of the sum of two digit lists."""
    result: list[int] = []
    carry = 0
    for a, b in zip_longest(
        reversed(to_values(first)), reversed(to_values(second)), fillvalue=0
    ):
        carry, digit = divmod(a + b + carry, 10)
        result.append(digit)
    if carry:
        result.append(carry)
    return from_values(reversed(result))


def _strip_zeros(digits: list[int]) -> list[int]:
    return list(dropwhile(lambda d: d == 0, digits))


def subtract_lists(
    first: Optional[ListNode], second: Optional[ListNode]
) -> ListNode:
    """Return the digit list of the absolute difference of two digit lists.

    Leading zeros are dropped from the result; a zero difference is ``[0]``.
    """
    a = _strip_zeros(to_values(first))
    b = _strip_zeros(to_values(second))
    if (len(a), a) == (len(b), b):
        return ListNode(0)
    larger, smaller = (a, b) if (len(a), a) > (len(b), b) else (b, a)

    result: list[int] = []
    borrow = 0
    for top, bottom in zip_longest(reversed(larger), reversed(smaller), fillvalue=0):
        value = top - borrow - bottom
        borrow = 1 if value < 0 else 0
        result.append(value + 10 * borrow)

    digits = _strip_zeros(result[::-1])
    head = from_values(digits)
    return head if head is not None else ListNode(0)