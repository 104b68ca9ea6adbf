"""Singly linked lists: building, reversing, cycle handling, merging and sorting."""

from __future__ import annotations

from dataclasses import dataclass
from typing import Iterable, Iterator, Optional


@dataclass(eq=False, repr=False)
class ListNode:
    """A list node with a ``next`` link and an optional ``bottom`` link."""

    data: int
    next: Optional[ListNode] = None
    bottom: Optional[ListNode] = None

    def __repr__(self) -> str:
        return f"ListNode({self.data!r})"


def from_values(values: Iterable[int]) -> Optional[ListNode]:
    """Build a list linked through ``next`` and return its head (None if empty)."""
    dummy = ListNode(0)
    tail = dummy
    for value in values:
        tail.next = ListNode(value)
        tail = tail.next
    return dummy.next


def iter_nodes(head: Optional[ListNode]) -> Iterator[ListNode]:
    """Yield the nodes reachable from ``head`` through ``next`` links."""
    node = head
    while node is not None:
        yield node
        node = node.next


def _iter_bottom(head: Optional[ListNode]) -> Iterator[ListNode]:
    node = head
    while node is not None:
        yield node
        node = node.bottom


def to_values(head: Optional[ListNode]) -> list[int]:
    """Return the data of every node along ``next`` links; the list must be acyclic."""
    return [node.data for node in iter_nodes(head)]


def reverse_list(head: Optional[ListNode]) -> Optional[ListNode]:
    """Reverse a list in place and return the new head."""
    prev: Optional[ListNode] = None
    curr = head
    while curr is not None:
        curr.next, prev, curr = prev, curr, curr.next
    return prev


def _meeting_point(head: Optional[ListNode]) -> Optional[ListNode]:
    slow = fast = head
    while fast is not None and fast.next is not None:
        slow = slow.next
        fast = fast.next.next
        if slow is fast:
            return slow
    return None


def has_cycle(head: Optional[ListNode]) -> bool:
    """Tell whether following ``next`` from ``head`` ever loops."""
    return _meeting_point(head) is not None


def find_loop_start(head: Optional[ListNode]) -> Optional[ListNode]:
    """Return the node where the loop begins, or None if there is no loop."""
    meet = _meeting_point(head)
    if meet is None:
        return None
    node = head
    while node is not meet:
        node = node.next
        meet = meet.next
    return node


def remove_cycle(head: Optional[ListNode]) -> bool:
    """Break the loop in place, if any; return whether one was removed."""
    start = find_loop_start(head)
    if start is None:
        return False
    tail = start
    while tail.next is not start:
        tail = tail.next
    tail.next = None
    return True


def sorted_merge(
    head1: Optional[ListNode], head2: Optional[ListNode]
) -> Optional[ListNode]:
    """Merge two ascending lists by relinking their nodes; return the merged head."""
    dummy = ListNode(0)
    tail = dummy
    first, second = head1, head2
    while first is not None and second is not None:
        if first.data <= second.data:
            tail.next, first = first, first.next
        else:
            tail.next, second = second, second.next
        tail = tail.next
    tail.next = first if first is not None else second
    return dummy.next


def _middle(head: ListNode) -> ListNode:
    slow = fast = head
    while fast.next is not None and fast.next.next is not None:
        fast = fast.next.next
        slow = slow.next
    return slow


def merge_sort(head: Optional[ListNode]) -> Optional[ListNode]:
    """Sort a list ascending with merge sort and return the new head."""
    if head is None or head.next is None:
        return head
    mid = _middle(head)
    right = mid.next
    mid.next = None
    return sorted_merge(merge_sort(head), merge_sort(right))


def sorted_insert(head: Optional[ListNode], data: int) -> ListNode:
    """Insert ``data`` into an ascending list, keeping it sorted; return the head."""
    node = ListNode(data)
    if head is None or data <= head.data:
        node.next = head
        return node
    curr = head
    while curr.next is not None and curr.next.data < data:
        curr = curr.next
    node.next = curr.next
    curr.next = node
    return head


def flatten(root: Optional[ListNode]) -> Optional[ListNode]:
    """Flatten a list of ``bottom``-linked sorted sublists into one sorted list.

    The result is a new list whose nodes are linked through both ``next``
    and ``bottom``.
    """
    values = sorted(
        node.data for column in iter_nodes(root) for node in _iter_bottom(column)
    )
    dummy = ListNode(-1)
    last = dummy
    for value in values:
        node = ListNode(value)
        last.next = node
        last.bottom = node
        last = node
    return dummy.next


class LinkedStack:
    """A stack kept as a singly linked list."""

    def __init__(self) -> None:
        self._top: Optional[ListNode] = None
        self._size = 0

    def push(self, value: int) -> None:
        """Put ``value`` on top of the stack."""
        self._top = ListNode(value, next=self._top)
        self._size += 1

    def pop(self) -> int:
        """Remove and return the top value; raise IndexError when empty."""
        if self._top is None:
            raise IndexError("pop from empty stack")
        node = self._top
        self._top = node.next
        node.next = None
        self._size -= 1
        return node.data

    def __len__(self) -> int:
        return self._size