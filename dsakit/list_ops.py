"""In-place edits of singly linked lists: deletions, partial reversals and rotation."""

from __future__ import annotations

from typing import Optional

from dsakit.linked_list import ListNode, iter_nodes, reverse_list


def _length(head: Optional[ListNode]) -> int:
    return sum(1 for _ in iter_nodes(head))


def skip_and_delete(head: Optional[ListNode], m: int, n: int) -> Optional[ListNode]:
    """Keep ``m`` nodes, drop the following ``n``, and repeat to the end.

    A zero ``m`` or ``n`` leaves the list unchanged. Returns the head.
    """
    if m < 0 or n < 0:
        raise ValueError("m and n must not be negative")
    if m == 0 or n == 0:
        return head
    node = head
    while node is not None:
        for _ in range(m - 1):
            node = node.next
            if node is None:
                return head
        after = node.next
        for _ in range(n):
            if after is None:
                break
            after = after.next
        node.next = after
        node = after
    return head


def reverse_between(head: Optional[ListNode], m: int, n: int) -> Optional[ListNode]:
    """Reverse the nodes at 1-based positions ``m`` to ``n`` inclusive; return the head."""
    if not 1 <= m <= n <= _length(head):
        raise ValueError(f"invalid positions {m}..{n}")
    dummy = ListNode(0, next=head)
    before = dummy
    for _ in range(m - 1):
        before = before.next
    first = before.next
    after = first
    for _ in range(n - m + 1):
        after = after.next
    prev, curr = after, first
    while curr is not after:
        curr.next, prev, curr = prev, curr, curr.next
    before.next = prev
    return dummy.next


def reverse_in_groups(head: Optional[ListNode], k: int) -> Optional[ListNode]:
    """Reverse every run of ``k`` nodes; a shorter final run is reversed too."""
    if k < 1:
        raise ValueError("k must be at least 1")
    dummy = ListNode(0, next=head)
    tail = dummy
    curr = head
    while curr is not None:
        group_head = curr
        prev: Optional[ListNode] = None
        for _ in range(k):
            if curr is None:
                break
            curr.next, prev, curr = prev, curr, curr.next
        tail.next = prev
        tail = group_head
    return dummy.next


def rotate(head: Optional[ListNode], k: int) -> Optional[ListNode]:
    """Shift the list left by ``k`` nodes, where ``0 <= k <= len``; return the new head."""
    length = _length(head)
    if not 0 <= k <= length:
        raise ValueError(f"k must lie between 0 and {length}")
    if k in (0, length):
        return head
    split = head
    for _ in range(k - 1):
        split = split.next
    new_head = split.next
    split.next = None
    last = new_head
    while last.next is not None:
        last = last.next
    last.next = head
    return new_head


def sort_by_actual_value(head: Optional[ListNode]) -> Optional[ListNode]:
    """Sort a list ordered by absolute value into ascending order of actual value."""
    if head is None:
        return None
    prev, curr = head, head.next
    while curr is not None:
        if curr.data < 0:
            following = curr.next
            prev.next = following
            curr.next = head
            head = curr
            curr = following
        else:
            prev, curr = curr, curr.next
    return head


def delete_smaller_than_right(head: Optional[ListNode]) -> Optional[ListNode]:
    """Drop every node that has a greater value somewhere to its right."""
    result: Optional[ListNode] = None
    best: Optional[int] = None
    node = reverse_list(head)
    while node is not None:
        following = node.next
        if best is None or node.data >= best:
            best = node.data
            node.next = result
            result = node
        else:
            node.next = None
        node = following
    return result


def delete_middle(head: Optional[ListNode]) -> Optional[ListNode]:
    """Remove the node at 0-based index ``len // 2``; a list of one or none becomes empty."""
    if head is None or head.next is None:
        return None
    prev = head
    for _ in range(_length(head) // 2 - 1):
        prev = prev.next
    removed = prev.next
    prev.next = removed.next
    removed.next = None
    return head


def delete_at(head: Optional[ListNode], position: int) -> Optional[ListNode]:
    """Remove the node at 1-based ``position``; raise IndexError if there is none."""
    if not 1 <= position <= _length(head):
        raise IndexError(f"no node at position {position}")
    if position == 1:
        new_head = head.next
        head.next = None
        return new_head
    prev = head
    for _ in range(position - 2):
        prev = prev.next
    removed = prev.next
    prev.next = removed.next
    removed.next = None
    return head