"""Stacks and queues built from one another, and recursive stack manipulations.

Stacks passed to the functions here are Python lists whose top is the last item.
"""

from __future__ import annotations

from collections import deque
from itertools import accumulate
from typing import Iterable


class ArrayStack:
    """A stack of fixed capacity."""

    def __init__(self, capacity: int) -> None:
        if capacity < 1:
            raise ValueError("capacity must be at least 1")
        self.capacity = capacity
        self._items: list[int] = []

    def push(self, value: int) -> None:
        """Put ``value`` on top; raise OverflowError when the stack is full."""
        if len(self._items) == self.capacity:
            raise OverflowError("stack is at maximum capacity")
        self._items.append(value)

    def pop(self) -> int:
        """Remove and return the top value; raise IndexError when empty."""
        if not self._items:
            raise IndexError("pop from empty stack")
        return self._items.pop()

    def peek(self) -> int:
        """Return the top value without removing it; raise IndexError when empty."""
        if not self._items:
            raise IndexError("peek at empty stack")
        return self._items[-1]

    def __len__(self) -> int:
        return len(self._items)


class QueueStack:
    """A stack built from two FIFO queues."""

    def __init__(self) -> None:
        self._main: deque[int] = deque()
        self._spare: deque[int] = deque()

    def push(self, value: int) -> None:
        """Put ``value`` on top of the stack."""
        self._spare.append(value)
        while self._main:
            self._spare.append(self._main.popleft())
        self._main, self._spare = self._spare, self._main

    def pop(self) -> int:
        """Remove and return the most recently pushed value; raise IndexError when empty."""
        if not self._main:
            raise IndexError("pop from empty stack")
        return self._main.popleft()


class StackQueue:
    """A FIFO queue built from two stacks."""

    def __init__(self) -> None:
        self._main: list[int] = []
        self._spare: list[int] = []

    def push(self, value: int) -> None:
        """Add ``value`` at the back of the queue."""
        while self._main:
            self._spare.append(self._main.pop())
        self._main.append(value)
        while self._spare:
            self._main.append(self._spare.pop())

    def pop(self) -> int:
        """Remove and return the oldest value; raise IndexError when empty."""
        if not self._main:
            raise IndexError("pop from empty queue")
        return self._main.pop()


def delete_middle_of_stack(stack: list[int]) -> int:
    """Remove the item ``len // 2`` places below the top; return it."""
    if not stack:
        raise IndexError("stack is empty")
    return stack.pop(len(stack) - 1 - len(stack) // 2)


def insert_at_bottom(stack: list[int], value: int) -> None:
    """Put ``value`` underneath every item of the stack."""
    stack.insert(0, value)


def reverse_stack(stack: list[int]) -> None:
    """Reverse the stack in place, so the bottom item ends on top."""
    stack.reverse()


def sort_stack(stack: list[int]) -> None:
    """Sort the stack in place so the largest item is on top."""
    stack.sort()


def min_at_pop(values: Iterable[int]) -> list[int]:
    """Push the values, then pop them all; return the stack's minimum before each pop."""
    return list(reversed(list(accumulate(values, min))))


def reverse_string(text: str) -> str:
    """Return ``text`` with its characters in reverse order."""
    return text[::-1]