"""Problems solved with a stack: collisions, spans, next greater/smaller, brackets."""

from __future__ import annotations

from typing import Iterable, Sequence

_PAIRS = {")": "(", "]": "[", "}": "{"}
_OPENERS = frozenset(_PAIRS.values())


def asteroid_collision(asteroids: Iterable[int]) -> list[int]:
    """Return the asteroids left after all collisions.

    Positive (or zero) values move right, negative ones left; on meeting, the
    smaller explodes and equal sizes both explode.
    """
    stack: list[int] = []
    for incoming in asteroids:
        alive = True
        while alive and stack and stack[-1] >= 0 and incoming < 0:
            top = stack[-1]
            if top < -incoming:
                stack.pop()
                continue
            if top == -incoming:
                stack.pop()
            alive = False
        if alive:
            stack.append(incoming)
    return stack


def stock_span(prices: Sequence[int]) -> list[int]:
    """Return for each day the count of consecutive days up to it priced no higher."""
    spans: list[int] = []
    stack: list[int] = []
    for day, price in enumerate(prices):
        while stack and prices[stack[-1]] <= price:
            stack.pop()
        spans.append(day - stack[-1] if stack else day + 1)
        stack.append(day)
    return spans


def next_greater(values: Sequence[int]) -> list[int]:
    """Return for each value the first strictly greater value to its right, or -1."""
    result = [-1] * len(values)
    stack: list[int] = []
    for index in reversed(range(len(values))):
        current = values[index]
        while stack and stack[-1] <= current:
            stack.pop()
        if stack:
            result[index] = stack[-1]
        stack.append(current)
    return result


def next_smaller(values: Sequence[int]) -> list[int]:
    """Return for each value the first strictly smaller value to its right, or -1."""
    result = [-1] * len(values)
    stack: list[int] = []
    for index in reversed(range(len(values))):
        current = values[index]
        while stack and stack[-1] >= current:
            stack.pop()
        if stack:
            result[index] = stack[-1]
        stack.append(current)
    return result


def is_valid_parentheses(text: str) -> bool:
    """Tell whether ``text`` is a balanced string of ``()``, ``[]`` and ``{}``.

    Any other character makes the string invalid.
    """
    stack: list[str] = []
    for char in text:
        if char in _OPENERS:
            stack.append(char)
        elif stack and _PAIRS.get(char) == stack[-1]:
            stack.pop()
        else:
            return False
    return not stack