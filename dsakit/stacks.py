"""Stack-based problems and a stack that reports its minimum."""

from __future__ import annotations

import operator
from collections.abc import Callable, Iterable, Sequence

_OPENERS = "([{"
_MATCHING = {")": "(", "]": "[", "}": "{"}


def is_valid_parentheses(s: str) -> bool:
    """Return whether every bracket in s is closed in the right order.

    Any character that is not an opening bracket closes the innermost one.
    """
    stack: list[str] = []
    for char in s:
        if char in _OPENERS:
            stack.append(char)
            continue
        if not stack:
            return False
        opener = _MATCHING.get(char)
        if opener is not None and stack[-1] != opener:
            return False
        stack.pop()
    return not stack


def trap(height: Iterable[int]) -> int:
    """Return how much rain water the elevation map holds."""
    heights = list(height)
    stack: list[int] = []
    water = 0
    for index, level in enumerate(heights):
        while stack and level > heights[stack[-1]]:
            bottom = stack.pop()
            if not stack:
                break
            left = stack[-1]
            bounded = min(level, heights[left]) - heights[bottom]
            water += (index - left - 1) * bounded
        stack.append(index)
    return water


class MinStack:
    """A stack that reports its smallest element in constant time."""

    def __init__(self) -> None:
        self._items: list[tuple[int, int]] = []

    def __len__(self) -> int:
        return len(self._items)

    def push(self, val: int) -> None:
        current = min(val, self._items[-1][1]) if self._items else val
        self._items.append((val, current))

    def pop(self) -> int:
        if not self._items:
            raise IndexError("pop from empty MinStack")
        return self._items.pop()[0]

    def top(self) -> int:
        if not self._items:
            raise IndexError("top of empty MinStack")
        return self._items[-1][0]

    def get_min(self) -> int:
        if not self._items:
            raise IndexError("minimum of empty MinStack")
        return self._items[-1][1]


def next_greater_element(nums1: Iterable[int], nums2: Iterable[int]) -> list[int]:
    """For each value of nums1, give the next greater value after it in nums2, or -1."""
    values = list(nums2)
    greater: list[int] = []
    stack: list[int] = []
    for value in reversed(values):
        while stack and stack[-1] < value:
            stack.pop()
        greater.append(stack[-1] if stack else -1)
        stack.append(value)
    greater.reverse()
    return [found for wanted in nums1 for value, found in zip(values, greater) if value == wanted]


def next_greater_elements(nums: Sequence[int]) -> list[int]:
    """Give each value's next greater value in the circular array, or -1."""
    n = len(nums)
    result = [-1] * n
    stack: list[int] = []
    for i in reversed(range(2 * n)):
        value = nums[i % n]
        while stack and stack[-1] <= value:
            stack.pop()
        result[i % n] = stack[-1] if stack else -1
        stack.append(value)
    return result


def asteroid_collision(asteroids: Iterable[int]) -> list[int]:
    """Return the asteroids left after all collisions."""
    stack: list[int] = []
    for asteroid in asteroids:
        alive = True
        while alive and asteroid < 0 and stack and stack[-1] > 0:
            if stack[-1] < -asteroid:
                stack.pop()
            elif stack[-1] == -asteroid:
                stack.pop()
                alive = False
            else:
                alive = False
        if alive:
            stack.append(asteroid)
    return stack


def _nearest(
    nums: Sequence[int],
    indices: Iterable[int],
    should_pop: Callable[[int, int], bool],
    default: int,
) -> list[int]:
    bounds = [default] * len(nums)
    stack: list[int] = []
    for i in indices:
        while stack and should_pop(nums[stack[-1]], nums[i]):
            stack.pop()
        bounds[i] = stack[-1] if stack else default
        stack.append(i)
    return bounds


def sub_array_ranges(nums: Iterable[int]) -> int:
    """Return the sum of (max - min) over every subarray."""
    values = list(nums)
    n = len(values)
    forward = range(n)
    backward = range(n - 1, -1, -1)
    prev_greater = _nearest(values, forward, operator.lt, -1)
    next_greater = _nearest(values, backward, operator.le, n)
    prev_smaller = _nearest(values, forward, operator.gt, -1)
    next_smaller = _nearest(values, backward, operator.ge, n)
    largest = sum(
        (i - pg) * (ng - i) * value
        for i, (value, pg, ng) in enumerate(zip(values, prev_greater, next_greater))
    )
    smallest = sum(
        (i - ps) * (ns - i) * value
        for i, (value, ps, ns) in enumerate(zip(values, prev_smaller, next_smaller))
    )
    return largest - smallest