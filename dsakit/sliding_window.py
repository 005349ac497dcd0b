"""Sliding-window problems over sequences."""

from __future__ import annotations

from collections import Counter
from collections.abc import Hashable, Iterable, Sequence


def length_of_longest_substring(s: str) -> int:
    """Return the length of the longest substring without repeated characters."""
    last_seen: dict[str, int] = {}
    start = 0
    best = 0
    for index, char in enumerate(s):
        if last_seen.get(char, -1) >= start:
            start = last_seen[char] + 1
        last_seen[char] = index
        best = max(best, index - start + 1)
    return best


def _windows(items: Sequence[Hashable], limit: int):
    """Yield, for each right end, the longest window start with at most limit kinds."""
    counts: Counter = Counter()
    left = 0
    for right, item in enumerate(items):
        counts[item] += 1
        while len(counts) > limit:
            outgoing = items[left]
            counts[outgoing] -= 1
            if not counts[outgoing]:
                del counts[outgoing]
            left += 1
        yield left, right


def total_fruit(fruits: Iterable[Hashable]) -> int:
    """Return the longest run of consecutive fruits holding at most two kinds."""
    return max((right - left + 1 for left, right in _windows(list(fruits), 2)), default=0)


def _count_at_most(nums: Sequence[Hashable], k: int) -> int:
    return sum(right - left + 1 for left, right in _windows(nums, k))


def subarrays_with_k_distinct(nums: Iterable[Hashable], k: int) -> int:
    """Return the number of subarrays holding exactly k distinct values."""
    if k < 1:
        raise ValueError("k must be at least 1")
    values = list(nums)
    return _count_at_most(values, k) - _count_at_most(values, k - 1)