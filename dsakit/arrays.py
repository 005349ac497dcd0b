"""Problems on arrays holding values from a known range."""

from __future__ import annotations

from collections import Counter
from collections.abc import Iterable
from itertools import count
from typing import Optional


def first_missing_positive(nums: Iterable[int]) -> int:
    """Return the smallest positive integer that does not occur in nums."""
    present = set(nums)
    return next(candidate for candidate in count(1) if candidate not in present)


def missing_number(nums: Iterable[int]) -> int:
    """Return the one number of 0..n that is absent from n distinct values."""
    present = set(nums)
    return next(value for value in range(len(present) + 1) if value not in present)


def find_duplicates(nums: Iterable[int]) -> list[int]:
    """Return the values that appear twice, where every value lies in 1..n."""
    values = list(nums)
    i = 0
    while i < len(values):
        target = values[i] - 1
        if i != target and values[i] != values[target]:
            values[i], values[target] = values[target], values[i]
        else:
            i += 1
    return [value for position, value in enumerate(values, start=1) if value != position]


def find_disappeared_numbers(nums: Iterable[int]) -> list[int]:
    """Return, in ascending order, the numbers of 1..n that do not occur."""
    values = list(nums)
    present = set(values)
    return [value for value in range(1, len(values) + 1) if value not in present]


def find_error_nums(nums: Iterable[int]) -> Optional[tuple[int, int]]:
    """Return (duplicated, missing) for a 1..n set with one value replaced.

    Returns None when the values already form a permutation of 1..n.
    """
    values = list(nums)
    counts = Counter(values)
    missing = next((v for v in range(1, len(values) + 1) if v not in counts), None)
    if missing is None:
        return None
    duplicate = next(value for value, seen in counts.items() if seen > 1)
    return duplicate, missing