"""Classic dynamic-programming problems on grids, strings and sequences."""

from __future__ import annotations

from bisect import bisect_left
from collections.abc import Iterable, Sequence
from itertools import combinations
from math import comb, inf
from typing import Any


def unique_paths(m: int, n: int) -> int:
    """Return the number of right/down paths across an m by n grid."""
    if m < 0 or n < 0:
        raise ValueError("grid dimensions must not be negative")
    if m == 0 or n == 0:
        return 0
    return comb(m + n - 2, m - 1)


def _require_grid(grid: Sequence[Sequence[Any]]) -> None:
    if not grid or not grid[0]:
        raise ValueError("grid must have at least one cell")


def unique_paths_with_obstacles(grid: Sequence[Sequence[int]]) -> int:
    """Return the number of right/down paths that avoid cells marked 1."""
    _require_grid(grid)
    width = len(grid[0])
    ways = [0] * width
    ways[0] = 1
    for row in grid:
        for col, cell in enumerate(row):
            if cell == 1:
                ways[col] = 0
            elif col > 0:
                ways[col] += ways[col - 1]
    return ways[-1]


def min_path_sum(grid: Sequence[Sequence[int]]) -> int:
    """Return the smallest sum along a right/down path from corner to corner."""
    _require_grid(grid)
    best: list[float] = [inf] * len(grid[0])
    best[0] = 0
    for row in grid:
        for col, cell in enumerate(row):
            from_left = best[col - 1] if col > 0 else inf
            best[col] = cell + min(best[col], from_left)
    return int(best[-1])


def climb_stairs(n: int) -> int:
    """Return the number of ways to climb n steps taking one or two at a time."""
    if n < 0:
        raise ValueError("n must not be negative")
    current, following = 1, 1
    for _ in range(n):
        current, following = following, current + following
    return current


def edit_distance(word1: str, word2: str) -> int:
    """Return the fewest insertions, deletions and substitutions turning word1 into word2."""
    previous = list(range(len(word2) + 1))
    for i, a in enumerate(word1, start=1):
        current = [i]
        for j, b in enumerate(word2, start=1):
            if a == b:
                current.append(previous[j - 1])
            else:
                current.append(1 + min(previous[j - 1], previous[j], current[j - 1]))
        previous = current
    return previous[-1]


def rob(nums: Iterable[int]) -> int:
    """Return the largest sum of values with no two adjacent ones taken."""
    taken = skipped = 0
    for value in nums:
        taken, skipped = skipped + value, max(taken, skipped)
    return max(taken, skipped)


def length_of_lis(nums: Iterable[Any]) -> int:
    """Return the length of the longest strictly increasing subsequence."""
    tails: list[Any] = []
    for value in nums:
        index = bisect_left(tails, value)
        if index == len(tails):
            tails.append(value)
        else:
            tails[index] = value
    return len(tails)


def coin_change(coins: Iterable[int], amount: int) -> int:
    """Return the fewest coins making up amount, or -1 if it cannot be made."""
    if amount < 0:
        raise ValueError("amount must not be negative")
    denominations = list(coins)
    if any(coin < 1 for coin in denominations):
        raise ValueError("coins must be positive")
    fewest: list[float] = [0] + [inf] * amount
    for coin in denominations:
        for total in range(coin, amount + 1):
            fewest[total] = min(fewest[total], fewest[total - coin] + 1)
    return -1 if fewest[amount] == inf else int(fewest[amount])


def can_partition(nums: Iterable[int]) -> bool:
    """Return whether the values split into two groups of equal sum."""
    values = list(nums)
    if any(value < 0 for value in values):
        raise ValueError("values must not be negative")
    total = sum(values)
    if total % 2:
        return False
    target = total // 2
    reachable = {0}
    for value in values:
        reachable |= {s + value for s in reachable if s + value <= target}
        if target in reachable:
            return True
    return target in reachable


def longest_common_subsequence(text1: Sequence[Any], text2: Sequence[Any]) -> int:
    """Return the length of the longest subsequence shared by both texts."""
    previous = [0] * (len(text2) + 1)
    for a in text1:
        current = [0]
        for j, b in enumerate(text2, start=1):
            if a == b:
                current.append(previous[j - 1] + 1)
            else:
                current.append(max(previous[j], current[j - 1]))
        previous = current
    return previous[-1]


def longest_palindrome_subseq(s: str) -> int:
    """Return the length of the longest palindromic subsequence of s."""
    return longest_common_subsequence(s, s[::-1])


def delete_distance(word1: str, word2: str) -> int:
    """Return the fewest character deletions that make the two words equal."""
    shared = longest_common_subsequence(word1, word2)
    return len(word1) + len(word2) - 2 * shared


def min_falling_path_sum(matrix: Sequence[Sequence[int]]) -> int:
    """Return the smallest sum of a top-to-bottom path moving at most one column per row."""
    _require_grid(matrix)
    below = list(matrix[-1])
    last = len(below) - 1
    for row in reversed(matrix[:-1]):
        below = [
            cell + min(below[max(col - 1, 0) : min(col + 1, last) + 1])
            for col, cell in enumerate(row)
        ]
    return min(below)


def minimum_difference(nums: Sequence[int]) -> int:
    """Split 2n values into two halves of n and return the smallest difference of sums."""
    if len(nums) % 2:
        raise ValueError("nums must hold an even number of values")
    half = len(nums) // 2
    first, second = list(nums[:half]), list(nums[half:])
    total = sum(nums)

    left = [[sum(c) for c in combinations(first, size)] for size in range(half + 1)]
    right = [sorted(sum(c) for c in combinations(second, size)) for size in range(half + 1)]

    best: float = inf
    for size, sums in enumerate(left):
        candidates = right[half - size]
        for a in sums:
            index = bisect_left(candidates, total // 2 - a)
            for b in candidates[max(index - 1, 0) : index + 1]:
                best = min(best, abs(total - 2 * (a + b)))
    return int(best)