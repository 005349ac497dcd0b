import random

import pytest

from dsakit.arrays import (
    find_disappeared_numbers,
    find_duplicates,
    find_error_nums,
    first_missing_positive,
    missing_number,
)


@pytest.mark.parametrize("nums", [[1, 2, 0], [3, 4, -1, 1], [7, 8, 9, 11, 12], [1, 2, 3], [], [2, 2, 1]])
def test_first_missing_positive_invariants(nums):
    result = first_missing_positive(nums)
    assert result >= 1
    assert result not in nums
    assert all(value in nums for value in range(1, result))


def test_first_missing_positive_keeps_input():
    nums = [3, 4, -1, 1]
    snapshot = list(nums)
    first_missing_positive(nums)
    assert nums == snapshot


@pytest.mark.parametrize("n,removed", [(1, 0), (1, 1), (5, 3), (9, 9), (9, 0)])
def test_missing_number(n, removed):
    nums = [value for value in range(n + 1) if value != removed]
    random.Random(n).shuffle(nums)
    assert missing_number(nums) == removed


def _replace(n, replacements, seed):
    """Build 1..n where each key of replacements is replaced by its value."""
    nums = [replacements.get(value, value) for value in range(1, n + 1)]
    random.Random(seed).shuffle(nums)
    return nums


@pytest.mark.parametrize(
    "n,replacements",
    [(8, {5: 2, 6: 3}), (2, {2: 1}), (6, {1: 4, 2: 5, 3: 6}), (4, {})],
)
def test_find_duplicates(n, replacements):
    nums = _replace(n, replacements, n)
    snapshot = list(nums)
    result = find_duplicates(nums)
    assert sorted(result) == sorted(replacements.values())
    assert nums == snapshot


@pytest.mark.parametrize(
    "n,replacements",
    [(8, {5: 2, 6: 3}), (2, {2: 1}), (6, {1: 4, 2: 5, 3: 6}), (4, {})],
)
def test_find_disappeared_numbers(n, replacements):
    nums = _replace(n, replacements, n + 1)
    assert find_disappeared_numbers(nums) == sorted(replacements)


@pytest.mark.parametrize("n,missing,duplicate", [(4, 3, 2), (2, 2, 1), (2, 1, 2), (7, 1, 7)])
def test_find_error_nums(n, missing, duplicate):
    nums = _replace(n, {missing: duplicate}, n)
    assert find_error_nums(nums) == (duplicate, missing)


def test_find_error_nums_on_permutation():
    assert find_error_nums([3, 1, 2]) is None