"""Binary-search algorithms over sorted sequences and integer ranges."""

from __future__ import annotations

import math
from collections.abc import Callable, Sequence
from typing import Any


def binary_search(nums: Sequence[Any], target: Any) -> int:
    """Index of target in a sorted sequence, or -1 if it is absent."""
    lo, hi = 0, len(nums) - 1
    while lo <= hi:
        mid = (lo + hi) // 2
        if nums[mid] == target:
            return mid
        if nums[mid] < target:
            lo = mid + 1
        else:
            hi = mid - 1
    return -1


def first_bad_version(n: int, is_bad: Callable[[int], bool]) -> int:
    """First version for which is_bad holds, searching 0 to n - 1.

    Returns n when none of those versions is bad. is_bad may be asked about
    the version just below the one being checked, down to -1.
    """
    lo, hi = 0, n - 1
    while lo <= hi:
        mid = (lo + hi) // 2
        if is_bad(mid):
            if not is_bad(mid - 1):
                return mid
            hi = mid - 1
        else:
            lo = mid + 1
    return n


def search_insert(nums: Sequence[Any], target: Any) -> int:
    """Index of target in a sorted sequence, or where it would be inserted."""
    lo, hi = 0, len(nums) - 1
    while lo <= hi:
        mid = (lo + hi) // 2
        if nums[mid] == target:
            return mid
        if nums[mid] < target:
            lo = mid + 1
        else:
            hi = mid - 1
    return lo


def is_perfect_square(x: int) -> bool:
    """Return True if x is the square of a whole number."""
    if x < 0:
        return False
    root = math.isqrt(x)
    return root * root == x


def my_sqrt(x: int) -> int:
    """Integer square root of x, rounded down; 0 for negative x."""
    if x < 0:
        return 0
    return math.isqrt(x)


def peak_index_in_mountain(arr: Sequence[Any]) -> int:
    """Index of the peak of a strictly rising then falling sequence.

    Returns -1 for an empty sequence; raises ValueError where the search meets
    a dip or a flat stretch.
    """
    size = len(arr)

    def rises(i: int, j: int) -> bool:
        if i < 0 or j >= size:
            return True
        return arr[i] < arr[j]

    def falls(i: int, j: int) -> bool:
        if i < 0 or j >= size:
            return True
        return arr[i] > arr[j]

    lo, hi = 0, size - 1
    while lo <= hi:
        mid = (lo + hi) // 2
        rising_in = rises(mid - 1, mid)
        falling_out = falls(mid, mid + 1)
        if rising_in and falling_out:
            return mid
        if not rising_in and falling_out:
            hi = mid - 1
        elif rising_in and not falling_out:
            lo = mid + 1
        else:
            raise ValueError(f"not a mountain sequence: dip or plateau at {mid}")
    return -1