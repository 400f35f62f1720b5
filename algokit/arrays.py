"""Array algorithms: pair sums, deduplication, intersections, merging and sorting."""

from __future__ import annotations

import argparse
import heapq
import sys
from collections import Counter
from collections.abc import Hashable, Iterable, Sequence
from typing import Any, Optional

ELEMENT_COUNT = 9


def two_sum(nums: Sequence[Any], target: Any) -> list[int]:
    """Indices of two entries adding up to target, or an empty list if none do.

    The index of the smaller value comes first.
    """
    pairs = sorted((value, index) for index, value in enumerate(nums))
    lo, hi = 0, len(pairs) - 1
    while lo < hi:
        total = pairs[lo][0] + pairs[hi][0]
        if total == target:
            return [pairs[lo][1], pairs[hi][1]]
        if total > target:
            hi -= 1
        else:
            lo += 1
    return []


def two_sum_sorted(numbers: Sequence[Any], target: Any) -> list[int]:
    """One-based positions of two entries of a sorted sequence adding up to target.

    Raises ValueError if no such pair exists.
    """
    lo, hi = 0, len(numbers) - 1
    while lo < hi:
        total = numbers[lo] + numbers[hi]
        if total == target:
            return [lo + 1, hi + 1]
        if total > target:
            hi -= 1
        else:
            lo += 1
    raise ValueError(f"no two entries add up to {target!r}")


def remove_duplicates(nums: list[Any]) -> int:
    """Move one copy of each run of equal values to the front, in place.

    Returns how many values now lead the list; what follows them is left as is.
    """
    count = 0
    previous: Any = None
    for index, value in enumerate(list(nums)):
        if index == 0 or value != previous:
            nums[count] = value
            count += 1
        previous = value
    return count


def intersect(nums1: Iterable[Any], nums2: Iterable[Any]) -> list[Any]:
    """Values common to both inputs, each as often as it occurs in both, ascending."""
    common = Counter(nums1) & Counter(nums2)
    return sorted(common.elements())


def merge_sorted(nums1: list[Any], m: int, nums2: Sequence[Any], n: int) -> None:
    """Merge the first n values of nums2 into the first m values of nums1, in place.

    Both leading runs must be sorted; nums1 must have room for m + n values.
    """
    if m < 0 or n < 0:
        raise ValueError("counts must not be negative")
    if m + n > len(nums1):
        raise ValueError(f"nums1 holds {len(nums1)} values, {m + n} are needed")
    if n > len(nums2):
        raise ValueError(f"nums2 holds {len(nums2)} values, {n} are needed")
    nums1[: m + n] = list(heapq.merge(nums1[:m], nums2[:n]))


def _is_even(value: int) -> bool:
    return value % 2 == 0


def _is_positive_odd(value: int) -> bool:
    return value > 0 and value % 2 == 1


def sort_by_parity(nums: list[int]) -> list[int]:
    """Move even values before odd ones by swapping from both ends, in place."""
    lo, hi = 0, len(nums) - 1
    while lo <= hi:
        first, last = nums[lo], nums[hi]
        if _is_positive_odd(first) and _is_even(last):
            nums[lo], nums[hi] = last, first
            lo += 1
            hi -= 1
        elif _is_positive_odd(first) and _is_positive_odd(last):
            hi -= 1
        elif _is_even(first) and _is_even(last):
            lo += 1
        else:
            lo += 1
            hi -= 1
    return nums


def sorted_squares(nums: Iterable[Any]) -> list[Any]:
    """Squares of the values in ascending order."""
    return sorted(value * value for value in nums)


def distinct_elements(values: Iterable[Hashable]) -> list[Hashable]:
    """Each value once, kept at the place of its last occurrence."""
    items = list(values)
    last_seen = {value: index for index, value in enumerate(items)}
    return [value for index, value in enumerate(items) if last_seen[value] == index]


def main(argv: Optional[Sequence[str]] = None) -> int:
    """Read nine integers and print the distinct ones, last occurrences kept."""
    parser = argparse.ArgumentParser(
        description=f"Print the distinct values among {ELEMENT_COUNT} integers."
    )
    parser.add_argument(
        "values",
        nargs="*",
        help="the integers; read from standard input when none are given",
    )
    args = parser.parse_args(argv)
    tokens = args.values or sys.stdin.read().split()
    if len(tokens) < ELEMENT_COUNT:
        print(
            f"expected {ELEMENT_COUNT} integers, got {len(tokens)}", file=sys.stderr
        )
        return 1
    try:
        numbers = [int(token) for token in tokens[:ELEMENT_COUNT]]
    except ValueError as error:
        print(f"not an integer: {error}", file=sys.stderr)
        return 1
    print("".join(str(value) for value in distinct_elements(numbers)), end="")
    return 0


if __name__ == "__main__":
    sys.exit(main())