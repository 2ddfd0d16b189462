"""Floor and ceiling, first and last occurrence, and counts in sorted sequences."""

from __future__ import annotations

import bisect
from collections.abc import Sequence
from typing import Any

from bisectkit.bounds import lower_bound, upper_bound

NOT_FOUND = -1


def floor_and_ceil_linear(nums: Sequence[Any], x: Any) -> tuple[Any, Any]:
    """Return ``(floor, ceil)`` of ``x`` in sorted ``nums`` by scanning.

    The floor is the largest element ``<= x`` and the ceiling the smallest
    element ``>= x``; either is ``-1`` when no such element exists.
    """
    floor = ceil = NOT_FOUND
    for value in nums:
        if value <= x:
            floor = value
        if value >= x:
            ceil = value
            break
    return floor, ceil


def floor_value(nums: Sequence[Any], x: Any) -> Any:
    """Largest element ``<= x`` in sorted ``nums``, or ``-1`` if there is none."""
    index = upper_bound(nums, x) - 1
    return NOT_FOUND if index == -1 else nums[index]


def ceil_value(nums: Sequence[Any], x: Any) -> Any:
    """Smallest element ``>= x`` in sorted ``nums``, or ``-1`` if there is none."""
    index = lower_bound(nums, x)
    return NOT_FOUND if index == len(nums) else nums[index]


def floor_and_ceil(nums: Sequence[Any], x: Any) -> tuple[Any, Any]:
    """Return ``(floor, ceil)`` of ``x`` in sorted ``nums`` by binary search."""
    return floor_value(nums, x), ceil_value(nums, x)


def search_range_linear(nums: Sequence[Any], target: Any) -> tuple[int, int]:
    """Return the first and last index of ``target`` by scanning; ``(-1, -1)`` if absent."""
    first = last = NOT_FOUND
    for index, value in enumerate(nums):
        if value == target:
            if first == NOT_FOUND:
                first = index
            last = index
    return first, last


def first_occurrence(nums: Sequence[Any], target: Any) -> int:
    """Index of the first ``target`` in sorted ``nums``, or ``-1`` if absent."""
    index = lower_bound(nums, target)
    if index == len(nums) or nums[index] != target:
        return NOT_FOUND
    return index


def last_occurrence(nums: Sequence[Any], target: Any) -> int:
    """Index of the last element ``<= target`` in sorted ``nums``.

    This is the last occurrence of ``target`` when it is present; callers
    should check presence with :func:`first_occurrence` first.
    """
    return upper_bound(nums, target) - 1


def search_range(nums: Sequence[Any], target: Any) -> tuple[int, int]:
    """Return the first and last index of ``target`` in sorted ``nums``; ``(-1, -1)`` if absent."""
    first = first_occurrence(nums, target)
    if first == NOT_FOUND:
        return NOT_FOUND, NOT_FOUND
    return first, last_occurrence(nums, target)


def count_linear(nums: Sequence[Any], target: Any) -> int:
    """Number of elements equal to ``target``, counted by scanning."""
    return sum(1 for value in nums if value == target)


def count_bisect(nums: Sequence[Any], target: Any) -> int:
    """Number of ``target`` elements in sorted ``nums`` from its first and last index."""
    first = first_occurrence(nums, target)
    if first == NOT_FOUND:
        return 0
    return last_occurrence(nums, target) - first + 1


def count_occurrences(nums: Sequence[Any], target: Any) -> int:
    """Number of ``target`` elements in sorted ``nums`` using the standard bisect functions."""
    low = bisect.bisect_left(nums, target)
    if low == len(nums) or nums[low] != target:
        return 0
    return bisect.bisect_right(nums, target) - low