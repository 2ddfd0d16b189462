"""Membership tests on sorted sequences by binary search."""

from __future__ import annotations

from collections.abc import Sequence
from typing import Any


def contains_recursive(nums: Sequence[Any], target: Any) -> bool:
    """Return whether ``target`` occurs in the sorted ``nums``, searching recursively."""

    def _search(low: int, high: int) -> bool:
        if low > high:
            return False
        mid = low + (high - low) // 2
        value = nums[mid]
        if value == target:
            return True
        if value > target:
            return _search(low, mid - 1)
        return _search(mid + 1, high)

    return _search(0, len(nums) - 1)


def contains_iterative(nums: Sequence[Any], target: Any) -> bool:
    """Return whether ``target`` occurs in the sorted ``nums``, searching in a loop."""
    low, high = 0, len(nums) - 1
    while low <= high:
        mid = low + (high - low) // 2
        value = nums[mid]
        if value == target:
            return True
        if value < target:
            low = mid + 1
        else:
            high = mid - 1
    return False