"""Searching and finding the minimum in rotated sorted sequences."""

from __future__ import annotations

from collections.abc import Sequence
from typing import Any

NOT_FOUND = -1


def search_rotated_linear(nums: Sequence[Any], target: Any) -> int:
    """Index of ``target`` found by scanning, or ``-1`` if absent."""
    return next((index for index, value in enumerate(nums) if value == target), NOT_FOUND)


def search_rotated(nums: Sequence[Any], target: Any) -> int:
    """Index of ``target`` in a rotated sorted sequence of distinct values, or ``-1``."""
    low, high = 0, len(nums) - 1
    while low <= high:
        mid = low + (high - low) // 2
        if nums[mid] == target:
            return mid
        if nums[low] <= nums[mid]:
            if nums[low] <= target < nums[mid]:
                high = mid - 1
            else:
                low = mid + 1
        elif nums[mid] < target <= nums[high]:
            low = mid + 1
        else:
            high = mid - 1
    return NOT_FOUND


def contains_rotated_linear(nums: Sequence[Any], k: Any) -> bool:
    """Return whether ``k`` occurs in ``nums``, by scanning."""
    return any(value == k for value in nums)


def contains_rotated(nums: Sequence[Any], k: Any) -> bool:
    """Return whether ``k`` occurs in a rotated sorted sequence that may hold duplicates."""
    low, high = 0, len(nums) - 1
    while low <= high:
        mid = low + (high - low) // 2
        # Equal ends and middle give no hint which half is sorted; trim both ends.
        while low < high and nums[low] == nums[mid] == nums[high]:
            low += 1
            high -= 1
        if nums[mid] == k:
            return True
        if nums[low] <= nums[mid]:
            if nums[low] <= k < nums[mid]:
                high = mid - 1
            else:
                low = mid + 1
        elif nums[mid] < k <= nums[high]:
            low = mid + 1
        else:
            high = mid - 1
    return False


def find_min_linear(nums: Sequence[Any]) -> Any:
    """Smallest element of ``nums``, by scanning.

    Raises ValueError if ``nums`` is empty.
    """
    if not nums:
        raise ValueError("cannot take the minimum of an empty sequence")
    return min(nums)


def find_min(nums: Sequence[Any]) -> Any:
    """Smallest element of a rotated sorted sequence of distinct values.

    Raises ValueError if ``nums`` is empty.
    """
    if not nums:
        raise ValueError("cannot take the minimum of an empty sequence")
    low, high = 0, len(nums) - 1
    smallest = nums[0]
    while low <= high:
        mid = low + (high - low) // 2
        if nums[low] <= nums[mid]:
            candidate = nums[low]
            low = mid + 1
        else:
            candidate = nums[mid]
            high = mid - 1
        smallest = min(smallest, candidate)
    return smallest