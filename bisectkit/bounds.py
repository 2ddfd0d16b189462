"""Lower bound, upper bound and insert position in sorted sequences."""

from __future__ import annotations

from collections.abc import Callable, Sequence
from typing import Any


def _first_index(nums: Sequence[Any], predicate: Callable[[Any], bool]) -> int:
    return next((i for i, value in enumerate(nums) if predicate(value)), len(nums))


def _bisect_loop(nums: Sequence[Any], goes_left: Callable[[Any], bool]) -> int:
    low, high = 0, len(nums) - 1
    while low <= high:
        mid = low + (high - low) // 2
        if goes_left(nums[mid]):
            high = mid - 1
        else:
            low = mid + 1
    return low


def _bisect_recursive(nums: Sequence[Any], goes_left: Callable[[Any], bool]) -> int:
    def _step(low: int, high: int) -> int:
        if low > high:
            return low
        mid = low + (high - low) // 2
        if goes_left(nums[mid]):
            return _step(low, mid - 1)
        return _step(mid + 1, high)

    return _step(0, len(nums) - 1)


def lower_bound_linear(nums: Sequence[Any], x: Any) -> int:
    """Index of the first element ``>= x`` found by scanning; ``len(nums)`` if none."""
    return _first_index(nums, lambda value: value >= x)


def lower_bound(nums: Sequence[Any], x: Any) -> int:
    """Index of the first element ``>= x`` in sorted ``nums``; ``len(nums)`` if none."""
    return _bisect_loop(nums, lambda value: value >= x)


def lower_bound_recursive(nums: Sequence[Any], x: Any) -> int:
    """Recursive form of :func:`lower_bound`."""
    return _bisect_recursive(nums, lambda value: value >= x)


def upper_bound_linear(nums: Sequence[Any], x: Any) -> int:
    """Index of the first element ``> x`` found by scanning; ``len(nums)`` if none."""
    return _first_index(nums, lambda value: value > x)


def upper_bound(nums: Sequence[Any], x: Any) -> int:
    """Index of the first element ``> x`` in sorted ``nums``; ``len(nums)`` if none."""
    return _bisect_loop(nums, lambda value: value > x)


def upper_bound_recursive(nums: Sequence[Any], x: Any) -> int:
    """Recursive form of :func:`upper_bound`."""
    return _bisect_recursive(nums, lambda value: value > x)


def search_insert_linear(nums: Sequence[Any], target: Any) -> int:
    """Index where ``target`` is or would be inserted, found by scanning."""
    return _first_index(nums, lambda value: value >= target)


def search_insert(nums: Sequence[Any], target: Any) -> int:
    """Index where ``target`` is or would be inserted to keep ``nums`` sorted."""
    return _bisect_loop(nums, lambda value: value >= target)


def search_insert_recursive(nums: Sequence[Any], target: Any) -> int:
    """Recursive form of :func:`search_insert`."""
    return _bisect_recursive(nums, lambda value: value >= target)