import pytest
from hypothesis import given
from hypothesis import strategies as st

from bisectkit.occurrences import (
    ceil_value,
    count_bisect,
    count_linear,
    count_occurrences,
    first_occurrence,
    floor_and_ceil,
    floor_and_ceil_linear,
    floor_value,
    last_occurrence,
    search_range,
    search_range_linear,
)

sorted_lists = st.lists(st.integers(min_value=-20, max_value=20), max_size=30).map(sorted)
targets = st.integers(min_value=-25, max_value=25)

SAMPLE = [3, 4, 4, 7, 8, 10]


@pytest.mark.parametrize("func", [floor_and_ceil, floor_and_ceil_linear])
def test_floor_and_ceil_between_elements(func):
    assert func(SAMPLE, 5) == (4, 7)


@pytest.mark.parametrize("func", [floor_and_ceil, floor_and_ceil_linear])
def test_floor_and_ceil_exact_match(func):
    assert func(SAMPLE, 8) == (8, 8)


@pytest.mark.parametrize("func", [floor_and_ceil, floor_and_ceil_linear])
def test_floor_and_ceil_outside_range(func):
    assert func(SAMPLE, 2) == (-1, 3)
    assert func(SAMPLE, 11) == (10, -1)


@pytest.mark.parametrize("func", [floor_and_ceil, floor_and_ceil_linear])
def test_floor_and_ceil_empty(func):
    assert func([], 5) == (-1, -1)


@given(sorted_lists, targets)
def test_floor_and_ceil_implementations_agree(nums, x):
    assert floor_and_ceil(nums, x) == floor_and_ceil_linear(nums, x)


@given(sorted_lists, targets)
def test_floor_is_largest_not_above(nums, x):
    below = [v for v in nums if v <= x]
    assert floor_value(nums, x) == (max(below) if below else -1)


@given(sorted_lists, targets)
def test_ceil_is_smallest_not_below(nums, x):
    above = [v for v in nums if v >= x]
    assert ceil_value(nums, x) == (min(above) if above else -1)


@pytest.mark.parametrize("func", [search_range, search_range_linear])
def test_search_range_present(func):
    assert func(SAMPLE, 4) == (1, 2)


@pytest.mark.parametrize("func", [search_range, search_range_linear])
def test_search_range_absent(func):
    assert func(SAMPLE, 5) == (-1, -1)
    assert func([], 5) == (-1, -1)


@given(sorted_lists, targets)
def test_search_range_implementations_agree(nums, target):
    assert search_range(nums, target) == search_range_linear(nums, target)


@given(sorted_lists, targets)
def test_search_range_matches_index(nums, target):
    first, last = search_range(nums, target)
    if target in nums:
        assert first == nums.index(target)
        assert last == len(nums) - 1 - nums[::-1].index(target)
        assert all(v == target for v in nums[first : last + 1])
    else:
        assert (first, last) == (-1, -1)


@given(sorted_lists, targets)
def test_first_occurrence_absent_is_minus_one(nums, target):
    expected = nums.index(target) if target in nums else -1
    assert first_occurrence(nums, target) == expected


@given(sorted_lists, targets)
def test_last_occurrence_is_last_not_above(nums, target):
    index = last_occurrence(nums, target)
    assert index == sum(1 for v in nums if v <= target) - 1


def test_last_occurrence_on_missing_target_points_to_floor():
    assert last_occurrence(SAMPLE, 5) == 2
    assert last_occurrence(SAMPLE, 1) == -1


@pytest.mark.parametrize("func", [count_linear, count_bisect, count_occurrences])
def test_count_present_and_absent(func):
    assert func(SAMPLE, 4) == 2
    assert func(SAMPLE, 5) == 0
    assert func([], 5) == 0


@pytest.mark.parametrize("func", [count_linear, count_bisect, count_occurrences])
def test_count_all_equal(func):
    nums = [7] * 9
    assert func(nums, 7) == len(nums)


@given(sorted_lists, targets)
def test_counts_agree_with_list_count(nums, target):
    expected = nums.count(target)
    assert count_linear(nums, target) == expected
    assert count_bisect(nums, target) == expected
    assert count_occurrences(nums, target) == expected


@given(sorted_lists, targets)
def test_count_matches_search_range_width(nums, target):
    first, last = search_range(nums, target)
    width = 0 if first == -1 else last - first + 1
    assert count_bisect(nums, target) == width