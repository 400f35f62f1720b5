from collections import Counter

import pytest
from hypothesis import given
from hypothesis import strategies as st

from algokit.arrays import (
    distinct_elements,
    intersect,
    main,
    merge_sorted,
    remove_duplicates,
    sort_by_parity,
    sorted_squares,
    two_sum,
    two_sum_sorted,
)

ints = st.integers(min_value=-1000, max_value=1000)


@given(st.lists(ints, min_size=2, max_size=30), st.data())
def test_two_sum_finds_a_valid_pair(nums, data):
    i, j = data.draw(
        st.tuples(
            st.integers(0, len(nums) - 1), st.integers(0, len(nums) - 1)
        ).filter(lambda p: p[0] != p[1])
    )
    target = nums[i] + nums[j]
    a, b = two_sum(nums, target)
    assert a != b
    assert nums[a] + nums[b] == target
    assert nums[a] <= nums[b]


def test_two_sum_without_solution_is_empty():
    assert two_sum([1, 2, 3], 100) == []
    assert two_sum([], 0) == []
    assert two_sum([5], 10) == []


@given(st.lists(ints, min_size=2, max_size=30), st.data())
def test_two_sum_sorted_positions_are_one_based(nums, data):
    numbers = sorted(nums)
    i = data.draw(st.integers(0, len(numbers) - 2))
    j = data.draw(st.integers(i + 1, len(numbers) - 1))
    target = numbers[i] + numbers[j]
    a, b = two_sum_sorted(numbers, target)
    assert 1 <= a < b <= len(numbers)
    assert numbers[a - 1] + numbers[b - 1] == target


def test_two_sum_sorted_without_solution_raises():
    with pytest.raises(ValueError):
        two_sum_sorted([1, 2, 3], 100)
    with pytest.raises(ValueError):
        two_sum_sorted([], 1)


@given(st.lists(st.integers(-5, 5), max_size=40))
def test_remove_duplicates_compacts_runs(values):
    nums = sorted(values)
    original = list(nums)
    count = remove_duplicates(nums)
    prefix = nums[:count]
    assert prefix == sorted(set(original))
    assert len(nums) == len(original)
    assert nums[count:] == original[count:]


def test_remove_duplicates_on_empty_list():
    nums = []
    assert remove_duplicates(nums) == 0
    assert nums == []


def test_intersect_keeps_multiplicity():
    assert intersect([1, 2, 2, 1], [2, 2]) == [2, 2]
    assert intersect([], [1, 2]) == []


@given(st.lists(st.integers(-5, 5)), st.lists(st.integers(-5, 5)))
def test_intersect_invariants(nums1, nums2):
    result = intersect(nums1, nums2)
    assert result == sorted(result)
    counts = Counter(result)
    first, second = Counter(nums1), Counter(nums2)
    for value, count in counts.items():
        assert count == min(first[value], second[value])
    assert set(result) == set(nums1) & set(nums2)


def test_intersect_leaves_inputs_alone():
    nums1, nums2 = [3, 1, 2], [2, 3]
    intersect(nums1, nums2)
    assert nums1 == [3, 1, 2]
    assert nums2 == [2, 3]


@given(st.lists(ints, max_size=20), st.lists(ints, max_size=20))
def test_merge_sorted_in_place(first, second):
    first, second = sorted(first), sorted(second)
    nums1 = first + [0] * len(second)
    merge_sorted(nums1, len(first), second, len(second))
    assert nums1 == sorted(first + second)


def test_merge_sorted_needs_room():
    with pytest.raises(ValueError):
        merge_sorted([1, 2], 2, [3], 1)
    with pytest.raises(ValueError):
        merge_sorted([1, 0, 0], 1, [2], 2)


@given(st.lists(st.integers(0, 1000), max_size=40))
def test_sort_by_parity_puts_evens_first(values):
    nums = list(values)
    result = sort_by_parity(nums)
    assert result is nums
    assert Counter(result) == Counter(values)
    parities = [value % 2 for value in result]
    assert parities == sorted(parities)


def test_sorted_squares_worked_example():
    assert sorted_squares([-4, -1, 0, 3, 10]) == [0, 1, 9, 16, 100]


@given(st.lists(ints, max_size=40))
def test_sorted_squares_invariants(values):
    result = sorted_squares(values)
    assert result == sorted(result)
    assert Counter(result) == Counter(v * v for v in values)


@given(st.lists(st.integers(0, 6), max_size=30))
def test_distinct_elements_keeps_last_occurrences(values):
    result = distinct_elements(values)
    assert len(result) == len(set(result))
    assert set(result) == set(values)
    positions = [len(values) - 1 - values[::-1].index(v) for v in result]
    assert positions == sorted(positions)


def test_distinct_elements_of_unique_values_is_identity():
    assert distinct_elements([4, 8, 15, 16]) == [4, 8, 15, 16]


def test_main_prints_distinct_values(capsys):
    assert main([str(v) for v in range(1, 10)]) == 0
    assert capsys.readouterr().out == "123456789"


def test_main_drops_earlier_repeats(capsys):
    assert main(["7"] * 9) == 0
    assert capsys.readouterr().out == "7"


def test_main_reads_only_the_first_nine(capsys):
    assert main([str(v) for v in range(1, 12)]) == 0
    assert capsys.readouterr().out == "123456789"


def test_main_rejects_too_few_values(capsys):
    assert main(["1", "2", "3"]) == 1
    assert capsys.readouterr().out == ""


def test_main_rejects_non_integers(capsys):
    assert main(["x"] * 9) == 1
    assert "not an integer" in capsys.readouterr().err