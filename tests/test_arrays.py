from itertools import combinations
from math import prod

import pytest

from algosuite.arrays import (
    add_to_array_form,
    chalk_replacer,
    check_sorted_rotated,
    find_closest_elements,
    find_duplicate,
    find_kth_largest,
    find_max_consecutive_ones,
    find_missing_and_repeated_values,
    left_right_difference,
    max_product,
    max_sub_array,
    maximum_product,
    minimum_operations,
    remove_element,
    stable_mountains,
    three_consecutive_odds,
    top_k_frequent,
    two_sum,
)


def test_two_sum_finds_pair():
    nums = [2, 7, 11, 15]
    i, j = two_sum(nums, 9)
    assert i < j
    assert nums[i] + nums[j] == 9


def test_two_sum_uses_distinct_indices():
    nums = [3, 3]
    assert two_sum(nums, 6) == (0, 1)


def test_two_sum_not_found():
    assert two_sum([1, 2, 3], 100) == (-1, -1)


def test_remove_element_moves_kept_values_forward():
    nums = [3, 2, 2, 3]
    k = remove_element(nums, 3)
    assert k == 2
    assert nums[:k] == [2, 2]


def test_remove_element_none_removed():
    nums = [1, 2]
    assert remove_element(nums, 9) == len(nums)
    assert nums == [1, 2]


def test_max_sub_array_single():
    assert max_sub_array([-3]) == -3


def test_max_sub_array_all_positive_is_total():
    nums = [1, 2, 3, 4]
    assert max_sub_array(nums) == sum(nums)


def test_max_sub_array_all_negative_is_max():
    nums = [-5, -2, -8]
    assert max_sub_array(nums) == -2


def test_max_sub_array_empty_raises():
    with pytest.raises(ValueError):
        max_sub_array([])


def test_max_product_example():
    assert max_product([3, 4, 5, 2]) == 12


def test_max_product_order_independent():
    assert max_product([3, 4, 5, 2]) == max_product([2, 5, 4, 3])


def test_max_product_needs_two():
    with pytest.raises(ValueError):
        max_product([4])


def test_three_consecutive_odds():
    assert three_consecutive_odds([2, 6, 4, 1]) is False
    assert three_consecutive_odds([1, 2, 34, 3, 4, 5, 7, 23, 12]) is True


def test_three_consecutive_odds_short():
    assert three_consecutive_odds([1, 3]) is False


@pytest.mark.parametrize("chalk,k", [([5, 1, 5], 22), ([3, 4, 1, 2], 25), ([2], 7)])
def test_chalk_replacer_invariant(chalk, k):
    index = chalk_replacer(chalk, k)
    remaining = k % sum(chalk)
    assert sum(chalk[:index]) <= remaining < sum(chalk[: index + 1])


def test_chalk_replacer_is_periodic():
    chalk = [3, 4, 1, 2]
    assert chalk_replacer(chalk, 5) == chalk_replacer(chalk, 5 + sum(chalk))


def test_chalk_replacer_first_student():
    assert chalk_replacer([5, 1, 5], 4) == 0


def test_chalk_replacer_empty_raises():
    with pytest.raises(ValueError):
        chalk_replacer([], 3)


def test_find_kth_largest():
    assert find_kth_largest([3, 2, 1, 5, 6, 4], 2) == 5


def test_find_kth_largest_extremes():
    nums = [3, 2, 3, 1, 2, 4, 5, 5, 6]
    assert find_kth_largest(nums, 1) == max(nums)
    assert find_kth_largest(nums, len(nums)) == min(nums)


@pytest.mark.parametrize("k", [0, 4])
def test_find_kth_largest_bad_k(k):
    with pytest.raises(ValueError):
        find_kth_largest([1, 2, 3], k)


def test_find_duplicate():
    assert find_duplicate([1, 3, 4, 2, 2]) == 2
    assert find_duplicate([3, 1, 3, 4, 2]) == 3


def test_find_duplicate_none():
    assert find_duplicate([1, 2, 3]) == -1


def test_top_k_frequent():
    assert top_k_frequent([1, 1, 1, 2, 2, 3], 2) == [2, 1]
    assert top_k_frequent([1, 1, 1, 2, 2, 3], 1) == [1]


def test_top_k_frequent_bad_k():
    with pytest.raises(ValueError):
        top_k_frequent([1], 0)


def test_find_max_consecutive_ones():
    assert find_max_consecutive_ones([1, 1, 0, 1, 1, 1]) == 3
    assert find_max_consecutive_ones([0, 0]) == 0
    assert find_max_consecutive_ones([1]) == 1


@pytest.mark.parametrize("nums", [[1, 2, 3], [-10, -10, 1, 3, 2], [-1, -2, -3], [0, 5, -7, 4]])
def test_maximum_product_is_best_triple(nums):
    products = {prod(triple) for triple in combinations(nums, 3)}
    result = maximum_product(nums)
    assert result in products
    assert all(result >= p for p in products)


def test_maximum_product_needs_three():
    with pytest.raises(ValueError):
        maximum_product([1, 2])


def test_find_closest_elements_ties_prefer_smaller():
    assert find_closest_elements([1, 2, 3, 4, 5], 4, 3) == [1, 2, 3, 4]


def test_find_closest_elements_outside_range():
    assert find_closest_elements([1, 2, 3, 4, 5], 4, -1) == [1, 2, 3, 4]


def test_find_closest_elements_sorted_and_sized():
    result = find_closest_elements([9, 1, 7, 3, 5], 3, 6)
    assert len(result) == 3
    assert result == sorted(result)


def test_add_to_array_form():
    assert add_to_array_form([1, 2, 0, 0], 34) == [1, 2, 3, 4]
    assert add_to_array_form([9, 9, 9], 1) == [1, 0, 0, 0]


@pytest.mark.parametrize("num,k", [([2, 7, 4], 181), ([2, 1, 5], 806), ([0], 12345)])
def test_add_to_array_form_value(num, k):
    result = add_to_array_form(num, k)
    as_int = int("".join(map(str, num)))
    assert int("".join(map(str, result))) == as_int + k


def test_add_to_array_form_keeps_leading_zeros():
    assert add_to_array_form([0, 0, 1], 0) == [0, 0, 1]


def test_add_to_array_form_negative_raises():
    with pytest.raises(ValueError):
        add_to_array_form([1], -1)


def test_check_sorted_rotated():
    assert check_sorted_rotated([3, 4, 5, 1, 2]) is True
    assert check_sorted_rotated([2, 1, 3, 4]) is False
    assert check_sorted_rotated([1]) is True
    assert check_sorted_rotated([1, 1, 1]) is True


def test_left_right_difference_ends():
    nums = [10, 4, 8, 3]
    result = left_right_difference(nums)
    assert len(result) == len(nums)
    assert result[0] == sum(nums[1:])
    assert result[-1] == sum(nums[:-1])


def test_left_right_difference_reverse_symmetry():
    nums = [10, 4, 8, 3]
    assert left_right_difference(nums[::-1]) == left_right_difference(nums)[::-1]


def test_left_right_difference_single():
    assert left_right_difference([10]) == [0]


def test_find_missing_and_repeated_values():
    assert find_missing_and_repeated_values([[1, 3], [2, 2]]) == (2, 4)


def test_find_missing_and_repeated_values_properties():
    grid = [[9, 1, 7], [8, 9, 2], [3, 4, 6]]
    repeated, missing = find_missing_and_repeated_values(grid)
    flat = [value for row in grid for value in row]
    assert flat.count(repeated) == 2
    assert missing not in flat
    assert 1 <= missing <= 9


def test_minimum_operations():
    assert minimum_operations([3, 6, 9]) == 0
    nums = [1, 2, 4, 5]
    assert minimum_operations(nums) == len(nums)


def test_stable_mountains():
    assert stable_mountains([1, 2, 3, 4, 5], 2) == [3, 4]
    assert stable_mountains([10, 1, 10, 1, 10], 3) == [1, 3]


def test_stable_mountains_none():
    assert stable_mountains([5], 0) == []