"""Searches over sorted, rotated and mountain-shaped sequences, and integer roots."""

from __future__ import annotations

from bisect import bisect_left, bisect_right
from collections.abc import Sequence
from math import isqrt

NOT_FOUND = -1


def find_peak_element(nums: Sequence[int]) -> int:
    """Return the index of an element greater than its neighbours, or -1 if none is found.

    Positions outside the sequence count as lower than any element, so the
    first and last elements are peaks when they beat their single neighbour.
    """
    if not nums:
        raise ValueError("cannot find a peak in an empty sequence")
    n = len(nums)
    if n == 1 or nums[0] > nums[1]:
        return 0
    if nums[-1] > nums[-2]:
        return n - 1
    low, high = 1, n - 2
    while low <= high:
        mid = low + (high - low) // 2
        if nums[mid - 1] < nums[mid] > nums[mid + 1]:
            return mid
        if nums[mid] > nums[mid - 1]:
            low = mid + 1
        else:
            high = mid - 1
    return NOT_FOUND


def search_rotated(nums: Sequence[int], target: int) -> int:
    """Return the index of ``target`` in a rotated sorted sequence of distinct values, or -1."""
    low, high = 0, len(nums) - 1
    while low <= high:
        mid = (low + high) // 2
        if nums[mid] == target:
            return mid
        if nums[low] <= nums[mid]:
            if nums[low] <= target <= nums[mid]:
                high = mid - 1
            else:
                low = mid + 1
        elif nums[mid] <= target <= nums[high]:
            low = mid + 1
        else:
            high = mid - 1
    return NOT_FOUND


def search_range(nums: Sequence[int], target: int) -> tuple[int, int]:
    """Return the first and last index of ``target`` in a sorted sequence, or ``(-1, -1)``."""
    first = bisect_left(nums, target)
    if first == len(nums) or nums[first] != target:
        return (NOT_FOUND, NOT_FOUND)
    return (first, bisect_right(nums, target) - 1)


def search_insert(nums: Sequence[int], target: int) -> int:
    """Return the index at which ``target`` is found or would be inserted in sorted order."""
    return bisect_left(nums, target)


def search_rotated_with_duplicates(nums: Sequence[int], target: int) -> bool:
    """Tell whether ``target`` occurs in a rotated sorted sequence that may repeat values."""
    low, high = 0, len(nums) - 1
    while low <= high:
        mid = low + (high - low) // 2
        if nums[mid] == target:
            return True
        if nums[low] == nums[mid] == nums[high]:
            low += 1
            high -= 1
        elif nums[mid] <= nums[high]:
            if nums[mid] <= target <= nums[high]:
                low = mid + 1
            else:
                high = mid - 1
        elif nums[low] <= target <= nums[mid]:
            high = mid - 1
        else:
            low = mid + 1
    return False


def binary_search(nums: Sequence[int], target: int) -> int:
    """Return the index of ``target`` in a sorted sequence of distinct values, or -1."""
    low, high = 0, len(nums) - 1
    while low <= high:
        mid = low + (high - low) // 2
        if nums[mid] == target:
            return mid
        if nums[mid] < target:
            low = mid + 1
        else:
            high = mid - 1
    return NOT_FOUND


def peak_index_in_mountain_array(arr: Sequence[int]) -> int:
    """Return the index of the summit of a strictly rising then falling sequence, or -1."""
    low, high = 1, len(arr) - 2
    while low <= high:
        mid = low + (high - low) // 2
        if arr[mid - 1] < arr[mid] > arr[mid + 1]:
            return mid
        if arr[mid] > arr[mid - 1]:
            low = mid + 1
        else:
            high = mid - 1
    return NOT_FOUND


def single_non_duplicate(nums: Sequence[int]) -> int:
    """Return the one value that appears once in a sorted sequence where all others appear twice."""
    if not nums:
        raise ValueError("cannot search an empty sequence")
    start, end = 0, len(nums) - 1
    while start < end:
        mid = (start + end) // 2
        even_after = (end - mid) % 2 == 0
        if nums[mid] == nums[mid + 1]:
            if even_after:
                start = mid + 2
            else:
                end = mid - 1
        elif even_after:
            end = mid
        else:
            start = mid + 1
    return nums[start]


def my_sqrt(x: int) -> int:
    """Return the integer square root of a non-negative ``x``, rounded down."""
    if x < 0:
        raise ValueError("square root of a negative number")
    return isqrt(x)


def is_perfect_square(num: int) -> bool:
    """Tell whether the positive integer ``num`` is the square of an integer."""
    if num < 1:
        return False
    root = isqrt(num)
    return root * root == num