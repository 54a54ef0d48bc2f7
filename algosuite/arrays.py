"""Array puzzles: sums, products, counting, selection and digit arithmetic."""

from __future__ import annotations

import heapq
from bisect import bisect_right
from collections import Counter
from collections.abc import Iterable, Sequence
from itertools import accumulate, groupby

NOT_FOUND = -1


def two_sum(nums: Sequence[int], target: int) -> tuple[int, int]:
    """Return indices ``(i, j)`` with ``i < j`` whose values add up to ``target``, or ``(-1, -1)``."""
    seen: dict[int, int] = {}
    for index, value in enumerate(nums):
        partner = seen.get(target - value)
        if partner is not None:
            return (partner, index)
        seen[value] = index
    return (NOT_FOUND, NOT_FOUND)


def remove_element(nums: list[int], val: int) -> int:
    """Move the values other than ``val`` to the front of ``nums`` in order and return their count."""
    kept = [value for value in nums if value != val]
    nums[: len(kept)] = kept
    return len(kept)


def max_sub_array(nums: Iterable[int]) -> int:
    """Return the largest sum of a non-empty contiguous run of ``nums``."""
    best: int | None = None
    running = 0
    for value in nums:
        running += value
        best = running if best is None else max(best, running)
        running = max(running, 0)
    if best is None:
        raise ValueError("cannot take a subarray of an empty sequence")
    return best


def max_product(nums: Iterable[int]) -> int:
    """Return ``(a - 1) * (b - 1)`` for the two largest values ``a`` and ``b``."""
    largest = heapq.nlargest(2, nums)
    if len(largest) < 2:
        raise ValueError("at least two values are required")
    first, second = largest
    return (first - 1) * (second - 1)


def three_consecutive_odds(arr: Iterable[int]) -> bool:
    """Tell whether three odd values appear next to each other."""
    return any(
        is_odd and sum(1 for _ in run) >= 3
        for is_odd, run in groupby(arr, key=lambda value: value % 2 != 0)
    )


def chalk_replacer(chalk: Sequence[int], k: int) -> int:
    """Return the index of the student who runs out of chalk when ``k`` pieces go round."""
    prefix = list(accumulate(chalk))
    if not prefix or prefix[-1] <= 0:
        raise ValueError("chalk must hold a positive total")
    return bisect_right(prefix, k % prefix[-1])


def find_kth_largest(nums: Sequence[int], k: int) -> int:
    """Return the ``k``-th largest value, counting duplicates."""
    if not 1 <= k <= len(nums):
        raise ValueError("k must be between 1 and the number of values")
    return heapq.nlargest(k, nums)[-1]


def find_duplicate(nums: Iterable[int]) -> int:
    """Return the first value seen a second time, or -1 if every value is distinct."""
    seen: set[int] = set()
    for value in nums:
        if value in seen:
            return value
        seen.add(value)
    return NOT_FOUND


def top_k_frequent(nums: Iterable[int], k: int) -> list[int]:
    """Return the ``k`` most frequent values, least frequent of them first.

    Among equal counts the larger value ranks higher.
    """
    if k < 1:
        raise ValueError("k must be at least 1")
    counts = Counter(nums)
    top = heapq.nlargest(k, ((count, value) for value, count in counts.items()))
    return [value for _, value in reversed(top)]


def find_max_consecutive_ones(nums: Iterable[int]) -> int:
    """Return the length of the longest run of ones."""
    return max(
        (sum(1 for _ in run) for value, run in groupby(nums) if value == 1),
        default=0,
    )


def maximum_product(nums: Sequence[int]) -> int:
    """Return the largest product of any three values."""
    if len(nums) < 3:
        raise ValueError("at least three values are required")
    ordered = sorted(nums)
    return max(
        ordered[-1] * ordered[-2] * ordered[-3],
        ordered[0] * ordered[1] * ordered[-1],
    )


def find_closest_elements(arr: Iterable[int], k: int, x: int) -> list[int]:
    """Return the ``k`` values nearest to ``x`` in ascending order; ties favour smaller values."""
    if k < 0:
        raise ValueError("k must not be negative")
    return sorted(heapq.nsmallest(k, arr, key=lambda value: (abs(x - value), value)))


def add_to_array_form(num: Sequence[int], k: int) -> list[int]:
    """Add ``k`` to the number whose decimal digits are ``num`` and return the digits of the sum.

    The sum keeps at least as many digits as ``num``, leading zeros included.
    """
    if k < 0:
        raise ValueError("k must not be negative")
    digits: list[int] = []
    carry = k
    for digit in reversed(num):
        carry, low = divmod(digit + carry, 10)
        digits.append(low)
    while carry:
        carry, low = divmod(carry, 10)
        digits.append(low)
    digits.reverse()
    return digits


def check_sorted_rotated(nums: Sequence[int]) -> bool:
    """Tell whether ``nums`` is a non-decreasing sequence rotated by some amount."""
    if not nums:
        return True
    drops = sum(1 for a, b in zip(nums, [*nums[1:], nums[0]]) if a > b)
    return drops <= 1


def left_right_difference(nums: Sequence[int]) -> list[int]:
    """For each position, return ``|sum left of it - sum right of it|``."""
    total = sum(nums)
    return [
        abs(before - (total - before - value))
        for before, value in zip(accumulate(nums, initial=0), nums)
    ]


def find_missing_and_repeated_values(grid: Sequence[Sequence[int]]) -> tuple[int, int]:
    """Return ``(repeated, missing)`` for an n-by-n grid meant to hold 1..n*n once each."""
    counts = Counter(value for row in grid for value in row)
    size = len(grid) ** 2
    repeated = next((value for value, count in counts.items() if count == 2), None)
    missing = next((value for value in range(1, size + 1) if value not in counts), None)
    if repeated is None or missing is None:
        raise ValueError("grid has no repeated and missing value")
    return (repeated, missing)


def minimum_operations(nums: Iterable[int]) -> int:
    """Count the values not divisible by three, each needing one step of +1 or -1."""
    return sum(1 for value in nums if value % 3 != 0)


def stable_mountains(heights: Sequence[int], threshold: int) -> list[int]:
    """Return the indices whose preceding mountain is higher than ``threshold``."""
    return [index for index, previous in enumerate(heights[:-1], start=1) if previous > threshold]