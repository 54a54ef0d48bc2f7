"""Integer puzzles: digit reversal, palindromes, powers, sums of squares and digit products."""

from __future__ import annotations

from math import isqrt, prod

INT32_MIN = -(2**31)
INT32_MAX = 2**31 - 1
NOT_FOUND = -1


def reverse_integer(x: int) -> int:
    """Reverse the decimal digits of ``x``, keeping its sign.

    Returns 0 when the result does not fit in a signed 32-bit integer.
    """
    sign = -1 if x < 0 else 1
    reversed_value = sign * int(str(abs(x))[::-1])
    if not INT32_MIN <= reversed_value <= INT32_MAX:
        return 0
    return reversed_value


def is_palindrome(x: int) -> bool:
    """Tell whether the decimal digits of ``x`` read the same both ways; negatives never do."""
    if x < 0:
        return False
    digits = str(x)
    return digits == digits[::-1]


def is_power_of_three(n: int) -> bool:
    """Tell whether ``n`` equals ``3**k`` for some non-negative integer ``k``."""
    if n <= 0:
        return False
    while n % 3 == 0:
        n //= 3
    return n == 1


def is_power_of_four(n: int) -> bool:
    """Tell whether ``n`` equals ``4**k`` for some non-negative integer ``k``."""
    return n > 0 and n & (n - 1) == 0 and (n - 1) % 3 == 0


def judge_square_sum(c: int) -> bool:
    """Tell whether ``c`` is ``a*a + b*b`` for some non-negative integers ``a`` and ``b``."""
    if c < 0:
        raise ValueError("c must not be negative")
    low, high = 0, isqrt(c)
    while low <= high:
        total = low * low + high * high
        if total == c:
            return True
        if total > c:
            high -= 1
        else:
            low += 1
    return False


def pivot_integer(n: int) -> int:
    """Return ``x`` with ``1 + ... + x == x + ... + n``, or -1 if no such ``x`` exists."""
    if n < 1:
        raise ValueError("n must be at least 1")
    total = n * (n + 1) // 2
    root = isqrt(total)
    return root if root * root == total else NOT_FOUND


def _digit_product(value: int) -> int:
    return prod(int(digit) for digit in str(value))


def smallest_number(n: int, t: int) -> int:
    """Return the smallest integer not below ``n`` whose digit product is divisible by ``t``."""
    if t < 1:
        raise ValueError("t must be at least 1")
    if n < 0:
        raise ValueError("n must not be negative")
    candidate = n
    while _digit_product(candidate) % t != 0:
        candidate += 1
    return candidate