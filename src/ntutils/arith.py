"""Elementary integer helpers shared by the rest of the package.

Pure functions over Python integers, which already give us exact, unbounded arithmetic.

Typical usage example:

    gcd(48, 18)
    lcm(4, 6)
    digit_count(10**50)
"""
# Copyright (c) 2025-present Tech. TTGames
# SPDX-License-Identifier: EPL-2.0
import math

_LOG10_2: float = math.log10(2)


def gcd(x: int, y: int) -> int:
    """Greatest common divisor of two non-negative integers.

    Textbook Euclid, with the larger operand moved to the front before reducing.

    Args:
        x: First operand. Must be >= 0.
        y: Second operand. Must be >= 0.

    Returns:
        The greatest common divisor. `gcd(0, 0)` is 0.

    Raises:
        ValueError: If either operand is negative.
    """
    if x < 0 or y < 0:
        raise ValueError("gcd is only defined for non-negative operands")
    if x < y:
        x, y = y, x
    while y != 0:
        x, y = y, x % y
    return x


def lcm(x: int, y: int) -> int:
    """Least common multiple of two non-negative integers.

    Args:
        x: First operand. Must be >= 0.
        y: Second operand. Must be >= 0.

    Returns:
        The least common multiple.

    Raises:
        ValueError: If either operand is negative.
        ZeroDivisionError: If both operands are zero.
    """
    d = gcd(x, y)
    if d == 0:
        raise ZeroDivisionError("lcm(0, 0) is undefined")
    return x * y // d


def is_even(n: int) -> bool:
    """Whether `n` is divisible by 2."""
    return n % 2 == 0


def digit_count(n: int) -> int:
    """Number of decimal digits of `n`, ignoring the sign.

    Starts from a bit-length estimate and corrects it with exact comparisons, so it stays exact for numbers far
    beyond float precision and beyond the interpreter's int-to-str limit.

    Args:
        n: The number to measure.

    Returns:
        1 for 0, otherwise `floor(log10(abs(n))) + 1`.
    """
    n = abs(n)
    if n == 0:
        return 1
    k = int((n.bit_length() - 1) * _LOG10_2) + 1
    while k > 1 and 10**(k - 1) > n:
        k -= 1
    while 10**k <= n:
        k += 1
    return k
