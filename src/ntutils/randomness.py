"""Random integer sources for candidate and witness selection.

A single process-wide `secrets.SystemRandom` instance backs every function, so values come from the OS entropy pool
and no generator is ever re-created (or re-seeded) between calls. Each function also accepts an `rng` argument with a
`random.Random` compatible interface, which is how tests inject a seeded generator.

Typical usage example:

    random_digits(12)
    random_in_range(2, 10**40)
    random_exact_digits(6, rng=random.Random(42))
"""
# Copyright (c) 2025-present Tech. TTGames
# SPDX-License-Identifier: EPL-2.0
import random
import secrets

_RNG: random.Random = secrets.SystemRandom()


def random_digits(digits: int, rng: random.Random | None = None) -> int:
    """Random integer made of `digits` independent uniform decimal digits.

    Leading zero digits are allowed, so the result may have fewer significant digits than requested.
    Reading `digits` uniform digits as one number is the same as drawing uniformly from `[0, 10**digits)`.

    Args:
        digits: How many decimal digits to draw. Must be >= 1.
        rng: Generator to draw from. Defaults to the process-wide generator.

    Returns:
        An integer in `[0, 10**digits)`.

    Raises:
        ValueError: If `digits` is not positive.
    """
    if digits <= 0:
        raise ValueError("digits must be >= 1")
    rng = rng or _RNG
    return rng.randrange(10**digits)


def random_exact_digits(digits: int, rng: random.Random | None = None) -> int:
    """Random integer with exactly `digits` decimal digits.

    Args:
        digits: Required number of digits. Must be >= 1. A single digit request covers `[0, 9]`.
        rng: Generator to draw from. Defaults to the process-wide generator.

    Returns:
        An integer in `[10**(digits-1), 10**digits)`, or in `[0, 10)` if `digits` is 1.

    Raises:
        ValueError: If `digits` is not positive.
    """
    if digits <= 0:
        raise ValueError("digits must be >= 1")
    low = 0 if digits == 1 else 10**(digits - 1)
    return random_in_range(low, 10**digits - 1, rng)


def random_in_range(low: int, high: int, rng: random.Random | None = None) -> int:
    """Uniform random integer in the inclusive range `[low, high]`.

    Args:
        low: Lower bound, inclusive.
        high: Upper bound, inclusive.
        rng: Generator to draw from. Defaults to the process-wide generator.

    Returns:
        The drawn integer. `high` itself if the range is degenerate.

    Raises:
        ValueError: If `low > high`.
    """
    if low == high:
        return high
    if low > high:
        raise ValueError("low must be <= high")
    rng = rng or _RNG
    return low + rng.randrange(high - low + 1)
