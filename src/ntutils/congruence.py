"""Linear congruences `a*x = b (mod m)`."""
# Copyright (c) 2025-present Tech. TTGames
# SPDX-License-Identifier: EPL-2.0


def solve_congruence(a: int, b: int, m: int) -> int | None:
    """Smallest non-negative solution of `a*x = b (mod m)`.

    Scans `x = 0, 1, ..., m-1` in order, so the cost is linear in `m`. Only suitable for small moduli.

    Args:
        a: Coefficient of x.
        b: Right-hand side.
        m: The modulus.

    Returns:
        The smallest `x` in `[0, m)` solving the congruence, or None if `m <= 0` or no such `x` exists.
    """
    if m <= 0:
        return None
    for x in range(m):
        if (a * x - b) % m == 0:
            return x
    return None
