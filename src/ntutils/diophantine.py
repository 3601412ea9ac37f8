"""Linear Diophantine equations `a*x + b*y = gcd(a, b)` via the Extended Euclidean Algorithm.

Provides the Bezout triple, the special solution and the parametrised general solution. The general solution is
returned as a structured `GeneralSolution`; turning it into text is left to `GeneralSolution.as_strings()`.

Typical usage example:

    d, x, y = extended_euclid(35, 15)
    sol = general_solution(35, 15)
    sol.at(3)
    print(sol)
"""
# Copyright (c) 2025-present Tech. TTGames
# SPDX-License-Identifier: EPL-2.0
from typing import NamedTuple


class GeneralSolution(NamedTuple):
    """Every integer solution of `a*x + b*y = gcd(a, b)`.

    The family is `x = x0 + x_coeff*t`, `y = y0 - y_coeff*t` for integer `t`.

    Attributes:
        x0: Special solution for x.
        x_coeff: Step of x per unit of t, `b / gcd(a, b)`.
        y0: Special solution for y.
        y_coeff: Step of y per unit of t (subtracted), `a / gcd(a, b)`.
    """
    x0: int
    x_coeff: int
    y0: int
    y_coeff: int

    def at(self, t: int) -> tuple[int, int]:
        """The solution pair for parameter `t`."""
        return self.x0 + self.x_coeff * t, self.y0 - self.y_coeff * t

    def as_strings(self) -> tuple[str, str]:
        """Textual form, e.g. `("x=1+3t", "y=-2-7t")`."""
        return f"x={self.x0}+{self.x_coeff}t", f"y={self.y0}-{self.y_coeff}t"

    def __str__(self) -> str:
        return ", ".join(self.as_strings())


def extended_euclid(a: int, b: int) -> tuple[int, int, int]:
    """Implements the Extended Euclidean Algorithm.

    Such that a*x + b*y = d = gcd(|a|, |b|). Uses the iterative three-term form, so there is no recursion depth to
    worry about on very large operands.

    Args:
        a: The first integer.
        b: The second integer.

    Returns:
        The triple (d, x, y). `d` is never negative; for `a == b == 0` the result is (0, 1, 0).
    """
    r0, r1 = a, b
    s0, s1, t0, t1 = 1, 0, 0, 1
    while r1 != 0:
        q = r0 // r1
        r0, r1 = r1, r0 - q * r1
        s0, s1 = s1, s0 - q * s1
        t0, t1 = t1, t0 - q * t1
    if r0 < 0:
        r0, s0, t0 = -r0, -s0, -t0
    return r0, s0, t0


def special_solution(a: int, b: int) -> tuple[int, int]:
    """A particular solution (x, y) of `a*x + b*y = gcd(a, b)`."""
    _, x, y = extended_euclid(a, b)
    return x, y


def general_solution(a: int, b: int) -> GeneralSolution:
    """The general solution of `a*x + b*y = gcd(a, b)`.

    Args:
        a: The first integer.
        b: The second integer.

    Returns:
        The solution family. Its `at(0)` equals `special_solution(a, b)`.

    Raises:
        ZeroDivisionError: If both `a` and `b` are zero.
    """
    d, x, y = extended_euclid(a, b)
    if d == 0:
        raise ZeroDivisionError("general solution is undefined when gcd(a, b) is 0")
    return GeneralSolution(x, b // d, y, a // d)
