# pylint: disable=missing-module-docstring
# Copyright (c) 2025-present Tech. TTGames
# SPDX-License-Identifier: EPL-2.0
import math

import pytest

from ntutils import diophantine

pairs = [
    (35, 15),
    (15, 35),
    (48, 18),
    (240, 46),
    (17, 13),
    (1, 0),
    (0, 1),
    (0, 9),
    (9, 0),
    (7, 7),
    (-35, 15),
    (35, -15),
    (-35, -15),
    (2**127 - 1, 2**89 - 1),
    (3**200, 2**300),
    (12345678901234567890, 9876543210987654321),
]


@pytest.mark.parametrize("a,b", pairs)
def test_extended_euclid_bezout(a, b):
    d, x, y = diophantine.extended_euclid(a, b)
    assert a * x + b * y == d
    assert d == math.gcd(abs(a), abs(b))


def test_extended_euclid_concrete():
    assert diophantine.extended_euclid(35, 15) == (5, 1, -2)


def test_extended_euclid_zeros():
    assert diophantine.extended_euclid(0, 0) == (0, 1, 0)


def test_extended_euclid_deep():
    # Consecutive Fibonacci numbers take the most steps, far past the recursion limit here.
    a, b = 1, 1
    for _ in range(5000):
        a, b = b, a + b
    d, x, y = diophantine.extended_euclid(b, a)
    assert d == 1
    assert b * x + a * y == 1


@pytest.mark.parametrize("a,b", pairs)
def test_special_solution(a, b):
    x, y = diophantine.special_solution(a, b)
    assert a * x + b * y == math.gcd(abs(a), abs(b))


def test_special_solution_concrete():
    assert diophantine.special_solution(35, 15) == (1, -2)


@pytest.mark.parametrize("a,b", [p for p in pairs if p != (0, 0)])
def test_general_solution_at_zero(a, b):
    assert diophantine.general_solution(a, b).at(0) == diophantine.special_solution(a, b)


@pytest.mark.parametrize("a,b", [p for p in pairs if p != (0, 0)])
@pytest.mark.parametrize("t", [-3, 1, 2, 10**20])
def test_general_solution_family(a, b, t):
    x, y = diophantine.general_solution(a, b).at(t)
    assert a * x + b * y == math.gcd(abs(a), abs(b))


def test_general_solution_structure():
    sol = diophantine.general_solution(35, 15)
    assert sol == diophantine.GeneralSolution(x0=1, x_coeff=3, y0=-2, y_coeff=7)


def test_general_solution_strings():
    sol = diophantine.general_solution(35, 15)
    assert sol.as_strings() == ("x=1+3t", "y=-2-7t")
    assert str(sol) == "x=1+3t, y=-2-7t"


def test_general_solution_zeros():
    with pytest.raises(ZeroDivisionError):
        diophantine.general_solution(0, 0)
