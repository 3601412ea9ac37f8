# pylint: disable=missing-module-docstring
# Copyright (c) 2025-present Tech. TTGames
# SPDX-License-Identifier: EPL-2.0
import collections
import random

import pytest

from ntutils import arith
from ntutils import randomness


@pytest.mark.parametrize("digits", [1, 2, 5, 30, 500])
def test_random_digits_bounds(digits):
    for _ in range(50):
        assert 0 <= randomness.random_digits(digits) < 10**digits


@pytest.mark.parametrize("digits", [0, -1])
def test_random_digits_validates(digits):
    with pytest.raises(ValueError):
        randomness.random_digits(digits)


def test_random_digits_keeps_leading_zeros():
    rng = random.Random(1)
    drawn = [randomness.random_digits(3, rng) for _ in range(2000)]
    assert any(arith.digit_count(no) < 3 for no in drawn)


def test_random_digits_uniform_digits(seeded_rng):
    counts = collections.Counter()
    for _ in range(2000):
        counts.update(f"{randomness.random_digits(5, seeded_rng):05d}")
    assert set(counts) == set("0123456789")
    # 10000 digits drawn, about 1000 each.
    assert all(800 < c < 1200 for c in counts.values())


def test_random_digits_injected_rng():
    assert randomness.random_digits(40, random.Random(5)) == randomness.random_digits(40, random.Random(5))


def test_random_digits_default_rng(mocker):
    spy = mocker.patch("ntutils.randomness._RNG.randrange", return_value=42)
    assert randomness.random_digits(4) == 42
    spy.assert_called_once_with(10**4)


@pytest.mark.parametrize("digits", [1, 2, 3, 20, 300])
def test_random_exact_digits(digits, seeded_rng):
    for _ in range(200):
        no = randomness.random_exact_digits(digits, seeded_rng)
        assert arith.digit_count(no) == digits
        assert no >= 0


def test_random_exact_digits_validates():
    with pytest.raises(ValueError):
        randomness.random_exact_digits(0)


@pytest.mark.parametrize("value", [5, 0, -7, 10**100])
def test_random_in_range_degenerate(value):
    assert randomness.random_in_range(value, value) == value


@pytest.mark.parametrize("low,high", [(1, 2), (0, 9), (5, 1000), (-50, 50), (10**30, 10**30 + 3), (9, 10)])
def test_random_in_range_bounds(low, high, seeded_rng):
    for _ in range(200):
        assert low <= randomness.random_in_range(low, high, seeded_rng) <= high


def test_random_in_range_covers(seeded_rng):
    seen = {randomness.random_in_range(98, 103, seeded_rng) for _ in range(500)}
    assert seen == set(range(98, 104))


def test_random_in_range_validates():
    with pytest.raises(ValueError):
        randomness.random_in_range(10, 1)
