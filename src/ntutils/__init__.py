"""Number Theory Utilities for Arbitrary-Precision Integers.

Provides GCD and LCM, linear Diophantine equation solving through the Extended Euclidean Algorithm, linear
congruence solving, Miller-Rabin primality testing and random prime generation, all over Python's unbounded ints.

Typical usage example:

    d, x, y = extended_euclid(35, 15)
    general_solution(35, 15).as_strings()
    solve_congruence(2, 4, 6)
    p = generate_prime(100)
    is_probable_prime(p)
"""
# Copyright (c) 2025-present Tech. TTGames
# SPDX-License-Identifier: EPL-2.0
from ntutils.arith import digit_count
from ntutils.arith import gcd
from ntutils.arith import is_even
from ntutils.arith import lcm
from ntutils.congruence import solve_congruence
from ntutils.diophantine import extended_euclid
from ntutils.diophantine import general_solution
from ntutils.diophantine import GeneralSolution
from ntutils.diophantine import special_solution
from ntutils.primes import check_prime
from ntutils.primes import DEFAULT_ROUNDS
from ntutils.primes import generate_prime
from ntutils.primes import is_probable_prime
from ntutils.primes import sieve
from ntutils.randomness import random_digits
from ntutils.randomness import random_exact_digits
from ntutils.randomness import random_in_range

__version__ = "0.1.0"
__all__ = [
    "DEFAULT_ROUNDS",
    "GeneralSolution",
    "gcd",
    "lcm",
    "is_even",
    "digit_count",
    "extended_euclid",
    "special_solution",
    "general_solution",
    "solve_congruence",
    "sieve",
    "is_probable_prime",
    "check_prime",
    "generate_prime",
    "random_digits",
    "random_exact_digits",
    "random_in_range",
]
