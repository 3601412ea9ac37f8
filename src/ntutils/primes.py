"""Probabilistic primality testing and random prime generation.

The primality test is a plain Miller-Rabin with uniformly drawn witnesses in `[1, n-1]` and 100 rounds by default,
so a composite slips through with probability at most `4**-100`. Primes are never rejected. Prime generation draws
random odd candidates of a fixed decimal length until one passes.

Typical usage example:

    is_probable_prime(2**127 - 1)
    check_prime(1000003, rounds=40)
    generate_prime(100)
"""
# Copyright (c) 2025-present Tech. TTGames
# SPDX-License-Identifier: EPL-2.0
import logging
import random

from ntutils.arith import is_even
from ntutils.randomness import random_exact_digits
from ntutils.randomness import random_in_range

logger = logging.getLogger(__name__)

DEFAULT_ROUNDS: int = 100
_TRIAL_DIVISION_BOUND: int = 1000


def sieve(n: int = 10000) -> list[int]:
    """Implements the Sieve of Eratosthenes.

    Uses the textbook Sieve of Eratosthenes to generate a set of primes up to `n`.
    Only odd numbers are stored, and sieving stops at the root.

    Args:
        n: The number up to which to generate primes. Defaults to 10000. Must be >= 0.

    Returns:
        A list of primes up to `n`, inclusive.

    Raises:
        ValueError: If `n` is negative.
    """
    if n < 0:
        raise ValueError("n must be >= 0")
    if n < 2:
        return []
    # Index i stands for the odd number 2 * i + 3.
    i_size = (n - 1) // 2
    candidate: list[bool] = [True] * i_size
    for i in range(int(n**0.5) // 2):
        if candidate[i]:
            r = 2 * i + 3
            for j in range((r * r - 3) // 2, i_size, r):
                candidate[j] = False
    return [2] + [(no * 2 + 3) for no, ele in enumerate(candidate) if ele]


_SMALL_PRIMES: tuple[int, ...] = tuple(sieve(_TRIAL_DIVISION_BOUND))


def _trial_division(no: int) -> bool:
    """Check the provided `no` against the known small primes.

    Args:
         no: The number to check.

    Returns:
        False if `no` cannot be prime, True otherwise.
    """
    if no < 2:
        return False
    for prime in _SMALL_PRIMES:
        if prime * prime > no:
            return True
        if no % prime == 0:
            return False
    return True


def is_probable_prime(n: int, rounds: int = DEFAULT_ROUNDS, rng: random.Random | None = None) -> bool:
    """Perform the Miller-Rabin primality test.

    Writes `n - 1 = d * 2**s` with `d` odd. Each round draws a witness `a` from `[1, n-1]` and computes `a**d mod n`.
    The witness is harmless if that is 1 or n-1, or if n-1 shows up within `s` squarings. Anything else proves `n`
    composite and ends the test early.

    Args:
        n: The integer to test.
        rounds: Number of witnesses to try. Defaults to `DEFAULT_ROUNDS`.
        rng: Generator for witness selection. Defaults to the process-wide generator.

    Returns:
        True if `n` is probably prime, False if it is certainly composite.

    Raises:
        ValueError: If `rounds` is less than 1.
    """
    if rounds < 1:
        raise ValueError("rounds must be >= 1")
    if n == 2:
        return True
    if n <= 1 or is_even(n):
        return False
    d, s = n - 1, 0
    while is_even(d):
        d >>= 1
        s += 1
    for _ in range(rounds):
        a = random_in_range(1, n - 1, rng)
        y = pow(a, d, n)
        if y == 1 or y == n - 1:
            continue
        for _ in range(s):
            y = pow(y, 2, n)
            if y == 1 or y == n - 1:
                break
        if y != n - 1:
            return False
    return True


def check_prime(candidate: int, rounds: int = DEFAULT_ROUNDS, rng: random.Random | None = None) -> bool:
    """Performs a composite primality test, using trial division by small primes before Miller-Rabin.

    Gives the same verdict as `is_probable_prime`, but most composites never reach the expensive part.

    Args:
        candidate: The candidate prime to test.
        rounds: Number of Miller-Rabin rounds. Defaults to `DEFAULT_ROUNDS`.
        rng: Generator for witness selection. Defaults to the process-wide generator.

    Returns:
        True if `candidate` is probably prime, False otherwise.

    Raises:
        ValueError: If `rounds` is less than 1.
    """
    if rounds < 1:
        raise ValueError("rounds must be >= 1")
    if candidate in _SMALL_PRIMES:
        return True
    if not _trial_division(candidate):
        return False
    return is_probable_prime(candidate, rounds, rng)


def generate_prime(digits: int,
                   rounds: int = DEFAULT_ROUNDS,
                   max_attempts: int | None = None,
                   rng: random.Random | None = None) -> int:
    """Generate a random probable prime with exactly `digits` decimal digits.

    Draws a candidate of the requested length, bumps it to the next odd number if even and keeps it once it passes
    `check_prime`. Around `ln(10**digits) / 2` odd candidates are needed on average.

    Args:
        digits: Decimal length of the prime. Must be >= 1.
        rounds: Number of Miller-Rabin rounds per candidate. Defaults to `DEFAULT_ROUNDS`.
        max_attempts: Upper bound on the number of candidates drawn. None (default) keeps drawing until success.
        rng: Generator for candidates and witnesses. Defaults to the process-wide generator.

    Returns:
        A probable prime.

    Raises:
        ValueError: If `digits` or `max_attempts` is not positive.
        RuntimeError: If `max_attempts` candidates were drawn with no prime found.
    """
    if digits <= 0:
        raise ValueError("digits must be >= 1")
    if max_attempts is not None and max_attempts < 1:
        raise ValueError("max_attempts must be >= 1")
    attempts = 0
    while max_attempts is None or attempts < max_attempts:
        attempts += 1
        candidate = random_exact_digits(digits, rng)
        # Cannot overflow the length, 10**digits - 1 is odd.
        if is_even(candidate):
            candidate += 1
        if check_prime(candidate, rounds, rng):
            logger.debug("Found %d-digit prime after %d candidate(s).", digits, attempts)
            return candidate
    logger.warning("No %d-digit prime within %d candidate(s).", digits, max_attempts)
    raise RuntimeError(f"Drew {max_attempts} candidates with no {digits}-digit prime found.")
