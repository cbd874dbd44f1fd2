#!/usr/bin/env python
# -*- coding: utf-8 -*-
"""Utility functions"""

import math
import os
from fractions import Fraction
from typing import List, Optional, Tuple, Union

import numpy as np
from numba import jit

from .._cache import cache
from .exceptions import ExhaustionError, ParameterError

__all__ = [
    "PRIMES",
    "PRIME_CENTS",
    "NUMBER_OF_COMPONENTS",
    "value_to_cents",
    "mmod",
    "circle_distance",
    "integer_root",
    "exact_root",
    "to_monzo",
    "to_monzo_and_residual",
    "approximate_fraction",
    "approximate_radical",
    "count_ups_and_lifts",
]

_Rational = Union[int, Fraction]

# Largest prime of the table is the thousandth prime
PRIME_LIMIT = 7919


def _sieve(limit: int) -> np.ndarray:
    is_prime = np.ones(limit + 1, dtype=bool)
    is_prime[:2] = False
    for n in range(2, int(limit**0.5) + 1):
        if is_prime[n]:
            is_prime[n * n :: n] = False
    return np.flatnonzero(is_prime)


PRIMES: List[int] = [int(p) for p in _sieve(PRIME_LIMIT)]

# Size of each prime in cents (1200 * log2(p))
PRIME_CENTS: np.ndarray = 1200 * np.log2(np.asarray(PRIMES, dtype=np.float64))

# Number of primes tracked explicitly in a monzo's exponent vector.
# Anything beyond lands in the residual.
NUMBER_OF_COMPONENTS: int = int(os.environ.get("XENOTONE_NUMBER_OF_COMPONENTS", 25))

if not 2 <= NUMBER_OF_COMPONENTS <= len(PRIMES):
    raise ParameterError(
        f"XENOTONE_NUMBER_OF_COMPONENTS={NUMBER_OF_COMPONENTS} "
        f"must be between 2 and {len(PRIMES)}"
    )


def value_to_cents(value: float) -> float:
    """Convert a frequency ratio to cents."""
    return 1200 * math.log2(value)


def mmod(a, b, ceiling: bool = False):
    """Mathematical modulo.

    With ``ceiling=False`` the result lies in ``[0, b)`` (or ``(b, 0]`` for
    negative ``b``). With ``ceiling=True`` it lies in ``(0, b]`` instead so
    that exact multiples of ``b`` map to ``b`` rather than zero.
    """
    if ceiling:
        return b - (-a) % b
    return a % b


@jit(nopython=True, nogil=True, cache=True)
def circle_distance(a: float, b: float, equave: float = 1200.0) -> float:
    """Distance between two pitches (in cents) on a circle of ``equave``."""
    return abs((a - b + 0.5 * equave) % equave - 0.5 * equave)


def integer_root(n: int, k: int) -> Optional[int]:
    """Return the exact ``k``-th root of a non-negative integer, or None."""
    if n < 0:
        raise ParameterError(f"Cannot take integer roots of negative n={n}")
    if n < 2:
        return n
    # Newton iteration starting from a float estimate
    guess = int(round(n ** (1.0 / k))) if n.bit_length() < 1000 else 1 << (
        n.bit_length() // k + 1
    )
    x = max(guess, 1)
    while True:
        y = ((k - 1) * x + n // x ** (k - 1)) // k
        if y >= x:
            break
        x = y
    for candidate in (x - 1, x, x + 1):
        if candidate >= 0 and candidate**k == n:
            return candidate
    return None


def exact_root(value: Fraction, k: int) -> Optional[Fraction]:
    """Return the exact ``k``-th root of a positive fraction, or None."""
    numerator = integer_root(value.numerator, k)
    if numerator is None:
        return None
    denominator = integer_root(value.denominator, k)
    if denominator is None:
        return None
    return Fraction(numerator, denominator)


def _factor(n: int, primes) -> Tuple[List[int], int]:
    exponents = []
    for p in primes:
        if n == 1:
            break
        count = 0
        while n % p == 0:
            n //= p
            count += 1
        exponents.append(count)
    return exponents, n


def to_monzo(value: _Rational) -> List[int]:
    """Factor a positive rational number over the full prime table.

    Parameters
    ----------
    value : int or Fraction > 0
        The number to factor

    Returns
    -------
    monzo : list of int
        Exponents of 2, 3, 5, ... with trailing zeros trimmed

    Raises
    ------
    ParameterError
        If ``value`` is not positive
    ExhaustionError
        If ``value`` has a prime factor beyond the prime table

    Examples
    --------
    >>> to_monzo(Fraction(5, 4))
    [-2, 0, 1]
    """
    value = Fraction(value)
    if value <= 0:
        raise ParameterError(f"Cannot factor non-positive value={value}")
    num, num_rest = _factor(value.numerator, PRIMES)
    den, den_rest = _factor(value.denominator, PRIMES)
    if num_rest != 1 or den_rest != 1:
        raise ExhaustionError(f"{value} has prime factors beyond {PRIME_LIMIT}")
    result = [0] * max(len(num), len(den))
    for i, e in enumerate(num):
        result[i] += e
    for i, e in enumerate(den):
        result[i] -= e
    while result and result[-1] == 0:
        result.pop()
    return result


def to_monzo_and_residual(
    value: _Rational, number_of_components: int
) -> Tuple[List[int], Fraction]:
    """Factor a non-zero rational over the first ``number_of_components`` primes.

    The sign and every factor not covered by the leading primes are
    returned in the residual.
    """
    value = Fraction(value)
    if value == 0:
        raise ParameterError("Cannot factor zero")
    primes = PRIMES[:number_of_components]
    num, num_rest = _factor(abs(value.numerator), primes)
    den, den_rest = _factor(value.denominator, primes)
    result = [0] * max(len(num), len(den))
    for i, e in enumerate(num):
        result[i] += e
    for i, e in enumerate(den):
        result[i] -= e
    while result and result[-1] == 0:
        result.pop()
    residual = Fraction(num_rest, den_rest)
    if value < 0:
        residual = -residual
    return result, residual


def _convergents(value: Fraction):
    """Yield the continued fraction convergents of an exact fraction."""
    h0, h1 = 0, 1
    k0, k1 = 1, 0
    x = value
    while True:
        a = math.floor(x)
        h0, h1 = h1, a * h1 + h0
        k0, k1 = k1, a * k1 + k0
        yield Fraction(h1, k1)
        remainder = x - a
        if remainder == 0:
            return
        x = 1 / remainder


@cache(level=10)
def approximate_fraction(value: float, epsilon: float = 1e-4) -> Fraction:
    """Find the simplest convergent within ``epsilon`` of ``value``.

    Parameters
    ----------
    value : float
        Real number to approximate
    epsilon : float > 0
        Absolute tolerance

    Returns
    -------
    fraction : Fraction

    Examples
    --------
    >>> approximate_fraction(math.pi)
    Fraction(333, 106)
    """
    if not math.isfinite(value):
        raise ParameterError(f"Cannot approximate value={value}")
    if epsilon <= 0:
        raise ParameterError(f"epsilon={epsilon} must be strictly positive")
    exact = Fraction(value)
    for convergent in _convergents(exact):
        if abs(convergent - exact) <= epsilon:
            return convergent
    return exact


@cache(level=10)
def approximate_radical(
    value: float, max_index: int = 5, max_height: int = 50000
) -> Tuple[int, Fraction]:
    """Approximate a positive real number by an ``index``-th root of a fraction.

    Parameters
    ----------
    value : float > 0
        Real number to approximate
    max_index : int > 0
        Largest root index considered
    max_height : int > 0
        Upper bound for the numerator and denominator of the radicand

    Returns
    -------
    index : int
        The index of the root
    radicand : Fraction
        The radicand so that ``radicand ** (1 / index)`` approximates ``value``
    """
    if not value > 0 or not math.isfinite(value):
        raise ParameterError(f"Cannot approximate value={value} by a radical")
    if max_index < 1 or max_height < 1:
        raise ParameterError("max_index and max_height must be positive")
    log_value = math.log(value)
    best_index = 1
    best_radicand = Fraction(1)
    best_error = math.inf
    for index in range(1, max_index + 1):
        target = value**index
        if not math.isfinite(target):
            break
        candidate = None
        for convergent in _convergents(Fraction(target)):
            if max(convergent.numerator, convergent.denominator) > max_height:
                break
            candidate = convergent
        if candidate is None or candidate <= 0:
            continue
        error = abs(
            (math.log(candidate.numerator) - math.log(candidate.denominator)) / index
            - log_value
        )
        if error < best_error:
            best_index, best_radicand, best_error = index, candidate, error
    return best_index, best_radicand


def count_ups_and_lifts(
    cents: float, up: float, lift: float
) -> Optional[Tuple[int, int]]:
    """Decompose an offset in cents into whole ups and lifts.

    Lifts are peeled off first (rounding towards zero) and the remainder
    must be an integral number of ups.

    Returns
    -------
    counts : (ups, lifts) or None
        None if the offset is not aligned to the up unit
    """
    if not math.isfinite(cents):
        return None
    lifts = 0
    if lift:
        lifts = int(cents / lift)
    remainder = cents - lifts * lift
    ups = 0
    if up:
        ups = round(remainder / up)
    if abs(remainder - ups * up) > 1e-9 * max(1.0, abs(cents)):
        return None
    return ups, lifts
