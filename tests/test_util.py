#!/usr/bin/env python
# -*- encoding: utf-8 -*-
"""Unit tests for xenotone.util"""
import os

try:
    os.environ.pop("XENOTONE_CACHE_DIR")
except KeyError:
    pass

import math
from fractions import Fraction

import numpy as np
import pytest

import xenotone
from xenotone.util import decorators


def test_prime_table():
    assert xenotone.util.PRIMES[:6] == [2, 3, 5, 7, 11, 13]
    assert len(xenotone.util.PRIMES) == 1000
    assert xenotone.util.PRIMES[-1] == 7919
    assert np.allclose(xenotone.util.PRIME_CENTS[:2], [1200, 1200 * np.log2(3)])


def test_number_of_components():
    assert xenotone.util.NUMBER_OF_COMPONENTS == int(
        os.environ.get("XENOTONE_NUMBER_OF_COMPONENTS", 25)
    )


@pytest.mark.parametrize(
    "a,b,ceiling,expected",
    [
        (7, 3, False, 1),
        (-1, 3, False, 2),
        (3, 3, False, 0),
        (3, 3, True, 3),
        (0, 3, True, 3),
        (-4, -4, True, -4),
        (Fraction(5, 2), 1, False, Fraction(1, 2)),
    ],
)
def test_mmod(a, b, ceiling, expected):
    assert xenotone.util.mmod(a, b, ceiling) == expected


@pytest.mark.parametrize(
    "a,b,expected", [(1190, 10, 20), (0, 600, 600), (1901.955, 701.955, 0)]
)
def test_circle_distance(a, b, expected):
    assert np.isclose(xenotone.util.circle_distance(a, b), expected)


def test_circle_distance_equave():
    tritave = 1200 * np.log2(3)
    assert np.isclose(xenotone.util.circle_distance(0.0, 1000.0, tritave), tritave - 1000)
    assert np.isclose(xenotone.util.circle_distance(-100.0, tritave, tritave), 100)


@pytest.mark.parametrize(
    "n,k,expected",
    [(27, 3, 3), (28, 3, None), (0, 5, 0), (1, 7, 1), (2**200, 100, 4), (10**40, 2, 10**20)],
)
def test_integer_root(n, k, expected):
    assert xenotone.util.integer_root(n, k) == expected


@pytest.mark.xfail(raises=xenotone.ParameterError)
def test_integer_root_negative():
    xenotone.util.integer_root(-8, 3)


@pytest.mark.parametrize(
    "value,k,expected",
    [
        (Fraction(8, 27), 3, Fraction(2, 3)),
        (Fraction(2), 2, None),
        (Fraction(4, 3), 2, None),
        (Fraction(1), 4, Fraction(1)),
    ],
)
def test_exact_root(value, k, expected):
    assert xenotone.util.exact_root(value, k) == expected


@pytest.mark.parametrize(
    "value,expected",
    [
        (1, []),
        (2, [1]),
        (Fraction(5, 4), [-2, 0, 1]),
        (Fraction(81, 80), [-4, 4, -1]),
        (Fraction(1, 7), [0, 0, 0, -1]),
        (7919, [0] * 999 + [1]),
    ],
)
def test_to_monzo(value, expected):
    assert xenotone.util.to_monzo(value) == expected


@pytest.mark.xfail(raises=xenotone.ParameterError)
@pytest.mark.parametrize("value", [0, -3, Fraction(-1, 2)])
def test_to_monzo_nonpositive(value):
    xenotone.util.to_monzo(value)


@pytest.mark.xfail(raises=xenotone.ExhaustionError)
def test_to_monzo_beyond_table():
    xenotone.util.to_monzo(7927)


def test_to_monzo_and_residual():
    exponents, residual = xenotone.util.to_monzo_and_residual(Fraction(-101, 4), 25)
    assert exponents == [-2]
    assert residual == -101

    exponents, residual = xenotone.util.to_monzo_and_residual(Fraction(15, 7), 2)
    assert exponents == [0, 1]
    assert residual == Fraction(5, 7)


@pytest.mark.xfail(raises=xenotone.ParameterError)
def test_to_monzo_and_residual_zero():
    xenotone.util.to_monzo_and_residual(0, 5)


@pytest.mark.parametrize(
    "value,epsilon,expected",
    [
        (math.pi, 1e-4, Fraction(333, 106)),
        (math.pi, 1e-2, Fraction(22, 7)),
        (1.5, 1e-4, Fraction(3, 2)),
        (-0.25, 1e-4, Fraction(-1, 4)),
    ],
)
def test_approximate_fraction(value, epsilon, expected):
    assert xenotone.util.approximate_fraction(value, epsilon) == expected


@pytest.mark.xfail(raises=xenotone.ParameterError)
@pytest.mark.parametrize("value,epsilon", [(math.nan, 1e-4), (math.inf, 1e-4), (1.5, 0)])
def test_approximate_fraction_bad(value, epsilon):
    xenotone.util.approximate_fraction(value, epsilon)


@pytest.mark.parametrize("value", [math.sqrt(2), 3 ** (1 / 3), 1.25])
def test_approximate_radical(value):
    index, radicand = xenotone.util.approximate_radical(value)
    assert 1 <= index <= 5
    assert max(radicand.numerator, radicand.denominator) <= 50000
    assert np.isclose(float(radicand) ** (1 / index), value)


def test_approximate_radical_rational():
    index, radicand = xenotone.util.approximate_radical(1.25, max_index=1)
    assert index == 1
    assert radicand == Fraction(5, 4)


@pytest.mark.xfail(raises=xenotone.ParameterError)
@pytest.mark.parametrize("value", [0, -2.0, math.inf])
def test_approximate_radical_bad(value):
    xenotone.util.approximate_radical(value)


@pytest.mark.parametrize(
    "cents,up,lift,expected",
    [
        (0, 1, 5, (0, 0)),
        (3, 1, 5, (3, 0)),
        (12, 1, 5, (2, 2)),
        (-7, 1, 5, (-2, -1)),
        (0.5, 1, 5, None),
        (math.nan, 1, 5, None),
        (10, 0, 5, (0, 2)),
    ],
)
def test_count_ups_and_lifts(cents, up, lift, expected):
    assert xenotone.util.count_ups_and_lifts(cents, up, lift) == expected


def test_vectorize_scalar():
    @decorators.vectorize(otypes="U")
    def double(x):
        return str(2 * x)

    assert double(3) == "6"
    assert isinstance(double(3), str)
    out = double([1, 2])
    assert isinstance(out, np.ndarray)
    assert list(out) == ["2", "4"]


def test_show_versions(capsys):
    xenotone.show_versions()
    out = capsys.readouterr().out
    assert "xenotone: {}".format(xenotone.__version__) in out
    assert "numba: " in out
    limit = xenotone.util.PRIMES[xenotone.util.NUMBER_OF_COMPONENTS - 1]
    assert f"components: {xenotone.util.NUMBER_OF_COMPONENTS} ({limit}-limit)" in out
    assert "cache: " in out


def test_dependency_versions():
    from xenotone.version import dependency_versions

    versions = dependency_versions()
    assert "pytest" not in versions
    assert versions["numpy"] == np.__version__
    assert dependency_versions(tests=True)["pytest"] == pytest.__version__
