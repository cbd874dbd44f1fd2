#!/usr/bin/env python
# -*- encoding: utf-8 -*-
"""Tests for exact time monzo arithmetic"""

import math
from fractions import Fraction

import numpy as np
import pytest

import xenotone
from xenotone import TimeMonzo


def F(value):
    return TimeMonzo.from_fraction(value)


def test_from_fraction():
    third = F("5/4")
    assert third.prime_exponents == [-2, 0, 1]
    assert third.residual == 1
    assert third.cents == 0
    assert third.to_fraction() == Fraction(5, 4)


def test_zero():
    zero = F(0)
    assert zero.is_zero()
    assert zero.residual == 0
    assert zero.prime_exponents == []
    assert zero.value_of() == 0


def test_residual_beyond_components():
    n = xenotone.util.NUMBER_OF_COMPONENTS
    prime = xenotone.util.PRIMES[n]
    monzo = F(Fraction(-prime, 2))
    assert monzo.prime_exponents == [-1]
    assert monzo.residual == -prime
    assert monzo.to_fraction() == Fraction(-prime, 2)


def test_trailing_zeros_trimmed():
    monzo = TimeMonzo(0, [1, 0, 0])
    assert monzo.prime_exponents == [1]


@pytest.mark.xfail(raises=xenotone.ParameterError)
def test_too_many_components():
    TimeMonzo(0, [1] * (xenotone.util.NUMBER_OF_COMPONENTS + 1))


@pytest.mark.xfail(raises=xenotone.ParameterError)
def test_from_fraction_bad():
    F("three halves")


@pytest.mark.parametrize(
    "value,residual,text",
    [
        (float("inf"), 1, "Infinity"),
        (float("-inf"), -1, "-Infinity"),
        (float("nan"), 1, "NaN"),
    ],
)
def test_from_value_nonfinite(value, residual, text):
    monzo = TimeMonzo.from_value(value)
    assert monzo.prime_exponents == []
    assert monzo.residual == residual
    assert not math.isfinite(monzo.cents)
    assert not monzo.is_fractional()
    assert monzo.to_string() == text
    if math.isnan(value):
        assert math.isnan(monzo.value_of())
    else:
        assert monzo.value_of() == value


def test_from_value():
    assert TimeMonzo.from_value(3.0).is_fractional()
    assert TimeMonzo.from_value(3.0).to_integer() == 3
    real = TimeMonzo.from_value(-1.5)
    assert not real.is_fractional()
    assert real.residual == -1
    assert np.isclose(real.value_of(), -1.5)


def test_from_equal_temperament():
    fifth = TimeMonzo.from_equal_temperament("7/12")
    assert fifth.prime_exponents == [Fraction(7, 12)]
    assert fifth.is_equal_temperament()
    assert not fifth.is_fractional()
    assert fifth.to_equal_temperament() == (Fraction(7, 12), Fraction(2))


def test_to_equal_temperament():
    monzo = TimeMonzo(0, [Fraction(-1, 3), Fraction(1, 3)])
    assert monzo.to_equal_temperament() == (Fraction(1, 3), Fraction(3, 2))

    monzo = TimeMonzo(0, [Fraction(1, 3), Fraction(-1, 3)])
    assert monzo.to_equal_temperament() == (Fraction(-1, 3), Fraction(3, 2))


@pytest.mark.xfail(raises=xenotone.DomainError)
def test_to_equal_temperament_cents():
    TimeMonzo.from_cents(100.5).to_equal_temperament()


@pytest.mark.xfail(raises=xenotone.DomainError)
def test_to_fraction_irrational():
    TimeMonzo.from_equal_temperament("1/2").to_fraction()


def test_add_exact():
    assert (F("1/3") + F("1/6")).to_fraction() == Fraction(1, 2)
    assert (F(2) - F(5)).to_fraction() == -3
    assert (F(0) + F(7)).to_fraction() == 7


def test_add_inexact():
    a = TimeMonzo.from_value(1.5)
    b = TimeMonzo.from_value(0.25)
    assert np.isclose((a + b).value_of(), 1.75)

    root = TimeMonzo.from_equal_temperament("1/2")
    assert (root + root).strict_equals(root * F(2))
    assert (root - root).is_zero()


@pytest.mark.xfail(raises=xenotone.DomainError)
def test_add_time_mismatch():
    F(2) + TimeMonzo(-1, [1])


def test_mul_time():
    frequency = TimeMonzo(-1, [3, 0, 1, 0, 1])
    product = frequency * F("3/2")
    assert product.time_exponent == -1
    assert product.to_fraction() == 660


def test_inverse():
    assert F("3/2").inverse().to_fraction() == Fraction(2, 3)
    assert TimeMonzo(-1, [1]).inverse().time_exponent == 1


@pytest.mark.xfail(raises=ZeroDivisionError)
def test_inverse_zero():
    F(0).inverse()


def test_neg_abs():
    assert (-F(3)).to_fraction() == -3
    assert abs(F(-3)).to_fraction() == 3


@pytest.mark.parametrize(
    "base,exponent,expected",
    [
        ("3/2", 2, Fraction(9, 4)),
        ("3/2", -3, Fraction(8, 27)),
        ("9/4", Fraction(1, 2), Fraction(3, 2)),
        (-8, Fraction(1, 3), Fraction(-2)),
        (-2, 3, Fraction(-8)),
        (5, 0, Fraction(1)),
        (0, 3, Fraction(0)),
    ],
)
def test_pow_exact(base, exponent, expected):
    assert F(base).pow(exponent).to_fraction() == expected


def test_pow_radical():
    root = F(2).pow(Fraction(1, 2))
    assert root.prime_exponents == [Fraction(1, 2)]
    assert root.is_equal_temperament()
    assert (root * root).to_fraction() == 2


def test_pow_residual_root():
    n = xenotone.util.NUMBER_OF_COMPONENTS
    prime = xenotone.util.PRIMES[n]
    square = F(prime * prime).pow(Fraction(1, 2))
    assert square.to_fraction() == prime

    root = F(prime).pow(Fraction(1, 2))
    assert root.residual == 1
    assert np.isclose(root.value_of(), math.sqrt(prime))


def test_pow_real():
    result = F(2).pow(0.5)
    assert not result.is_fractional()
    assert np.isclose(result.value_of(), math.sqrt(2))
    assert F(2).pow(2.0).to_fraction() == 4


@pytest.mark.xfail(raises=xenotone.DomainError)
def test_pow_negative_even_root():
    F(-4).pow(Fraction(1, 2))


@pytest.mark.xfail(raises=ZeroDivisionError)
def test_pow_zero_negative():
    F(0).pow(-1)


@pytest.mark.xfail(raises=xenotone.DomainError)
def test_pow_absolute_real():
    TimeMonzo(-1, [1]).pow(0.5)


@pytest.mark.parametrize(
    "a,b,expected",
    [
        (8, 2, Fraction(3)),
        (-8, -2, Fraction(3)),
        ("1/9", 3, Fraction(-2)),
        (4, 8, Fraction(2, 3)),
    ],
)
def test_log_exact(a, b, expected):
    result = F(a).log(F(b))
    assert isinstance(result, Fraction)
    assert result == expected


def test_log_inexact():
    assert np.isclose(F(6).log(F(3)), math.log(6, 3))
    assert math.isnan(F(-8).log(F(2)))


@pytest.mark.xfail(raises=xenotone.DomainError)
@pytest.mark.parametrize("a,b", [(0, 2), (2, 1), (1, 1)])
def test_log_bad(a, b):
    F(a).log(F(b))


def test_dot():
    assert F("81/80").dot(F("5/4")) == -4 * -2 + 0 + -1 * 1
    assert F(3).dot(TimeMonzo(0, [12, 19])) == 19


def test_geometric_inverse():
    inverse = F(2).pow(Fraction(1, 2)).geometric_inverse()
    assert inverse.prime_exponents == [2]
    assert F(6).dot(F(6).geometric_inverse()) == 1


@pytest.mark.xfail(raises=xenotone.DomainError)
def test_geometric_inverse_unison():
    F(1).geometric_inverse()


def test_pitch_abs():
    assert F("2/3").pitch_abs().to_fraction() == Fraction(3, 2)
    assert F(-3).pitch_abs().to_fraction() == 3


def test_lens():
    assert F(2).lens_add(F(2)).to_fraction() == 1
    assert F(3).lens_add(F(6)).to_fraction() == 2
    assert F(1).lens_sub(F(2)).to_fraction() == 2
    assert F(0).lens_add(F(5)).is_zero()


@pytest.mark.parametrize(
    "a,b,ceiling,expected",
    [
        (6, 3, False, Fraction(2)),
        ("15/4", 2, False, Fraction(15, 8)),
        (4, 2, False, Fraction(1)),
        (4, 2, True, Fraction(2)),
        (29791, 31, True, Fraction(31)),
    ],
)
def test_reduce(a, b, ceiling, expected):
    assert F(a).reduce(F(b), ceiling).to_fraction() == expected


@pytest.mark.parametrize(
    "a,b,ceiling,expected",
    [
        (7, 3, False, Fraction(1)),
        ("-1/2", 1, False, Fraction(1, 2)),
        (6, 3, True, Fraction(3)),
        (-4, -4, True, Fraction(-4)),
    ],
)
def test_mmod(a, b, ceiling, expected):
    assert F(a).mmod(F(b), ceiling).to_fraction() == expected


def test_round_to():
    assert F(7).round_to(F(2)).to_fraction() == 8
    assert F(5).round_to(F(2)).to_fraction() == 6
    assert F(-5).round_to(F(2)).to_fraction() == -4
    assert F(10).pitch_round_to(F(2)).to_fraction() == 8


def test_compare():
    assert F("3/2") > F("4/3")
    assert F(2) == TimeMonzo.from_value(2.0)
    assert F(2) == F(4).pow(Fraction(1, 2))
    assert TimeMonzo.from_cents(1200) == F(2)
    assert F(-1) < F(0) < F(1)
    assert F(2) != TimeMonzo(-1, [1])
    assert F(2).compare(F(2)) == 0


def test_approximate_simple():
    near = TimeMonzo.from_cents(701.955)
    assert near.approximate_simple().to_fraction() == Fraction(3, 2)


def test_total_cents():
    assert np.isclose(F("3/2").total_cents(), 701.955, atol=1e-3)
    assert F(0).total_cents() == -math.inf
    assert F(4).octaves == 2
    assert np.isclose(F(3).octaves, math.log2(3))


@pytest.mark.parametrize(
    "monzo,domain,expected",
    [
        (F("5/4"), "linear", "5/4"),
        (F(-3), "linear", "-3"),
        (TimeMonzo.from_equal_temperament("7/12"), "linear", "128^1/12"),
        (TimeMonzo(-1, [3, 0, 1, 0, 1]), "linear", "440 Hz"),
        (TimeMonzo.from_equal_temperament("7/12"), "logarithmic", "7\\12"),
        (F(6), "logarithmic", "1\\1<6>"),
        (TimeMonzo(0, [Fraction(-1, 3), Fraction(1, 3)]), "logarithmic", "1\\3<3/2>"),
        (TimeMonzo(0, [12, 19, 28]), "cologarithmic", "<12 19 28]"),
    ],
)
def test_to_string(monzo, domain, expected):
    assert monzo.to_string(domain) == expected


@pytest.mark.xfail(raises=xenotone.ParameterError)
def test_to_string_bad_domain():
    F(2).to_string("exponential")


def test_literals():
    assert F(3).as_integer_literal() == xenotone.core.IntegerLiteral(3)
    assert F("3/2").as_integer_literal() is None
    assert F("3/2").as_fraction_literal(6) == xenotone.core.FractionLiteral(6, 4)
    assert F("3/2").as_fraction_literal(0, 8) == xenotone.core.FractionLiteral(12, 8)
    assert F("5/4").as_decimal_literal() == xenotone.core.DecimalLiteral(1, 1, "25")
    assert TimeMonzo.from_fractional_cents(Fraction(1403, 2)).as_cents_literal() == (
        xenotone.core.CentsLiteral(1, 701, "5")
    )
    fifth = TimeMonzo.from_equal_temperament("7/12")
    assert fifth.as_nedji_literal(0, 24) == xenotone.core.NedjiLiteral(14, 24)
    assert fifth.as_radical_literal() == xenotone.core.RadicalLiteral(
        Fraction(128), Fraction(1, 12)
    )
    assert F("81/80").as_monzo_literal() == xenotone.core.MonzoLiteral((-4, 4, -1))
    assert F(7).as_radical_literal() is None
