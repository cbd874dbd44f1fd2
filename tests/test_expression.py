#!/usr/bin/env python
# -*- encoding: utf-8 -*-
"""Tests for formatting nodes"""

from fractions import Fraction

import pytest

import xenotone
from xenotone.core import expression as ex


@pytest.mark.parametrize(
    "node,expected",
    [
        (ex.IntegerLiteral(7), "7"),
        (ex.FractionLiteral(6, 4), "6/4"),
        (ex.DecimalLiteral(1, 1, "25"), "1.25e"),
        (ex.DecimalLiteral(-1, 3, "", 2), "-3e2"),
        (ex.DecimalLiteral(1, 0, "1", None, "r"), "0.1r"),
        (ex.CentsLiteral(1, 700), "700."),
        (ex.CentsLiteral(-1, 3, "5"), "-3.5"),
        (ex.NedjiLiteral(7, 12), "7\\12"),
        (ex.NedjiLiteral(1, 13, 3, 1), "1\\13<3>"),
        (ex.RadicalLiteral(Fraction(3), Fraction(1, 2)), "3^1/2"),
        (ex.MonzoLiteral((Fraction(-4), Fraction(4), Fraction(-1))), "[-4 4 -1>"),
        (ex.MonzoLiteral((Fraction(1, 2),), ups=2), "^^[1/2>"),
        (
            ex.ValLiteral((Fraction(12), Fraction(19)), lifts=-1, basis=(2, 3)),
            "\\<12 19]@2.3",
        ),
    ],
)
def test_literal_to_string(node, expected):
    assert ex.literal_to_string(node) == expected


def test_fjs_to_string():
    third = ex.Pythagorean("M", ex.Degree(Fraction(3)), True)
    node = ex.FJS(third, ((5, ""),), (), ups=-1)
    assert ex.literal_to_string(node) == "vM3^5"

    node = ex.FJS(third, ((7, "n"),), ((5, ""), (11, "n")))
    assert ex.literal_to_string(node) == "M3^7n_5,11n"


@pytest.mark.parametrize(
    "pitch,expected",
    [
        (ex.AbsolutePitch("E", ("b",), 4), "Eb4"),
        (ex.AbsolutePitch("C", ("♮",), -1), "C♮-1"),
        (ex.AbsolutePitch("phi", (), 4), "phi@4"),
        (ex.AbsolutePitch("a", ("@",), 3), "a@@3"),
    ],
)
def test_absolute_pitch_to_string(pitch, expected):
    assert ex.absolute_pitch_to_string(pitch) == expected


@pytest.mark.parametrize(
    "quality,base,octaves,negative,expected",
    [
        ("P", 1, 0, False, "P1"),
        ("m", 6, 1, False, "m13"),
        ("AA", 2, 0, True, "AA-2"),
        ("n", Fraction(9, 2), 0, False, "n4.5"),
    ],
)
def test_pythagorean_to_string(quality, base, octaves, negative, expected):
    node = ex.Pythagorean(quality, ex.Degree(Fraction(base), octaves, negative), True)
    assert ex.pythagorean_to_string(node) == expected


@pytest.mark.xfail(raises=xenotone.ParameterError)
@pytest.mark.parametrize("node", [ex.AspiringFJS(), ex.AspiringAbsoluteFJS("n")])
def test_aspiring_to_string(node):
    ex.literal_to_string(node)


@pytest.mark.parametrize(
    "value,expected",
    [
        (Fraction(5, 4), ex.DecimalLiteral(1, 1, "25")),
        (Fraction(-3, 8), ex.DecimalLiteral(-1, 0, "375")),
        (Fraction(2), ex.DecimalLiteral(1, 2, "")),
        (Fraction(1, 3), None),
    ],
)
def test_decimal_literal(value, expected):
    assert ex.decimal_literal(value) == expected


def test_cents_literal():
    assert ex.cents_literal(Fraction(1403, 2)) == ex.CentsLiteral(1, 701, "5")
    assert ex.cents_literal(Fraction(100, 3)) is None


def test_real_decimal_literal():
    assert ex.real_decimal_literal(1.5) == ex.DecimalLiteral(1, 1, "5", None, "r")
    assert ex.real_decimal_literal(2.0) == ex.DecimalLiteral(1, 2, "", None, "r")
    assert ex.real_decimal_literal(float("nan")) is None


@pytest.mark.parametrize(
    "a,b,expected",
    [
        (ex.IntegerLiteral(2), ex.IntegerLiteral(3), ex.IntegerLiteral(5)),
        (ex.FractionLiteral(1, 2), ex.IntegerLiteral(1), ex.FractionLiteral(3, 2)),
        (ex.FractionLiteral(1, 4), ex.FractionLiteral(1, 6), ex.FractionLiteral(5, 12)),
        (ex.FractionLiteral(3, 2), ex.FractionLiteral(1, 2), ex.IntegerLiteral(2)),
        (ex.FractionLiteral(1, 4), ex.FractionLiteral(1, 4), ex.FractionLiteral(1, 2)),
        (ex.FractionLiteral(6, 4), ex.FractionLiteral(-3, 2), ex.IntegerLiteral(0)),
        (ex.NedjiLiteral(4, 12), ex.NedjiLiteral(2, 12), ex.NedjiLiteral(6, 12)),
        (ex.NedjiLiteral(1, 2), ex.NedjiLiteral(1, 3), ex.NedjiLiteral(5, 6)),
        (ex.NedjiLiteral(1, 2), ex.NedjiLiteral(1, 3, 3, 1), None),
        (ex.CentsLiteral(1, 700), ex.CentsLiteral(1, 0, "5"), ex.CentsLiteral(1, 700, "5")),
        (ex.IntegerLiteral(1), ex.CentsLiteral(1, 1), None),
        (ex.IntegerLiteral(1), None, None),
    ],
)
def test_add_nodes(a, b, expected):
    assert ex.add_nodes(a, b) == expected


def test_sub_nodes():
    assert ex.sub_nodes(ex.IntegerLiteral(2), ex.IntegerLiteral(5)) == ex.IntegerLiteral(-3)
    assert ex.sub_nodes(ex.NedjiLiteral(7, 12), ex.NedjiLiteral(1, 4)) == ex.NedjiLiteral(
        4, 12
    )


def test_mul_nodes():
    assert ex.mul_nodes(ex.NedjiLiteral(1, 12), ex.IntegerLiteral(7)) == ex.NedjiLiteral(
        7, 12
    )
    assert ex.mul_nodes(ex.IntegerLiteral(2), ex.FractionLiteral(3, 4)) == ex.FractionLiteral(
        6, 4
    )
    assert ex.mul_nodes(ex.NedjiLiteral(1, 12), ex.FractionLiteral(1, 2)) is None


def test_div_nodes():
    assert ex.div_nodes(ex.NedjiLiteral(7, 12), ex.IntegerLiteral(2)) == ex.NedjiLiteral(
        7, 24
    )
    assert ex.div_nodes(ex.IntegerLiteral(3), ex.IntegerLiteral(-4)) == ex.FractionLiteral(
        -3, 4
    )
    assert ex.div_nodes(ex.IntegerLiteral(3), ex.IntegerLiteral(0)) is None


@pytest.mark.parametrize(
    "a,b,expected",
    [
        (ex.IntegerLiteral(-1), ex.IntegerLiteral(3), ex.IntegerLiteral(2)),
        (ex.NedjiLiteral(19, 12), ex.NedjiLiteral(1, 1), ex.NedjiLiteral(7, 12)),
        (ex.IntegerLiteral(1), ex.IntegerLiteral(0), None),
    ],
)
def test_mod_nodes(a, b, expected):
    assert ex.mod_nodes(a, b) == expected


def test_round_to_nodes():
    assert ex.round_to_nodes(ex.IntegerLiteral(7), ex.IntegerLiteral(2)) == ex.IntegerLiteral(8)
    assert ex.round_to_nodes(ex.NedjiLiteral(5, 12), ex.NedjiLiteral(1, 4)) == ex.NedjiLiteral(
        6, 12
    )


def test_project_nodes():
    assert ex.project_nodes(ex.NedjiLiteral(1, 13), ex.IntegerLiteral(3)) == ex.NedjiLiteral(
        1, 13, 3, 1
    )
    assert ex.project_nodes(ex.NedjiLiteral(1, 13, 3, 1), ex.IntegerLiteral(5)) is None


@pytest.mark.parametrize(
    "ups,lifts,expected", [(0, 0, ""), (2, 0, "^^"), (-1, 1, "/v"), (1, -2, "\\\\^")]
)
def test_ups_and_lifts_prefix(ups, lifts, expected):
    assert ex.ups_and_lifts_prefix(ups, lifts) == expected


@pytest.mark.xfail(raises=xenotone.ParameterError)
@pytest.mark.parametrize(
    "node", [ex.FractionLiteral(1, 0), ex.NedjiLiteral(1, 0), "3/2", Fraction(3, 2)]
)
def test_validate_node_bad(node):
    ex.validate_node(node)


@pytest.mark.parametrize("node", [None, ex.IntegerLiteral(3), ex.AspiringFJS("n")])
def test_validate_node(node):
    ex.validate_node(node)
