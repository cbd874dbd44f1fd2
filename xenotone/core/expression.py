#!/usr/bin/env python
# -*- encoding: utf-8 -*-
"""
Formatting nodes
================

Literal descriptions carried alongside exact values. They are only ever
used for stringification; arithmetic happens on the values themselves.

Descriptors
-----------
.. autosummary::
    :toctree: generated/

    Degree
    Pythagorean
    AbsolutePitch

Literals
--------
.. autosummary::
    :toctree: generated/

    IntegerLiteral
    FractionLiteral
    DecimalLiteral
    CentsLiteral
    NedjiLiteral
    RadicalLiteral
    MonzoLiteral
    ValLiteral
    FJS
    AspiringFJS
    AbsoluteFJS
    AspiringAbsoluteFJS

Node arithmetic
---------------
.. autosummary::
    :toctree: generated/

    add_nodes
    sub_nodes
    mul_nodes
    div_nodes
    mod_nodes
    round_to_nodes
    project_nodes
    literal_to_string
"""

import math
from dataclasses import dataclass, replace
from fractions import Fraction
from itertools import zip_longest
from typing import Optional, Tuple, Union

from typing_extensions import Literal, assert_never

from ..util.exceptions import ParameterError
from ..util.utils import mmod

__all__ = [
    "Degree",
    "Pythagorean",
    "AbsolutePitch",
    "FJSFlavor",
    "FJSInflection",
    "IntegerLiteral",
    "FractionLiteral",
    "DecimalLiteral",
    "CentsLiteral",
    "NedjiLiteral",
    "RadicalLiteral",
    "MonzoLiteral",
    "ValLiteral",
    "FJS",
    "AspiringFJS",
    "AbsoluteFJS",
    "AspiringAbsoluteFJS",
    "IntervalLiteral",
    "validate_node",
    "decimal_literal",
    "cents_literal",
    "real_decimal_literal",
    "add_nodes",
    "sub_nodes",
    "mul_nodes",
    "div_nodes",
    "mod_nodes",
    "round_to_nodes",
    "project_nodes",
    "format_rational",
    "ups_and_lifts_prefix",
    "pythagorean_to_string",
    "absolute_pitch_to_string",
    "literal_to_string",
]

FJSFlavor = Literal["", "c", "f", "n", "h", "m", "l", "s"]

# (index, flavor), e.g. (5, '') for a classic 5-limit inflection
FJSInflection = Tuple[int, str]


@dataclass(frozen=True)
class Degree:
    base: Fraction
    octaves: int = 0
    negative: bool = False


@dataclass(frozen=True)
class Pythagorean:
    quality: str
    degree: Degree
    imperfect: bool


@dataclass(frozen=True)
class AbsolutePitch:
    nominal: str
    accidentals: Tuple[str, ...]
    octave: int


@dataclass(frozen=True)
class IntegerLiteral:
    value: int


@dataclass(frozen=True)
class FractionLiteral:
    numerator: int
    denominator: int


@dataclass(frozen=True)
class DecimalLiteral:
    """Decimal number. Flavor 'r' marks a real (hard) decimal."""

    sign: int
    whole: int
    fractional: str = ""
    exponent: Optional[int] = None
    flavor: str = "e"


@dataclass(frozen=True)
class CentsLiteral:
    sign: int
    whole: int
    fractional: str = ""


@dataclass(frozen=True)
class NedjiLiteral:
    numerator: int
    denominator: int
    equave_numerator: Optional[int] = None
    equave_denominator: Optional[int] = None


@dataclass(frozen=True)
class RadicalLiteral:
    argument: Fraction
    exponent: Fraction


@dataclass(frozen=True)
class MonzoLiteral:
    components: Tuple[Fraction, ...]
    ups: int = 0
    lifts: int = 0
    basis: Optional[Tuple[Fraction, ...]] = None


@dataclass(frozen=True)
class ValLiteral:
    components: Tuple[Fraction, ...]
    ups: int = 0
    lifts: int = 0
    basis: Optional[Tuple[Fraction, ...]] = None


@dataclass(frozen=True)
class FJS:
    pythagorean: Pythagorean
    superscripts: Tuple[FJSInflection, ...] = ()
    subscripts: Tuple[FJSInflection, ...] = ()
    ups: int = 0
    lifts: int = 0


@dataclass(frozen=True)
class AspiringFJS:
    """Placeholder resolved into an FJS spelling at stringification time."""

    flavor: str = ""


@dataclass(frozen=True)
class AbsoluteFJS:
    pitch: AbsolutePitch
    superscripts: Tuple[FJSInflection, ...] = ()
    subscripts: Tuple[FJSInflection, ...] = ()
    ups: int = 0
    lifts: int = 0


@dataclass(frozen=True)
class AspiringAbsoluteFJS:
    flavor: str = ""


IntervalLiteral = Union[
    IntegerLiteral,
    FractionLiteral,
    DecimalLiteral,
    CentsLiteral,
    NedjiLiteral,
    RadicalLiteral,
    MonzoLiteral,
    ValLiteral,
    FJS,
    AspiringFJS,
    AbsoluteFJS,
    AspiringAbsoluteFJS,
]

_LITERAL_TYPES = IntervalLiteral.__args__  # type: ignore


def validate_node(node: Optional[IntervalLiteral]) -> None:
    """Raise ParameterError if ``node`` is not a well-formed literal."""
    if node is None:
        return
    if not isinstance(node, _LITERAL_TYPES):
        raise ParameterError(f"Unrecognized formatting node {node!r}")
    if isinstance(node, FractionLiteral) and node.denominator == 0:
        raise ParameterError("Fraction literal with a zero denominator")
    if isinstance(node, NedjiLiteral):
        if node.denominator == 0:
            raise ParameterError("Nedji literal with zero divisions")
        if node.equave_denominator == 0:
            raise ParameterError("Nedji literal with a degenerate equave")


def format_rational(value: Fraction) -> str:
    """Render a fraction as 'n' or 'n/d'."""
    value = Fraction(value)
    if value.denominator == 1:
        return str(value.numerator)
    return f"{value.numerator}/{value.denominator}"


def _decimal_digits(value: Fraction) -> Optional[Tuple[int, int, str]]:
    """Split a fraction with a terminating decimal expansion into digits."""
    denominator = value.denominator
    twos = fives = 0
    while denominator % 2 == 0:
        denominator //= 2
        twos += 1
    while denominator % 5 == 0:
        denominator //= 5
        fives += 1
    if denominator != 1:
        return None
    places = max(twos, fives)
    scaled = abs(value) * 10**places
    whole, fraction = divmod(int(scaled), 10**places)
    fractional = str(fraction).zfill(places) if places else ""
    return (-1 if value < 0 else 1), whole, fractional


def decimal_literal(value: Fraction) -> Optional[DecimalLiteral]:
    """Exact decimal literal of a fraction, or None if it does not terminate."""
    digits = _decimal_digits(Fraction(value))
    if digits is None:
        return None
    sign, whole, fractional = digits
    return DecimalLiteral(sign, whole, fractional, None, "e")


def cents_literal(value: Fraction) -> Optional[CentsLiteral]:
    """Exact cents literal of a fraction of cents, or None."""
    digits = _decimal_digits(Fraction(value))
    if digits is None:
        return None
    return CentsLiteral(*digits)


def real_decimal_literal(value: float) -> Optional[DecimalLiteral]:
    """Hard decimal literal of a float using its shortest repr."""
    if not math.isfinite(value):
        return None
    mantissa, _, exponent = repr(abs(value)).partition("e")
    whole, _, fractional = mantissa.partition(".")
    if fractional == "0":
        fractional = ""
    return DecimalLiteral(
        -1 if value < 0 else 1,
        int(whole),
        fractional,
        int(exponent) if exponent else None,
        "r",
    )


def _rational(node) -> Optional[Fraction]:
    if isinstance(node, IntegerLiteral):
        return Fraction(node.value)
    if isinstance(node, FractionLiteral):
        return Fraction(node.numerator, node.denominator)
    if isinstance(node, DecimalLiteral) and node.flavor != "r":
        value = node.whole + (
            Fraction(int(node.fractional), 10 ** len(node.fractional))
            if node.fractional
            else 0
        )
        if node.exponent:
            value *= Fraction(10) ** node.exponent
        return node.sign * value
    return None


def _cents(node: CentsLiteral) -> Fraction:
    value = Fraction(node.whole)
    if node.fractional:
        value += Fraction(int(node.fractional), 10 ** len(node.fractional))
    return node.sign * value


def _parts(node) -> Tuple[int, int]:
    if isinstance(node, IntegerLiteral):
        return node.value, 1
    return node.numerator, node.denominator


def _equave(node: NedjiLiteral) -> Fraction:
    if node.equave_numerator is None:
        return Fraction(2)
    return Fraction(node.equave_numerator, node.equave_denominator or 1)


def _with_denominator(node: NedjiLiteral, numerator: int, denominator: int):
    return replace(node, numerator=numerator, denominator=denominator)


def _add_components(a, b, sign=1):
    return tuple(x + sign * y for x, y in zip_longest(a, b, fillvalue=Fraction(0)))


def _neg_node(node):
    if isinstance(node, IntegerLiteral):
        return IntegerLiteral(-node.value)
    if isinstance(node, FractionLiteral):
        return FractionLiteral(-node.numerator, node.denominator)
    if isinstance(node, CentsLiteral):
        return replace(node, sign=-node.sign)
    if isinstance(node, NedjiLiteral):
        return replace(node, numerator=-node.numerator)
    if isinstance(node, (MonzoLiteral, ValLiteral)):
        return replace(
            node,
            components=tuple(-c for c in node.components),
            ups=-node.ups,
            lifts=-node.lifts,
        )
    return None


def add_nodes(a, b):
    """Formatting node of a sum, or None if the kinds do not combine."""
    if a is None or b is None:
        return None
    if isinstance(a, IntegerLiteral) and isinstance(b, IntegerLiteral):
        return IntegerLiteral(a.value + b.value)
    fraction_types = (IntegerLiteral, FractionLiteral)
    if isinstance(a, fraction_types) and isinstance(b, fraction_types):
        an, ad = _parts(a)
        bn, bd = _parts(b)
        denominator = math.lcm(ad, bd)
        numerator = an * (denominator // ad) + bn * (denominator // bd)
        divisor = math.gcd(numerator, denominator)
        numerator, denominator = numerator // divisor, denominator // divisor
        if denominator == 1:
            return IntegerLiteral(numerator)
        return FractionLiteral(numerator, denominator)
    if isinstance(a, CentsLiteral) and isinstance(b, CentsLiteral):
        return cents_literal(_cents(a) + _cents(b))
    if isinstance(a, NedjiLiteral) and isinstance(b, NedjiLiteral):
        if _equave(a) != _equave(b):
            return None
        denominator = math.lcm(a.denominator, b.denominator)
        numerator = a.numerator * (denominator // a.denominator) + b.numerator * (
            denominator // b.denominator
        )
        return _with_denominator(a, numerator, denominator)
    if isinstance(a, MonzoLiteral) and isinstance(b, MonzoLiteral):
        if a.basis != b.basis:
            return None
        return MonzoLiteral(
            _add_components(a.components, b.components),
            a.ups + b.ups,
            a.lifts + b.lifts,
            a.basis,
        )
    if isinstance(a, ValLiteral) and isinstance(b, ValLiteral):
        if a.basis != b.basis:
            return None
        return ValLiteral(
            _add_components(a.components, b.components),
            a.ups + b.ups,
            a.lifts + b.lifts,
            a.basis,
        )
    return None


def sub_nodes(a, b):
    """Formatting node of a difference, or None."""
    return add_nodes(a, _neg_node(b))


def _scale_node(node, factor: Fraction):
    if isinstance(node, CentsLiteral):
        return cents_literal(_cents(node) * factor)
    if factor.denominator != 1:
        return None
    k = factor.numerator
    if isinstance(node, NedjiLiteral):
        return replace(node, numerator=node.numerator * k)
    if isinstance(node, (MonzoLiteral, ValLiteral)):
        return replace(
            node,
            components=tuple(c * k for c in node.components),
            ups=node.ups * k,
            lifts=node.lifts * k,
        )
    return None


def mul_nodes(a, b):
    """Formatting node of a product, or None."""
    if a is None or b is None:
        return None
    if isinstance(a, IntegerLiteral) and isinstance(b, IntegerLiteral):
        return IntegerLiteral(a.value * b.value)
    fraction_types = (IntegerLiteral, FractionLiteral)
    if isinstance(a, fraction_types) and isinstance(b, fraction_types):
        an, ad = _parts(a)
        bn, bd = _parts(b)
        return FractionLiteral(an * bn, ad * bd)
    scalar = _rational(b)
    if scalar is not None and not isinstance(a, fraction_types + (DecimalLiteral,)):
        return _scale_node(a, scalar)
    scalar = _rational(a)
    if scalar is not None and not isinstance(b, fraction_types + (DecimalLiteral,)):
        return _scale_node(b, scalar)
    return None


def div_nodes(a, b):
    """Formatting node of a quotient, or None."""
    if a is None or b is None:
        return None
    fraction_types = (IntegerLiteral, FractionLiteral)
    if isinstance(a, fraction_types) and isinstance(b, fraction_types):
        an, ad = _parts(a)
        bn, bd = _parts(b)
        if bn == 0:
            return None
        numerator, denominator = an * bd, ad * bn
        if denominator < 0:
            numerator, denominator = -numerator, -denominator
        return FractionLiteral(numerator, denominator)
    if isinstance(a, NedjiLiteral) and isinstance(b, IntegerLiteral):
        if b.value == 0:
            return None
        sign = -1 if b.value < 0 else 1
        return replace(
            a, numerator=sign * a.numerator, denominator=a.denominator * abs(b.value)
        )
    if isinstance(a, CentsLiteral):
        scalar = _rational(b)
        if scalar:
            return cents_literal(_cents(a) / scalar)
    return None


def mod_nodes(a, b):
    """Formatting node of a modulo, or None."""
    if a is None or b is None:
        return None
    if isinstance(a, IntegerLiteral) and isinstance(b, IntegerLiteral):
        if b.value == 0:
            return None
        return IntegerLiteral(mmod(a.value, b.value))
    if isinstance(a, NedjiLiteral) and isinstance(b, NedjiLiteral):
        if _equave(a) != _equave(b) or b.numerator == 0:
            return None
        denominator = math.lcm(a.denominator, b.denominator)
        numerator = mmod(
            a.numerator * (denominator // a.denominator),
            b.numerator * (denominator // b.denominator),
        )
        return _with_denominator(a, numerator, denominator)
    return None


def round_to_nodes(a, b):
    """Formatting node of rounding to a multiple, or None."""
    if a is None or b is None:
        return None
    if isinstance(a, IntegerLiteral) and isinstance(b, IntegerLiteral):
        if b.value == 0:
            return None
        return IntegerLiteral(math.floor(Fraction(a.value, b.value) + Fraction(1, 2)) * b.value)
    if isinstance(a, NedjiLiteral) and isinstance(b, NedjiLiteral):
        if _equave(a) != _equave(b) or b.numerator == 0:
            return None
        denominator = math.lcm(a.denominator, b.denominator)
        step = b.numerator * (denominator // b.denominator)
        multiple = math.floor(
            Fraction(a.numerator * (denominator // a.denominator), step) + Fraction(1, 2)
        )
        return _with_denominator(a, multiple * step, denominator)
    return None


def project_nodes(a, base):
    """Re-base an octave-relative nedji onto the equave given by ``base``."""
    if not isinstance(a, NedjiLiteral) or a.equave_numerator is not None:
        return None
    if isinstance(base, (IntegerLiteral, FractionLiteral)):
        numerator, denominator = _parts(base)
        if numerator <= 0 or denominator <= 0:
            return None
        return replace(a, equave_numerator=numerator, equave_denominator=denominator)
    return None


def ups_and_lifts_prefix(ups: int, lifts: int) -> str:
    """Render up/down and lift/drop counts as a literal prefix."""
    prefix = "/" * lifts if lifts > 0 else "\\" * -lifts
    prefix += "^" * ups if ups > 0 else "v" * -ups
    return prefix


def _degree_to_string(degree: Degree) -> str:
    number = Fraction(degree.base) + 7 * degree.octaves
    if number.denominator == 1:
        result = str(number.numerator)
    else:
        result = f"{math.floor(number)}.5"
    if degree.negative:
        return "-" + result
    return result


def pythagorean_to_string(node: Pythagorean) -> str:
    """Render a Pythagorean descriptor, e.g. 'M3' or 'AA-2'."""
    return node.quality + _degree_to_string(node.degree)


def absolute_pitch_to_string(node: AbsolutePitch) -> str:
    """Render an absolute pitch descriptor, e.g. 'Eb4' or 'phi@4'."""
    separator = ""
    if len(node.nominal) > 1 or node.accidentals[-1:] == ("@",):
        separator = "@"
    return node.nominal + "".join(node.accidentals) + separator + str(node.octave)


def _inflections_to_string(superscripts, subscripts) -> str:
    result = ""
    if superscripts:
        result += "^" + ",".join(f"{i}{flavor}" for i, flavor in superscripts)
    if subscripts:
        result += "_" + ",".join(f"{i}{flavor}" for i, flavor in subscripts)
    return result


def _decimal_to_string(node: DecimalLiteral) -> str:
    result = "-" if node.sign < 0 else ""
    result += str(node.whole)
    if node.fractional:
        result += "." + node.fractional
    if node.exponent:
        result += f"e{node.exponent}"
    if node.flavor == "r" or (node.flavor == "e" and not node.exponent):
        result += node.flavor
    return result


def _basis_to_string(basis) -> str:
    if basis is None:
        return ""
    return "@" + ".".join(format_rational(b) for b in basis)


def literal_to_string(node: IntervalLiteral) -> str:
    """Render a formatting node in literal syntax.

    Aspiring nodes have no spelling of their own and must be resolved
    against a value first.

    Raises
    ------
    ParameterError
        If ``node`` is an aspiring node
    """
    if isinstance(node, IntegerLiteral):
        return str(node.value)
    elif isinstance(node, FractionLiteral):
        return f"{node.numerator}/{node.denominator}"
    elif isinstance(node, DecimalLiteral):
        return _decimal_to_string(node)
    elif isinstance(node, CentsLiteral):
        return ("-" if node.sign < 0 else "") + f"{node.whole}.{node.fractional}"
    elif isinstance(node, NedjiLiteral):
        result = f"{node.numerator}\\{node.denominator}"
        if node.equave_numerator is not None:
            equave = Fraction(node.equave_numerator, node.equave_denominator or 1)
            result += f"<{format_rational(equave)}>"
        return result
    elif isinstance(node, RadicalLiteral):
        return f"{format_rational(node.argument)}^{format_rational(node.exponent)}"
    elif isinstance(node, MonzoLiteral):
        return (
            ups_and_lifts_prefix(node.ups, node.lifts)
            + "["
            + " ".join(format_rational(c) for c in node.components)
            + ">"
            + _basis_to_string(node.basis)
        )
    elif isinstance(node, ValLiteral):
        return (
            ups_and_lifts_prefix(node.ups, node.lifts)
            + "<"
            + " ".join(format_rational(c) for c in node.components)
            + "]"
            + _basis_to_string(node.basis)
        )
    elif isinstance(node, FJS):
        return (
            ups_and_lifts_prefix(node.ups, node.lifts)
            + pythagorean_to_string(node.pythagorean)
            + _inflections_to_string(node.superscripts, node.subscripts)
        )
    elif isinstance(node, AbsoluteFJS):
        return (
            ups_and_lifts_prefix(node.ups, node.lifts)
            + absolute_pitch_to_string(node.pitch)
            + _inflections_to_string(node.superscripts, node.subscripts)
        )
    elif isinstance(node, (AspiringFJS, AspiringAbsoluteFJS)):
        raise ParameterError("Aspiring nodes must be resolved before formatting")
    else:
        assert_never(node)
