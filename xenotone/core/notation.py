#!/usr/bin/env python
# -*- coding: utf-8 -*-
"""
Notation
========

Construction
------------
.. autosummary::
    :toctree: generated/

    from_integer
    from_fraction
    from_real
    from_cents
    from_nedji
    from_pythagorean
    from_absolute_pitch
    from_fjs
    from_absolute_fjs
    from_monzo
    from_val
    with_equave
    patent_val
    parse_fjs
    parse_absolute_fjs

Domain conversion
-----------------
.. autosummary::
    :toctree: generated/

    simplify
    bleach
    unlabel
    linear
    logarithmic
    cologarithmic
    to_linear
    to_logarithmic
    to_absolute_linear
    to_absolute_logarithmic

Type conversion
---------------
.. autosummary::
    :toctree: generated/

    to_integer
    floor
    around
    ceil
    ups_as
    to_fraction
    to_radical
    to_decimal
    to_cents
    to_nedji
    to_monzo
    to_fjs
    to_absolute_fjs
    ratio_to_fjs
"""

import bisect
import math
import re
from fractions import Fraction
from typing import Any, Iterable, List, Optional, Sequence, Tuple, Union, overload

import numpy as np

from ..util.decorators import vectorize
from ..util.exceptions import DomainError, ParameterError
from ..util.utils import (
    NUMBER_OF_COMPONENTS,
    PRIME_CENTS,
    PRIMES,
    approximate_fraction,
    approximate_radical,
)
from .context import RootContext
from .expression import (
    FJS,
    AbsoluteFJS,
    AbsolutePitch,
    FJSInflection,
    FractionLiteral,
    MonzoLiteral,
    NedjiLiteral,
    Pythagorean,
    ValLiteral,
    cents_literal,
    pythagorean_to_string,
    real_decimal_literal,
)
from .fjs import as_absolute_fjs, as_fjs, inflect
from .interval import Interval, Val, time_monzo_as
from .monzo import TimeMonzo
from .pythagorean import (
    absolute_monzo,
    parse_absolute_pitch,
    parse_pythagorean,
    pythagorean_monzo,
)

__all__ = [
    "from_integer",
    "from_fraction",
    "from_real",
    "from_cents",
    "from_nedji",
    "from_pythagorean",
    "from_absolute_pitch",
    "from_fjs",
    "from_absolute_fjs",
    "from_monzo",
    "from_val",
    "with_equave",
    "patent_val",
    "parse_fjs",
    "parse_absolute_fjs",
    "simplify",
    "bleach",
    "unlabel",
    "linear",
    "logarithmic",
    "cologarithmic",
    "to_linear",
    "to_logarithmic",
    "to_absolute_linear",
    "to_absolute_logarithmic",
    "to_integer",
    "floor",
    "around",
    "ceil",
    "ups_as",
    "to_fraction",
    "to_radical",
    "to_decimal",
    "to_cents",
    "to_nedji",
    "to_monzo",
    "to_fjs",
    "to_absolute_fjs",
    "ratio_to_fjs",
]

_Rational = Union[int, str, Fraction]

TWO = TimeMonzo(0, [1])

HALF = Fraction(1, 2)

FLAVORS = ("", "c", "f", "n", "h", "m", "l", "s")

# ups-and-lifts prefix, body ending in the degree or octave, inflections
FJS_RE = re.compile(
    r"^(?P<prefix>[/\\^v]*)"
    r"(?P<body>.*?\d)"
    r"(?:\^(?P<superscripts>[0-9a-z,]+))?"
    r"(?:_(?P<subscripts>[0-9a-z,]+))?$"
)

INFLECTION_RE = re.compile(r"^(?P<number>\d+)(?P<flavor>[a-z]?)$")


def _context(context: Optional[RootContext]) -> RootContext:
    if context is None:
        return RootContext()
    return context


# Construction


def from_integer(value: int) -> Interval:
    """Linear interval of an integer with an integer literal node."""
    return Interval.from_integer(value)


def from_fraction(value: _Rational, denominator: Optional[int] = None) -> Interval:
    """Linear interval of a fraction.

    The terms are kept as written in the formatting node.

    Parameters
    ----------
    value : int, str or Fraction
        The numerator, a ``'n/d'`` string or a fraction
    denominator : int, optional
        Explicit denominator

    Examples
    --------
    >>> str(from_fraction(6, 4))
    '6/4'
    >>> from_fraction(6, 4).value.to_fraction()
    Fraction(3, 2)
    """
    if denominator is not None:
        numerator = int(value)
        denominator = int(denominator)
    elif isinstance(value, str) and "/" in value:
        head, _, tail = value.partition("/")
        try:
            numerator, denominator = int(head), int(tail)
        except ValueError as exc:
            raise ParameterError(f"Cannot interpret {value!r} as a fraction") from exc
    else:
        fraction = Fraction(value)
        numerator, denominator = fraction.numerator, fraction.denominator
    if denominator == 0:
        raise ParameterError("Division by zero in fraction literal")
    monzo = TimeMonzo.from_fraction(Fraction(numerator, denominator))
    return Interval(monzo, "linear", FractionLiteral(numerator, denominator))


def from_real(value: float) -> Interval:
    """Linear interval of a real number written as a hard decimal.

    Scaling a logarithmic interval by the result multiplies its size in
    cents instead of raising it to an exact power.
    """
    value = float(value)
    return Interval(TimeMonzo.from_value(value), "linear", real_decimal_literal(value))


def from_cents(cents: Union[int, float, str, Fraction]) -> Interval:
    """Logarithmic interval of an exact number of cents.

    Parameters
    ----------
    cents : number or str
        Floats are read through their decimal representation so that
        ``12.03`` stays exactly ``1203/100`` cents.

    Examples
    --------
    >>> str(from_cents(700))
    '700.'
    >>> from_cents("1200").value.to_fraction()
    Fraction(2, 1)
    """
    if isinstance(cents, float):
        cents = repr(cents)
    cents = Fraction(cents)
    return Interval(
        TimeMonzo.from_fractional_cents(cents), "logarithmic", cents_literal(cents)
    )


def from_nedji(
    numerator: int, denominator: int, equave: Optional[_Rational] = None
) -> Interval:
    """Logarithmic interval of ``numerator`` steps of ``denominator``-EDO.

    Parameters
    ----------
    numerator : int
    denominator : int != 0
    equave : rational, optional
        Equave of the division. Defaults to the octave.

    Examples
    --------
    >>> str(from_nedji(7, 12))
    '7\\\\12'
    >>> str(from_nedji(1, 13, 3))
    '1\\\\13<3>'
    """
    if not denominator:
        raise ParameterError("Division by zero in nedji literal")
    if equave is None:
        monzo = TimeMonzo.from_equal_temperament(Fraction(numerator, denominator))
        return Interval(monzo, "logarithmic", NedjiLiteral(numerator, denominator))
    equave = Fraction(equave)
    monzo = TimeMonzo.from_equal_temperament(
        Fraction(numerator, denominator), equave
    )
    node = NedjiLiteral(numerator, denominator, equave.numerator, equave.denominator)
    return Interval(monzo, "logarithmic", node)


def _inflections(text: Optional[str]) -> Tuple[FJSInflection, ...]:
    if not text:
        return ()
    result = []
    for token in text.split(","):
        match = INFLECTION_RE.match(token)
        if match is None or match.group("flavor") not in FLAVORS:
            raise ParameterError(f"Invalid FJS inflection {token!r}")
        result.append((int(match.group("number")), match.group("flavor")))
    return tuple(result)


def _split_fjs(text: str):
    match = FJS_RE.match(text)
    if match is None:
        raise ParameterError(f"Invalid FJS {text!r}")
    prefix = match.group("prefix")
    ups = prefix.count("^") - prefix.count("v")
    lifts = prefix.count("/") - prefix.count("\\")
    return (
        match.group("body"),
        _inflections(match.group("superscripts")),
        _inflections(match.group("subscripts")),
        ups,
        lifts,
    )


def parse_fjs(text: str) -> FJS:
    """Parse a relative FJS spelling such as ``'M3^5'`` or ``'vd5^7_5'``.

    Raises
    ------
    ParameterError
        If the text is not a valid FJS interval
    """
    body, superscripts, subscripts, ups, lifts = _split_fjs(text)
    return FJS(parse_pythagorean(body), superscripts, subscripts, ups, lifts)


def parse_absolute_fjs(text: str) -> AbsoluteFJS:
    """Parse an absolute FJS spelling such as ``'E4^5'`` or ``'Ed4^11n'``."""
    body, superscripts, subscripts, ups, lifts = _split_fjs(text)
    return AbsoluteFJS(parse_absolute_pitch(body), superscripts, subscripts, ups, lifts)


def _steps(monzo: TimeMonzo, context: RootContext, ups: int, lifts: int) -> TimeMonzo:
    if ups:
        monzo = monzo.mul(context.up.pow(ups))
    if lifts:
        monzo = monzo.mul(context.lift.pow(lifts))
    return monzo


def _fragile(result: Interval, context: RootContext, node) -> Interval:
    if node.ups or node.lifts:
        context.fragiles.append(result)
    return result


def from_pythagorean(node: Union[str, Pythagorean]) -> Interval:
    """Logarithmic interval of an uninflected Pythagorean interval.

    Examples
    --------
    >>> from_pythagorean("M3").value.to_fraction()
    Fraction(81, 64)
    """
    if isinstance(node, str):
        node = parse_pythagorean(node)
    return Interval(pythagorean_monzo(node), "logarithmic", FJS(node))


def from_absolute_pitch(
    node: Union[str, AbsolutePitch], context: Optional[RootContext] = None
) -> Interval:
    """Logarithmic interval of an absolute pitch relative to ``context.C4``."""
    if isinstance(node, str):
        node = parse_absolute_pitch(node)
    context = _context(context)
    return Interval(
        context.C4.mul(absolute_monzo(node)), "logarithmic", AbsoluteFJS(node)
    )


def from_fjs(
    node: Union[str, FJS], context: Optional[RootContext] = None
) -> Interval:
    """Logarithmic interval of an FJS spelling.

    Parameters
    ----------
    node : str or FJS
        For example ``'M3^5'``, ``'n3^11n'`` or ``'^M2'``
    context : RootContext, optional
        Supplies the size of ups and lifts. Results counting ups or lifts
        are registered as fragile.

    Returns
    -------
    interval : Interval

    Examples
    --------
    >>> from_fjs("M3^5").value.to_fraction()
    Fraction(5, 4)
    >>> from_fjs("sd4^7_11n").value.to_fraction()
    Fraction(14, 11)
    """
    if isinstance(node, str):
        node = parse_fjs(node)
    context = _context(context)
    monzo = inflect(
        pythagorean_monzo(node.pythagorean), node.superscripts, node.subscripts
    )
    monzo = _steps(monzo, context, node.ups, node.lifts)
    return _fragile(Interval(monzo, "logarithmic", node), context, node)


def from_absolute_fjs(
    node: Union[str, AbsoluteFJS], context: Optional[RootContext] = None
) -> Interval:
    """Logarithmic interval of an absolute FJS spelling relative to ``context.C4``.

    Examples
    --------
    >>> from_absolute_fjs("E4^5").value.to_fraction()
    Fraction(5, 4)
    """
    if isinstance(node, str):
        node = parse_absolute_fjs(node)
    context = _context(context)
    monzo = inflect(absolute_monzo(node.pitch), node.superscripts, node.subscripts)
    monzo = _steps(context.C4.mul(monzo), context, node.ups, node.lifts)
    return _fragile(Interval(monzo, "logarithmic", node), context, node)


def _basis_monzos(basis: Iterable[_Rational]) -> List[TimeMonzo]:
    result = []
    for element in basis:
        monzo = TimeMonzo.from_fraction(element)
        if monzo.residual != 1:
            raise ParameterError(f"Subgroup basis element {element} is out of range")
        result.append(monzo)
    return result


def from_monzo(
    components: Sequence[_Rational], basis: Optional[Iterable[_Rational]] = None
) -> Interval:
    """Logarithmic interval of a monzo, optionally over a subgroup basis.

    Examples
    --------
    >>> from_monzo([-2, 0, 1]).value.to_fraction()
    Fraction(5, 4)
    >>> from_monzo([1, 1], basis=[2, "7/5"]).value.to_fraction()
    Fraction(14, 5)
    """
    components = tuple(Fraction(c) for c in components)
    if basis is None:
        return Interval(TimeMonzo(0, components), "logarithmic", MonzoLiteral(components))
    basis = tuple(Fraction(b) for b in basis)
    if len(basis) < len(components):
        raise ParameterError("Not enough basis elements for the monzo components")
    monzo = TimeMonzo.from_integer(1)
    for element, component in zip(_basis_monzos(basis), components):
        monzo = monzo.mul(element.pow(component))
    return Interval(
        monzo, "logarithmic", MonzoLiteral(components, basis=basis[: len(components)])
    )


def _solve(matrix: List[List[Fraction]], vector: List[Fraction]) -> List[Fraction]:
    """Exact Gauss-Jordan elimination of ``matrix @ x = vector``."""
    size = len(vector)
    rows = [list(row) + [value] for row, value in zip(matrix, vector)]
    for col in range(size):
        pivot = next((r for r in range(col, size) if rows[r][col]), None)
        if pivot is None:
            raise ParameterError("Subgroup basis is not linearly independent")
        rows[col], rows[pivot] = rows[pivot], rows[col]
        for r in range(size):
            if r != col and rows[r][col]:
                factor = rows[r][col] / rows[col][col]
                rows[r] = [a - factor * b for a, b in zip(rows[r], rows[col])]
    return [rows[i][size] / rows[i][i] for i in range(size)]


def from_val(
    components: Sequence[_Rational],
    basis: Optional[Iterable[_Rational]] = None,
    equave: Optional[_Rational] = None,
) -> Val:
    """Tuning map from its step counts, optionally over a subgroup basis.

    A subgroup val is lifted to the full prime basis through the
    pseudo-inverse of the basis, so that it maps every basis element to
    its step count.

    Parameters
    ----------
    components : sequence of rationals
        Steps per prime, or per basis element
    basis : iterable of rationals, optional
        Subgroup basis such as ``[2, 3, '13/5']``
    equave : rational, optional
        Defaults to the first basis element, or the octave

    Returns
    -------
    val : Val

    Examples
    --------
    >>> val = from_val([5, 8, 7], basis=[2, 3, "13/5"])
    >>> val.value.prime_exponents
    [Fraction(5, 1), Fraction(8, 1), Fraction(-7, 2), Fraction(0, 1), Fraction(0, 1), Fraction(7, 2)]
    """
    components = tuple(Fraction(c) for c in components)
    if basis is None:
        equave = TimeMonzo.from_fraction(2 if equave is None else equave)
        return Val(TimeMonzo(0, components), equave, ValLiteral(components))
    basis = tuple(Fraction(b) for b in basis)
    if len(basis) != len(components):
        raise ParameterError("Val components must match the subgroup basis")
    monzos = _basis_monzos(basis)
    size = max(len(m.prime_exponents) for m in monzos)
    vectors = [m.prime_exponents + [Fraction(0)] * (size - len(m.prime_exponents)) for m in monzos]
    gram = [[sum(a * b for a, b in zip(u, v)) for v in vectors] for u in vectors]
    weights = _solve(gram, list(components))
    exponents = [
        sum(w * vector[i] for w, vector in zip(weights, vectors)) for i in range(size)
    ]
    if equave is None:
        equave = basis[0]
    return Val(
        TimeMonzo(0, exponents),
        TimeMonzo.from_fraction(equave),
        ValLiteral(components, basis=basis),
    )


def with_equave(val: Val, equave: Union[Interval, TimeMonzo, _Rational]) -> Val:
    """Reinterpret the step counts of ``val`` against another equave."""
    if isinstance(equave, Interval):
        equave = equave.value
    elif not isinstance(equave, TimeMonzo):
        equave = TimeMonzo.from_fraction(equave)
    return Val(val.value.clone(), equave.clone())


def patent_val(
    divisions: _Rational,
    equave: _Rational = 2,
    limit: Optional[int] = None,
) -> Val:
    """Patent val: the nearest step count of each prime.

    Parameters
    ----------
    divisions : rational > 0
        Number of steps in the equave
    equave : rational > 1
    limit : int, optional
        Largest prime to map. Defaults to every tracked prime.

    Returns
    -------
    val : Val

    Raises
    ------
    ParameterError
        If ``limit`` exceeds the tracked primes

    Examples
    --------
    >>> str(patent_val(12, limit=7))
    '<12 19 28 34]'
    >>> str(patent_val(13, 3, limit=23))
    'withEquave(<8 13 19 23 28 30 34 35 37], 3)'
    """
    equave = TimeMonzo.from_fraction(equave)
    if limit is None:
        count = NUMBER_OF_COMPONENTS
    else:
        count = bisect.bisect_right(PRIMES, limit)
    if count > NUMBER_OF_COMPONENTS:
        raise ParameterError(
            f"limit={limit} exceeds the {NUMBER_OF_COMPONENTS} tracked primes"
        )
    steps = float(Fraction(divisions)) * PRIME_CENTS[:count] / equave.total_cents()
    components = np.floor(steps + 0.5).astype(int)
    return Val(TimeMonzo(0, [int(c) for c in components]), equave)


# Domain conversion


def simplify(interval: Interval) -> Interval:
    """Drop the formatting node, keeping the value and annotation."""
    return Interval(interval.value.clone(), interval.domain, None, interval)


def bleach(interval: Interval) -> Interval:
    """Drop the color."""
    result = interval.shallow_clone()
    result.color = None
    return result


def unlabel(interval: Interval) -> Interval:
    """Drop the label."""
    result = interval.shallow_clone()
    result.label = ""
    return result


def linear(interval: Interval) -> Interval:
    """Reinterpret the value in the linear domain."""
    return Interval(interval.value.clone(), "linear", None, interval)


def logarithmic(interval: Interval) -> Interval:
    """Reinterpret the value in the logarithmic domain."""
    return Interval(interval.value.clone(), "logarithmic", None, interval)


def cologarithmic(interval: Interval) -> Val:
    """Reinterpret the value as an octave-equivalent val."""
    return Val(interval.value.clone(), TWO)


def _unison_frequency(context: Optional[RootContext], direction: str) -> TimeMonzo:
    if context is None or context.unison_frequency is None:
        raise DomainError(
            f"Reference frequency must be set for {direction} conversion. "
            "Try 1/1 = 440 Hz"
        )
    return context.unison_frequency


def to_absolute_linear(
    interval: Interval, context: Optional[RootContext] = None
) -> Interval:
    """Convert to an absolute frequency in the linear domain.

    Absolute values are normalized to a frequency. Relative values are
    scaled by ``context.unison_frequency``.

    Raises
    ------
    DomainError
        If a relative value is converted without a unison frequency
    """
    if interval.is_absolute():
        exponent = -1 / interval.value.time_exponent
        return Interval(interval.value.pow(exponent), "linear", None, interval)
    unison = _unison_frequency(context, "relative -> absolute")
    return Interval(interval.value.mul(unison), "linear", None, interval)


def to_linear(interval: Interval, context: Optional[RootContext] = None) -> Interval:
    """Convert to a relative value in the linear domain.

    Raises
    ------
    DomainError
        If an absolute value is converted without a unison frequency
    """
    if interval.is_relative():
        return Interval(interval.value.clone(), "linear", None, interval)
    unison = _unison_frequency(context, "absolute -> relative")
    frequency = to_absolute_linear(interval, context)
    return Interval(frequency.value.div(unison), "linear", None, interval)


def to_absolute_logarithmic(
    interval: Interval, context: Optional[RootContext] = None
) -> Interval:
    """Same as :func:`to_absolute_linear` but in the logarithmic domain."""
    result = to_absolute_linear(interval, context)
    result.domain = "logarithmic"
    return result


def to_logarithmic(
    interval: Interval, context: Optional[RootContext] = None
) -> Interval:
    """Same as :func:`to_linear` but in the logarithmic domain."""
    result = to_linear(interval, context)
    result.domain = "logarithmic"
    return result


# Type conversion


def _rounded(interval: Interval, context: Optional[RootContext], rounding) -> Interval:
    converted = to_linear(interval, context)
    if converted.value.is_fractional():
        return Interval.from_integer(rounding(converted.value.to_fraction()), interval)
    value = converted.value_of()
    if not math.isfinite(value):
        raise DomainError(f"Cannot round value={value} to an integer")
    return Interval.from_integer(rounding(value), interval)


def to_integer(interval: Interval, context: Optional[RootContext] = None) -> Interval:
    """Truncate the relative linear value to an integer."""
    return _rounded(interval, context, math.trunc)


def floor(interval: Interval, context: Optional[RootContext] = None) -> Interval:
    """Round the relative linear value down to an integer."""
    return _rounded(interval, context, math.floor)


def around(interval: Interval, context: Optional[RootContext] = None) -> Interval:
    """Round the relative linear value to the nearest integer, halves up.

    Examples
    --------
    >>> str(around(from_fraction(5, 2)))
    '3'
    >>> str(around(from_fraction(-5, 2)))
    '-2'
    """
    return _rounded(interval, context, lambda x: math.floor(x + HALF))


def ceil(interval: Interval, context: Optional[RootContext] = None) -> Interval:
    """Round the relative linear value up to an integer."""
    return _rounded(interval, context, math.ceil)


def ups_as(
    interval: Interval,
    comma: Union[Interval, TimeMonzo, _Rational],
    context: Optional[RootContext] = None,
) -> Interval:
    """Temper the ups of an interval into a comma.

    Every up carried by the value is replaced by one factor of ``comma``.
    The formatting node is regenerated for the tempered value.

    Parameters
    ----------
    interval : Interval
    comma : Interval, TimeMonzo or rational
        The interval that one up stands for
    context : RootContext, optional
        Provides the size of an up

    Raises
    ------
    DomainError
        If the up of ``context`` is not a nonzero real offset in cents

    Examples
    --------
    >>> context = RootContext()
    >>> third = from_fjs("M3").down(context)
    >>> str(ups_as(third, from_fraction(81, 80), context))
    'M3^5'
    """
    context = _context(context)
    if isinstance(comma, Interval):
        comma = comma.value
    elif not isinstance(comma, TimeMonzo):
        comma = TimeMonzo.from_fraction(comma)
    if not context.up.is_real_cents() or not context.up.cents:
        raise DomainError("Only ups of real-valued cents can be tempered")
    ups = math.floor(interval.value.cents / context.up.cents + 0.5)
    value = interval.value.mul(comma.pow(ups))
    value.cents = 0.0
    return Interval(
        value, interval.domain, time_monzo_as(value, interval.node), interval
    )


def to_fraction(
    interval: Interval,
    epsilon: Optional[float] = None,
    preferred_numerator: int = 0,
    preferred_denominator: int = 0,
    context: Optional[RootContext] = None,
) -> Interval:
    """Convert to a linear fraction.

    Parameters
    ----------
    interval : Interval
    epsilon : float, optional
        Approximation tolerance. If not given, fractional values are kept
        exact and everything else is approximated with ``1e-4``.
    preferred_numerator, preferred_denominator : int
        Expand the literal to these terms where possible
    context : RootContext, optional
        Needed for absolute values

    Examples
    --------
    >>> str(to_fraction(from_fraction(3, 2), preferred_denominator=4))
    '6/4'
    """
    converted = to_linear(interval, context)
    if epsilon is None:
        if converted.value.is_fractional():
            node = converted.value.as_fraction_literal(
                preferred_numerator, preferred_denominator
            )
            return Interval(converted.value, "linear", node, interval)
        epsilon = 1e-4
    fraction = approximate_fraction(converted.value.value_of(), epsilon)
    value = TimeMonzo.from_fraction(fraction)
    node = value.as_fraction_literal(preferred_numerator, preferred_denominator)
    return Interval(value, "linear", node, interval)


def to_radical(
    interval: Interval,
    max_index: int = 5,
    max_height: int = 50000,
    context: Optional[RootContext] = None,
) -> Interval:
    """Convert to a linear radical such as ``2^1/2``.

    Equal-tempered values are kept exact. Anything else is approximated
    by a root of index at most ``max_index`` and falls back to a fraction
    when the best approximation is rational.
    """
    converted = to_linear(interval, context)
    if converted.value.is_equal_temperament():
        return Interval(
            converted.value, "linear", converted.value.as_radical_literal(), interval
        )
    index, radicand = approximate_radical(
        converted.value.value_of(), max_index, max_height
    )
    value = TimeMonzo.from_fraction(radicand).pow(Fraction(1, index))
    node = value.as_radical_literal()
    if node is not None:
        return Interval(value, "linear", node, interval)
    _, radicand = approximate_radical(converted.value.value_of(), 1, max_height)
    rational = TimeMonzo.from_fraction(radicand)
    return Interval(rational, "linear", rational.as_fraction_literal(), interval)


def to_decimal(
    interval: Interval,
    fraction_digits: Optional[int] = None,
    context: Optional[RootContext] = None,
) -> Interval:
    """Convert to a linear decimal, optionally rounded to ``fraction_digits``.

    Examples
    --------
    >>> str(to_decimal(from_fraction(5, 4)))
    '1.25e'
    >>> str(to_decimal(from_fraction(4, 3), 3))
    '1.333e'
    """
    converted = to_linear(interval, context)
    if fraction_digits is not None:
        denominator = 10 ** int(fraction_digits)
        numerator = math.floor(converted.value.value_of() * denominator + 0.5)
        converted.value = TimeMonzo.from_fraction(Fraction(numerator, denominator))
    converted.node = converted.value.as_decimal_literal()
    return converted


def to_cents(
    interval: Interval,
    fraction_digits: Optional[int] = None,
    context: Optional[RootContext] = None,
) -> Interval:
    """Convert to a logarithmic cents literal.

    Only powers of two have an exact cents literal unless the size is
    rounded to ``fraction_digits``.

    Examples
    --------
    >>> str(to_cents(from_fraction(3, 2), 3))
    '701.955'
    """
    converted = to_logarithmic(interval, context)
    if fraction_digits is not None:
        denominator = 10 ** int(fraction_digits)
        numerator = math.floor(converted.value.total_cents() * denominator + 0.5)
        converted.value = TimeMonzo(0, [Fraction(numerator, denominator * 1200)])
    converted.node = converted.value.as_cents_literal()
    return converted


def to_nedji(
    interval: Interval,
    preferred_numerator: int = 0,
    preferred_denominator: int = 0,
    context: Optional[RootContext] = None,
) -> Interval:
    """Convert an equal-tempered value to an ``n\\d<equave>`` literal.

    Examples
    --------
    >>> str(to_nedji(from_nedji(1, 3), preferred_denominator=12))
    '4\\\\12'
    """
    converted = to_logarithmic(interval, context)
    converted.node = converted.value.as_nedji_literal(
        preferred_numerator, preferred_denominator
    )
    return converted


def to_monzo(interval: Interval, context: Optional[RootContext] = None) -> Interval:
    """Convert to a monzo literal.

    Cents are rounded and counted as ups. The residual is discarded.

    Examples
    --------
    >>> str(to_monzo(from_fraction(81, 80)))
    '[-4 4 -1>'
    """
    monzo = to_logarithmic(interval, context).value
    monzo.cents = float(math.floor(monzo.cents + 0.5))
    monzo.residual = Fraction(1)
    return Interval(monzo, "logarithmic", monzo.as_monzo_literal(), interval)


def to_fjs(
    interval: Interval, flavor: str = "", context: Optional[RootContext] = None
) -> Interval:
    """Convert to a relative FJS spelling.

    Values without a spelling are replaced by a simple fraction nearby.

    Parameters
    ----------
    interval : Interval
    flavor : str
        Comma flavor of the inflections
    context : RootContext, optional
        Needed for absolute values

    Examples
    --------
    >>> str(to_fjs(from_fraction(7, 5)))
    'd5^7_5'
    >>> str(to_fjs(from_fraction(11, 9), "n"))
    'n3^11n'
    """
    monzo = to_logarithmic(interval, context).value
    node = as_fjs(monzo, flavor)
    if node is not None:
        return Interval(monzo, "logarithmic", node, interval)
    approximation = monzo.approximate_simple()
    return Interval(
        approximation, "logarithmic", as_fjs(approximation, flavor), interval
    )


def to_absolute_fjs(
    interval: Interval, flavor: str = "", context: Optional[RootContext] = None
) -> Interval:
    """Convert to an absolute FJS spelling relative to ``context.C4``.

    Examples
    --------
    >>> str(to_absolute_fjs(from_fraction(11, 9), "n"))
    'Ed4^11n'
    """
    context = _context(context)
    C4 = context.C4
    if C4.is_relative():
        monzo = to_logarithmic(interval, context).value
    else:
        monzo = to_absolute_logarithmic(interval, context).value
    relative = monzo.div(C4)
    node = as_absolute_fjs(relative, flavor)
    if node is not None:
        return Interval(monzo, "logarithmic", node, interval)
    relative = relative.approximate_simple()
    return Interval(
        C4.mul(relative), "logarithmic", as_absolute_fjs(relative, flavor), interval
    )


# Translation grids for superscripts and subscripts
SUPER_TRANS = str.maketrans("0123456789", "⁰¹²³⁴⁵⁶⁷⁸⁹")
SUB_TRANS = str.maketrans("0123456789", "₀₁₂₃₄₅₆₇₈₉")


@overload
def ratio_to_fjs(ratio: _Rational, *, flavor: str = ..., unicode: bool = ...) -> str:
    ...


@overload
def ratio_to_fjs(
    ratio: Sequence[Any], *, flavor: str = ..., unicode: bool = ...
) -> np.ndarray:
    ...


@vectorize(otypes="U", excluded=set(["flavor", "unicode"]))
def ratio_to_fjs(
    ratio: Any, *, flavor: str = "", unicode: bool = True
) -> Union[str, np.ndarray]:
    """Spell positive rationals in FJS notation.

    Parameters
    ----------
    ratio : rational > 0 or iterable of rationals
        Integers, fractions, ``'n/d'`` strings, or floats which are first
        approximated by a simple fraction
    flavor : str
        Comma flavor of the inflections
    unicode : bool
        If ``True`` (default), render inflections as superscripts and
        subscripts. Otherwise use ``^`` and ``_``.

    Returns
    -------
    fjs : str or np.ndarray of str

    Raises
    ------
    ParameterError
        If a ratio is not positive or has no FJS spelling

    Examples
    --------
    >>> ratio_to_fjs("5/4")
    'M3⁵'
    >>> ratio_to_fjs(["3/2", "7/4"], unicode=False)
    array(['P5', 'm7^7'], dtype='<U4')
    """
    if isinstance(ratio, (float, np.floating)):
        ratio = approximate_fraction(float(ratio))
    value = Fraction(ratio)
    if value <= 0:
        raise ParameterError(f"ratio={ratio} must be strictly positive")
    node = as_fjs(TimeMonzo.from_fraction(value), flavor)
    if node is None:
        raise ParameterError(f"ratio={ratio} has no FJS spelling")
    result = pythagorean_to_string(node.pythagorean)
    superscripts = ",".join(f"{n}{f}" for n, f in node.superscripts)
    subscripts = ",".join(f"{n}{f}" for n, f in node.subscripts)
    if unicode:
        return result + superscripts.translate(SUPER_TRANS) + subscripts.translate(SUB_TRANS)
    if superscripts:
        result += "^" + superscripts
    if subscripts:
        result += "_" + subscripts
    return result
