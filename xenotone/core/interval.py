#!/usr/bin/env python
# -*- coding: utf-8 -*-
"""
Domain-tagged intervals
=======================

Values
------
.. autosummary::
    :toctree: generated/

    Interval
    Val
    Color
    Annotation

Helpers
-------
.. autosummary::
    :toctree: generated/

    infect
    prefer
    log
    time_monzo_as
"""

import json
from dataclasses import dataclass, replace
from fractions import Fraction
from typing import TYPE_CHECKING, Optional, Union

from typing_extensions import Literal, assert_never

from ..util.exceptions import DomainError, ParameterError
from ..util.utils import count_ups_and_lifts
from .expression import (
    FJS,
    AbsoluteFJS,
    AspiringAbsoluteFJS,
    AspiringFJS,
    CentsLiteral,
    DecimalLiteral,
    FractionLiteral,
    IntegerLiteral,
    IntervalLiteral,
    MonzoLiteral,
    NedjiLiteral,
    RadicalLiteral,
    ValLiteral,
    add_nodes,
    div_nodes,
    literal_to_string,
    mod_nodes,
    mul_nodes,
    project_nodes,
    round_to_nodes,
    sub_nodes,
    validate_node,
)
from .fjs import as_absolute_fjs, as_fjs
from .monzo import TimeMonzo

if TYPE_CHECKING:
    from .context import RootContext

__all__ = [
    "IntervalDomain",
    "Color",
    "Annotation",
    "Interval",
    "Val",
    "infect",
    "prefer",
    "log",
    "time_monzo_as",
]

IntervalDomain = Literal["linear", "logarithmic"]

Preference = Literal["left", "right", "neither"]

TWO = TimeMonzo(0, [1])

_STEPPED_NODES = (FJS, AbsoluteFJS, MonzoLiteral, ValLiteral)


class Color(object):
    """CSS-like color attached to an interval."""

    def __init__(self, value: str):
        self.value = value

    def __str__(self):
        return self.value.replace("%", "")

    def __repr__(self):
        return f"Color({self.value!r})"

    def __eq__(self, other):
        if not isinstance(other, Color):
            return NotImplemented
        return self.value == other.value

    def __hash__(self):
        return hash(self.value)


@dataclass(frozen=True)
class Annotation:
    """Color and label carried over from the operands of a binary operation."""

    color: Optional[Color] = None
    label: str = ""


def infect(left, right) -> Annotation:
    """Annotation of a binary result: left color and label, falling back to the right."""
    color = left.color if left.color is not None else right.color
    return Annotation(color, left.label or right.label)


def log(left: "Interval", right: "Interval") -> TimeMonzo:
    """Logarithm of ``left`` in the base of ``right`` as a linear value.

    Operands of differing signs produce NaN.
    """
    result = left.value.log(right.value)
    if isinstance(result, float):
        return TimeMonzo.from_value(result)
    return TimeMonzo.from_fraction(result)


def time_monzo_as(
    monzo: TimeMonzo, node: Optional[IntervalLiteral], simplify: bool = False
) -> Optional[IntervalLiteral]:
    """Regenerate a literal of the same kind as ``node`` for a new value.

    Parameters
    ----------
    monzo : TimeMonzo
        The value to format
    node : IntervalLiteral or None
        Literal whose kind (and, unless ``simplify``, term preferences)
        should be reproduced
    simplify : bool
        If True, ignore the numerator/denominator preferences of ``node``

    Returns
    -------
    node : IntervalLiteral or None
        None if the value cannot be written in the same kind
    """
    if node is None:
        return None
    if isinstance(node, IntegerLiteral):
        return monzo.as_integer_literal()
    elif isinstance(node, FractionLiteral):
        if simplify:
            return monzo.as_fraction_literal()
        return monzo.as_fraction_literal(node.numerator, node.denominator)
    elif isinstance(node, NedjiLiteral):
        result = monzo.as_nedji_literal()
        if result is None or simplify:
            return result
        if (result.equave_numerator, result.equave_denominator) != (
            node.equave_numerator,
            node.equave_denominator,
        ):
            return result
        return monzo.as_nedji_literal(node.numerator, node.denominator)
    elif isinstance(node, CentsLiteral):
        return monzo.as_cents_literal()
    elif isinstance(node, MonzoLiteral):
        return monzo.as_monzo_literal()
    elif isinstance(node, FJS):
        return AspiringFJS()
    elif isinstance(node, AspiringFJS):
        return AspiringFJS(node.flavor)
    elif isinstance(node, AbsoluteFJS):
        return AspiringAbsoluteFJS()
    elif isinstance(node, AspiringAbsoluteFJS):
        return AspiringAbsoluteFJS(node.flavor)
    elif isinstance(node, (DecimalLiteral, RadicalLiteral, ValLiteral)):
        return None
    else:
        assert_never(node)


def _is_hard_decimal(node) -> bool:
    return isinstance(node, DecimalLiteral) and node.flavor == "r"


def _log_lin_mul(logarithmic, linear, node, annotation):
    if _is_hard_decimal(linear.node):
        size = logarithmic.total_cents()
        return Interval(
            TimeMonzo.from_cents(size * linear.value.value_of()),
            logarithmic.domain,
            node,
            annotation,
        )
    value = logarithmic.value.pow(linear.value)
    if isinstance(logarithmic.node, (FJS, AspiringFJS)):
        node = AspiringFJS()
    return Interval(value, logarithmic.domain, node, annotation)


def _dot_result(product, annotation=None) -> "Interval":
    if isinstance(product, float):
        return Interval(TimeMonzo.from_value(product), "linear", None, annotation)
    product = Fraction(product)
    if product.denominator == 1:
        return Interval(
            TimeMonzo.from_integer(product.numerator),
            "linear",
            IntegerLiteral(product.numerator),
            annotation,
        )
    return Interval(
        TimeMonzo.from_fraction(product),
        "linear",
        FractionLiteral(product.numerator, product.denominator),
        annotation,
    )


class Interval(object):
    """An exact value tagged with the domain it lives in.

    Parameters
    ----------
    value : TimeMonzo
        The exact value
    domain : {'linear', 'logarithmic'}
        Linear intervals add as numbers, logarithmic ones as pitches.
    node : IntervalLiteral or None
        Formatting hint used by :meth:`str`
    convert : Interval or Annotation, optional
        Source of the color and label

    See Also
    --------
    Val
    """

    def __init__(
        self,
        value: TimeMonzo,
        domain: IntervalDomain,
        node: Optional[IntervalLiteral] = None,
        convert=None,
    ):
        if domain not in ("linear", "logarithmic"):
            raise ParameterError(f"Invalid interval domain={domain!r}")
        validate_node(node)
        self.value = value
        self.domain = domain
        self.node = node
        if convert is not None:
            self.color = convert.color
            self.label = convert.label
        else:
            self.color = None
            self.label = ""

    @classmethod
    def from_integer(cls, value: int, convert=None) -> "Interval":
        value = int(value)
        return cls(
            TimeMonzo.from_integer(value), "linear", IntegerLiteral(value), convert
        )

    def shallow_clone(self) -> "Interval":
        return Interval(self.value, self.domain, self.node, self)

    def to_integer(self) -> int:
        return self.value.to_integer()

    def is_relative(self) -> bool:
        return self.value.is_relative()

    def is_absolute(self) -> bool:
        return self.value.is_absolute()

    def total_cents(self) -> float:
        return self.value.total_cents()

    def value_of(self) -> float:
        if self.value.is_integral():
            return float(self.value.to_integer())
        return self.value.value_of()

    def _check_domains(self, other, operation: str):
        if self.domain != other.domain:
            raise DomainError(f"Domains must match in {operation}")

    # Unary

    def neg(self) -> "Interval":
        if self.domain == "linear":
            return Interval(self.value.neg(), self.domain, None, self)
        return Interval(self.value.inverse(), self.domain, None, self)

    def inverse(self) -> Union["Interval", "Val"]:
        """Reciprocal of a linear value, or the dual val of a logarithmic one."""
        if self.domain == "linear":
            return Interval(self.value.inverse(), self.domain, None, self)
        return Val(self.value.geometric_inverse(), self.value.clone())

    def abs(self) -> "Interval":
        if self.domain == "linear":
            return Interval(self.value.abs(), self.domain, None, self)
        return Interval(self.value.pitch_abs(), self.domain, None, self)

    def project(self, base: "Interval") -> "Interval":
        """Re-base an octave-based interval onto the equave ``base``."""
        node = project_nodes(self.node, base.node)
        return Interval(
            base.value.pow(self.value.octaves), "logarithmic", node, infect(self, base)
        )

    # Binary

    def add(self, other: "Interval") -> "Interval":
        self._check_domains(other, "addition")
        node = add_nodes(self.node, other.node)
        if self.domain == "linear":
            value = self.value.add(other.value)
        else:
            value = self.value.mul(other.value)
        if node is None and type(self.node) is type(other.node):
            node = time_monzo_as(value, self.node, True)
        return Interval(value, self.domain, node, infect(self, other))

    def sub(self, other: "Interval") -> "Interval":
        self._check_domains(other, "subtraction")
        node = sub_nodes(self.node, other.node)
        if self.domain == "linear":
            value = self.value.sub(other.value)
        else:
            value = self.value.div(other.value)
        if node is None and type(self.node) is type(other.node):
            node = time_monzo_as(value, self.node, True)
        return Interval(value, self.domain, node, infect(self, other))

    def lsub(self, other: "Interval") -> "Interval":
        """Subtract ``self`` from ``other`` keeping the annotation of ``self``."""
        result = other.sub(self)
        annotation = infect(self, other)
        result.color, result.label = annotation.color, annotation.label
        return result

    def lens_add(self, other: "Interval") -> "Interval":
        self._check_domains(other, "harmonic addition")
        if self.domain == "linear":
            value = self.value.lens_add(other.value)
        else:
            value = (
                self.value.geometric_inverse()
                .mul(other.value.geometric_inverse())
                .geometric_inverse()
            )
        return Interval(value, self.domain, None, infect(self, other))

    def lens_sub(self, other: "Interval") -> "Interval":
        self._check_domains(other, "harmonic subtraction")
        if self.domain == "linear":
            value = self.value.lens_sub(other.value)
        else:
            value = (
                self.value.geometric_inverse()
                .div(other.value.geometric_inverse())
                .geometric_inverse()
            )
        return Interval(value, self.domain, None, infect(self, other))

    def round_to(self, other: "Interval") -> "Interval":
        self._check_domains(other, "rounding")
        node = round_to_nodes(self.node, other.node)
        if self.domain == "linear":
            value = self.value.round_to(other.value)
        else:
            value = self.value.pitch_round_to(other.value)
        if node is None and type(self.node) is type(other.node):
            node = time_monzo_as(value, self.node, True)
        return Interval(value, self.domain, node, infect(self, other))

    def mmod(self, other: "Interval", ceiling: bool = False) -> "Interval":
        """Modulo in the linear domain, reduction in the logarithmic one."""
        self._check_domains(other, "modulo")
        node = mod_nodes(self.node, other.node)
        if self.domain == "linear":
            value = self.value.mmod(other.value, ceiling)
        else:
            value = self.value.reduce(other.value, ceiling)
        if node is None and type(self.node) is type(other.node):
            node = time_monzo_as(value, self.node, True)
        return Interval(value, self.domain, node, infect(self, other))

    def pitch_round_to(self, other: "Interval") -> "Interval":
        if self.domain == "logarithmic" or other.domain == "logarithmic":
            raise DomainError(
                "Exponential rounding not implemented in logarithmic domain"
            )
        if not other.value.is_scalar():
            raise DomainError("Only scalar exponential rounding implemented")
        return Interval(
            self.value.pitch_round_to(other.value),
            self.domain,
            None,
            infect(self, other),
        )

    def mul(self, other):
        """Multiply by a scalar, or delegate to a val.

        At least one operand must be linear. A logarithmic operand is
        raised to the power of the linear one.
        """
        if isinstance(other, Val):
            if self.domain != "linear":
                raise DomainError(
                    "At least one domain must be linear in multiplication"
                )
            return other.mul(self)
        if self.domain != "linear" and other.domain != "linear":
            raise DomainError("At least one domain must be linear in multiplication")
        node = mul_nodes(self.node, other.node)
        annotation = infect(self, other)
        if other.domain == "logarithmic":
            return _log_lin_mul(other, self, node, annotation)
        if self.domain == "logarithmic":
            return _log_lin_mul(self, other, node, annotation)
        return Interval(self.value.mul(other.value), self.domain, node, annotation)

    def div(self, other: "Interval") -> "Interval":
        node = div_nodes(self.node, other.node)
        annotation = infect(self, other)
        if other.domain == "logarithmic":
            if self.domain != "logarithmic":
                raise DomainError("Domains must match in non-scalar division")
            return Interval(log(self, other), "linear", node, annotation)
        if self.domain == "logarithmic":
            value = self.value.pow(other.value.inverse())
            if isinstance(self.node, (FJS, AspiringFJS)):
                node = AspiringFJS()
            return Interval(value, self.domain, node, annotation)
        return Interval(self.value.div(other.value), self.domain, node, annotation)

    def ldiv(self, other: "Interval") -> "Interval":
        result = other.div(self)
        annotation = infect(self, other)
        result.color, result.label = annotation.color, annotation.label
        return result

    def dot(self, other) -> "Interval":
        """Inner product with an interval or a val.

        A val's cents are rigged by one so that ups count as steps.
        """
        if isinstance(other, Val):
            val = other.value.clone()
            val.cents += 1
            return _dot_result(self.value.dot(val), self)
        return _dot_result(self.value.dot(other.value), infect(self, other))

    def _check_linear(self, other, operation: str):
        if self.domain == "logarithmic" or other.domain == "logarithmic":
            raise DomainError(f"{operation} not implemented in logarithmic domain")

    def pow(self, other: "Interval") -> "Interval":
        self._check_linear(other, "Exponentiation")
        if not other.value.is_scalar():
            raise DomainError("Only scalar exponentiation implemented")
        return Interval(
            self.value.pow(other.value), self.domain, None, infect(self, other)
        )

    def ipow(self, other: "Interval") -> "Interval":
        self._check_linear(other, "Inverse exponentiation")
        if not other.value.is_scalar():
            raise DomainError("Only scalar inverse exponentiation implemented")
        return Interval(
            self.value.pow(other.value.inverse()),
            self.domain,
            None,
            infect(self, other),
        )

    def log(self, other: "Interval") -> "Interval":
        self._check_linear(other, "Logarithm")
        return Interval(log(self, other), self.domain, None, infect(self, other))

    def reduce(self, other: "Interval", ceiling: bool = False) -> "Interval":
        self._check_linear(other, "Reduction")
        return Interval(
            self.value.reduce(other.value, ceiling),
            self.domain,
            None,
            infect(self, other),
        )

    def backslash(self, other: "Interval") -> "Interval":
        """Build the logarithmic interval ``self \\ other`` (steps of an octave)."""
        if not self.value.is_scalar() or not other.value.is_scalar():
            raise DomainError("Only scalars can be backslashed")
        if self.domain != "linear" or other.domain != "linear":
            raise DomainError("Only linear backslashing implemented")
        value = TWO.pow(self.value.div(other.value))
        node = None
        if self.value.is_integral() and other.value.is_integral():
            node = NedjiLiteral(self.to_integer(), other.to_integer())
        return Interval(value, "logarithmic", node, infect(self, other))

    # Comparison

    def compare(self, other: "Interval") -> int:
        return self.value.compare(other.value)

    def equals(self, other: "Interval") -> bool:
        return self.value.equals(other.value)

    def strict_equals(self, other: "Interval") -> bool:
        return self.domain == other.domain and self.value.strict_equals(other.value)

    def __lt__(self, other):
        return self.compare(other) < 0

    # Ups and lifts

    def _step(self, context: "RootContext", unit: TimeMonzo, sign: int, field: str):
        if sign > 0:
            value = self.value.mul(unit)
        else:
            value = self.value.div(unit)
        if isinstance(self.node, _STEPPED_NODES):
            node = replace(self.node, **{field: getattr(self.node, field) + sign})
            result = Interval(value, self.domain, node, self)
            context.fragiles.append(result)
            return result
        return Interval(value, self.domain, None, self)

    def up(self, context: "RootContext") -> "Interval":
        return self._step(context, context.up, 1, "ups")

    def down(self, context: "RootContext") -> "Interval":
        return self._step(context, context.up, -1, "ups")

    def lift(self, context: "RootContext") -> "Interval":
        return self._step(context, context.lift, 1, "lifts")

    def drop(self, context: "RootContext") -> "Interval":
        return self._step(context, context.lift, -1, "lifts")

    def break_fragile(self):
        """Forget ups and lifts baked into the formatting node."""
        if isinstance(self.node, FJS):
            self.node = AspiringFJS()
        elif isinstance(self.node, AbsoluteFJS):
            self.node = AspiringAbsoluteFJS()
        elif isinstance(self.node, (MonzoLiteral, ValLiteral)):
            self.node = None

    # Formatting

    def _count_steps(self, value: TimeMonzo, context: Optional["RootContext"]):
        if not value.cents:
            return 0, 0
        if context is None:
            return None
        if not (context.up.is_real_cents() and context.lift.is_real_cents()):
            return None
        counts = count_ups_and_lifts(value.cents, context.up.cents, context.lift.cents)
        if counts is not None:
            value.cents = 0.0
        return counts

    def str(self, context: Optional["RootContext"] = None) -> str:
        """Render the interval, resolving aspiring nodes against ``context``."""
        node = self.node
        if isinstance(node, AspiringAbsoluteFJS):
            if context is None:
                return self.value.to_string(self.domain)
            relative = self.value.div(context.C4)
            counts = self._count_steps(relative, context)
            if counts is None:
                return self.value.to_string(self.domain)
            resolved = as_absolute_fjs(relative, node.flavor)
            if resolved is None:
                return self.value.to_string(self.domain)
            node = replace(resolved, ups=counts[0], lifts=counts[1])
        elif isinstance(node, AspiringFJS):
            value = self.value.clone()
            counts = self._count_steps(value, context)
            if counts is None:
                return self.value.to_string(self.domain)
            resolved = as_fjs(value, node.flavor)
            if resolved is None:
                return self.value.to_string(self.domain)
            node = replace(resolved, ups=counts[0], lifts=counts[1])
        if node is None:
            return self.value.to_string(self.domain)
        return literal_to_string(node)

    def to_string(self, context: Optional["RootContext"] = None) -> str:
        """Render the interval with its color and label in parentheses."""
        base = self.str(context)
        if self.color is None and not self.label:
            return base
        result = "(" + base
        if self.color is not None and str(self.color):
            result += " " + str(self.color)
        if self.label:
            result += " " + json.dumps(self.label)
        return result + ")"

    def __str__(self):
        return self.to_string()

    def __repr__(self):
        return f"Interval({self.value!r}, {self.domain!r}, {self.node!r})"

    __add__ = add
    __sub__ = sub
    __mul__ = mul
    __truediv__ = div
    __pow__ = pow
    __neg__ = neg
    __abs__ = abs
    __mod__ = mmod


class Val(object):
    """Tuning map: a covector over the primes together with its equave.

    Parameters
    ----------
    value : TimeMonzo
        Step counts read as exponents
    equave : TimeMonzo
        The interval that ``divisions`` refers to
    node : ValLiteral or None

    Examples
    --------
    >>> val = Val(TimeMonzo(0, [12, 19, 28]), TimeMonzo.from_integer(2))
    >>> val.divisions
    Fraction(12, 1)
    """

    domain = "cologarithmic"

    def __init__(
        self,
        value: TimeMonzo,
        equave: TimeMonzo,
        node: Optional[IntervalLiteral] = None,
    ):
        if not value.is_relative() or not equave.is_relative():
            raise DomainError("Only relative vals implemented")
        validate_node(node)
        self.value = value
        self.equave = equave
        self.node = node

    @property
    def divisions(self):
        return self.value.dot(self.equave)

    def neg(self) -> "Val":
        return Val(self.value.inverse(), self.equave)

    def inverse(self) -> Interval:
        return Interval(self.value.geometric_inverse(), "logarithmic")

    def abs(self) -> "Val":
        return Val(self.value.pitch_abs(), self.equave)

    def _step(self, context: "RootContext", unit: TimeMonzo, sign: int, field: str):
        if sign > 0:
            value = self.value.mul(unit)
        else:
            value = self.value.div(unit)
        if isinstance(self.node, ValLiteral):
            node = replace(self.node, **{field: getattr(self.node, field) + sign})
            result = Val(value, self.equave, node)
            context.fragiles.append(result)
            return result
        return Val(value, self.equave)

    def up(self, context: "RootContext") -> "Val":
        return self._step(context, context.up, 1, "ups")

    def down(self, context: "RootContext") -> "Val":
        return self._step(context, context.up, -1, "ups")

    def lift(self, context: "RootContext") -> "Val":
        return self._step(context, context.lift, 1, "lifts")

    def drop(self, context: "RootContext") -> "Val":
        return self._step(context, context.lift, -1, "lifts")

    def equals(self, other: "Val") -> bool:
        return self.value.equals(other.value) and self.equave.equals(other.equave)

    def strict_equals(self, other: "Val") -> bool:
        return self.value.strict_equals(other.value) and self.equave.strict_equals(
            other.equave
        )

    def add(self, other: "Val") -> "Val":
        if not self.equave.strict_equals(other.equave):
            raise DomainError("Val equaves must match in addition")
        node = add_nodes(self.node, other.node)
        return Val(self.value.mul(other.value), self.equave, node)

    def sub(self, other: "Val") -> "Val":
        if not self.equave.strict_equals(other.equave):
            raise DomainError("Val equaves must match in subtraction")
        node = sub_nodes(self.node, other.node)
        return Val(self.value.div(other.value), self.equave, node)

    def _check_scalar(self, other: Interval):
        if other.domain != "linear" or not other.value.is_relative():
            raise DomainError("Only scalar multiplication implemented for vals")

    def mul(self, other: Interval) -> "Val":
        self._check_scalar(other)
        node = mul_nodes(self.node, other.node)
        return Val(self.value.pow(other.value), self.equave, node)

    def div(self, other: Interval) -> "Val":
        self._check_scalar(other)
        return Val(self.value.pow(other.value.inverse()), self.equave)

    def dot(self, other) -> Interval:
        if isinstance(other, Interval):
            return other.dot(self)
        return _dot_result(self.value.dot(other.value))

    def break_fragile(self):
        self.node = None

    def str(self, context=None) -> str:
        if self.node is not None:
            return literal_to_string(self.node)
        result = self.value.to_string("cologarithmic")
        if not self.equave.equals(TWO):
            return f"withEquave({result}, {self.equave.to_string()})"
        return result

    def __str__(self):
        return self.str()

    def __repr__(self):
        return f"Val({self.value!r}, {self.equave!r}, {self.node!r})"

    __add__ = add
    __sub__ = sub
    __mul__ = mul
    __truediv__ = div
    __neg__ = neg
    __abs__ = abs


def prefer(
    result: Interval, left: Interval, right: Interval, preference: Preference
) -> Interval:
    """Apply a formatting preference to the result of a binary operation.

    Parameters
    ----------
    result : Interval
        The unformatted result
    left, right : Interval
        The operands
    preference : {'left', 'right', 'neither'}
        Which operand dictates the domain, the formatting and the
        annotation. ``'neither'`` tries the left formatting then the right
        one and infects the annotation as usual.

    Returns
    -------
    preferred : Interval

    Examples
    --------
    >>> two = Interval.from_integer(2)
    >>> third = Interval(TWO, "logarithmic", NedjiLiteral(3, 3))
    >>> total = two.add(Interval(TWO, "linear"))
    >>> str(prefer(total, two, third, "right"))
    '6\\\\3'
    """
    if preference == "left":
        node = time_monzo_as(result.value, left.node)
        return Interval(result.value, left.domain, node, left)
    elif preference == "right":
        node = time_monzo_as(result.value, right.node)
        return Interval(result.value, right.domain, node, right)
    elif preference == "neither":
        node = time_monzo_as(result.value, left.node)
        if node is None:
            node = time_monzo_as(result.value, right.node)
        return Interval(result.value, result.domain, node, infect(left, right))
    raise ParameterError(f"Unknown preference={preference!r}")
