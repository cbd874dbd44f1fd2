#!/usr/bin/env python
# -*- coding: utf-8 -*-
"""
Exact interval values
=====================
.. autosummary::
    :toctree: generated/

    TimeMonzo
"""

import math
from fractions import Fraction
from itertools import zip_longest
from typing import List, Optional, Tuple, Union

import numpy as np
from typing_extensions import Literal

from ..util.exceptions import DomainError, ParameterError
from ..util.utils import (
    NUMBER_OF_COMPONENTS,
    PRIMES,
    PRIME_CENTS,
    exact_root,
    approximate_fraction,
    mmod,
    to_monzo_and_residual,
    value_to_cents,
)
from .expression import (
    CentsLiteral,
    DecimalLiteral,
    FractionLiteral,
    IntegerLiteral,
    MonzoLiteral,
    NedjiLiteral,
    RadicalLiteral,
    ValLiteral,
    cents_literal,
    decimal_literal,
    format_rational,
    real_decimal_literal,
)

__all__ = ["TimeMonzo", "Domain"]

Domain = Literal["linear", "logarithmic", "cologarithmic"]

_Exponent = Union[int, Fraction, float, "TimeMonzo"]

ZERO = Fraction(0)
HALF = Fraction(1, 2)


def _round_half_up(value) -> int:
    if isinstance(value, Fraction):
        return math.floor(value + HALF)
    return math.floor(value + 0.5)


def _real_string(value: float, suffix: str) -> str:
    if math.isnan(value):
        return "NaN"
    if math.isinf(value):
        return "-Infinity" if value < 0 else "Infinity"
    return f"{value!r}{suffix}"


class TimeMonzo(object):
    """Exact representation of an interval or an absolute pitch.

    The conceptual value is::

        2 ** (cents / 1200) * residual * prod(p_i ** e_i) * (1 s) ** time_exponent

    where ``p_i`` runs over the first ``NUMBER_OF_COMPONENTS`` primes.

    Parameters
    ----------
    time_exponent : Fraction
        Exponent of the time unit. ``0`` for relative intervals,
        ``-1`` for frequencies.
    prime_exponents : iterable of Fraction
        Exponents of the leading primes. Trailing zeros are trimmed.
    residual : Fraction
        Rational factor not covered by ``prime_exponents``. It carries the
        sign of the value and is zero for the value zero.
    cents : float
        Real-valued logarithmic offset. Nonzero values mark the monzo as
        inexact.

    Examples
    --------
    >>> third = TimeMonzo.from_fraction("5/4")
    >>> third.prime_exponents
    [Fraction(-2, 1), Fraction(0, 1), Fraction(1, 1)]
    >>> (third * third).to_fraction()
    Fraction(25, 16)
    """

    def __init__(self, time_exponent=0, prime_exponents=(), residual=1, cents=0.0):
        self.time_exponent = Fraction(time_exponent)
        exponents = [Fraction(e) for e in prime_exponents]
        while exponents and exponents[-1] == 0:
            exponents.pop()
        if len(exponents) > NUMBER_OF_COMPONENTS:
            raise ParameterError(
                f"At most {NUMBER_OF_COMPONENTS} prime exponents can be tracked"
            )
        self.prime_exponents: List[Fraction] = exponents
        self.residual = Fraction(residual)
        self.cents = float(cents)

    # Factories

    @classmethod
    def from_integer(cls, value: int) -> "TimeMonzo":
        return cls.from_fraction(int(value))

    @classmethod
    def from_fraction(cls, value: Union[int, str, Fraction]) -> "TimeMonzo":
        """Construct an exact monzo from a rational number or a ``'n/d'`` string."""
        try:
            value = Fraction(value)
        except ValueError as exc:
            raise ParameterError(f"Cannot interpret {value!r} as a fraction") from exc
        if value == 0:
            return cls(0, [], 0)
        exponents, residual = to_monzo_and_residual(value, NUMBER_OF_COMPONENTS)
        return cls(0, exponents, residual)

    @classmethod
    def from_value(cls, value: float) -> "TimeMonzo":
        """Construct a monzo from a real number.

        Integral values stay exact, everything else is stored in cents.
        Infinities and NaN are kept as infinite or NaN cents.
        """
        value = float(value)
        if math.isnan(value):
            return cls(0, [], 1, math.nan)
        if math.isinf(value):
            return cls(0, [], -1 if value < 0 else 1, math.inf)
        if value.is_integer():
            return cls.from_fraction(int(value))
        return cls(0, [], -1 if value < 0 else 1, value_to_cents(abs(value)))

    @classmethod
    def from_cents(cls, cents: float) -> "TimeMonzo":
        """Construct an inexact monzo from a real size in cents."""
        return cls(0, [], 1, cents)

    @classmethod
    def from_fractional_cents(cls, cents: Union[int, Fraction]) -> "TimeMonzo":
        """Construct an exact power of two from a rational size in cents."""
        return cls(0, [Fraction(cents) / 1200])

    @classmethod
    def from_equal_temperament(
        cls, fraction_of_equave: Union[int, str, Fraction], equave=2
    ) -> "TimeMonzo":
        """Construct ``equave ** fraction_of_equave``.

        Examples
        --------
        >>> TimeMonzo.from_equal_temperament("7/12").prime_exponents
        [Fraction(7, 12)]
        """
        if not isinstance(equave, TimeMonzo):
            equave = cls.from_fraction(equave)
        return equave.pow(Fraction(fraction_of_equave))

    def clone(self) -> "TimeMonzo":
        return TimeMonzo(
            self.time_exponent, self.prime_exponents, self.residual, self.cents
        )

    # Predicates

    def is_fractional(self) -> bool:
        """True if the value is an exact rational number."""
        return self.cents == 0 and all(e.denominator == 1 for e in self.prime_exponents)

    def is_integral(self) -> bool:
        return self.is_fractional() and self.to_fraction().denominator == 1

    def is_scalar(self) -> bool:
        return self.time_exponent == 0

    def is_relative(self) -> bool:
        return self.time_exponent == 0

    def is_absolute(self) -> bool:
        return self.time_exponent != 0

    def is_equal_temperament(self) -> bool:
        """True if the value is a rational power of a positive rational."""
        return self.cents == 0 and self.residual == 1

    def is_real_cents(self) -> bool:
        """True if the value is nothing but a real offset in cents."""
        return (
            self.time_exponent == 0
            and not self.prime_exponents
            and self.residual == 1
        )

    def is_zero(self) -> bool:
        return self.residual == 0

    # Conversions

    def to_fraction(self) -> Fraction:
        """Exact rational value, ignoring the time unit.

        Raises
        ------
        DomainError
            If the value is not fractional
        """
        if not self.is_fractional():
            raise DomainError(f"{self!r} is not a fraction")
        numerator = 1
        denominator = 1
        for p, e in zip(PRIMES, self.prime_exponents):
            if e > 0:
                numerator *= p ** int(e)
            elif e < 0:
                denominator *= p ** int(-e)
        return Fraction(numerator, denominator) * self.residual

    def to_integer(self) -> int:
        value = self.to_fraction()
        if value.denominator != 1:
            raise DomainError(f"{value} is not an integer")
        return value.numerator

    def total_cents(self) -> float:
        """Size of the value in cents, ignoring its sign and time unit."""
        if self.residual == 0:
            return -math.inf
        result = self.cents
        if self.prime_exponents:
            exponents = np.asarray(self.prime_exponents, dtype=np.float64)
            result += float(np.dot(exponents, PRIME_CENTS[: len(exponents)]))
        if abs(self.residual) != 1:
            result += value_to_cents(abs(self.residual))
        return result

    def value_of(self) -> float:
        if self.residual == 0:
            return 0.0
        if self.is_fractional():
            return float(self.to_fraction())
        sign = -1.0 if self.residual < 0 else 1.0
        return sign * 2 ** (self.total_cents() / 1200)

    @property
    def octaves(self) -> Union[Fraction, float]:
        """Size of the value in octaves, exact for powers of two."""
        if (
            self.cents == 0
            and abs(self.residual) == 1
            and len(self.prime_exponents) <= 1
        ):
            if self.prime_exponents:
                return self.prime_exponents[0]
            return Fraction(0)
        return self.total_cents() / 1200

    def to_equal_temperament(self) -> Tuple[Fraction, Fraction]:
        """Decompose the value as ``equave ** fraction_of_equave``.

        The equave is the smallest rational greater than one that the value
        is a rational power of.

        Returns
        -------
        fraction_of_equave : Fraction
        equave : Fraction

        Raises
        ------
        DomainError
            If the value is not an equal temperament value

        Examples
        --------
        >>> TimeMonzo(0, [Fraction(-1, 3), Fraction(1, 3)]).to_equal_temperament()
        (Fraction(1, 3), Fraction(3, 2))
        """
        if not self.is_equal_temperament() or not self.is_relative():
            raise DomainError(f"{self!r} is not an equal temperament value")
        if not self.prime_exponents:
            return Fraction(0), Fraction(2)
        denominator = math.lcm(*(e.denominator for e in self.prime_exponents))
        numerators = [int(e * denominator) for e in self.prime_exponents]
        divisor = math.gcd(*numerators)
        equave = Fraction(1)
        for p, n in zip(PRIMES, numerators):
            equave *= Fraction(p) ** (n // divisor)
        fraction_of_equave = Fraction(divisor, denominator)
        if equave < 1:
            equave = 1 / equave
            fraction_of_equave = -fraction_of_equave
        return fraction_of_equave, equave

    def approximate_simple(self) -> "TimeMonzo":
        """Nearest simple fraction to the value, keeping the time unit."""
        if self.is_fractional():
            return self.clone()
        result = TimeMonzo.from_fraction(approximate_fraction(self.value_of()))
        result.time_exponent = self.time_exponent
        return result

    # Arithmetic

    def _check_time(self, other: "TimeMonzo", operation: str):
        if self.time_exponent != other.time_exponent:
            raise DomainError(f"Time exponents must match in {operation}")

    def _with_time(self, result: "TimeMonzo") -> "TimeMonzo":
        result.time_exponent = self.time_exponent
        return result

    def add(self, other: "TimeMonzo") -> "TimeMonzo":
        self._check_time(other, "addition")
        if self.residual == 0:
            return other.clone()
        if other.residual == 0:
            return self.clone()
        if self.is_fractional() and other.is_fractional():
            return self._with_time(
                TimeMonzo.from_fraction(self.to_fraction() + other.to_fraction())
            )
        if self.strict_equals(other):
            return self.mul(TimeMonzo.from_integer(2))
        return self._with_time(TimeMonzo.from_value(self.value_of() + other.value_of()))

    def sub(self, other: "TimeMonzo") -> "TimeMonzo":
        self._check_time(other, "subtraction")
        if other.residual == 0:
            return self.clone()
        if self.is_fractional() and other.is_fractional():
            return self._with_time(
                TimeMonzo.from_fraction(self.to_fraction() - other.to_fraction())
            )
        if self.strict_equals(other):
            return TimeMonzo(self.time_exponent, [], 0)
        return self._with_time(TimeMonzo.from_value(self.value_of() - other.value_of()))

    def mul(self, other: "TimeMonzo") -> "TimeMonzo":
        time_exponent = self.time_exponent + other.time_exponent
        if self.residual == 0 or other.residual == 0:
            return TimeMonzo(time_exponent, [], 0)
        exponents = [
            a + b
            for a, b in zip_longest(
                self.prime_exponents, other.prime_exponents, fillvalue=ZERO
            )
        ]
        return TimeMonzo(
            time_exponent,
            exponents,
            self.residual * other.residual,
            self.cents + other.cents,
        )

    def div(self, other: "TimeMonzo") -> "TimeMonzo":
        return self.mul(other.inverse())

    def inverse(self) -> "TimeMonzo":
        if self.residual == 0:
            raise ZeroDivisionError("Cannot invert zero")
        return TimeMonzo(
            -self.time_exponent,
            [-e for e in self.prime_exponents],
            1 / self.residual,
            -self.cents,
        )

    def neg(self) -> "TimeMonzo":
        result = self.clone()
        result.residual = -self.residual
        return result

    def abs(self) -> "TimeMonzo":
        result = self.clone()
        result.residual = abs(self.residual)
        return result

    def pow(self, exponent: _Exponent) -> "TimeMonzo":
        """Raise the value to a rational or real power.

        Parameters
        ----------
        exponent : int, Fraction, float or TimeMonzo
            Rational exponents keep the result exact where possible.
            Real exponents produce a cents-only result.

        Raises
        ------
        DomainError
            If an absolute value is raised to an irrational power or a
            negative value to an even root
        """
        if isinstance(exponent, TimeMonzo):
            if not exponent.is_scalar():
                raise DomainError("Only scalar exponents are supported")
            if exponent.is_fractional():
                exponent = exponent.to_fraction()
            else:
                exponent = exponent.value_of()
        if isinstance(exponent, float):
            if exponent.is_integer():
                exponent = Fraction(int(exponent))
            else:
                return self._real_pow(exponent)
        exponent = Fraction(exponent)
        time_exponent = self.time_exponent * exponent
        if self.residual == 0:
            if exponent < 0:
                raise ZeroDivisionError("Cannot raise zero to a negative power")
            if exponent == 0:
                return TimeMonzo(0, [])
            return TimeMonzo(time_exponent, [], 0)
        exponents = [e * exponent for e in self.prime_exponents]
        cents = self.cents * float(exponent)
        if exponent.denominator == 1:
            residual = self.residual ** exponent.numerator
        else:
            if self.residual < 0 and exponent.denominator % 2 == 0:
                raise DomainError("Cannot take even roots of negative values")
            sign = -1 if self.residual < 0 else 1
            magnitude = abs(self.residual) ** exponent.numerator
            root = exact_root(magnitude, exponent.denominator)
            if root is None:
                residual = Fraction(sign ** abs(exponent.numerator))
                cents += float(exponent) * value_to_cents(abs(self.residual))
            else:
                residual = root * sign ** abs(exponent.numerator)
        return TimeMonzo(time_exponent, exponents, residual, cents)

    def _real_pow(self, exponent: float) -> "TimeMonzo":
        if not self.is_relative():
            raise DomainError("Cannot raise absolute values to irrational powers")
        if self.residual < 0:
            raise DomainError("Cannot raise negative values to irrational powers")
        if self.residual == 0:
            return self.clone()
        return TimeMonzo.from_cents(self.total_cents() * exponent)

    def log(self, other: "TimeMonzo") -> Union[Fraction, float]:
        """Logarithm of this value in the base of ``other``.

        The result is exact when the exponent vectors are proportional.
        Two negative operands use their magnitudes while operands of
        differing signs have no real logarithm.

        Examples
        --------
        >>> TimeMonzo.from_fraction("1/9").log(TimeMonzo.from_integer(3))
        Fraction(-2, 1)
        """
        if self.residual == 0 or other.residual == 0:
            raise DomainError("Logarithm of zero is not defined")
        if (self.residual < 0) != (other.residual < 0):
            return math.nan
        left = self.abs()
        right = other.abs()
        if (
            left.is_fractional()
            and right.is_fractional()
            and left.residual == 1
            and right.residual == 1
        ):
            a = [left.time_exponent] + left.prime_exponents
            b = [right.time_exponent] + right.prime_exponents
            ratio = None
            proportional = True
            for x, y in zip_longest(a, b, fillvalue=ZERO):
                if y == 0:
                    if x != 0:
                        proportional = False
                        break
                    continue
                if ratio is None:
                    ratio = x / y
                elif x != ratio * y:
                    proportional = False
                    break
            if proportional:
                if ratio is None:
                    if any(a):
                        raise DomainError("Logarithm in base one is not defined")
                    raise DomainError("Logarithm of one in base one is not defined")
                return ratio
        denominator = right.total_cents()
        if denominator == 0:
            raise DomainError("Logarithm in base one is not defined")
        return left.total_cents() / denominator

    def dot(self, other: "TimeMonzo") -> Union[Fraction, float]:
        """Inner product of two exponent vectors, cents included.

        The result is exact unless the product of the cents offsets is not
        an integer.
        """
        result = self.time_exponent * other.time_exponent
        for a, b in zip(self.prime_exponents, other.prime_exponents):
            result += a * b
        cents = self.cents * other.cents
        if cents.is_integer():
            return result + int(cents)
        return float(result) + cents

    def geometric_inverse(self) -> "TimeMonzo":
        """Covector dual to this value, ``v / (v . v)``."""
        if abs(self.residual) != 1:
            raise DomainError("Geometric inverse needs an unresidualized value")
        magnitude = self.dot(self)
        if isinstance(magnitude, float):
            raise DomainError("Geometric inverse needs integral cents")
        if magnitude == 0:
            raise DomainError("Geometric inverse of unison is not defined")
        return TimeMonzo(
            self.time_exponent / magnitude,
            [e / magnitude for e in self.prime_exponents],
            1,
            self.cents / float(magnitude),
        )

    def pitch_abs(self) -> "TimeMonzo":
        """Value or its inverse, whichever is at least unison."""
        result = self.abs()
        if result.total_cents() < 0:
            return result.inverse()
        return result

    def lens_add(self, other: "TimeMonzo") -> "TimeMonzo":
        """Harmonic sum ``1 / (1/a + 1/b)``."""
        if self.residual == 0 or other.residual == 0:
            return TimeMonzo(self.time_exponent, [], 0)
        return self.inverse().add(other.inverse()).inverse()

    def lens_sub(self, other: "TimeMonzo") -> "TimeMonzo":
        if self.residual == 0:
            return self.clone()
        if other.residual == 0:
            raise ZeroDivisionError("Harmonic subtraction of zero")
        return self.inverse().sub(other.inverse()).inverse()

    # Rounding

    def reduce(self, other: "TimeMonzo", ceiling: bool = False) -> "TimeMonzo":
        """Reduce into ``[1, other)`` by powers of ``other``.

        With ``ceiling=True`` the window is ``(1, other]`` instead.
        """
        log = self.log(other)
        if isinstance(log, float) and not math.isfinite(log):
            raise DomainError("Cannot reduce values of differing signs")
        if ceiling:
            multiple = math.ceil(log) - 1
        else:
            multiple = math.floor(log)
        return self.div(other.pow(multiple))

    def round_to(self, other: "TimeMonzo") -> "TimeMonzo":
        """Round to the nearest multiple of ``other``."""
        if self.is_fractional() and other.is_fractional():
            multiple = _round_half_up(self.to_fraction() / other.to_fraction())
        else:
            multiple = _round_half_up(self.value_of() / other.value_of())
        return other.mul(TimeMonzo.from_integer(multiple))

    def pitch_round_to(self, other: "TimeMonzo") -> "TimeMonzo":
        """Round to the nearest power of ``other``."""
        return other.pow(_round_half_up(self.log(other)))

    def mmod(self, other: "TimeMonzo", ceiling: bool = False) -> "TimeMonzo":
        self._check_time(other, "modulo")
        if self.is_fractional() and other.is_fractional():
            result = TimeMonzo.from_fraction(
                mmod(self.to_fraction(), other.to_fraction(), ceiling)
            )
        else:
            result = TimeMonzo.from_value(
                mmod(self.value_of(), other.value_of(), ceiling)
            )
        return self._with_time(result)

    # Comparison

    def compare(self, other: "TimeMonzo") -> int:
        """Return -1, 0 or 1 as the value is less than, equal to or greater than ``other``."""
        if (
            self.time_exponent == other.time_exponent
            and self.is_fractional()
            and other.is_fractional()
        ):
            difference = self.to_fraction() - other.to_fraction()
        else:
            difference = self.value_of() - other.value_of()
        return (difference > 0) - (difference < 0)

    def equals(self, other: "TimeMonzo") -> bool:
        if self.time_exponent != other.time_exponent:
            return False
        if self.is_fractional() and other.is_fractional():
            return self.to_fraction() == other.to_fraction()
        if (self.residual > 0) != (other.residual > 0) or (self.residual == 0) != (
            other.residual == 0
        ):
            return False
        if self.residual == 0:
            return True
        return math.isclose(self.total_cents(), other.total_cents(), abs_tol=1e-9)

    def strict_equals(self, other: "TimeMonzo") -> bool:
        return (
            self.time_exponent == other.time_exponent
            and self.prime_exponents == other.prime_exponents
            and self.residual == other.residual
            and self.cents == other.cents
        )

    def __eq__(self, other):
        if not isinstance(other, TimeMonzo):
            return NotImplemented
        return self.equals(other)

    __hash__ = None

    def __lt__(self, other):
        return self.compare(other) < 0

    def __le__(self, other):
        return self.compare(other) <= 0

    def __gt__(self, other):
        return self.compare(other) > 0

    def __ge__(self, other):
        return self.compare(other) >= 0

    __add__ = add
    __sub__ = sub
    __mul__ = mul
    __truediv__ = div
    __pow__ = pow
    __neg__ = neg
    __abs__ = abs

    def __float__(self):
        return self.value_of()

    def __repr__(self):
        return (
            f"TimeMonzo({self.time_exponent!r}, {self.prime_exponents!r}, "
            f"{self.residual!r}, {self.cents!r})"
        )

    # Literal regeneration

    def as_integer_literal(self) -> Optional[IntegerLiteral]:
        if self.is_relative() and self.is_integral():
            return IntegerLiteral(self.to_integer())
        return None

    def as_fraction_literal(
        self, preferred_numerator: int = 0, preferred_denominator: int = 0
    ) -> Optional[FractionLiteral]:
        """Fraction literal of the value, expanded to a preferred term if possible.

        Examples
        --------
        >>> TimeMonzo.from_fraction("3/2").as_fraction_literal(6)
        FractionLiteral(numerator=6, denominator=4)
        """
        if not self.is_relative() or not self.is_fractional():
            return None
        value = self.to_fraction()
        numerator, denominator = value.numerator, value.denominator
        if preferred_numerator and numerator and preferred_numerator % numerator == 0:
            factor = preferred_numerator // numerator
            if factor > 0:
                return FractionLiteral(preferred_numerator, denominator * factor)
        if preferred_denominator and preferred_denominator % denominator == 0:
            factor = preferred_denominator // denominator
            if factor > 0:
                return FractionLiteral(numerator * factor, preferred_denominator)
        return FractionLiteral(numerator, denominator)

    def as_decimal_literal(self) -> Optional[DecimalLiteral]:
        if not self.is_relative():
            return None
        if self.is_fractional():
            node = decimal_literal(self.to_fraction())
            if node is not None:
                return node
        return real_decimal_literal(self.value_of())

    def as_cents_literal(self) -> Optional[CentsLiteral]:
        if (
            self.is_relative()
            and self.cents == 0
            and self.residual == 1
            and len(self.prime_exponents) <= 1
        ):
            return cents_literal(self.octaves * 1200)
        return None

    def as_nedji_literal(
        self, preferred_numerator: int = 0, preferred_denominator: int = 0
    ) -> Optional[NedjiLiteral]:
        if not self.is_equal_temperament() or not self.is_relative():
            return None
        fraction, equave = self.to_equal_temperament()
        numerator, denominator = fraction.numerator, fraction.denominator
        if preferred_denominator and preferred_denominator % denominator == 0:
            factor = preferred_denominator // denominator
            numerator, denominator = numerator * factor, preferred_denominator
        elif (
            preferred_numerator and numerator and preferred_numerator % numerator == 0
        ):
            factor = preferred_numerator // numerator
            if factor > 0:
                numerator, denominator = preferred_numerator, denominator * factor
        if equave == 2:
            return NedjiLiteral(numerator, denominator)
        return NedjiLiteral(
            numerator, denominator, equave.numerator, equave.denominator
        )

    def as_radical_literal(self) -> Optional[RadicalLiteral]:
        if not self.is_equal_temperament() or not self.is_relative():
            return None
        fraction, equave = self.to_equal_temperament()
        if fraction.denominator == 1:
            return None
        return RadicalLiteral(
            equave**fraction.numerator, Fraction(1, fraction.denominator)
        )

    def _counted_components(self):
        if not self.is_relative() or self.residual != 1:
            return None
        if not float(self.cents).is_integer():
            return None
        return tuple(self.prime_exponents), int(self.cents)

    def as_monzo_literal(self) -> Optional[MonzoLiteral]:
        """Monzo literal of the value with whole cents counted as ups."""
        counted = self._counted_components()
        if counted is None:
            return None
        return MonzoLiteral(*counted)

    def as_val_literal(self) -> Optional[ValLiteral]:
        counted = self._counted_components()
        if counted is None:
            return None
        return ValLiteral(*counted)

    # Formatting

    def _linear_string(self) -> str:
        if self.is_fractional():
            return format_rational(self.to_fraction())
        if self.is_equal_temperament():
            node = self.as_radical_literal()
            return f"{format_rational(node.argument)}^{format_rational(node.exponent)}"
        return _real_string(self.value_of(), "r")

    def to_string(self, domain: Domain = "linear") -> str:
        """Canonical rendering of the value in a given domain.

        Parameters
        ----------
        domain : {'linear', 'logarithmic', 'cologarithmic'}

        Examples
        --------
        >>> TimeMonzo.from_fraction(6).to_string("logarithmic")
        '1\\\\1<6>'
        """
        if domain == "linear":
            if self.is_relative():
                return self._linear_string()
            unit = TimeMonzo(0, self.prime_exponents, self.residual, self.cents)
            if self.time_exponent == -1:
                return f"{unit._linear_string()} Hz"
            return f"{unit._linear_string()} * 1s^{format_rational(self.time_exponent)}"
        elif domain == "logarithmic":
            if not self.is_relative():
                return f"logarithmic({self.to_string('linear')})"
            if self.is_equal_temperament():
                fraction, equave = self.to_equal_temperament()
                result = f"{fraction.numerator}\\{fraction.denominator}"
                if equave != 2:
                    result += f"<{format_rational(equave)}>"
                return result
            if self.is_fractional() and self.residual > 0:
                return f"1\\1<{format_rational(self.to_fraction())}>"
            return _real_string(self.total_cents(), "rc")
        elif domain == "cologarithmic":
            return "<" + " ".join(format_rational(e) for e in self.prime_exponents) + "]"
        raise ParameterError(f"Unknown domain={domain!r}")

    def __str__(self):
        return self.to_string()

