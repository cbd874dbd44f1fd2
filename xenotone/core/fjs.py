#!/usr/bin/env python
# -*- coding: utf-8 -*-
"""
Functional Just System
======================

Comma tables
------------
.. autosummary::
    :toctree: generated/

    get_formal_comma
    get_flora_comma
    get_neutral_comma
    register_flavor

Inflection
----------
.. autosummary::
    :toctree: generated/

    get_inflection
    inflect
    uninflect
    as_fjs
    as_absolute_fjs
"""

import threading
from fractions import Fraction
from typing import Callable, Dict, List, Optional, Sequence, Tuple, Union

from numba import jit

from ..util.exceptions import DomainError, ExhaustionError, ParameterError
from ..util.utils import (
    PRIME_CENTS,
    PRIMES,
    circle_distance,
    to_monzo,
    value_to_cents,
)
from .expression import FJS, AbsoluteFJS, FJSInflection
from .monzo import TimeMonzo
from .pythagorean import absolute_to_node, monzo_to_node

__all__ = [
    "RADIUS_OF_TOLERANCE",
    "SEMIAPOTOME",
    "BRIDGING_RADIUS",
    "get_formal_comma",
    "get_flora_comma",
    "get_neutral_comma",
    "register_flavor",
    "get_inflection",
    "inflect",
    "uninflect",
    "as_fjs",
    "as_absolute_fjs",
]

# Classic radius of tolerance
RADIUS_OF_TOLERANCE = value_to_cents(65 / 63)

# Half an apotome (plus epsilon) closes the gap between minor and major
SEMIAPOTOME = 0.5 * value_to_cents(2187 / 2048) + 1e-6

# As large as possible without disrupting the neutral commas of the first primes
BRIDGING_RADIUS = 92.1

FIFTH = float(PRIME_CENTS[1] - PRIME_CENTS[0])


@jit(nopython=True, nogil=True, cache=True)
def __master(prime_cents, radius, fifth):
    """Walk the chain of fifths outwards from the unison until a
    Pythagorean interval lands within ``radius`` of the prime.
    """
    pythagoras = 0.0
    k = 0
    if circle_distance(prime_cents, pythagoras, 1200.0) < radius:
        return k
    while True:
        pythagoras += fifth
        k += 1
        if circle_distance(prime_cents, pythagoras, 1200.0) < radius:
            return k
        if circle_distance(prime_cents, -pythagoras, 1200.0) < radius:
            return -k


@jit(nopython=True, nogil=True, cache=True)
def __neutral_master(prime_cents, radius, fifth):
    """Chain-of-fifths walk starting from the half-fifth."""
    pythagoras = 0.5 * fifth
    k = 0.5
    while True:
        if circle_distance(prime_cents, pythagoras, 1200.0) < radius:
            return k
        if circle_distance(prime_cents, -pythagoras, 1200.0) < radius:
            return -k
        pythagoras += fifth
        k += 1.0


def _formal_search(prime_cents: float) -> Fraction:
    return Fraction(__master(prime_cents, RADIUS_OF_TOLERANCE, FIFTH))


def _flora_search(prime_cents: float) -> Fraction:
    return Fraction(__master(prime_cents, SEMIAPOTOME, FIFTH))


def _neutral_search(prime_cents: float) -> Fraction:
    return Fraction(__neutral_master(prime_cents, BRIDGING_RADIUS, FIFTH))


def _comma(index: int, fifths: Fraction) -> TimeMonzo:
    threes = -fifths
    twos = threes
    octave = float(PRIME_CENTS[0])
    comma_cents = float(
        PRIME_CENTS[index] + float(twos) * PRIME_CENTS[0] + float(threes) * PRIME_CENTS[1]
    )
    while comma_cents > 600:
        comma_cents -= octave
        twos -= 1
    while comma_cents < -600:
        comma_cents += octave
        twos += 1
    return TimeMonzo(0, [twos, threes]).mul(TimeMonzo.from_integer(PRIMES[index]))


class _CommaTable(object):
    """Lazily extended sequence of commas indexed by prime index."""

    def __init__(self, search: Callable[[float], Fraction]):
        self._search = search
        self._commas = [TimeMonzo.from_integer(1), TimeMonzo.from_integer(1)]
        self._lock = threading.Lock()

    def __len__(self):
        return len(self._commas)

    def __getitem__(self, index: int) -> TimeMonzo:
        if index < 0:
            raise ParameterError(f"Invalid prime index={index}")
        if index >= len(PRIMES):
            raise ExhaustionError(f"Out of primes at index={index}")
        if index < len(self._commas):
            return self._commas[index]
        with self._lock:
            while len(self._commas) <= index:
                i = len(self._commas)
                self._commas.append(_comma(i, self._search(float(PRIME_CENTS[i]))))
        return self._commas[index]


_FORMAL_COMMAS = _CommaTable(_formal_search)
_FLORA_COMMAS = _CommaTable(_flora_search)
_NEUTRAL_COMMAS = _CommaTable(_neutral_search)


def get_formal_comma(index: int) -> TimeMonzo:
    """Classic FJS comma of the prime at ``index``.

    Parameters
    ----------
    index : int >= 0
        Index into the prime table (0 is 2, 1 is 3, 2 is 5, ...)

    Returns
    -------
    comma : TimeMonzo
        Unity for the primes 2 and 3

    Raises
    ------
    ExhaustionError
        If ``index`` is beyond the prime table

    Examples
    --------
    >>> get_formal_comma(2).to_fraction()
    Fraction(80, 81)
    >>> get_formal_comma(3).to_fraction()
    Fraction(63, 64)
    """
    return _FORMAL_COMMAS[index]


def get_flora_comma(index: int) -> TimeMonzo:
    """FloraC comma of the prime at ``index``.

    Same as :func:`get_formal_comma` except that the radius of tolerance is
    half an apotome.
    """
    return _FLORA_COMMAS[index]


def get_neutral_comma(index: int) -> TimeMonzo:
    """Neutral bridging comma of the prime at ``index``.

    Its Pythagorean part may contain half-integral exponents.

    Examples
    --------
    >>> get_neutral_comma(2).pow(2).to_fraction()
    Fraction(25, 24)
    """
    return _NEUTRAL_COMMAS[index]


CommaLookup = Callable[[int], TimeMonzo]
SwapLookup = Union[Callable[[int], bool], Sequence[bool]]

_EXTERNAL_FLAVORS = ("h", "m", "l", "s")

_external: Dict[str, Tuple[CommaLookup, Callable[[int], bool]]] = {}


def register_flavor(
    flavor: str, commas: CommaLookup, swaps: Optional[SwapLookup] = None
) -> None:
    """Install an external comma table.

    Parameters
    ----------
    flavor : {'h', 'm', 'l', 's'}
        ``'h'`` (Helmholtz-Ellis) and ``'m'`` (HEWM53) are indexed by
        prime index. ``'l'`` (Lumi) and ``'s'`` (syntonic-rastmic) are
        indexed by the inflection number itself.
    commas : callable
        ``commas(index) -> TimeMonzo``
    swaps : callable or sequence of bool, optional
        Prime indices whose inflections are written on the opposite side

    Raises
    ------
    ParameterError
        If ``flavor`` is not an external flavor
    """
    if flavor not in _EXTERNAL_FLAVORS:
        raise ParameterError(f"Flavor '{flavor}' is not an external flavor")
    if swaps is None:
        swap_lookup = _no_swaps
    elif callable(swaps):
        swap_lookup = swaps
    else:
        table = list(swaps)

        def swap_lookup(index: int) -> bool:
            return index < len(table) and bool(table[index])

    _external[flavor] = (commas, swap_lookup)


def _no_swaps(index: int) -> bool:
    return False


def _external_table(flavor: str):
    try:
        return _external[flavor]
    except KeyError as exc:
        raise ExhaustionError(
            f"No comma table registered for flavor '{flavor}'"
        ) from exc


def _prime_comma(index: int, flavor: str) -> TimeMonzo:
    if flavor in ("", "c"):
        return get_formal_comma(index)
    elif flavor == "f":
        return get_flora_comma(index)
    elif flavor == "n":
        return get_neutral_comma(index)
    elif flavor in ("h", "m"):
        if index < 2:
            return TimeMonzo.from_integer(1)
        return _external_table(flavor)[0](index)
    raise ParameterError(f"Unknown FJS flavor '{flavor}'")


def _inflection(inflection: FJSInflection) -> TimeMonzo:
    number, flavor = inflection
    if flavor in ("l", "s"):
        return _external_table(flavor)[0](number)
    result = TimeMonzo.from_integer(1)
    for i, exponent in enumerate(to_monzo(number)):
        if exponent:
            result = result.mul(_prime_comma(i, flavor).pow(exponent))
    return result


def get_inflection(
    superscripts: Sequence[FJSInflection], subscripts: Sequence[FJSInflection]
) -> TimeMonzo:
    """Product of the commas of ``superscripts`` over those of ``subscripts``.

    Composite inflection numbers are factored and each prime contributes
    its comma. Lumi and syntonic-rastmic inflections apply their comma
    directly.

    Examples
    --------
    >>> get_inflection([(25, "")], []).to_fraction()
    Fraction(6400, 6561)
    """
    result = TimeMonzo.from_integer(1)
    for inflection in superscripts:
        result = result.mul(_inflection(inflection))
    for inflection in subscripts:
        result = result.div(_inflection(inflection))
    return result


def inflect(
    pythagorean: TimeMonzo,
    superscripts: Sequence[FJSInflection],
    subscripts: Sequence[FJSInflection],
) -> TimeMonzo:
    """Justify a Pythagorean value with FJS inflections.

    Examples
    --------
    >>> from xenotone.core.pythagorean import parse_pythagorean, pythagorean_monzo
    >>> third = pythagorean_monzo(parse_pythagorean("M3"))
    >>> inflect(third, [(5, "")], []).to_fraction()
    Fraction(5, 4)
    """
    return get_inflection(superscripts, subscripts).mul(pythagorean)


def uninflect(
    monzo: TimeMonzo, flavor: str = ""
) -> Tuple[TimeMonzo, List[FJSInflection], List[FJSInflection]]:
    """Split a value into its Pythagorean part and FJS inflections.

    Every positive exponent of a prime beyond 3 becomes that many
    superscripts and every negative one that many subscripts. Factors of
    the residual are treated the same way when they factor over the prime
    table and are left in place otherwise.

    Parameters
    ----------
    monzo : TimeMonzo
    flavor : str
        Flavor assigned to every inflection

    Returns
    -------
    pythagorean : TimeMonzo
        ``monzo`` divided by the inflections
    superscripts : list of (int, str)
    subscripts : list of (int, str)

    Raises
    ------
    DomainError
        For the Lumi and syntonic-rastmic flavors, which have no prime basis
    """
    if flavor in ("l", "s"):
        raise DomainError("Uninflection not implemented in non-prime basis")
    swaps = _no_swaps
    if flavor in ("h", "m"):
        swaps = _external_table(flavor)[1]

    superscripts: List[FJSInflection] = []
    subscripts: List[FJSInflection] = []

    def collect(exponents):
        for i in range(2, len(exponents)):
            sup, sub = superscripts, subscripts
            if swaps(i):
                sup, sub = sub, sup
            j = 0
            while exponents[i] > j:
                sup.append((PRIMES[i], flavor))
                j += 1
            j = 0
            while exponents[i] < -j:
                sub.append((PRIMES[i], flavor))
                j += 1

    collect(monzo.prime_exponents)
    if monzo.residual:
        try:
            residual_exponents = to_monzo(abs(monzo.residual))
        except ExhaustionError:
            residual_exponents = []
        collect(residual_exponents)

    pythagorean = monzo.div(get_inflection(superscripts, subscripts))
    return pythagorean, superscripts, subscripts


def _collapse(inflections: List[FJSInflection]) -> Tuple[FJSInflection, ...]:
    if not inflections:
        return ()
    product = 1
    for number, _ in inflections:
        product *= number
    return ((product, inflections[0][1]),)


def _uninflectable(monzo: TimeMonzo) -> bool:
    if monzo.cents or not monzo.residual:
        return True
    return any(e.denominator != 1 for e in monzo.prime_exponents[2:])


def as_fjs(monzo: TimeMonzo, flavor: str = "") -> Optional[FJS]:
    """Spell a relative value in FJS.

    Parameters
    ----------
    monzo : TimeMonzo
    flavor : str
        Comma flavor of the inflections

    Returns
    -------
    node : FJS or None
        None if the value carries cents, has a non-integral exponent
        beyond the prime 3 or has no Pythagorean spelling

    Examples
    --------
    >>> from xenotone.core.expression import literal_to_string
    >>> literal_to_string(as_fjs(TimeMonzo.from_fraction("25/24")))
    'A1^25'
    """
    if _uninflectable(monzo):
        return None
    pythagorean, superscripts, subscripts = uninflect(monzo, flavor)
    node = monzo_to_node(pythagorean)
    if node is None:
        return None
    return FJS(node, _collapse(superscripts), _collapse(subscripts))


def as_absolute_fjs(monzo: TimeMonzo, flavor: str = "") -> Optional[AbsoluteFJS]:
    """Spell a value relative to C4 as an absolute FJS pitch."""
    if _uninflectable(monzo):
        return None
    pythagorean, superscripts, subscripts = uninflect(monzo, flavor)
    pitch = absolute_to_node(pythagorean)
    if pitch is None:
        return None
    return AbsoluteFJS(pitch, _collapse(superscripts), _collapse(subscripts))
