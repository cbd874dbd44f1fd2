#!/usr/bin/env python
# -*- coding: utf-8 -*-
"""
Pythagorean intervals and absolute pitches
==========================================

Mapping between 3-limit exponent vectors and their spellings.

Forward
-------
.. autosummary::
    :toctree: generated/

    pythagorean_monzo
    absolute_monzo
    parse_pythagorean
    parse_absolute_pitch

Reverse
-------
.. autosummary::
    :toctree: generated/

    monzo_to_node
    absolute_to_node
"""

import math
import re
from fractions import Fraction
from typing import Dict, List, Optional, Tuple

from ..util.exceptions import ParameterError
from ..util.utils import mmod
from .expression import (
    AbsolutePitch,
    Degree,
    Pythagorean,
    absolute_pitch_to_string,
    pythagorean_to_string,
)
from .monzo import TimeMonzo

__all__ = [
    "NOMINAL_VECTORS",
    "ACCIDENTAL_VECTORS",
    "pythagorean_monzo",
    "absolute_monzo",
    "monzo_to_node",
    "absolute_to_node",
    "parse_pythagorean",
    "parse_absolute_pitch",
    "pythagorean_to_string",
    "absolute_pitch_to_string",
]

Vector = Tuple[Fraction, Fraction]


def _vector(twos, threes) -> Vector:
    return Fraction(twos), Fraction(threes)


# (twos, threes) of the perfect/major degrees from unison to seventh
PYTH_VECTORS: List[Vector] = [
    _vector(0, 0),
    _vector(2.5, -1.5),
    _vector(-0.5, 0.5),
    _vector(2, -1),
    _vector(-1, 1),
    _vector(1.5, -0.5),
    _vector(-1.5, 1.5),
]

MID_FOURTH = _vector(-3.5, 2.5)
MID_FIFTH = _vector(4.5, -2.5)

# Interordinals 1.5 to 7.5, splitting the whole tone exactly in half
TONESPLITTER_VECTORS: List[Vector] = [
    _vector(-1.5, 1),
    _vector(-4.5, 3),
    _vector(-7.5, 5),
    _vector(0.5, 0),
    _vector(-2.5, 2),
    _vector(-5.5, 4),
    _vector(2.5, -1),
]

APOTOME = _vector(-11, 7)
SEMI_APOTOME = _vector(-5.5, 3.5)
QUARTER_APOTOME = _vector(-2.75, 1.75)
SESQUI_QUARTER_APOTOME = _vector(-8.25, 5.25)

# Size of one quality step in exponents of three
QUALITY_STEP = Fraction(7, 4)

NOMINAL_VECTORS: Dict[str, Vector] = {
    "F": _vector(2, -1),
    "C": _vector(0, 0),
    "G": _vector(-1, 1),
    "D": _vector(-3, 2),
    "a": _vector(-4, 3),
    "A": _vector(-4, 3),
    "E": _vector(-6, 4),
    "B": _vector(-7, 5),
}

_GREEK_NOMINALS = [
    ("beta", "β", _vector(2.5, -1)),
    ("zeta", "ζ", _vector(0.5, 0)),
    ("gamma", "γ", _vector(-1.5, 1)),
    ("eta", "η", _vector(-2.5, 2)),
    ("delta", "δ", _vector(-4.5, 3)),
    ("alpha", "α", _vector(-5.5, 4)),
    ("epsilon", "ε", _vector(-7.5, 5)),
    # Semiquartal
    ("phi", "φ", _vector(1, -0.5)),
    ("chi", "χ", _vector(-2, 1.5)),
    ("psi", "ψ", _vector(0, 0.5)),
    ("omega", "ω", _vector(-3, 2.5)),
]

for _word, _letter, _v in _GREEK_NOMINALS:
    NOMINAL_VECTORS[_word] = _v
    NOMINAL_VECTORS[_letter] = _v

ACCIDENTAL_VECTORS: Dict[str, Vector] = {
    "♮": _vector(0, 0),
    "=": _vector(0, 0),
    "♯": _vector(-11, 7),
    "#": _vector(-11, 7),
    "♭": _vector(11, -7),
    "b": _vector(11, -7),
    "𝄪": _vector(-22, 14),
    "x": _vector(-22, 14),
    "𝄫": _vector(22, -14),
    "𝄲": _vector(-5.5, 3.5),
    "‡": _vector(-5.5, 3.5),
    "t": _vector(-5.5, 3.5),
    "𝄳": _vector(5.5, -3.5),
    "d": _vector(5.5, -3.5),
    # Soft-jaric
    "r": _vector(-9.5, 6),
    "p": _vector(9.5, -6),
    # Diamond-MOS
    "&": _vector(4, -2.5),
    "@": _vector(-4, 2.5),
}

for _accidental in "♯#♭b":
    _twos, _threes = ACCIDENTAL_VECTORS[_accidental]
    for _prefixes, _factor in (
        ("½s", Fraction(1, 2)),
        ("¼q", Fraction(1, 4)),
        ("¾Q", Fraction(3, 4)),
    ):
        for _prefix in _prefixes:
            ACCIDENTAL_VECTORS[_prefix + _accidental] = (
                _twos * _factor,
                _threes * _factor,
            )

IMPERFECT_QUALITY_SPECTRUM = [
    "d", "Qd", "sd", "qd", "m", "sm", "n", "sM", "M", "qA", "sA", "QA", "A",
]

PERFECT_QUALITY_SPECTRUM = ["d", "Qd", "sd", "qd", "P", "qA", "sA", "QA", "A"]

PURE_NOMINALS = ["C", "D", "E", "F", "G", "A", "B"]

TONESPLITTER_NOMINALS = ["γ", "δ", "ε", "ζ", "η", "α", "β"]

# Indexed by quarter-sharps + 8
ACCIDENTAL_SPECTRUM: List[List[str]] = [
    ["𝄫"],
    ["¾♭", "♭"],
    ["d", "♭"],
    ["¼♭", "♭"],
    ["♭"],
    ["¾♭"],
    ["d"],
    ["¼♭"],
    [],
    ["¼♯"],
    ["‡"],
    ["¾♯"],
    ["♯"],
    ["¼♯", "♯"],
    ["‡", "♯"],
    ["¾♯", "♯"],
    ["𝄪"],
]


def _shift(vector, delta, sign=1):
    return vector[0] + sign * delta[0], vector[1] + sign * delta[1]


def _strip(quality: str, prefixes) -> Tuple[str, bool]:
    for prefix in prefixes:
        if quality.startswith(prefix):
            return quality[len(prefix) :], True
    return quality, False


# Fractional qualities in the order they are peeled off
_QUALITY_PREFIXES = [
    (("qA", "¼A"), QUARTER_APOTOME, 1),
    (("qd", "¼d"), QUARTER_APOTOME, -1),
    (("QA", "¾A"), SESQUI_QUARTER_APOTOME, 1),
    (("Qd", "¾d"), SESQUI_QUARTER_APOTOME, -1),
    (("sA", "½A"), SEMI_APOTOME, 1),
    (("sd", "½d"), SEMI_APOTOME, -1),
]


def pythagorean_monzo(node: Pythagorean) -> TimeMonzo:
    """Exact 3-limit value of a Pythagorean interval.

    Parameters
    ----------
    node : Pythagorean
        Quality and degree of the interval

    Returns
    -------
    monzo : TimeMonzo

    Raises
    ------
    ParameterError
        If the degree base is out of range or the neutral quality is
        applied to a unison

    Examples
    --------
    >>> pythagorean_monzo(parse_pythagorean("M3")).to_fraction()
    Fraction(81, 64)
    """
    base = Fraction(node.degree.base)
    if base.denominator == 1 and 1 <= base <= 7:
        vector = PYTH_VECTORS[int(base) - 1]
    elif base.denominator == 2 and 1 < base < 8:
        vector = TONESPLITTER_VECTORS[int(base - Fraction(3, 2))]
    else:
        raise ParameterError(f"Invalid degree base={base}")

    quality = node.quality

    if node.imperfect:
        # Non-perfect intervals need an extra half-augmented widening
        if quality.endswith("A"):
            vector = _shift(vector, SEMI_APOTOME)
        elif quality.endswith("d"):
            vector = _shift(vector, SEMI_APOTOME, -1)
    elif quality == "n":
        if base == 4:
            vector = MID_FOURTH
        elif base == 5:
            vector = MID_FIFTH
        else:
            raise ParameterError("Neutral quality needs a fourth or a fifth")

    vector = (vector[0] + node.degree.octaves, vector[1])

    for prefixes, delta, sign in _QUALITY_PREFIXES:
        quality, found = _strip(quality, prefixes)
        if found:
            vector = _shift(vector, delta, sign)

    while quality.startswith("A"):
        quality = quality[1:]
        vector = _shift(vector, APOTOME)
    while quality.startswith("d"):
        quality = quality[1:]
        vector = _shift(vector, APOTOME, -1)

    if quality == "M":
        vector = _shift(vector, SEMI_APOTOME)
    elif quality == "m":
        vector = _shift(vector, SEMI_APOTOME, -1)
    elif quality in ("sM", "½M"):
        vector = _shift(vector, QUARTER_APOTOME)
    elif quality in ("sm", "½m"):
        vector = _shift(vector, QUARTER_APOTOME, -1)

    result = TimeMonzo(0, vector)
    if node.degree.negative:
        return result.inverse()
    return result


def absolute_monzo(node: AbsolutePitch) -> TimeMonzo:
    """Exact 3-limit value of an absolute pitch relative to C4.

    Raises
    ------
    ParameterError
        If the nominal or an accidental is not recognized
    """
    if node.nominal not in NOMINAL_VECTORS:
        raise ParameterError(f"Unrecognized nominal '{node.nominal}'")
    vector = NOMINAL_VECTORS[node.nominal]
    for accidental in node.accidentals:
        if accidental not in ACCIDENTAL_VECTORS:
            raise ParameterError(f"Unrecognized accidental '{accidental}'")
        vector = _shift(vector, ACCIDENTAL_VECTORS[accidental])
    return TimeMonzo(0, (vector[0] + node.octave - 4, vector[1]))


def _three_limit(monzo: TimeMonzo) -> Optional[Vector]:
    if (
        monzo.cents != 0
        or monzo.residual != 1
        or len(monzo.prime_exponents) > 2
    ):
        return None
    exponents = monzo.prime_exponents + [Fraction(0)] * (
        2 - len(monzo.prime_exponents)
    )
    return exponents[0], exponents[1]


def monzo_to_node(monzo: TimeMonzo) -> Optional[Pythagorean]:
    """Spell a 3-limit value as a Pythagorean interval.

    Parameters
    ----------
    monzo : TimeMonzo

    Returns
    -------
    node : Pythagorean or None
        None if the value is not a representable 3-limit interval

    Examples
    --------
    >>> pythagorean_to_string(monzo_to_node(TimeMonzo.from_fraction("27/16")))
    'M6'
    """
    vector = _three_limit(monzo)
    if vector is None:
        return None
    twos, threes = vector
    stepspan = twos * 7 + threes * 11
    negative = stepspan < 0
    if negative:
        stepspan, twos, threes = -stepspan, -twos, -threes
    base = mmod(stepspan, 7) + 1
    octaves = math.floor(stepspan / 7)
    if stepspan.denominator == 1:
        center = PYTH_VECTORS[int(base) - 1][1]
    elif stepspan.denominator == 2:
        center = TONESPLITTER_VECTORS[int(base - Fraction(3, 2))][1]
    else:
        return None
    off_center = (threes - center) / QUALITY_STEP
    if off_center.denominator != 1:
        return None
    off_center = int(off_center)

    imperfect = base not in (1, 4, 5)
    if imperfect:
        spectrum, radius = IMPERFECT_QUALITY_SPECTRUM, 6
    else:
        spectrum, radius = PERFECT_QUALITY_SPECTRUM, 4
    quality = ""
    while off_center < -radius:
        quality += "d"
        off_center += 4
    while off_center > radius:
        quality += "A"
        off_center -= 4
    quality += spectrum[off_center + radius]
    return Pythagorean(quality, Degree(base, octaves, negative), imperfect)


def absolute_to_node(monzo: TimeMonzo) -> Optional[AbsolutePitch]:
    """Spell a 3-limit value relative to C4 as an absolute pitch.

    Returns
    -------
    node : AbsolutePitch or None
        None if the value is not a representable 3-limit pitch
    """
    vector = _three_limit(monzo)
    if vector is None:
        return None
    twos, threes = vector
    stepspan = twos * 7 + threes * 11
    if stepspan.denominator == 1:
        nominal = PURE_NOMINALS[mmod(int(stepspan), 7)]
    elif stepspan.denominator == 2:
        nominal = TONESPLITTER_NOMINALS[mmod(int(stepspan - Fraction(1, 2)), 7)]
    else:
        return None
    octave = math.floor(stepspan / 7) + 4

    off_center = (threes - NOMINAL_VECTORS[nominal][1]) / QUALITY_STEP
    if off_center.denominator != 1:
        return None
    off_center = int(off_center)

    accidentals: List[str] = []
    while off_center < -8:
        accidentals.append("𝄫")
        off_center += 8
    while off_center > 8:
        accidentals.append("𝄪")
        off_center -= 8
    accidentals.extend(ACCIDENTAL_SPECTRUM[off_center + 8])
    if not accidentals:
        accidentals.append("♮")
    return AbsolutePitch(nominal, tuple(accidentals), octave)


_DEGREE = re.compile(r"^(?P<quality>.*?)(?P<negative>-?)(?P<degree>\d+(?:\.5)?)$")

_PERFECT_QUALITIES = {"P", "n"}
_IMPERFECT_QUALITIES = {"M", "m", "sM", "½M", "sm", "½m", "n"}


def parse_pythagorean(text: str) -> Pythagorean:
    """Parse a Pythagorean interval such as ``'M3'``, ``'AA-2'`` or ``'m6.5'``.

    Raises
    ------
    ParameterError
        If the text is not a valid Pythagorean interval
    """
    match = _DEGREE.match(text)
    if match is None:
        raise ParameterError(f"Invalid Pythagorean interval {text!r}")
    quality = match.group("quality")
    number = Fraction(match.group("degree"))
    if number < 1:
        raise ParameterError(f"Invalid interval degree in {text!r}")
    whole = math.floor(number)
    base = Fraction((whole - 1) % 7 + 1) + (number - whole)
    octaves = (whole - 1) // 7
    imperfect = base not in (1, 4, 5)

    core = quality
    for prefixes, _, _ in _QUALITY_PREFIXES:
        core, _ = _strip(core, prefixes)
    core = core.lstrip("A").lstrip("d")
    if core:
        allowed = _IMPERFECT_QUALITIES if imperfect else _PERFECT_QUALITIES
        if core not in allowed:
            raise ParameterError(f"Invalid quality {quality!r} for degree {number}")
    elif not quality:
        raise ParameterError(f"Missing quality in {text!r}")
    return Pythagorean(
        quality, Degree(base, octaves, bool(match.group("negative"))), imperfect
    )


_NOMINALS_BY_LENGTH = sorted(NOMINAL_VECTORS, key=len, reverse=True)
_ACCIDENTALS_BY_LENGTH = sorted(ACCIDENTAL_VECTORS, key=len, reverse=True)
_OCTAVE = re.compile(r"@?(-?\d+)$")


def parse_absolute_pitch(text: str) -> AbsolutePitch:
    """Parse an absolute pitch such as ``'Eb4'``, ``'C♯5'`` or ``'phi@4'``.

    Raises
    ------
    ParameterError
        If the nominal or an accidental is not recognized
    """
    match = _OCTAVE.search(text)
    if match is None:
        raise ParameterError(f"Missing octave in {text!r}")
    head = text[: match.start()]
    for nominal in _NOMINALS_BY_LENGTH:
        if head.startswith(nominal):
            break
    else:
        raise ParameterError(f"Unrecognized nominal in {text!r}")
    rest = head[len(nominal) :]
    accidentals = []
    while rest:
        for accidental in _ACCIDENTALS_BY_LENGTH:
            if rest.startswith(accidental):
                accidentals.append(accidental)
                rest = rest[len(accidental) :]
                break
        else:
            raise ParameterError(f"Unrecognized accidental in {text!r}")
    return AbsolutePitch(nominal, tuple(accidentals), int(match.group(1)))
