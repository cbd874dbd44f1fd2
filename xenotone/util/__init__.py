#!/usr/bin/env python
# -*- coding: utf-8 -*-
"""
Utilities
=========

Prime tables
------------
.. autosummary::
    :toctree: generated/

    to_monzo
    to_monzo_and_residual

Numerics
--------
.. autosummary::
    :toctree: generated/

    mmod
    circle_distance
    value_to_cents
    integer_root
    exact_root
    approximate_fraction
    approximate_radical
    count_ups_and_lifts
"""

from .utils import *  # pylint: disable=wildcard-import
from . import decorators
from . import exceptions

__all__ = [_ for _ in dir() if not _.startswith("_")]
