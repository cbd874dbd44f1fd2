#!/usr/bin/env python
# -*- encoding: utf-8 -*-
"""Exception classes for xenotone"""


class XenotoneError(Exception):
    """The root xenotone exception class"""

    pass


class ParameterError(XenotoneError):
    """Exception class for mal-formed inputs"""

    pass


class DomainError(XenotoneError):
    """Exception class for operations the value's domain cannot represent"""

    pass


class ExhaustionError(XenotoneError):
    """Exception class for lookups beyond the known prime or comma tables"""

    pass
