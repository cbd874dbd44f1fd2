#!/usr/bin/env python
# -*- coding: utf-8 -*-
""" Core interval algebra and notation"""

from .expression import *  # pylint: disable=wildcard-import
from .monzo import *  # pylint: disable=wildcard-import
from .context import *  # pylint: disable=wildcard-import
from .pythagorean import *  # pylint: disable=wildcard-import
from .fjs import *  # pylint: disable=wildcard-import
from .interval import *  # pylint: disable=wildcard-import
from .notation import *  # pylint: disable=wildcard-import


__all__ = []
__all__ += expression.__all__
__all__ += monzo.__all__
__all__ += context.__all__
__all__ += pythagorean.__all__
__all__ += fjs.__all__
__all__ += interval.__all__
__all__ += notation.__all__
