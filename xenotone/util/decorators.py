#!/usr/bin/env python
# -*- encoding: utf-8 -*-
"""Function decorators"""

from typing import Any, Callable, Iterable, Optional, TypeVar, Union
import functools
import numpy as np
from numpy.typing import DTypeLike

__all__ = ["vectorize"]

_F = TypeVar("_F", bound=Callable[..., Any])


def vectorize(
    *,
    otypes: Optional[Union[str, Iterable[DTypeLike]]] = None,
    excluded: Optional[Iterable[Union[int, str]]] = None,
) -> Callable[[_F], _F]:
    """Wrap a scalar function with np.vectorize, keeping scalar behavior.

    Strings and fractions count as scalars: they are passed through
    untouched and the plain result is returned instead of a 0-d array.
    """

    def __wrapper(function):
        vecfunc = np.vectorize(function, otypes=otypes, excluded=excluded)

        @functools.wraps(function)
        def _vec(*args, **kwargs):
            if isinstance(args[0], (list, tuple, np.ndarray)):
                return vecfunc(*args, **kwargs)
            return function(*args, **kwargs)

        return _vec

    return __wrapper
