#!/usr/bin/env python
# -*- coding: utf-8 -*-
"""Optional disk caching of expensive numeric searches"""

import os
from typing import Any, Callable, TypeVar
from joblib import Memory
from decorator import FunctionMaker


_F = TypeVar("_F", bound=Callable[..., Any])


def _decorator_apply(dec, func):
    return FunctionMaker.create(
        func,
        "return decfunc(%(shortsignature)s)",
        dict(decfunc=dec(func)),
        __wrapped__=func,
    )


class CacheManager(object):
    """Wrap a joblib.Memory so that it may be applied as a leveled decorator.

    Only pure functions of hashable numeric arguments (rational approximation
    searches, radical searches) are cached. Nothing is cached unless
    ``XENOTONE_CACHE_DIR`` points somewhere and the function's level does
    not exceed ``XENOTONE_CACHE_LEVEL``.
    """

    def __init__(self, location: Any = None, *, level: int = 10, **kwargs: Any):
        self.memory: Memory = Memory(location, **kwargs)
        # Smaller numbers mean less caching
        self.level: int = level

    @property
    def enabled(self) -> bool:
        """Whether a cache location has been configured"""
        return self.memory.location is not None

    def __call__(self, level: int) -> Callable[[_F], _F]:
        """Cache with an explicitly defined level.

        Example usage:

        @cache(level=10)
        def approximate_radical(value, max_index, max_height):
            ...
        """

        def wrapper(function):
            if self.enabled and self.level >= level:
                return _decorator_apply(self.memory.cache, function)
            return function

        return wrapper

    def clear(self, *args: Any, **kwargs: Any) -> None:
        """Clear the cache"""
        self.memory.clear(*args, **kwargs)


cache: CacheManager = CacheManager(
    os.environ.get("XENOTONE_CACHE_DIR", None),
    mmap_mode=os.environ.get("XENOTONE_CACHE_MMAP", None),
    compress=os.environ.get("XENOTONE_CACHE_COMPRESS", False),
    verbose=int(os.environ.get("XENOTONE_CACHE_VERBOSE", 0)),
    level=int(os.environ.get("XENOTONE_CACHE_LEVEL", 10)),
)
