#!/usr/bin/env python
# -*- coding: utf-8 -*-
"""Version info"""

import sys
import importlib
from typing import Dict, Optional

short_version = "0.3"
version = "0.3.1"

# Import names of install_requires and of the tests extra in setup.cfg
DEPENDENCIES = (
    "numpy",
    "numba",
    "joblib",
    "decorator",
    "typing_extensions",
    "lazy_loader",
)
TEST_DEPENDENCIES = ("pytest", "pytest_cov")


def _module_version(name: str) -> Optional[str]:
    module = sys.modules.get(name)
    if module is None:
        try:
            module = importlib.import_module(name)
        except ImportError:
            return None
    return getattr(module, "__version__", "installed, no version number available")


def dependency_versions(tests: bool = False) -> Dict[str, Optional[str]]:
    """Map each dependency to its installed version, None if missing.

    Parameters
    ----------
    tests : bool
        Include the test dependencies
    """
    names = DEPENDENCIES + TEST_DEPENDENCIES if tests else DEPENDENCIES
    return {name: _module_version(name) for name in names}


def show_versions() -> None:
    """Print the installed dependencies and the active configuration.

    The configuration is read from ``XENOTONE_NUMBER_OF_COMPONENTS`` and the
    ``XENOTONE_CACHE_*`` variables at import time.
    """
    from ._cache import cache
    from .util.utils import NUMBER_OF_COMPONENTS, PRIMES

    print(f"python: {sys.version}")
    print(f"xenotone: {version}")
    print(
        f"components: {NUMBER_OF_COMPONENTS} "
        f"({PRIMES[NUMBER_OF_COMPONENTS - 1]}-limit)"
    )
    if cache.enabled:
        print(f"cache: {cache.memory.location} (level {cache.level})")
    else:
        print("cache: disabled")
    print("")
    for name, value in dependency_versions(tests=True).items():
        print(f"{name}: {value}")
