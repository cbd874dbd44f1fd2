#!/usr/bin/env python
# Test configuration and customization

import pytest

import xenotone


@pytest.fixture
def context():
    return xenotone.RootContext()


@pytest.fixture
def frequency_context():
    # 1/1 = 440 Hz
    unison = xenotone.TimeMonzo(-1, [3, 0, 1, 0, 1])
    return xenotone.RootContext(unison_frequency=unison)


@pytest.fixture
def external_flavors():
    """Registry of external comma tables, emptied after the test."""
    registry = xenotone.core.fjs._external
    saved = dict(registry)
    registry.clear()
    yield registry
    registry.clear()
    registry.update(saved)
