"""Pytest configuration and fixtures for factory package tests."""

import pytest

from dataknobs_factory import Factory, reset_settings
from dataknobs_factory.testing import CountingRandom


@pytest.fixture(autouse=True)
def default_settings():
    """Run every test against the built-in factory settings."""
    reset_settings()
    yield
    reset_settings()


@pytest.fixture
def counting_rng():
    """Seeded random source that records the number of draws."""
    return CountingRandom(seed=1234)


class ResourceFactory(Factory):
    define = {
        "id": 0,
    }


@pytest.fixture
def resource_factory():
    """Fresh factory producing ``{"id": 0}``."""
    return ResourceFactory()
