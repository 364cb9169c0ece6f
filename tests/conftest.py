"""
Pytest configuration and shared fixtures for arbitrary_kit tests.

Provides seeded generation parameters, registry isolation and
configuration resets for the unit and property suites.
"""

import random
from collections.abc import Callable, Generator

import pytest

from arbitrary_kit.config import reset_generation_config
from arbitrary_kit.core.gen import Gen, Parameters
from arbitrary_kit.core.registry import cogen_registry, provider_registry


# Pytest configuration
def pytest_configure(config):
    """Configure pytest with custom markers and settings."""
    config.addinivalue_line("markers", "unit: mark test as unit test (fast, isolated)")
    config.addinivalue_line("markers", "property: mark test as hypothesis property test")
    config.addinivalue_line("markers", "statistical: mark test as a distribution check")


def pytest_collection_modifyitems(config, items):
    """Modify test collection to add markers based on test location."""
    for item in items:
        if "unit" in str(item.fspath):
            item.add_marker(pytest.mark.unit)
        elif "property" in str(item.fspath):
            item.add_marker(pytest.mark.property)


# Generation fixtures
@pytest.fixture
def params() -> Parameters:
    """Seeded parameters at the default size."""
    return Parameters(size=100, rng=random.Random(1234))


@pytest.fixture
def make_params() -> Callable[..., Parameters]:
    """Factory for seeded parameters."""

    def _make(size: int = 100, seed: int = 1234) -> Parameters:
        return Parameters(size=size, rng=random.Random(seed))

    return _make


@pytest.fixture
def draw_many() -> Callable[..., list]:
    """Draw many values from one seeded source."""

    def _draw(gen: Gen, count: int = 1000, size: int = 100, seed: int = 1234) -> list:
        source = Parameters(size=size, rng=random.Random(seed))
        return [gen.apply(source) for _ in range(count)]

    return _draw


# Registry fixtures
@pytest.fixture
def isolated_registries() -> Generator[None, None, None]:
    """Restore both registries after the test registers its own entries."""
    providers_snapshot = provider_registry.snapshot()
    cogens_snapshot = cogen_registry.snapshot()
    yield
    provider_registry.restore(providers_snapshot)
    cogen_registry.restore(cogens_snapshot)


# Configuration fixtures
@pytest.fixture
def clean_config(monkeypatch) -> Generator[None, None, None]:
    """Clear ARBITRARY_KIT_* variables and the cached configuration."""
    for name in ("ARBITRARY_KIT_DEFAULT_SIZE", "ARBITRARY_KIT_MAX_SIZE", "ARBITRARY_KIT_SEED"):
        monkeypatch.delenv(name, raising=False)
    reset_generation_config()
    yield
    reset_generation_config()
