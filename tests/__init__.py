"""
Test package for arbitrary_kit.

Unit tests exercise each provider and the engine contracts with seeded
sources; property tests drive the providers through hypothesis.
"""

__all__ = [
    "conftest",  # Pytest configuration and fixtures
    "property",  # Hypothesis property suite
    "unit",  # Unit test suite
]
