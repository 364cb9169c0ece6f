"""
Unit tests for generation settings.
"""

import pytest

from arbitrary_kit.config import GenerationConfig, get_generation_config, reset_generation_config
from arbitrary_kit.core.gen import choose
from arbitrary_kit.utilities.constants import DEFAULT_MAX_SIZE, DEFAULT_SIZE, ContractViolationError


@pytest.mark.usefixtures("clean_config")
class TestGenerationConfig:
    """Test cases for GenerationConfig."""

    def test_defaults(self):
        """Test settings without environment overrides."""
        config = get_generation_config()
        assert config.default_size == DEFAULT_SIZE
        assert config.max_size == DEFAULT_MAX_SIZE
        assert config.seed is None

    def test_environment_overrides(self, monkeypatch):
        """Test that ARBITRARY_KIT_* variables override the defaults."""
        monkeypatch.setenv("ARBITRARY_KIT_DEFAULT_SIZE", "12")
        monkeypatch.setenv("ARBITRARY_KIT_MAX_SIZE", "40")
        monkeypatch.setenv("ARBITRARY_KIT_SEED", "7")
        reset_generation_config()

        config = get_generation_config()
        assert config == GenerationConfig(default_size=12, max_size=40, seed=7)

    def test_blank_values_ignored(self, monkeypatch):
        """Test that empty variables fall back to defaults."""
        monkeypatch.setenv("ARBITRARY_KIT_SEED", "  ")
        reset_generation_config()
        assert get_generation_config().seed is None

    @pytest.mark.parametrize(
        ("name", "value"),
        [
            ("ARBITRARY_KIT_DEFAULT_SIZE", "large"),
            ("ARBITRARY_KIT_MAX_SIZE", "-1"),
            ("ARBITRARY_KIT_SEED", "1.5"),
        ],
    )
    def test_invalid_environment(self, monkeypatch, name, value):
        """Test that malformed variables are rejected."""
        monkeypatch.setenv(name, value)
        reset_generation_config()
        with pytest.raises(ContractViolationError):
            get_generation_config()

    def test_cached_until_reset(self, monkeypatch):
        """Test that settings are read once until reset."""
        first = get_generation_config()
        monkeypatch.setenv("ARBITRARY_KIT_DEFAULT_SIZE", "3")
        assert get_generation_config() is first

        reset_generation_config()
        assert get_generation_config().default_size == 3

    def test_seed_fixes_samples(self, monkeypatch):
        """Test that a configured seed makes direct sampling reproducible."""
        monkeypatch.setenv("ARBITRARY_KIT_SEED", "21")
        reset_generation_config()
        gen = choose(0, 10**9)
        assert gen.samples(5) == gen.samples(5)
