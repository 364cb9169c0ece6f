"""
Configuration management for arbitrary_kit.

Centralizes the default size hint and seed instead of scattering them
across the engine and the hypothesis bridge.
"""

from .settings import GenerationConfig, get_generation_config, reset_generation_config

__all__ = ["GenerationConfig", "get_generation_config", "reset_generation_config"]
