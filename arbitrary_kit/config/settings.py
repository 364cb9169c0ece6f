"""
Generation settings.

Defaults for the size hint and the randomness seed used when descriptions are
sampled directly or bridged into hypothesis. Values can be overridden through
environment variables.
"""

import logging
import os
from dataclasses import dataclass
from functools import lru_cache

from ..utilities.constants import DEFAULT_MAX_SIZE, DEFAULT_SIZE, ContractViolationError
from ..utilities.validators import validate_size

logger = logging.getLogger(__name__)

ENV_DEFAULT_SIZE = "ARBITRARY_KIT_DEFAULT_SIZE"
ENV_MAX_SIZE = "ARBITRARY_KIT_MAX_SIZE"
ENV_SEED = "ARBITRARY_KIT_SEED"


def _read_int(name: str) -> int | None:
    raw = os.environ.get(name)
    if raw is None or not raw.strip():
        return None
    try:
        return int(raw)
    except ValueError as e:
        raise ContractViolationError(f"{name} must be an integer, got: {raw!r}") from e


@dataclass(frozen=True)
class GenerationConfig:
    """
    Immutable generation settings.

    default_size is the size hint used by Gen.sample, max_size bounds the
    size drawn by the hypothesis bridge and seed fixes the randomness source
    when set.
    """

    default_size: int = DEFAULT_SIZE
    max_size: int = DEFAULT_MAX_SIZE
    seed: int | None = None

    def __post_init__(self):
        """Validate settings after initialization."""
        validate_size(self.default_size, "default_size")
        validate_size(self.max_size, "max_size")

    @classmethod
    def from_environment(cls) -> "GenerationConfig":
        """Create settings from ARBITRARY_KIT_* environment variables."""
        default_size = _read_int(ENV_DEFAULT_SIZE)
        max_size = _read_int(ENV_MAX_SIZE)
        seed = _read_int(ENV_SEED)

        config = cls(
            default_size=DEFAULT_SIZE if default_size is None else default_size,
            max_size=DEFAULT_MAX_SIZE if max_size is None else max_size,
            seed=seed,
        )
        logger.debug(f"Loaded generation config: {config}")
        return config


@lru_cache(maxsize=1)
def get_generation_config() -> GenerationConfig:
    """Return the process-wide generation settings."""
    return GenerationConfig.from_environment()


def reset_generation_config() -> None:
    """Forget cached settings so the environment is read again."""
    get_generation_config.cache_clear()
