"""
CheckParameters value object for the property runner's configuration.
"""

from dataclasses import dataclass

from ..utilities.constants import ContractViolationError
from ..utilities.validators import validate_size


@dataclass(frozen=True)
class CheckParameters:
    """
    Immutable configuration of a property check run.

    max_size must not be smaller than min_size.
    """

    min_successful_tests: int = 100
    max_discard_ratio: float = 5.0
    min_size: int = 0
    max_size: int = 100
    workers: int = 1

    def __post_init__(self):
        """Validate parameters after initialization."""
        if self.min_successful_tests <= 0:
            raise ContractViolationError(
                f"min_successful_tests must be positive, got: {self.min_successful_tests}"
            )
        if self.max_discard_ratio < 0:
            raise ContractViolationError(
                f"max_discard_ratio must be non-negative, got: {self.max_discard_ratio}"
            )
        validate_size(self.min_size, "min_size")
        validate_size(self.max_size, "max_size")
        if self.max_size < self.min_size:
            raise ContractViolationError(
                f"max_size ({self.max_size}) must not be smaller than min_size ({self.min_size})"
            )
        if self.workers < 1:
            raise ContractViolationError(f"workers must be at least 1, got: {self.workers}")
