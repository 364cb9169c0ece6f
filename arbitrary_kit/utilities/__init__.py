"""
Utilities package for arbitrary_kit.

Constants, exception types, IEEE-754 bit layout helpers and precondition
validators shared by the engine and the providers.
"""

from .bits import compose_float32, compose_float64, decompose_float32, decompose_float64
from .constants import (
    ArbitraryKitError,
    ContractViolationError,
    DuplicateRegistrationError,
    ProviderLookupError,
)
from .validators import validate_arity, validate_range, validate_size, validate_weights

__all__ = [
    # Bit layout
    "compose_float32",
    "compose_float64",
    "decompose_float32",
    "decompose_float64",
    # Errors
    "ArbitraryKitError",
    "ContractViolationError",
    "DuplicateRegistrationError",
    "ProviderLookupError",
    # Validation
    "validate_arity",
    "validate_range",
    "validate_size",
    "validate_weights",
]
