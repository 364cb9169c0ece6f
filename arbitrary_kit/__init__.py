"""
arbitrary_kit - canonical value providers for property-based testing.

This package provides:
- A registry mapping each supported type to one generation description
- Primitive providers biased toward boundary and pathological values
- Composite providers for optionals, unions, containers and tuples
- Function providers synthesised from perturbation capabilities
- Providers for the engine's own configuration, for self-testing
- A bridge turning any provider into a hypothesis strategy

Providers only describe how to produce a value; sampling is done by
applying a description to generation Parameters.
"""

__version__ = "1.0.0"
__description__ = "Canonical value providers for property-based testing"

# Core modules
from .core import (
    Gen,
    Parameters,
    Prop,
    Result,
    Status,
    arbitrary,
    coarbitrary,
    cogen_registry,
    provider_for,
    provides,
    provides_generic,
    provider_registry,
    strategy_for,
    to_strategy,
)
from .domain import (
    AnyVal,
    BitSet,
    Byte,
    Char,
    CheckParameters,
    CoArbitrary,
    Codepoint,
    Either,
    Float32,
    Int,
    Left,
    Long,
    Provider,
    Right,
    Short,
)

# Importing the definitions registers the built-in providers
from . import providers
from .utilities.constants import (
    ArbitraryKitError,
    ContractViolationError,
    DuplicateRegistrationError,
    ProviderLookupError,
)

__all__ = [
    # Engine and registry
    "Gen",
    "Parameters",
    "Prop",
    "Result",
    "Status",
    "arbitrary",
    "coarbitrary",
    "cogen_registry",
    "provider_for",
    "provides",
    "provides_generic",
    "provider_registry",
    "strategy_for",
    "to_strategy",
    # Domain
    "AnyVal",
    "BitSet",
    "Byte",
    "Char",
    "CheckParameters",
    "CoArbitrary",
    "Codepoint",
    "Either",
    "Float32",
    "Int",
    "Left",
    "Long",
    "Provider",
    "Right",
    "Short",
    # Definitions
    "providers",
    # Errors
    "ArbitraryKitError",
    "ContractViolationError",
    "DuplicateRegistrationError",
    "ProviderLookupError",
]
