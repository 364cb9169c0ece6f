"""
Core engine contracts: generation descriptions, the type registries,
property evaluation primitives and the hypothesis bridge.
"""

from .gen import (
    Gen,
    Parameters,
    build_elements_of,
    choose,
    choose_num,
    constant,
    delay,
    frequency,
    one_of,
    perturb,
    promote,
    resize,
    sized,
    variant,
    zip_gens,
)
from .prop import Prop, Result, Status
from .registry import (
    TypeRegistry,
    arbitrary,
    coarbitrary,
    cogen_registry,
    perturbs,
    perturbs_generic,
    provider_for,
    provides,
    provides_generic,
    provider_registry,
)
from .strategies import strategy_for, to_strategy

__all__ = [
    # Engine
    "Gen",
    "Parameters",
    "build_elements_of",
    "choose",
    "choose_num",
    "constant",
    "delay",
    "frequency",
    "one_of",
    "perturb",
    "promote",
    "resize",
    "sized",
    "variant",
    "zip_gens",
    # Properties
    "Prop",
    "Result",
    "Status",
    # Registry
    "TypeRegistry",
    "arbitrary",
    "coarbitrary",
    "cogen_registry",
    "perturbs",
    "perturbs_generic",
    "provider_for",
    "provides",
    "provides_generic",
    "provider_registry",
    # Hypothesis bridge
    "strategy_for",
    "to_strategy",
]
