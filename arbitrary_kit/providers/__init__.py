"""
Canonical provider definitions.

Importing this package registers every built-in provider and perturbation
capability in the default registries.
"""

from . import composites, functions, meta, perturbations, primitives, specialized
from .composites import container_of, either_of, optional_of, tuple_of
from .functions import SynthesizedFunction, function1, function2, function3, function4, function5

__all__ = [
    "SynthesizedFunction",
    "composites",
    "container_of",
    "either_of",
    "function1",
    "function2",
    "function3",
    "function4",
    "function5",
    "functions",
    "meta",
    "optional_of",
    "perturbations",
    "primitives",
    "specialized",
    "tuple_of",
]
