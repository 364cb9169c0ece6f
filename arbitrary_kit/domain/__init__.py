"""
Domain value objects: providers, perturbation capabilities, builder
capabilities, two-branch unions, check parameters and type markers.
"""

from .buildable import Buildable, Builder, CollectionBuildable
from .check_parameters import CheckParameters
from .cogen import CoArbitrary
from .either import Either, Left, Right
from .provider import Provider
from .types import AnyVal, BitSet, Byte, Char, Codepoint, Float32, Int, Long, Short

__all__ = [
    "AnyVal",
    "BitSet",
    "Buildable",
    "Builder",
    "Byte",
    "Char",
    "CheckParameters",
    "CoArbitrary",
    "CollectionBuildable",
    "Codepoint",
    "Either",
    "Float32",
    "Int",
    "Left",
    "Long",
    "Provider",
    "Right",
    "Short",
]
