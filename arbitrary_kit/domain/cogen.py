"""
Perturbation capability value object.

A CoArbitrary turns a domain value and a parameter state into a new
parameter state, so a result description can be driven differently per
input. It is the basis for synthesising functions.
"""

from collections.abc import Callable
from typing import Any, Generic, TypeVar

from ..core.gen import Gen, Parameters, perturb

T = TypeVar("T")
U = TypeVar("U")
R = TypeVar("R")


class CoArbitrary(Generic[T]):
    """Deterministic mapping from (value, parameters) to parameters."""

    __slots__ = ("_perturb", "name")

    def __init__(self, perturb_fn: Callable[[T, Parameters], Parameters], name: str = "cogen"):
        self._perturb = perturb_fn
        self.name = name

    def perturb(self, value: T, params: Parameters) -> Parameters:
        """Return the parameter state seeded by value."""
        return self._perturb(value, params)

    def coarbitrary(self, value: T, gen: Gen[R]) -> Gen[R]:
        """Drive gen with parameters perturbed by value."""
        return Gen(lambda p: gen.apply(self._perturb(value, p)), f"coarbitrary({self.name})")

    def contramap(self, f: Callable[[U], T], name: str | None = None) -> "CoArbitrary[U]":
        """Perturb by a projection of the value."""
        inner = self._perturb
        return CoArbitrary(lambda value, p: inner(f(value), p), name or f"{self.name}.contramap")

    @classmethod
    def from_int(cls, f: Callable[[T], int], name: str = "cogen") -> "CoArbitrary[T]":
        """Perturb by a single integer derived from the value."""
        return cls(lambda value, p: perturb(p, f(value)), name)

    def __repr__(self) -> str:
        return f"CoArbitrary({self.name!r})"


def fold_perturb(cogen: CoArbitrary, values: Any, params: Parameters) -> Parameters:
    """Apply a perturbation for each value in order, prefixed by the count."""
    items = list(values)
    params = perturb(params, len(items))
    for item in items:
        params = cogen.perturb(item, params)
    return params
