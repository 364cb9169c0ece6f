"""
Generation engine contract.

A Gen is an opaque description that, given Parameters (a non-negative size
hint and a randomness source), yields one value. Providers only compose
descriptions with the combinators below; sampling happens when a caller
applies a description to Parameters.
"""

from __future__ import annotations

import bisect
import itertools
import random
from collections.abc import Callable
from dataclasses import dataclass, field, replace
from typing import TYPE_CHECKING, Any, Generic, TypeVar

from ..config import get_generation_config
from ..utilities.constants import ContractViolationError
from ..utilities.validators import validate_range, validate_size, validate_weights

if TYPE_CHECKING:
    from ..domain.buildable import Buildable

T = TypeVar("T")
U = TypeVar("U")


@dataclass(frozen=True)
class Parameters:
    """
    Immutable generation parameters.

    The size hint controls the scale of generated structures. It must be
    non-negative; a negative size is a caller bug and raises
    ContractViolationError.
    """

    size: int
    rng: random.Random = field(default_factory=random.Random, compare=False, repr=False)

    def __post_init__(self):
        """Validate the size hint after initialization."""
        validate_size(self.size)

    def with_size(self, size: int) -> Parameters:
        """Return parameters with another size hint and the same source."""
        return replace(self, size=size)

    def with_rng(self, rng: random.Random) -> Parameters:
        """Return parameters with another randomness source."""
        return replace(self, rng=rng)

    @classmethod
    def default(cls, seed: int | None = None) -> Parameters:
        """Create parameters from the configured default size and seed."""
        config = get_generation_config()
        if seed is None:
            seed = config.seed
        return cls(size=config.default_size, rng=random.Random(seed))

    @classmethod
    def seeded(cls, size: int, seed: int) -> Parameters:
        """Create parameters whose source is rebuilt from a seed."""
        return cls(size=size, rng=random.Random(seed))


class Gen(Generic[T]):
    """Description of how to produce one value of T from Parameters."""

    __slots__ = ("_run", "name")

    def __init__(self, run: Callable[[Parameters], T], name: str = "gen"):
        self._run = run
        self.name = name

    def apply(self, params: Parameters) -> T:
        """Produce a value under the given parameters."""
        return self._run(params)

    def map(self, f: Callable[[T], U]) -> Gen[U]:
        run = self._run
        return Gen(lambda p: f(run(p)), f"{self.name}.map")

    def flat_map(self, f: Callable[[T], Gen[U]]) -> Gen[U]:
        run = self._run
        return Gen(lambda p: f(run(p)).apply(p), f"{self.name}.flat_map")

    def sample(self, size: int | None = None, seed: int | None = None) -> T:
        """Produce one value using the configured defaults."""
        params = Parameters.default(seed)
        if size is not None:
            params = params.with_size(size)
        return self.apply(params)

    def samples(self, count: int, size: int | None = None, seed: int | None = None) -> list[T]:
        """Produce several values from one randomness source."""
        params = Parameters.default(seed)
        if size is not None:
            params = params.with_size(size)
        return [self.apply(params) for _ in range(count)]

    def __repr__(self) -> str:
        return f"Gen({self.name})"


def _as_gen(alternative: Any) -> Gen:
    # Literal alternatives are lifted to constants
    return alternative if isinstance(alternative, Gen) else constant(alternative)


def constant(value: T) -> Gen[T]:
    """A description that always yields value."""
    return Gen(lambda p: value, "constant")


def choose(lo, hi) -> Gen:
    """
    Uniform choice over the inclusive range [lo, hi].

    Integer bounds give integers, any float bound gives floats.
    """
    validate_range(lo, hi, "choose")
    if isinstance(lo, int) and isinstance(hi, int):
        return Gen(lambda p: p.rng.randint(lo, hi), f"choose({lo}, {hi})")
    lo_f, hi_f = float(lo), float(hi)
    return Gen(lambda p: p.rng.uniform(lo_f, hi_f), f"choose({lo_f}, {hi_f})")


def choose_num(lo, hi, *specials) -> Gen:
    """
    Numeric choice over [lo, hi] biased toward boundary values.

    The bounds, 0, 1, -1 and any extra specials that fall inside the range
    are each chosen with weight 1; the uniform branch is weighted by the
    number of boundary values.
    """
    validate_range(lo, hi, "choose_num")
    numeric = float if isinstance(lo, float) or isinstance(hi, float) else int
    boundaries = []
    for candidate in (*specials, lo, hi, 0, 1, -1):
        candidate = numeric(candidate)
        if lo <= candidate <= hi and candidate not in boundaries:
            boundaries.append(candidate)

    alternatives = [(1, constant(value)) for value in boundaries]
    alternatives.append((len(boundaries), choose(lo, hi)))
    return frequency(*alternatives)


def sized(f: Callable[[int], Gen[T]]) -> Gen[T]:
    """A description parameterized by the current size hint."""
    return Gen(lambda p: f(p.size).apply(p), "sized")


def frequency(*alternatives: tuple[int, Any]) -> Gen:
    """
    Weighted choice among alternatives.

    Each alternative is a (weight, description-or-literal) pair. Zero-weight
    alternatives are never chosen.
    """
    weights = [weight for weight, _ in alternatives]
    validate_weights(weights)
    gens = [_as_gen(alternative) for _, alternative in alternatives]
    cumulative = list(itertools.accumulate(weights))
    total = cumulative[-1]

    def run(p: Parameters):
        point = p.rng.randrange(total)
        return gens[bisect.bisect_right(cumulative, point)].apply(p)

    return Gen(run, f"frequency({len(gens)})")


def one_of(*alternatives: Any) -> Gen:
    """Uniform choice among descriptions or literal values."""
    if not alternatives:
        raise ContractViolationError("one_of requires at least one alternative")
    gens = [_as_gen(alternative) for alternative in alternatives]
    return Gen(lambda p: gens[p.rng.randrange(len(gens))].apply(p), f"one_of({len(gens)})")


def resize(size: int, gen: Gen[T]) -> Gen[T]:
    """Override the size hint seen by a nested description."""
    validate_size(size)
    return Gen(lambda p: gen.apply(p.with_size(size)), f"resize({size})")


def zip_gens(*gens: Gen) -> Gen[tuple]:
    """Draw each description in order, with no dependency between them."""
    return Gen(lambda p: tuple(gen.apply(p) for gen in gens), f"zip({len(gens)})")


def build_elements_of(buildable: Buildable, element: Gen) -> Gen:
    """
    Produce a container through a builder capability.

    The element count is uniform in [0, size].
    """

    def run(p: Parameters):
        count = p.rng.randint(0, p.size)
        builder = buildable.builder()
        for _ in range(count):
            builder.add(element.apply(p))
        return builder.result()

    return Gen(run, f"build_elements_of({buildable.name})")


def _mix(base: int, n: int) -> bytes:
    width = n.bit_length() // 8 + 1
    return base.to_bytes(8, "big") + n.to_bytes(width, "big", signed=True)


def perturb(params: Parameters, n: int) -> Parameters:
    """
    Derive a new randomness source from the current one and an integer.

    Deterministic: equal sources and equal n give equal derived sources.
    """
    base = params.rng.getrandbits(64)
    return params.with_rng(random.Random(_mix(base, n)))


def variant(n: int, gen: Gen[T]) -> Gen[T]:
    """Drive a description with a source perturbed by n."""
    return Gen(lambda p: gen.apply(perturb(p, n)), f"variant({gen.name})")


def promote(f: Callable[[Any], Gen[T]]) -> Gen[Callable[[Any], T]]:
    """
    Lift a function producing a description per input into a description of
    functions.

    One seed is drawn per generated function; every call rebuilds the
    parameters from it, so equal inputs give equal outputs.
    """

    def run(p: Parameters):
        seed = p.rng.getrandbits(64)
        size = p.size

        def call(value):
            return f(value).apply(Parameters.seeded(size, seed))

        return call

    return Gen(run, "promote")


def delay(thunk: Callable[[], Gen[T]], name: str = "delay") -> Gen[T]:
    """
    Defer building a description until it is first applied.

    Used to reference registry entries without forcing them while other
    definitions are still being constructed.
    """
    resolved: list[Gen[T]] = []

    def run(p: Parameters):
        if not resolved:
            resolved.append(thunk())
        return resolved[0].apply(p)

    return Gen(run, name)
