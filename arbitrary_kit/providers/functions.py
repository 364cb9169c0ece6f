"""
Function providers.

A callable is synthesised by drawing one seed, then, on every call,
rebuilding parameters from that seed, perturbing them with each argument in
order and applying the result description. Equal arguments give equal
results because the perturbations are deterministic; nothing is cached.
"""

from collections.abc import Callable
from typing import Any

from ..core.gen import Gen, promote
from ..core.registry import arbitrary, coarbitrary, provides_generic
from ..domain.cogen import CoArbitrary
from ..utilities.constants import MAX_FUNCTION_ARITY, MIN_FUNCTION_ARITY, ProviderLookupError


class SynthesizedFunction:
    """A generated callable of fixed arity."""

    __slots__ = ("_call", "arity")

    def __init__(self, call: Callable[..., Any], arity: int):
        self._call = call
        self.arity = arity

    def __call__(self, *args: Any) -> Any:
        if len(args) != self.arity:
            raise TypeError(f"Synthesized function takes {self.arity} arguments, got {len(args)}")
        return self._call(*args)

    def __repr__(self) -> str:
        return f"<synthesized function/{self.arity}>"


def _synthesize(arity: int, by_arguments: Callable[[tuple], Gen]) -> Gen[SynthesizedFunction]:
    # The argument tuple is the promoted input, so every arity shares one seeding path
    return promote(by_arguments).map(
        lambda call: SynthesizedFunction(lambda *args: call(args), arity)
    )


def function1(c1: CoArbitrary, result: Gen) -> Gen[SynthesizedFunction]:
    def by_arguments(args: tuple) -> Gen:
        (x1,) = args
        return c1.coarbitrary(x1, result)

    return _synthesize(1, by_arguments)


def function2(c1: CoArbitrary, c2: CoArbitrary, result: Gen) -> Gen[SynthesizedFunction]:
    def by_arguments(args: tuple) -> Gen:
        x1, x2 = args
        return c1.coarbitrary(x1, c2.coarbitrary(x2, result))

    return _synthesize(2, by_arguments)


def function3(
    c1: CoArbitrary, c2: CoArbitrary, c3: CoArbitrary, result: Gen
) -> Gen[SynthesizedFunction]:
    def by_arguments(args: tuple) -> Gen:
        x1, x2, x3 = args
        return c1.coarbitrary(x1, c2.coarbitrary(x2, c3.coarbitrary(x3, result)))

    return _synthesize(3, by_arguments)


def function4(
    c1: CoArbitrary, c2: CoArbitrary, c3: CoArbitrary, c4: CoArbitrary, result: Gen
) -> Gen[SynthesizedFunction]:
    def by_arguments(args: tuple) -> Gen:
        x1, x2, x3, x4 = args
        return c1.coarbitrary(
            x1, c2.coarbitrary(x2, c3.coarbitrary(x3, c4.coarbitrary(x4, result)))
        )

    return _synthesize(4, by_arguments)


def function5(
    c1: CoArbitrary,
    c2: CoArbitrary,
    c3: CoArbitrary,
    c4: CoArbitrary,
    c5: CoArbitrary,
    result: Gen,
) -> Gen[SynthesizedFunction]:
    def by_arguments(args: tuple) -> Gen:
        x1, x2, x3, x4, x5 = args
        innermost = c4.coarbitrary(x4, c5.coarbitrary(x5, result))
        return c1.coarbitrary(x1, c2.coarbitrary(x2, c3.coarbitrary(x3, innermost)))

    return _synthesize(5, by_arguments)


FUNCTIONS_BY_ARITY = {
    1: function1,
    2: function2,
    3: function3,
    4: function4,
    5: function5,
}


@provides_generic(Callable)
def callables(argument_types, result_type) -> Gen[SynthesizedFunction]:
    if argument_types is Ellipsis or not (
        MIN_FUNCTION_ARITY <= len(argument_types) <= MAX_FUNCTION_ARITY
    ):
        raise ProviderLookupError(
            f"Callables of arity {MIN_FUNCTION_ARITY} to {MAX_FUNCTION_ARITY} are supported, "
            f"got {argument_types!r}"
        )
    capabilities = [coarbitrary(tp) for tp in argument_types]
    return FUNCTIONS_BY_ARITY[len(argument_types)](*capabilities, arbitrary(result_type))
