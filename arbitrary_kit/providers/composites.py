"""
Composite providers.

Optional values, two-branch unions, containers built through a builder
capability, fixed-arity tuples and constant descriptions. Element providers
are looked up in the registry, never instantiated directly.
"""

from collections import deque
from typing import Optional, TypeVar

from ..core.gen import Gen, build_elements_of, constant, frequency, one_of, resize, sized, zip_gens
from ..core.registry import arbitrary, provides_generic
from ..domain.buildable import DEQUE, DICT, FROZENSET, LIST, SET, TUPLE, Buildable
from ..domain.either import Either, Left, Right
from ..utilities.constants import MAX_TUPLE_ARITY, MIN_TUPLE_ARITY, ProviderLookupError
from ..utilities.validators import validate_arity

T = TypeVar("T")


def optional_of(element: Gen[T]) -> Gen[T | None]:
    """
    Size-aware optional values.

    At size 0 the result is always None. At size n the present branch has
    weight n against 1 for None and draws its value at half the size.
    """

    def by_size(n: int) -> Gen[T | None]:
        return frequency((n, resize(n // 2, element)), (1, constant(None)))

    return sized(by_size)


def either_of(left: Gen, right: Gen) -> Gen[Either]:
    """Uniform choice between a Left and a Right."""
    return one_of(left.map(Left), right.map(Right))


def container_of(buildable: Buildable, element: Gen) -> Gen:
    """Containers of up to size elements, built through buildable."""
    return build_elements_of(buildable, element)


def tuple_of(*components: Gen) -> Gen[tuple]:
    """Tuples of 2 to 9 independently drawn components."""
    validate_arity(len(components), MIN_TUPLE_ARITY, MAX_TUPLE_ARITY, "tuple")
    return zip_gens(*components)


@provides_generic(Optional)
def optionals(tp) -> Gen:
    return optional_of(arbitrary(tp))


@provides_generic(Either)
def eithers(left_tp, right_tp) -> Gen[Either]:
    return either_of(arbitrary(left_tp), arbitrary(right_tp))


@provides_generic(list)
def lists(tp) -> Gen[list]:
    return container_of(LIST, arbitrary(tp))


@provides_generic(set)
def sets(tp) -> Gen[set]:
    return container_of(SET, arbitrary(tp))


@provides_generic(frozenset)
def frozensets(tp) -> Gen[frozenset]:
    return container_of(FROZENSET, arbitrary(tp))


@provides_generic(deque)
def deques(tp) -> Gen[deque]:
    return container_of(DEQUE, arbitrary(tp))


@provides_generic(dict)
def dicts(key_tp, value_tp) -> Gen[dict]:
    # Built from pair elements, later keys overwrite earlier ones
    return container_of(DICT, arbitrary(tuple[key_tp, value_tp]))


@provides_generic(tuple)
def tuples(*component_types) -> Gen[tuple]:
    if len(component_types) == 2 and component_types[1] is Ellipsis:
        return container_of(TUPLE, arbitrary(component_types[0]))
    if not MIN_TUPLE_ARITY <= len(component_types) <= MAX_TUPLE_ARITY:
        raise ProviderLookupError(
            f"Tuples of arity {MIN_TUPLE_ARITY} to {MAX_TUPLE_ARITY} are supported, "
            f"got {len(component_types)}"
        )
    return tuple_of(*(arbitrary(tp) for tp in component_types))


@provides_generic(Gen)
def gens(tp) -> Gen[Gen]:
    return arbitrary(tp).map(constant)
