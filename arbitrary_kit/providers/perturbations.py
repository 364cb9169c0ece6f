"""
Perturbation capabilities for domain types.

Each capability maps a value and a parameter state to a new parameter state,
deterministically. Synthesised functions use them to drive their result
description differently per argument.
"""

from collections import deque
from datetime import datetime, timedelta
from decimal import Decimal
from typing import Optional

from ..core.gen import Parameters, perturb
from ..core.registry import coarbitrary, cogen_registry, perturbs, perturbs_generic
from ..domain.cogen import CoArbitrary, fold_perturb
from ..domain.either import Either, Left
from ..domain.types import FIXED_WIDTH_INTS, Char, Codepoint, Float32
from ..utilities.bits import float_to_float64_bits
from ..utilities.constants import ProviderLookupError

_MICROSECOND = timedelta(microseconds=1)


@perturbs(bool)
def perturb_bool(value: bool, params: Parameters) -> Parameters:
    return perturb(params, 1 if value else 0)


@perturbs(int)
def perturb_int(value: int, params: Parameters) -> Parameters:
    return perturb(params, value)


for _marker in (*FIXED_WIDTH_INTS, Codepoint):
    cogen_registry.register(_marker, perturb_int)


@perturbs(float)
def perturb_float(value: float, params: Parameters) -> Parameters:
    # Bit pattern, so -0.0 and NaN payloads are told apart
    return perturb(params, float_to_float64_bits(value))


cogen_registry.register(Float32, perturb_float)


@perturbs(str)
def perturb_str(value: str, params: Parameters) -> Parameters:
    return fold_perturb(perturb_int, (ord(char) for char in value), params)


cogen_registry.register(Char, perturb_str)

perturb_none = cogen_registry.register(
    type(None), CoArbitrary.from_int(lambda value: 0, "perturb_none")
)


@perturbs(Decimal)
def perturb_decimal(value: Decimal, params: Parameters) -> Parameters:
    sign, digits, exponent = value.as_tuple()
    unscaled = int("".join(map(str, digits)) or "0")
    params = perturb(params, -unscaled if sign else unscaled)
    if isinstance(exponent, str):
        # 'n', 'N' or 'F' for NaN, signaling NaN and infinity
        return perturb(perturb(params, 1), ord(exponent))
    return perturb(perturb(params, 0), exponent)


def _microseconds_since_min(value: datetime) -> int:
    return (value.replace(tzinfo=None) - datetime.min) // _MICROSECOND


perturb_datetime = cogen_registry.register(
    datetime, perturb_int.contramap(_microseconds_since_min, "perturb_datetime")
)


@perturbs_generic(Optional)
def perturb_optional(tp) -> CoArbitrary:
    inner = coarbitrary(tp)

    def perturb_fn(value, params: Parameters) -> Parameters:
        if value is None:
            return perturb(params, 0)
        return inner.perturb(value, perturb(params, 1))

    return CoArbitrary(perturb_fn, f"perturb_optional({inner.name})")


@perturbs_generic(Either)
def perturb_either(left_tp, right_tp) -> CoArbitrary:
    left, right = coarbitrary(left_tp), coarbitrary(right_tp)

    def perturb_fn(value: Either, params: Parameters) -> Parameters:
        if isinstance(value, Left):
            return left.perturb(value.value, perturb(params, 0))
        return right.perturb(value.value, perturb(params, 1))

    return CoArbitrary(perturb_fn, "perturb_either")


def _perturb_sequence(tp) -> CoArbitrary:
    element = coarbitrary(tp)
    return CoArbitrary(lambda value, params: fold_perturb(element, value, params), "perturb_sequence")


def _perturb_unordered(tp) -> CoArbitrary:
    element = coarbitrary(tp)
    return CoArbitrary(
        lambda value, params: fold_perturb(element, sorted(value, key=repr), params),
        "perturb_unordered",
    )


cogen_registry.register_generic(list, _perturb_sequence)
cogen_registry.register_generic(deque, _perturb_sequence)
cogen_registry.register_generic(set, _perturb_unordered)
cogen_registry.register_generic(frozenset, _perturb_unordered)


@perturbs_generic(tuple)
def perturb_tuple(*component_types) -> CoArbitrary:
    if len(component_types) == 2 and component_types[1] is Ellipsis:
        return _perturb_sequence(component_types[0])
    if not component_types:
        raise ProviderLookupError("No perturbation registered for the empty tuple")

    components = [coarbitrary(tp) for tp in component_types]

    def perturb_fn(value: tuple, params: Parameters) -> Parameters:
        for cogen, item in zip(components, value, strict=True):
            params = cogen.perturb(item, params)
        return params

    return CoArbitrary(perturb_fn, "perturb_tuple")


@perturbs_generic(dict)
def perturb_dict(key_tp, value_tp) -> CoArbitrary:
    pair = coarbitrary(tuple[key_tp, value_tp])
    return CoArbitrary(
        lambda value, params: fold_perturb(pair, sorted(value.items(), key=repr), params),
        "perturb_dict",
    )
