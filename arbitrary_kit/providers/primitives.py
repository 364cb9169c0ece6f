"""
Primitive providers.

Booleans, fixed-width integers, bit-reconstructed floating point values,
codepoints outside the surrogate range, and arbitrary-precision integers and
decimals biased toward boundary values.
"""

import logging
from decimal import Context, Decimal, Overflow

from ..core.gen import Gen, choose, choose_num, constant, frequency, one_of, sized, zip_gens
from ..core.registry import arbitrary, provides
from ..domain.types import Byte, Char, Codepoint, Float32, Int, Long, Short
from ..utilities.bits import compose_float32, compose_float64
from ..utilities.constants import (
    BIG_INT_BOUNDARIES,
    BIG_INT_CONSTANT_WEIGHT,
    BIG_INT_LARGE_WEIGHT,
    BIG_INT_MAX_SHIFT,
    BIG_INT_MIN_SHIFT,
    BIG_INT_SMALL_WEIGHT,
    BYTE_MAX,
    BYTE_MIN,
    DECIMAL_CONTEXTS,
    FLOAT32_EXPONENT_BITS,
    FLOAT32_MANTISSA_BITS,
    FLOAT64_EXPONENT_BITS,
    FLOAT64_MANTISSA_BITS,
    INT32_MAX,
    INT32_MIN,
    INT64_MAX,
    INT64_MIN,
    MAX_CODEPOINT,
    MIN_CODEPOINT,
    SHORT_MAX,
    SHORT_MIN,
    SURROGATE_MAX,
    SURROGATE_MIN,
    UNLIMITED,
)

logger = logging.getLogger(__name__)


@provides(bool)
def booleans() -> Gen[bool]:
    return one_of(True, False)


@provides(Byte)
def bytes_() -> Gen[int]:
    return choose_num(BYTE_MIN, BYTE_MAX)


@provides(Short)
def shorts() -> Gen[int]:
    return choose_num(SHORT_MIN, SHORT_MAX)


@provides(Int)
def ints() -> Gen[int]:
    return choose_num(INT32_MIN, INT32_MAX)


@provides(Long)
def longs() -> Gen[int]:
    return choose_num(INT64_MIN, INT64_MAX)


def float32_fields() -> Gen[tuple[int, int, int]]:
    """Sign, exponent and mantissa of a single precision value, each uniform."""
    return zip_gens(
        choose(0, 1),
        choose(0, (1 << FLOAT32_EXPONENT_BITS) - 1),
        choose(0, (1 << FLOAT32_MANTISSA_BITS) - 1),
    )


def float64_fields() -> Gen[tuple[int, int, int]]:
    """Sign, exponent and mantissa of a double precision value, each uniform."""
    return zip_gens(
        choose(0, 1),
        choose(0, (1 << FLOAT64_EXPONENT_BITS) - 1),
        choose(0, (1 << FLOAT64_MANTISSA_BITS) - 1),
    )


@provides(Float32)
def floats32() -> Gen[float]:
    # Independent fields reach subnormals, infinities and NaN patterns
    return float32_fields().map(lambda fields: compose_float32(*fields))


@provides(float)
def floats() -> Gen[float]:
    return float64_fields().map(lambda fields: compose_float64(*fields))


@provides(Codepoint)
def codepoints() -> Gen[int]:
    """Codepoints outside [0xD800, 0xDFFF], uniform over the valid ones."""
    return frequency(
        (SURROGATE_MIN - MIN_CODEPOINT, choose(MIN_CODEPOINT, SURROGATE_MIN - 1)),
        (MAX_CODEPOINT - SURROGATE_MAX, choose(SURROGATE_MAX + 1, MAX_CODEPOINT)),
    )


@provides(Char)
def chars() -> Gen[str]:
    return arbitrary(Codepoint).map(chr)


def small_big_ints() -> Gen[int]:
    """Integers in [-size, size]."""
    return sized(lambda size: choose(-size, size))


def large_big_ints() -> Gen[int]:
    """Small integers shifted left by 32 to 128 bits."""
    return zip_gens(small_big_ints(), choose(BIG_INT_MIN_SHIFT, BIG_INT_MAX_SHIFT)).map(
        lambda pair: pair[0] << pair[1]
    )


@provides(int)
def big_ints() -> Gen[int]:
    """
    Arbitrary-precision integers.

    A mixture of size-bounded integers, integers beyond machine-word range
    and the 32/64-bit boundary values as explicit alternatives.
    """
    return frequency(
        (BIG_INT_SMALL_WEIGHT, small_big_ints()),
        (BIG_INT_LARGE_WEIGHT, large_big_ints()),
        *((BIG_INT_CONSTANT_WEIGHT, constant(value)) for value in BIG_INT_BOUNDARIES),
    )


def minimum_safe_scale(unscaled: int, context: Context) -> int:
    """Lowest scale offset keeping the rounded scale inside the 32-bit range."""
    if context is UNLIMITED:
        return 0
    return max(len(str(abs(unscaled))) - context.prec, 0)


def make_decimal(unscaled: int, scale: int, context: Context) -> Decimal:
    """
    Build unscaled * 10**-scale rounded in context.

    A bounded context can conflict with the requested scale; the value is
    then rebuilt under the unlimited context.
    """
    sign, digits, _ = Decimal(unscaled).as_tuple()
    raw = Decimal((sign, digits, -scale))
    try:
        return context.copy().create_decimal(raw)
    except Overflow:
        logger.debug(
            f"Scale {scale} conflicts with precision {context.prec} for {unscaled}, "
            "rebuilding with unlimited precision"
        )
        return UNLIMITED.copy().create_decimal(raw)


def decimals_with(unscaled: int, context: Context) -> Gen[Decimal]:
    """Decimals with a fixed unscaled value and context and a sampled scale."""
    lowest = INT32_MIN + minimum_safe_scale(unscaled, context)
    return choose_num(lowest, INT32_MAX).map(lambda scale: make_decimal(unscaled, scale, context))


@provides(Decimal)
def decimals() -> Gen[Decimal]:
    contexts = one_of(*(constant(context) for context in DECIMAL_CONTEXTS))
    return zip_gens(arbitrary(int), contexts).flat_map(lambda pair: decimals_with(*pair))
