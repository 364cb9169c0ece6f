"""
IEEE-754 bit layout helpers.

Floating point values are assembled from independently sampled sign,
exponent and mantissa fields and can be split back into those fields.
"""

import struct

from .constants import (
    FLOAT32_EXPONENT_BITS,
    FLOAT32_MANTISSA_BITS,
    FLOAT64_EXPONENT_BITS,
    FLOAT64_MANTISSA_BITS,
)

FLOAT32_EXPONENT_MASK = (1 << FLOAT32_EXPONENT_BITS) - 1
FLOAT32_MANTISSA_MASK = (1 << FLOAT32_MANTISSA_BITS) - 1
FLOAT64_EXPONENT_MASK = (1 << FLOAT64_EXPONENT_BITS) - 1
FLOAT64_MANTISSA_MASK = (1 << FLOAT64_MANTISSA_BITS) - 1

_FLOAT32_SIGN_SHIFT = FLOAT32_EXPONENT_BITS + FLOAT32_MANTISSA_BITS
_FLOAT64_SIGN_SHIFT = FLOAT64_EXPONENT_BITS + FLOAT64_MANTISSA_BITS
_MANTISSA_WIDENING = FLOAT64_MANTISSA_BITS - FLOAT32_MANTISSA_BITS
_EXPONENT_REBIAS = (FLOAT64_EXPONENT_MASK >> 1) - (FLOAT32_EXPONENT_MASK >> 1)


def _widen_float32_bits(bits: int) -> int:
    """Map a 32-bit pattern onto the 64-bit pattern of the same value."""
    sign = bits >> _FLOAT32_SIGN_SHIFT
    exponent = (bits >> FLOAT32_MANTISSA_BITS) & FLOAT32_EXPONENT_MASK
    mantissa = bits & FLOAT32_MANTISSA_MASK

    if exponent == FLOAT32_EXPONENT_MASK:
        exponent = FLOAT64_EXPONENT_MASK
    elif exponent == 0:
        if mantissa:
            # Single precision subnormals are normal in double precision
            shift = FLOAT32_MANTISSA_BITS + 1 - mantissa.bit_length()
            mantissa = (mantissa << shift) & FLOAT32_MANTISSA_MASK
            exponent = _EXPONENT_REBIAS + 1 - shift
    else:
        exponent += _EXPONENT_REBIAS

    return (
        sign << _FLOAT64_SIGN_SHIFT
        | exponent << FLOAT64_MANTISSA_BITS
        | mantissa << _MANTISSA_WIDENING
    )


def float32_bits_to_float(bits: int) -> float:
    """
    Interpret a 32-bit pattern as a single precision float.

    The pattern is widened by hand rather than loaded as a C float, so NaN
    payloads, signaling ones included, are kept bit for bit.
    """
    return float64_bits_to_float(_widen_float32_bits(bits))


def float_to_float32_bits(value: float) -> int:
    """Return the 32-bit pattern of a value stored as single precision."""
    bits = float_to_float64_bits(value)
    if (bits >> FLOAT64_MANTISSA_BITS) & FLOAT64_EXPONENT_MASK != FLOAT64_EXPONENT_MASK:
        # Finite values round to single precision through the C conversion
        return struct.unpack("<I", struct.pack("<f", value))[0]

    mantissa = (bits & FLOAT64_MANTISSA_MASK) >> _MANTISSA_WIDENING
    if bits & FLOAT64_MANTISSA_MASK and not mantissa:
        # A NaN payload held only in the dropped bits narrows to the quiet NaN
        mantissa = 1 << (FLOAT32_MANTISSA_BITS - 1)
    return (
        (bits >> _FLOAT64_SIGN_SHIFT) << _FLOAT32_SIGN_SHIFT
        | FLOAT32_EXPONENT_MASK << FLOAT32_MANTISSA_BITS
        | mantissa
    )


def float64_bits_to_float(bits: int) -> float:
    """Interpret a 64-bit pattern as a double precision float."""
    return struct.unpack("<d", struct.pack("<Q", bits))[0]


def float_to_float64_bits(value: float) -> int:
    """Return the 64-bit pattern of a double precision float."""
    return struct.unpack("<Q", struct.pack("<d", value))[0]


def compose_float32(sign: int, exponent: int, mantissa: int) -> float:
    """
    Assemble a single precision value from its bit fields.

    Args:
        sign: 0 or 1
        exponent: biased exponent, 8 bits
        mantissa: fraction field, 23 bits
    """
    bits = (
        (sign & 1) << _FLOAT32_SIGN_SHIFT
        | (exponent & FLOAT32_EXPONENT_MASK) << FLOAT32_MANTISSA_BITS
        | (mantissa & FLOAT32_MANTISSA_MASK)
    )
    return float32_bits_to_float(bits)


def compose_float64(sign: int, exponent: int, mantissa: int) -> float:
    """
    Assemble a double precision value from its bit fields.

    Args:
        sign: 0 or 1
        exponent: biased exponent, 11 bits
        mantissa: fraction field, 52 bits
    """
    bits = (
        (sign & 1) << _FLOAT64_SIGN_SHIFT
        | (exponent & FLOAT64_EXPONENT_MASK) << FLOAT64_MANTISSA_BITS
        | (mantissa & FLOAT64_MANTISSA_MASK)
    )
    return float64_bits_to_float(bits)


def decompose_float32(value: float) -> tuple[int, int, int]:
    """Split a single precision value into (sign, exponent, mantissa)."""
    bits = float_to_float32_bits(value)
    return (
        bits >> _FLOAT32_SIGN_SHIFT,
        (bits >> FLOAT32_MANTISSA_BITS) & FLOAT32_EXPONENT_MASK,
        bits & FLOAT32_MANTISSA_MASK,
    )


def decompose_float64(value: float) -> tuple[int, int, int]:
    """Split a double precision value into (sign, exponent, mantissa)."""
    bits = float_to_float64_bits(value)
    return (
        bits >> _FLOAT64_SIGN_SHIFT,
        (bits >> FLOAT64_MANTISSA_BITS) & FLOAT64_EXPONENT_MASK,
        bits & FLOAT64_MANTISSA_MASK,
    )
