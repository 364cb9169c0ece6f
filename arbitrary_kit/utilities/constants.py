"""
Constants and exception types used throughout arbitrary_kit.

Numeric boundaries, IEEE-754 field widths, the codepoint layout and the
weights of the biased providers are defined here so that providers and
tests refer to the same values.
"""

from decimal import MAX_EMAX, MAX_PREC, MIN_EMIN, ROUND_HALF_EVEN, Context

# Fixed-width signed integer ranges
BYTE_MIN, BYTE_MAX = -(2**7), 2**7 - 1
SHORT_MIN, SHORT_MAX = -(2**15), 2**15 - 1
INT32_MIN, INT32_MAX = -(2**31), 2**31 - 1
INT64_MIN, INT64_MAX = -(2**63), 2**63 - 1

# IEEE-754 field widths (sign bit is always 1)
FLOAT32_EXPONENT_BITS = 8
FLOAT32_MANTISSA_BITS = 23
FLOAT64_EXPONENT_BITS = 11
FLOAT64_MANTISSA_BITS = 52

# Codepoints
MIN_CODEPOINT = 0x0000
MAX_CODEPOINT = 0x10FFFF
SURROGATE_MIN = 0xD800
SURROGATE_MAX = 0xDFFF

# Arbitrary-precision integer mixture
BIG_INT_SMALL_WEIGHT = 5
BIG_INT_LARGE_WEIGHT = 10
BIG_INT_CONSTANT_WEIGHT = 1
BIG_INT_MIN_SHIFT = 32
BIG_INT_MAX_SHIFT = 128
BIG_INT_BOUNDARIES = (
    0,
    1,
    -1,
    INT32_MAX + 1,
    INT32_MIN - 1,
    INT64_MAX,
    INT64_MIN,
    INT64_MAX + 1,
    INT64_MIN - 1,
)


def _bounded_context(precision: int) -> Context:
    # Overflow fires once the rounded scale drops below INT32_MIN
    return Context(
        prec=precision,
        rounding=ROUND_HALF_EVEN,
        Emax=-INT32_MIN + precision - 1,
        Emin=MIN_EMIN,
    )


# Decimal precision contexts
UNLIMITED = Context(prec=MAX_PREC, rounding=ROUND_HALF_EVEN, Emax=MAX_EMAX, Emin=MIN_EMIN)
DECIMAL32 = _bounded_context(7)
DECIMAL64 = _bounded_context(16)
DECIMAL128 = _bounded_context(34)
DECIMAL_CONTEXTS = (UNLIMITED, DECIMAL32, DECIMAL64, DECIMAL128)

# Default size hint when no configuration is given
DEFAULT_SIZE = 100
DEFAULT_MAX_SIZE = 100

# Supported arities
MIN_TUPLE_ARITY = 2
MAX_TUPLE_ARITY = 9
MIN_FUNCTION_ARITY = 1
MAX_FUNCTION_ARITY = 5


class ArbitraryKitError(Exception):
    """Base class for arbitrary_kit errors."""


class ContractViolationError(ArbitraryKitError, ValueError):
    """Raised when a caller breaks a documented precondition."""


class ProviderLookupError(ArbitraryKitError, LookupError):
    """Raised when no provider or perturbation is registered for a type."""


class DuplicateRegistrationError(ArbitraryKitError):
    """Raised when a type key is registered twice without replace=True."""
