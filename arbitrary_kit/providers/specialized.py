"""
Specialised providers built from the primitives: strings, the unit value,
datetimes, exceptions, numbers, bit sets and a mixed scalar type.
"""

import numbers
from datetime import datetime, timedelta

from ..core.gen import Gen, choose, choose_num, constant, one_of, sized
from ..core.registry import arbitrary, provides
from ..domain.buildable import FROZENSET, STR
from ..domain.types import FIXED_WIDTH_INTS, AnyVal, BitSet, Byte, Char, Float32, Int, Long, Short
from .composites import container_of

_MILLISECOND = timedelta(milliseconds=1)


@provides(str)
def strings() -> Gen[str]:
    return container_of(STR, arbitrary(Char))


@provides(type(None))
def units() -> Gen[None]:
    return constant(None)


def datetimes_around(now: datetime) -> Gen[datetime]:
    """Datetimes at a millisecond offset from now, within datetime's range."""
    lowest = -((now - datetime.min) // _MILLISECOND)
    highest = (datetime.max - now) // _MILLISECOND
    return choose_num(lowest, highest).map(lambda offset: now + offset * _MILLISECOND)


@provides(datetime)
def datetimes() -> Gen[datetime]:
    return Gen(lambda p: datetimes_around(datetime.now()).apply(p), "datetimes")


@provides(Exception)
def exceptions() -> Gen[Exception]:
    # A fresh instance per draw; exceptions are mutable
    return Gen(lambda p: Exception(), "exceptions")


@provides(BaseException)
def base_exceptions() -> Gen[BaseException]:
    return one_of(arbitrary(Exception), Gen(lambda p: BaseException(), "base_exceptions"))


@provides(numbers.Number)
def numbers_() -> Gen[numbers.Number]:
    return one_of(*(arbitrary(tp) for tp in (*FIXED_WIDTH_INTS, Float32, float)))


@provides(BitSet)
def bit_sets() -> Gen[frozenset]:
    return container_of(FROZENSET, sized(lambda n: choose(0, n)))


@provides(AnyVal)
def any_vals() -> Gen[object]:
    return one_of(
        *(arbitrary(tp) for tp in (type(None), bool, Char, Byte, Short, Int, Long, Float32, float))
    )
