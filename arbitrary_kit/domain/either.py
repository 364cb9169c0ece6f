"""
Two-branch union value objects.
"""

from dataclasses import dataclass
from typing import Generic, TypeVar

L = TypeVar("L")
R = TypeVar("R")


class Either(Generic[L, R]):
    """A value that is either a Left or a Right."""

    __slots__ = ()

    @property
    def is_left(self) -> bool:
        return isinstance(self, Left)

    @property
    def is_right(self) -> bool:
        return isinstance(self, Right)


@dataclass(frozen=True)
class Left(Either[L, R]):
    value: L


@dataclass(frozen=True)
class Right(Either[L, R]):
    value: R
