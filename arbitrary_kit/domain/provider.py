"""
Provider value object.

A Provider pairs a type with its one canonical generation description.
"""

import logging
from collections.abc import Callable
from functools import cached_property
from typing import Generic, TypeVar

from ..core.gen import Gen

logger = logging.getLogger(__name__)

T = TypeVar("T")


class Provider(Generic[T]):
    """
    Immutable, lazily constructed description of how to produce a value.

    The description is built on first access to `gen`. Forcing is
    idempotent: two threads forcing at once build equivalent descriptions
    and one of them is kept.
    """

    def __init__(self, factory: Callable[[], Gen[T]], name: str = "provider"):
        self._factory = factory
        self.name = name

    @cached_property
    def gen(self) -> Gen[T]:
        """The generation description, constructed on first use."""
        logger.debug(f"Constructing provider {self.name}")
        return self._factory()

    @classmethod
    def of(cls, gen: Gen[T], name: str | None = None) -> "Provider[T]":
        """Wrap an already built description."""
        return cls(lambda: gen, name or gen.name)

    def __repr__(self) -> str:
        return f"Provider({self.name!r})"
