"""
Builder capabilities for container types.

A Buildable offers incremental accumulation of elements into a container
instance. A provider for a container is derived from an element provider
and one of these.
"""

from collections import deque
from collections.abc import Callable, Iterable
from typing import Any, Generic, Protocol, TypeVar, runtime_checkable

T = TypeVar("T")
C = TypeVar("C")


@runtime_checkable
class Builder(Protocol):
    """Accumulates elements and produces the finished container."""

    def add(self, element: Any) -> None: ...

    def result(self) -> Any: ...


@runtime_checkable
class Buildable(Protocol):
    """Capability that creates fresh builders for one container type."""

    name: str

    def builder(self) -> Builder: ...


class _CollectingBuilder(Generic[C]):
    __slots__ = ("_elements", "_finish")

    def __init__(self, finish: Callable[[list], C]):
        self._elements: list = []
        self._finish = finish

    def add(self, element: Any) -> None:
        self._elements.append(element)

    def result(self) -> C:
        return self._finish(self._elements)


class CollectionBuildable(Generic[C]):
    """
    Buildable that collects elements in a list and converts them once.

    Args:
        name: Container name used in descriptions
        finish: Converts the collected list into the container
    """

    def __init__(self, name: str, finish: Callable[[list], C]):
        self.name = name
        self._finish = finish

    def builder(self) -> _CollectingBuilder[C]:
        return _CollectingBuilder(self._finish)

    def __repr__(self) -> str:
        return f"CollectionBuildable({self.name!r})"


def _to_dict(pairs: Iterable[tuple]) -> dict:
    return dict(pairs)


def _to_str(chars: Iterable[str]) -> str:
    return "".join(chars)


LIST = CollectionBuildable("list", list)
TUPLE = CollectionBuildable("tuple", tuple)
SET = CollectionBuildable("set", set)
FROZENSET = CollectionBuildable("frozenset", frozenset)
DEQUE = CollectionBuildable("deque", deque)
DICT = CollectionBuildable("dict", _to_dict)
STR = CollectionBuildable("str", _to_str)
