"""
Type-keyed registries for providers and perturbation capabilities.

Providers are looked up by type at the point a property or another provider
needs a value. Plain keys (classes, NewTypes) map to one entry; generic
origins (list, tuple, Optional, Callable, ...) map to a factory taking the
type arguments, and each concrete parameterization is memoised so every
concrete type has exactly one canonical entry.
"""

import logging
import types
from collections.abc import Callable
from typing import Any, Generic, Optional, TypeVar, Union, get_args, get_origin

from ..domain.cogen import CoArbitrary
from ..domain.provider import Provider
from ..utilities.constants import DuplicateRegistrationError, ProviderLookupError
from .gen import Gen, delay

logger = logging.getLogger(__name__)

V = TypeVar("V")

NoneType = type(None)


def type_name(tp: Any) -> str:
    """Readable name of a type key for messages and descriptions."""
    if get_origin(tp) is not None:
        return repr(tp).replace("typing.", "")
    return getattr(tp, "__name__", repr(tp))


def _normalize(tp: Any) -> tuple[Any, tuple]:
    """Split a type into (registry origin, type arguments)."""
    origin = get_origin(tp)
    args = get_args(tp)
    if origin is Union or origin is types.UnionType:
        present = tuple(arg for arg in args if arg is not NoneType)
        if len(present) == len(args):
            raise ProviderLookupError(f"Only optional unions are supported, got: {type_name(tp)}")
        inner = present[0] if len(present) == 1 else Union[present]
        return Optional, (inner,)
    return origin, args


class TypeRegistry(Generic[V]):
    """
    Explicit map from type keys to entries.

    Args:
        kind: Entry kind used in messages ("provider", "perturbation")
    """

    def __init__(self, kind: str):
        self.kind = kind
        self._entries: dict[Any, V] = {}
        self._generics: dict[Any, Callable[..., V]] = {}
        self._resolved: dict[Any, V] = {}

    def register(self, key: Any, entry: V, replace: bool = False) -> V:
        """Register the canonical entry for a plain type key."""
        if key in self._entries and not replace:
            raise DuplicateRegistrationError(
                f"A {self.kind} is already registered for {type_name(key)}"
            )
        if key in self._entries:
            logger.warning(f"Replacing {self.kind} for {type_name(key)}")
        self._entries[key] = entry
        logger.debug(f"Registered {self.kind} for {type_name(key)}")
        return entry

    def register_generic(
        self, origin: Any, factory: Callable[..., V], replace: bool = False
    ) -> Callable[..., V]:
        """Register a factory building entries from the type arguments of origin."""
        if origin in self._generics and not replace:
            raise DuplicateRegistrationError(
                f"A generic {self.kind} is already registered for {type_name(origin)}"
            )
        if origin in self._generics:
            logger.warning(f"Replacing generic {self.kind} for {type_name(origin)}")
            self._resolved = {
                tp: entry for tp, entry in self._resolved.items() if _normalize(tp)[0] != origin
            }
        self._generics[origin] = factory
        logger.debug(f"Registered generic {self.kind} for {type_name(origin)}")
        return factory

    def resolve(self, tp: Any) -> V:
        """
        Return the canonical entry for a type.

        Raises:
            ProviderLookupError: if nothing is registered for the type
        """
        entry = self._entries.get(tp)
        if entry is not None:
            return entry

        resolved = self._resolved.get(tp)
        if resolved is not None:
            return resolved

        origin, args = _normalize(tp)
        factory = self._generics.get(origin) if origin is not None else None
        if factory is None:
            raise ProviderLookupError(f"No {self.kind} registered for {type_name(tp)}")

        logger.debug(f"Resolving {self.kind} for {type_name(tp)}")
        return self._resolved.setdefault(tp, factory(*args))

    def __contains__(self, tp: Any) -> bool:
        try:
            self.resolve(tp)
        except ProviderLookupError:
            return False
        return True

    def keys(self) -> list[Any]:
        """Plain and generic keys currently registered."""
        return [*self._entries, *self._generics]

    def snapshot(self) -> tuple[dict, dict, dict]:
        """Capture the registry contents."""
        return dict(self._entries), dict(self._generics), dict(self._resolved)

    def restore(self, snapshot: tuple[dict, dict, dict]) -> None:
        """Restore contents captured by snapshot()."""
        entries, generics, resolved = snapshot
        self._entries = dict(entries)
        self._generics = dict(generics)
        self._resolved = dict(resolved)

    def __repr__(self) -> str:
        return f"TypeRegistry({self.kind!r}, entries={len(self._entries)}, generics={len(self._generics)})"


provider_registry: TypeRegistry[Provider] = TypeRegistry("provider")
cogen_registry: TypeRegistry[CoArbitrary] = TypeRegistry("perturbation")


def provides(key: Any, registry: TypeRegistry[Provider] | None = None):
    """
    Decorator registering a description factory as the provider for key.

    The decorated function takes no arguments and returns a Gen; it is
    called once, on first use. The decorator returns the Provider.
    """

    def decorator(factory: Callable[[], Gen]) -> Provider:
        provider = Provider(factory, factory.__name__)
        (registry or provider_registry).register(key, provider)
        return provider

    return decorator


def provides_generic(origin: Any, registry: TypeRegistry[Provider] | None = None):
    """
    Decorator registering a description factory for a generic origin.

    The decorated function receives the type arguments and returns a Gen.
    """

    def decorator(factory: Callable[..., Gen]) -> Callable[..., Gen]:
        def build(*args: Any) -> Provider:
            name = f"{factory.__name__}[{', '.join(type_name(arg) for arg in args)}]"
            return Provider(lambda: factory(*args), name)

        (registry or provider_registry).register_generic(origin, build)
        return factory

    return decorator


def perturbs(key: Any, registry: TypeRegistry[CoArbitrary] | None = None):
    """Decorator registering a perturbation function (value, params) -> params."""

    def decorator(perturb_fn: Callable) -> CoArbitrary:
        cogen = CoArbitrary(perturb_fn, perturb_fn.__name__)
        (registry or cogen_registry).register(key, cogen)
        return cogen

    return decorator


def perturbs_generic(origin: Any, registry: TypeRegistry[CoArbitrary] | None = None):
    """Decorator registering a factory of perturbations for a generic origin."""

    def decorator(factory: Callable[..., CoArbitrary]) -> Callable[..., CoArbitrary]:
        (registry or cogen_registry).register_generic(origin, factory)
        return factory

    return decorator


def provider_for(tp: Any) -> Provider:
    """Canonical provider for a type."""
    return provider_registry.resolve(tp)


def arbitrary(tp: Any) -> Gen:
    """
    Description producing values of tp.

    The registry entry is resolved immediately; its description is only
    forced when first applied, which lets mutually dependent definitions
    refer to each other.
    """
    provider = provider_registry.resolve(tp)
    return delay(lambda: provider.gen, f"arbitrary({type_name(tp)})")


def coarbitrary(tp: Any) -> CoArbitrary:
    """Canonical perturbation capability for a type."""
    return cogen_registry.resolve(tp)


__all__ = [
    "TypeRegistry",
    "arbitrary",
    "coarbitrary",
    "cogen_registry",
    "perturbs",
    "perturbs_generic",
    "provider_for",
    "provides",
    "provides_generic",
    "provider_registry",
    "type_name",
]
