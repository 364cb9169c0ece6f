"""
Unit tests for the provider and perturbation registries.

Tests registration, generic resolution, canonical memoisation and
mutually recursive definitions.
"""

from typing import Optional, Union

import pytest

from arbitrary_kit.core.gen import Gen, constant, zip_gens
from arbitrary_kit.core.registry import (
    TypeRegistry,
    arbitrary,
    coarbitrary,
    provider_for,
    provider_registry,
    provides,
    type_name,
)
from arbitrary_kit.domain.provider import Provider
from arbitrary_kit.domain.types import Char, Int, Short
from arbitrary_kit.utilities.constants import DuplicateRegistrationError, ProviderLookupError


class Node:
    """Linked list node used to exercise recursive definitions."""

    def __init__(self, value: int, next_node: "Node | None"):
        self.value = value
        self.next_node = next_node

    def __len__(self) -> int:
        return 1 + (len(self.next_node) if self.next_node is not None else 0)


class TestTypeRegistry:
    """Test cases for a standalone registry."""

    def test_register_and_resolve(self):
        """Test plain key registration."""
        registry = TypeRegistry("provider")
        provider = Provider.of(constant(1))
        registry.register(int, provider)
        assert registry.resolve(int) is provider
        assert int in registry

    def test_duplicate_registration_rejected(self):
        """Test that a second entry for a key is rejected."""
        registry = TypeRegistry("provider")
        registry.register(int, Provider.of(constant(1)))
        with pytest.raises(DuplicateRegistrationError):
            registry.register(int, Provider.of(constant(2)))

    def test_replace_registration(self, caplog):
        """Test that replace=True swaps the entry and warns."""
        registry = TypeRegistry("provider")
        registry.register(int, Provider.of(constant(1)))
        replacement = Provider.of(constant(2))
        registry.register(int, replacement, replace=True)
        assert registry.resolve(int) is replacement
        assert "Replacing provider" in caplog.text

    def test_unknown_type(self):
        """Test that unknown types raise ProviderLookupError."""
        registry = TypeRegistry("provider")
        with pytest.raises(ProviderLookupError):
            registry.resolve(complex)
        assert complex not in registry

    def test_lookup_error_is_a_lookup_error(self):
        """Test that lookup failures can be caught as LookupError."""
        with pytest.raises(LookupError):
            TypeRegistry("provider").resolve(bytes)

    def test_generic_memoised(self):
        """Test that each concrete generic type gets one canonical entry."""
        registry = TypeRegistry("provider")
        built = []

        def factory(tp):
            built.append(tp)
            return Provider.of(constant([]))

        registry.register_generic(list, factory)
        first = registry.resolve(list[int])
        second = registry.resolve(list[int])
        assert first is second
        assert built == [int]

    def test_snapshot_restore(self):
        """Test that restore drops entries added after the snapshot."""
        registry = TypeRegistry("provider")
        snapshot = registry.snapshot()
        registry.register(int, Provider.of(constant(1)))
        registry.restore(snapshot)
        assert int not in registry


class TestDefaultRegistry:
    """Test cases for the built-in registrations."""

    def test_optional_spellings(self):
        """Test that Optional[T] and T | None both resolve."""
        assert isinstance(provider_for(Optional[int]), Provider)
        assert isinstance(provider_for(int | None), Provider)

    def test_non_optional_union_rejected(self):
        """Test that unions without None are not supported."""
        with pytest.raises(ProviderLookupError):
            provider_for(Union[int, str])

    def test_canonical_provider(self):
        """Test that resolving a concrete type twice gives the same provider."""
        assert provider_for(list[tuple[Int, str]]) is provider_for(list[tuple[Int, str]])
        assert provider_for(bool) is provider_for(bool)

    def test_provider_is_lazy(self):
        """Test that resolving does not construct the description."""
        provider = provider_for(dict[Char, frozenset[Short]])
        assert "gen" not in vars(provider)
        assert isinstance(provider.gen, Gen)
        assert "gen" in vars(provider)

    def test_arbitrary_fails_fast_for_unknown_types(self):
        """Test that arbitrary() resolves the registry entry when called."""
        with pytest.raises(ProviderLookupError):
            arbitrary(complex)

    def test_coarbitrary_lookup(self):
        """Test perturbation lookups for plain and generic types."""
        assert coarbitrary(int) is coarbitrary(Int)
        assert coarbitrary(list[int]) is coarbitrary(list[int])
        with pytest.raises(ProviderLookupError):
            coarbitrary(object)

    def test_type_name(self):
        """Test readable type names."""
        assert type_name(int) == "int"
        assert type_name(Int) == "Int"
        assert type_name(list[int]) == "list[int]"


@pytest.mark.usefixtures("isolated_registries")
class TestRecursiveDefinitions:
    """Test cases for definitions that refer to each other."""

    def test_recursive_type_resolves_and_terminates(self, draw_many):
        """Test a linked list defined through an optional of itself."""

        @provides(Node)
        def nodes() -> Gen[Node]:
            return zip_gens(arbitrary(int), arbitrary(Optional[Node])).map(
                lambda fields: Node(*fields)
            )

        values = draw_many(arbitrary(Node), count=200, size=64)
        assert all(isinstance(value, Node) for value in values)
        # Each optional level halves the size: at most log2(64) + 2 nodes
        assert all(len(value) <= 8 for value in values)
        assert any(len(value) > 1 for value in values)

    def test_registration_is_restored(self, params):
        """Test that restoring a snapshot drops a decorator registration."""

        class Leaf:
            pass

        snapshot = provider_registry.snapshot()

        @provides(Leaf)
        def leaves() -> Gen[Leaf]:
            return constant(Leaf())

        assert Leaf in provider_registry
        assert isinstance(arbitrary(Leaf).apply(params), Leaf)
        provider_registry.restore(snapshot)
        assert Leaf not in provider_registry
