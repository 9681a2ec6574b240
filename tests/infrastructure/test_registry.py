"""Tests for EnumerationRegistry."""

from __future__ import annotations

import pytest

from class_enumerations import Enumeration
from class_enumerations.infrastructure.registry import (
    EnumerationRegistry,
    qualified_name,
    registry,
)
from tests.helpers.sample_enumerations import HttpStatus, Suit


class TestEnumerationRegistry:
    """Register, get, has, duplicates and the global singleton."""

    def test_qualified_name(self) -> None:
        assert qualified_name(Suit) == "tests.helpers.sample_enumerations:Suit"

    def test_register_and_get(self, fresh_registry: EnumerationRegistry) -> None:
        key = fresh_registry.register(Suit)
        assert key == qualified_name(Suit)
        assert fresh_registry.get(key) is Suit
        assert fresh_registry.has(key)
        assert fresh_registry.count() == 1

    def test_get_missing_raises(self, fresh_registry: EnumerationRegistry) -> None:
        with pytest.raises(KeyError, match="not registered"):
            fresh_registry.get("nowhere:Nothing")
        assert fresh_registry.get_or_none("nowhere:Nothing") is None

    def test_reregistering_same_class_is_allowed(
        self, fresh_registry: EnumerationRegistry
    ) -> None:
        fresh_registry.register(Suit)
        fresh_registry.register(Suit)
        assert fresh_registry.count() == 1

    def test_duplicate_key_requires_overwrite(
        self, fresh_registry: EnumerationRegistry
    ) -> None:
        def make() -> type:
            class Color(Enumeration):
                RED = "r"

            return Color

        first, second = make(), make()
        fresh_registry.register(first)
        with pytest.raises(ValueError, match="already registered"):
            fresh_registry.register(second)
        fresh_registry.register(second, overwrite=True)
        assert fresh_registry.get(qualified_name(second)) is second

    def test_list_names_with_prefix(self, fresh_registry: EnumerationRegistry) -> None:
        fresh_registry.register(Suit)
        fresh_registry.register(HttpStatus)
        names = fresh_registry.list_names("tests.helpers.")
        assert names == sorted([qualified_name(HttpStatus), qualified_name(Suit)])
        assert fresh_registry.list_names("other.") == []

    def test_contains(self, fresh_registry: EnumerationRegistry) -> None:
        fresh_registry.register(Suit)
        assert Suit in fresh_registry
        assert qualified_name(Suit) in fresh_registry
        assert HttpStatus not in fresh_registry
        assert 42 not in fresh_registry

    def test_repr(self, fresh_registry: EnumerationRegistry) -> None:
        fresh_registry.register(Suit)
        assert repr(fresh_registry) == "<EnumerationRegistry [1 classes]>"

    def test_subclasses_register_globally(self) -> None:
        assert Suit in registry
        assert HttpStatus in registry

    def test_base_class_is_not_registered(self) -> None:
        assert Enumeration not in registry

    def test_redefinition_replaces_entry(self) -> None:
        def make() -> type:
            class Shade(Enumeration):
                DARK = "d"

            return Shade

        first = make()
        second = make()
        assert registry.get(qualified_name(first)) is second
