"""Shared fixtures for the class-enumerations test suite."""

from __future__ import annotations

import pytest

from class_enumerations.infrastructure.cache import MemberCache
from class_enumerations.infrastructure.registry import EnumerationRegistry
from tests.helpers.sample_enumerations import ALL_SAMPLES, HttpStatus, Suit


@pytest.fixture
def suit() -> type[Suit]:
    return Suit


@pytest.fixture
def http_status() -> type[HttpStatus]:
    return HttpStatus


@pytest.fixture(params=ALL_SAMPLES, ids=lambda cls: cls.__name__)
def sample_enumeration(request: pytest.FixtureRequest) -> type:
    """Each sample enumeration in turn."""
    return request.param


@pytest.fixture
def cache() -> MemberCache:
    """A fresh, empty member cache."""
    return MemberCache()


@pytest.fixture
def fresh_registry() -> EnumerationRegistry:
    """A fresh, empty registry."""
    return EnumerationRegistry()
