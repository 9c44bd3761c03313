"""Shared test fixtures.

Lists are cheap to build, so fixtures are function-scoped. The ambient
random source is reseeded before every test so shuffle/random results are
reproducible.
"""

from attrs import define
import pytest

from immutable_list import List, seed_random


@define(frozen=True, slots=True)
class Pet:
    """Small record type for grouping and sorting tests."""

    name: str
    kind: str
    age: int


@pytest.fixture(autouse=True)
def seeded_random():
    """Reseed the ambient random source for deterministic tests."""
    seed_random(1234)
    yield
    seed_random(None)


@pytest.fixture
def numbers():
    """[0, 1, 2, 3, 4, 5]"""
    return List.range(0, 5)


@pytest.fixture
def empty():
    return List.empty()


@pytest.fixture
def pets():
    return List.of(
        Pet(name="Rex", kind="dog", age=5),
        Pet(name="Tom", kind="cat", age=3),
        Pet(name="Fido", kind="dog", age=2),
        Pet(name="Kit", kind="cat", age=7),
    )
