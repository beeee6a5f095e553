"""Shared test fixtures."""

import sys

import pytest

# Ensure src is in path
sys.path.insert(0, "src")

from deepclone import CopySettings, DeepCopier, StrategyRegistry


class Person:
    """Plain class without a zero-argument constructor."""

    def __init__(self, name: str, age: int, books: list[str] | None = None):
        self.name = name
        self.age = age
        self.books = books

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, Person):
            return NotImplemented
        return (self.name, self.age, self.books) == (other.name, other.age, other.books)

    def __repr__(self) -> str:
        return f"Person(name={self.name!r}, age={self.age}, books={self.books})"


@pytest.fixture
def person_cls():
    return Person


@pytest.fixture
def andrey():
    """Person with a nested mutable list."""
    return Person("Andrey", 25, ["B1", "B2", "B3"])


@pytest.fixture
def copier():
    """Copier with default settings and an isolated, empty strategy registry."""
    return DeepCopier(CopySettings(), strategies=StrategyRegistry())


@pytest.fixture
def cycle_copier():
    """Copier that tracks visited originals."""
    return DeepCopier(CopySettings(preserve_cycles=True), strategies=StrategyRegistry())
