"""Category models: structural categories and copy capabilities.

Copy capability protocols are optional interfaces that types can implement
to take over part of the copy pipeline instead of relying on introspection.
"""

from __future__ import annotations

from collections.abc import Callable
from enum import Enum, auto
from typing import Any, Protocol, Self, runtime_checkable


class Category(Enum):
    """Structural category of a value. Drives the copy strategy."""

    NULL = auto()  # None
    IMMUTABLE = auto()  # Shared by reference, never duplicated
    ARRAY = auto()  # Fixed-shape container rebuilt from copied items
    COLLECTION = auto()  # List-, set- or queue-like container
    MAP = auto()  # Key-value container
    COMPOSITE = auto()  # Object with named fields


@runtime_checkable
class Duplicable(Protocol):
    """Instance → independent duplicate, using the engine for nested values.

    Example:
        class Node:
            def __duplicate__(self, copy):
                return Node(copy(self.children))
    """

    def __duplicate__(self, copy: Callable[[Any], Any]) -> Self: ...


@runtime_checkable
class EmptyBuildable(Protocol):
    """Type → empty instance whose fields the engine will overwrite."""

    @classmethod
    def __build_empty__(cls) -> Self: ...
