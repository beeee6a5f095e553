"""Immutable registry and type classifier.

Usage:
    classify(42)            # Category.IMMUTABLE
    classify([1, 2, 3])     # Category.COLLECTION
    classify({"a": 1})      # Category.MAP

    # Share extra value types instead of copying them:
    registry = DEFAULT_REGISTRY.extended(MyInternedToken)
    classify(token, registry)  # Category.IMMUTABLE
"""

from __future__ import annotations

import array
import datetime
import re
import types
import uuid
from collections.abc import Mapping, Sequence, Set
from decimal import Decimal
from enum import Enum
from fractions import Fraction
from pathlib import PurePath

from deepclone.core.category.models import Category

# Scalar kinds whose values can never change after construction.
SCALAR_TYPES: tuple[type, ...] = (bool, int, float, complex, str, bytes)

# Stdlib value types that are immutable scalars in everything but name.
VALUE_TYPES: tuple[type, ...] = (
    Decimal,
    Fraction,
    datetime.date,
    datetime.time,
    datetime.timedelta,
    datetime.tzinfo,
    uuid.UUID,
    PurePath,
    re.Pattern,
    range,
    slice,
)

# Code rather than data: copying these would change program behaviour.
CODE_TYPES: tuple[type, ...] = (
    type,
    types.FunctionType,
    types.BuiltinFunctionType,
    types.MethodType,
    types.ModuleType,
    types.EllipsisType,
    types.NotImplementedType,
)

# Containers whose shape is fixed at construction.
ARRAY_TYPES: tuple[type, ...] = (tuple, frozenset, array.array, bytearray)

QUEUE_CAPABILITY = ("appendleft", "popleft")


class ImmutableRegistry:
    """Frozen membership test for values that are shared instead of copied.

    Membership is a fixed set of types plus one open-ended rule: every Enum
    member is immutable. The registry is never mutated; use extended() to
    derive a registry that also covers additional types.
    """

    __slots__ = ("_types",)

    def __init__(self, members: tuple[type, ...]) -> None:
        self._types = tuple(dict.fromkeys(members))

    @property
    def types(self) -> tuple[type, ...]:
        """Types covered by this registry, in registration order."""
        return self._types

    def is_immutable(self, value: object) -> bool:
        """Check if value can be shared between original and copy.

        Args:
            value: Any value.

        Returns:
            True if value is an instance of a registered type or an Enum member.
        """
        return isinstance(value, self._types) or isinstance(value, Enum)

    def extended(self, *extra: type) -> ImmutableRegistry:
        """Create a new registry covering these types in addition to the current ones.

        Args:
            *extra: Additional types whose instances are safe to share.

        Returns:
            New registry; self is left unchanged.
        """
        return ImmutableRegistry(self._types + extra)

    def __contains__(self, cls: object) -> bool:
        return isinstance(cls, type) and (issubclass(cls, self._types) or issubclass(cls, Enum))

    def __repr__(self) -> str:
        return f"ImmutableRegistry({len(self._types)} types)"


DEFAULT_REGISTRY = ImmutableRegistry(SCALAR_TYPES + VALUE_TYPES + CODE_TYPES)


def has_capability(cls: type, *names: str) -> bool:
    """Check if a type exposes every named attribute."""
    return all(hasattr(cls, name) for name in names)


def is_array_shaped(value: object) -> bool:
    """Check if value is a fixed-shape container rebuilt from copied items."""
    return isinstance(value, ARRAY_TYPES)


def is_collection(value: object) -> bool:
    """Check if value has list, set or FIFO-queue capability."""
    return (
        isinstance(value, (Sequence, Set))
        or has_capability(type(value), *QUEUE_CAPABILITY)
    )


def classify(value: object, registry: ImmutableRegistry = DEFAULT_REGISTRY) -> Category:
    """Determine the structural category of a value.

    Total and side-effect free. Checks run in a fixed order: strings and bytes
    are matched as immutable before the sequence capability is considered, and
    tuples as arrays before they could count as list-like.

    Args:
        value: Any value, including None.
        registry: Registry deciding which values are shared.

    Returns:
        The value's Category.
    """
    if value is None:
        return Category.NULL
    if registry.is_immutable(value):
        return Category.IMMUTABLE
    if is_array_shaped(value):
        return Category.ARRAY
    if is_collection(value):
        return Category.COLLECTION
    if isinstance(value, Mapping):
        return Category.MAP
    return Category.COMPOSITE
