"""deepclone: generic deep copies of arbitrary Python object graphs.

Usage:
    from dataclasses import dataclass
    from deepclone import deep_copy

    @dataclass
    class Person:
        name: str
        age: int
        books: list[str]

    andrey = Person("Andrey", 25, ["B1", "B2", "B3"])
    twin = deep_copy(andrey)

    assert twin == andrey
    assert twin is not andrey
    assert twin.books is not andrey.books
    assert twin.name is andrey.name  # immutable values are shared
"""

__version__ = "0.1.0"

# Core primitives
from deepclone.core import (
    DEFAULT_REGISTRY,
    Category,
    CollectionKind,
    ConstructionError,
    Copy,
    DeepCopyError,
    Duplicable,
    EmptyBuildable,
    FieldDescriptor,
    ImmutableRegistry,
    MapKind,
    ReflectionAccessError,
    classify,
    instance_fields,
    walk_fields,
)

# Configuration
from deepclone.config import CopySettings

# Engine
from deepclone.engine import (
    DeepCopier,
    StrategyRegistry,
    copy_strategy,
    deep_copy,
    get_strategies,
)

__all__ = [
    # Version
    "__version__",
    # Core
    "Copy",
    "Category",
    "classify",
    "ImmutableRegistry",
    "DEFAULT_REGISTRY",
    "CollectionKind",
    "MapKind",
    "FieldDescriptor",
    "walk_fields",
    "instance_fields",
    "Duplicable",
    "EmptyBuildable",
    # Errors
    "DeepCopyError",
    "ConstructionError",
    "ReflectionAccessError",
    # Config
    "CopySettings",
    # Engine
    "DeepCopier",
    "deep_copy",
    "copy_strategy",
    "get_strategies",
    "StrategyRegistry",
]
