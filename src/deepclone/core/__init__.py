"""Core functionalities: stateless classification, reflection and container primitives.

Architecture Note:
    core/ contains pure, stateless building blocks with no configuration.
    The engine/ package composes them into the recursive copy and owns the
    only per-call state (the optional cycle memo).
"""

from deepclone.core.category import (
    DEFAULT_REGISTRY,
    Category,
    Duplicable,
    EmptyBuildable,
    ImmutableRegistry,
    classify,
)
from deepclone.core.containers import CollectionKind, MapKind, rebuild_array, reconstruct
from deepclone.core.errors import (
    ConstructionError,
    CopyMachineryError,
    DeepCopyError,
    ReflectionAccessError,
)
from deepclone.core.reflection import (
    FieldDescriptor,
    FieldStorage,
    build_instance,
    default_for,
    instance_fields,
    walk_fields,
)
from deepclone.core.types import Copy

__all__ = [
    # Types
    "Copy",
    # Errors
    "CopyMachineryError",
    "ConstructionError",
    "ReflectionAccessError",
    "DeepCopyError",
    # Category
    "Category",
    "classify",
    "ImmutableRegistry",
    "DEFAULT_REGISTRY",
    "Duplicable",
    "EmptyBuildable",
    # Containers
    "CollectionKind",
    "MapKind",
    "reconstruct",
    "rebuild_array",
    # Reflection
    "FieldDescriptor",
    "FieldStorage",
    "walk_fields",
    "instance_fields",
    "build_instance",
    "default_for",
]
