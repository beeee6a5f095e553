"""Category functionality: classifier, immutable registry, copy capabilities."""

from deepclone.core.category.core import (
    DEFAULT_REGISTRY,
    ImmutableRegistry,
    classify,
    has_capability,
    is_array_shaped,
    is_collection,
)
from deepclone.core.category.models import Category, Duplicable, EmptyBuildable

__all__ = [
    # Models
    "Category",
    "Duplicable",
    "EmptyBuildable",
    # Core
    "classify",
    "ImmutableRegistry",
    "DEFAULT_REGISTRY",
    "has_capability",
    "is_array_shaped",
    "is_collection",
]
