"""Container functionality: kinds and reconstruction of empty containers."""

from deepclone.core.containers.models import CollectionKind, MapKind
from deepclone.core.containers.operations import (
    adder,
    collection_kind,
    instantiate,
    map_kind,
    rebuild_array,
    reconstruct,
)

__all__ = [
    # Models
    "CollectionKind",
    "MapKind",
    # Operations
    "reconstruct",
    "rebuild_array",
    "collection_kind",
    "map_kind",
    "instantiate",
    "adder",
]
