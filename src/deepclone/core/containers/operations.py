"""Pure functions that rebuild empty containers for the copy engine.

Usage:
    target = reconstruct(source, Category.COLLECTION)
    add = adder(target)
    for item in source:
        add(item)
"""

from __future__ import annotations

import array
import logging
from collections import OrderedDict, defaultdict, deque
from collections.abc import Callable, Iterable, MutableMapping, Sequence, Set
from typing import Any

from deepclone.core.category import Category, has_capability
from deepclone.core.category.core import QUEUE_CAPABILITY
from deepclone.core.containers.models import CollectionKind, MapKind
from deepclone.core.errors import ConstructionError

logger = logging.getLogger(__name__)

SORTED_MAP_CAPABILITY = ("irange", "peekitem")

_COLLECTION_FACTORIES: dict[CollectionKind, Callable[[], Any]] = {
    CollectionKind.LIST: list,
    CollectionKind.SET: set,
    CollectionKind.QUEUE: deque,
}


def collection_kind(source: Any) -> CollectionKind:
    """Determine which canonical collection receives the copied elements.

    Queue capability is checked first: deque is also registered as a
    MutableSequence, and would otherwise degrade to a list.

    Args:
        source: A value classified as Category.COLLECTION.

    Returns:
        The matching CollectionKind.

    Raises:
        TypeError: If source has none of the collection capabilities.
    """
    cls = type(source)
    if has_capability(cls, *QUEUE_CAPABILITY):
        return CollectionKind.QUEUE
    if isinstance(source, Sequence):
        return CollectionKind.LIST
    if isinstance(source, Set):
        return CollectionKind.SET
    raise TypeError(f"{cls.__name__} is not list-, set- or queue-like")


def map_kind(source: Any) -> MapKind | None:
    """Determine which canonical mapping receives the copied entries.

    Args:
        source: A value classified as Category.MAP.

    Returns:
        The matching MapKind, or None if the concrete type must be
        instantiated directly.
    """
    cls = type(source)
    if isinstance(source, defaultdict) or (
        isinstance(source, dict) and has_capability(cls, "default_factory")
    ):
        return MapKind.DEFAULTING
    if isinstance(source, OrderedDict):
        return MapKind.INSERTION_ORDERED
    if has_capability(cls, *SORTED_MAP_CAPABILITY):
        return MapKind.SORTED
    if isinstance(source, dict):
        return MapKind.HASHED
    return None


def instantiate(cls: type) -> Any:
    """Create an instance through its zero-argument constructor.

    Args:
        cls: Concrete type to instantiate.

    Returns:
        New instance of cls.

    Raises:
        ConstructionError: If cls cannot be called without arguments.
    """
    try:
        return cls()
    except Exception as e:
        raise ConstructionError(cls, f"no usable zero-argument constructor ({e})") from e


def new_collection(source: Any) -> list[Any] | set[Any] | deque[Any]:
    """Create the canonical empty collection for source's kind."""
    return _COLLECTION_FACTORIES[collection_kind(source)]()


def new_map(source: Any) -> MutableMapping[Any, Any]:
    """Create an empty mapping compatible with source's kind."""
    kind = map_kind(source)
    if kind is MapKind.DEFAULTING:
        return defaultdict(source.default_factory)
    if kind is MapKind.INSERTION_ORDERED:
        return OrderedDict()
    if kind is MapKind.HASHED:
        return {}
    if kind is None:
        logger.debug("Instantiating unrecognized mapping type %s directly", type(source).__name__)
    return instantiate(type(source))


def reconstruct(source: Any, category: Category) -> Any:
    """Produce a fresh, empty container structurally compatible with source.

    Structural category is preserved; the concrete container type is not
    (a UserList comes back as a plain list).

    Args:
        source: Container being copied.
        category: Category.COLLECTION or Category.MAP.

    Returns:
        Empty container ready to receive copied elements.

    Raises:
        ConstructionError: If direct instantiation is required and fails.
        ValueError: If category is not a container category.
    """
    if category is Category.COLLECTION:
        return new_collection(source)
    if category is Category.MAP:
        return new_map(source)
    raise ValueError(f"Cannot reconstruct a container for category {category.name}")


def adder(container: Any) -> Callable[[Any], Any]:
    """Return the bound method that inserts one element into a collection."""
    if isinstance(container, Set):
        return container.add
    return container.append


def rebuild_array(source: Any, items: Iterable[Any]) -> Any:
    """Allocate a new array-shaped value of source's element kind from copied items.

    Args:
        source: Original tuple, frozenset, array.array or bytearray.
        items: Already-copied elements, in source order.

    Returns:
        New value of the same element kind and length.

    Raises:
        ConstructionError: If a tuple or frozenset subclass rejects the items.
    """
    cls = type(source)
    if isinstance(source, array.array):
        return array.array(source.typecode, items)
    if isinstance(source, bytearray):
        return bytearray(items)
    try:
        if isinstance(source, tuple) and has_capability(cls, "_make"):
            return cls._make(items)
        return cls(items)
    except Exception as e:
        raise ConstructionError(cls, f"cannot rebuild from copied items ({e})") from e
