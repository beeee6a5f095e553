"""Deep copy engine: classify, rebuild and recursively duplicate an object graph.

Usage:
    copied = deep_copy(value)

    # Or with explicit configuration:
    copier = DeepCopier(CopySettings(preserve_cycles=True))
    copied = copier.copy(value)
"""

from __future__ import annotations

import logging
from typing import Any

from deepclone.config import CopySettings
from deepclone.core.category import (
    DEFAULT_REGISTRY,
    Category,
    Duplicable,
    ImmutableRegistry,
    classify,
)
from deepclone.core.containers import adder, rebuild_array, reconstruct
from deepclone.core.errors import DeepCopyError
from deepclone.core.reflection import build_instance, instance_fields
from deepclone.core.types import Copy
from deepclone.engine.strategies import StrategyRegistry, get_strategies

logger = logging.getLogger(__name__)


class DeepCopier:
    """Produces independent duplicates of arbitrary values.

    Holds read-only configuration only. Every call to copy() starts a fresh
    traversal, so one copier can serve concurrent callers on disjoint inputs.

    Args:
        settings: Engine settings (default: loaded from DEEPCLONE_* environment).
        registry: Registry of types shared instead of copied.
        strategies: Per-type copy strategies (default: the global registry).
    """

    def __init__(
        self,
        settings: CopySettings | None = None,
        *,
        registry: ImmutableRegistry | None = None,
        strategies: StrategyRegistry | None = None,
    ):
        self._settings = settings or CopySettings()
        self._registry = registry or DEFAULT_REGISTRY
        self._strategies = strategies if strategies is not None else get_strategies()

    @property
    def settings(self) -> CopySettings:
        return self._settings

    @property
    def registry(self) -> ImmutableRegistry:
        return self._registry

    def copy[T](self, value: T) -> Copy[T]:
        """Produce an independent, structurally equal duplicate of value.

        All-or-nothing: either the complete duplicate is returned or a single
        DeepCopyError is raised. No partially built graph escapes.

        Args:
            value: Any value, including None.

        Returns:
            The duplicate. Immutable values (and None) are returned as is.

        Raises:
            DeepCopyError: If any part of the graph could not be copied. The
                original failure is available as `cause` and `__cause__`.
        """
        if value is None:
            return None  # type: ignore[return-value]
        run = _CopyRun(self, track_cycles=self._settings.preserve_cycles)
        try:
            return run.copy(value)
        except Exception as e:
            logger.debug("Deep copy of %s failed: %r", type(value).__qualname__, e)
            raise DeepCopyError(type(value), e) from e


class _CopyRun:
    """State of one top-level copy: the copier and, in cycle mode, the memo."""

    __slots__ = ("_copier", "_memo")

    def __init__(self, copier: DeepCopier, track_cycles: bool) -> None:
        self._copier = copier
        # id(original) -> (original, copy); the original is kept alive so ids stay unique
        self._memo: dict[int, tuple[Any, Any]] | None = {} if track_cycles else None

    def _remember(self, original: Any, duplicate: Any) -> Any:
        if self._memo is not None:
            self._memo[id(original)] = (original, duplicate)
        return duplicate

    def _visited(self, original: Any) -> tuple[Any, Any] | None:
        if self._memo is None:
            return None
        return self._memo.get(id(original))

    def copy(self, value: Any) -> Any:
        """Copy one value, recursing into everything it references."""
        if value is None:
            return None
        copier = self._copier
        category = classify(value, copier._registry)
        if category is Category.IMMUTABLE:
            return value

        entry = self._visited(value)
        if entry is not None:
            return entry[1]

        strategy = copier._strategies.lookup(type(value))
        if strategy is not None:
            return self._remember(value, strategy(value, self.copy))
        if isinstance(value, Duplicable):
            return self._remember(value, value.__duplicate__(self.copy))

        if category is Category.ARRAY:
            return self._copy_array(value)
        if category is Category.COLLECTION:
            return self._copy_collection(value)
        if category is Category.MAP:
            return self._copy_map(value)
        return self._copy_composite(value)

    def _copy_array(self, value: Any) -> Any:
        items = [self.copy(item) for item in value]
        # A cycle through a mutable element may already have produced this copy
        entry = self._visited(value)
        if entry is not None:
            return entry[1]
        return self._remember(value, rebuild_array(value, items))

    def _copy_collection(self, value: Any) -> Any:
        result = self._remember(value, reconstruct(value, Category.COLLECTION))
        add = adder(result)
        for item in value:
            add(self.copy(item))
        return result

    def _copy_map(self, value: Any) -> Any:
        result = self._remember(value, reconstruct(value, Category.MAP))
        for key, item in value.items():
            result[self.copy(key)] = self.copy(item)
        return result

    def _copy_composite(self, value: Any) -> Any:
        settings = self._copier._settings
        result = build_instance(
            type(value),
            allow_bare_allocation=settings.allow_bare_allocation,
            log_probing=settings.log_probing,
        )
        self._remember(value, result)
        for field in instance_fields(value):
            if field.is_set(value):
                field.write(result, self.copy(field.read(value)))
        return result


_default_copier: DeepCopier | None = None


def get_default_copier() -> DeepCopier:
    """Access the process-wide copier used by deep_copy().

    Created on first use with settings loaded from the environment.

    Returns:
        The shared DeepCopier instance.
    """
    global _default_copier
    if _default_copier is None:
        _default_copier = DeepCopier()
    return _default_copier


def deep_copy[T](value: T, *, settings: CopySettings | None = None) -> Copy[T]:
    """Produce an independent duplicate of any value.

    Args:
        value: Any value, including None.
        settings: Optional settings for this call only; defaults to the
            process-wide copier.

    Returns:
        Duplicate sharing only immutable sub-values with the original.

    Raises:
        DeepCopyError: If any part of the graph could not be copied.
    """
    copier = DeepCopier(settings) if settings is not None else get_default_copier()
    return copier.copy(value)
