"""Copy strategy registry and decorator.

A strategy takes over copying for a type (and its subclasses) instead of the
generic introspection pipeline. It receives the value and a copy function for
nested values.

Usage:
    @copy_strategy(Connection)
    def copy_connection(conn: Connection, copy) -> Connection:
        return Connection(conn.url, options=copy(conn.options))
"""

from __future__ import annotations

from collections.abc import Callable
from typing import Any

type CopyFunction = Callable[[Any], Any]
type Strategy = Callable[[Any, CopyFunction], Any]


class StrategyRegistry:
    """Process-local dispatch table mapping types to copy strategies.

    Lookup walks the value type's MRO, so a strategy registered for a base
    class also covers its subclasses unless they register their own.
    """

    def __init__(self) -> None:
        """Initialize empty strategy registry."""
        self._by_type: dict[type, Strategy] = {}

    def register(self, cls: type, strategy: Strategy) -> Strategy:
        """Register a copy strategy for a type.

        Args:
            cls: Type the strategy applies to.
            strategy: Callable (value, copy) -> duplicate.

        Returns:
            The strategy, unchanged.

        Raises:
            TypeError: If cls is not a type.
            RuntimeError: If cls already has a different strategy.
        """
        if not isinstance(cls, type):
            raise TypeError(f"Copy strategies are registered per type, got {cls!r}")
        existing = self._by_type.get(cls)
        if existing is not None and existing is not strategy:
            raise RuntimeError(f"Copy strategy already registered for {cls.__qualname__}")
        self._by_type[cls] = strategy
        return strategy

    def unregister(self, cls: type) -> None:
        """Remove the strategy registered for cls, if any."""
        self._by_type.pop(cls, None)

    def lookup(self, cls: type) -> Strategy | None:
        """Find the strategy for cls or its nearest registered ancestor.

        Args:
            cls: Type of the value being copied.

        Returns:
            The strategy if one applies, None otherwise.
        """
        if not self._by_type:
            return None
        for base in cls.__mro__:
            strategy = self._by_type.get(base)
            if strategy is not None:
                return strategy
        return None

    def is_registered(self, cls: type) -> bool:
        """Check if cls itself has a strategy (ancestors not considered)."""
        return cls in self._by_type

    def __len__(self) -> int:
        return len(self._by_type)


# Module-level registry instance
_strategies = StrategyRegistry()


def get_strategies() -> StrategyRegistry:
    """Access the global strategy registry.

    Returns:
        The process-local StrategyRegistry instance.
    """
    return _strategies


def copy_strategy(cls: type) -> Callable[[Strategy], Strategy]:
    """Register the decorated function as the global copy strategy for cls.

    Args:
        cls: Type the strategy applies to.

    Returns:
        Decorator registering the function and returning it unchanged.
    """

    def decorator(strategy: Strategy) -> Strategy:
        return _strategies.register(cls, strategy)

    return decorator
