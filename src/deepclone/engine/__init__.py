"""Deep copy engine and per-type copy strategies."""

from deepclone.engine.copier import DeepCopier, deep_copy, get_default_copier
from deepclone.engine.strategies import (
    CopyFunction,
    Strategy,
    StrategyRegistry,
    copy_strategy,
    get_strategies,
)

__all__ = [
    # Copier
    "DeepCopier",
    "deep_copy",
    "get_default_copier",
    # Strategies
    "StrategyRegistry",
    "Strategy",
    "CopyFunction",
    "copy_strategy",
    "get_strategies",
]
