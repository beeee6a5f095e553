"""Instance builder: obtain a new, empty instance of an arbitrary composite type.

The instance only has to exist. The copy engine overwrites every field right
after construction, so constructor side effects and placeholder argument
values are tolerated here and nowhere else.

Strategies, first success wins:
    1. EmptyBuildable: cls.__build_empty__()
    2. Pydantic models: cls.model_construct() (skips validation)
    3. Zero-argument constructor
    4. Constructor probing with a zero-like default for every required parameter
"""

from __future__ import annotations

import inspect
import logging
import typing
import warnings
from collections.abc import Callable
from typing import Any

from deepclone.core.category.models import EmptyBuildable
from deepclone.core.errors import ConstructionError

logger = logging.getLogger(__name__)

# One default per scalar kind, used only to synthesize constructor arguments.
SCALAR_DEFAULTS: dict[type, Callable[[], Any]] = {
    bool: lambda: False,
    int: lambda: 0,
    float: lambda: 0.0,
    complex: lambda: 0j,
    str: lambda: "",
    bytes: lambda: b"",
}
_SCALARS_BY_NAME = {cls.__name__: cls for cls in SCALAR_DEFAULTS}

_VARIADIC = (inspect.Parameter.VAR_POSITIONAL, inspect.Parameter.VAR_KEYWORD)


def default_for(annotation: Any) -> Any:
    """Zero-like placeholder for a parameter of the given declared type.

    Args:
        annotation: Parameter annotation, resolved or as a string.

    Returns:
        0, 0.0, 0j, False, "" or b"" for scalar kinds; None for everything else.
    """
    if isinstance(annotation, str):
        annotation = _SCALARS_BY_NAME.get(annotation.strip())
    if isinstance(annotation, type) and annotation in SCALAR_DEFAULTS:
        return SCALAR_DEFAULTS[annotation]()
    return None


def is_pydantic_model(cls: type) -> bool:
    """Check if class is a Pydantic model without importing pydantic."""
    for base in cls.__mro__:
        if base.__module__.startswith("pydantic") and base.__name__ == "BaseModel":
            return True
    return False


def constructor_signature(cls: type) -> inspect.Signature | None:
    """Signature of cls's constructor, or None if it cannot be introspected."""
    try:
        return inspect.signature(cls)
    except (TypeError, ValueError):
        return None


def required_parameters(signature: inspect.Signature) -> list[inspect.Parameter]:
    """Parameters without defaults, excluding *args and **kwargs."""
    return [
        p
        for p in signature.parameters.values()
        if p.default is inspect.Parameter.empty and p.kind not in _VARIADIC
    ]


def _parameter_hints(cls: type) -> dict[str, Any]:
    try:
        return typing.get_type_hints(cls.__init__)
    except (NameError, TypeError):
        return {}


def synthesize_arguments(
    cls: type, signature: inspect.Signature
) -> tuple[list[Any], dict[str, Any]]:
    """Build placeholder arguments for every required constructor parameter.

    Args:
        cls: Type whose constructor will be called.
        signature: Constructor signature of cls.

    Returns:
        Tuple of (positional args, keyword args).
    """
    hints = _parameter_hints(cls)
    args: list[Any] = []
    kwargs: dict[str, Any] = {}
    for param in required_parameters(signature):
        value = default_for(hints.get(param.name, param.annotation))
        if param.kind is inspect.Parameter.KEYWORD_ONLY:
            kwargs[param.name] = value
        else:
            args.append(value)
    return args, kwargs


def _allocate(cls: type) -> Any:
    try:
        return cls.__new__(cls)
    except Exception as e:
        raise ConstructionError(cls, f"cannot allocate without __init__ ({e})") from e


def build_instance(
    cls: type,
    *,
    allow_bare_allocation: bool = False,
    log_probing: bool = True,
) -> Any:
    """Construct a new, empty instance of a composite type.

    Args:
        cls: Type to instantiate.
        allow_bare_allocation: If True, fall back to cls.__new__(cls) when every
            constructor strategy fails, with a RuntimeWarning.
        log_probing: Emit a DEBUG record when constructor probing is used.

    Returns:
        New instance of cls, fields in an unspecified placeholder state.

    Raises:
        ConstructionError: If no strategy produced an instance.
    """
    if issubclass(cls, EmptyBuildable):
        try:
            return cls.__build_empty__()
        except Exception as e:
            raise ConstructionError(cls, f"__build_empty__ failed ({e})") from e

    if is_pydantic_model(cls):
        return cls.model_construct()  # type: ignore[attr-defined]

    signature = constructor_signature(cls)
    try:
        if signature is None or not required_parameters(signature):
            return cls()
        args, kwargs = synthesize_arguments(cls, signature)
        if log_probing:
            logger.debug(
                "Probing constructor of %s with %d synthesized arguments",
                cls.__qualname__,
                len(args) + len(kwargs),
            )
        return cls(*args, **kwargs)
    except RecursionError:
        raise
    except Exception as e:
        if not allow_bare_allocation:
            raise ConstructionError(cls, f"constructor failed ({e})") from e
        warnings.warn(
            f"Could not construct {cls.__qualname__} ({e}); allocating it without __init__",
            RuntimeWarning,
            stacklevel=2,
        )
        return _allocate(cls)
