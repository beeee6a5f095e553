"""Failure taxonomy for deep copying.

Only DeepCopyError escapes the engine. The other kinds describe what went wrong
inside the copy machinery and end up as its cause.
"""

from __future__ import annotations


class CopyMachineryError(Exception):
    """Base class for failures raised while rebuilding a specific type."""

    def __init__(self, target: type, message: str) -> None:
        super().__init__(f"{target.__qualname__}: {message}")
        self.target = target


class ConstructionError(CopyMachineryError):
    """No constructor strategy produced a new instance of the target type."""

    pass


class ReflectionAccessError(CopyMachineryError):
    """A field could not be read or written even through its owning descriptor."""

    pass


class DeepCopyError(Exception):
    """Raised by deep_copy when any part of the object graph could not be copied.

    Attributes:
        source_type: Type of the top-level value passed to deep_copy.
        cause: The underlying exception (also available as __cause__).
    """

    def __init__(self, source_type: type, cause: BaseException) -> None:
        super().__init__(f"Deep copy of {source_type.__qualname__} failed: {cause}")
        self.source_type = source_type
        self.cause = cause
