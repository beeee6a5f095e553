"""Reflection models: field descriptors with access that bypasses attribute hooks.

Reads and writes go straight to storage: the owning class's slot member for
slot fields, the instance __dict__ for everything else. __setattr__ overrides
and frozen dataclass guards are not involved.
"""

from __future__ import annotations

from dataclasses import dataclass
from enum import Enum, auto
from typing import Any

from deepclone.core.errors import ReflectionAccessError


class FieldStorage(Enum):
    """Where a field's value lives on an instance."""

    SLOT = auto()  # Member descriptor declared in owner.__slots__
    DICT = auto()  # Entry in the instance __dict__


def instance_namespace(obj: Any) -> dict[str, Any] | None:
    """Return the instance __dict__, or None for fully slotted objects."""
    try:
        return object.__getattribute__(obj, "__dict__")
    except AttributeError:
        return None


@dataclass(frozen=True, slots=True)
class FieldDescriptor:
    """One storage field of a composite type.

    Attributes:
        owner: Class in the MRO that declares the field.
        name: Storage name (mangled for private slots).
        declared_type: Annotation, or Any when the field is undeclared.
        storage: Where the value lives on an instance.
    """

    owner: type
    name: str
    declared_type: Any = Any
    storage: FieldStorage = FieldStorage.DICT

    def _member(self) -> Any:
        return self.owner.__dict__[self.name]

    def is_set(self, obj: Any) -> bool:
        """Check if the field currently holds a value on obj."""
        if self.storage is FieldStorage.SLOT:
            try:
                self._member().__get__(obj, self.owner)
            except AttributeError:
                return False
            return True
        namespace = instance_namespace(obj)
        return namespace is not None and self.name in namespace

    def read(self, obj: Any) -> Any:
        """Read the field's value from obj.

        Raises:
            ReflectionAccessError: If the field is unset or cannot be read.
        """
        try:
            if self.storage is FieldStorage.SLOT:
                return self._member().__get__(obj, self.owner)
            namespace = instance_namespace(obj)
            if namespace is None:
                raise AttributeError(f"{type(obj).__name__} instance has no __dict__")
            return namespace[self.name]
        except (AttributeError, KeyError) as e:
            raise ReflectionAccessError(self.owner, f"cannot read field {self.name!r} ({e})") from e

    def write(self, obj: Any, value: Any) -> None:
        """Store value into the field on obj.

        Raises:
            ReflectionAccessError: If the field cannot be written.
        """
        try:
            if self.storage is FieldStorage.SLOT:
                self._member().__set__(obj, value)
                return
            namespace = instance_namespace(obj)
            if namespace is None:
                raise AttributeError(f"{type(obj).__name__} instance has no __dict__")
            namespace[self.name] = value
        except (AttributeError, TypeError) as e:
            raise ReflectionAccessError(
                self.owner, f"cannot write field {self.name!r} ({e})"
            ) from e
