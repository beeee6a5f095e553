"""Field walker: storage fields of a composite type across its whole MRO.

Usage:
    for field in instance_fields(obj):
        if field.is_set(obj):
            print(field.owner.__name__, field.name, field.read(obj))
"""

from __future__ import annotations

import inspect
import re
import types
from typing import Any, ClassVar, get_origin

from deepclone.core.reflection.models import FieldDescriptor, FieldStorage, instance_namespace

_IMPLICIT_SLOTS = frozenset({"__dict__", "__weakref__"})
_CLASS_VAR_STRING = re.compile(r"^\s*(typing\.|t\.)?ClassVar\b")


def mangle(cls: type, name: str) -> str:
    """Apply private name mangling the way the compiler does inside cls's body."""
    if name.startswith("__") and not name.endswith("__"):
        stripped = cls.__name__.lstrip("_")
        if stripped:
            return f"_{stripped}{name}"
    return name


def own_slots(cls: type) -> list[str]:
    """Slot storage names declared directly on cls, in declaration order."""
    slots = cls.__dict__.get("__slots__", ())
    if isinstance(slots, str):
        slots = (slots,)
    names = []
    for slot in slots:
        if slot in _IMPLICIT_SLOTS:
            continue
        name = mangle(cls, slot)
        if isinstance(cls.__dict__.get(name), types.MemberDescriptorType):
            names.append(name)
    return names


def own_annotations(cls: type) -> dict[str, Any]:
    """Annotations declared directly on cls (not inherited)."""
    try:
        return dict(inspect.get_annotations(cls))
    except NameError:
        # Lazily evaluated annotations with unresolvable forward references.
        # The values still get copied as undeclared instance attributes.
        return {}


def is_class_var(annotation: Any) -> bool:
    """Check if an annotation declares a class-level variable."""
    if isinstance(annotation, str):
        return bool(_CLASS_VAR_STRING.match(annotation))
    return annotation is ClassVar or get_origin(annotation) is ClassVar


def walk_fields(cls: type) -> list[FieldDescriptor]:
    """Enumerate the declared storage fields of cls and every ancestor.

    Walks from the most-derived class up to, but not including, object. Each
    level contributes its own slots, then its own non-ClassVar annotations.
    Names are not deduplicated across levels: a slot redeclared by a subclass
    is backed by separate storage and yields one descriptor per level.

    Args:
        cls: Composite type to inspect.

    Returns:
        Ordered list of field descriptors.
    """
    descriptors: list[FieldDescriptor] = []
    for level in cls.__mro__:
        if level is object:
            continue
        annotations = own_annotations(level)
        slots = own_slots(level)
        for name in slots:
            descriptors.append(
                FieldDescriptor(level, name, annotations.get(name, Any), FieldStorage.SLOT)
            )
        for name, annotation in annotations.items():
            if name in slots or is_class_var(annotation):
                continue
            descriptors.append(FieldDescriptor(level, name, annotation, FieldStorage.DICT))
    return descriptors


def instance_fields(obj: Any) -> list[FieldDescriptor]:
    """Enumerate every storage field of obj, declared or not.

    Attributes assigned at runtime without a class-level declaration are
    appended after the declared fields and attributed to type(obj).

    Args:
        obj: Composite instance to inspect.

    Returns:
        Ordered list of field descriptors. Some may be unset on obj.
    """
    cls = type(obj)
    descriptors = walk_fields(cls)
    namespace = instance_namespace(obj)
    if not namespace:
        return descriptors
    declared = {d.name for d in descriptors if d.storage is FieldStorage.DICT}
    descriptors.extend(
        FieldDescriptor(cls, name) for name in namespace if name not in declared
    )
    return descriptors
