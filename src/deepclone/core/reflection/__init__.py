"""Reflection functionality: field walking and instance building."""

from deepclone.core.reflection.builder import build_instance, default_for, is_pydantic_model
from deepclone.core.reflection.fields import instance_fields, walk_fields
from deepclone.core.reflection.models import FieldDescriptor, FieldStorage

__all__ = [
    # Models
    "FieldDescriptor",
    "FieldStorage",
    # Fields
    "walk_fields",
    "instance_fields",
    # Builder
    "build_instance",
    "default_for",
    "is_pydantic_model",
]
