"""Core type definitions for deepclone."""

type Copy[T] = T
"""Type alias indicating a value is an independent duplicate of its source.

When you see `Copy[T]` in a return type, the returned value shares no mutable
state with the original. Immutable sub-values (numbers, strings, enum members)
are the same objects in both graphs; everything else is a fresh object.
"""
