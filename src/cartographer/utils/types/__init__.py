"""Utilities for reusable typed field annotations."""

from .fields import JsonValue, KeySegment, NonEmptyString

__all__ = [
    "JsonValue",
    "KeySegment",
    "NonEmptyString",
]
