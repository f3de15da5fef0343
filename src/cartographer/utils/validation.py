"""Validation helpers for Cartographer utilities."""

from __future__ import annotations

from pydantic import ValidationError

__all__ = ["format_validation_error"]


def format_validation_error(kind: str, error: ValidationError) -> str:
    """Return a concise validation error message scoped to the provided kind."""
    details = error.errors()
    if not details:
        return f"Invalid {kind}: {error}"
    first = details[0]
    location = ".".join(str(part) for part in first.get("loc") or ())
    message = first.get("msg", str(error))
    if location:
        return f"Invalid {kind} at '{location}': {message}"
    return f"Invalid {kind}: {message}"
