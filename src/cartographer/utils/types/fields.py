"""Reusable Pydantic field annotations."""

from __future__ import annotations

from typing import Annotated

from pydantic import Field, StrictStr

type JsonValue = dict[str, object] | list[object] | str | int | float | bool | None

NonEmptyString = Annotated[StrictStr, Field(min_length=1, frozen=True)]

# A storage key segment: no path separators, no leading dot
KeySegment = Annotated[
    StrictStr,
    Field(
        min_length=1,
        pattern=r"^[^./\\][^/\\]*$",
        frozen=True,
        description="Storage key or namespace segment",
    ),
]

__all__ = [
    "JsonValue",
    "KeySegment",
    "NonEmptyString",
]
