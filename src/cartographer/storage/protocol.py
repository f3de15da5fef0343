"""MapStore and Model protocols."""

from __future__ import annotations

from typing import Protocol

from cartographer.common import JsonValue
from cartographer.utils.functools.models import Result

from .models import CastFailure, InternalFailure, NotFoundFailure


class MapStore[K, V](Protocol):
    """Uniform asynchronous key-value contract shared by every backend and combinator.

    Any object exposing these four coroutines is a MapStore. Failures are
    returned, never raised.
    """

    async def list(self) -> Result[list[K], InternalFailure]:
        """Every currently stored key, in no particular order."""
        ...

    async def read(self, key: K) -> Result[V, NotFoundFailure | InternalFailure]: ...

    async def write(self, key: K, value: V) -> Result[None, InternalFailure]:
        """Create or overwrite the entry."""
        ...

    async def destroy(self, key: K) -> Result[None, NotFoundFailure | InternalFailure]: ...


class Model[V](Protocol):
    """Validation and serialisation capability for a key or value type."""

    def cast(self, raw: object) -> Result[V, CastFailure]:
        """Validate raw (JSON-decoded) data and construct a `V`."""
        ...

    def dump(self, value: V) -> JsonValue:
        """Turn a `V` back into JSON-compatible data."""
        ...
