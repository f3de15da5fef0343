"""In-memory MapStore implementation."""

from __future__ import annotations

from cartographer.common import create_logger
from cartographer.utils.functools.models import Result, fail, succeed

from .models import InternalFailure, NotFoundFailure, not_found

logger = create_logger("storage.memory")


class MemoryMapStore[K, V]:
    """Dict-backed implementation of the MapStore protocol.

    Entries live as long as the instance does.
    """

    def __init__(self) -> None:
        self._entries: dict[K, V] = {}

    async def list(self) -> Result[list[K], InternalFailure]:
        return succeed(list(self._entries))

    async def read(self, key: K) -> Result[V, NotFoundFailure | InternalFailure]:
        if key not in self._entries:
            return fail(not_found(str(key)))
        return succeed(self._entries[key])

    async def write(self, key: K, value: V) -> Result[None, InternalFailure]:
        self._entries[key] = value
        return succeed()

    async def destroy(self, key: K) -> Result[None, NotFoundFailure | InternalFailure]:
        if key not in self._entries:
            return fail(not_found(str(key)))
        del self._entries[key]
        return succeed()


def create_memory_map_store[K, V]() -> MemoryMapStore[K, V]:
    logger.debug("Memory store created")
    return MemoryMapStore()
