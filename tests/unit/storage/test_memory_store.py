from __future__ import annotations

from cartographer.storage import MemoryMapStore, NotFoundFailure, create_memory_map_store
from cartographer.utils.functools.models import is_err, is_ok


async def test_write_then_list_and_read() -> None:
    store: MemoryMapStore[str, str] = create_memory_map_store()

    assert is_ok(await store.write("a", "hello"))

    assert (await store.list()).unwrap() == ["a"]
    assert (await store.read("a")).unwrap() == "hello"


async def test_read_missing_key_is_not_found() -> None:
    store: MemoryMapStore[str, str] = create_memory_map_store()

    result = await store.read("never-written")

    assert is_err(result)
    failure = result.unwrap_err()
    assert isinstance(failure, NotFoundFailure)
    assert failure.type == "not-found"
    assert failure.key == "never-written"


async def test_write_overwrites_existing_entry() -> None:
    store: MemoryMapStore[str, int] = create_memory_map_store()
    await store.write("counter", 1)
    await store.write("counter", 2)

    assert (await store.read("counter")).unwrap() == 2
    assert (await store.list()).unwrap() == ["counter"]


async def test_destroy_removes_entry() -> None:
    store: MemoryMapStore[str, str] = create_memory_map_store()
    await store.write("a", "hello")

    assert is_ok(await store.destroy("a"))

    assert isinstance((await store.read("a")).unwrap_err(), NotFoundFailure)
    assert (await store.list()).unwrap() == []


async def test_destroy_missing_key_is_not_found() -> None:
    store: MemoryMapStore[str, str] = create_memory_map_store()

    result = await store.destroy("missing")

    assert isinstance(result.unwrap_err(), NotFoundFailure)


async def test_list_returns_snapshot() -> None:
    store: MemoryMapStore[str, str] = create_memory_map_store()
    await store.write("a", "1")
    keys = (await store.list()).unwrap()

    await store.write("b", "2")

    assert keys == ["a"]


async def test_instances_do_not_share_entries() -> None:
    first: MemoryMapStore[str, str] = create_memory_map_store()
    second: MemoryMapStore[str, str] = create_memory_map_store()
    await first.write("a", "1")

    assert (await second.list()).unwrap() == []
