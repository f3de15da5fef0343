from __future__ import annotations

from pathlib import Path

import pytest

from cartographer.storage import (
    DirectoryMapStore,
    InternalFailure,
    NotFoundFailure,
    StoreConstructionError,
    create_directory_map_store,
)
from cartographer.utils.functools.models import is_err, is_ok


@pytest.fixture
async def store(tmp_path: Path) -> DirectoryMapStore:
    return await create_directory_map_store(tmp_path / "store")


async def test_creates_missing_directory_recursively(tmp_path: Path) -> None:
    root = tmp_path / "deep" / "nested" / "store"

    store = await create_directory_map_store(root)

    assert root.is_dir()
    assert store.root == root


async def test_accepts_existing_directory(tmp_path: Path) -> None:
    root = tmp_path / "store"
    root.mkdir()
    (root / "kept").write_text("x", encoding="utf-8")

    store = await create_directory_map_store(root)

    assert (await store.read("kept")).unwrap() == "x"


async def test_rejects_path_that_is_a_file(tmp_path: Path) -> None:
    path = tmp_path / "not-a-dir"
    path.write_text("", encoding="utf-8")

    with pytest.raises(StoreConstructionError):
        await create_directory_map_store(path)


async def test_write_creates_one_file_per_key(store: DirectoryMapStore) -> None:
    assert is_ok(await store.write("a.json", '{"id": 1}'))

    assert (store.root / "a.json").read_text(encoding="utf-8") == '{"id": 1}'
    assert (await store.read("a.json")).unwrap() == '{"id": 1}'


async def test_write_truncates_existing_file(store: DirectoryMapStore) -> None:
    await store.write("a", "a much longer original value")
    await store.write("a", "short")

    assert (await store.read("a")).unwrap() == "short"


async def test_write_round_trips_unicode(store: DirectoryMapStore) -> None:
    await store.write("greeting", "héllo wörld ✓")

    assert (await store.read("greeting")).unwrap() == "héllo wörld ✓"


async def test_list_returns_raw_filenames(store: DirectoryMapStore) -> None:
    await store.write("one.json", "1")
    await store.write("two.json", "2")

    assert sorted((await store.list()).unwrap()) == ["one.json", "two.json"]


async def test_list_skips_subdirectories(store: DirectoryMapStore) -> None:
    await store.write("one", "1")
    (store.root / "nested").mkdir()

    assert (await store.list()).unwrap() == ["one"]


async def test_read_missing_key_is_not_found(store: DirectoryMapStore) -> None:
    result = await store.read("missing")

    assert is_err(result)
    assert isinstance(result.unwrap_err(), NotFoundFailure)


async def test_read_undecodable_file_is_internal_failure(store: DirectoryMapStore) -> None:
    (store.root / "binary").write_bytes(b"\xff\xfe\x00\x81")

    result = await store.read("binary")

    failure = result.unwrap_err()
    assert isinstance(failure, InternalFailure)
    assert isinstance(failure.error, UnicodeDecodeError)


async def test_read_directory_is_internal_failure(store: DirectoryMapStore) -> None:
    (store.root / "nested").mkdir()

    result = await store.read("nested")

    assert isinstance(result.unwrap_err(), InternalFailure)


async def test_destroy_removes_only_the_key_file(store: DirectoryMapStore) -> None:
    await store.write("remove-me", "1")
    await store.write("keep-me", "2")

    assert is_ok(await store.destroy("remove-me"))

    assert store.root.is_dir()
    assert not (store.root / "remove-me").exists()
    assert (store.root / "keep-me").read_text(encoding="utf-8") == "2"
    assert isinstance((await store.read("remove-me")).unwrap_err(), NotFoundFailure)


async def test_destroy_missing_key_is_not_found_and_touches_nothing(store: DirectoryMapStore) -> None:
    await store.write("other", "1")

    result = await store.destroy("missing")

    assert isinstance(result.unwrap_err(), NotFoundFailure)
    assert store.root.is_dir()
    assert sorted(p.name for p in store.root.iterdir()) == ["other"]


@pytest.mark.parametrize("key", ["", ".", "..", "../escape", "nested/key", "/etc/passwd"])
async def test_keys_outside_root_are_rejected(store: DirectoryMapStore, tmp_path: Path, key: str) -> None:
    write_result = await store.write(key, "x")
    destroy_result = await store.destroy(key)

    assert isinstance(write_result.unwrap_err(), InternalFailure)
    assert isinstance(destroy_result.unwrap_err(), InternalFailure)
    assert store.root.is_dir()
    assert not (tmp_path / "escape").exists()


async def test_list_fails_when_root_disappears(tmp_path: Path) -> None:
    root = tmp_path / "store"
    store = await create_directory_map_store(root)
    root.rmdir()

    result = await store.list()

    assert isinstance(result.unwrap_err(), InternalFailure)
