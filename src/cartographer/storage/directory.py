"""Directory-backed MapStore implementation."""

from __future__ import annotations

import asyncio
from pathlib import Path

from cartographer.common import create_logger
from cartographer.utils.functools.models import Result, fail, succeed

from .errors import StoreConstructionError
from .models import InternalFailure, NotFoundFailure, internal_failure, not_found

logger = create_logger("storage.directory")


class DirectoryMapStore:
    """One UTF-8 file per key inside a single directory.

    Keys are used verbatim as filenames; `list` returns raw filenames and
    leaves any un-transforming to a wrapping combinator.
    """

    def __init__(self, root: Path) -> None:
        self._root = root

    @property
    def root(self) -> Path:
        return self._root

    async def list(self) -> Result[list[str], InternalFailure]:
        try:
            names = await asyncio.to_thread(self._list_files)
        except OSError as exc:
            logger.error("Directory listing failed", root=str(self._root), error=str(exc))
            return fail(internal_failure(f"Failed to list '{self._root}'", exc))
        return succeed(names)

    async def read(self, key: str) -> Result[str, NotFoundFailure | InternalFailure]:
        path_result = self._path_for(key)
        if path_result.is_err():
            return path_result
        path = path_result.ok_value

        try:
            content = await asyncio.to_thread(path.read_text, encoding="utf-8")
        except FileNotFoundError:
            return fail(not_found(key))
        except (OSError, UnicodeDecodeError) as exc:
            logger.error("File read failed", path=str(path), error=str(exc))
            return fail(internal_failure(f"Failed to read '{key}'", exc))
        return succeed(content)

    async def write(self, key: str, value: str) -> Result[None, InternalFailure]:
        path_result = self._path_for(key)
        if path_result.is_err():
            return path_result
        path = path_result.ok_value

        try:
            await asyncio.to_thread(path.write_text, value, encoding="utf-8")
        except OSError as exc:
            logger.error("File write failed", path=str(path), error=str(exc))
            return fail(internal_failure(f"Failed to write '{key}'", exc))
        logger.debug("File written", path=str(path))
        return succeed()

    async def destroy(self, key: str) -> Result[None, NotFoundFailure | InternalFailure]:
        path_result = self._path_for(key)
        if path_result.is_err():
            return path_result
        path = path_result.ok_value

        # Only ever the per-key file, never the root.
        if path == self._root:
            return fail(internal_failure(f"Refusing to remove store root for key '{key}'"))

        try:
            await asyncio.to_thread(path.unlink)
        except FileNotFoundError:
            return fail(not_found(key))
        except OSError as exc:
            logger.error("File removal failed", path=str(path), error=str(exc))
            return fail(internal_failure(f"Failed to destroy '{key}'", exc))
        logger.debug("File removed", path=str(path))
        return succeed()

    def _list_files(self) -> list[str]:
        return [entry.name for entry in self._root.iterdir() if entry.is_file()]

    def _path_for(self, key: str) -> Result[Path, InternalFailure]:
        """Resolve the file for `key`, rejecting keys that escape the root."""
        if not key or key in (".", ".."):
            return fail(internal_failure(f"Invalid key '{key}'"))
        path = self._root / key
        if path.parent != self._root or Path(key).is_absolute():
            return fail(internal_failure(f"Key '{key}' resolves outside '{self._root}'"))
        return succeed(path)


def _ensure_directory(path: Path) -> None:
    if path.exists() and not path.is_dir():
        raise StoreConstructionError(f"Storage path '{path}' exists and is not a directory")
    path.mkdir(parents=True, exist_ok=True)


async def create_directory_map_store(path: Path | str) -> DirectoryMapStore:
    """Create the store, making `path` (and its parents) if it does not exist yet."""
    root = Path(path).expanduser()
    await asyncio.to_thread(_ensure_directory, root)
    logger.debug("Directory store ready", root=str(root))
    return DirectoryMapStore(root)
