"""LocalFileSystem — pathlib-backed access to the real disk."""

from __future__ import annotations

import logging
from pathlib import Path

from versioned_store.exceptions import StorageAccessError
from versioned_store.filesystem.base import FileSystem

logger = logging.getLogger(__name__)


class LocalFileSystem(FileSystem):
    """Reads and writes files on the local disk.

    Every ``OSError`` is re-raised as :class:`StorageAccessError`, except
    ``FileNotFoundError`` from :meth:`read_bytes`, which callers use to
    recognise an empty store.  Parent directories are never created.
    """

    def read_bytes(self, path: Path) -> bytes:
        try:
            data = Path(path).read_bytes()
        except FileNotFoundError:
            raise
        except OSError as exc:
            raise StorageAccessError("read", path, str(exc)) from exc
        logger.debug("Read %d bytes from %s", len(data), path)
        return data

    def write_bytes(self, path: Path, data: bytes) -> None:
        try:
            Path(path).write_bytes(data)
        except OSError as exc:
            raise StorageAccessError("write", path, str(exc)) from exc
        logger.debug("Wrote %d bytes to %s", len(data), path)

    def delete(self, path: Path) -> None:
        try:
            Path(path).unlink(missing_ok=True)
        except OSError as exc:
            raise StorageAccessError("delete", path, str(exc)) from exc
        logger.debug("Deleted %s", path)

    def exists(self, path: Path) -> bool:
        return Path(path).exists()
