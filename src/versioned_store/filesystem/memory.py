"""InMemoryFileSystem — dict-backed file access for tests and scratch stores."""

from __future__ import annotations

from pathlib import Path

from versioned_store.filesystem.base import FileSystem


class InMemoryFileSystem(FileSystem):
    """In-memory files keyed by path.  Data is lost on process exit."""

    def __init__(self) -> None:
        self._files: dict[Path, bytes] = {}

    def read_bytes(self, path: Path) -> bytes:
        try:
            return self._files[Path(path)]
        except KeyError:
            raise FileNotFoundError(str(path)) from None

    def write_bytes(self, path: Path, data: bytes) -> None:
        self._files[Path(path)] = bytes(data)

    def delete(self, path: Path) -> None:
        self._files.pop(Path(path), None)

    def exists(self, path: Path) -> bool:
        return Path(path) in self._files

    def paths(self) -> list[Path]:
        """Return every stored path, sorted."""
        return sorted(self._files)
