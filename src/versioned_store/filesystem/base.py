"""FileSystem protocol — the raw byte access the codec is built on."""

from __future__ import annotations

from abc import ABC, abstractmethod
from pathlib import Path


class FileSystem(ABC):
    """Abstract base for all file access backends.

    Backends only move bytes.  They know nothing about versions or
    schemas; that lives in :class:`~versioned_store.persistence.VersionedCodec`.
    """

    @abstractmethod
    def read_bytes(self, path: Path) -> bytes:
        """Return the file contents.

        Raises ``FileNotFoundError`` if *path* does not exist.
        """
        ...

    @abstractmethod
    def write_bytes(self, path: Path, data: bytes) -> None:
        """Replace the file contents with *data* (truncate and write)."""
        ...

    @abstractmethod
    def delete(self, path: Path) -> None:
        """Delete the file.  No-op if it does not exist."""
        ...

    @abstractmethod
    def exists(self, path: Path) -> bool:
        """Return ``True`` if *path* exists."""
        ...
