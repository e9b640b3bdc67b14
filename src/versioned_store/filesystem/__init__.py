"""File access backends for the persisted artifacts."""

from versioned_store.filesystem.base import FileSystem
from versioned_store.filesystem.local import LocalFileSystem
from versioned_store.filesystem.memory import InMemoryFileSystem

__all__ = ["FileSystem", "InMemoryFileSystem", "LocalFileSystem"]
