"""Custom exceptions for the versioned_store package."""

from __future__ import annotations

from pathlib import Path


class VersionedStoreError(Exception):
    """Base exception for all store-related errors."""


class StorageAccessError(VersionedStoreError):
    """Raised when reading, writing or deleting an artifact fails.

    The content of the file plays no part here (permissions, missing
    directory, disk full).  The original ``OSError`` is chained as
    ``__cause__``.
    """

    def __init__(self, operation: str, path: Path | str, detail: str = "") -> None:
        self.operation = operation
        self.path = Path(path)
        msg = f"Storage error during '{operation}' on {self.path}"
        if detail:
            msg += f": {detail}"
        super().__init__(msg)


class CorruptDataError(VersionedStoreError):
    """Raised when a stored artifact is not even structurally valid."""

    def __init__(self, path: Path | str, detail: str = "") -> None:
        self.path = Path(path)
        msg = f"Corrupt data in {self.path}"
        if detail:
            msg += f": {detail}"
        super().__init__(msg)
