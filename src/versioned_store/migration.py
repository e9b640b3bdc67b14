"""MigrationRunner — recovers a usable value when the stored shape is stale."""

from __future__ import annotations

import logging
from collections.abc import Callable
from pathlib import Path
from typing import Any, Generic, TypeVar

from versioned_store.codec import JsonCodec
from versioned_store.filesystem.base import FileSystem
from versioned_store.outcome import SchemaMismatch

T = TypeVar("T")

logger = logging.getLogger(__name__)

# Version assumed for stores written before version tags existed.
BASELINE_VERSION = 0

Migration = Callable[[int | None, Any], Any]
"""``(previous_version, raw_value) -> value | None``."""


class MigrationRunner(Generic[T]):
    """Hands the stored raw value and its version to a migration.

    The version artifact is read first, then the data artifact is read
    again as a schema-agnostic tree.  The runner never writes.  Whatever
    the migration returns is the result of this one read; making it
    durable takes an explicit ``set``/``update``.  Exceptions raised by the
    migration propagate unchanged.

    Parameters:
        data_path:        Location of the data artifact.
        version_path:     Location of the version artifact.
        migration:        Caller-supplied ``(version, raw) -> value | None``.
        codec:            Codec used to read both artifacts.
        file_system:      Backend the artifacts live on.
        baseline_version: Previous version reported when no version
                          artifact exists.
    """

    def __init__(
        self,
        *,
        data_path: Path,
        version_path: Path,
        migration: Migration,
        codec: JsonCodec[T],
        file_system: FileSystem,
        baseline_version: int = BASELINE_VERSION,
    ) -> None:
        self.data_path = data_path
        self.version_path = version_path
        self.migration = migration
        self.baseline_version = baseline_version
        self._codec = codec
        self._fs = file_system

    def previous_version(self) -> int:
        """Return the stored version tag, or the baseline if there is none."""
        if not self._fs.exists(self.version_path):
            return self.baseline_version
        data = self._fs.read_bytes(self.version_path)
        return self._codec.decode_version(data, source=self.version_path)

    def raw_value(self) -> Any:
        """Return the data artifact as a JSON tree, or ``None`` if it is gone.

        Raises:
            CorruptDataError: If the data artifact is not valid JSON.
        """
        try:
            data = self._fs.read_bytes(self.data_path)
        except FileNotFoundError:
            return None
        return self._codec.decode_raw(data, source=self.data_path)

    def run(self, mismatch: SchemaMismatch) -> T | None:
        previous = self.previous_version()
        raw = self.raw_value()
        logger.info(
            "Migrating %s from version %s (%s)",
            self.data_path,
            previous,
            mismatch.detail.splitlines()[0] if mismatch.detail else "schema mismatch",
        )
        result: T | None = self.migration(previous, raw)
        return result
