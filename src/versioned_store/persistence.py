"""VersionedCodec — writes a value with its schema version, reads it back.

Two artifacts per store:

* the data file at ``data_path`` holding the JSON-encoded value;
* the version file at ``data_path + ".version"`` holding a JSON integer.

Writes go version first, then data.  Neither write is atomic, so a crash
between them can leave a new version next to old data.
"""

from __future__ import annotations

import logging
from pathlib import Path
from typing import Generic, TypeVar

from versioned_store.codec import JsonCodec
from versioned_store.exceptions import StorageAccessError
from versioned_store.filesystem.base import FileSystem
from versioned_store.migration import BASELINE_VERSION, Migration, MigrationRunner
from versioned_store.outcome import DecodeOutcome, Decoded, Fatal, SchemaMismatch

T = TypeVar("T")

logger = logging.getLogger(__name__)

VERSION_SUFFIX = ".version"


def version_path_for(data_path: Path | str, suffix: str = VERSION_SUFFIX) -> Path:
    """Return the sibling path that holds the version tag for *data_path*."""
    path = Path(data_path)
    return path.with_name(path.name + suffix)


class VersionedCodec(Generic[T]):
    """Encoder/decoder pair handed to :class:`~versioned_store.store.Store`.

    Parameters:
        data_path:      Path of the data artifact.
        version:        Schema version written alongside every value.
        codec:          Structural codec for the value type.
        migration:      Called on a schema mismatch (see
                        :class:`~versioned_store.migration.MigrationRunner`).
        file_system:    Backend the artifacts live on.
        version_suffix: Suffix appended to ``data_path`` for the version
                        artifact.
    """

    def __init__(
        self,
        *,
        data_path: Path | str,
        version: int,
        codec: JsonCodec[T],
        migration: Migration,
        file_system: FileSystem,
        version_suffix: str = VERSION_SUFFIX,
        baseline_version: int = BASELINE_VERSION,
    ) -> None:
        self._data_path = Path(data_path)
        self._version_path = version_path_for(self._data_path, version_suffix)
        self._version = version
        self._codec = codec
        self._fs = file_system
        self._runner: MigrationRunner[T] = MigrationRunner(
            data_path=self._data_path,
            version_path=self._version_path,
            migration=migration,
            codec=codec,
            file_system=file_system,
            baseline_version=baseline_version,
        )

    @property
    def data_path(self) -> Path:
        return self._data_path

    @property
    def version_path(self) -> Path:
        return self._version_path

    @property
    def version(self) -> int:
        return self._version

    # ── write side ───────────────────────────────────────────

    def encode(self, value: T | None) -> None:
        """Persist *value* with the current version, or clear both artifacts.

        Raises:
            StorageAccessError: If a write or delete fails.
        """
        if value is None:
            self._fs.delete(self._version_path)
            self._fs.delete(self._data_path)
            logger.debug("Cleared %s", self._data_path)
            return

        # A value that fails to serialize writes nothing.
        payload = self._codec.encode(value)
        self._fs.write_bytes(self._version_path, self._codec.encode_version(self._version))
        self._fs.write_bytes(self._data_path, payload)
        logger.debug("Stored %s at version %d", self._data_path, self._version)

    # ── read side ────────────────────────────────────────────

    def attempt(self) -> DecodeOutcome[T]:
        """Try to decode the data artifact as the current type, without migrating."""
        try:
            data = self._fs.read_bytes(self._data_path)
        except FileNotFoundError:
            return Decoded(None)
        except StorageAccessError as exc:
            return Fatal(exc)
        return self._codec.decode(data, source=self._data_path)

    def decode(self) -> T | None:
        """Return the stored value, migrating it when its shape is stale.

        Returns ``None`` when there is no data artifact.

        Raises:
            StorageAccessError: If the data or version artifact cannot be read.
            CorruptDataError:   If an artifact is not valid JSON.
            Exception:          Anything the migration function raises.
        """
        outcome = self.attempt()
        if isinstance(outcome, Decoded):
            return outcome.value
        if isinstance(outcome, SchemaMismatch):
            return self._runner.run(outcome)
        raise outcome.error
