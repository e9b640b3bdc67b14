"""StoreConfig — everything fixed when a store is built."""

from __future__ import annotations

from collections.abc import Callable
from pathlib import Path
from typing import Any

from pydantic import BaseModel, ConfigDict, Field

from versioned_store.codec import CodecConfig
from versioned_store.persistence import VERSION_SUFFIX, version_path_for


class StoreConfig(BaseModel):
    """Immutable configuration for one versioned store.

    Attributes:
        file_path:      Path of the data artifact.
        version:        Schema version written with every value.
        default:        Returned when nothing is stored.
        enable_cache:   Serve repeated reads from memory.
        codec:          Structural codec options.
        migration:      ``(previous_version, raw) -> value | None``.  When
                        omitted, a mismatched value reads as ``default``.
        version_suffix: Suffix of the sibling version artifact.
    """

    model_config = ConfigDict(frozen=True, arbitrary_types_allowed=True)

    file_path: Path
    version: int = Field(ge=0)
    default: Any = None
    enable_cache: bool = True
    codec: CodecConfig = Field(default_factory=CodecConfig)
    migration: Callable[[int | None, Any], Any] | None = None
    version_suffix: str = Field(default=VERSION_SUFFIX, min_length=1)

    @property
    def version_path(self) -> Path:
        return version_path_for(self.file_path, self.version_suffix)

    def resolve_migration(self) -> Callable[[int | None, Any], Any]:
        """Return the configured migration, or one that yields ``default``."""
        if self.migration is not None:
            return self.migration
        default = self.default
        return lambda _version, _raw: default
