"""store_of — assembles a versioned store from its configuration."""

from __future__ import annotations

from pathlib import Path
from typing import Any, TypeVar

from versioned_store.codec import CodecConfig, JsonCodec
from versioned_store.config import StoreConfig
from versioned_store.filesystem.base import FileSystem
from versioned_store.filesystem.local import LocalFileSystem
from versioned_store.migration import Migration
from versioned_store.persistence import VersionedCodec
from versioned_store.store import Store

T = TypeVar("T")


def store_of(
    file_path: Path | str,
    version: int,
    value_type: type[T] | Any,
    *,
    default: T | None = None,
    enable_cache: bool = True,
    codec: CodecConfig | None = None,
    migration: Migration | None = None,
    file_system: FileSystem | None = None,
) -> Store[T]:
    """Create a store whose value is written with a schema version.

    An extra file is kept next to *file_path* with a ``.version`` suffix.

    Example:
        store = store_of(
            "settings.json",
            version=2,
            value_type=Settings,
            default=Settings(),
            migration=migrate_settings,
        )
        settings = await store.get()
    """
    config = StoreConfig(
        file_path=Path(file_path),
        version=version,
        default=default,
        enable_cache=enable_cache,
        codec=codec or CodecConfig(),
        migration=migration,
    )
    return store_from_config(config, value_type, file_system=file_system)


def store_from_config(
    config: StoreConfig,
    value_type: type[T] | Any,
    *,
    file_system: FileSystem | None = None,
) -> Store[T]:
    """Create a store from a ready :class:`StoreConfig`.

    *file_system* defaults to :class:`LocalFileSystem`.
    """
    versioned: VersionedCodec[T] = VersionedCodec(
        data_path=config.file_path,
        version=config.version,
        codec=JsonCodec(value_type, config.codec),
        migration=config.resolve_migration(),
        file_system=file_system or LocalFileSystem(),
        version_suffix=config.version_suffix,
    )
    return Store(
        default=config.default,
        enable_cache=config.enable_cache,
        encoder=versioned.encode,
        decoder=versioned.decode,
    )
