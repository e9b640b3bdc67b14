"""versioned_store — durable storage for one typed value.

A value is written as JSON together with a schema version.  When a later
release reads a value whose shape no longer fits, a caller-supplied
migration turns the old raw data into the current type.
"""

from versioned_store.codec import CodecConfig, JsonCodec
from versioned_store.config import StoreConfig
from versioned_store.exceptions import (
    CorruptDataError,
    StorageAccessError,
    VersionedStoreError,
)
from versioned_store.factory import store_from_config, store_of
from versioned_store.migration import BASELINE_VERSION, Migration, MigrationRunner
from versioned_store.outcome import DecodeOutcome, Decoded, Fatal, SchemaMismatch
from versioned_store.persistence import VERSION_SUFFIX, VersionedCodec, version_path_for
from versioned_store.store import Store

__all__ = [
    "BASELINE_VERSION",
    "VERSION_SUFFIX",
    "CodecConfig",
    "CorruptDataError",
    "DecodeOutcome",
    "Decoded",
    "Fatal",
    "JsonCodec",
    "Migration",
    "MigrationRunner",
    "SchemaMismatch",
    "StorageAccessError",
    "Store",
    "StoreConfig",
    "VersionedCodec",
    "VersionedStoreError",
    "store_from_config",
    "store_of",
    "version_path_for",
]
