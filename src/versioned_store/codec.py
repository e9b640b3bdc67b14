"""JsonCodec — structural JSON codec built on pydantic's ``TypeAdapter``.

The codec turns a typed value into bytes and back.  Decoding never raises
for content problems; it returns a :data:`DecodeOutcome` so that callers can
branch on *what* went wrong:

* invalid JSON                         → :class:`Fatal` (``CorruptDataError``)
* valid JSON, wrong shape for the type → :class:`SchemaMismatch`
* valid JSON, right shape              → :class:`Decoded`
"""

from __future__ import annotations

import dataclasses
import json
from pathlib import Path
from typing import Any, Generic, TypeVar

from pydantic import BaseModel, ConfigDict, Field, TypeAdapter, ValidationError
from typing_extensions import is_typeddict

from versioned_store.exceptions import CorruptDataError
from versioned_store.outcome import DecodeOutcome, Decoded, Fatal, SchemaMismatch

T = TypeVar("T")

_VERSION_ADAPTER: TypeAdapter[int] = TypeAdapter(int)


class CodecConfig(BaseModel):
    """Options for :class:`JsonCodec`.

    Attributes:
        ignore_unknown_fields: Drop keys the value type does not declare
                               instead of treating them as a schema mismatch.
        encode_defaults:       Write fields even when they hold their
                               default value.
        indent:                Pretty-print with this indent; ``None`` writes
                               compact JSON.
    """

    model_config = ConfigDict(frozen=True)

    ignore_unknown_fields: bool = True
    encode_defaults: bool = True
    indent: int | None = Field(default=None, ge=0)


class JsonCodec(Generic[T]):
    """Encodes and decodes values of one type.

    Parameters:
        value_type: Anything ``TypeAdapter`` accepts (``BaseModel``
                    subclasses, dataclasses, ``TypedDict``, builtin
                    containers).
        config:     Codec options.  Defaults to :class:`CodecConfig()`.

    Unknown-field handling applies to the top level of ``BaseModel``,
    dataclass and ``TypedDict`` types; nested records and other types
    follow pydantic's own ``extra`` setting.
    """

    def __init__(self, value_type: Any, config: CodecConfig | None = None) -> None:
        self.value_type = value_type
        self.config = config or CodecConfig()
        self._adapter: TypeAdapter[T] = TypeAdapter(value_type)

    # ── values ───────────────────────────────────────────────

    def encode(self, value: T) -> bytes:
        return self._adapter.dump_json(
            value,
            indent=self.config.indent,
            exclude_defaults=not self.config.encode_defaults,
        )

    def decode(self, data: bytes, *, source: Path | str = "<bytes>") -> DecodeOutcome[T]:
        """Decode *data* as the current type.

        Validation runs in JSON mode, the mirror of :meth:`encode`, so
        strict types read back exactly what they wrote.  ``source`` only
        feeds error messages.
        """
        try:
            raw = self.decode_raw(data, source=source)
        except CorruptDataError as exc:
            return Fatal(exc)

        known = _known_keys(self.value_type)
        if isinstance(raw, dict) and known is not None:
            unknown = sorted(set(raw) - known)
            if unknown and not self.config.ignore_unknown_fields:
                return SchemaMismatch(raw, f"unknown fields: {', '.join(unknown)}")
            if unknown and _forbids_extra(self.value_type):
                data = json.dumps({key: val for key, val in raw.items() if key not in unknown}).encode()

        try:
            return Decoded(self._adapter.validate_json(data))
        except ValidationError as exc:
            return SchemaMismatch(raw, str(exc))

    def decode_raw(self, data: bytes, *, source: Path | str = "<bytes>") -> Any:
        """Return the schema-agnostic JSON tree for *data*.

        Raises:
            CorruptDataError: If *data* is not valid JSON.
        """
        try:
            return json.loads(data)
        except ValueError as exc:
            raise CorruptDataError(source, f"invalid JSON: {exc}") from exc

    # ── version tags ─────────────────────────────────────────

    def encode_version(self, version: int) -> bytes:
        return _VERSION_ADAPTER.dump_json(version)

    def decode_version(self, data: bytes, *, source: Path | str = "<bytes>") -> int:
        raw = self.decode_raw(data, source=source)
        if isinstance(raw, bool) or not isinstance(raw, int) or raw < 0:
            raise CorruptDataError(source, f"expected a non-negative integer version, got {raw!r}")
        return raw


def _is_model(value_type: Any) -> bool:
    try:
        return issubclass(value_type, BaseModel)
    except TypeError:
        # Parametrized generics such as dict[str, int] are not classes.
        return False


def _known_keys(value_type: Any) -> set[str] | None:
    """Return the keys a record type declares, or ``None`` for other types."""
    if _is_model(value_type):
        keys: set[str] = set()
        for name, field in value_type.model_fields.items():
            keys.add(name)
            if field.alias:
                keys.add(field.alias)
            if isinstance(field.validation_alias, str):
                keys.add(field.validation_alias)
        return keys
    if isinstance(value_type, type) and dataclasses.is_dataclass(value_type):
        return {field.name for field in dataclasses.fields(value_type)}
    if is_typeddict(value_type):
        return set(value_type.__required_keys__ | value_type.__optional_keys__)
    return None


def _forbids_extra(value_type: Any) -> bool:
    if _is_model(value_type):
        config = value_type.model_config
    else:
        config = getattr(value_type, "__pydantic_config__", None) or {}
    return config.get("extra") == "forbid"
