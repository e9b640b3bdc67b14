"""DecodeOutcome — the result of one typed decode attempt."""

from __future__ import annotations

from dataclasses import dataclass
from typing import Any, Generic, TypeVar, Union

T = TypeVar("T")


@dataclass(frozen=True)
class Decoded(Generic[T]):
    """The data artifact matched the current schema.

    ``value`` is ``None`` when there was no data artifact at all.
    """

    value: T | None


@dataclass(frozen=True)
class SchemaMismatch:
    """The bytes are valid JSON but do not fit the current type.

    Attributes:
        raw:    Schema-agnostic tree decoded from the bytes.
        detail: Validation message, kept for logging.
    """

    raw: Any
    detail: str = ""


@dataclass(frozen=True)
class Fatal:
    """Nothing can be decoded; ``error`` is raised to the caller."""

    error: Exception


DecodeOutcome = Union[Decoded[T], SchemaMismatch, Fatal]
