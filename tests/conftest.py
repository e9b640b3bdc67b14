"""Shared test fixtures."""

from pathlib import Path

import pytest
from pydantic import BaseModel

from versioned_store import CodecConfig, JsonCodec, VersionedCodec
from versioned_store.filesystem import InMemoryFileSystem

DATA_PATH = Path("/stores/counter.json")


class CounterV1(BaseModel):
    """Shape written by the first release."""

    count: int


class Counter(BaseModel):
    """Current shape: ``label`` became required in version 2."""

    count: int
    label: str


class RecordingFileSystem(InMemoryFileSystem):
    """InMemoryFileSystem that remembers every call in order."""

    def __init__(self) -> None:
        super().__init__()
        self.calls: list[tuple[str, Path]] = []

    def read_bytes(self, path: Path) -> bytes:
        self.calls.append(("read", Path(path)))
        return super().read_bytes(path)

    def write_bytes(self, path: Path, data: bytes) -> None:
        self.calls.append(("write", Path(path)))
        super().write_bytes(path, data)

    def delete(self, path: Path) -> None:
        self.calls.append(("delete", Path(path)))
        super().delete(path)

    def exists(self, path: Path) -> bool:
        self.calls.append(("exists", Path(path)))
        return super().exists(path)


class MigrationSpy:
    """Migration function that records its arguments."""

    def __init__(self, label: str = "migrated") -> None:
        self.label = label
        self.calls: list[tuple[int | None, object]] = []

    def __call__(self, version, raw):
        self.calls.append((version, raw))
        if raw is None:
            return None
        return Counter(count=raw["count"], label=self.label)


def _versioned(fs, value_type, version, migration=None):
    return VersionedCodec(
        data_path=DATA_PATH,
        version=version,
        codec=JsonCodec(value_type, CodecConfig()),
        migration=migration or (lambda _v, _raw: None),
        file_system=fs,
    )


@pytest.fixture
def fs():
    return RecordingFileSystem()


@pytest.fixture
def spy():
    return MigrationSpy()


@pytest.fixture
def v1_codec(fs):
    """Versioned codec as the first release configured it."""
    return _versioned(fs, CounterV1, 1)


@pytest.fixture
def v2_codec(fs, spy):
    """Versioned codec for the current release, migrating through ``spy``."""
    return _versioned(fs, Counter, 2, spy)
