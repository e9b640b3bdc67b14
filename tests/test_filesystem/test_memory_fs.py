"""Tests for InMemoryFileSystem."""

from pathlib import Path

import pytest

from versioned_store.filesystem import InMemoryFileSystem

PATH = Path("/a/b.json")


@pytest.fixture
def fs():
    return InMemoryFileSystem()


def test_read_nonexistent(fs):
    with pytest.raises(FileNotFoundError):
        fs.read_bytes(PATH)


def test_write_and_read(fs):
    fs.write_bytes(PATH, b"{}")
    assert fs.read_bytes(PATH) == b"{}"


def test_overwrite_truncates(fs):
    fs.write_bytes(PATH, b"a long payload")
    fs.write_bytes(PATH, b"x")
    assert fs.read_bytes(PATH) == b"x"


def test_exists(fs):
    assert not fs.exists(PATH)
    fs.write_bytes(PATH, b"")
    assert fs.exists(PATH)


def test_delete(fs):
    fs.write_bytes(PATH, b"1")
    fs.delete(PATH)
    assert not fs.exists(PATH)


def test_delete_nonexistent(fs):
    fs.delete(PATH)  # should not raise


def test_str_and_path_keys_match(fs):
    fs.write_bytes("/a/b.json", b"1")  # type: ignore[arg-type]
    assert fs.read_bytes(PATH) == b"1"
    assert fs.paths() == [PATH]
