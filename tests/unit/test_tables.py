"""Unit tests for the LMDB and in-memory table backends."""

import shutil
import tempfile
from pathlib import Path

import pytest

from msg_store_lmdb.components.lmdb_table import LmdbTable
from msg_store_lmdb.components.memory_table import MemoryTable
from msg_store_lmdb.core.errors import EngineError, OpenError


@pytest.fixture
def temp_dir():
    """Create temporary directory for tests."""
    tmpdir = tempfile.mkdtemp()
    yield tmpdir
    shutil.rmtree(tmpdir, ignore_errors=True)


@pytest.fixture(params=["lmdb", "memory"])
def table(request, temp_dir):
    """Create an empty table for each backend."""
    if request.param == "lmdb":
        tbl = LmdbTable(Path(temp_dir) / "table", map_size=16 * 1024 * 1024, durable=False)
    else:
        tbl = MemoryTable()
    yield tbl
    tbl.close()


def test_table_put_get(table):
    """Test basic put and get operations."""
    table.put(b"key1", b"value1")
    table.put(b"key2", b"")

    assert table.get(b"key1") == b"value1"
    assert table.get(b"key2") == b""
    assert table.get(b"missing") is None


def test_table_put_overwrites(table):
    """Test that put replaces an existing value."""
    table.put(b"key1", b"value1")
    table.put(b"key1", b"value2")

    assert table.get(b"key1") == b"value2"
    assert table.count() == 1


def test_table_delete(table):
    """Test delete reports whether the key existed."""
    table.put(b"key1", b"value1")

    assert table.delete(b"key1") is True
    assert table.get(b"key1") is None
    assert table.delete(b"key1") is False


def test_table_items_in_byte_order(table):
    """Test items() yields entries sorted by unsigned byte order."""
    keys = [b"\xff", b"\x00\x01", b"\x80", b"\x00", b"\x7f\xff"]
    for key in keys:
        table.put(key, key * 2)

    items = list(table.items())

    assert [k for k, _ in items] == sorted(keys)
    assert all(v == k * 2 for k, v in items)
    assert table.count() == len(keys)


def test_table_empty_items(table):
    """Test iterating an empty table."""
    assert list(table.items()) == []
    assert table.count() == 0


def test_table_closed_operations(table):
    """Test operations on a closed table raise EngineError."""
    table.close()

    with pytest.raises(EngineError, match="closed"):
        table.put(b"key1", b"value1")
    with pytest.raises(EngineError, match="closed"):
        table.get(b"key1")
    with pytest.raises(EngineError, match="closed"):
        list(table.items())


def test_table_close_is_idempotent(table):
    """Test closing twice is harmless."""
    table.close()
    table.close()


def test_lmdb_table_durable_across_reopen(temp_dir):
    """Test data survives closing and reopening the environment."""
    path = Path(temp_dir) / "table"

    with LmdbTable(path) as table:
        table.put(b"key1", b"value1")
        table.put(b"key2", b"value2")

    with LmdbTable(path) as table:
        assert table.get(b"key1") == b"value1"
        assert list(table.items()) == [(b"key1", b"value1"), (b"key2", b"value2")]


def test_lmdb_table_creates_directory(temp_dir):
    """Test the environment directory is created if missing."""
    path = Path(temp_dir) / "nested" / "table"

    with LmdbTable(path):
        pass

    assert path.is_dir()


def test_lmdb_table_open_failure(temp_dir):
    """Test opening on top of a regular file raises OpenError."""
    path = Path(temp_dir) / "not_a_dir"
    path.write_bytes(b"occupied")

    with pytest.raises(OpenError) as exc_info:
        LmdbTable(path)
    assert exc_info.value.path == str(path)


def test_lmdb_table_grows_when_full(temp_dir):
    """Test the map is enlarged instead of failing when it fills up."""
    table = LmdbTable(Path(temp_dir) / "table", map_size=64 * 1024, durable=False)
    initial = table.map_size

    for i in range(200):
        table.put(f"key{i:04d}".encode(), b"v" * 1024)

    assert table.map_size > initial
    assert table.count() == 200
    assert table.get(b"key0199") == b"v" * 1024
    table.close()


def test_lmdb_table_full_without_growth(temp_dir):
    """Test MapFullError surfaces as EngineError when growth is disabled."""
    table = LmdbTable(Path(temp_dir) / "table", map_size=64 * 1024, durable=False, grow_on_full=False)

    with pytest.raises(EngineError, match="Put failed"):
        for i in range(200):
            table.put(f"key{i:04d}".encode(), b"v" * 1024)
    table.close()
