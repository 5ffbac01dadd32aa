"""LMDB-backed ordered table.

Each table is its own LMDB environment so the payload and metadata stores
can be opened, copied or inspected independently.
"""

from __future__ import annotations

import logging
from collections.abc import Iterator
from pathlib import Path

import lmdb

from ..core.errors import EngineError, OpenError
from ..core.types import Key, Value

logger = logging.getLogger(__name__)


class LmdbTable:
    """Single ordered key-value table stored in an LMDB environment.

    Args:
        path: Directory of the LMDB environment (created with parents if missing)
        map_size: Initial maximum size of the memory map in bytes
        durable: Whether commits are synced to disk before returning
        max_readers: Maximum concurrent read transactions
        grow_on_full: Double the map size and retry once on MapFullError

    Invariants:
        - Every put/delete commits its own write transaction
        - items() yields keys in byte-lexicographic order
    """

    def __init__(
        self,
        path: str | Path,
        map_size: int = 1024 * 1024 * 1024,
        durable: bool = True,
        max_readers: int = 126,
        grow_on_full: bool = True,
    ):
        self.path = Path(path)
        self.grow_on_full = grow_on_full
        try:
            self.path.mkdir(parents=True, exist_ok=True)
            self._env: lmdb.Environment | None = lmdb.open(
                str(self.path),
                map_size=map_size,
                subdir=True,
                create=True,
                sync=durable,
                metasync=durable,
                max_readers=max_readers,
                max_dbs=0,
            )
        except (lmdb.Error, OSError) as e:
            raise OpenError(f"Could not open table at {self.path}: {e}", path=str(self.path)) from e
        logger.debug(f"Opened LMDB table {self.path} (map_size={map_size}, durable={durable})")

    @property
    def env(self) -> lmdb.Environment:
        if self._env is None:
            raise EngineError(f"Table {self.path} is closed", path=str(self.path))
        return self._env

    @property
    def map_size(self) -> int:
        """Current maximum size of the memory map."""
        return self.env.info()["map_size"]

    def _grow(self) -> None:
        new_size = self.map_size * 2
        logger.info(f"Table {self.path} is full, growing map to {new_size} bytes")
        self.env.set_mapsize(new_size)

    def put(self, key: Key, value: Value) -> None:
        """Insert or overwrite key in its own committed transaction."""
        env = self.env
        try:
            try:
                with env.begin(write=True) as txn:
                    txn.put(key, value)
            except lmdb.MapFullError:
                if not self.grow_on_full:
                    raise
                self._grow()
                with env.begin(write=True) as txn:
                    txn.put(key, value)
        except lmdb.Error as e:
            raise EngineError(f"Put failed on {self.path}: {e}", key=bytes(key), path=str(self.path)) from e

    def get(self, key: Key) -> Value | None:
        """Return value for key or None if absent."""
        try:
            with self.env.begin() as txn:
                return txn.get(key)
        except lmdb.Error as e:
            raise EngineError(f"Get failed on {self.path}: {e}", key=bytes(key), path=str(self.path)) from e

    def delete(self, key: Key) -> bool:
        """Remove key; return False if it was absent."""
        try:
            with self.env.begin(write=True) as txn:
                return txn.delete(key)
        except lmdb.Error as e:
            raise EngineError(f"Delete failed on {self.path}: {e}", key=bytes(key), path=str(self.path)) from e

    def items(self) -> Iterator[tuple[Key, Value]]:
        """Iterate all entries in key order within one read transaction."""
        env = self.env
        try:
            with env.begin() as txn:
                for key, value in txn.cursor():
                    yield key, value
        except lmdb.Error as e:
            raise EngineError(f"Scan failed on {self.path}: {e}", path=str(self.path)) from e

    def count(self) -> int:
        """Return number of entries from the environment stats."""
        try:
            return self.env.stat()["entries"]
        except lmdb.Error as e:
            raise EngineError(f"Stat failed on {self.path}: {e}", path=str(self.path)) from e

    def sync(self) -> None:
        """Force buffered data to disk (needed only when durable=False)."""
        try:
            self.env.sync(True)
        except lmdb.Error as e:
            raise EngineError(f"Sync failed on {self.path}: {e}", path=str(self.path)) from e

    def close(self) -> None:
        """Close the LMDB environment; safe to call twice."""
        if self._env is not None:
            self._env.close()
            self._env = None
            logger.debug(f"Closed LMDB table {self.path}")

    def __enter__(self):
        return self

    def __exit__(self, exc_type, exc_val, exc_tb):
        self.close()
        return False
