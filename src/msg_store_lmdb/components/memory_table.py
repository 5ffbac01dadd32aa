"""In-memory sorted table implementation.

Uses sortedcontainers.SortedDict so iteration follows byte order like the
on-disk backend.
"""

from __future__ import annotations

from typing import TYPE_CHECKING

from sortedcontainers import SortedDict

from ..core.errors import EngineError

if TYPE_CHECKING:
    from collections.abc import Iterator

    from ..core.types import Key, Value


class MemoryTable:
    """Volatile table satisfying the same contract as ``LmdbTable``.

    Invariants:
        - Keys are always maintained in sorted order
        - Values are copied to immutable bytes on put
    """

    def __init__(self, name: str = "memory"):
        self.name = name
        self._data: SortedDict | None = SortedDict()

    def _require_open(self) -> SortedDict:
        if self._data is None:
            raise EngineError(f"Table {self.name} is closed")
        return self._data

    def put(self, key: Key, value: Value) -> None:
        """Insert or overwrite key with value."""
        self._require_open()[bytes(key)] = bytes(value)

    def get(self, key: Key) -> Value | None:
        """Return value for key or None if absent."""
        return self._require_open().get(key)

    def delete(self, key: Key) -> bool:
        """Remove key; return False if it was absent."""
        return self._require_open().pop(key, None) is not None

    def items(self) -> Iterator[tuple[Key, Value]]:
        """Iterate all entries in sorted key order."""
        # Snapshot so callers may mutate the table while iterating
        yield from list(self._require_open().items())

    def count(self) -> int:
        """Return number of entries."""
        return len(self._require_open())

    def close(self) -> None:
        """Drop all entries; later operations raise EngineError."""
        self._data = None
