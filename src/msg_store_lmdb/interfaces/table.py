"""Protocol definition for an ordered key-value table."""

from __future__ import annotations

from collections.abc import Iterator
from typing import Protocol

from ..core.types import Key, Value


class Table(Protocol):
    """Ordered on-disk or in-memory mapping from binary keys to values."""

    def put(self, key: Key, value: Value) -> None:
        """Insert or overwrite a single key.

        Invariants:
            - Durable on return when the backend is configured as durable
        """
        ...

    def get(self, key: Key) -> Value | None:
        """Return the value for key or None if absent."""
        ...

    def delete(self, key: Key) -> bool:
        """Remove key; return False if it was absent."""
        ...

    def items(self) -> Iterator[tuple[Key, Value]]:
        """Iterate all entries in byte-lexicographic key order."""
        ...

    def count(self) -> int:
        """Return number of entries."""
        ...

    def close(self) -> None:
        """Release handles held by the table."""
        ...
