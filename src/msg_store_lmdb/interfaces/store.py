"""Protocol definition for the message store backend."""

from __future__ import annotations

from typing import Protocol, TypeVar

from ..core.types import ByteSize, MessageId

T = TypeVar("T")


class MessageDb(Protocol[T]):
    """Storage contract consumed by the owning message store."""

    def add(self, msg_id: MessageId, payload: T, byte_size: ByteSize) -> None:
        """Persist payload and its metadata under msg_id, overwriting any previous entry."""
        ...

    def get(self, msg_id: MessageId) -> T:
        """Return the payload for msg_id; raise NotFoundError if absent."""
        ...

    def delete(self, msg_id: MessageId) -> None:
        """Remove the message; deleting an absent id is a no-op."""
        ...

    def fetch_all_metadata(self) -> list[tuple[MessageId, ByteSize]]:
        """Return (id, byte_size) for every stored message in ascending id order."""
        ...
