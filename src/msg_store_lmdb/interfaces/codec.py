"""Protocol definition for payload codecs."""

from __future__ import annotations

from typing import Protocol, TypeVar

from ..core.types import Value

T = TypeVar("T")


class PayloadCodec(Protocol[T]):
    """Converts caller payloads to stored bytes and back."""

    def encode(self, payload: T) -> Value:
        """Serialize payload; raise SerializationError if it cannot be encoded."""
        ...

    def decode(self, data: Value) -> T:
        """Deserialize stored bytes; raise DecodeError if they are malformed."""
        ...
