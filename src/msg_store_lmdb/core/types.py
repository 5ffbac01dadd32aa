"""Common type definitions for the message store backend.

Defines the message identity and the per-message metadata record.
"""

from __future__ import annotations

from dataclasses import dataclass

# Core primitive types
Key = bytes
Value = bytes
ByteSize = int

U32_MAX = 2**32 - 1
U64_MAX = 2**64 - 1
U128_MAX = 2**128 - 1


@dataclass(frozen=True, order=True)
class MessageId:
    """Identity of a stored message.

    Ordering is lexicographic over (priority, timestamp, sequence), which is
    the field order of the dataclass.

    Attributes:
        priority: Unsigned 32-bit priority bucket
        timestamp: Unsigned 128-bit monotonic clock value
        sequence: Unsigned 32-bit tie-breaker
    """

    priority: int
    timestamp: int
    sequence: int

    def __str__(self) -> str:
        from .ids import to_display_string

        return to_display_string(self)

    @classmethod
    def from_string(cls, text: str) -> MessageId:
        from .ids import from_display_string

        return from_display_string(text)

    def to_key(self) -> Key:
        from .ids import encode_key

        return encode_key(self)

    @classmethod
    def from_key(cls, data: Key) -> MessageId:
        from .ids import decode_key

        return decode_key(data)


@dataclass(frozen=True)
class MetadataRecord:
    """Small fixed-size record kept for every live message."""

    byte_size: ByteSize
    priority: int
