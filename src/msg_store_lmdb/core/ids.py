"""Identifier codec.

Maps a ``MessageId`` to a fixed-width binary key and back, and to and from
its ``priority-timestamp-sequence`` display form.
"""

from __future__ import annotations

import struct

from .errors import DecodeError, ParseError, SerializationError
from .types import U32_MAX, U64_MAX, U128_MAX, Key, MessageId

# Key format (big-endian so byte order equals numeric order):
# [priority (4B)] [timestamp high (8B)] [timestamp low (8B)] [sequence (4B)]
_KEY_STRUCT = struct.Struct(">IQQI")
KEY_SIZE = _KEY_STRUCT.size

_LIMITS = (("priority", U32_MAX), ("timestamp", U128_MAX), ("sequence", U32_MAX))


def _check_fields(msg_id: MessageId) -> None:
    for name, limit in _LIMITS:
        value = getattr(msg_id, name)
        if isinstance(value, bool) or not isinstance(value, int):
            raise SerializationError(f"{name} must be an int, got {type(value).__name__}")
        if not 0 <= value <= limit:
            raise SerializationError(f"{name} out of range: {value}")


def encode_key(msg_id: MessageId) -> Key:
    """Encode a message id as a 24-byte order-preserving key."""
    _check_fields(msg_id)
    return _KEY_STRUCT.pack(
        msg_id.priority,
        msg_id.timestamp >> 64,
        msg_id.timestamp & U64_MAX,
        msg_id.sequence,
    )


def decode_key(data: Key) -> MessageId:
    """Decode a binary key produced by ``encode_key``.

    Raises:
        DecodeError: If the data is not exactly ``KEY_SIZE`` bytes
    """
    if len(data) != KEY_SIZE:
        raise DecodeError(f"Invalid key length: expected {KEY_SIZE}, got {len(data)}", key=bytes(data))
    priority, ts_high, ts_low, sequence = _KEY_STRUCT.unpack(data)
    return MessageId(priority, (ts_high << 64) | ts_low, sequence)


def to_display_string(msg_id: MessageId) -> str:
    """Format a message id as ``priority-timestamp-sequence``."""
    return f"{msg_id.priority}-{msg_id.timestamp}-{msg_id.sequence}"


def from_display_string(text: str) -> MessageId:
    """Parse ``priority-timestamp-sequence`` into a message id.

    Raises:
        ParseError: On wrong field count, non-decimal fields or out-of-range values
    """
    parts = text.split("-")
    if len(parts) != 3:
        raise ParseError(f"Expected 3 fields in message id, got {len(parts)}: {text!r}")

    values = []
    for (name, limit), part in zip(_LIMITS, parts, strict=True):
        # isdecimal rejects signs, whitespace and underscores that int() accepts
        if not part.isascii() or not part.isdecimal():
            raise ParseError(f"Invalid {name} field: {part!r}")
        # Bound the digit count before int() so oversized fields stay a ParseError
        digits = part.lstrip("0") or "0"
        if len(digits) > len(str(limit)):
            raise ParseError(f"{name} out of range: {len(digits)} digits")
        value = int(digits)
        if value > limit:
            raise ParseError(f"{name} out of range: {value}")
        values.append(value)

    return MessageId(*values)
