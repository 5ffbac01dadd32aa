"""Metadata record encoding.

Records are fixed-width so a full-table scan never touches payload bytes.
"""

from __future__ import annotations

import struct

from ..core.errors import DecodeError, SerializationError
from ..core.types import U32_MAX, MetadataRecord, Value

# Record format: [byte_size (4B)] [priority (4B)]
_RECORD_STRUCT = struct.Struct("<II")
RECORD_SIZE = _RECORD_STRUCT.size


def encode_metadata(record: MetadataRecord) -> Value:
    """Pack a metadata record into its fixed 8-byte form."""
    for name in ("byte_size", "priority"):
        value = getattr(record, name)
        if isinstance(value, bool) or not isinstance(value, int) or not 0 <= value <= U32_MAX:
            raise SerializationError(f"Metadata {name} must be an unsigned 32-bit int, got {value!r}")
    return _RECORD_STRUCT.pack(record.byte_size, record.priority)


def decode_metadata(data: Value) -> MetadataRecord:
    """Unpack a metadata record.

    Raises:
        DecodeError: If data is not exactly ``RECORD_SIZE`` bytes
    """
    if len(data) != RECORD_SIZE:
        raise DecodeError(f"Invalid metadata record length: expected {RECORD_SIZE}, got {len(data)}")
    byte_size, priority = _RECORD_STRUCT.unpack(data)
    return MetadataRecord(byte_size=byte_size, priority=priority)
