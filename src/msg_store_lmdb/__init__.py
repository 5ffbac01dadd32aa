"""msg-store-lmdb - LMDB persistence backend for a priority-ordered message store."""

from .components.codec import MsgpackCodec
from .components.lmdb_table import LmdbTable
from .components.memory_table import MemoryTable
from .core.config import StoreConfig
from .core.errors import (
    DecodeError,
    EngineError,
    ErrorKind,
    NotFoundError,
    OpenError,
    ParseError,
    SerializationError,
    StoreError,
)
from .core.ids import KEY_SIZE, decode_key, encode_key, from_display_string, to_display_string
from .core.store import StorageAdapter
from .core.types import ByteSize, Key, MessageId, MetadataRecord, Value
from .interfaces import MessageDb, PayloadCodec, Table

__all__ = [
    "KEY_SIZE",
    "ByteSize",
    "DecodeError",
    "EngineError",
    "ErrorKind",
    "Key",
    "LmdbTable",
    "MemoryTable",
    "MessageDb",
    "MessageId",
    "MetadataRecord",
    "MsgpackCodec",
    "NotFoundError",
    "OpenError",
    "ParseError",
    "PayloadCodec",
    "SerializationError",
    "StorageAdapter",
    "StoreConfig",
    "StoreError",
    "Table",
    "Value",
    "decode_key",
    "encode_key",
    "from_display_string",
    "to_display_string",
]
