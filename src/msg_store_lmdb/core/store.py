"""Storage adapter - main public API.

Coordinates the metadata and payload tables behind the add/get/delete/fetch
contract used by the owning message store.
"""

from __future__ import annotations

import logging
from pathlib import Path
from typing import Any, Generic, TypeVar

from ..components.codec import MsgpackCodec
from ..components.lmdb_table import LmdbTable
from ..components.memory_table import MemoryTable
from ..components.metadata import decode_metadata, encode_metadata
from ..interfaces.codec import PayloadCodec
from ..interfaces.table import Table
from .config import StoreConfig
from .errors import DecodeError, NotFoundError, OpenError
from .ids import decode_key, encode_key
from .types import ByteSize, MessageId, MetadataRecord

logger = logging.getLogger(__name__)

T = TypeVar("T")


class StorageAdapter(Generic[T]):
    """Two-table persistence backend for a priority-ordered message store.

    Args:
        payload_table: Table holding encoded payloads
        metadata_table: Table holding fixed-size metadata records
        codec: Payload codec, MessagePack by default

    Public API:
        - add(msg_id, payload, byte_size): Persist metadata then payload
        - get(msg_id): Return payload or raise NotFoundError
        - delete(msg_id): Remove both records, no-op if absent
        - fetch_all_metadata(): (id, byte_size) for every message in id order

    Invariants:
        - Both tables share the binary key space produced by encode_key
        - Writes to the two tables are independent, not atomic together
        - Scans never read the payload table
    """

    def __init__(self, payload_table: Table, metadata_table: Table, codec: PayloadCodec[T] | None = None):
        self.payload_table = payload_table
        self.metadata_table = metadata_table
        self.codec: PayloadCodec[T] = codec if codec is not None else MsgpackCodec()

    @classmethod
    def open(cls, config: StoreConfig, codec: PayloadCodec[T] | None = None) -> StorageAdapter[T]:
        """Open (creating if missing) both LMDB tables under config.data_dir.

        Raises:
            OpenError: If the directory or either table cannot be opened
        """
        data_dir = Path(config.data_dir)
        try:
            data_dir.mkdir(parents=True, exist_ok=True)
        except OSError as e:
            raise OpenError(f"Could not create data directory {data_dir}: {e}", path=str(data_dir)) from e

        table_options: dict[str, Any] = {
            "map_size": config.map_size,
            "durable": config.durable,
            "max_readers": config.max_readers,
            "grow_on_full": config.grow_on_full,
        }
        payload_table = LmdbTable(data_dir / config.payload_table_name, **table_options)
        try:
            metadata_table = LmdbTable(data_dir / config.metadata_table_name, **table_options)
        except OpenError:
            payload_table.close()
            raise

        logger.info(f"Opened message store at {data_dir}")
        return cls(payload_table, metadata_table, codec)

    @classmethod
    def in_memory(cls, codec: PayloadCodec[T] | None = None) -> StorageAdapter[T]:
        """Create an adapter over two volatile tables."""
        return cls(MemoryTable("msgs"), MemoryTable("msg_data"), codec)

    def add(self, msg_id: MessageId, payload: T, byte_size: ByteSize) -> None:
        """Persist metadata and payload under msg_id, overwriting existing records."""
        key = encode_key(msg_id)
        record = encode_metadata(MetadataRecord(byte_size=byte_size, priority=msg_id.priority))
        data = self.codec.encode(payload)

        self.metadata_table.put(key, record)
        self.payload_table.put(key, data)
        logger.debug(f"Added message {msg_id} ({byte_size} bytes declared, {len(data)} stored)")

    def get(self, msg_id: MessageId) -> T:
        """Return the payload stored for msg_id.

        Raises:
            NotFoundError: If no payload is stored for msg_id
            DecodeError: If the stored payload cannot be decoded
        """
        key = encode_key(msg_id)
        data = self.payload_table.get(key)
        if data is None:
            raise NotFoundError(f"Message {msg_id} not found", key=key)
        try:
            return self.codec.decode(data)
        except DecodeError as e:
            e.key = key
            raise

    def delete(self, msg_id: MessageId) -> None:
        """Remove payload and metadata for msg_id; absent ids are ignored."""
        key = encode_key(msg_id)
        removed_payload = self.payload_table.delete(key)
        removed_meta = self.metadata_table.delete(key)
        logger.debug(f"Deleted message {msg_id} (payload={removed_payload}, metadata={removed_meta})")

    def fetch_all_records(self) -> list[tuple[MessageId, MetadataRecord]]:
        """Return every metadata record in ascending id order.

        Raises:
            DecodeError: If any key or record is malformed; no partial result
        """
        records = []
        for key, value in self.metadata_table.items():
            try:
                records.append((decode_key(key), decode_metadata(value)))
            except DecodeError as e:
                logger.error(f"Corrupt metadata entry under key {bytes(key).hex()}: {e}")
                e.key = bytes(key)
                raise
        return records

    def fetch_all_metadata(self) -> list[tuple[MessageId, ByteSize]]:
        """Return (id, byte_size) for every stored message in ascending id order."""
        records = self.fetch_all_records()
        logger.debug(f"Fetched {len(records)} metadata records")
        return [(msg_id, record.byte_size) for msg_id, record in records]

    def count(self) -> int:
        """Return number of metadata records."""
        return self.metadata_table.count()

    def close(self) -> None:
        """Close both tables; errors closing one do not leave the other open."""
        logger.info("Closing message store")
        try:
            self.payload_table.close()
        finally:
            self.metadata_table.close()

    def __enter__(self):
        return self

    def __exit__(self, exc_type, exc_val, exc_tb):
        self.close()
        return False


