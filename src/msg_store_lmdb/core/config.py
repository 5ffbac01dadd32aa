"""Configuration for the message store backend.

Defines the tunable parameters of the two on-disk tables.
"""

from __future__ import annotations

from dataclasses import dataclass


@dataclass
class StoreConfig:
    """Configuration parameters for the LMDB storage adapter.

    Attributes:
        data_dir: Root directory holding both tables
        payload_table_name: Subdirectory name of the payload table
        metadata_table_name: Subdirectory name of the metadata table
        map_size: Initial LMDB map size per table in bytes
        durable: Whether every commit is flushed to disk
        max_readers: Maximum concurrent read transactions per table
        grow_on_full: Whether to double the map size when a table fills up
    """

    data_dir: str
    payload_table_name: str = "msgs"
    metadata_table_name: str = "msg_data"
    map_size: int = 1024 * 1024 * 1024  # 1 GiB
    durable: bool = True
    max_readers: int = 126
    grow_on_full: bool = True
