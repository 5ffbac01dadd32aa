"""Concrete table backends and codecs."""

from .codec import MsgpackCodec
from .lmdb_table import LmdbTable
from .memory_table import MemoryTable
from .metadata import decode_metadata, encode_metadata

__all__ = ["LmdbTable", "MemoryTable", "MsgpackCodec", "decode_metadata", "encode_metadata"]
