"""Protocol definitions for pluggable components."""

from .codec import PayloadCodec
from .store import MessageDb
from .table import Table

__all__ = ["MessageDb", "PayloadCodec", "Table"]
