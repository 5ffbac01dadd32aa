"""Exception hierarchy for the message store backend.

Every failure surfaced to the owning store is a ``StoreError`` subclass
tagged with an ``ErrorKind`` so callers can branch on the kind instead of
parsing messages.
"""

from __future__ import annotations

from enum import Enum


class ErrorKind(Enum):
    """Closed set of failure kinds reported by the storage adapter."""

    OPEN_FAILURE = "open_failure"
    SERIALIZATION_FAILURE = "serialization_failure"
    ENGINE_FAILURE = "engine_failure"
    NOT_FOUND = "not_found"
    DECODE_FAILURE = "decode_failure"
    PARSE_FAILURE = "parse_failure"


class StoreError(Exception):
    """Base exception for all storage adapter errors.

    Args:
        message: Human readable description
        key: Binary key involved in the failure, if any
        path: Filesystem path involved in the failure, if any
    """

    kind: ErrorKind

    def __init__(self, message: str, *, key: bytes | None = None, path: str | None = None):
        super().__init__(message)
        self.key = key
        self.path = path


class OpenError(StoreError):
    """Raised when the data directory or a table cannot be created or opened."""
    kind = ErrorKind.OPEN_FAILURE


class SerializationError(StoreError):
    """Raised when an in-memory value cannot be encoded."""
    kind = ErrorKind.SERIALIZATION_FAILURE


class EngineError(StoreError):
    """Raised when the key-value engine reports an I/O or internal error."""
    kind = ErrorKind.ENGINE_FAILURE


class NotFoundError(StoreError):
    """Raised when a requested message is absent."""
    kind = ErrorKind.NOT_FOUND


class DecodeError(StoreError):
    """Raised when on-disk bytes do not match the expected layout."""
    kind = ErrorKind.DECODE_FAILURE


class ParseError(StoreError, ValueError):
    """Raised when a display string is not a valid message id."""
    kind = ErrorKind.PARSE_FAILURE
