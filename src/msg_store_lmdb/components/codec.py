"""MessagePack payload codec."""

from __future__ import annotations

from typing import Any

import msgpack

from ..core.errors import DecodeError, SerializationError
from ..core.types import Value


class MsgpackCodec:
    """Encode payloads with MessagePack.

    ``bytes`` round-trip as the bin type and ``str`` as the str type, so a
    payload is returned with the same Python type it was stored with.
    """

    def encode(self, payload: Any) -> Value:
        try:
            return msgpack.packb(payload, use_bin_type=True)
        except (TypeError, ValueError, OverflowError) as e:
            raise SerializationError(f"Cannot encode payload of type {type(payload).__name__}: {e}") from e

    def decode(self, data: Value) -> Any:
        try:
            return msgpack.unpackb(data, raw=False, strict_map_key=False)
        except (ValueError, TypeError, msgpack.UnpackException) as e:
            raise DecodeError(f"Cannot decode payload ({len(data)} bytes): {e}") from e
