"""Message store core package."""

from .ids import KEY_SIZE, decode_key, encode_key, from_display_string, to_display_string

__all__ = ["KEY_SIZE", "decode_key", "encode_key", "from_display_string", "to_display_string"]
