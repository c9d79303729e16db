"""Utility modules for payload decoding and display formatting."""

from .payload import PayloadError, decode_payload, decode_song_list, to_json

__all__ = [
    "PayloadError",
    "decode_payload",
    "decode_song_list",
    "to_json",
]
