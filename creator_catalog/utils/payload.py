"""Decoding of JSON payloads handed to the public entry points."""

import json
from typing import Any

from ..models.song import Song


class PayloadError(ValueError):
    """Raised when a payload is not decodable JSON."""


def decode_payload(payload: Any) -> Any:
    """Return the Python value for a payload.

    Text and bytes are parsed as JSON; anything else is assumed to be
    already decoded and is returned as-is.
    """
    if isinstance(payload, (bytes, bytearray)):
        try:
            payload = payload.decode("utf-8")
        except UnicodeDecodeError as e:
            raise PayloadError(f"Invalid JSON: {e}") from e

    if isinstance(payload, str):
        try:
            return json.loads(payload)
        except json.JSONDecodeError as e:
            raise PayloadError(f"Invalid JSON: {e}") from e

    return payload


def to_json(value: Any, indent: int | None = None) -> str:
    """Serialize a result (models, result objects or plain data) to JSON."""
    return json.dumps(_plain(value), indent=indent, ensure_ascii=False)


def _plain(value: Any) -> Any:
    if hasattr(value, "to_dict"):
        return value.to_dict()
    if isinstance(value, (list, tuple)):
        return [_plain(item) for item in value]
    return value


def decode_song_list(payload: Any) -> list[Song]:
    """Decode a payload that must be an array of songs.

    Elements may be wire-format dicts or Song instances.

    Raises:
        PayloadError: the payload is not an array, or an element cannot be
            built into a Song.
    """
    data = decode_payload(payload)
    if not isinstance(data, list):
        raise PayloadError(
            f"Invalid JSON: expected an array of songs, got {json_type(data)}"
        )

    songs = []
    for index, item in enumerate(data):
        if isinstance(item, Song):
            songs.append(item)
            continue
        try:
            songs.append(Song.from_dict(item))
        except KeyError as e:
            raise PayloadError(
                f"Invalid JSON: song at index {index} is missing field {e.args[0]}"
            ) from e
        except (TypeError, ValueError) as e:
            raise PayloadError(f"Invalid JSON: song at index {index}: {e}") from e
    return songs


def json_type(value: Any) -> str:
    """Name of the JSON type of a decoded value."""
    if value is None:
        return "null"
    if isinstance(value, bool):
        return "boolean"
    if isinstance(value, (int, float)):
        return "number"
    if isinstance(value, str):
        return "string"
    if isinstance(value, list):
        return "array"
    if isinstance(value, dict):
        return "object"
    return type(value).__name__
