"""Structural and semantic validation of songs and catalogs.

Every check returns a ValidationResult; the ``validate_*`` functions expose
the wire-compatible form, where an empty string means the record is valid.
Malformed input is reported, never raised.
"""

import logging
from typing import Any

from ..models.catalog import Album, Catalog
from ..models.results import BatchItemResult, InputError, ValidationResult
from ..models.song import SONG_FIELDS, ReleaseType, Song
from ..utils.payload import PayloadError, decode_payload, json_type, to_json

logger = logging.getLogger(__name__)

# Fields that must hold a non-empty string (license may be empty)
NON_EMPTY_FIELDS = ("id", "title", "albumName", "streamingLink")

TYPE_NAMES = {str: "string", bool: "boolean"}


def check_song(record: Any) -> ValidationResult:
    """Validate one song record, stopping at the first failure."""
    try:
        data = decode_payload(record)
    except PayloadError as e:
        return ValidationResult.invalid(str(e))

    if isinstance(data, Song):
        data = data.to_dict()
    if not isinstance(data, dict):
        return ValidationResult.invalid(
            f"Song must be a JSON object, got {json_type(data)}"
        )

    for name in SONG_FIELDS:
        if name not in data:
            return ValidationResult.invalid(f"Missing required field: {name}")

    for name, expected in SONG_FIELDS.items():
        # bool is an int subclass, but an int is never a bool
        if not isinstance(data[name], expected):
            return ValidationResult.invalid(
                f"Field '{name}' must be a {TYPE_NAMES[expected]}"
            )

    for name in NON_EMPTY_FIELDS:
        if data[name] == "":
            return ValidationResult.invalid(f"Field '{name}' cannot be empty")

    release_type = data["releaseType"]
    if release_type not in ReleaseType.names():
        return ValidationResult.invalid(
            f"Field 'releaseType' must be one of: {', '.join(ReleaseType.names())}. "
            f"Got: {release_type}"
        )

    try:
        Song.from_dict(data)
    except (KeyError, TypeError, ValueError) as e:
        return ValidationResult.invalid(f"Invalid song structure: {e}")

    return ValidationResult.ok()


def validate_song(record: Any) -> str:
    """Validate one song. Returns an empty string if valid."""
    return check_song(record).message


def check_catalog(record: Any) -> ValidationResult:
    """Validate a whole catalog payload, stopping at the first failure."""
    try:
        data = decode_payload(record)
    except PayloadError as e:
        return ValidationResult.invalid(str(e))

    if isinstance(data, Catalog):
        data = data.to_dict()
    if not isinstance(data, dict):
        return ValidationResult.invalid(
            "Invalid JSON structure: catalog must be a JSON object"
        )

    if "songs" not in data:
        return ValidationResult.invalid("Missing required field: songs")
    songs = data["songs"]
    if not isinstance(songs, list):
        return ValidationResult.invalid("Field 'songs' must be an array")
    songs = [song.to_dict() if isinstance(song, Song) else song for song in songs]

    albums = data.get("albums")
    if albums is not None and not isinstance(albums, list):
        return ValidationResult.invalid("Field 'albums' must be an array")
    if albums:
        albums = [album.to_dict() if isinstance(album, Album) else album for album in albums]

    structure_error = _check_catalog_structure(songs, albums or [])
    if structure_error:
        return ValidationResult.invalid(f"Invalid JSON structure: {structure_error}")

    for index, song in enumerate(songs):
        result = check_song(song)
        if not result:
            logger.debug(f"Catalog rejected at song {index}: {result.reason}")
            return ValidationResult.invalid(
                f"Song at index {index} is invalid: {result.reason}"
            )

    seen_ids: set[str] = set()
    for index, song in enumerate(songs):
        song_id = song["id"]
        if song_id in seen_ids:
            return ValidationResult.invalid(
                f"Duplicate song ID '{song_id}' found at index {index}"
            )
        seen_ids.add(song_id)

    if albums and not songs:
        return ValidationResult.invalid("Cannot have albums without songs")

    return ValidationResult.ok()


def _check_catalog_structure(songs: list, albums: list) -> str | None:
    """Shape check for the catalog containers.

    Songs in the top-level list are only required to be objects here; their
    fields are reported per index by check_song. Albums must parse fully.
    """
    for index, song in enumerate(songs):
        if not isinstance(song, dict):
            return f"song at index {index} must be an object, got {json_type(song)}"

    for index, album in enumerate(albums):
        try:
            Catalog.from_dict({"songs": [], "albums": [album]})
        except KeyError as e:
            return f"album at index {index} is missing field {e.args[0]}"
        except (TypeError, ValueError) as e:
            return f"album at index {index}: {e}"

    return None


def validate_catalog(record: Any) -> str:
    """Validate a catalog. Returns an empty string if valid."""
    return check_catalog(record).message


def batch_validate(songs: Any) -> list[BatchItemResult] | InputError:
    """Validate every song of a batch, collecting all reasons per song.

    Duplicate detection only compares against ids seen earlier in the same
    batch; catalog-wide uniqueness is check_catalog's job.
    """
    try:
        data = decode_payload(songs)
    except PayloadError as e:
        return InputError(str(e))

    if not isinstance(data, list):
        return InputError("Invalid JSON: expected an array of songs")

    records = []
    for index, item in enumerate(data):
        if isinstance(item, Song):
            item = item.to_dict()
        if not isinstance(item, dict):
            return InputError(f"Invalid JSON: element at index {index} is not an object")
        records.append(item)

    results = []
    first_seen: dict[str, int] = {}
    for index, record in enumerate(records):
        errors = []
        song_id = record.get("id")
        if not isinstance(song_id, str):
            song_id = None

        if song_id is not None:
            if song_id in first_seen:
                errors.append(
                    f"Duplicate ID '{song_id}' (first seen at index {first_seen[song_id]})"
                )
            else:
                first_seen[song_id] = index

        result = check_song(record)
        if not result:
            errors.append(result.reason)

        results.append(
            BatchItemResult(index=index, valid=not errors, song_id=song_id, errors=errors)
        )

    invalid = sum(1 for item in results if not item.valid)
    logger.debug(f"Batch validated {len(results)} songs, {invalid} invalid")
    return results


def batch_validate_json(songs: Any, indent: int | None = None) -> str:
    """Wire form of batch_validate: an array of item objects or ``{"error": ...}``."""
    return to_json(batch_validate(songs), indent=indent)
