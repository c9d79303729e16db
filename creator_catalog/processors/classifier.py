"""Creator-friendly classification from license text and release program."""

import logging
import re
from typing import Any

from ..models.results import InputError
from ..models.song import ReleaseType, Song
from ..utils.payload import PayloadError, decode_song_list, to_json

logger = logging.getLogger(__name__)

# Babafun Game Music License - Permissive
PERMISSIVE_LICENSE_TOKEN = "BGML-P"

# Commercial Creative Commons variants, matched against the upper-cased license.
# Examples: "CC BY", "CC BY 4.0", "CC BY-SA", "CC BY-SA 4.0", "CC0", "CC0 1.0"
COMMERCIAL_CC_PATTERNS = (
    r"^CC BY( \d+\.\d+)?$",
    r"^CC BY-SA( \d+\.\d+)?$",
    r"^CC0( \d+\.\d+)?$",
)

COMMERCIAL_CC_MATCHERS = tuple(re.compile(pattern) for pattern in COMMERCIAL_CC_PATTERNS)


def is_commercial_cc_license(license: str) -> bool:
    """Check whether a license is a Creative Commons variant allowing commercial use.

    The license is trimmed and upper-cased, then must match one of
    ``CC BY``, ``CC BY-SA`` or ``CC0`` exactly, optionally followed by a
    ``<major>.<minor>`` version. Non-commercial variants such as
    ``CC BY-NC 4.0`` never match.
    """
    if not isinstance(license, str):
        return False
    normalized = license.strip().upper()
    if not normalized:
        return False
    return any(matcher.match(normalized) for matcher in COMMERCIAL_CC_MATCHERS)


def is_permissive_custom_license(license: str) -> bool:
    """Check for the permissive custom license token (exact, case-insensitive)."""
    if not isinstance(license, str):
        return False
    return license.strip().casefold() == PERMISSIVE_LICENSE_TOKEN.casefold()


def is_creator_friendly(song: Song) -> bool:
    """A song is creator-friendly if ANY of these hold:

    1. It has a commercial CC license (CC BY, CC BY-SA, CC0)
    2. It is an NCS release
    3. It has the permissive custom license
    """
    return (
        is_commercial_cc_license(song.license)
        or song.release_type is ReleaseType.NCS
        or is_permissive_custom_license(song.license)
    )


def creator_friendly_reason(song: Song) -> str | None:
    """Describe which criteria make a song creator-friendly, or None."""
    reasons = []
    if is_commercial_cc_license(song.license):
        reasons.append(f"Commercial CC license ({song.license.strip()})")
    if song.release_type is ReleaseType.NCS:
        reasons.append("NCS release")
    if is_permissive_custom_license(song.license):
        reasons.append(f"{PERMISSIVE_LICENSE_TOKEN} license")
    return ", ".join(reasons) if reasons else None


def filter_creator_friendly(songs: Any) -> list[Song] | InputError:
    """Return the creator-friendly songs, preserving input order.

    ``songs`` may be a JSON array or a list of song dicts/Song objects.
    Malformed input yields an InputError instead of raising.
    """
    try:
        parsed = decode_song_list(songs)
    except PayloadError as e:
        logger.debug(f"Rejected song list for filtering: {e}")
        return InputError(str(e))

    filtered = [song for song in parsed if is_creator_friendly(song)]
    logger.debug(f"{len(filtered)} of {len(parsed)} songs are creator-friendly")
    return filtered


def filter_creator_friendly_json(songs: Any, indent: int | None = None) -> str:
    """Wire form of filter_creator_friendly: an array of songs or ``{"error": ...}``."""
    return to_json(filter_creator_friendly(songs), indent=indent)


def batch_check_creator_friendly(songs: Any) -> list[bool] | InputError:
    """One creator-friendly flag per input song, in input order."""
    try:
        parsed = decode_song_list(songs)
    except PayloadError as e:
        return InputError(str(e))
    return [is_creator_friendly(song) for song in parsed]
