"""Display formatting helpers for songs and licenses."""

from urllib.parse import urlparse

from ..models.song import Song

RELEASE_TYPE_LABELS = {
    "NCS": "NCS (No Copyright Sounds)",
    "Independent": "Independent Release",
    "Monstercat": "Monstercat Release",
}

# Hostname fragment -> link label, first match wins
STREAMING_PLATFORMS = (
    ("spotify", "Listen on Spotify"),
    ("youtube", "Watch on YouTube"),
    ("youtu.be", "Watch on YouTube"),
    ("soundcloud", "Listen on SoundCloud"),
    ("bandcamp", "Listen on Bandcamp"),
    ("push.fm", "Listen on Push.fm"),
    ("ncs.io", "Listen on NCS"),
    ("monstercat", "Listen on Monstercat"),
)
DEFAULT_LINK_TEXT = "Listen Now"

# Case-insensitive; raw values break ties
_SORT_KEYS = {
    "title": lambda song: (song.title.casefold(), song.title),
    "album": lambda song: (
        song.album_name.casefold(), song.title.casefold(), song.album_name, song.title
    ),
    "release_type": lambda song: (
        song.release_type.value.casefold(), song.title.casefold(), song.title
    ),
}


def should_display_license(license: str) -> bool:
    """Only non-blank licenses are shown."""
    return bool(license and license.strip())


def content_id_description(has_content_id: bool) -> str:
    if has_content_id:
        return (
            "This song has YouTube Content ID enabled and may claim revenue "
            "on videos using it"
        )
    return "This song does not have YouTube Content ID and is safe for video use"


def format_release_type(release_type: str | None) -> str:
    """Human-readable release type.

    Known values get their full label, blank values become
    "Unknown Release", anything else is passed through trimmed.
    """
    value = (release_type or "").strip()
    if not value:
        return "Unknown Release"
    return RELEASE_TYPE_LABELS.get(value, value)


def release_type_badge_class(release_type: str) -> str:
    return f"badge {release_type.lower()}"


def _hostname(link: str | None) -> str | None:
    if not link or not link.strip():
        return None
    try:
        parsed = urlparse(link.strip())
    except ValueError:
        return None
    if not parsed.scheme or not parsed.hostname:
        return None
    return parsed.hostname.lower()


def should_display_streaming_link(link: str | None) -> bool:
    """A link is shown only when it is an absolute URL."""
    return _hostname(link) is not None


def streaming_link_text(link: str | None) -> str:
    """Label for a streaming link based on its platform."""
    hostname = _hostname(link)
    if hostname is None:
        return DEFAULT_LINK_TEXT
    for fragment, label in STREAMING_PLATFORMS:
        if fragment in hostname:
            return label
    return DEFAULT_LINK_TEXT


def sort_songs(songs: list[Song], sort_by: str = "title") -> list[Song]:
    """Return a new list sorted by title, album or release_type.

    Comparison ignores case. Ties on album and release type fall back to
    title. The sort is stable.
    """
    try:
        key = _SORT_KEYS[sort_by]
    except KeyError:
        raise ValueError(
            f"Unknown sort key '{sort_by}'. Expected one of: {', '.join(_SORT_KEYS)}"
        ) from None
    return sorted(songs, key=key)
