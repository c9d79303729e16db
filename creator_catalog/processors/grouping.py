"""Album grouping logic."""

from __future__ import annotations

import logging
from collections import defaultdict
from typing import Any

from ..models.catalog import Album, Catalog
from ..models.results import InputError
from ..models.song import Song
from ..utils.payload import PayloadError, decode_song_list, to_json

logger = logging.getLogger(__name__)


class AlbumGrouper:
    """Builds the album view of a flat song list."""

    def group(self, songs: list[Song]) -> list[Album]:
        """Partition songs by exact album name.

        Songs keep their input order inside each album; albums are sorted by
        name in code point order. Every song lands in exactly one album.
        """
        album_songs: dict[str, list[Song]] = defaultdict(list)
        for song in songs:
            album_songs[song.album_name].append(song)

        albums = [
            Album(name=name, songs=album_songs[name])
            for name in sorted(album_songs.keys())
        ]
        logger.debug(f"Grouped {len(songs)} songs into {len(albums)} albums")
        return albums

    def build(self, songs: list[Song]) -> Catalog:
        """Return a Catalog with the songs and their album view."""
        return Catalog(songs=list(songs), albums=self.group(songs))


def group_by_album(songs: Any) -> list[Album] | InputError:
    """Group songs into albums sorted by name.

    ``songs`` may be a JSON array or a list of song dicts/Song objects.
    Malformed input yields an InputError instead of a partial result.
    """
    try:
        parsed = decode_song_list(songs)
    except PayloadError as e:
        logger.debug(f"Rejected song list for grouping: {e}")
        return InputError(str(e))
    return AlbumGrouper().group(parsed)


def group_by_album_json(songs: Any, indent: int | None = None) -> str:
    """Wire form of group_by_album: an array of albums or ``{"error": ...}``."""
    return to_json(group_by_album(songs), indent=indent)
