"""Catalog loading: decode, derive albums, validate."""

import logging
from typing import Any

from ..models.catalog import Catalog
from ..utils.payload import PayloadError, decode_payload, decode_song_list
from .grouping import AlbumGrouper
from .validation import check_catalog

logger = logging.getLogger(__name__)


class CatalogLoadError(ValueError):
    """Raised when a catalog payload cannot be loaded."""


class CatalogLoader:
    """Turns a raw catalog payload into a validated Catalog.

    Any ``albums`` supplied with the payload are ignored; the album view is
    always recomputed from the songs before validation.
    """

    def __init__(self, grouper: AlbumGrouper | None = None) -> None:
        self._grouper = grouper or AlbumGrouper()

    def load(self, payload: Any) -> Catalog:
        """Load and validate a catalog from JSON text or a decoded dict.

        Raises:
            CatalogLoadError: the payload is malformed or fails validation.
        """
        try:
            data = decode_payload(payload)
        except PayloadError as e:
            raise CatalogLoadError(f"Failed to parse catalog: {e}") from e

        if not isinstance(data, dict) or not isinstance(data.get("songs"), list):
            raise CatalogLoadError(
                "Invalid data structure: missing or invalid songs array"
            )

        # Songs are checked first so per-song problems keep their index
        result = check_catalog({"songs": data["songs"]})
        if not result:
            raise CatalogLoadError(f"Catalog validation failed: {result.reason}")

        catalog = self._grouper.build(decode_song_list(data["songs"]))

        result = check_catalog(catalog.to_dict())
        if not result:
            raise CatalogLoadError(f"Catalog validation failed: {result.reason}")

        logger.info(
            f"Loaded catalog with {catalog.total_songs} songs in {len(catalog.albums)} albums"
        )
        return catalog
