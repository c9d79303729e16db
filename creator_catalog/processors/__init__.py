"""Processor modules for classification, validation and grouping."""

from .classifier import (
    batch_check_creator_friendly,
    creator_friendly_reason,
    filter_creator_friendly,
    filter_creator_friendly_json,
    is_commercial_cc_license,
    is_creator_friendly,
    is_permissive_custom_license,
)
from .grouping import AlbumGrouper, group_by_album, group_by_album_json
from .loader import CatalogLoader, CatalogLoadError
from .validation import (
    batch_validate,
    batch_validate_json,
    check_catalog,
    check_song,
    validate_catalog,
    validate_song,
)

__all__ = [
    "AlbumGrouper",
    "CatalogLoader",
    "CatalogLoadError",
    "batch_check_creator_friendly",
    "batch_validate",
    "batch_validate_json",
    "check_catalog",
    "check_song",
    "creator_friendly_reason",
    "filter_creator_friendly",
    "filter_creator_friendly_json",
    "group_by_album",
    "group_by_album_json",
    "is_commercial_cc_license",
    "is_creator_friendly",
    "is_permissive_custom_license",
    "validate_catalog",
    "validate_song",
]
