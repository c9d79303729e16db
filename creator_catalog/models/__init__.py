"""Data models for songs, albums and validation results."""

from .catalog import Album, Catalog
from .results import BatchItemResult, InputError, ValidationResult
from .song import ReleaseType, Song

__all__ = [
    "ReleaseType",
    "Song",
    "Album",
    "Catalog",
    "ValidationResult",
    "BatchItemResult",
    "InputError",
]
