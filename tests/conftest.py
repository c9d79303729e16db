"""Shared fixtures for catalog tests."""

import sys
from pathlib import Path

import pytest

# Add parent dir to path so creator_catalog is importable as a package
sys.path.insert(0, str(Path(__file__).parent.parent))


def song_record(**overrides) -> dict:
    """A valid wire-format song, with selected fields replaced."""
    record = {
        "id": "song-001",
        "title": "Test Song",
        "albumName": "Test Album",
        "releaseType": "Independent",
        "hasContentId": False,
        "streamingLink": "https://example.com",
        "license": "CC BY 4.0",
    }
    record.update(overrides)
    return record


@pytest.fixture
def make_song():
    """Factory for valid wire-format song dicts."""
    return song_record
