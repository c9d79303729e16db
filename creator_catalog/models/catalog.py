"""Catalog data models."""

from dataclasses import dataclass, field

from .song import Song


@dataclass
class Album:
    """Songs sharing one album name. Always derived, never authored."""

    name: str
    songs: list[Song] = field(default_factory=list)

    @classmethod
    def from_dict(cls, data: dict) -> "Album":
        """Build an Album from its wire form."""
        if not isinstance(data, dict):
            raise TypeError(f"album must be an object, got {type(data).__name__}")
        name = data["name"]
        if not isinstance(name, str):
            raise TypeError("album 'name' must be a string")
        songs = data.get("songs", [])
        if not isinstance(songs, list):
            raise TypeError(f"album '{name}' songs must be an array")
        return cls(name=name, songs=[Song.from_dict(song) for song in songs])

    def to_dict(self) -> dict:
        """Convert to JSON-serializable dictionary."""
        return {
            "name": self.name,
            "songs": [song.to_dict() for song in self.songs],
        }


@dataclass
class Catalog:
    """Top-level payload: the song list plus its optional album view."""

    songs: list[Song] = field(default_factory=list)
    albums: list[Album] = field(default_factory=list)

    @classmethod
    def from_dict(cls, data: dict) -> "Catalog":
        """Build a Catalog from its wire form. ``albums`` may be absent."""
        return cls(
            songs=[Song.from_dict(song) for song in data["songs"]],
            albums=[Album.from_dict(album) for album in data.get("albums") or []],
        )

    @property
    def total_songs(self) -> int:
        return len(self.songs)

    def to_dict(self) -> dict:
        """Convert to JSON-serializable dictionary."""
        return {
            "songs": [song.to_dict() for song in self.songs],
            "albums": [album.to_dict() for album in self.albums],
        }
