"""Song data models."""

from dataclasses import dataclass
from enum import Enum


class ReleaseType(str, Enum):
    """Release program a song was published under."""

    INDEPENDENT = "Independent"
    NCS = "NCS"
    MONSTERCAT = "Monstercat"

    @classmethod
    def names(cls) -> list[str]:
        """Wire values in declaration order."""
        return [member.value for member in cls]


# Wire field name -> expected Python type, in validation order
SONG_FIELDS: dict[str, type] = {
    "id": str,
    "title": str,
    "albumName": str,
    "releaseType": str,
    "hasContentId": bool,
    "streamingLink": str,
    "license": str,
}


@dataclass
class Song:
    """One track with its licensing and release metadata."""

    id: str
    title: str
    album_name: str
    release_type: ReleaseType
    has_content_id: bool
    streaming_link: str
    license: str = ""

    @classmethod
    def from_dict(cls, data: dict) -> "Song":
        """Build a Song from its camelCase wire form.

        Raises:
            KeyError: a required field is missing.
            TypeError: a field has the wrong primitive type.
            ValueError: releaseType is not a known value.
        """
        if not isinstance(data, dict):
            raise TypeError(f"expected an object, got {type(data).__name__}")

        for name, expected in SONG_FIELDS.items():
            value = data[name]
            if not isinstance(value, expected):
                raise TypeError(f"field '{name}' has type {type(value).__name__}")

        return cls(
            id=data["id"],
            title=data["title"],
            album_name=data["albumName"],
            release_type=ReleaseType(data["releaseType"]),
            has_content_id=data["hasContentId"],
            streaming_link=data["streamingLink"],
            license=data["license"],
        )

    def to_dict(self) -> dict:
        """Convert to JSON-serializable dictionary."""
        return {
            "id": self.id,
            "title": self.title,
            "albumName": self.album_name,
            "releaseType": self.release_type.value,
            "hasContentId": self.has_content_id,
            "streamingLink": self.streaming_link,
            "license": self.license,
        }
