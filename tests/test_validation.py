"""Unit tests for creator_catalog/processors/validation.py."""

import json

import pytest

from creator_catalog.models import Album, InputError, Song
from creator_catalog.processors.validation import (
    batch_validate,
    batch_validate_json,
    check_catalog,
    check_song,
    validate_catalog,
    validate_song,
)


class TestValidateSong:
    """Tests for validate_song() function."""

    def test_valid_song(self, make_song):
        """A complete song should validate with the empty sentinel."""
        assert validate_song(make_song()) == ""
        assert check_song(make_song()).is_valid

    def test_valid_song_json_text(self, make_song):
        assert validate_song(json.dumps(make_song())) == ""

    def test_empty_license_allowed(self, make_song):
        """license is the one string field that may be empty."""
        assert validate_song(make_song(license="")) == ""

    def test_song_instance_accepted(self, make_song):
        assert validate_song(Song.from_dict(make_song())) == ""

    def test_malformed_json(self):
        message = validate_song('{"id": "song-001",')
        assert message.startswith("Invalid JSON")

    @pytest.mark.parametrize("payload", ["[]", "42", '"song"', "null"])
    def test_not_an_object(self, payload):
        """Scalars and arrays are not songs."""
        message = validate_song(payload)
        assert "must be a JSON object" in message

    def test_missing_license(self, make_song):
        record = make_song()
        del record["license"]
        assert "Missing required field: license" in validate_song(record)

    def test_missing_fields_reported_in_order(self, make_song):
        """The first missing field in declaration order is reported."""
        record = make_song()
        del record["streamingLink"]
        del record["title"]
        assert validate_song(record) == "Missing required field: title"

    def test_string_field_wrong_type(self, make_song):
        assert validate_song(make_song(title=42)) == "Field 'title' must be a string"

    def test_has_content_id_must_be_boolean(self, make_song):
        """hasContentId must be a real boolean, not an int or string."""
        assert validate_song(make_song(hasContentId=1)) == "Field 'hasContentId' must be a boolean"
        assert validate_song(make_song(hasContentId="false")) == (
            "Field 'hasContentId' must be a boolean"
        )

    def test_release_type_wrong_type(self, make_song):
        assert validate_song(make_song(releaseType=None)) == (
            "Field 'releaseType' must be a string"
        )

    @pytest.mark.parametrize("field", ["id", "title", "albumName", "streamingLink"])
    def test_empty_fields(self, make_song, field):
        """Required string fields cannot be empty."""
        assert validate_song(make_song(**{field: ""})) == f"Field '{field}' cannot be empty"

    def test_invalid_release_type(self, make_song):
        message = validate_song(make_song(releaseType="InvalidType"))
        assert "releaseType" in message
        assert "InvalidType" in message
        assert message == (
            "Field 'releaseType' must be one of: Independent, NCS, Monstercat. "
            "Got: InvalidType"
        )

    def test_release_type_is_case_sensitive(self, make_song):
        assert "Got: ncs" in validate_song(make_song(releaseType="ncs"))

    def test_type_checked_before_emptiness(self, make_song):
        """A mistyped field is reported before an empty one."""
        message = validate_song(make_song(id="", hasContentId="no"))
        assert message == "Field 'hasContentId' must be a boolean"

    def test_extra_fields_ignored(self, make_song):
        assert validate_song(make_song(genre="Synthwave")) == ""


class TestValidateCatalog:
    """Tests for validate_catalog() function."""

    @pytest.fixture
    def catalog(self, make_song):
        song = make_song()
        return {
            "songs": [song],
            "albums": [{"name": "Test Album", "songs": [song]}],
        }

    def test_valid_catalog(self, catalog):
        assert validate_catalog(catalog) == ""
        assert validate_catalog(json.dumps(catalog)) == ""

    def test_albums_optional(self, make_song):
        assert validate_catalog({"songs": [make_song()]}) == ""

    def test_empty_catalog(self):
        assert validate_catalog({"songs": [], "albums": []}) == ""

    def test_song_instances_accepted(self, make_song):
        """Song and Album objects inside a catalog dict validate like their dicts."""
        song = Song.from_dict(make_song())
        assert validate_catalog({"songs": [song]}) == ""
        album = Album(name="Test Album", songs=[song])
        assert validate_catalog({"songs": [song], "albums": [album]}) == ""

    def test_song_instances_duplicate_ids(self, make_song):
        song = Song.from_dict(make_song())
        assert validate_catalog({"songs": [song, song]}) == (
            "Duplicate song ID 'song-001' found at index 1"
        )

    def test_malformed_json(self):
        assert validate_catalog("{songs: []}").startswith("Invalid JSON")

    def test_not_an_object(self):
        assert validate_catalog("[]") == "Invalid JSON structure: catalog must be a JSON object"

    def test_missing_songs(self):
        assert validate_catalog({"albums": []}) == "Missing required field: songs"

    def test_songs_not_array(self):
        assert validate_catalog({"songs": {}}) == "Field 'songs' must be an array"

    def test_albums_not_array(self, make_song):
        assert validate_catalog({"songs": [make_song()], "albums": "x"}) == (
            "Field 'albums' must be an array"
        )

    def test_song_not_an_object(self, make_song):
        message = validate_catalog({"songs": [make_song(), "song-002"]})
        assert message.startswith("Invalid JSON structure")
        assert "index 1" in message

    def test_malformed_album(self, make_song):
        message = validate_catalog({"songs": [make_song()], "albums": [{"songs": []}]})
        assert message.startswith("Invalid JSON structure")
        assert "name" in message

    def test_invalid_song_reports_index(self, make_song):
        """The first invalid song is reported with its index and reason."""
        catalog = {
            "songs": [
                make_song(id="song-001"),
                make_song(id="song-002", title=""),
                make_song(id="song-003", releaseType="Bad"),
            ]
        }
        assert validate_catalog(catalog) == (
            "Song at index 1 is invalid: Field 'title' cannot be empty"
        )

    def test_duplicate_ids(self, make_song):
        """The second occurrence of an id is reported."""
        catalog = {
            "songs": [
                make_song(id="song-001", title="Test Song 1"),
                make_song(id="song-002"),
                make_song(id="song-001", title="Test Song 2", releaseType="NCS"),
            ],
            "albums": [],
        }
        message = validate_catalog(catalog)
        assert "Duplicate song ID" in message
        assert "song-001" in message
        assert message == "Duplicate song ID 'song-001' found at index 2"

    def test_song_validity_checked_before_duplicates(self, make_song):
        catalog = {"songs": [make_song(), make_song(license=None)]}
        assert validate_catalog(catalog).startswith("Song at index 1 is invalid")

    def test_albums_without_songs(self, make_song):
        catalog = {"songs": [], "albums": [{"name": "Test Album", "songs": [make_song()]}]}
        assert validate_catalog(catalog) == "Cannot have albums without songs"

    def test_check_catalog_result(self, make_song):
        result = check_catalog({"songs": [make_song(), make_song()]})
        assert not result
        assert result.reason.startswith("Duplicate song ID")


class TestBatchValidate:
    """Tests for batch_validate() function."""

    def test_all_valid(self, make_song):
        results = batch_validate([make_song(id="a"), make_song(id="b")])
        assert [item.to_dict() for item in results] == [
            {"index": 0, "valid": True, "songId": "a"},
            {"index": 1, "valid": True, "songId": "b"},
        ]

    def test_duplicate_id(self, make_song):
        """The first occurrence stays valid, the repeat is flagged."""
        results = batch_validate([make_song(id="x"), make_song(id="x")])
        assert results[0].valid
        assert not results[1].valid
        assert len(results[1].errors) == 1
        assert "Duplicate ID" in results[1].errors[0]
        assert results[1].errors[0] == "Duplicate ID 'x' (first seen at index 0)"

    def test_collects_all_reasons(self, make_song):
        """Duplicate and structural reasons are both reported, duplicate first."""
        results = batch_validate([make_song(id="x"), make_song(id="x", title="")])
        assert results[1].errors == [
            "Duplicate ID 'x' (first seen at index 0)",
            "Field 'title' cannot be empty",
        ]

    def test_invalid_song_keeps_id(self, make_song):
        results = batch_validate([make_song(id="y", releaseType="Label")])
        assert results[0].song_id == "y"
        assert not results[0].valid

    def test_unparseable_id_omitted(self, make_song):
        record = make_song()
        del record["id"]
        result = batch_validate([record])[0]
        assert result.song_id is None
        assert "songId" not in result.to_dict()
        assert result.errors == ["Missing required field: id"]

    def test_duplicates_only_within_batch(self, make_song):
        """Each call only compares against ids in the same batch."""
        first = batch_validate([make_song(id="z")])
        second = batch_validate([make_song(id="z")])
        assert first[0].valid
        assert second[0].valid

    def test_third_occurrence_points_at_first(self, make_song):
        results = batch_validate([make_song(id="x")] * 3)
        assert results[2].errors == ["Duplicate ID 'x' (first seen at index 0)"]

    def test_empty_batch(self):
        assert batch_validate([]) == []

    def test_not_an_array(self, make_song):
        result = batch_validate(make_song())
        assert isinstance(result, InputError)
        assert result.message == "Invalid JSON: expected an array of songs"

    def test_element_not_an_object(self, make_song):
        result = batch_validate([make_song(), 3])
        assert isinstance(result, InputError)
        assert "index 1" in result.message

    def test_malformed_json(self):
        assert isinstance(batch_validate("[{"), InputError)

    def test_json_wire_form(self, make_song):
        data = json.loads(batch_validate_json([make_song(id="x"), make_song(id="x")]))
        assert data[0] == {"index": 0, "valid": True, "songId": "x"}
        assert data[1]["valid"] is False
        assert data[1]["errors"][0].startswith("Duplicate ID")

    def test_json_wire_form_error(self):
        assert json.loads(batch_validate_json("{}")) == {
            "error": "Invalid JSON: expected an array of songs"
        }
