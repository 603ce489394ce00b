"""
test_place_note.py
------------------
Unit tests for the Place and Note value types.
"""
import pytest
from datetime import datetime
from types import SimpleNamespace

from placenotes.core.exceptions import ValidationError
from placenotes.dataclasses import Note, Place


class TestPlace:
    """Test Place construction helpers."""

    def test_categories_held_as_tuple(self):
        place = Place(1, "Park", 1.0, 2.0, ["leisure.park", "natural"])
        assert place.categories == ("leisure.park", "natural")

    def test_from_database(self):
        row = SimpleNamespace(
            id=3, name="Pier", latitude=-33.0, longitude=151.0,
            categories=["tourism"], favourite=1,
        )

        place = Place.from_database(row)

        assert place == Place(3, "Pier", -33.0, 151.0, ("tourism",), True)

    def test_new_validates(self):
        place = Place.new(1, "  Beach ", "-33.9", "151.3", [" beach ", ""])

        assert place.name == "Beach"
        assert place.latitude == -33.9
        assert place.categories == ("beach",)
        assert place.is_favourite is False

    def test_new_rejects_blank_name(self):
        with pytest.raises(ValidationError):
            Place.new(1, " ", 0, 0)

    def test_new_rejects_bad_latitude(self):
        with pytest.raises(ValidationError):
            Place.new(1, "Pole", 95, 0)

    def test_with_favourite_returns_copy(self):
        place = Place(1, "Park", 1.0, 2.0)
        pinned = place.with_favourite(True)

        assert pinned.is_favourite is True
        assert place.is_favourite is False
        assert pinned.id == place.id

    def test_is_frozen(self):
        place = Place(1, "Park", 1.0, 2.0)
        with pytest.raises(AttributeError):
            place.name = "Other"


class TestNote:
    """Test Note construction helpers."""

    def test_new_parses_date_string(self):
        note = Note.new(1, "Run", None, "2024-04-01T07:00:00", 2)

        assert note.date == datetime(2024, 4, 1, 7, 0, 0)
        assert note.description == ""

    def test_new_rejects_bad_date(self):
        with pytest.raises(ValidationError):
            Note.new(1, "Run", "", "someday", 2)

    def test_new_rejects_blank_title(self):
        with pytest.raises(ValidationError):
            Note.new(1, "", "", datetime(2024, 1, 1), 2)

    def test_edited_keeps_place(self):
        note = Note(1, "Run", "5k", datetime(2024, 1, 1), 2)

        changed = note.edited(title="Walk", date="2024-01-02")

        assert changed.title == "Walk"
        assert changed.description == "5k"
        assert changed.date == datetime(2024, 1, 2)
        assert changed.place_id == 2

    def test_edited_without_changes(self):
        note = Note(1, "Run", "5k", datetime(2024, 1, 1), 2)
        assert note.edited() == note
