"""Tests for timeline and favourites views."""
from datetime import datetime

from placenotes.search import favourite_places, timeline

NOW = datetime(2024, 6, 1, 12, 0, 0)


class TestTimeline:
    """Test timeline()."""

    def test_splits_at_now(self, note_factory):
        notes = [
            note_factory(note_id=1, date=datetime(2024, 7, 1)),
            note_factory(note_id=2, date=datetime(2024, 1, 1)),
            note_factory(note_id=3, date=NOW),
            note_factory(note_id=4, date=datetime(2024, 5, 1)),
        ]

        split = timeline(notes, NOW)

        assert [n.id for n in split.past] == [2, 4]
        assert [n.id for n in split.upcoming] == [3, 1]
        assert len(split) == 4

    def test_empty(self):
        split = timeline([], NOW)
        assert split.past == [] and split.upcoming == []


def test_favourite_places_sorted_by_name(place_factory):
    places = [
        place_factory(place_id=1, name="zoo", is_favourite=True),
        place_factory(place_id=2, name="Aquarium", is_favourite=True),
        place_factory(place_id=3, name="Bakery", is_favourite=False),
    ]

    assert [p.id for p in favourite_places(places)] == [2, 1]
