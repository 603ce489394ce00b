"""Tests for text search over cached snapshots."""
import pytest

from placenotes.search import NoteResults, PlaceResults, SearchScope, search


@pytest.fixture
def notes(note_factory):
    return [
        note_factory(note_id=1, title="Coffee with Ana", description="Try the pastries"),
        note_factory(note_id=2, title="Run", description="Morning COFFEE after"),
        note_factory(note_id=3, title="Dentist", description=""),
    ]


@pytest.fixture
def places(place_factory):
    return [
        place_factory(place_id=1, name="Bondi Beach"),
        place_factory(place_id=2, name="Coffee Alchemy"),
    ]


class TestNoteScope:
    """Searching notes."""

    def test_matches_title_or_description(self, notes, places):
        result = search("coffee", SearchScope.NOTES, notes, places)

        assert isinstance(result, NoteResults)
        assert [n.id for n in result.notes] == [1, 2]

    def test_query_is_trimmed_and_case_insensitive(self, notes, places):
        result = search("  DENTIST ", SearchScope.NOTES, notes, places)
        assert [n.id for n in result.notes] == [3]

    def test_empty_query_returns_all(self, notes, places):
        assert len(search("   ", SearchScope.NOTES, notes, places)) == 3

    def test_no_match(self, notes, places):
        assert search("zzz", SearchScope.NOTES, notes, places).notes == []


class TestPlaceScope:
    """Searching places."""

    def test_matches_name(self, notes, places):
        result = search("beach", SearchScope.PLACES, notes, places)

        assert isinstance(result, PlaceResults)
        assert [p.id for p in result.places] == [1]

    def test_description_not_searched(self, notes, places):
        assert search("pastries", SearchScope.PLACES, notes, places).places == []

    def test_empty_query_returns_all(self, notes, places):
        assert len(search("", SearchScope.PLACES, notes, places)) == 2
