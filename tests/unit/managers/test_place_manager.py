"""
test_place_manager.py
---------------------
Unit tests for PlaceManager statements.

Target Coverage: 90%+
"""
import pytest

from placenotes.core.exceptions import StatementError


class TestInsert:
    """Test PlaceManager.insert() method."""

    def test_insert(self, place_manager, place_factory):
        place_manager.insert(place_factory(place_id=3, name="Library", categories=("A", "B")))

        [result] = place_manager.list_all()
        assert result.id == 3
        assert result.name == "Library"
        assert result.categories == ("A", "B")

    def test_duplicate_id_raises(self, place_manager, place_factory):
        place_manager.insert(place_factory(place_id=1))

        with pytest.raises(StatementError):
            place_manager.insert(place_factory(place_id=1))


class TestListAll:
    """Test PlaceManager.list_all() method."""

    def test_empty(self, place_manager):
        assert place_manager.list_all() == []

    def test_ordered_by_id(self, place_manager, place_factory):
        for place_id in (5, 2, 9):
            place_manager.insert(place_factory(place_id=place_id))

        assert [p.id for p in place_manager.list_all()] == [2, 5, 9]


class TestClearUnused:
    """Test PlaceManager.clear_unused() method."""

    def test_keeps_favourites_and_referenced(
        self, place_manager, note_manager, place_factory, note_factory
    ):
        place_manager.insert(place_factory(place_id=1))
        place_manager.insert(place_factory(place_id=2, is_favourite=True))
        place_manager.insert(place_factory(place_id=3))
        note_manager.insert(note_factory(note_id=1, place_id=1))

        assert place_manager.clear_unused() == 1
        assert [p.id for p in place_manager.list_all()] == [1, 2]

    def test_nothing_to_remove(self, place_manager):
        assert place_manager.clear_unused() == 0


def test_clear_all(place_manager, place_factory):
    place_manager.insert(place_factory(place_id=1, is_favourite=True))
    place_manager.insert(place_factory(place_id=2))

    assert place_manager.clear_all() == 2
    assert place_manager.list_all() == []
