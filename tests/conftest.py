"""
conftest.py
-----------
Shared pytest fixtures for PlaceNotes tests.

Provides fixtures for:
- Temporary directories and database paths
- EntityStore / DataStore instances on a throwaway SQLite file
- Sessions and table managers
- Sample Place and Note values
"""
import pytest
from pathlib import Path
from datetime import datetime
from tempfile import TemporaryDirectory
from unittest.mock import MagicMock

from placenotes.core.logging_manager import PlaceNotesLogger
from placenotes.dataclasses import Note, Place
from placenotes.geo.models import ExternalLocation


# ----- Path Fixtures -----

@pytest.fixture
def tmp_dir():
    """Create a temporary directory for test file operations."""
    with TemporaryDirectory() as tmpdir:
        yield Path(tmpdir)


@pytest.fixture
def test_db_path(tmp_dir):
    """Create temporary test database path."""
    return tmp_dir / "test.db"


@pytest.fixture
def mock_logger():
    """Logger double recording every call."""
    return MagicMock(spec=PlaceNotesLogger)


# ----- Sample Value Factories -----

def make_place(place_id=1, name="Cafe Sydney", latitude=-33.861, longitude=151.211,
               categories=("catering.cafe",), is_favourite=False):
    return Place(
        id=place_id,
        name=name,
        latitude=latitude,
        longitude=longitude,
        categories=categories,
        is_favourite=is_favourite,
    )


def make_note(note_id=1, place_id=1, title="Lunch", description="Flat white",
              date=datetime(2024, 3, 1, 12, 30, 0)):
    return Note(
        id=note_id,
        title=title,
        description=description,
        date=date,
        place_id=place_id,
    )


def make_location(name="Harbour Bar", latitude=-33.857, longitude=151.215,
                  categories=("catering.bar",), country="Australia"):
    return ExternalLocation(
        name=name,
        categories=categories,
        latitude=latitude,
        longitude=longitude,
        country=country,
    )


@pytest.fixture
def sample_place():
    return make_place()


@pytest.fixture
def sample_note():
    return make_note()


@pytest.fixture
def sample_location():
    return make_location()


# ----- Test Database Fixtures -----

@pytest.fixture
def test_store(test_db_path):
    """
    Create an EntityStore on a fresh database file.

    The engine is disposed after the test.
    """
    from placenotes.database.manager import EntityStore

    store = EntityStore(test_db_path)
    yield store
    store.close()


@pytest.fixture
def test_data(test_store):
    """DataStore facade over the test store."""
    from placenotes.database.datastore import DataStore

    return DataStore(test_store)


@pytest.fixture
def db_session(test_store):
    """
    Create a database session for tests.

    Provides a session with automatic rollback after test.
    """
    with test_store.session_scope() as session:
        yield session
        session.rollback()


@pytest.fixture
def place_manager(db_session):
    """Create PlaceManager instance for testing."""
    from placenotes.database.managers.place_manager import PlaceManager
    return PlaceManager(db_session)


@pytest.fixture
def note_manager(db_session):
    """Create NoteManager instance for testing."""
    from placenotes.database.managers.note_manager import NoteManager
    return NoteManager(db_session)


@pytest.fixture
def place_factory():
    """Build Place values with overridable defaults."""
    return make_place


@pytest.fixture
def note_factory():
    """Build Note values with overridable defaults."""
    return make_note


@pytest.fixture
def location_factory():
    """Build ExternalLocation values with overridable defaults."""
    return make_location
