"""
Database Models Package
------------------------

SQLAlchemy ORM models for the PlaceNotes database.

- base: Base class and custom column types
- geography: Place
- core: Note

Usage:
    from placenotes.database.models import Base, Place, Note
"""
from .base import Base, CategoryList, IsoTimestamp
from .geography import Place
from .core import Note

__all__ = [
    "Base",
    "CategoryList",
    "IsoTimestamp",
    "Place",
    "Note",
]
