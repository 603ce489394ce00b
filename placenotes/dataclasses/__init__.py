"""
Value types handed to presentation code.

Place and Note are immutable snapshots of stored rows. The ORM classes in
placenotes.database.models never leave the store.
"""
from .note import Note
from .place import Place

__all__ = ["Note", "Place"]
