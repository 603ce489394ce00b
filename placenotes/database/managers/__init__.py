"""
Table managers used by the EntityStore.

Each manager wraps one session and issues statements against one table.
"""
from .base_manager import BaseManager, HasId
from .note_manager import NoteManager
from .place_manager import PlaceManager

__all__ = [
    "BaseManager",
    "HasId",
    "NoteManager",
    "PlaceManager",
]
