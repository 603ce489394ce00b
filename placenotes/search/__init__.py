"""
Browsing and text search over the DataStore snapshots.
"""
from .search_engine import NoteResults, PlaceResults, SearchResult, SearchScope, search
from .timeline import Timeline, favourite_places, timeline

__all__ = [
    "NoteResults",
    "PlaceResults",
    "SearchResult",
    "SearchScope",
    "Timeline",
    "favourite_places",
    "search",
    "timeline",
]
