#!/usr/bin/env python3
"""
search_engine.py
----------------
Text search over the cached Notes or Places.

Matching is a case-insensitive substring test on the trimmed query:
    NOTES   title or description
    PLACES  name

An empty query returns everything in scope, in input order.

Usage:
    result = search("coffee", SearchScope.NOTES, data.notes, data.places)
    if isinstance(result, NoteResults):
        for note in result.notes:
            print(note.title)
"""
# --- Standard library imports ---
from dataclasses import dataclass, field
from enum import Enum
from typing import List, Sequence, Union

# --- Local imports ---
from placenotes.dataclasses import Note, Place


class SearchScope(Enum):
    NOTES = "notes"
    PLACES = "places"


@dataclass
class NoteResults:
    """Notes matching a query."""

    notes: List[Note] = field(default_factory=list)

    def __len__(self) -> int:
        return len(self.notes)


@dataclass
class PlaceResults:
    """Places matching a query."""

    places: List[Place] = field(default_factory=list)

    def __len__(self) -> int:
        return len(self.places)


SearchResult = Union[NoteResults, PlaceResults]


def _contains(text: str, needle: str) -> bool:
    return needle in (text or "").lower()


def search(
    query: str,
    scope: SearchScope,
    notes: Sequence[Note],
    places: Sequence[Place],
) -> SearchResult:
    """
    Run one query against the cached snapshots.

    Args:
        query: Free text, surrounding whitespace ignored
        scope: Which entity type to search
        notes: Notes to search when scope is NOTES
        places: Places to search when scope is PLACES

    Returns:
        NoteResults or PlaceResults, matching the scope
    """
    needle = (query or "").strip().lower()

    if scope is SearchScope.NOTES:
        if not needle:
            return NoteResults(list(notes))
        return NoteResults(
            [
                n
                for n in notes
                if _contains(n.title, needle) or _contains(n.description, needle)
            ]
        )

    if not needle:
        return PlaceResults(list(places))
    return PlaceResults([p for p in places if _contains(p.name, needle)])
