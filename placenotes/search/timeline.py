#!/usr/bin/env python3
"""
timeline.py
-----------
Date-ordered views over the cached Notes and Places.
"""
from __future__ import annotations

from dataclasses import dataclass, field
from datetime import datetime
from typing import List, Optional, Sequence

from placenotes.dataclasses import Note, Place


@dataclass
class Timeline:
    """
    Notes split around a reference time.

    Attributes:
        past: Notes dated strictly before the reference time, oldest first
        upcoming: Notes dated at or after the reference time, oldest first
    """

    past: List[Note] = field(default_factory=list)
    upcoming: List[Note] = field(default_factory=list)

    def __len__(self) -> int:
        return len(self.past) + len(self.upcoming)


def timeline(notes: Sequence[Note], now: Optional[datetime] = None) -> Timeline:
    """
    Sort notes by date and split them at ``now``.

    Notes with the same date keep their input order.
    """
    now = now or datetime.now()
    ordered = sorted(notes, key=lambda n: n.date)
    return Timeline(
        past=[n for n in ordered if n.date < now],
        upcoming=[n for n in ordered if n.date >= now],
    )


def favourite_places(places: Sequence[Place]) -> List[Place]:
    """Favourite places sorted by name, case-insensitively."""
    return sorted((p for p in places if p.is_favourite), key=lambda p: p.name.lower())
