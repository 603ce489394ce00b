#!/usr/bin/env python3
"""
id_allocator.py
---------------
In-memory primary key allocation for Places and Notes.

SQLite never assigns ids in this project: callers allocate an id before
inserting, so a Place can be referenced by a Note built in the same flow.
Counters live only in memory and are reseeded from the stored maxima after
every reload, so a restarted process never reissues a persisted id.
"""
from __future__ import annotations

from enum import Enum
from typing import Dict


class EntityType(Enum):
    """Tables whose primary keys come from the allocator."""

    PLACE = "place"
    NOTE = "note"


class IdAllocator:
    """
    One monotonic counter per entity type.

    ``unique_id`` hands out the current value and increments it.
    ``reset_counter`` moves a counter forward past an observed maximum and
    never moves it backward, so a late reseed cannot reissue an id that was
    already handed out.

    Usage:
        allocator = IdAllocator()
        allocator.reset_counter(EntityType.PLACE, 5)
        allocator.unique_id(EntityType.PLACE)  # 6
    """

    def __init__(self) -> None:
        self._next: Dict[EntityType, int] = {entity: 1 for entity in EntityType}

    def unique_id(self, entity_type: EntityType) -> int:
        uid = self._next[entity_type]
        self._next[entity_type] = uid + 1
        return uid

    def reset_counter(self, entity_type: EntityType, observed_max: int) -> None:
        """
        Reseed after a load.

        Args:
            entity_type: Counter to reseed
            observed_max: Largest id present in the store, 0 when empty
        """
        self._next[entity_type] = max(self._next[entity_type], observed_max + 1)

    def peek(self, entity_type: EntityType) -> int:
        """Next id that unique_id would return, without consuming it."""
        return self._next[entity_type]

    def __repr__(self) -> str:
        counters = ", ".join(f"{e.value}={n}" for e, n in self._next.items())
        return f"<IdAllocator({counters})>"
