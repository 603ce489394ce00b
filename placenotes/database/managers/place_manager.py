#!/usr/bin/env python3
"""
place_manager.py
--------------------
Statements over the places table.

Key Features:
    - Single-row insert and full-row update keyed by id
    - Orphan sweep: remove non-favourite places no note references
    - Unconditional wipe for hard resets
    - Full scan decoded into Place values

Usage:
    places = PlaceManager(session, logger)
    places.insert(Place(id=1, name="Cafe", latitude=1.0, longitude=2.0))
    removed = places.clear_unused()
"""
from typing import List

from sqlalchemy import select

from placenotes.dataclasses import Place
from placenotes.database.decorators import DatabaseOperation
from placenotes.database.models import Note as NoteRow
from placenotes.database.models import Place as PlaceRow
from .base_manager import BaseManager


class PlaceManager(BaseManager):
    """Manages rows of the places table."""

    def insert(self, place: Place) -> None:
        """
        Insert one place with its caller-allocated id.

        Raises:
            StatementError: If the row cannot be written (e.g. duplicate id)
        """
        with DatabaseOperation(self.logger, "insert_place", {"place_id": place.id}):
            self.session.add(
                PlaceRow(
                    id=place.id,
                    name=place.name,
                    latitude=place.latitude,
                    longitude=place.longitude,
                    categories=list(place.categories),
                    favourite=place.is_favourite,
                )
            )
            self.session.flush()

    def update(self, place: Place) -> int:
        """
        Replace every column of the row with ``place.id``.

        Returns:
            Number of rows changed. Zero when the id is unknown, which is
            not treated as an error.
        """
        with DatabaseOperation(self.logger, "update_place", {"place_id": place.id}):
            changed = (
                self.session.query(PlaceRow)
                .filter(PlaceRow.id == place.id)
                .update(
                    {
                        PlaceRow.name: place.name,
                        PlaceRow.latitude: place.latitude,
                        PlaceRow.longitude: place.longitude,
                        PlaceRow.categories: list(place.categories),
                        PlaceRow.favourite: place.is_favourite,
                    },
                    synchronize_session=False,
                )
            )
            self.session.flush()
            return changed

    def clear_unused(self) -> int:
        """
        Delete every place that is not a favourite and has no notes.

        Returns:
            Number of places removed
        """
        with DatabaseOperation(self.logger, "clear_unused_places"):
            referenced = select(NoteRow.place_id).distinct()
            removed = (
                self.session.query(PlaceRow)
                .filter(PlaceRow.favourite.is_(False))
                .filter(PlaceRow.id.not_in(referenced))
                .delete(synchronize_session=False)
            )
            self.session.flush()
            return removed

    def clear_all(self) -> int:
        """
        Delete every place regardless of favourite status.

        Fails with StatementError while notes still reference places,
        since the foreign key is enforced.
        """
        with DatabaseOperation(self.logger, "clear_all_places"):
            return self._delete_all(PlaceRow)

    def list_all(self) -> List[Place]:
        """Decode every row, ordered by id. An empty table is a valid result."""
        with DatabaseOperation(self.logger, "list_all_places"):
            return [Place.from_database(row) for row in self._get_all(PlaceRow)]
