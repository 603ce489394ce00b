#!/usr/bin/env python3
"""
datastore.py
--------------------
DataStore: the single entry point presentation code uses for Places and Notes.

Keeps in-memory snapshots of every stored Place and Note. Every mutation
goes to the EntityStore first and is followed by a full reload, so after a
call returns ``places`` and ``notes`` mirror exactly what is on disk. The
reload also reseeds the IdAllocator from the stored maxima.

Key Features:
    - Boolean success results; storage errors are logged, never raised
    - Orphan sweep run by the facade itself after every mutation that can
      leave a Place without notes and without the favourite flag
    - Favourite-preserving complete reset
    - "New note for a new location" flow

Usage:
    data = DataStore.open("~/placenotes.db")
    note = data.create_note_for_location("Lunch", "", datetime.now(), location)
    data.set_favourite(note.place_id, True)
    data.delete_note(note.id)
"""
# --- Annotations ---
from __future__ import annotations

# --- Standard library imports ---
from pathlib import Path
from typing import Any, Callable, Iterable, List, Optional, Tuple, Union

# --- Local imports ---
from placenotes.core.exceptions import DatabaseError
from placenotes.core.logging_manager import PlaceNotesLogger, safe_logger
from placenotes.dataclasses import Note, Place
from placenotes.geo.annotations import matches
from placenotes.geo.models import ExternalLocation
from .id_allocator import EntityType, IdAllocator
from .manager import EntityStore


class DataStore:
    """
    Cached, always-consistent view over an EntityStore.

    Attributes:
        store: Underlying EntityStore
        allocator: IdAllocator reseeded on every reload
        places: Snapshot of all stored Places, ordered by id
        notes: Snapshot of all stored Notes, ordered by id
    """

    def __init__(
        self,
        store: EntityStore,
        allocator: Optional[IdAllocator] = None,
        logger: Optional[PlaceNotesLogger] = None,
    ) -> None:
        self.store = store
        self.allocator = allocator if allocator is not None else IdAllocator()
        self.logger = logger if logger is not None else store.logger

        self.places: Tuple[Place, ...] = ()
        self.notes: Tuple[Note, ...] = ()
        self.refresh()

    @classmethod
    def open(
        cls,
        db_path: Union[str, Path],
        log_dir: Optional[Union[str, Path]] = None,
    ) -> "DataStore":
        """Open the EntityStore at ``db_path`` and load it."""
        return cls(EntityStore(db_path, log_dir=log_dir))

    # ---- Reload ----
    def refresh(self) -> None:
        """
        Reload both snapshots and reseed both id counters.

        A failed scan yields an empty snapshot for that table.
        """
        notes = self._load("list_all_notes", self.store.list_all_notes)
        places = self._load("list_all_places", self.store.list_all_places)

        self.notes = tuple(notes)
        self.places = tuple(places)

        self.allocator.reset_counter(
            EntityType.NOTE, max((n.id for n in self.notes), default=0)
        )
        self.allocator.reset_counter(
            EntityType.PLACE, max((p.id for p in self.places), default=0)
        )

    def _load(self, operation: str, loader: Callable[[], List[Any]]) -> List[Any]:
        try:
            return loader()
        except DatabaseError as e:
            safe_logger(self.logger).log_error(e, {"operation": operation})
            return []

    def _mutate(
        self,
        operation: str,
        action: Callable[[], Any],
        sweep: bool = False,
        details: Optional[dict] = None,
        partial: bool = False,
    ) -> bool:
        """
        Run one store mutation, optionally followed by the orphan sweep.

        A failed single-statement mutation leaves the snapshots untouched.
        With ``partial`` the action may have committed some statements
        before failing, so the sweep and reload still run and the call
        reports False. Once the mutation itself succeeded the snapshots are
        always reloaded, even if the sweep then fails.
        """
        logger = safe_logger(self.logger)
        details = details or {}

        success = True
        try:
            action()
        except DatabaseError as e:
            logger.log_error(e, {"operation": operation, **details})
            if not partial:
                return False
            success = False

        if sweep:
            try:
                removed = self.store.clear_unused_places()
                details = {**details, "orphans_removed": removed}
            except DatabaseError as e:
                logger.log_error(e, {"operation": f"{operation}_sweep", **details})
                success = False

        self.refresh()
        logger.log_operation(operation, {**details, "success": success})
        return success

    # ---- Mutations ----
    def add_place(self, place: Place) -> bool:
        return self._mutate(
            "add_place", lambda: self.store.insert_place(place), details={"place_id": place.id}
        )

    def add_note(self, note: Note) -> bool:
        """
        Store a Note attached to an already stored Place.

        Returns:
            False when the Place is unknown or the insert fails
        """
        if self.get_place(note.place_id) is None:
            safe_logger(self.logger).log_warning(
                "Note references unknown place",
                {"note_id": note.id, "place_id": note.place_id},
            )
            return False

        return self._mutate(
            "add_note",
            lambda: self.store.insert_note(note),
            details={"note_id": note.id, "place_id": note.place_id},
        )

    def update_place(self, place: Place) -> bool:
        """Full replace; a Place that loses its favourite flag and has no notes is removed."""
        return self._mutate(
            "update_place",
            lambda: self.store.update_place(place),
            sweep=True,
            details={"place_id": place.id},
        )

    def update_note(self, note: Note) -> bool:
        return self._mutate(
            "update_note", lambda: self.store.update_note(note), details={"note_id": note.id}
        )

    def delete_note(self, note_id: int) -> bool:
        """Delete one Note, then remove its Place if that left it orphaned."""
        return self._mutate(
            "delete_note",
            lambda: self.store.delete_note_by_id(note_id),
            sweep=True,
            details={"note_id": note_id},
        )

    def delete_notes(self, note_ids: Iterable[int]) -> bool:
        """
        Delete several Notes with a single sweep at the end.

        Stops at the first failed delete. Notes deleted before it stay
        deleted, and the sweep and reload still run.
        """
        ids = list(note_ids)

        def _delete_each() -> None:
            for note_id in ids:
                self.store.delete_note_by_id(note_id)

        return self._mutate(
            "delete_notes",
            _delete_each,
            sweep=True,
            details={"note_ids": ids},
            partial=True,
        )

    def clear_unused_places(self) -> bool:
        return self._mutate("clear_unused_places", self.store.clear_unused_places)

    def complete_reset(self) -> bool:
        """
        Delete every Note, then every Place that is not a favourite.

        Favourite Places survive a reset.
        """
        return self._mutate("complete_reset", self.store.clear_all_notes, sweep=True)

    # ---- Flows ----
    def set_favourite(self, place_id: int, is_favourite: bool) -> bool:
        place = self.get_place(place_id)
        if place is None:
            return False
        return self.update_place(place.with_favourite(is_favourite))

    def edit_note(
        self,
        note_id: int,
        title: Optional[str] = None,
        description: Optional[str] = None,
        date: Any = None,
    ) -> bool:
        """
        Change title, description and/or date of a stored Note.

        Raises:
            ValidationError: If a new title is blank or the date is invalid
        """
        note = self.get_note(note_id)
        if note is None:
            return False
        return self.update_note(note.edited(title=title, description=description, date=date))

    def create_note_for_place(
        self,
        title: str,
        description: Optional[str],
        date: Any,
        place: Place,
    ) -> Optional[Note]:
        """
        Attach a new Note to a known Place.

        Returns:
            The stored Note, or None if it could not be stored

        Raises:
            ValidationError: On invalid note input
        """
        note = Note.new(
            self.allocator.unique_id(EntityType.NOTE), title, description, date, place.id
        )
        return note if self.add_note(note) else None

    def create_note_for_location(
        self,
        title: str,
        description: Optional[str],
        date: Any,
        location: ExternalLocation,
    ) -> Optional[Note]:
        """
        Attach a new Note to a search result.

        If a stored Place already matches the location exactly, the note is
        attached to it. Otherwise a non-favourite Place is inserted first.
        When the Place insert fails nothing else is written; when the Note
        insert fails the new Place is swept away again.

        Returns:
            The stored Note, or None

        Raises:
            ValidationError: On invalid note or location input, before
                anything is written
        """
        known = next((p for p in self.places if matches(location, p)), None)
        if known is not None:
            return self.create_note_for_place(title, description, date, known)

        place = Place.new(
            self.allocator.unique_id(EntityType.PLACE),
            location.name,
            location.latitude,
            location.longitude,
            location.categories,
        )
        note = Note.new(
            self.allocator.unique_id(EntityType.NOTE), title, description, date, place.id
        )

        if not self.add_place(place):
            return None
        if not self.add_note(note):
            self.clear_unused_places()
            return None
        return note

    # ---- Lookups ----
    def get_place(self, place_id: int) -> Optional[Place]:
        return next((p for p in self.places if p.id == place_id), None)

    def get_note(self, note_id: int) -> Optional[Note]:
        return next((n for n in self.notes if n.id == note_id), None)

    def notes_for_place(self, place_id: int) -> List[Note]:
        return [n for n in self.notes if n.place_id == place_id]

    @property
    def is_available(self) -> bool:
        """False when the backing store could not be opened."""
        return self.store.is_open

    def close(self) -> None:
        self.store.close()

    def __repr__(self) -> str:
        return f"<DataStore(places={len(self.places)}, notes={len(self.notes)})>"
