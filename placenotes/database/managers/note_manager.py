#!/usr/bin/env python3
"""
note_manager.py
--------------------
Statements over the notes table.

Notes reference places through place_id. That column is written once on
insert and never rewritten by update().
"""
from typing import List

from placenotes.dataclasses import Note
from placenotes.database.decorators import DatabaseOperation
from placenotes.database.models import Note as NoteRow
from .base_manager import BaseManager


class NoteManager(BaseManager):
    """Manages rows of the notes table."""

    def insert(self, note: Note) -> None:
        """
        Insert one note with its caller-allocated id.

        Raises:
            StatementError: On a duplicate id or a place_id with no place row
        """
        with DatabaseOperation(
            self.logger, "insert_note", {"note_id": note.id, "place_id": note.place_id}
        ):
            self.session.add(
                NoteRow(
                    id=note.id,
                    title=note.title,
                    description=note.description,
                    date=note.date,
                    place_id=note.place_id,
                )
            )
            self.session.flush()

    def update(self, note: Note) -> int:
        """
        Rewrite title, description and date of the row with ``note.id``.

        Returns:
            Number of rows changed (zero for an unknown id)
        """
        with DatabaseOperation(self.logger, "update_note", {"note_id": note.id}):
            changed = (
                self.session.query(NoteRow)
                .filter(NoteRow.id == note.id)
                .update(
                    {
                        NoteRow.title: note.title,
                        NoteRow.description: note.description,
                        NoteRow.date: note.date,
                    },
                    synchronize_session=False,
                )
            )
            self.session.flush()
            return changed

    def delete_by_id(self, note_id: int) -> int:
        """Remove exactly the matching row. Places are left alone."""
        with DatabaseOperation(self.logger, "delete_note", {"note_id": note_id}):
            removed = (
                self.session.query(NoteRow)
                .filter(NoteRow.id == note_id)
                .delete(synchronize_session=False)
            )
            self.session.flush()
            return removed

    def clear_all(self) -> int:
        with DatabaseOperation(self.logger, "clear_all_notes"):
            return self._delete_all(NoteRow)

    def list_all(self) -> List[Note]:
        with DatabaseOperation(self.logger, "list_all_notes"):
            return [Note.from_database(row) for row in self._get_all(NoteRow)]
