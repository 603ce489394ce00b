#!/usr/bin/env python3
"""
note.py
-------
A titled, dated free-text entry attached to exactly one Place.
"""
from __future__ import annotations

from dataclasses import dataclass, replace
from datetime import datetime
from typing import Any, Optional

from placenotes.core.exceptions import ValidationError
from placenotes.core.validators import DataValidator


@dataclass(frozen=True)
class Note:
    """
    Immutable snapshot of a Note row.

    Attributes:
        id: Allocator-assigned primary key
        title: Short title
        description: Free text body
        date: When the note is about (seconds precision)
        place_id: Id of the Place this note is attached to. Fixed at creation.
    """

    id: int
    title: str
    description: str
    date: datetime
    place_id: int

    @classmethod
    def from_database(cls, db_note: Any) -> "Note":
        """Build a Note from a placenotes.database.models.Note row."""
        return cls(
            id=int(db_note.id),
            title=db_note.title or "",
            description=db_note.description or "",
            date=db_note.date,
            place_id=int(db_note.place_id),
        )

    @classmethod
    def new(
        cls,
        note_id: int,
        title: str,
        description: Optional[str],
        date: Any,
        place_id: int,
    ) -> "Note":
        """
        Validate user input and build a Note.

        Raises:
            ValidationError: On a blank title or unparsable date
        """
        return cls(
            id=note_id,
            title=DataValidator.validate_required_text(title, "title"),
            description=(description or "").strip(),
            date=_require_date(date),
            place_id=place_id,
        )

    def edited(
        self,
        title: Optional[str] = None,
        description: Optional[str] = None,
        date: Any = None,
    ) -> "Note":
        """
        Return a copy with new title, description and/or date.

        The place reference is carried over unchanged.
        """
        changes = {}
        if title is not None:
            changes["title"] = DataValidator.validate_required_text(title, "title")
        if description is not None:
            changes["description"] = description.strip()
        if date is not None:
            changes["date"] = _require_date(date)
        return replace(self, **changes)


def _require_date(value: Any) -> datetime:
    parsed = DataValidator.parse_timestamp(value)
    if parsed is None:
        raise ValidationError(f"Invalid date: {value!r}")
    return parsed
