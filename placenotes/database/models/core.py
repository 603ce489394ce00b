"""
Core Models
-----------

Models:
    - Note: A titled, dated entry attached to exactly one Place
"""
from __future__ import annotations

from datetime import datetime
from typing import TYPE_CHECKING

from sqlalchemy import ForeignKey, Text
from sqlalchemy.orm import Mapped, mapped_column, relationship

from .base import Base, IsoTimestamp

if TYPE_CHECKING:
    from .geography import Place


class Note(Base):
    """
    Represents a user note.

    Attributes:
        id: Primary key (caller supplied)
        title: Short title
        description: Free text body
        date: Timestamp stored as ISO text
        place_id: Foreign key to places.id, fixed after creation

    Relationships:
        place: Many-to-one with Place
    """

    __tablename__ = "notes"

    id: Mapped[int] = mapped_column(primary_key=True, autoincrement=False)
    title: Mapped[str] = mapped_column(Text, nullable=False, default="")
    description: Mapped[str] = mapped_column(Text, nullable=False, default="")
    date: Mapped[datetime] = mapped_column(IsoTimestamp, nullable=False, index=True)
    place_id: Mapped[int] = mapped_column(
        ForeignKey("places.id"), nullable=False, index=True
    )

    place: Mapped["Place"] = relationship("Place", back_populates="notes")

    def __repr__(self) -> str:
        return f"<Note(id={self.id}, title={self.title!r}, place_id={self.place_id})>"
