"""
Geography Models
----------------

Models:
    - Place: A named point the user attached notes to or marked as favourite

A Place row is kept only while it is a favourite or referenced by a Note;
the orphan sweep in PlaceManager.clear_unused removes everything else.
"""
from __future__ import annotations

from typing import TYPE_CHECKING, List

from sqlalchemy import Boolean, Float, Text
from sqlalchemy.orm import Mapped, mapped_column, relationship

from .base import Base, CategoryList

if TYPE_CHECKING:
    from .core import Note


class Place(Base):
    """
    Represents a known geographic place.

    Primary keys are assigned by the IdAllocator, never by SQLite, so the
    column is declared without autoincrement.

    Attributes:
        id: Primary key (caller supplied)
        name: Display name
        latitude: Latitude in degrees
        longitude: Longitude in degrees
        categories: Ordered tags, stored comma-joined
        favourite: Pinned by the user

    Relationships:
        notes: One-to-many with Note (no cascade to notes on delete)
    """

    __tablename__ = "places"

    id: Mapped[int] = mapped_column(primary_key=True, autoincrement=False)
    name: Mapped[str] = mapped_column(Text, nullable=False)
    latitude: Mapped[float] = mapped_column(Float, nullable=False)
    longitude: Mapped[float] = mapped_column(Float, nullable=False)
    categories: Mapped[List[str]] = mapped_column(
        CategoryList, nullable=False, default=list
    )
    favourite: Mapped[bool] = mapped_column(
        Boolean, nullable=False, default=False
    )

    notes: Mapped[List["Note"]] = relationship(
        "Note", back_populates="place"
    )

    def __repr__(self) -> str:
        return f"<Place(id={self.id}, name={self.name!r}, favourite={self.favourite})>"
