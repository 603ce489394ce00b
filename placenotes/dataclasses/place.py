#!/usr/bin/env python3
"""
place.py
--------
A named geographic point a user attaches notes to or marks as favourite.

A Place row exists in the store only while it is a favourite or at least
one Note references it.
"""
from __future__ import annotations

from dataclasses import dataclass, field, replace
from typing import Any, Iterable, Tuple

from placenotes.core.validators import DataValidator


@dataclass(frozen=True)
class Place:
    """
    Immutable snapshot of a Place row.

    Attributes:
        id: Allocator-assigned primary key
        name: Display name
        latitude: Latitude in degrees
        longitude: Longitude in degrees
        categories: Ordered free-form tags (e.g. 'catering.cafe')
        is_favourite: Whether the user pinned this place
    """

    id: int
    name: str
    latitude: float
    longitude: float
    categories: Tuple[str, ...] = field(default_factory=tuple)
    is_favourite: bool = False

    def __post_init__(self) -> None:
        # Accept any iterable of tags but always hold a tuple
        object.__setattr__(self, "categories", tuple(self.categories))

    @classmethod
    def from_database(cls, db_place: Any) -> "Place":
        """Build a Place from a placenotes.database.models.Place row."""
        return cls(
            id=int(db_place.id),
            name=db_place.name,
            latitude=float(db_place.latitude),
            longitude=float(db_place.longitude),
            categories=tuple(db_place.categories or ()),
            is_favourite=bool(db_place.favourite),
        )

    @classmethod
    def new(
        cls,
        place_id: int,
        name: str,
        latitude: float,
        longitude: float,
        categories: Iterable[str] = (),
        is_favourite: bool = False,
    ) -> "Place":
        """
        Validate user or search input and build a Place.

        Raises:
            ValidationError: On a blank name or out-of-range coordinates
        """
        lat, lon = DataValidator.validate_coordinates(latitude, longitude)
        return cls(
            id=place_id,
            name=DataValidator.validate_required_text(name, "name"),
            latitude=lat,
            longitude=lon,
            categories=DataValidator.normalize_categories(categories),
            is_favourite=is_favourite,
        )

    def with_favourite(self, is_favourite: bool) -> "Place":
        return replace(self, is_favourite=is_favourite)

    def __str__(self) -> str:
        marker = " ♥" if self.is_favourite else ""
        return f"{self.name} ({self.latitude:.5f}, {self.longitude:.5f}){marker}"
