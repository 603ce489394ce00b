"""
Base Classes and Column Types
-----------------------------

Foundational ORM pieces for the PlaceNotes database.

Classes:
    - Base: Declarative base for all SQLAlchemy models
    - CategoryList: Ordered tag sequence stored as comma-joined TEXT
    - IsoTimestamp: datetime stored as "YYYY-MM-DDTHH:MM:SS" TEXT
"""
# --- Annotations ---
from __future__ import annotations

# --- Standard library imports ---
from datetime import datetime
from typing import Any, List, Optional, Sequence

# --- Third party ---
from sqlalchemy import Text, TypeDecorator
from sqlalchemy.orm import DeclarativeBase

# --- Local imports ---
from placenotes.core.validators import DataValidator


class Base(DeclarativeBase):
    """
    Base class for all ORM models.

    Provides the metadata object used to create the schema on open.
    """

    pass


class CategoryList(TypeDecorator):
    """
    Ordered list of category strings persisted as one TEXT column.

    Written as a comma-joined string and split back on read. Empty pieces
    are dropped, so an empty list round-trips. A category that itself
    contains a comma does not survive the round trip.
    """

    impl = Text
    cache_ok = True

    def process_bind_param(
        self, value: Optional[Sequence[str]], dialect: Any
    ) -> Optional[str]:
        if value is None:
            return ""
        return DataValidator.join_categories(list(value))

    def process_result_value(self, value: Optional[str], dialect: Any) -> List[str]:
        return DataValidator.split_categories(value)


class IsoTimestamp(TypeDecorator):
    """
    Naive datetime persisted as "YYYY-MM-DDTHH:MM:SS" TEXT.

    A stored value that cannot be parsed decodes to the current time
    rather than failing the whole scan.
    """

    impl = Text
    cache_ok = True

    def process_bind_param(self, value: Optional[datetime], dialect: Any) -> Optional[str]:
        if value is None:
            return None
        return DataValidator.format_timestamp(value)

    def process_result_value(self, value: Optional[str], dialect: Any) -> datetime:
        parsed = DataValidator.parse_timestamp(value)
        if parsed is None:
            return datetime.now().replace(microsecond=0)
        return parsed
