#!/usr/bin/env python3
"""
base_manager.py
--------------------
Base manager providing the query helpers shared by the table managers.

A manager wraps one SQLAlchemy session and never commits: the EntityStore
opens one session per operation and commits or rolls back around it, so a
manager call is all-or-nothing.

Usage:
    class PlaceManager(BaseManager):
        def insert(self, place: Place) -> None:
            with DatabaseOperation(self.logger, "insert_place"):
                ...
"""
# --- Annotations ---
from __future__ import annotations

# --- Standard library imports ---
from abc import ABC
from typing import Optional, Protocol, Type, TypeVar, List

# --- Third party imports ---
from sqlalchemy.orm import Mapped, Session

# --- Local imports ---
from placenotes.core.logging_manager import PlaceNotesLogger


class HasId(Protocol):
    """Protocol for ORM rows keyed by an integer id."""

    id: Mapped[int]


T = TypeVar("T", bound=HasId)


class BaseManager(ABC):
    """
    Abstract base for table managers.

    Attributes:
        session: SQLAlchemy session for database operations
        logger: Optional logger for operation tracking
    """

    def __init__(self, session: Session, logger: Optional[PlaceNotesLogger] = None):
        self.session = session
        self.logger = logger

    def _get_all(self, model_class: Type[T]) -> List[T]:
        """All rows of a table ordered by primary key."""
        return self.session.query(model_class).order_by(model_class.id).all()

    def _delete_all(self, model_class: Type[T]) -> int:
        """Unconditional table wipe. Returns the number of rows removed."""
        deleted = self.session.query(model_class).delete(synchronize_session=False)
        self.session.flush()
        return deleted
