#!/usr/bin/env python3
"""
manager.py
--------------------
EntityStore: durable storage of Places and Notes in SQLite.

Handles:
    - Engine and session factory setup
    - Schema creation on open (existing tables are kept)
    - One transaction per operation, committed or rolled back as a unit
    - Degraded mode when the file or schema cannot be set up

Core Operations:
    Places:
        - insert_place / update_place
        - clear_unused_places: orphan sweep
        - clear_all_places: hard wipe
        - list_all_places
    Notes:
        - insert_note / update_note / delete_note_by_id
        - clear_all_notes
        - list_all_notes

Notes
==============
- Ids are allocated by the caller (see id_allocator.py)
- Operations are never grouped into a larger transaction: a flow such as
  "insert place, then insert note" can stop half way and the caller owns
  the retry
- Foreign keys are enforced on every connection
"""
# --- Annotations ---
from __future__ import annotations

# --- Standard library imports ---
from contextlib import contextmanager
from datetime import datetime
from pathlib import Path
from typing import Callable, Iterator, List, Optional, TypeVar, Union

# --- Third party ---
from sqlalchemy import Engine, create_engine, event
from sqlalchemy.exc import SQLAlchemyError
from sqlalchemy.orm import Session, sessionmaker

# --- Local imports ---
from placenotes.core.exceptions import (
    DatabaseError,
    SchemaError,
    StorageOpenError,
)
from placenotes.core.logging_manager import PlaceNotesLogger, safe_logger
from placenotes.dataclasses import Note, Place
from .decorators import handle_db_errors, log_database_operation
from .managers import NoteManager, PlaceManager
from .models import Base

R = TypeVar("R")


def _enable_foreign_keys(dbapi_connection, connection_record) -> None:
    cursor = dbapi_connection.cursor()
    cursor.execute("PRAGMA foreign_keys = ON")
    cursor.close()


class EntityStore:
    """
    Durable CRUD over the places and notes tables.

    Attributes:
        db_path: Filesystem path to the SQLite database file
        engine: SQLAlchemy engine (None in degraded mode)
        failure: The open/schema failure that put the store in degraded
            mode, or None when the store is usable

    Usage:
        store = EntityStore("~/placenotes.db")
        store.insert_place(place)
        places = store.list_all_places()
    """

    # ---- Initialization ----
    def __init__(
        self,
        db_path: Union[str, Path],
        log_dir: Optional[Union[str, Path]] = None,
        logger: Optional[PlaceNotesLogger] = None,
    ) -> None:
        """
        Open (or create) the database. Never raises.

        Args:
            db_path: Path to the SQLite file
            log_dir: Directory for log files (optional)
            logger: Ready-made logger, takes precedence over log_dir
        """
        self.db_path = Path(db_path).expanduser()

        if logger is not None:
            self.logger: Optional[PlaceNotesLogger] = logger
        elif log_dir:
            self.logger = PlaceNotesLogger(
                Path(log_dir).expanduser(), component_name="database"
            )
        else:
            self.logger = None

        self.engine: Optional[Engine] = None
        self.SessionLocal: Optional[sessionmaker] = None
        self.failure: Optional[DatabaseError] = None

        try:
            self._setup_engine()
            self.initialize_schema()
        except DatabaseError as e:
            self.failure = e
            safe_logger(self.logger).log_error(
                e, {"operation": "database_init", "db_path": str(self.db_path)}
            )
            if self.engine is not None:
                self.engine.dispose()
            self.engine = None
            self.SessionLocal = None
        else:
            safe_logger(self.logger).log_operation(
                "database_init_complete", {"db_path": str(self.db_path)}
            )

    def _setup_engine(self) -> None:
        """Create the engine and check that the file can be opened."""
        try:
            self.db_path.parent.mkdir(parents=True, exist_ok=True)

            self.engine = create_engine(f"sqlite:///{self.db_path}", echo=False)
            event.listen(self.engine, "connect", _enable_foreign_keys)

            # Engines connect lazily; force the open now
            with self.engine.connect():
                pass
        except (OSError, SQLAlchemyError) as e:
            raise StorageOpenError(f"Cannot open database {self.db_path}: {e}") from e

        self.SessionLocal = sessionmaker(
            bind=self.engine,
            autoflush=True,
            expire_on_commit=False,
        )

    @log_database_operation("initialize_schema")
    def initialize_schema(self) -> None:
        """Create missing tables. Existing tables and rows are untouched."""
        try:
            Base.metadata.create_all(bind=self.engine)
        except SQLAlchemyError as e:
            raise SchemaError(f"Could not create tables: {e}") from e

    @property
    def is_open(self) -> bool:
        return self.failure is None

    def _require_open(self) -> None:
        if self.failure is not None:
            raise StorageOpenError(f"Database unavailable: {self.failure}")

    # ---- Session Management ----
    @contextmanager
    def session_scope(self) -> Iterator[Session]:
        """
        Provide a transactional scope around one operation.

        Commits on success, rolls back on any exception and re-raises it.

        Raises:
            StorageOpenError: In degraded mode
        """
        self._require_open()

        session = self.SessionLocal()
        session_id = datetime.now().strftime("%Y%m%d_%H%M%S_%f")
        logger = safe_logger(self.logger)
        logger.log_debug("session_start", {"session_id": session_id})

        try:
            yield session
            session.commit()
            logger.log_debug("session_commit", {"session_id": session_id})
        except Exception as e:
            session.rollback()
            logger.log_debug(
                "session_rollback", {"session_id": session_id, "error": str(e)}
            )
            raise
        finally:
            session.close()

    @handle_db_errors
    def _run(self, action: Callable[[PlaceManager, NoteManager], R]) -> R:
        # Commit failures surface here as SQLAlchemyError
        with self.session_scope() as session:
            return action(
                PlaceManager(session, self.logger), NoteManager(session, self.logger)
            )

    # ---- Places ----
    def insert_place(self, place: Place) -> None:
        """
        Insert a Place under its already allocated id.

        Raises:
            StatementError: Duplicate id or other write failure (no partial effect)
            StorageOpenError: In degraded mode
        """
        self._run(lambda places, notes: places.insert(place))

    def update_place(self, place: Place) -> int:
        """
        Full-row replace keyed by id.

        Returns:
            Rows changed; 0 when the id does not exist (still a success)
        """
        changed = self._run(lambda places, notes: places.update(place))
        if changed == 0:
            safe_logger(self.logger).log_debug(
                "update_place matched no row", {"place_id": place.id}
            )
        return changed

    def clear_unused_places(self) -> int:
        """
        Delete every non-favourite Place no Note references.

        Returns:
            Number of places removed
        """
        return self._run(lambda places, notes: places.clear_unused())

    def clear_all_places(self) -> int:
        return self._run(lambda places, notes: places.clear_all())

    def list_all_places(self) -> List[Place]:
        """
        Full scan of the places table.

        Raises:
            StatementError: On a scan-level failure. Zero rows is a success.
        """
        return self._run(lambda places, notes: places.list_all())

    # ---- Notes ----
    def insert_note(self, note: Note) -> None:
        """
        Insert a Note under its already allocated id.

        The referenced Place must already be stored.

        Raises:
            StatementError: Duplicate id, unknown place_id or write failure
        """
        self._run(lambda places, notes: notes.insert(note))

    def update_note(self, note: Note) -> int:
        """Rewrite title, description and date; place_id is left as stored."""
        changed = self._run(lambda places, notes: notes.update(note))
        if changed == 0:
            safe_logger(self.logger).log_debug(
                "update_note matched no row", {"note_id": note.id}
            )
        return changed

    def delete_note_by_id(self, note_id: int) -> int:
        """Remove the matching Note only. No cascade to its Place."""
        return self._run(lambda places, notes: notes.delete_by_id(note_id))

    def clear_all_notes(self) -> int:
        return self._run(lambda places, notes: notes.clear_all())

    def list_all_notes(self) -> List[Note]:
        return self._run(lambda places, notes: notes.list_all())

    # ----- Context Manager Support -----
    def close(self) -> None:
        """Dispose of the engine. Further operations raise StorageOpenError."""
        if self.engine is not None:
            self.engine.dispose()
        self.engine = None
        self.SessionLocal = None
        if self.failure is None:
            self.failure = StorageOpenError("Database has been closed")

    def __enter__(self) -> "EntityStore":
        return self

    def __exit__(self, exc_type, exc_val, exc_tb) -> None:
        del exc_type, exc_val, exc_tb
        self.close()
