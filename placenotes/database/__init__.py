#!/usr/bin/env python3
"""
PlaceNotes Database Package
---------------------------
Persistence for Places and Notes.

- EntityStore: SQLite-backed CRUD, one transaction per operation
- DataStore: cached facade used by presentation code
- IdAllocator: caller-side primary key allocation
"""

from placenotes.core.exceptions import (
    DatabaseError,
    SchemaError,
    StatementError,
    StorageOpenError,
)
from .datastore import DataStore
from .decorators import (
    DatabaseOperation,
    handle_db_errors,
    log_database_operation,
)
from .id_allocator import EntityType, IdAllocator
from .manager import EntityStore

__all__ = [
    # Main classes
    "DataStore",
    "EntityStore",
    "IdAllocator",
    "EntityType",
    # Exceptions
    "DatabaseError",
    "SchemaError",
    "StatementError",
    "StorageOpenError",
    # Decorators
    "DatabaseOperation",
    "handle_db_errors",
    "log_database_operation",
]
