#!/usr/bin/env python3
"""
exceptions.py
--------------------
Custom exception classes for the PlaceNotes project.

Exception Hierarchy:
    Exception (built-in)
    ├── DatabaseError - Base for all storage errors
    │   ├── StorageOpenError - Backing file could not be created or opened
    │   ├── SchemaError - Table creation failed
    │   └── StatementError - A single statement failed to prepare or execute
    ├── ValidationError - Data validation failures
    ├── FetchError - External geocoding/places request failures
    └── ConfigError - Malformed settings file

Usage:
    from placenotes.core.exceptions import DatabaseError, ValidationError

    try:
        store.insert_note(note)
    except StatementError as e:
        logger.error(f"Insert failed: {e}")
"""


class DatabaseError(Exception):
    """
    Base exception for storage errors.

    Catch this to handle any error raised by the entity store, or catch
    one of the subclasses for finer handling.

    See Also:
        StorageOpenError, SchemaError, StatementError
    """

    pass


class StorageOpenError(DatabaseError):
    """
    Exception raised when the backing database file cannot be used.

    This failure is fatal for the session: once the store has failed to
    open, every subsequent operation raises this error instead of touching
    the engine.

    Examples:
        >>> raise StorageOpenError("Cannot open /data/placenotes.db: permission denied")
    """

    pass


class SchemaError(DatabaseError):
    """
    Exception for table creation failures.

    The store treats a schema failure like an open failure and switches to
    degraded mode.
    """

    pass


class StatementError(DatabaseError):
    """
    Exception for a single failed statement.

    Local to one operation: a failed insert, update, delete or scan leaves
    the rest of the store usable. No partial effect is committed.

    Examples:
        >>> raise StatementError("insert_place failed: UNIQUE constraint failed: places.id")
    """

    pass


class ValidationError(Exception):
    """
    Exception for data validation failures.

    Raised when input data fails validation checks:
    - Empty place names or note titles
    - Coordinates out of range
    - Unparsable timestamps

    Examples:
        >>> raise ValidationError("Latitude must be between -90 and 90: 91.0")
    """

    pass


class FetchError(Exception):
    """
    Exception for external search failures.

    Collapses transport, HTTP status and decoding errors from the geocoding
    and places services. It never escapes a fetcher: the fetcher logs it and
    answers with an empty result, indistinguishable from a true empty answer.
    """

    pass


class ConfigError(Exception):
    """
    Exception for settings file problems.

    Raised when the YAML settings file exists but cannot be parsed, or when
    a known key holds a value of the wrong type.
    """

    pass
