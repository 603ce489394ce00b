#!/usr/bin/env python3
"""
decorators.py
--------------------
Shared logging and error translation for database operations.

    DatabaseOperation      context manager used inside managers
    log_database_operation decorator timing a whole method
    handle_db_errors       decorator translating SQLAlchemy errors

SQLAlchemy errors never leave the database package: they are re-raised as
StatementError so callers only deal with the PlaceNotes exception hierarchy.
"""
from __future__ import annotations

from datetime import datetime
from functools import wraps
from typing import Any, Callable, Dict, Optional

from sqlalchemy.exc import IntegrityError, SQLAlchemyError

from placenotes.core.exceptions import DatabaseError, StatementError
from placenotes.core.logging_manager import PlaceNotesLogger, safe_logger


def _translate(error: Exception) -> Exception:
    if isinstance(error, IntegrityError):
        return StatementError(f"Data integrity violation: {error.orig}")
    if isinstance(error, SQLAlchemyError):
        return StatementError(f"Database operation failed: {error}")
    return error


class DatabaseOperation:
    """
    Context manager wrapping one database operation.

    Logs completion with its duration, logs failures with context, and
    converts SQLAlchemy exceptions into StatementError. Other exceptions,
    including DatabaseError subclasses, propagate unchanged.

    Usage:
        with DatabaseOperation(self.logger, "insert_place", {"place_id": 3}):
            self.session.add(row)
            self.session.flush()
    """

    def __init__(
        self,
        logger: Optional[PlaceNotesLogger],
        operation_name: str,
        details: Optional[Dict[str, Any]] = None,
        log_start: bool = False,
    ) -> None:
        self.logger = safe_logger(logger)
        self.operation_name = operation_name
        self.details = details or {}
        self.log_start = log_start
        self.start_time: Optional[datetime] = None

    def __enter__(self) -> "DatabaseOperation":
        self.start_time = datetime.now()
        if self.log_start:
            self.logger.log_debug(f"Starting {self.operation_name}", self.details)
        return self

    def __exit__(self, exc_type, exc_val, exc_tb) -> bool:
        duration = (datetime.now() - self.start_time).total_seconds()

        if exc_val is None:
            self.logger.log_operation(
                f"{self.operation_name}_completed",
                {**self.details, "duration_seconds": duration, "success": True},
            )
            return False

        self.logger.log_error(
            exc_val,
            {
                **self.details,
                "operation": self.operation_name,
                "duration_seconds": duration,
            },
        )

        translated = _translate(exc_val)
        if translated is not exc_val:
            raise translated from exc_val
        return False


def log_database_operation(operation_name: str) -> Callable:
    """
    Decorator logging start, completion and failure of a method.

    The decorated method's owner must expose an optional ``logger``
    attribute.

    Args:
        operation_name: Name used in log records
    """

    def decorator(function: Callable) -> Callable:
        @wraps(function)
        def wrapper(self, *args, **kwargs):
            logger = safe_logger(getattr(self, "logger", None))
            start_time = datetime.now()
            operation_id = f"{operation_name}_{start_time.strftime('%Y%m%d_%H%M%S_%f')}"

            logger.log_debug(
                f"Starting {operation_name}",
                {"operation_id": operation_id, "args_count": len(args)},
            )

            try:
                result = function(self, *args, **kwargs)
            except Exception as e:
                logger.log_error(
                    e,
                    {
                        "operation": operation_name,
                        "operation_id": operation_id,
                        "duration_seconds": (datetime.now() - start_time).total_seconds(),
                    },
                )
                raise

            logger.log_operation(
                f"{operation_name}_completed",
                {
                    "operation_id": operation_id,
                    "duration_seconds": (datetime.now() - start_time).total_seconds(),
                    "success": True,
                },
            )
            return result

        return wrapper

    return decorator


def handle_db_errors(function: Callable) -> Callable:
    """
    Decorator converting SQLAlchemy errors into StatementError.

    DatabaseError subclasses raised by the wrapped function pass through.
    """

    @wraps(function)
    def wrapper(*args, **kwargs):
        try:
            return function(*args, **kwargs)
        except DatabaseError:
            raise
        except SQLAlchemyError as e:
            raise _translate(e) from e

    return wrapper
