"""Tests for database decorators and context managers."""
import pytest
from unittest.mock import MagicMock

from sqlalchemy.exc import IntegrityError, SQLAlchemyError

from placenotes.database.decorators import (
    DatabaseOperation,
    handle_db_errors,
    log_database_operation,
)
from placenotes.core.exceptions import DatabaseError, StatementError, StorageOpenError
from placenotes.core.logging_manager import PlaceNotesLogger


class TestDatabaseOperation:
    """Tests for DatabaseOperation context manager."""

    def test_successful_operation(self):
        """DatabaseOperation should log completion on success."""
        mock_logger = MagicMock(spec=PlaceNotesLogger)

        with DatabaseOperation(mock_logger, "test_operation"):
            result = 1 + 1

        assert result == 2
        mock_logger.log_operation.assert_called_once()
        call_args = mock_logger.log_operation.call_args
        assert call_args[0][0] == "test_operation_completed"
        assert call_args[0][1]["success"] is True

    def test_successful_operation_with_none_logger(self):
        """DatabaseOperation should work with None logger (uses NullLogger)."""
        with DatabaseOperation(None, "test_operation"):
            result = 1 + 1

        assert result == 2

    def test_integrity_error_raises_statement_error(self):
        """IntegrityError becomes StatementError."""
        mock_logger = MagicMock(spec=PlaceNotesLogger)

        with pytest.raises(StatementError) as exc_info:
            with DatabaseOperation(mock_logger, "test_operation"):
                raise IntegrityError("statement", {}, Exception("duplicate"))

        assert "Data integrity violation" in str(exc_info.value)
        assert isinstance(exc_info.value, DatabaseError)
        mock_logger.log_error.assert_called_once()

    def test_sqlalchemy_error_raises_statement_error(self):
        """Any other SQLAlchemyError becomes StatementError."""
        mock_logger = MagicMock(spec=PlaceNotesLogger)

        with pytest.raises(StatementError) as exc_info:
            with DatabaseOperation(mock_logger, "test_operation"):
                raise SQLAlchemyError("connection failed")

        assert "Database operation failed" in str(exc_info.value)
        mock_logger.log_error.assert_called_once()

    def test_other_exceptions_propagate(self):
        """DatabaseOperation should propagate non-SQLAlchemy exceptions."""
        mock_logger = MagicMock(spec=PlaceNotesLogger)

        with pytest.raises(ValueError):
            with DatabaseOperation(mock_logger, "test_operation"):
                raise ValueError("invalid value")

        mock_logger.log_error.assert_called_once()

    def test_log_start_option(self):
        """DatabaseOperation should log start when log_start=True."""
        mock_logger = MagicMock(spec=PlaceNotesLogger)

        with DatabaseOperation(mock_logger, "test_operation", log_start=True):
            pass

        mock_logger.log_debug.assert_called_once()
        assert "Starting test_operation" in mock_logger.log_debug.call_args[0][0]

    def test_no_log_start_by_default(self):
        """DatabaseOperation should not log start by default."""
        mock_logger = MagicMock(spec=PlaceNotesLogger)

        with DatabaseOperation(mock_logger, "test_operation"):
            pass

        mock_logger.log_debug.assert_not_called()

    def test_details_are_logged(self):
        """Details passed in are merged into the completion record."""
        mock_logger = MagicMock(spec=PlaceNotesLogger)

        with DatabaseOperation(mock_logger, "insert_place", {"place_id": 7}):
            pass

        details = mock_logger.log_operation.call_args[0][1]
        assert details["place_id"] == 7
        assert isinstance(details["duration_seconds"], float)


class TestHandleDbErrors:
    """Tests for the handle_db_errors decorator."""

    def test_passes_result_through(self):
        @handle_db_errors
        def ok():
            return 42

        assert ok() == 42

    def test_translates_sqlalchemy_error(self):
        @handle_db_errors
        def broken():
            raise SQLAlchemyError("disk I/O error")

        with pytest.raises(StatementError):
            broken()

    def test_database_errors_pass_unchanged(self):
        @handle_db_errors
        def closed():
            raise StorageOpenError("closed")

        with pytest.raises(StorageOpenError):
            closed()


class TestLogDatabaseOperation:
    """Tests for the log_database_operation decorator."""

    class Owner:
        def __init__(self, logger):
            self.logger = logger

        @log_database_operation("do_work")
        def work(self, value):
            return value * 2

        @log_database_operation("fail_work")
        def fail(self):
            raise RuntimeError("boom")

    def test_logs_completion(self):
        mock_logger = MagicMock(spec=PlaceNotesLogger)

        assert self.Owner(mock_logger).work(3) == 6

        mock_logger.log_debug.assert_called_once()
        assert mock_logger.log_operation.call_args[0][0] == "do_work_completed"

    def test_logs_and_reraises_failure(self):
        mock_logger = MagicMock(spec=PlaceNotesLogger)

        with pytest.raises(RuntimeError):
            self.Owner(mock_logger).fail()

        mock_logger.log_error.assert_called_once()
        assert mock_logger.log_error.call_args[0][1]["operation"] == "fail_work"

    def test_works_without_logger(self):
        assert self.Owner(None).work(5) == 10
