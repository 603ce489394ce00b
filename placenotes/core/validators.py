#!/usr/bin/env python3
"""
validators.py
--------------------
Validation, normalization and text codecs shared by the store, the fetchers
and the CLI.

Storage codecs:
    - Timestamps are persisted as "YYYY-MM-DDTHH:MM:SS" text
    - Category sequences are persisted as a comma-joined string
"""
from __future__ import annotations

from datetime import date, datetime
from typing import Any, Iterable, List, Optional, Sequence, Tuple

from .exceptions import ValidationError

TIMESTAMP_FORMAT = "%Y-%m-%dT%H:%M:%S"
CATEGORY_DELIMITER = ","


class DataValidator:
    """Centralized data validation for PlaceNotes operations."""

    @staticmethod
    def normalize_string(value: Any) -> Optional[str]:
        """
        Strip surrounding whitespace and collapse empty strings to None.

        Args:
            value: Value to normalize

        Returns:
            Normalized string or None
        """
        if value is None:
            return None
        text = str(value).strip()
        return text or None

    @staticmethod
    def normalize_float(value: Any) -> Optional[float]:
        """Convert value to float, returning None for empty or unparsable input."""
        if value is None or value == "":
            return None
        try:
            return float(value)
        except (TypeError, ValueError):
            return None

    @staticmethod
    def validate_required_text(value: Any, field_name: str) -> str:
        """
        Require a non-empty string.

        Raises:
            ValidationError: If the value is missing or blank
        """
        text = DataValidator.normalize_string(value)
        if text is None:
            raise ValidationError(f"Required field '{field_name}' missing or empty")
        return text

    @staticmethod
    def validate_coordinates(latitude: Any, longitude: Any) -> Tuple[float, float]:
        """
        Check a latitude/longitude pair.

        Returns:
            (latitude, longitude) as floats

        Raises:
            ValidationError: If either value is missing or out of range
        """
        lat = DataValidator.normalize_float(latitude)
        lon = DataValidator.normalize_float(longitude)
        if lat is None or lon is None:
            raise ValidationError(f"Invalid coordinates: ({latitude}, {longitude})")
        if not -90.0 <= lat <= 90.0:
            raise ValidationError(f"Latitude must be between -90 and 90: {lat}")
        if not -180.0 <= lon <= 180.0:
            raise ValidationError(f"Longitude must be between -180 and 180: {lon}")
        return lat, lon

    # ----- Timestamp codec -----
    @staticmethod
    def format_timestamp(value: datetime) -> str:
        """Encode a datetime for storage (seconds precision, no zone)."""
        return value.strftime(TIMESTAMP_FORMAT)

    @staticmethod
    def parse_timestamp(value: Any) -> Optional[datetime]:
        """
        Decode a stored or user-supplied timestamp.

        Accepts datetime, date (midnight), the storage format, or a bare
        ISO date. Aware datetimes are converted to naive local time, since
        stored timestamps carry no zone. Returns None when the value cannot
        be parsed.
        """
        if isinstance(value, datetime):
            if value.tzinfo is not None:
                value = value.astimezone().replace(tzinfo=None)
            return value.replace(microsecond=0)
        if isinstance(value, date):
            return datetime(value.year, value.month, value.day)
        if not isinstance(value, str):
            return None

        text = value.strip()
        for fmt in (TIMESTAMP_FORMAT, "%Y-%m-%d %H:%M:%S", "%Y-%m-%dT%H:%M", "%Y-%m-%d"):
            try:
                return datetime.strptime(text, fmt)
            except ValueError:
                continue
        return None

    # ----- Category codec -----
    @staticmethod
    def normalize_categories(categories: Optional[Iterable[Any]]) -> Tuple[str, ...]:
        """Strip each category and drop blanks, preserving order."""
        if not categories:
            return ()
        cleaned = (DataValidator.normalize_string(c) for c in categories)
        return tuple(c for c in cleaned if c)

    @staticmethod
    def join_categories(categories: Sequence[str]) -> str:
        return CATEGORY_DELIMITER.join(categories)

    @staticmethod
    def split_categories(value: Optional[str]) -> List[str]:
        """Split a stored category string, dropping empty pieces."""
        if not value:
            return []
        return [part for part in value.split(CATEGORY_DELIMITER) if part]
