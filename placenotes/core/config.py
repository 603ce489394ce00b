#!/usr/bin/env python3
"""
config.py
---------
User settings for PlaceNotes, read from an optional YAML file.

Example placenotes.yaml:

    geoapify_api_key: "..."
    city_query_limit: 5
    location_query_limit: 40
    search_radius_metres: 5000
    home_latitude: -33.8837
    home_longitude: 151.2006
    request_timeout: 30

Every key is optional. The API key falls back to the GEOAPIFY_API_KEY
environment variable when the file does not set it.
"""
# --- Annotations ---
from __future__ import annotations

# --- Standard library imports ---
import os
from dataclasses import dataclass, fields
from pathlib import Path
from typing import Any, Dict, Optional, Union

# --- Third party imports ---
import yaml

# --- Local imports ---
from .exceptions import ConfigError

API_KEY_ENV = "GEOAPIFY_API_KEY"


@dataclass(frozen=True)
class Settings:
    """
    Resolved settings.

    Attributes:
        geoapify_api_key: Key for the places and geocoding services
        city_query_limit: Maximum city suggestions per lookup
        location_query_limit: Maximum candidate locations per search
        search_radius_metres: Radius of the circular search filter
        home_latitude: Initial map centre latitude
        home_longitude: Initial map centre longitude
        request_timeout: HTTP timeout in seconds
    """

    geoapify_api_key: Optional[str] = None
    city_query_limit: int = 5
    location_query_limit: int = 40
    search_radius_metres: int = 5000
    home_latitude: float = -33.8837
    home_longitude: float = 151.2006
    request_timeout: float = 30.0


def _coerce(name: str, expected: type, value: Any) -> Any:
    # bool is an int subclass; reject it for numeric settings
    if isinstance(value, bool):
        raise ConfigError(f"Setting '{name}' must be {expected.__name__}, got bool")
    if expected is float and isinstance(value, (int, float)):
        return float(value)
    if expected is int and isinstance(value, int):
        return value
    if expected is str and isinstance(value, str):
        return value
    raise ConfigError(
        f"Setting '{name}' must be {expected.__name__}, got {type(value).__name__}"
    )


def load_settings(path: Optional[Union[str, Path]] = None) -> Settings:
    """
    Load settings from a YAML file.

    Args:
        path: Settings file. A missing file yields defaults.

    Returns:
        Settings instance

    Raises:
        ConfigError: If the file cannot be parsed, is not a mapping, or holds
            a value of the wrong type. Unknown keys are ignored.
    """
    data: Dict[str, Any] = {}

    if path is not None:
        config_path = Path(path).expanduser()
        if config_path.is_file():
            try:
                with open(config_path, "r", encoding="utf-8") as f:
                    loaded = yaml.safe_load(f)
            except yaml.YAMLError as e:
                raise ConfigError(f"Cannot parse settings file {config_path}: {e}")

            if loaded is None:
                loaded = {}
            if not isinstance(loaded, dict):
                raise ConfigError(
                    f"Settings file {config_path} must contain a mapping"
                )
            data = loaded

    expected_types = {
        "geoapify_api_key": str,
        "city_query_limit": int,
        "location_query_limit": int,
        "search_radius_metres": int,
        "home_latitude": float,
        "home_longitude": float,
        "request_timeout": float,
    }

    values: Dict[str, Any] = {}
    for field in fields(Settings):
        if field.name in data and data[field.name] is not None:
            values[field.name] = _coerce(
                field.name, expected_types[field.name], data[field.name]
            )

    if not values.get("geoapify_api_key"):
        values["geoapify_api_key"] = os.environ.get(API_KEY_ENV) or None

    return Settings(**values)
