#!/usr/bin/env python3
"""
models.py
---------
Value types exchanged with the external places and geocoding services.

    LocationCategory   category keys accepted by the places search
    CircleFilter       circular search area
    RectangleFilter    rectangular search area
    ExternalLocation   one place returned by a places search
    CityResult         one city returned by a geocoding search

Both services answer GeoJSON of the shape
``{"features": [{"properties": {...}}, ...]}``; the ``from_feature``
decoders read one entry of ``features``.
"""
from __future__ import annotations

from dataclasses import dataclass, field
from enum import Enum
from typing import Any, Dict, Optional, Tuple, Union

from placenotes.core.validators import DataValidator


class LocationCategory(Enum):
    """Subset of the places search categories offered to the user."""

    ACCOMMODATION = "accommodation"
    CHILDCARE = "childcare"
    CLOTHING = "commercial.clothing"
    COMMERCIAL = "commercial"
    EDUCATION = "education"
    EMERGENCY = "emergency"
    ENTERTAINMENT = "entertainment"
    FOOD_AND_DRINK = "commercial.food_and_drink"
    GOVERNMENT = "office.government"
    HEALTHCARE = "healthcare"
    LAWYER = "office.lawyer"
    LEISURE = "leisure"
    OFFICE = "office"
    PUBLIC_TRANSPORT = "public_transport"
    RELIGION = "religion"
    SERVICE = "service"
    SPORT = "sport"
    TELECOMMUNICATION = "office.telecommunication"
    TOURISM = "tourism"

    @classmethod
    def from_value(cls, value: Union[str, "LocationCategory"]) -> "LocationCategory":
        """
        Look up a category by its service key or its member name.

        Raises:
            ValueError: If nothing matches
        """
        if isinstance(value, cls):
            return value
        key = str(value).strip()
        for member in cls:
            if key == member.value or key.upper() == member.name:
                return member
        raise ValueError(f"Unknown location category: {value!r}")


@dataclass(frozen=True)
class CircleFilter:
    """Search within ``radius_metres`` of a centre point."""

    lon: float
    lat: float
    radius_metres: int

    def to_query(self) -> str:
        return f"circle:{self.lon},{self.lat},{self.radius_metres}"


@dataclass(frozen=True)
class RectangleFilter:
    """Search inside the rectangle spanned by two opposite corners."""

    lon1: float
    lat1: float
    lon2: float
    lat2: float

    def to_query(self) -> str:
        return f"rect:{self.lon1},{self.lat1},{self.lon2},{self.lat2}"


GeoFilter = Union[CircleFilter, RectangleFilter]


def _coordinate(properties: Dict[str, Any], short: str, long: str) -> Optional[float]:
    value = properties.get(short, properties.get(long))
    if isinstance(value, bool):
        return None
    return DataValidator.normalize_float(value)


@dataclass(frozen=True)
class ExternalLocation:
    """
    A place returned by the places search. Never persisted as such.

    Attributes:
        name: Display name
        categories: Service category keys, in service order
        latitude: Latitude in degrees
        longitude: Longitude in degrees
        country: Country name, may be empty
    """

    name: str
    categories: Tuple[str, ...] = field(default_factory=tuple)
    latitude: float = 0.0
    longitude: float = 0.0
    country: str = ""

    def __post_init__(self) -> None:
        # Stored Places hold the trimmed name; matching compares names exactly
        object.__setattr__(self, "name", DataValidator.normalize_string(self.name) or "")
        object.__setattr__(self, "categories", tuple(self.categories))

    @classmethod
    def from_feature(cls, feature: Dict[str, Any]) -> Optional["ExternalLocation"]:
        """
        Decode one GeoJSON feature.

        Returns:
            None when the feature has no name or no usable coordinates
        """
        properties = feature.get("properties") if isinstance(feature, dict) else None
        if not isinstance(properties, dict):
            return None

        name = DataValidator.normalize_string(properties.get("name"))
        lat = _coordinate(properties, "lat", "latitude")
        lon = _coordinate(properties, "lon", "longitude")
        if not name or lat is None or lon is None:
            return None

        raw_categories = properties.get("categories") or ()
        if isinstance(raw_categories, str):
            raw_categories = (raw_categories,)

        return cls(
            name=name,
            categories=DataValidator.normalize_categories(raw_categories),
            latitude=lat,
            longitude=lon,
            country=DataValidator.normalize_string(properties.get("country")) or "",
        )

    def __str__(self) -> str:
        return f"{self.name} ({self.latitude:.5f}, {self.longitude:.5f})"


@dataclass(frozen=True)
class CityResult:
    """A city suggestion used to move the map centre."""

    city: str
    latitude: float
    longitude: float
    country: str = ""

    @classmethod
    def from_feature(cls, feature: Dict[str, Any]) -> Optional["CityResult"]:
        properties = feature.get("properties") if isinstance(feature, dict) else None
        if not isinstance(properties, dict):
            return None

        city = DataValidator.normalize_string(properties.get("city"))
        lat = _coordinate(properties, "lat", "latitude")
        lon = _coordinate(properties, "lon", "longitude")
        if not city or lat is None or lon is None:
            return None

        return cls(
            city=city,
            latitude=lat,
            longitude=lon,
            country=DataValidator.normalize_string(properties.get("country")) or "",
        )

    def __str__(self) -> str:
        return f"{self.city}, {self.country}" if self.country else self.city
