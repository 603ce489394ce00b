#!/usr/bin/env python3
"""
annotations.py
--------------
Merge stored Places with the latest search candidates into map points.

A map point is either Known (a stored Place) or Candidate (a search result
that no stored Place matches). Nothing here touches the store.
"""
from __future__ import annotations

from dataclasses import dataclass
from typing import List, Sequence, Tuple, Union

from placenotes.dataclasses import Place
from .models import ExternalLocation


@dataclass(frozen=True)
class Known:
    """Map point for a stored Place."""

    place: Place

    @property
    def name(self) -> str:
        return self.place.name

    @property
    def coordinates(self) -> Tuple[float, float]:
        return self.place.latitude, self.place.longitude

    @property
    def categories(self) -> Tuple[str, ...]:
        return self.place.categories


@dataclass(frozen=True)
class Candidate:
    """Map point for a search result not yet stored."""

    location: ExternalLocation

    @property
    def name(self) -> str:
        return self.location.name

    @property
    def coordinates(self) -> Tuple[float, float]:
        return self.location.latitude, self.location.longitude

    @property
    def categories(self) -> Tuple[str, ...]:
        return self.location.categories


AnnotationPoint = Union[Known, Candidate]


def matches(candidate: ExternalLocation, place: Place) -> bool:
    """
    True when a candidate is the same point as a stored Place.

    Compares name, latitude and longitude with exact equality. Categories
    are ignored since the service may change them over time.
    """
    return (
        candidate.name == place.name
        and candidate.latitude == place.latitude
        and candidate.longitude == place.longitude
    )


def classify(
    places: Sequence[Place], candidates: Sequence[ExternalLocation]
) -> List[AnnotationPoint]:
    """
    Build the map points for one render.

    Returns:
        One Known per Place in input order, followed by one Candidate per
        candidate that matches no Place, in input order
    """
    known: List[AnnotationPoint] = [Known(place) for place in places]
    unmatched: List[AnnotationPoint] = [
        Candidate(c) for c in candidates if not any(matches(c, p) for p in places)
    ]
    return known + unmatched
