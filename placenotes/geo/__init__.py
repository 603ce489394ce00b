"""
External location search and map exploration.

- models: categories, search filters and result types
- fetchers: async Geoapify clients
- annotations: Known/Candidate map points and the merge of the two
- explorer: map centre plus the transient candidate list
"""
from .annotations import AnnotationPoint, Candidate, Known, classify, matches
from .explorer import MapExplorer
from .fetchers import CityFetcher, LocationFetcher
from .models import (
    CircleFilter,
    CityResult,
    ExternalLocation,
    LocationCategory,
    RectangleFilter,
)

__all__ = [
    "AnnotationPoint",
    "Candidate",
    "CircleFilter",
    "CityFetcher",
    "CityResult",
    "ExternalLocation",
    "Known",
    "LocationCategory",
    "LocationFetcher",
    "MapExplorer",
    "RectangleFilter",
    "classify",
    "matches",
]
