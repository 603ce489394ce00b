#!/usr/bin/env python3
"""
explorer.py
-----------
MapExplorer: the map exploration session.

Holds the map centre and the candidate locations from the most recent
places search. Candidates are transient: each completed search replaces
them wholesale and ``clear`` empties them. Searches are neither cancelled
nor ordered, so a slow older search that finishes after a newer one
overwrites the newer results.
"""
from __future__ import annotations

from typing import List, Optional, Sequence, Tuple, Union

from placenotes.core.config import Settings
from placenotes.core.logging_manager import PlaceNotesLogger, safe_logger
from placenotes.core.validators import DataValidator
from placenotes.dataclasses import Place
from .annotations import AnnotationPoint, classify
from .fetchers import CityFetcher, LocationFetcher
from .models import CircleFilter, CityResult, ExternalLocation, LocationCategory


class MapExplorer:
    """
    Map centre, candidate cache and the two fetchers.

    Attributes:
        latitude: Current centre latitude
        longitude: Current centre longitude
        candidates: Results of the last completed places search
    """

    def __init__(
        self,
        settings: Optional[Settings] = None,
        location_fetcher: Optional[LocationFetcher] = None,
        city_fetcher: Optional[CityFetcher] = None,
        logger: Optional[PlaceNotesLogger] = None,
    ) -> None:
        self.settings = settings or Settings()
        self.logger = logger
        self.location_fetcher = location_fetcher or LocationFetcher(
            self.settings.geoapify_api_key,
            timeout=self.settings.request_timeout,
            logger=logger,
        )
        self.city_fetcher = city_fetcher or CityFetcher(
            self.settings.geoapify_api_key,
            timeout=self.settings.request_timeout,
            logger=logger,
        )

        self.latitude = self.settings.home_latitude
        self.longitude = self.settings.home_longitude
        self.candidates: Tuple[ExternalLocation, ...] = ()

    @property
    def centre(self) -> Tuple[float, float]:
        return self.latitude, self.longitude

    def move_to(self, latitude: float, longitude: float) -> None:
        """
        Recentre the map.

        Raises:
            ValidationError: On out-of-range coordinates
        """
        self.latitude, self.longitude = DataValidator.validate_coordinates(
            latitude, longitude
        )

    async def search(self, category: Union[LocationCategory, str]) -> bool:
        """
        Search around the current centre and replace the candidates.

        Returns:
            True when the search produced no candidates (failed or empty)
        """
        category = LocationCategory.from_value(category)
        geo_filter = CircleFilter(
            lon=self.longitude,
            lat=self.latitude,
            radius_metres=self.settings.search_radius_metres,
        )

        locations = await self.location_fetcher.fetch(
            category, geo_filter, self.settings.location_query_limit
        )
        self.candidates = tuple(locations)

        safe_logger(self.logger).log_debug(
            "Candidates replaced",
            {"category": category.value, "count": len(self.candidates)},
        )
        return not self.candidates

    def clear(self) -> None:
        self.candidates = ()

    def annotations(self, places: Sequence[Place]) -> List[AnnotationPoint]:
        return classify(places, self.candidates)

    async def search_cities(self, prefix: str) -> List[CityResult]:
        return await self.city_fetcher.fetch(prefix, self.settings.city_query_limit)
