#!/usr/bin/env python3
"""
fetchers.py
-----------
Clients for the Geoapify places and geocoding services.

Both fetchers are asynchronous and make a single attempt per call. Every
failure (missing key, transport error, HTTP status, undecodable body) is
logged as a FetchError and answered with an empty list, so callers cannot
tell a failed search from one that found nothing.

Usage:
    fetcher = LocationFetcher(api_key)
    locations = await fetcher.fetch(
        LocationCategory.TOURISM, CircleFilter(151.2, -33.88, 5000), limit=40
    )
"""
# --- Annotations ---
from __future__ import annotations

# --- Standard library imports ---
from typing import Any, Callable, Dict, List, Optional, TypeVar

# --- Third party imports ---
import httpx

# --- Local imports ---
from placenotes.core.exceptions import FetchError
from placenotes.core.logging_manager import PlaceNotesLogger, safe_logger
from .models import CityResult, ExternalLocation, GeoFilter, LocationCategory

PLACES_API_URL = "https://api.geoapify.com/v2/places"
GEOCODE_API_URL = "https://api.geoapify.com/v1/geocode/search"
DEFAULT_TIMEOUT = 30.0  # seconds
RESPONSE_LANGUAGE = "en"

T = TypeVar("T")


class GeoapifyClient:
    """
    Shared request and decode logic for the Geoapify endpoints.

    Attributes:
        api_key: Geoapify key sent with every request
        timeout: Request timeout in seconds
        transport: Optional httpx transport (tests pass a MockTransport)
    """

    endpoint: str = ""

    def __init__(
        self,
        api_key: Optional[str],
        timeout: float = DEFAULT_TIMEOUT,
        logger: Optional[PlaceNotesLogger] = None,
        transport: Optional[httpx.AsyncBaseTransport] = None,
    ) -> None:
        self.api_key = api_key
        self.timeout = timeout
        self.logger = logger
        self.transport = transport

    @property
    def is_available(self) -> bool:
        return bool(self.api_key)

    async def _get_features(self, params: Dict[str, Any]) -> List[Dict[str, Any]]:
        """
        GET the endpoint and return the ``features`` list.

        Raises:
            FetchError: On any failure
        """
        if not self.api_key:
            raise FetchError("No Geoapify API key configured")

        query = {**params, "lang": RESPONSE_LANGUAGE, "apiKey": self.api_key}

        try:
            async with httpx.AsyncClient(
                timeout=self.timeout, transport=self.transport
            ) as client:
                response = await client.get(self.endpoint, params=query)
                response.raise_for_status()
            data = response.json()
        except httpx.TimeoutException as e:
            raise FetchError(f"Request timed out: {e}") from e
        except httpx.HTTPStatusError as e:
            raise FetchError(f"HTTP error {e.response.status_code}") from e
        except httpx.HTTPError as e:
            raise FetchError(f"Request failed: {e}") from e
        except ValueError as e:
            raise FetchError(f"Response is not valid JSON: {e}") from e

        features = data.get("features") if isinstance(data, dict) else None
        if not isinstance(features, list):
            raise FetchError("Response has no features list")
        return features

    async def _fetch(
        self,
        operation: str,
        params: Dict[str, Any],
        decode: Callable[[Dict[str, Any]], Optional[T]],
    ) -> List[T]:
        logger = safe_logger(self.logger)

        try:
            features = await self._get_features(params)
        except FetchError as e:
            logger.log_error(e, {"operation": operation, "endpoint": self.endpoint})
            return []

        results = [r for r in (decode(f) for f in features) if r is not None]
        logger.log_operation(
            operation,
            {
                "features": len(features),
                "results": len(results),
                "skipped": len(features) - len(results),
            },
        )
        return results


class LocationFetcher(GeoapifyClient):
    """Nearby places of one category inside a geographic filter."""

    endpoint = PLACES_API_URL

    async def fetch(
        self,
        category: LocationCategory,
        geo_filter: GeoFilter,
        limit: int,
    ) -> List[ExternalLocation]:
        params = {
            "categories": category.value,
            "filter": geo_filter.to_query(),
            "limit": limit,
        }
        return await self._fetch("fetch_locations", params, ExternalLocation.from_feature)


class CityFetcher(GeoapifyClient):
    """Cities whose name matches a free-text prefix."""

    endpoint = GEOCODE_API_URL

    async def fetch(self, prefix: str, limit: int) -> List[CityResult]:
        params = {"text": prefix, "type": "city", "limit": limit}
        return await self._fetch("fetch_cities", params, CityResult.from_feature)
