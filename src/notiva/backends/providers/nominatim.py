"""Geocoding client for OpenStreetMap Nominatim."""

from typing import Any

from ..base import GeocodingClient
from ..models import GeocodingResult, GeoLocation
from .http import HttpBackendClient


class NominatimGeocodingClient(HttpBackendClient, GeocodingClient):
    BASE_URL = "https://nominatim.openstreetmap.org/"

    def __init__(self, base_url: str = BASE_URL, limit: int = 1, **kwargs: Any):
        super().__init__(base_url=base_url, **kwargs)
        self._limit = limit

    async def search(self, query: str) -> GeocodingResult:
        response = await self._get(
            "search",
            params={"q": query, "format": "json", "limit": self._limit},
        )
        if not response.is_success:
            return GeocodingResult(success=False, status_code=response.status_code)
        return GeocodingResult(
            success=True,
            status_code=response.status_code,
            results=[GeoLocation.model_validate(item) for item in response.json()],
        )
