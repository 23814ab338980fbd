"""Abstract interfaces for the answer backends.

This module hides which services answer weather, place-lookup,
encyclopedia and generative-chat requests. Implementations handle:
- Endpoint URLs and request parameters
- Authentication
- Payload parsing into the models in ``models.py``

HTTP clients report upstream failures through the ``success`` flag of
their result models; transport errors propagate as exceptions.

Supports the async context manager protocol:
    async with client:
        result = await client.get_weather(41.0, 28.9)
"""

from abc import ABC, abstractmethod
from typing import Any

from .models import EncyclopediaResult, GeocodingResult, WeatherResult


class BackendClient(ABC):
    """Common lifecycle for all backend clients."""

    @abstractmethod
    async def close(self) -> None:
        """Close any open connections or resources."""
        pass

    async def __aenter__(self) -> "BackendClient":
        return self

    async def __aexit__(self, exc_type: Any, exc_val: Any, exc_tb: Any) -> None:
        await self.close()


class WeatherClient(BackendClient):
    @abstractmethod
    async def get_weather(self, lat: float, lon: float) -> WeatherResult:
        """Fetch the forecast for a coordinate.

        Args:
            lat: Latitude in degrees
            lon: Longitude in degrees

        Returns:
            WeatherResult with the parsed forecast on success
        """
        pass


class GeocodingClient(BackendClient):
    @abstractmethod
    async def search(self, query: str) -> GeocodingResult:
        """Resolve free text such as ``"ankara, Turkey"`` to coordinates."""
        pass


class EncyclopediaClient(BackendClient):
    @abstractmethod
    async def get_summary(self, title: str) -> EncyclopediaResult:
        """Fetch the summary of the page with the given title."""
        pass


class GenerativeChatClient(BackendClient):
    """Text generation backend.

    ``initialize`` must be called with a credential before
    ``generate_content``.
    """

    @abstractmethod
    def initialize(self, api_key: str) -> None:
        """Set up the underlying model client for the given credential."""
        pass

    @abstractmethod
    async def generate_content(self, prompt: str) -> str:
        """Generate a reply for a prompt.

        Raises:
            GenerativeChatError: If generation fails or returns no text
        """
        pass
