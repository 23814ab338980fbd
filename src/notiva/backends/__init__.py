"""Backend client module for notiva.

Hides which external services answer weather, geocoding, encyclopedia
and generative-chat requests.
"""

from .base import (
    BackendClient,
    EncyclopediaClient,
    GenerativeChatClient,
    GeocodingClient,
    WeatherClient,
)
from .factory import BackendClients, create_backend_clients, create_generative_chat_client
from .models import (
    EncyclopediaResult,
    EncyclopediaSummary,
    GeocodingResult,
    GeoLocation,
    WeatherForecast,
    WeatherResult,
)
from .providers import GeminiChatClient, MetNoWeatherClient, NominatimGeocodingClient, WikipediaClient

__all__ = [
    "BackendClient",
    "BackendClients",
    "EncyclopediaClient",
    "EncyclopediaResult",
    "EncyclopediaSummary",
    "GeminiChatClient",
    "GenerativeChatClient",
    "GeoLocation",
    "GeocodingClient",
    "GeocodingResult",
    "MetNoWeatherClient",
    "NominatimGeocodingClient",
    "WeatherClient",
    "WeatherForecast",
    "WeatherResult",
    "WikipediaClient",
    "create_backend_clients",
    "create_generative_chat_client",
]
