from dataclasses import dataclass
from typing import Any

from .base import EncyclopediaClient, GenerativeChatClient, GeocodingClient, WeatherClient
from .providers import GeminiChatClient, MetNoWeatherClient, NominatimGeocodingClient, WikipediaClient


@dataclass
class BackendClients:
    """The set of clients the orchestrator talks to."""

    weather: WeatherClient
    geocoding: GeocodingClient
    encyclopedia: EncyclopediaClient
    generative_chat: GenerativeChatClient

    async def close(self) -> None:
        for client in (self.weather, self.geocoding, self.encyclopedia, self.generative_chat):
            await client.close()


def create_generative_chat_client(provider: str = "gemini", **config: Any) -> GenerativeChatClient:
    """Create a generative-chat client.

    Args:
        provider: Provider type (only 'gemini' for now)
        **config: Provider-specific configuration
            For Gemini:
                - model: str (default: 'gemini-2.5-flash')
                - temperature: float (default: 0.7)

    Returns:
        Uninitialized client; call ``initialize(api_key)`` before use

    Raises:
        ValueError: If provider type is not supported
    """
    if provider.lower() == "gemini":
        return GeminiChatClient(**config)

    raise ValueError(
        f"Unsupported provider: {provider}. "
        f"Supported providers: 'gemini'"
    )


def create_backend_clients(settings) -> BackendClients:
    """Build the default clients from a ``notiva.config.Settings``."""
    http_options = {
        "timeout": settings.http_timeout,
        "user_agent": settings.user_agent,
    }
    return BackendClients(
        weather=MetNoWeatherClient(**http_options),
        geocoding=NominatimGeocodingClient(**http_options),
        encyclopedia=WikipediaClient(language=settings.wikipedia_language, **http_options),
        generative_chat=create_generative_chat_client(
            settings.generative_provider, model=settings.gemini_model
        ),
    )
