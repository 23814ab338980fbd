from .gemini import GeminiChatClient
from .met_no import MetNoWeatherClient
from .nominatim import NominatimGeocodingClient
from .wikipedia import WikipediaClient

__all__ = [
    "GeminiChatClient",
    "MetNoWeatherClient",
    "NominatimGeocodingClient",
    "WikipediaClient",
]
