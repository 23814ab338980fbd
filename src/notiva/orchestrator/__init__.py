"""Backend orchestration module for notiva.

Dispatches classified messages to the weather, encyclopedia and
generative-chat backends and turns every outcome into a reply.
"""

from .manager import BACKOFF_SECONDS, MAX_ATTEMPTS, BackendOrchestrator
from .models import BackendResponse
from .text import (
    DEFAULT_CITY,
    build_prompt,
    clean_message,
    extract_city_name,
    format_weather,
    prepare_search_term,
)

__all__ = [
    "BACKOFF_SECONDS",
    "BackendOrchestrator",
    "BackendResponse",
    "DEFAULT_CITY",
    "MAX_ATTEMPTS",
    "build_prompt",
    "clean_message",
    "extract_city_name",
    "format_weather",
    "prepare_search_term",
]
