"""Settings loaded from environment variables.

A ``.env`` file in the working directory is read first (python-dotenv);
variables already set in the environment win.

Environment variables:
    WEATHER_API_KEY: Enables weather routing (optional)
    GEMINI_API_KEY: Enables generative chat (optional)
    GEMINI_MODEL: Gemini model (default: gemini-2.5-flash)
    NOTIVA_GENERATIVE_PROVIDER: Generative backend (default: gemini)
    NOTIVA_HTTP_TIMEOUT: HTTP timeout in seconds (default: 30)
    NOTIVA_USER_AGENT: User-Agent for REST backends (default: Notiva/1.0)
    NOTIVA_WIKIPEDIA_LANG: Wikipedia edition (default: tr)
    NOTIVA_LOG_LEVEL: Logging level (default: WARNING)
"""

import os

from dotenv import load_dotenv
from pydantic import BaseModel, Field


class Settings(BaseModel):
    """Runtime configuration."""

    weather_api_key: str | None = Field(default=None, description="Weather backend credential")
    gemini_api_key: str | None = Field(default=None, description="Generative-chat credential")
    gemini_model: str = Field(default="gemini-2.5-flash")
    generative_provider: str = Field(default="gemini")
    http_timeout: float = Field(default=30.0, gt=0, description="Seconds")
    user_agent: str = Field(default="Notiva/1.0")
    wikipedia_language: str = Field(default="tr")
    log_level: str = Field(default="WARNING")


def load_settings(dotenv: bool = True) -> Settings:
    """Read settings from the environment.

    Args:
        dotenv: Load a ``.env`` file before reading

    Returns:
        Populated Settings
    """
    if dotenv:
        load_dotenv()

    return Settings(
        weather_api_key=os.getenv("WEATHER_API_KEY") or None,
        gemini_api_key=os.getenv("GEMINI_API_KEY") or None,
        gemini_model=os.getenv("GEMINI_MODEL", "gemini-2.5-flash"),
        generative_provider=os.getenv("NOTIVA_GENERATIVE_PROVIDER", "gemini"),
        http_timeout=float(os.getenv("NOTIVA_HTTP_TIMEOUT", "30")),
        user_agent=os.getenv("NOTIVA_USER_AGENT", "Notiva/1.0"),
        wikipedia_language=os.getenv("NOTIVA_WIKIPEDIA_LANG", "tr"),
        log_level=os.getenv("NOTIVA_LOG_LEVEL", "WARNING"),
    )
