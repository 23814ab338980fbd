"""Google Gemini generative-chat client.

Uses the official Google GenAI SDK for async generation.
Reference: https://github.com/googleapis/python-genai

Note: Gemini can return empty responses due to safety filtering. They
are reported as errors here; retrying is the orchestrator's job.
"""

import logging
from typing import Any

from google import genai
from google.genai import types

from ...errors import GenerativeChatError
from ..base import GenerativeChatClient

logger = logging.getLogger(__name__)

DEFAULT_MODEL = "gemini-2.5-flash"

# Relaxed so everyday chat is not blocked
DEFAULT_SAFETY_SETTINGS = [
    types.SafetySetting(category="HARM_CATEGORY_HARASSMENT", threshold="BLOCK_ONLY_HIGH"),
    types.SafetySetting(category="HARM_CATEGORY_HATE_SPEECH", threshold="BLOCK_ONLY_HIGH"),
    types.SafetySetting(category="HARM_CATEGORY_SEXUALLY_EXPLICIT", threshold="BLOCK_ONLY_HIGH"),
    types.SafetySetting(category="HARM_CATEGORY_DANGEROUS_CONTENT", threshold="BLOCK_ONLY_HIGH"),
]


class GeminiChatClient(GenerativeChatClient):
    """Google Gemini implementation of ``GenerativeChatClient``.

    Hidden design decisions:
    - Google GenAI client initialization (deferred until a key is known)
    - Generation config and safety settings
    - Extracting text from candidates
    """

    def __init__(
        self,
        model: str = DEFAULT_MODEL,
        temperature: float = 0.7,
        max_tokens: int | None = None,
        **client_kwargs: Any
    ):
        """Initialize Gemini client settings.

        Args:
            model: Model name (gemini-2.5-flash, gemini-2.5-pro, ...)
            temperature: Sampling temperature
            max_tokens: Optional cap on output tokens
            **client_kwargs: Additional kwargs for ``genai.Client``
        """
        self._model = model
        self._temperature = temperature
        self._max_tokens = max_tokens
        self._client_kwargs = client_kwargs
        self._client: genai.Client | None = None
        self._api_key: str | None = None

    @property
    def model(self) -> str:
        return self._model

    @property
    def is_initialized(self) -> bool:
        return self._client is not None

    def initialize(self, api_key: str) -> None:
        if self._client is not None and api_key == self._api_key:
            return
        logger.debug("Initializing Gemini model %s", self._model)
        self._client = genai.Client(api_key=api_key, **self._client_kwargs)
        self._api_key = api_key

    def _build_config(self) -> types.GenerateContentConfig:
        config = types.GenerateContentConfig(
            temperature=self._temperature,
            safety_settings=DEFAULT_SAFETY_SETTINGS,
        )
        if self._max_tokens is not None:
            config.max_output_tokens = self._max_tokens
        return config

    def _extract_content(self, response) -> str:
        """Extract text content from a Gemini response.

        Returns:
            Text content or empty string
        """
        if response.candidates:
            candidate = response.candidates[0]
            if candidate.content and candidate.content.parts:
                texts = [part.text for part in candidate.content.parts if getattr(part, "text", None)]
                if texts:
                    return "".join(texts)

        try:
            return response.text or ""
        except (ValueError, AttributeError):
            return ""

    async def generate_content(self, prompt: str) -> str:
        if self._client is None:
            raise GenerativeChatError("Model not initialized")

        try:
            response = await self._client.aio.models.generate_content(
                model=self._model,
                contents=prompt,
                config=self._build_config(),
            )
        except Exception as e:
            raise GenerativeChatError(f"Gemini API error: {e}") from e

        text = self._extract_content(response)
        if not text:
            raise GenerativeChatError("Empty response received")
        return text

    async def close(self) -> None:
        """Drop the SDK client; it holds no connections that need closing."""
        self._client = None
        self._api_key = None
