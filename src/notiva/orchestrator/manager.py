"""Backend orchestration.

Calls the backend chosen by the classifier, retries where the backend
allows it, formats the result, and records failures in the availability
registry. No exception escapes these operations: every failure becomes
a localized reply with ``succeeded=False``.

Failure handling per backend:
- Weather: geocoding and weather API failures give a fallback reply and
  never mark the backend as errored.
- Encyclopedia: single attempt; a non-success response marks the backend.
- Generative chat: up to ``max_attempts`` attempts with linear backoff;
  exhausting them marks the backend.
"""

import asyncio
import logging
from collections.abc import Awaitable, Callable

from ..availability import AvailabilityRegistry, BackendType
from ..backends import BackendClients, GeoLocation
from ..errors import (
    BackendUnavailableError,
    CredentialMissingError,
    GenerativeChatError,
    LocationNotFoundError,
    RetryExhaustedError,
)
from ..history import Message, MessageHistoryTracker
from ..routing import QueryClassification, classify, detect_standard_category, normalize
from . import messages
from .models import BackendResponse
from .text import (
    build_prompt,
    clean_message,
    extract_city_name,
    format_weather,
    prepare_search_term,
)

logger = logging.getLogger(__name__)

MAX_ATTEMPTS = 2
BACKOFF_SECONDS = 1.0
GEOCODING_COUNTRY = "Turkey"

Sleep = Callable[[float], Awaitable[None]]


class BackendOrchestrator:
    """Answers messages using the backend the classifier picks.

    Args:
        clients: Backend clients to call
        registry: Shared availability state (read for routing, written on failure)
        history: Shared recent-message buffer (read for prompts and routing)
        sleep: Awaitable delay used between generative-chat attempts
        max_attempts: Total generative-chat attempts per message
        backoff_seconds: Delay unit; the wait before attempt n+1 is n units
    """

    def __init__(
        self,
        clients: BackendClients,
        registry: AvailabilityRegistry,
        history: MessageHistoryTracker,
        sleep: Sleep = asyncio.sleep,
        max_attempts: int = MAX_ATTEMPTS,
        backoff_seconds: float = BACKOFF_SECONDS,
    ):
        if max_attempts < 1:
            raise ValueError("max_attempts must be at least 1")
        self._clients = clients
        self._registry = registry
        self._history = history
        self._sleep = sleep
        self._max_attempts = max_attempts
        self._backoff = backoff_seconds
        self._handlers: dict[QueryClassification, Callable[[str], Awaitable[BackendResponse]]] = {
            QueryClassification.STANDARD: self.respond_standard,
            QueryClassification.WEATHER: self.query_weather,
            QueryClassification.ENCYCLOPEDIA: self.query_encyclopedia,
            QueryClassification.GENERATIVE_CHAT: self.query_generative_chat,
        }

    @property
    def clients(self) -> BackendClients:
        return self._clients

    @property
    def registry(self) -> AvailabilityRegistry:
        return self._registry

    @property
    def history(self) -> MessageHistoryTracker:
        return self._history

    def classify(self, text: str) -> QueryClassification:
        return classify(text, self._registry, self._history)

    async def answer(self, text: str) -> BackendResponse:
        """Classify a message and dispatch it to the selected backend."""
        classification = self.classify(text)
        response = await self.dispatch(classification, text)
        return response.model_copy(update={"classification": classification})

    async def dispatch(self, classification: QueryClassification, text: str) -> BackendResponse:
        return await self._handlers[classification](text)

    async def respond_standard(self, text: str) -> BackendResponse:
        """Canned reply for greetings, thanks, etc., or the no-backend fallback."""
        category = detect_standard_category(normalize(text))
        if category is None:
            return BackendResponse(text=messages.NO_BACKEND, succeeded=False)
        return BackendResponse(text=messages.STANDARD_REPLIES[category], succeeded=True)

    # Weather

    async def query_weather(self, text: str) -> BackendResponse:
        city = extract_city_name(text)
        try:
            location = await self._geocode(city)
        except LocationNotFoundError:
            return BackendResponse(text=messages.LOCATION_NOT_FOUND, succeeded=False)

        logger.debug("Weather query: city=%s, lat=%s, lon=%s", city, location.lat, location.lon)
        try:
            result = await self._clients.weather.get_weather(location.lat, location.lon)
            if not result.success:
                raise BackendUnavailableError("weather", result.status_code)
        except BackendUnavailableError as e:
            logger.warning("%s", e)
            return BackendResponse(text=messages.WEATHER_UNAVAILABLE, succeeded=False)
        except Exception as e:
            logger.warning("Weather query failed: %s", e, exc_info=True)
            return BackendResponse(text=messages.WEATHER_ERROR, succeeded=False)

        forecast = result.body
        if forecast is None or not forecast.properties.timeseries:
            return BackendResponse(text=messages.WEATHER_NOT_FOUND, succeeded=False)
        return BackendResponse(
            text=format_weather(city, forecast.properties.timeseries[0]),
            succeeded=True,
        )

    async def _geocode(self, city: str) -> GeoLocation:
        """Resolve a city to coordinates with a single attempt.

        Raises:
            LocationNotFoundError: On any failure or an empty result
        """
        try:
            result = await self._clients.geocoding.search(f"{city}, {GEOCODING_COUNTRY}")
        except Exception as e:
            logger.warning("Geocoding %r failed: %s", city, e)
            raise LocationNotFoundError(city) from e

        if not result.success or not result.results:
            raise LocationNotFoundError(city)
        return result.results[0]

    # Encyclopedia

    async def query_encyclopedia(self, text: str) -> BackendResponse:
        search_term = prepare_search_term(text)
        if not search_term:
            return BackendResponse(text=messages.ENCYCLOPEDIA_NOT_FOUND, succeeded=False)

        logger.debug("Encyclopedia query: %s", search_term)
        try:
            result = await self._clients.encyclopedia.get_summary(search_term)
        except Exception as e:
            logger.warning("Encyclopedia query failed: %s", e, exc_info=True)
            self._registry.mark_error(BackendType.ENCYCLOPEDIA)
            return BackendResponse(text=messages.ENCYCLOPEDIA_ERROR, succeeded=False)

        if not result.success:
            logger.warning("%s", BackendUnavailableError("encyclopedia", result.status_code))
            self._registry.mark_error(BackendType.ENCYCLOPEDIA)
            return BackendResponse(text=messages.ENCYCLOPEDIA_UNAVAILABLE, succeeded=False)

        summary = result.body
        if summary is not None and summary.extract.strip():
            return BackendResponse(text=f"{summary.title}:\n{summary.extract}", succeeded=True)
        return BackendResponse(text=messages.ENCYCLOPEDIA_NOT_FOUND, succeeded=False)

    # Generative chat

    async def query_generative_chat(self, text: str) -> BackendResponse:
        query = clean_message(text)
        if not query:
            return BackendResponse(text=messages.EMPTY_MESSAGE, succeeded=False)

        prompt = build_prompt(query, self._prompt_history(query))
        try:
            api_key = self._registry.credentials.require(BackendType.GENERATIVE_CHAT)
        except CredentialMissingError as e:
            logger.info("%s", e)
            return BackendResponse(text=messages.CREDENTIAL_MISSING, succeeded=False)

        try:
            self._clients.generative_chat.initialize(api_key)
            reply = await self._generate_with_retry(prompt)
        except RetryExhaustedError as e:
            logger.error("Generative chat gave up: %s", e)
            self._registry.mark_error(BackendType.GENERATIVE_CHAT)
            error = str(e.last_error) if e.last_error else messages.UNKNOWN_ERROR
            return BackendResponse(text=messages.GENERATIVE_FAILED.format(error=error), succeeded=False)
        except Exception as e:
            logger.error("Unexpected generative chat error: %s", e, exc_info=True)
            self._registry.mark_error(BackendType.GENERATIVE_CHAT)
            return BackendResponse(text=messages.UNEXPECTED_ERROR, succeeded=False)

        return BackendResponse(text=reply, succeeded=True)

    def _prompt_history(self, query: str) -> list[Message]:
        """Recent history minus the message being answered, if already recorded.

        The session records the user message before dispatch, so with a full
        buffer at most ``max_size - 1`` earlier turns reach the prompt; the
        question itself is rendered once, as the final ``Human:`` line.
        """
        history = self._history.recent()
        if history and history[-1].is_from_user and clean_message(history[-1].text) == query:
            history = history[:-1]
        return history

    async def _generate_with_retry(self, prompt: str) -> str:
        """Call the generative backend until it returns text.

        Raises:
            RetryExhaustedError: When every attempt failed
        """
        client = self._clients.generative_chat
        last_error: Exception | None = None

        for attempt in range(1, self._max_attempts + 1):
            try:
                logger.debug("Generative chat request (attempt %d)", attempt)
                reply = await client.generate_content(prompt)
                if not reply or not reply.strip():
                    raise GenerativeChatError(messages.EMPTY_RESPONSE)
                return reply.strip()
            except Exception as e:
                last_error = e
                logger.info("Generative chat attempt %d/%d failed: %s", attempt, self._max_attempts, e)
                if attempt < self._max_attempts:
                    await self._sleep(self._backoff * attempt)

        raise RetryExhaustedError(self._max_attempts, last_error)
