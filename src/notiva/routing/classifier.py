"""Rule-based query routing.

Decides which backend should answer a message. Priority is fixed:
canned reply, then generative chat whenever it is usable, then weather,
then encyclopedia, and finally a canned fallback reply.
"""

import logging
from typing import Protocol

from ..availability import BackendType
from ..history import MessageHistoryTracker
from .models import QueryClassification
from .patterns import is_encyclopedia_query, is_standard_response, is_weather_query, normalize

logger = logging.getLogger(__name__)


class AvailabilitySource(Protocol):
    """Anything that can answer whether a backend is usable right now."""

    def is_available(self, backend: BackendType) -> bool: ...


def classify(
    text: str,
    availability: AvailabilitySource,
    history: MessageHistoryTracker | None = None,
) -> QueryClassification:
    """Map a message to the backend that should answer it.

    Args:
        text: Raw user message
        availability: Backend availability (usually an ``AvailabilityRegistry``)
        history: Recent conversation, used for diagnostics only

    Returns:
        The routing decision
    """
    content = normalize(text)

    if is_standard_response(content):
        decision = QueryClassification.STANDARD
    elif availability.is_available(BackendType.GENERATIVE_CHAT):
        decision = QueryClassification.GENERATIVE_CHAT
    elif is_weather_query(content) and availability.is_available(BackendType.WEATHER):
        decision = QueryClassification.WEATHER
    elif availability.is_available(BackendType.ENCYCLOPEDIA) and is_encyclopedia_query(content):
        decision = QueryClassification.ENCYCLOPEDIA
    else:
        decision = QueryClassification.STANDARD

    if logger.isEnabledFor(logging.DEBUG):
        topic = history.detect_topic() if history is not None else None
        logger.debug("Routed %r to %s (topic: %s)", content, decision.value, topic)
    return decision


class QueryClassifier:
    """Binds ``classify`` to a shared availability source and history."""

    def __init__(self, availability: AvailabilitySource, history: MessageHistoryTracker | None = None):
        self._availability = availability
        self._history = history

    def classify(self, text: str) -> QueryClassification:
        return classify(text, self._availability, self._history)
