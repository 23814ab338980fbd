"""Message history module for notiva.

Provides the bounded buffer of recent messages the router and the
generative-chat prompt builder read from.
"""

from .models import Message
from .topics import DEFAULT_TOPIC, TOPIC_GENERAL_KNOWLEDGE, TOPIC_MATH, TOPIC_WEATHER
from .tracker import MAX_HISTORY_SIZE, MessageHistoryTracker

__all__ = [
    "DEFAULT_TOPIC",
    "MAX_HISTORY_SIZE",
    "Message",
    "MessageHistoryTracker",
    "TOPIC_GENERAL_KNOWLEDGE",
    "TOPIC_MATH",
    "TOPIC_WEATHER",
]
