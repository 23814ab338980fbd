"""Bounded recent-message buffer with simple text analytics.

Only the last few messages are kept; older ones are evicted first-in,
first-out. Analytics are substring based and case-insensitive.
"""

import re
import threading
from collections import Counter

from .models import Message
from .topics import COMMON_WORDS, DEFAULT_TOPIC, TOPIC_KEYWORDS

MAX_HISTORY_SIZE = 5

_NON_WORD = re.compile(r"[^\w\s]")
_WHITESPACE = re.compile(r"\s+")


class MessageHistoryTracker:
    """Keeps the most recent messages of a conversation.

    Invariant: never holds more than ``max_size`` messages.
    """

    def __init__(self, max_size: int = MAX_HISTORY_SIZE):
        if max_size < 1:
            raise ValueError("max_size must be at least 1")
        self._max_size = max_size
        self._messages: list[Message] = []
        self._lock = threading.Lock()

    @property
    def max_size(self) -> int:
        return self._max_size

    def __len__(self) -> int:
        return len(self._messages)

    def append(self, message: Message) -> None:
        """Add a message at the tail, evicting the oldest past capacity."""
        with self._lock:
            self._messages.append(message)
            if len(self._messages) > self._max_size:
                del self._messages[0]

    def recent(self) -> list[Message]:
        """Snapshot of the buffer, oldest first."""
        return list(self._messages)

    def recent_user_messages(self) -> list[Message]:
        return [m for m in self._messages if m.is_from_user]

    def recent_bot_messages(self) -> list[Message]:
        return [m for m in self._messages if not m.is_from_user]

    def contains_keyword(self, keyword: str) -> bool:
        """Case-insensitive substring match over all buffered texts."""
        needle = keyword.lower()
        return any(needle in m.text.lower() for m in self._messages)

    def contains_any_topic(self, topics: list[str]) -> bool:
        return any(self.contains_keyword(topic) for topic in topics)

    def most_frequent_words(self, exclude_common_words: bool = True) -> dict[str, int]:
        """Count words across the buffer.

        Args:
            exclude_common_words: Drop Turkish stop words from the counts

        Returns:
            Mapping of word to count, most frequent first
        """
        excluded = COMMON_WORDS if exclude_common_words else frozenset()
        counts: Counter[str] = Counter()
        for message in self._messages:
            cleaned = _NON_WORD.sub(" ", message.text.lower())
            counts.update(
                word for word in _WHITESPACE.split(cleaned)
                if len(word) > 2 and word not in excluded
            )
        return dict(counts.most_common())

    def detect_topic(self) -> str:
        """Guess the conversation topic from keyword hits.

        Each category scores one point per keyword present anywhere in the
        buffer. The highest score wins, earlier categories win ties, and
        ``"general"`` is returned when nothing matched.
        """
        best_topic = DEFAULT_TOPIC
        best_score = 0
        for topic, keywords in TOPIC_KEYWORDS.items():
            score = sum(1 for keyword in keywords if self.contains_keyword(keyword))
            if score > best_score:
                best_topic, best_score = topic, score
        return best_topic

    def clear(self) -> None:
        with self._lock:
            self._messages.clear()
