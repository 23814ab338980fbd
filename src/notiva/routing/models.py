from enum import Enum


class QueryClassification(str, Enum):
    """Routing decision for a single user message."""

    STANDARD = "standard"
    WEATHER = "weather"
    ENCYCLOPEDIA = "encyclopedia"
    GENERATIVE_CHAT = "generative_chat"


class StandardCategory(str, Enum):
    """Kinds of messages answered with a canned reply instead of a backend."""

    GREETING = "greeting"
    THANKS = "thanks"
    SMALL_TALK = "small_talk"
    INSULT = "insult"
    NONSENSE = "nonsense"
    PROFANITY = "profanity"
    FRUSTRATION = "frustration"
