"""Text helpers for the backend handlers: cleaning, extraction, formatting."""

import re

from ..backends.models import TimeseriesItem
from ..history import Message
from ..routing import normalize
from . import messages

DEFAULT_CITY = "istanbul"
KNOWN_CITIES = (
    "istanbul", "ankara", "izmir", "bursa", "antalya",
    "adana", "konya", "gaziantep", "şanlıurfa", "mersin",
)

_LOCATIVE = r"(?:ilinde|ilinin|ilimizin|şehrinde|şehrinin|'da|'de|'ta|'te|kentinde|kentinin)"
_GENITIVE = r"(?:'nin|'nın|'nun|'nün)"

# Each pattern captures the place phrase in group 1.
CITY_PATTERNS = (
    re.compile(rf"(.*?){_LOCATIVE}.*?hava.*"),
    re.compile(rf".*?hava.*?(?:durumu|nasıl)(.*?){_LOCATIVE}"),
    re.compile(rf"(.*?){_GENITIVE}.*?hava.*"),
)

_QUESTION_WORDS = re.compile(r"(nedir|kimdir|ne demek|nerede|ne zaman|kim|kimin|hangi)(\?)?")
_TOPIC_WORDS = re.compile(r"hakkında|konusunda|bilgi")
_WHITESPACE = re.compile(r"\s+")

PROMPT_HISTORY_LIMIT = 5


def clean_message(message: str) -> str:
    """Join non-blank trimmed lines with single spaces and collapse whitespace."""
    lines = (line.strip() for line in message.split("\n"))
    joined = " ".join(line for line in lines if line)
    return _WHITESPACE.sub(" ", joined).strip()


def extract_city_name(query: str) -> str:
    """Find the city a weather question is about.

    Tries the suffix patterns first ("ankara'da hava", "hava durumu
    izmir ilinde", "bursa'nın havası"), keeping the last word of the
    captured phrase. Falls back to a list of large cities, then to
    ``DEFAULT_CITY``.
    """
    content = normalize(query).replace("’", "'")

    for pattern in CITY_PATTERNS:
        match = pattern.search(content)
        if match:
            words = match.group(1).split()
            if words:
                city = words[-1].strip("?!.,;:")
                if city:
                    return city

    for city in KNOWN_CITIES:
        if city in content:
            return city

    return DEFAULT_CITY


def prepare_search_term(query: str) -> str:
    """Strip question and topic words to leave the encyclopedia title."""
    term = _QUESTION_WORDS.sub("", normalize(query))
    term = _TOPIC_WORDS.sub("", term)
    return _WHITESPACE.sub(" ", term).strip()


def build_prompt(query: str, history: list[Message]) -> str:
    """Render recent history and the new question as a Human/Assistant transcript."""
    lines = []
    for message in history[-PROMPT_HISTORY_LIMIT:]:
        content = clean_message(message.text)
        if content:
            speaker = "Human" if message.is_from_user else "Assistant"
            lines.append(f"{speaker}: {content}\n")
    lines.append(f"Human: {query}\nAssistant:")
    return "".join(lines)


def _value(value: float | None) -> str:
    return "-" if value is None else f"{value:g}"


def format_weather(city: str, current: TimeseriesItem) -> str:
    """Render the first forecast step as a multi-line summary."""
    details = current.data.instant.details
    next_hour = current.data.next_1_hours

    lines = [
        f"{city.capitalize()} için hava durumu:",
        f"Sıcaklık: {_value(details.air_temperature)}°C",
        f"Nem: {_value(details.relative_humidity)}%",
        f"Rüzgar Hızı: {_value(details.wind_speed)} m/s",
        f"Rüzgar Yönü: {_value(details.wind_from_direction)}°",
        f"Bulutluluk: {_value(details.cloud_area_fraction)}%",
    ]
    if next_hour and next_hour.details and next_hour.details.precipitation_amount is not None:
        lines.append(f"Yağış Miktarı (1 saat): {_value(next_hour.details.precipitation_amount)} mm")
    condition = next_hour.summary.symbol_code if next_hour and next_hour.summary else None
    lines.append(f"Durum: {condition or messages.WEATHER_CONDITION_UNKNOWN}")
    return "\n".join(lines)
