"""Keyword lists and regular expressions used for routing.

Keyword checks are plain substring containment. Regexes are matched
against the whole (already lower-cased and trimmed) message.
"""

import re

from .models import StandardCategory

GREETING_KEYWORDS = (
    "merhaba", "selam", "hey", "hi", "hello", "günaydın", "iyi sabahlar",
    "iyi akşamlar", "iyi geceler", "hoşça kal", "görüşürüz", "bye", "bb", "güle güle",
)

THANKS_KEYWORDS = (
    "teşekkür", "teşekkürler", "sağol", "eyvallah", "eyv", "tşk", "teşekkür ederim",
    "çok teşekkürler", "sağ ol", "sağolasın",
)

# Ordered: the first matching category names the message.
STANDARD_KEYWORDS: tuple[tuple[StandardCategory, tuple[str, ...]], ...] = (
    (StandardCategory.GREETING, GREETING_KEYWORDS),
    (StandardCategory.THANKS, THANKS_KEYWORDS),
)

STANDARD_PATTERNS: tuple[tuple[StandardCategory, re.Pattern[str]], ...] = (
    (StandardCategory.SMALL_TALK, re.compile(r".*(nasılsın|naber|ne haber).*")),
    (StandardCategory.INSULT, re.compile(r".*(aptal|salak|mal|gerizekalı|beyinsiz).*")),
    (StandardCategory.NONSENSE, re.compile(r".*(saçmalık|saçma|anlamsız|boş|sacma).*")),
    (StandardCategory.PROFANITY, re.compile(r".*(küfür|küfr|mk|aq|amk|sg|siktir).*")),
    (StandardCategory.FRUSTRATION, re.compile(r".*(bıktım|usandım|sıkıldım|of|ahh|yapma|etme).*")),
)

WEATHER_KEYWORDS = (
    "hava", "hava durumu", "yağmur", "kar", "sıcaklık", "nem", "rüzgar", "güneş", "bulut",
    "fırtına", "yağış", "derece", "hissedilen", "meteoroloji", "tahmin", "yağacak mı",
    "hava nasıl", "bugün hava", "yarın hava", "sıcak mı", "soğuk mu", "şemsiye", "don",
    "dolu", "sis", "puslu", "parçalı bulutlu", "açık hava", "kapalı hava", "gök gürültüsü",
    "şimşek", "kasırga", "tayfun", "sel", "sağanak", "lodos", "poyraz", "meltem",
)

WEATHER_PATTERNS = (
    re.compile(r".*(hava|yağmur|kar|sıcaklık|derece).*ne.*(olacak|olur|durumda).*"),
    re.compile(r".*(bugün|yarın|hafta|pazartesi|salı|çarşamba|perşembe|cuma|cumartesi|pazar).*hava.*"),
    re.compile(r".*\w+'[dt][ae]\s+hava.*"),
    re.compile(r".*(kaç|ne kadar).*(derece|sıcaklık).*"),
)

ENCYCLOPEDIA_PATTERNS = (
    re.compile(r".*\b(nedir|kimdir|ne demek|kim|kimin|hangi|nerede|ne zaman)\b.*\??"),
    re.compile(r".*\b(hakkında|konusunda)\b.*bilgi.*"),
    re.compile(r".*\b(tanımı|anlamı|açıklaması)\b.*"),
)


def normalize(text: str) -> str:
    """Lower-case and trim, mapping the Turkish dotted capital I to ``i``."""
    return text.replace("İ", "i").lower().strip()


def _full_match(patterns, text: str) -> bool:
    return any(pattern.fullmatch(text) for pattern in patterns)


def detect_standard_category(text: str) -> StandardCategory | None:
    """Return the canned-reply category of a normalized message, if any."""
    for category, keywords in STANDARD_KEYWORDS:
        if any(keyword in text for keyword in keywords):
            return category
    for category, pattern in STANDARD_PATTERNS:
        if pattern.fullmatch(text):
            return category
    return None


def is_standard_response(text: str) -> bool:
    return detect_standard_category(text) is not None


def is_weather_query(text: str) -> bool:
    return any(keyword in text for keyword in WEATHER_KEYWORDS) or _full_match(WEATHER_PATTERNS, text)


def is_encyclopedia_query(text: str) -> bool:
    return _full_match(ENCYCLOPEDIA_PATTERNS, text)
