"""Keyword tables used for lightweight topic detection over chat history."""

TOPIC_MATH = "matematik"
TOPIC_WEATHER = "hava durumu"
TOPIC_GENERAL_KNOWLEDGE = "genel bilgi"
DEFAULT_TOPIC = "general"

# Declaration order breaks ties.
TOPIC_KEYWORDS: dict[str, tuple[str, ...]] = {
    TOPIC_MATH: ("hesapla", "çöz", "sonuç", "formül", "denklem", "integral", "türev", "limit"),
    TOPIC_WEATHER: ("hava", "sıcaklık", "yağmur", "kar", "nem", "rüzgar", "güneş", "fırtına"),
    TOPIC_GENERAL_KNOWLEDGE: ("nedir", "kimdir", "ne zaman", "nerede", "nasıl", "anlat", "açıkla", "tarih"),
}

COMMON_WORDS = frozenset({
    "ve", "veya", "ile", "bu", "şu", "o", "bir", "için", "gibi",
    "de", "da", "ki", "ne", "mi", "mı", "mu", "mü",
})
