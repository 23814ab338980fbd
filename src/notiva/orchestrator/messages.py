"""User-facing reply strings (Turkish)."""

from ..routing import StandardCategory

# Weather
LOCATION_NOT_FOUND = "Üzgünüm, belirtilen şehir için konum bilgisi bulunamadı."
WEATHER_UNAVAILABLE = "Hava durumu bilgisi alınamadı. Lütfen daha sonra tekrar deneyin."
WEATHER_NOT_FOUND = "Üzgünüm, hava durumu bilgisi bulunamadı."
WEATHER_ERROR = "Hava durumu bilgisi alınırken bir hata oluştu. Lütfen daha sonra tekrar deneyin."
WEATHER_CONDITION_UNKNOWN = "Bilinmiyor"

# Encyclopedia
ENCYCLOPEDIA_UNAVAILABLE = "Wikipedia'dan bilgi alınamadı. Lütfen daha sonra tekrar deneyin."
ENCYCLOPEDIA_NOT_FOUND = "Üzgünüm, aradığınız bilgi Wikipedia'da bulunamadı."
ENCYCLOPEDIA_ERROR = "Wikipedia'dan bilgi alınırken bir hata oluştu. Lütfen daha sonra tekrar deneyin."

# Generative chat
EMPTY_MESSAGE = "Üzgünüm, boş bir mesaj aldım. Lütfen bir soru sorun veya mesaj yazın."
CREDENTIAL_MISSING = "API anahtarı bulunamadı. Lütfen API anahtarını kontrol edin."
EMPTY_RESPONSE = "Boş yanıt alındı"
UNKNOWN_ERROR = "Bilinmeyen hata"
GENERATIVE_FAILED = "Üzgünüm, şu anda yanıt veremiyorum. Teknik bir sorun oluştu: {error}"
UNEXPECTED_ERROR = "Üzgünüm, beklenmeyen bir hata oluştu. Lütfen daha sonra tekrar deneyin."

# Canned replies
STANDARD_REPLIES: dict[StandardCategory, str] = {
    StandardCategory.GREETING: "Merhaba! Size nasıl yardımcı olabilirim?",
    StandardCategory.THANKS: "Rica ederim! Başka bir sorunuz varsa sorabilirsiniz.",
    StandardCategory.SMALL_TALK: "İyiyim, teşekkür ederim! Size nasıl yardımcı olabilirim?",
    StandardCategory.INSULT: "Lütfen saygılı bir dil kullanalım. Size yardımcı olmak için buradayım.",
    StandardCategory.NONSENSE: "Sorunuzu tam anlayamadım. Biraz daha açıklayabilir misiniz?",
    StandardCategory.PROFANITY: "Lütfen uygun bir dil kullanalım. Size nasıl yardımcı olabilirim?",
    StandardCategory.FRUSTRATION: "Anlıyorum, bazen işler yorucu olabilir. Yardımcı olabileceğim bir şey var mı?",
}
NO_BACKEND = (
    "Üzgünüm, şu anda bu soruyu yanıtlayamıyorum. "
    "Hava durumu veya \"... nedir?\" gibi sorular sormayı deneyebilirsiniz."
)
