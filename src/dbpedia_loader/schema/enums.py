from enum import Enum


class LanguageEnum(str, Enum):
    """Languages known to OpenSearchServer, serialized by name on the wire."""

    UNDEFINED = "undefined"
    ARABIC = "ar"
    CHINESE = "zh"
    CZECH = "cs"
    DANISH = "da"
    DUTCH = "nl"
    ENGLISH = "en"
    FINNISH = "fi"
    FRENCH = "fr"
    GERMAN = "de"
    GREEK = "el"
    HUNGARIAN = "hu"
    ITALIAN = "it"
    JAPANESE = "ja"
    KOREAN = "ko"
    NORWEGIAN = "no"
    POLISH = "pl"
    PORTUGUESE = "pt"
    ROMANIAN = "ro"
    RUSSIAN = "ru"
    SPANISH = "es"
    SWEDISH = "sv"
    TURKISH = "tr"

    @property
    def code(self) -> str:
        return self.value

    @classmethod
    def find_by_code(cls, code: str) -> "LanguageEnum":
        normalized = (code or "").strip().lower()
        for language in cls:
            if language is not cls.UNDEFINED and language.value == normalized:
                return language
        raise ValueError(f"Unknown language code: {code!r}")
