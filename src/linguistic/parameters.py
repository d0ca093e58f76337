"""
Static lookup tables shared by the four linguistic services.

Every table is an ``Enum`` whose members carry their wire code plus a small
descriptive payload, and every table exposes a total ``by_code`` lookup that
raises :class:`~linguistic.errors.UnknownCodeError` when nothing matches.
No behaviour is attached to the members beyond the lookup.

``str(member)`` always yields the wire code, so members can be dropped
straight into query parameters.
"""

from __future__ import annotations

from enum import Enum

from linguistic.errors import UnknownCodeError

# ============================================================================
# LANGUAGES
# ============================================================================


class Language(Enum):
    """
    Languages understood by at least one of the services.

    ``AUTODETECT`` has an empty code. It never goes over the wire; it is the
    sentinel a translation result carries when the source language was
    inferred by the server.
    """

    AUTODETECT = ("", "Autodetect")
    AZERBAIJAN = ("az", "Azerbaijan")
    AFRIKAANS = ("af", "Afrikaans")
    ALBANIAN = ("sq", "Albanian")
    AMHARIC = ("am", "Amharic")
    ARABIC = ("ar", "Arabic")
    ARMENIAN = ("hy", "Armenian")
    BASHKIR = ("ba", "Bashkir")
    BASQUE = ("eu", "Basque")
    BELARUSIAN = ("be", "Belarusian")
    BENGALI = ("bn", "Bengali")
    BOSNIAN = ("bs", "Bosnian")
    BULGARIAN = ("bg", "Bulgarian")
    BURMESE = ("my", "Burmese")
    CATALAN = ("ca", "Catalan")
    CEBUANO = ("ceb", "Cebuano")
    CHINESE = ("zh", "Chinese")
    CHUVASH = ("cv", "Chuvash")
    CROATIAN = ("hr", "Croatian")
    CZECH = ("cs", "Czech")
    DANISH = ("da", "Danish")
    DUTCH = ("nl", "Dutch")
    ELVISH_SINDARIN = ("sjn", "Elvish (Sindarin)")
    EMOJI = ("emj", "Emoji")
    ENGLISH = ("en", "English")
    ESPERANTO = ("eo", "Esperanto")
    ESTONIAN = ("et", "Estonian")
    FINNISH = ("fi", "Finnish")
    FRENCH = ("fr", "French")
    GALICIAN = ("gl", "Galician")
    GEORGIAN = ("ka", "Georgian")
    GERMAN = ("de", "German")
    GREEK = ("el", "Greek")
    GUJARATI = ("gu", "Gujarati")
    HAITIAN = ("ht", "Haitian")
    HEBREW = ("he", "Hebrew")
    HILL_MARI = ("mrj", "Hill Mari")
    HINDI = ("hi", "Hindi")
    HUNGARIAN = ("hu", "Hungarian")
    ICELANDIC = ("is", "Icelandic")
    INDONESIAN = ("id", "Indonesian")
    IRISH = ("ga", "Irish")
    ITALIAN = ("it", "Italian")
    JAPANESE = ("ja", "Japanese")
    JAVANESE = ("jv", "Javanese")
    KANNADA = ("kn", "Kannada")
    KAZAKH = ("kk", "Kazakh")
    KAZAKH_LATIN = ("kazlat", "Kazakh (Latin)")
    KHMER = ("km", "Khmer")
    KOREAN = ("ko", "Korean")
    KYRGYZ = ("ky", "Kyrgyz")
    LAOTIAN = ("lo", "Laotian")
    LATIN = ("la", "Latin")
    LATVIAN = ("lv", "Latvian")
    LITHUANIAN = ("lt", "Lithuanian")
    LUXEMBOURGISH = ("lb", "Luxembourgish")
    MACEDONIAN = ("mk", "Macedonian")
    MALAGASY = ("mg", "Malagasy")
    MALAY = ("ms", "Malay")
    MALAYALAM = ("ml", "Malayalam")
    MALTESE = ("mt", "Maltese")
    MAORI = ("mi", "Maori")
    MARATHI = ("mr", "Marathi")
    MARI = ("mhr", "Mari")
    MONGOLIAN = ("mn", "Mongolian")
    NEPALI = ("ne", "Nepali")
    NORWEGIAN = ("no", "Norwegian")
    PAPIAMENTO = ("pap", "Papiamento")
    PERSIAN = ("fa", "Persian")
    POLISH = ("pl", "Polish")
    PORTUGUESE = ("pt", "Portuguese")
    PUNJABI = ("pa", "Punjabi")
    ROMANIAN = ("ro", "Romanian")
    RUSSIAN = ("ru", "Russian")
    SCOTTISH = ("gd", "Scottish")
    SERBIAN = ("sr", "Serbian")
    SINHALA = ("si", "Sinhala")
    SLOVAKIAN = ("sk", "Slovakian")
    SLOVENIAN = ("sl", "Slovenian")
    SPANISH = ("es", "Spanish")
    SUNDANESE = ("su", "Sundanese")
    SWAHILI = ("sw", "Swahili")
    SWEDISH = ("sv", "Swedish")
    TAGALOG = ("tl", "Tagalog")
    TAJIK = ("tg", "Tajik")
    TAMIL = ("ta", "Tamil")
    TATAR = ("tt", "Tatar")
    TELUGU = ("te", "Telugu")
    THAI = ("th", "Thai")
    TURKISH = ("tr", "Turkish")
    UDMURT = ("udm", "Udmurt")
    UKRAINIAN = ("uk", "Ukrainian")
    URDU = ("ur", "Urdu")
    UZBEK = ("uz", "Uzbek")
    UZBEK_CYRILLIC = ("uzbcyr", "Uzbek (Cyrillic)")
    VIETNAMESE = ("vi", "Vietnamese")
    WELSH = ("cy", "Welsh")
    XHOSA = ("xh", "Xhosa")
    YIDDISH = ("yi", "Yiddish")
    YAKUT = ("sah", "Yakut")

    def __init__(self, code: str, description: str) -> None:
        self.code = code
        self.description = description

    def __str__(self) -> str:
        return self.code

    @classmethod
    def by_code(cls, code: str) -> Language:
        for language in cls:
            if language.code == code:
                return language
        raise UnknownCodeError("language", code)


class LanguagePair(Enum):
    """Dictionary lookup directions, identified by a hyphenated code."""

    RUSSIAN_RUSSIAN = ("ru-ru", Language.RUSSIAN, Language.RUSSIAN, "Russian-Russian")
    RUSSIAN_ENGLISH = ("ru-en", Language.RUSSIAN, Language.ENGLISH, "Russian-English")
    RUSSIAN_POLISH = ("ru-pl", Language.RUSSIAN, Language.POLISH, "Russian-Polish")
    RUSSIAN_UKRAINIAN = ("ru-uk", Language.RUSSIAN, Language.UKRAINIAN, "Russian-Ukrainian")
    RUSSIAN_GERMAN = ("ru-de", Language.RUSSIAN, Language.GERMAN, "Russian-German")
    RUSSIAN_FRENCH = ("ru-fr", Language.RUSSIAN, Language.FRENCH, "Russian-French")
    RUSSIAN_SPANISH = ("ru-es", Language.RUSSIAN, Language.SPANISH, "Russian-Spanish")
    RUSSIAN_ITALIAN = ("ru-it", Language.RUSSIAN, Language.ITALIAN, "Russian-Italian")
    RUSSIAN_TURKISH = ("ru-tr", Language.RUSSIAN, Language.TURKISH, "Russian-Turkish")
    ENGLISH_RUSSIAN = ("en-ru", Language.ENGLISH, Language.RUSSIAN, "English-Russian")
    ENGLISH_ENGLISH = ("en-en", Language.ENGLISH, Language.ENGLISH, "English-English")
    ENGLISH_GERMAN = ("en-de", Language.ENGLISH, Language.GERMAN, "English-German")
    ENGLISH_FRENCH = ("en-fr", Language.ENGLISH, Language.FRENCH, "English-French")
    ENGLISH_SPANISH = ("en-es", Language.ENGLISH, Language.SPANISH, "English-Spanish")
    ENGLISH_ITALIAN = ("en-it", Language.ENGLISH, Language.ITALIAN, "English-Italian")
    ENGLISH_TURKISH = ("en-tr", Language.ENGLISH, Language.TURKISH, "English-Turkish")
    POLISH_RUSSIAN = ("pl-ru", Language.POLISH, Language.RUSSIAN, "Polish-Russian")
    UKRAINIAN_RUSSIAN = ("uk-ru", Language.UKRAINIAN, Language.RUSSIAN, "Ukrainian-Russian")
    GERMAN_RUSSIAN = ("de-ru", Language.GERMAN, Language.RUSSIAN, "German-Russian")
    GERMAN_ENGLISH = ("de-en", Language.GERMAN, Language.ENGLISH, "German-English")
    FRENCH_RUSSIAN = ("fr-ru", Language.FRENCH, Language.RUSSIAN, "French-Russian")
    FRENCH_ENGLISH = ("fr-en", Language.FRENCH, Language.ENGLISH, "French-English")
    SPANISH_RUSSIAN = ("es-ru", Language.SPANISH, Language.RUSSIAN, "Spanish-Russian")
    SPANISH_ENGLISH = ("es-en", Language.SPANISH, Language.ENGLISH, "Spanish-English")
    ITALIAN_RUSSIAN = ("it-ru", Language.ITALIAN, Language.RUSSIAN, "Italian-Russian")
    ITALIAN_ENGLISH = ("it-en", Language.ITALIAN, Language.ENGLISH, "Italian-English")
    TURKISH_RUSSIAN = ("tr-ru", Language.TURKISH, Language.RUSSIAN, "Turkish-Russian")
    TURKISH_ENGLISH = ("tr-en", Language.TURKISH, Language.ENGLISH, "Turkish-English")

    def __init__(self, code: str, source: Language, target: Language, description: str) -> None:
        self.code = code
        self.source = source
        self.target = target
        self.description = description

    def __str__(self) -> str:
        return self.code

    @classmethod
    def by_code(cls, code: str) -> LanguagePair:
        for pair in cls:
            if pair.code == code:
                return pair
        raise UnknownCodeError("language pair", code)

    @classmethod
    def by_languages(cls, source: Language, target: Language) -> LanguagePair:
        for pair in cls:
            if pair.source is source and pair.target is target:
                return pair
        raise UnknownCodeError("language pair", f"{source}-{target}")


# ============================================================================
# SERVICE VERSIONS & RESPONSE FORMATS
# ============================================================================


class Version(Enum):
    """
    API version tags, one family per service.

    ``*_LATEST`` members are aliases of the newest concrete version. The
    speller has no versioned path; its tag is never rendered.
    """

    DICTIONARY_V1 = ("dictionary", "v1")
    PREDICTOR_V1 = ("predictor", "v1")
    TRANSLATE_V1_5 = ("translator", "v1.5")
    SPELLER_LATEST = ("speller", "?")
    DICTIONARY_LATEST = ("dictionary", "v1")
    PREDICTOR_LATEST = ("predictor", "v1")
    TRANSLATE_LATEST = ("translator", "v1.5")

    def __init__(self, service: str, tag: str) -> None:
        self.service = service
        self.tag = tag

    def __str__(self) -> str:
        return self.tag

    @classmethod
    def by_code(cls, code: str, service: str | None = None) -> Version:
        """Look up a version by its tag.

        Tags repeat across services (the dictionary and the predictor are
        both ``"v1"``), so pass ``service`` to pick the right family. Without
        it the first member with the tag is returned.

        Raises:
            UnknownCodeError: No version of ``service`` has this tag.
        """
        for version in cls:
            if version.tag == code and service in (None, version.service):
                return version
        raise UnknownCodeError("version", code)


class ResponseFormat(Enum):
    """
    Response interface path segment for each service.

    Only the JSON interfaces are decoded; the XML tags are listed so that
    configuration naming them fails with a clear message instead of a 404.
    """

    DICTIONARY_JSON = ("dictionary", "dicservice.json")
    PREDICTOR_JSON = ("predictor", "predict.json")
    SPELLER_JSON = ("speller", "spellservice.json")
    TRANSLATE_JSON = ("translator", "tr.json")
    DICTIONARY_XML = ("dictionary", "dicservice")
    PREDICTOR_XML = ("predictor", "predict")
    SPELLER_XML = ("speller", "spellservice")
    TRANSLATE_XML = ("translator", "tr")

    def __init__(self, service: str, tag: str) -> None:
        self.service = service
        self.tag = tag

    @property
    def is_json(self) -> bool:
        return self.tag.endswith(".json")

    def __str__(self) -> str:
        return self.tag

    @classmethod
    def by_code(cls, code: str) -> ResponseFormat:
        for response_format in cls:
            if response_format.tag == code:
                return response_format
        raise UnknownCodeError("response format", code)


class Format(Enum):
    """Markup of the text submitted for translation or spell-checking."""

    PLAIN = "plain"
    HTML = "html"

    def __str__(self) -> str:
        return self.value

    @classmethod
    def by_code(cls, code: str) -> Format:
        for text_format in cls:
            if text_format.value == code:
                return text_format
        raise UnknownCodeError("format", code)


# ============================================================================
# FLAGS & OPTIONS
# ============================================================================


class Flag(Enum):
    """Dictionary lookup flags. Each carries a single power-of-two bit."""

    FAMILY = 0x0001
    SHORT_POS = 0x0002
    MORPHO = 0x0004
    POS_FILTER = 0x0008

    @property
    def bitmask(self) -> int:
        return self.value

    @classmethod
    def by_code(cls, code: int) -> Flag:
        for flag in cls:
            if flag.value == code:
                return flag
        raise UnknownCodeError("flag", code)


class Option(Enum):
    """
    Translator and speller options.

    ``INCLUDE_AUTODETECT`` applies to the translator only; the rest are
    speller options.
    """

    NONE = 0
    INCLUDE_AUTODETECT = 1
    IGNORE_DIGITS = 2
    IGNORE_URLS = 4
    FIND_REPEAT_WORDS = 8
    IGNORE_CAPITALIZATION = 512

    @classmethod
    def by_code(cls, code: int) -> Option:
        for option in cls:
            if option.value == code:
                return option
        raise UnknownCodeError("option", code)


# ============================================================================
# SPELLING MISTAKES
# ============================================================================


class SpellingMistake(Enum):
    """Error kinds reported by the speller for each misspelt word."""

    NONE = (0, "There is no spelling mistake in this word!")
    ERROR_UNKNOWN_WORD = (1, "The word is not in the dictionary")
    ERROR_REPEAT_WORD = (2, "The repetition of the word")
    ERROR_CAPITALIZATION = (3, "Incorrect use of uppercase and lowercase letters")
    ERROR_TOO_MANY_ERRORS = (4, "The text contains too many errors")

    def __init__(self, code: int, description: str) -> None:
        self.code = code
        self.description = description

    @classmethod
    def by_code(cls, code: int) -> SpellingMistake:
        for mistake in cls:
            if mistake.code == code:
                return mistake
        raise UnknownCodeError("spelling mistake", code)
