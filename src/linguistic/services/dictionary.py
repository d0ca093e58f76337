"""Dictionary service: bilingual lookups with translations, synonyms and examples."""

from __future__ import annotations

from typing import ClassVar

from linguistic.http.gateway import ResponseHandler
from linguistic.http.request import RequestDescriptor, combine_flags
from linguistic.parameters import Flag, Language, LanguagePair, ResponseFormat, Version
from linguistic.response.decoders import decode_language_pair_list
from linguistic.response.models import LookupResult
from linguistic.response.tree import decode_lookup
from linguistic.services.base import BaseService

DIRECTIONS_PATH = "/api/{version}/{interface}/getLangs"
LOOKUP_PATH = "/api/{version}/{interface}/lookup"


class Dictionary(BaseService):
    """
    Client for the dictionary service.

    Example::

        with Dictionary("dict.1.1.xxx") as dictionary:
            result = dictionary.lookup("time", LanguagePair.ENGLISH_RUSSIAN, Flag.MORPHO)
            for definition in result.definitions:
                print(definition.text, [t.text for t in definition.translations])
    """

    SERVICE: ClassVar[str] = "dictionary"
    BASE_URL: ClassVar[str] = "https://dictionary.yandex.net"
    DEFAULT_VERSION: ClassVar[Version] = Version.DICTIONARY_LATEST
    DEFAULT_FORMAT: ClassVar[ResponseFormat] = ResponseFormat.DICTIONARY_JSON

    # -------------------------------------------------------------------------
    # Supported directions
    # -------------------------------------------------------------------------

    def directions(self) -> list[LanguagePair]:
        """Language pairs the dictionary can look words up in."""
        return self._gateway.call(self._directions_request(), decode_language_pair_list)

    def directions_async(self, handler: ResponseHandler[list[LanguagePair]]) -> None:
        self._gateway.submit(self._directions_request(), decode_language_pair_list, handler)

    def _directions_request(self) -> RequestDescriptor:
        return self._gateway.descriptor(DIRECTIONS_PATH)

    # -------------------------------------------------------------------------
    # Lookup
    # -------------------------------------------------------------------------

    def lookup(
        self,
        text: str,
        language: LanguagePair,
        *flags: Flag | None,
        ui: Language = Language.ENGLISH,
    ) -> LookupResult:
        """Look a word or phrase up in the dictionary.

        Args:
            text:     Word or phrase to look up.
            language: Lookup direction.
            *flags:   Lookup flags, combined with bitwise OR.
            ui:       Language of part-of-speech and other annotations.

        Returns:
            The decoded lookup tree.  No definitions is a valid answer.
        """
        return self._gateway.call(self._lookup_request(text, language, flags, ui), decode_lookup)

    def lookup_async(
        self,
        text: str,
        language: LanguagePair,
        handler: ResponseHandler[LookupResult],
        *flags: Flag | None,
        ui: Language = Language.ENGLISH,
    ) -> None:
        """Callback twin of :meth:`lookup`."""
        self._gateway.submit(
            self._lookup_request(text, language, flags, ui), decode_lookup, handler
        )

    def _lookup_request(
        self,
        text: str,
        language: LanguagePair,
        flags: tuple[Flag | None, ...],
        ui: Language,
    ) -> RequestDescriptor:
        return self._gateway.descriptor(
            LOOKUP_PATH,
            lang=language.code,
            text=text,
            ui=ui.code,
            flags=combine_flags(*flags),
        )
