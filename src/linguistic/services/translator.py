"""Translator service: text translation and language detection."""

from __future__ import annotations

from functools import partial
from typing import ClassVar

from linguistic.http.gateway import ResponseHandler
from linguistic.http.request import (
    RequestDescriptor,
    combine_options,
    hint_list,
    language_direction,
)
from linguistic.parameters import Format, Language, Option, ResponseFormat, Version
from linguistic.response.decoders import (
    decode_detected_language,
    decode_language_mapping,
    decode_translation,
)
from linguistic.response.models import TranslationResult
from linguistic.services.base import BaseService

DIRECTIONS_PATH = "/api/{version}/{interface}/getLangs"
DETECT_PATH = "/api/{version}/{interface}/detect"
TRANSLATE_PATH = "/api/{version}/{interface}/translate"


class Translator(BaseService):
    """
    Client for the translator service.

    Example::

        translator = Translator("trnsl.1.1.xxx")
        result = translator.translate("hello", Language.RUSSIAN, source=Language.ENGLISH)
        print(result.translated_text)

        # Let the service detect the source language
        result = translator.translate("hello", Language.RUSSIAN, Option.INCLUDE_AUTODETECT)
        print(result.source_language)
    """

    SERVICE: ClassVar[str] = "translator"
    BASE_URL: ClassVar[str] = "https://translate.yandex.net"
    DEFAULT_VERSION: ClassVar[Version] = Version.TRANSLATE_LATEST
    DEFAULT_FORMAT: ClassVar[ResponseFormat] = ResponseFormat.TRANSLATE_JSON

    # -------------------------------------------------------------------------
    # Supported languages
    # -------------------------------------------------------------------------

    def directions(self, ui: Language = Language.ENGLISH) -> list[Language]:
        """Languages the translator supports.

        Args:
            ui: Language the service names the languages in.  Only the codes
                are kept, so this affects nothing but the payload size.
        """
        return self._gateway.call(self._directions_request(ui), decode_language_mapping)

    def directions_async(
        self, handler: ResponseHandler[list[Language]], ui: Language = Language.ENGLISH
    ) -> None:
        self._gateway.submit(self._directions_request(ui), decode_language_mapping, handler)

    def _directions_request(self, ui: Language) -> RequestDescriptor:
        return self._gateway.descriptor(DIRECTIONS_PATH, ui=ui.code)

    # -------------------------------------------------------------------------
    # Language detection
    # -------------------------------------------------------------------------

    def detect(self, text: str, *hints: Language | None) -> Language:
        """Detect the language of ``text``.

        Args:
            text:   Text to analyse.
            *hints: Languages the text is likely to be in.
        """
        return self._gateway.call(self._detect_request(text, hints), decode_detected_language)

    def detect_async(
        self, text: str, handler: ResponseHandler[Language], *hints: Language | None
    ) -> None:
        """Callback twin of :meth:`detect`."""
        self._gateway.submit(self._detect_request(text, hints), decode_detected_language, handler)

    def _detect_request(self, text: str, hints: tuple[Language | None, ...]) -> RequestDescriptor:
        return self._gateway.descriptor(DETECT_PATH, text=text, hint=hint_list(*hints))

    # -------------------------------------------------------------------------
    # Translation
    # -------------------------------------------------------------------------

    def translate(
        self,
        text: str,
        target: Language,
        *options: Option | int | None,
        source: Language | None = None,
        text_format: Format = Format.PLAIN,
    ) -> TranslationResult:
        """Translate ``text`` into ``target``.

        Args:
            text:        Text to translate.
            target:      Language to translate into.
            *options:    Translator options, summed.
            source:      Source language; autodetected by the service when
                         omitted.
            text_format: Markup of ``text``.
        """
        return self._gateway.call(
            self._translate_request(text, source, target, options, text_format),
            partial(decode_translation, text),
        )

    def translate_async(
        self,
        text: str,
        target: Language,
        handler: ResponseHandler[TranslationResult],
        *options: Option | int | None,
        source: Language | None = None,
        text_format: Format = Format.PLAIN,
    ) -> None:
        """Callback twin of :meth:`translate`."""
        self._gateway.submit(
            self._translate_request(text, source, target, options, text_format),
            partial(decode_translation, text),
            handler,
        )

    def _translate_request(
        self,
        text: str,
        source: Language | None,
        target: Language,
        options: tuple[Option | int | None, ...],
        text_format: Format,
    ) -> RequestDescriptor:
        return self._gateway.descriptor(
            TRANSLATE_PATH,
            text=text,
            lang=language_direction(source, target),
            format=text_format.value,
            options=combine_options(*options),
        )
