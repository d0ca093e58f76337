"""Speller service: spelling checks for one or several texts.

The speller is the only service that works without an API key and without
a version segment in its paths.
"""

from __future__ import annotations

from collections.abc import Sequence
from functools import partial
from typing import ClassVar

from linguistic.http.gateway import ResponseHandler
from linguistic.http.request import RequestDescriptor, combine_options
from linguistic.parameters import Format, Language, Option, ResponseFormat, Version
from linguistic.response.decoders import decode_spelling, decode_spelling_batch
from linguistic.response.models import SpellCheckResult
from linguistic.services.base import BaseService

CHECK_TEXT_PATH = "/services/{interface}/checkText"
CHECK_TEXTS_PATH = "/services/{interface}/checkTexts"


class Speller(BaseService):
    """
    Client for the speller service.

    Options are combined by summing their values, so passing the same
    option twice sends a different option altogether.

    Example::

        speller = Speller()
        report = speller.check("helo wrld", Language.ENGLISH, Option.IGNORE_DIGITS)
        for miss in report.misspellings:
            print(miss.word, "→", miss.suggestions)
    """

    SERVICE: ClassVar[str] = "speller"
    BASE_URL: ClassVar[str] = "https://speller.yandex.net"
    DEFAULT_VERSION: ClassVar[Version] = Version.SPELLER_LATEST
    DEFAULT_FORMAT: ClassVar[ResponseFormat] = ResponseFormat.SPELLER_JSON
    REQUIRES_KEY: ClassVar[bool] = False

    # -------------------------------------------------------------------------
    # Single text
    # -------------------------------------------------------------------------

    def check(
        self,
        text: str,
        language: Language,
        *options: Option | int | None,
        text_format: Format = Format.PLAIN,
    ) -> SpellCheckResult:
        """Spell-check one text."""
        return self._gateway.call(
            self._check_request(CHECK_TEXT_PATH, text, language, options, text_format),
            partial(decode_spelling, text),
        )

    def check_async(
        self,
        text: str,
        language: Language,
        handler: ResponseHandler[SpellCheckResult],
        *options: Option | int | None,
        text_format: Format = Format.PLAIN,
    ) -> None:
        """Callback twin of :meth:`check`."""
        self._gateway.submit(
            self._check_request(CHECK_TEXT_PATH, text, language, options, text_format),
            partial(decode_spelling, text),
            handler,
        )

    # -------------------------------------------------------------------------
    # Several texts in one request
    # -------------------------------------------------------------------------

    def check_many(
        self,
        texts: Sequence[str],
        language: Language,
        *options: Option | int | None,
        text_format: Format = Format.PLAIN,
    ) -> list[SpellCheckResult]:
        """Spell-check several texts; results are in the order of ``texts``."""
        texts = list(texts)
        return self._gateway.call(
            self._check_request(CHECK_TEXTS_PATH, texts, language, options, text_format),
            partial(decode_spelling_batch, texts),
        )

    def check_many_async(
        self,
        texts: Sequence[str],
        language: Language,
        handler: ResponseHandler[list[SpellCheckResult]],
        *options: Option | int | None,
        text_format: Format = Format.PLAIN,
    ) -> None:
        """Callback twin of :meth:`check_many`."""
        texts = list(texts)
        self._gateway.submit(
            self._check_request(CHECK_TEXTS_PATH, texts, language, options, text_format),
            partial(decode_spelling_batch, texts),
            handler,
        )

    def _check_request(
        self,
        path: str,
        text: str | list[str],
        language: Language,
        options: tuple[Option | int | None, ...],
        text_format: Format,
    ) -> RequestDescriptor:
        return self._gateway.descriptor(
            path,
            text=text,
            lang=language.code,
            options=combine_options(*options),
            format=text_format.value,
        )
