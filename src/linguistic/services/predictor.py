"""Predictor service: completion suggestions for partially typed text."""

from __future__ import annotations

from functools import partial
from typing import ClassVar

from linguistic.http.gateway import ResponseHandler
from linguistic.http.request import RequestDescriptor
from linguistic.parameters import Language, ResponseFormat, Version
from linguistic.response.decoders import decode_completion, decode_language_list
from linguistic.response.models import CompletionResult
from linguistic.services.base import BaseService

DIRECTIONS_PATH = "/api/{version}/{interface}/getLangs"
COMPLETE_PATH = "/api/{version}/{interface}/complete"

# Number of suggestions requested when no limit is given.
DEFAULT_LIMIT = 1


class Predictor(BaseService):
    """Client for the predictor service."""

    SERVICE: ClassVar[str] = "predictor"
    BASE_URL: ClassVar[str] = "https://predictor.yandex.net"
    DEFAULT_VERSION: ClassVar[Version] = Version.PREDICTOR_LATEST
    DEFAULT_FORMAT: ClassVar[ResponseFormat] = ResponseFormat.PREDICTOR_JSON

    def directions(self) -> list[Language]:
        """Languages the predictor can complete text in."""
        return self._gateway.call(self._gateway.descriptor(DIRECTIONS_PATH), decode_language_list)

    def directions_async(self, handler: ResponseHandler[list[Language]]) -> None:
        self._gateway.submit(
            self._gateway.descriptor(DIRECTIONS_PATH), decode_language_list, handler
        )

    def complete(
        self, text: str, language: Language, limit: int = DEFAULT_LIMIT
    ) -> CompletionResult:
        """Suggest completions for ``text``.

        Args:
            text:     Text typed so far.
            language: Language of the text.
            limit:    Maximum number of suggestions.
        """
        return self._gateway.call(
            self._complete_request(text, language, limit), partial(decode_completion, text)
        )

    def complete_async(
        self,
        text: str,
        language: Language,
        handler: ResponseHandler[CompletionResult],
        limit: int = DEFAULT_LIMIT,
    ) -> None:
        """Callback twin of :meth:`complete`."""
        self._gateway.submit(
            self._complete_request(text, language, limit),
            partial(decode_completion, text),
            handler,
        )

    def _complete_request(self, text: str, language: Language, limit: int) -> RequestDescriptor:
        return self._gateway.descriptor(COMPLETE_PATH, lang=language.code, q=text, limit=limit)
