"""Response status table and the pre-decode validation step.

``validate_response`` runs exactly once per response, before any decoding,
and classifies the transport result:

1. status not in :class:`ResponseStatus`  → :class:`ProtocolError`
   (raw code + raw transport message).
2. known status other than ``OK``        → :class:`StatusError`
   (table code + fixed description).
3. ``OK`` with an empty or absent body   → :class:`EmptyBodyError`.
4. otherwise the body bytes are returned for decoding.

The step is pure classification.  Nothing here retries.
"""

from __future__ import annotations

import logging
from enum import Enum
from typing import TYPE_CHECKING

from linguistic.errors import EmptyBodyError, ProtocolError, StatusError, UnknownCodeError

if TYPE_CHECKING:
    from linguistic.http.transport import TransportResponse

logger = logging.getLogger(__name__)


class ResponseStatus(Enum):
    """Status codes shared by the translator, dictionary, predictor and speller."""

    OK = (200, "The operation was completed successfully")
    KEY_INVALID = (401, "Invalid key for API")
    KEY_BLOCKED = (402, "Blocked key for API")
    DAILY_REQUEST_LIMIT_EXCEEDED = (403, "Exceeded the daily limit on the amount of requests")
    DAILY_TEXT_LIMIT_EXCEEDED = (404, "Exceeded the daily limit on the amount of text")
    CHARACTER_LIMIT_EXCEEDED = (413, "Exceeded the maximum allowed text size")
    FAILED_TO_TRANSLATE = (422, "The text cannot be translated")
    LANGUAGE_NOT_SUPPORTED = (501, "The specified language direction is not supported")

    def __init__(self, code: int, description: str) -> None:
        self.code = code
        self.description = description

    @classmethod
    def by_code(cls, code: int) -> ResponseStatus:
        for status in cls:
            if status.code == code:
                return status
        raise UnknownCodeError("response status", code)


def validate_response(response: TransportResponse) -> bytes:
    """Classify a transport response and return its body when decodable.

    Args:
        response: The status/body/message triple produced by a transport.

    Returns:
        The raw, non-empty body bytes.

    Raises:
        ProtocolError: Status code is not in the status table.
        StatusError: Status code is known but not ``OK``.
        EmptyBodyError: ``OK`` status without a body.
    """
    try:
        status = ResponseStatus.by_code(response.status_code)
    except UnknownCodeError:
        logger.warning(
            "Unrecognised status %d (%s)", response.status_code, response.message or "no message"
        )
        raise ProtocolError(response.status_code, response.message) from None

    if status is not ResponseStatus.OK:
        logger.warning("Service rejected request: %d %s", status.code, status.description)
        raise StatusError(status)

    if not response.body:
        raise EmptyBodyError()

    return response.body
