"""
Exception hierarchy for the linguistic client.

Every failure the request pipeline can produce derives from
:class:`LinguisticError`, so callers that do not care about the precise
cause can catch a single type:

    try:
        result = translator.translate("hello", Language.RUSSIAN)
    except LinguisticError as e:
        print(f"Translation failed: {e}")

Taxonomy:
    TransportError:   connectivity failure raised by the transport itself.
    ProtocolError:    the service answered with a status code that is not in
                      the known status table.
    StatusError:      a known, non-success status (invalid key, quota ...).
    EmptyBodyError:   success status but nothing to decode.
    DecodeError:      a field the schema requires unconditionally is missing
                      or has the wrong type, or the body is not JSON.
    UnknownCodeError: a static table has no entry for a code the service
                      returned.
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import TYPE_CHECKING, Any

if TYPE_CHECKING:
    from linguistic.http.status import ResponseStatus


class LinguisticError(Exception):
    """Base class for all errors raised by the linguistic client."""


@dataclass
class TransportError(LinguisticError):
    """
    Raised by a transport when the request never produced a response.

    The gateway passes this through unmodified. The originating library
    exception (``requests`` or ``httpx``) is chained as ``__cause__``.

    Attributes:
        message: Human-readable description of the failure.
        url: The URL that was being requested, if known.
    """

    message: str
    url: str = ""

    def __str__(self) -> str:
        if self.url:
            return f"{self.message} ({self.url})"
        return self.message


@dataclass
class ProtocolError(LinguisticError):
    """
    Raised when the status code is not one the services are known to send.

    Attributes:
        status_code: Raw status code from the transport.
        message: Raw status message (reason phrase) from the transport.
    """

    status_code: int
    message: str = ""

    def __str__(self) -> str:
        return f"{self.status_code} - {self.message}"


@dataclass
class StatusError(LinguisticError):
    """
    Raised for a recognised status code that is not a success.

    Attributes:
        status: The matching entry of the status table.
    """

    status: ResponseStatus

    @property
    def status_code(self) -> int:
        return self.status.code

    @property
    def description(self) -> str:
        return self.status.description

    def __str__(self) -> str:
        return f"{self.status.code} - {self.status.description}"


class EmptyBodyError(LinguisticError):
    """Raised when a successful response carries no body."""

    def __init__(self, message: str = "Empty response body") -> None:
        super().__init__(message)


class DecodeError(LinguisticError):
    """Raised when a response document does not match its required schema."""


@dataclass
class UnknownCodeError(LinguisticError, LookupError):
    """
    Raised by a static table's ``by_code`` lookup when nothing matches.

    Attributes:
        table: Name of the table that was searched (e.g. ``"language"``).
        code: The code that could not be resolved.
    """

    table: str
    code: Any

    def __str__(self) -> str:
        return f"Unknown {self.table} code: {self.code}"
