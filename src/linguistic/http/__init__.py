"""Request pipeline shared by every service.

request.py     RequestDescriptor and the flag/option/language encoders.
transport.py   TransportResponse, the Transport protocol, and the
               requests/httpx implementations.
status.py      ResponseStatus table and validate_response.
gateway.py     ServiceGateway: build → dispatch → validate → decode,
               exposed as a blocking call and a callback submission.
"""

from linguistic.http.gateway import CallbackHandler, ResponseHandler, ServiceGateway
from linguistic.http.request import RequestDescriptor
from linguistic.http.status import ResponseStatus, validate_response
from linguistic.http.transport import (
    HttpxTransport,
    RequestsTransport,
    Transport,
    TransportResponse,
    create_transport,
)

__all__ = [
    "CallbackHandler",
    "HttpxTransport",
    "RequestDescriptor",
    "RequestsTransport",
    "ResponseHandler",
    "ResponseStatus",
    "ServiceGateway",
    "Transport",
    "TransportResponse",
    "create_transport",
    "validate_response",
]
