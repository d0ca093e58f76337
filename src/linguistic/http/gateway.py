"""Service gateway: the one request pipeline behind every service operation.

Each operation of the four services runs the same four steps::

    build descriptor → transport → validate_response → decode → result

``ServiceGateway`` implements those steps once and exposes them in two
shapes:

``call(descriptor, decode)``
    Blocks the calling thread and returns the decoded result, or raises
    the first error.  A partially decoded result is never returned.

``submit(descriptor, decode, handler)``
    Returns immediately.  The transport completes the request on one of its
    worker threads and exactly one of ``handler.on_response(result)`` or
    ``handler.on_failure(error)`` is invoked, exactly once.  Validation and
    decode failures are delivered to ``on_failure``; nothing is raised into
    the caller's thread.

Gateways are frozen after construction and hold no per-request state, so
one instance can serve any number of concurrent calls.
"""

from __future__ import annotations

import logging
import threading
from collections.abc import Callable
from dataclasses import dataclass, field
from typing import Any, Generic, Protocol, TypeVar

from linguistic.errors import TransportError
from linguistic.http.request import QueryValue, RequestDescriptor
from linguistic.http.status import validate_response
from linguistic.http.transport import Transport, TransportResponse
from linguistic.parameters import ResponseFormat, Version

logger = logging.getLogger(__name__)

T = TypeVar("T")
T_contra = TypeVar("T_contra", contravariant=True)

Decoder = Callable[[bytes], T]


# =============================================================================
# COMPLETION HANDLERS
# =============================================================================


class ResponseHandler(Protocol[T_contra]):
    """Receiver for the outcome of a submitted request."""

    def on_response(self, result: T_contra) -> None: ...

    def on_failure(self, error: BaseException) -> None: ...


@dataclass(frozen=True)
class CallbackHandler(Generic[T]):
    """Adapts two plain callables to the :class:`ResponseHandler` protocol.

    Example::

        translator.translate_async(
            "hello",
            Language.RUSSIAN,
            handler=CallbackHandler(on_response=print, on_failure=log_error),
        )
    """

    on_response: Callable[[T], None]
    on_failure: Callable[[BaseException], None]


class _Delivery(Generic[T]):
    """Transport completion that validates, decodes and notifies the handler once."""

    def __init__(
        self,
        descriptor: RequestDescriptor,
        decode: Decoder[T],
        handler: ResponseHandler[T],
    ) -> None:
        self._descriptor = descriptor
        self._decode = decode
        self._handler = handler
        self._lock = threading.Lock()
        self._delivered = False

    def __call__(self, response: TransportResponse | None, error: TransportError | None) -> None:
        with self._lock:
            if self._delivered:
                logger.warning(
                    "Ignoring duplicate completion for %s", self._descriptor.path
                )
                return
            self._delivered = True

        if error is None and response is None:
            error = TransportError("Transport completed without a response")

        if error is not None:
            self._fail(error)
            return

        try:
            result = self._decode(validate_response(response))
        except Exception as exc:
            self._fail(exc)
            return

        try:
            self._handler.on_response(result)
        except Exception:
            logger.exception("Response handler raised for %s", self._descriptor.path)

    def _fail(self, error: BaseException) -> None:
        try:
            self._handler.on_failure(error)
        except Exception:
            logger.exception("Failure handler raised for %s", self._descriptor.path)


# =============================================================================
# GATEWAY
# =============================================================================


@dataclass(frozen=True)
class ServiceGateway:
    """Fixed per-service configuration plus the shared request pipeline.

    Attributes:
        service:         Service name (``"dictionary"``, ``"predictor"``,
                         ``"speller"`` or ``"translator"``).
        version:         API version rendered into ``{version}``.
        response_format: Response interface rendered into ``{interface}``.
                         Must be a JSON interface of the same service.
        transport:       Transport shared by every request of this gateway.
        key:             API key sent as the ``key`` query parameter.
                         ``None`` for the speller, which needs none.
    """

    service: str
    version: Version
    response_format: ResponseFormat
    transport: Transport
    key: str | None = field(default=None, repr=False)

    def __post_init__(self) -> None:
        if self.version.service != self.service:
            raise ValueError(f"Version {self.version.name} does not belong to the {self.service}")
        if self.response_format.service != self.service:
            raise ValueError(
                f"Response format {self.response_format.name} does not belong to the {self.service}"
            )
        if not self.response_format.is_json:
            raise ValueError(
                f"Response format {self.response_format.name} is not supported; use a JSON format"
            )

    def descriptor(self, path_template: str, **query: QueryValue | None) -> RequestDescriptor:
        """Build a descriptor for this service.

        ``{version}`` and ``{interface}`` are filled from the gateway
        configuration and the API key, when there is one, is sent first.
        """
        if self.key is not None:
            query = {"key": self.key, **query}
        return RequestDescriptor.build(
            path_template,
            {"version": self.version.tag, "interface": self.response_format.tag},
            **query,
        )

    def call(self, descriptor: RequestDescriptor, decode: Decoder[T]) -> T:
        """Run the pipeline on the calling thread.

        Raises:
            TransportError: The request could not be completed.
            ProtocolError: Unknown status code.
            StatusError: Known, non-success status code.
            EmptyBodyError: Success without a body.
            DecodeError: Body does not match the expected document.
            UnknownCodeError: The body names a code missing from a static table.
        """
        logger.debug("%s: calling %s", self.service, descriptor.path)
        response = self.transport.execute(descriptor)
        return decode(validate_response(response))

    def submit(
        self,
        descriptor: RequestDescriptor,
        decode: Decoder[T],
        handler: ResponseHandler[T],
    ) -> None:
        """Run the pipeline on a transport worker and notify ``handler`` once.

        Raises:
            TransportError: The transport is closed and the request was not
                            accepted; ``handler`` is not notified.
        """
        logger.debug("%s: submitting %s", self.service, descriptor.path)
        self.transport.submit(descriptor, _Delivery(descriptor, decode, handler))

    def close(self) -> None:
        """Release the transport's session and worker threads."""
        self.transport.close()

    def __enter__(self) -> ServiceGateway:
        return self

    def __exit__(self, exc_type: Any, exc_val: Any, exc_tb: Any) -> None:
        self.close()
