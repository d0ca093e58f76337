"""HTTP transports: the only place in the package that touches the network.

A transport turns a :class:`~linguistic.http.request.RequestDescriptor`
into a :class:`TransportResponse` (status code, body bytes, reason phrase)
and knows nothing about the services' status table or document shapes.

Two implementations are provided:

``RequestsTransport``
    Built on a ``requests.Session``.  This is the default.

``HttpxTransport``
    Built on an ``httpx.Client``.  Useful where httpx is already the
    application's HTTP stack, and in tests via ``respx``.

Sync vs async
-------------
``execute`` blocks the calling thread for the whole round trip.
``submit`` hands the same work to a ``ThreadPoolExecutor`` owned by the
transport and returns immediately; ``on_done`` then runs on a worker
thread, exactly once, with either a response or a :class:`TransportError`.
Socket-level retries, TLS and connection pooling are left to the HTTP
library.  ``close()`` releases the session and the worker pool.
"""

from __future__ import annotations

import logging
import threading
from collections.abc import Callable
from concurrent.futures import ThreadPoolExecutor
from dataclasses import dataclass
from typing import Any, Literal, Protocol

import httpx
import requests

from linguistic.errors import TransportError
from linguistic.http.request import RequestDescriptor

logger = logging.getLogger(__name__)

# Default HTTP request timeout in seconds.
DEFAULT_TIMEOUT = 10.0

# Worker threads per transport for submitted (callback) requests.
DEFAULT_MAX_WORKERS = 4

Backend = Literal["requests", "httpx"]


@dataclass(frozen=True)
class TransportResponse:
    """The status/body/message triple every transport produces.

    Attributes:
        status_code: HTTP status code.
        body:        Raw response body, ``None`` when the response had none.
        message:     Reason phrase reported by the server.
    """

    status_code: int
    body: bytes | None
    message: str = ""


DoneCallback = Callable[[TransportResponse | None, TransportError | None], None]


class Transport(Protocol):
    """Contract consumed by :class:`~linguistic.http.gateway.ServiceGateway`."""

    def execute(self, descriptor: RequestDescriptor) -> TransportResponse: ...

    def submit(self, descriptor: RequestDescriptor, on_done: DoneCallback) -> None: ...

    def close(self) -> None: ...


class _ThreadedTransport:
    """Shared worker-pool plumbing; subclasses implement ``execute``."""

    def __init__(
        self,
        base_url: str,
        *,
        timeout: float = DEFAULT_TIMEOUT,
        max_workers: int = DEFAULT_MAX_WORKERS,
    ) -> None:
        self.base_url = base_url.rstrip("/")
        self.timeout = timeout
        self._executor = ThreadPoolExecutor(
            max_workers=max_workers,
            thread_name_prefix="linguistic-transport",
        )
        self._closed = False
        self._worker = threading.local()

    def execute(self, descriptor: RequestDescriptor) -> TransportResponse:
        raise NotImplementedError

    def submit(self, descriptor: RequestDescriptor, on_done: DoneCallback) -> None:
        """Run ``execute`` on a worker thread and report the outcome to ``on_done``.

        Raises:
            TransportError: The transport has been closed; ``on_done`` is not
                            called.
        """
        if self._closed:
            raise TransportError("Transport is closed", self.url_for(descriptor))
        try:
            self._executor.submit(self._run, descriptor, on_done)
        except RuntimeError as exc:
            raise TransportError("Transport is closed", self.url_for(descriptor)) from exc

    def _run(self, descriptor: RequestDescriptor, on_done: DoneCallback) -> None:
        self._worker.active = True
        try:
            response = self.execute(descriptor)
        except TransportError as exc:
            on_done(None, exc)
            return
        except Exception as exc:
            logger.exception("Transport crashed while requesting %s", descriptor.path)
            error = TransportError(f"Unexpected transport failure: {exc}", self.url_for(descriptor))
            on_done(None, error)
            return
        on_done(response, None)

    def url_for(self, descriptor: RequestDescriptor) -> str:
        return f"{self.base_url}{descriptor.path}"

    @staticmethod
    def _failure(message: str, url: str, exc: Exception) -> TransportError:
        logger.warning("GET %s failed: %s (%s)", url, message, type(exc).__name__)
        return TransportError(message, url)

    def close(self) -> None:
        """Stop accepting work and release the worker pool.

        Safe to call more than once. Called from one of this transport's own
        workers (e.g. inside a completion callback), it returns without waiting for
        the pool.
        """
        self._closed = True
        on_worker = getattr(self._worker, "active", False)
        self._executor.shutdown(wait=not on_worker)

    def __enter__(self) -> Any:
        return self

    def __exit__(self, exc_type: Any, exc_val: Any, exc_tb: Any) -> None:
        self.close()


class RequestsTransport(_ThreadedTransport):
    """Transport backed by a ``requests.Session``.

    Attributes:
        base_url: Scheme and host of the service, e.g.
                  ``"https://translate.yandex.net"``.
        timeout:  Per-request timeout in seconds.
    """

    def __init__(
        self,
        base_url: str,
        *,
        timeout: float = DEFAULT_TIMEOUT,
        max_workers: int = DEFAULT_MAX_WORKERS,
        session: requests.Session | None = None,
    ) -> None:
        super().__init__(base_url, timeout=timeout, max_workers=max_workers)
        self._session = session or requests.Session()

    def execute(self, descriptor: RequestDescriptor) -> TransportResponse:
        """Issue the GET request and return the raw result.

        Raises:
            TransportError: Timeout, connection failure or any other
                            ``requests`` error before a response arrived.
        """
        url = self.url_for(descriptor)
        logger.debug("GET %s params=%s", url, sorted(descriptor.query))

        try:
            response = self._session.get(url, params=dict(descriptor.query), timeout=self.timeout)
        except requests.exceptions.Timeout as exc:
            raise self._failure(f"Request timed out after {self.timeout:.1f}s", url, exc) from exc
        except requests.exceptions.ConnectionError as exc:
            raise self._failure("Cannot connect to service", url, exc) from exc
        except requests.exceptions.RequestException as exc:
            raise self._failure(f"Request failed: {exc}", url, exc) from exc

        return TransportResponse(
            status_code=response.status_code,
            body=response.content or None,
            message=response.reason or "",
        )

    def close(self) -> None:
        try:
            super().close()
        finally:
            self._session.close()


class HttpxTransport(_ThreadedTransport):
    """Transport backed by an ``httpx.Client``."""

    def __init__(
        self,
        base_url: str,
        *,
        timeout: float = DEFAULT_TIMEOUT,
        max_workers: int = DEFAULT_MAX_WORKERS,
        client: httpx.Client | None = None,
    ) -> None:
        super().__init__(base_url, timeout=timeout, max_workers=max_workers)
        self._client = client or httpx.Client(base_url=self.base_url, timeout=timeout)

    def execute(self, descriptor: RequestDescriptor) -> TransportResponse:
        """Issue the GET request and return the raw result.

        Raises:
            TransportError: Timeout, connection failure or any other
                            ``httpx`` transport error.
        """
        url = self.url_for(descriptor)
        logger.debug("GET %s params=%s", url, sorted(descriptor.query))

        try:
            response = self._client.get(url, params=dict(descriptor.query))
        except httpx.TimeoutException as exc:
            raise self._failure(f"Request timed out after {self.timeout:.1f}s", url, exc) from exc
        except httpx.ConnectError as exc:
            raise self._failure("Cannot connect to service", url, exc) from exc
        except httpx.HTTPError as exc:
            raise self._failure(f"Request failed: {exc}", url, exc) from exc

        return TransportResponse(
            status_code=response.status_code,
            body=response.content or None,
            message=response.reason_phrase or "",
        )

    def close(self) -> None:
        try:
            super().close()
        finally:
            self._client.close()


def create_transport(
    backend: Backend,
    base_url: str,
    *,
    timeout: float = DEFAULT_TIMEOUT,
    max_workers: int = DEFAULT_MAX_WORKERS,
) -> RequestsTransport | HttpxTransport:
    """Build a transport for ``base_url`` using the named HTTP library."""
    if backend == "requests":
        return RequestsTransport(base_url, timeout=timeout, max_workers=max_workers)
    if backend == "httpx":
        return HttpxTransport(base_url, timeout=timeout, max_workers=max_workers)
    raise ValueError(f"Unknown HTTP backend: {backend!r} (expected 'requests' or 'httpx')")
