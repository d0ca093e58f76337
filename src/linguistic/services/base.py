"""
Base class for the four service wrappers.

Every wrapper owns one :class:`~linguistic.http.gateway.ServiceGateway` and
exposes each remote operation twice: a blocking method that returns the
decoded result, and an ``*_async`` twin that takes a
:class:`~linguistic.http.gateway.ResponseHandler` and returns immediately.
Both shapes go through the gateway's single pipeline.

Subclasses set:
    SERVICE:          Gateway service name.
    BASE_URL:         Scheme and host of the remote service.
    DEFAULT_VERSION:  Version used when none is passed.
    DEFAULT_FORMAT:   Response format used when none is passed.
    REQUIRES_KEY:     Whether the service rejects anonymous requests.
"""

from __future__ import annotations

from typing import TYPE_CHECKING, Any, ClassVar

from linguistic.http.gateway import ServiceGateway
from linguistic.http.transport import RequestsTransport, Transport
from linguistic.parameters import ResponseFormat, Version

if TYPE_CHECKING:
    from linguistic.config import ClientConfig


class BaseService:
    """
    Shared construction and lifecycle for the service wrappers.

    Args:
        key:             API key.  Required unless ``REQUIRES_KEY`` is false.
        version:         API version; defaults to ``DEFAULT_VERSION``.
        response_format: Response format; defaults to ``DEFAULT_FORMAT``.
        transport:       Transport to use.  A :class:`RequestsTransport` for
                         ``BASE_URL`` is created when omitted.

    Raises:
        ValueError: Missing key, or a version/format of another service.
    """

    SERVICE: ClassVar[str]
    BASE_URL: ClassVar[str]
    DEFAULT_VERSION: ClassVar[Version]
    DEFAULT_FORMAT: ClassVar[ResponseFormat]
    REQUIRES_KEY: ClassVar[bool] = True

    def __init__(
        self,
        key: str | None = None,
        *,
        version: Version | None = None,
        response_format: ResponseFormat | None = None,
        transport: Transport | None = None,
    ) -> None:
        self._require_key(key)

        owned = transport is None
        if transport is None:
            transport = RequestsTransport(self.BASE_URL)
        try:
            self._gateway = ServiceGateway(
                service=self.SERVICE,
                version=version or self.DEFAULT_VERSION,
                response_format=response_format or self.DEFAULT_FORMAT,
                transport=transport,
                key=key if self.REQUIRES_KEY else None,
            )
        except ValueError:
            if owned:
                transport.close()
            raise

    @classmethod
    def _require_key(cls, key: str | None) -> None:
        if cls.REQUIRES_KEY and not key:
            raise ValueError(f"An API key is required for the {cls.SERVICE}")

    @classmethod
    def from_config(cls, cfg: ClientConfig) -> Any:
        """Build the service from the ``[<service>]`` and ``[http]`` settings."""
        settings = cfg.service_settings(cls.SERVICE)
        cls._require_key(settings.key)
        transport = cfg.create_transport(settings.base_url or cls.BASE_URL)
        try:
            return cls(settings.key, transport=transport)
        except ValueError:
            transport.close()
            raise

    @property
    def gateway(self) -> ServiceGateway:
        return self._gateway

    @property
    def version(self) -> Version:
        return self._gateway.version

    @property
    def response_format(self) -> ResponseFormat:
        return self._gateway.response_format

    def close(self) -> None:
        """Release the underlying transport."""
        self._gateway.close()

    def __enter__(self) -> Any:
        return self

    def __exit__(self, exc_type: Any, exc_val: Any, exc_tb: Any) -> None:
        self.close()

    def __repr__(self) -> str:
        return (
            f"{type(self).__name__}"
            f"(version={self.version.tag!r}, format={self.response_format.tag!r})"
        )
