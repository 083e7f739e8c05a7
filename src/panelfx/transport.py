"""HTTP transport for talking to the panel controller.

The client only needs two calls, GET and PUT, each returning the status
code and raw body. ``Transport`` is the protocol the client depends on;
``RequestsTransport`` is the default implementation over a
``requests.Session``. Tests and embedders can inject anything else that
satisfies the protocol.
"""

import logging
from dataclasses import dataclass
from typing import Any, Protocol, runtime_checkable

import requests

from panelfx.exceptions import wrap_transport_error

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class TransportResponse:
    """Status code and raw body of one HTTP exchange."""

    status_code: int
    content: bytes = b""


@runtime_checkable
class Transport(Protocol):
    """Protocol for the HTTP collaborator.

    Implementations raise TransportError when no response is obtained and
    never interpret the status code.
    """

    def get(self, url: str) -> TransportResponse:
        """Issue a GET request."""
        ...

    def put(self, url: str, body: Any) -> TransportResponse:
        """Issue a PUT request with ``body`` serialized as JSON."""
        ...


class RequestsTransport:
    """
    Transport backed by a shared ``requests.Session``.

    One session is reused for connection pooling. Sessions are safe to share
    across threads for independent requests like these.

    Usage:
        with RequestsTransport(timeout=5.0) as transport:
            response = transport.get(url)
    """

    def __init__(self, timeout: float = 5.0, session: requests.Session | None = None):
        """
        Initialize the transport.

        Args:
            timeout: Seconds to wait for connect and read
            session: Optional pre-configured session (a new one is created otherwise)
        """
        self._timeout = timeout
        self._session = session or requests.Session()

    @property
    def timeout(self) -> float:
        return self._timeout

    def get(self, url: str) -> TransportResponse:
        return self._send("GET", url)

    def put(self, url: str, body: Any) -> TransportResponse:
        return self._send("PUT", url, json=body)

    def _send(self, method: str, url: str, **kwargs: Any) -> TransportResponse:
        try:
            response = self._session.request(method, url, timeout=self._timeout, **kwargs)
        except requests.RequestException as e:
            safe_url = _redact(url)
            logger.warning(f"{method} {safe_url} failed: {e}")
            raise wrap_transport_error(e, safe_url) from e

        return TransportResponse(status_code=response.status_code, content=response.content)

    def close(self) -> None:
        """Close the underlying session."""
        self._session.close()

    def __enter__(self) -> "RequestsTransport":
        return self

    def __exit__(self, exc_type, exc_val, exc_tb) -> None:
        self.close()


def _redact(url: str) -> str:
    """Hide the auth token segment that precedes ``/effects``."""
    head, sep, tail = url.partition("/effects")
    if not sep:
        return url
    base, _, _token = head.rpartition("/")
    return f"{base}/***{sep}{tail}"
