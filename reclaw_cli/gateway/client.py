"""
HTTP Client for the gateway.

Thin async transport over httpx. Exactly one request per send(); failures are
reported immediately and never retried. All requests include the
X-Frontend-ID: cli header for server-side log routing.
"""

from dataclasses import dataclass
from typing import Any

import httpx

from reclaw_cli.core.config import get_server_base_url
from reclaw_cli.core.exceptions import InvalidServerError, TransportError
from reclaw_cli.core.logging import get_logger, log_with_source
from reclaw_cli.gateway.envelope import OutboundRequest
from reclaw_cli.gateway.results import Failure

logger = get_logger(__name__)

ALLOWED_SCHEMES = ("http://", "https://")


@dataclass(frozen=True, slots=True)
class RawResponse:
    """Status and undecoded body of a gateway response."""

    status_code: int
    body: bytes


def normalize_base_url(value: str) -> str:
    """
    Validate and normalize a server base URL.

    Raises:
        InvalidServerError: If the URL is blank, not http(s), or unparsable.
    """
    trimmed = value.strip()
    if not trimmed:
        raise InvalidServerError("server URL cannot be empty")

    without_trailing = trimmed.rstrip("/")
    if not without_trailing.startswith(ALLOWED_SCHEMES):
        raise InvalidServerError("server URL must start with http:// or https://")

    try:
        url = httpx.URL(without_trailing)
    except httpx.InvalidURL as e:
        raise InvalidServerError(str(e)) from e
    if not url.host:
        raise InvalidServerError("server URL has no host")
    return without_trailing


def normalize_path(path: str) -> str:
    """Ensure the request path starts with a slash."""
    return path if path.startswith("/") else f"/{path}"


class GatewayClient:
    """
    HTTP client for gateway communication.

    Usage:
        client = GatewayClient("http://127.0.0.1:18789")
        try:
            raw = await client.send(OutboundRequest("GET", "/healthz"))
        finally:
            await client.close()
    """

    def __init__(
        self,
        base_url: str,
        timeout: float = 30.0,
        transport: httpx.AsyncBaseTransport | None = None,
    ) -> None:
        """
        Initialize the gateway client.

        Args:
            base_url: Gateway base URL (http or https).
            timeout: Request timeout in seconds.
            transport: Optional httpx transport, used by tests.

        Raises:
            InvalidServerError: If base_url is blank or not http(s).
        """
        self.base_url = normalize_base_url(base_url)
        self.timeout = timeout
        self._transport = transport
        self._client: httpx.AsyncClient | None = None

    def _get_client(self) -> httpx.AsyncClient:
        """Get or create the HTTP client."""
        if self._client is None or self._client.is_closed:
            self._client = httpx.AsyncClient(
                base_url=self.base_url,
                timeout=self.timeout,
                headers={"X-Frontend-ID": "cli"},
                transport=self._transport,
            )
        return self._client

    async def close(self) -> None:
        """Close the HTTP client."""
        if self._client and not self._client.is_closed:
            await self._client.aclose()
            self._client = None

    async def request(
        self,
        method: str,
        path: str,
        **kwargs: Any,
    ) -> httpx.Response:
        """
        Make an HTTP request to the gateway.

        Args:
            method: HTTP method (GET, POST)
            path: Gateway path (e.g., /healthz, /)
            **kwargs: Additional arguments for httpx

        Returns:
            httpx.Response

        Raises:
            httpx.HTTPError: On request failure
        """
        client = self._get_client()
        path = normalize_path(path)
        # The root path targets the base URL itself, prefix included.
        target = self.base_url if path == "/" else path

        log_with_source(
            logger,
            "cli",
            "debug",
            "API request",
            method=method,
            path=path,
        )

        try:
            response = await client.request(method, target, **kwargs)

            log_with_source(
                logger,
                "cli",
                "debug",
                "API response",
                method=method,
                path=path,
                status_code=response.status_code,
            )

            return response

        except httpx.HTTPError as e:
            log_with_source(
                logger,
                "cli",
                "error",
                "API request failed",
                method=method,
                path=path,
                error=str(e),
            )
            raise

    async def send(self, outbound: OutboundRequest) -> RawResponse | Failure:
        """
        Perform the single request for an invocation.

        Returns:
            RawResponse, or Failure(TransportError) when the request could
            not be completed.
        """
        kwargs: dict[str, Any] = {}
        if outbound.body is not None:
            kwargs["json"] = outbound.body

        try:
            response = await self.request(outbound.method, outbound.path, **kwargs)
        except httpx.HTTPError as e:
            return Failure(TransportError(str(e) or type(e).__name__))

        return RawResponse(status_code=response.status_code, body=response.content)


def create_gateway_client(
    server: str | None = None,
    timeout: float | None = None,
) -> GatewayClient:
    """
    Build a client from flags, environment and client.yaml.

    Raises:
        InvalidServerError: If the resolved URL is blank, not http(s), or unparsable.
        ConfigurationError: If RECLAW_* variables or client.yaml are invalid.
    """
    base_url, effective_timeout = get_server_base_url(server, timeout)
    return GatewayClient(base_url, effective_timeout)
