"""
Async HTTP transport for the API.

This module provides a thin async client built on httpx with:
- Bearer token authentication for endpoints that require it
- Accept-Language on every request
- Transport failures mapped onto the client's exception types

Status codes are not interpreted here; that is ``tyria.dispatch``'s job.
"""

from typing import Dict, Optional
import logging

import httpx
from pydantic import BaseModel, ConfigDict

from tyria.exceptions import (
    AuthenticationError,
    ConnectionError as ClientConnectionError,
    NetworkError,
    TimeoutError as ClientTimeoutError,
)

logger = logging.getLogger(__name__)

# Set from the session only
SESSION_HEADERS = frozenset({"accept-language", "authorization"})


class ClientSession(BaseModel):
    """Credentials and locale shared by every request. Read-only once built."""

    model_config = ConfigDict(frozen=True)

    lang: str = "en"
    token: Optional[str] = None

    def is_authenticated(self) -> bool:
        return self.token is not None

    def __repr__(self) -> str:
        token = "set" if self.token else "unset"
        return f"ClientSession(lang={self.lang!r}, token={token})"


class AsyncHTTPClient:
    """
    Async HTTP client for API requests.

    This client handles:
    - Base URL management
    - Authentication and locale header injection
    - Transport error mapping
    """

    def __init__(
        self,
        base_url: str,
        session: Optional[ClientSession] = None,
        timeout: float = 30.0,
        headers: Optional[Dict[str, str]] = None,
        transport: Optional[httpx.AsyncBaseTransport] = None,
    ):
        """
        Initialize the HTTP client.

        Args:
            base_url: API origin (e.g., "https://api.guildwars2.com")
            session: Token and locale used for requests
            timeout: Request timeout in seconds
            headers: Additional headers to include in all requests
            transport: Custom httpx transport (mostly for tests)
        """
        self.base_url = base_url.rstrip("/")
        self.session = session or ClientSession()
        self.timeout = timeout
        self._default_headers = headers or {}
        self._transport = transport
        self._client: Optional[httpx.AsyncClient] = None

    async def _get_client(self) -> httpx.AsyncClient:
        """Get or create the underlying httpx client."""
        if self._client is None or self._client.is_closed:
            self._client = httpx.AsyncClient(
                base_url=self.base_url,
                timeout=httpx.Timeout(self.timeout),
                follow_redirects=True,
                transport=self._transport,
            )
        return self._client

    async def close(self) -> None:
        """Close the underlying HTTP client."""
        if self._client and not self._client.is_closed:
            await self._client.aclose()
            self._client = None

    async def __aenter__(self) -> "AsyncHTTPClient":
        await self._get_client()
        return self

    async def __aexit__(self, exc_type, exc_val, exc_tb) -> None:
        await self.close()

    def _build_headers(self, extra_headers: Optional[Dict[str, str]] = None) -> Dict[str, str]:
        """
        Build request headers with the session locale.

        Accept-Language and Authorization belong to the session: caller
        supplied values for them are dropped.
        """
        headers = {"Accept": "application/json"}
        for source in (self._default_headers, extra_headers or {}):
            headers.update(
                (name, value) for name, value in source.items()
                if name.lower() not in SESSION_HEADERS
            )
        headers["Accept-Language"] = self.session.lang
        return headers

    def _add_auth_header(self, headers: Dict[str, str]) -> Dict[str, str]:
        """Add the bearer token, which authenticated endpoints cannot do without."""
        if not self.session.is_authenticated():
            raise AuthenticationError()
        headers["Authorization"] = f"Bearer {self.session.token}"
        return headers

    async def get(
        self,
        path: str,
        *,
        headers: Optional[Dict[str, str]] = None,
        authenticated: bool = False,
    ) -> httpx.Response:
        """
        Make a GET request.

        Args:
            path: Request path including any query string
            headers: Additional headers
            authenticated: Whether to send the bearer token

        Returns:
            httpx.Response object, whatever its status

        Raises:
            AuthenticationError: If authenticated and no token is configured
            TimeoutError: On request timeout
            ConnectionError: On connection failures
            NetworkError: On any other transport failure
        """
        request_headers = self._build_headers(headers)
        if authenticated:
            request_headers = self._add_auth_header(request_headers)

        client = await self._get_client()
        logger.debug(f"GET {path}")

        try:
            response = await client.get(path, headers=request_headers)
        except httpx.TimeoutException as e:
            raise ClientTimeoutError(f"Request timed out: {e}") from e
        except httpx.ConnectError as e:
            raise ClientConnectionError(f"Connection failed: {e}") from e
        except httpx.HTTPError as e:
            raise NetworkError(f"Request failed: {e}") from e

        logger.debug(f"GET {path} -> {response.status_code}")
        return response
