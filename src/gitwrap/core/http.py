"""
Shared HTTP client infrastructure for outbound API integrations.

Provides BaseApiClient with lifecycle management, default headers and
error translation. Callers get parsed JSON or an ExternalAPIError; there is
no retry or backoff, every call is a single attempt bounded by a timeout.

Usage:
    class MyClient(BaseApiClient):
        def __init__(self, api_key: str):
            super().__init__(
                base_url="https://api.example.com",
                headers={"Authorization": f"Bearer {api_key}"},
            )

        async def get_data(self) -> dict:
            return await self._get("/data")
"""

import logging
from typing import Any

import httpx

logger = logging.getLogger(__name__)


# ---------------------------------------------------------------------------
# Errors
# ---------------------------------------------------------------------------

class ExternalAPIError(Exception):
    """Base exception for external API errors.

    ``status_code`` is the upstream HTTP status, or None when the request
    never produced a response (timeout, connection failure).
    """

    def __init__(
        self,
        message: str,
        code: str = "EXTERNAL_API_ERROR",
        status_code: int | None = None,
    ):
        super().__init__(message)
        self.message = message
        self.code = code
        self.status_code = status_code

    @property
    def is_not_found(self) -> bool:
        return self.status_code == 404


# ---------------------------------------------------------------------------
# Base client
# ---------------------------------------------------------------------------

class BaseApiClient:
    """
    Async HTTP client base.

    Subclasses pass the base URL and auth headers, and add domain-specific methods.
    Use as an async context manager:

        async with MyClient(api_key="...") as client:
            data = await client._get("/endpoint")

    Or with lazy initialisation (for long-lived services):

        client = MyClient(api_key="...")
        data = await client._get("/endpoint")  # client auto-creates on first use
        await client.close()
    """

    def __init__(
        self,
        *,
        base_url: str,
        headers: dict[str, str] | None = None,
        timeout: float = 10.0,
        transport: httpx.AsyncBaseTransport | None = None,
    ):
        self._base_url = base_url.rstrip("/")
        self._default_headers = headers or {}
        self._timeout = timeout
        self._transport = transport
        self._client: httpx.AsyncClient | None = None

    # -- Lifecycle -----------------------------------------------------------

    async def __aenter__(self) -> "BaseApiClient":
        self._client = self._build_client()
        return self

    async def __aexit__(self, exc_type, exc_val, exc_tb) -> None:
        await self.close()

    def _build_client(self) -> httpx.AsyncClient:
        return httpx.AsyncClient(
            base_url=self._base_url,
            headers=self._default_headers,
            timeout=httpx.Timeout(self._timeout),
            transport=self._transport,
        )

    @property
    def client(self) -> httpx.AsyncClient:
        """Return the HTTP client, lazily creating it if needed."""
        if self._client is None or self._client.is_closed:
            self._client = self._build_client()
        return self._client

    async def close(self) -> None:
        """Close the HTTP client."""
        if self._client and not self._client.is_closed:
            await self._client.aclose()
            self._client = None

    def is_configured(self) -> bool:
        """
        Check if the client has required configuration (API keys, etc.).

        Override in subclasses that need configuration validation.
        """
        return True

    # -- HTTP methods --------------------------------------------------------

    async def _get(
        self,
        path: str,
        params: dict[str, Any] | None = None,
    ) -> Any:
        """Make a GET request."""
        return await self._request("GET", path, params=params)

    async def _request(
        self,
        method: str,
        path: str,
        params: dict[str, Any] | None = None,
    ) -> Any:
        """
        Make a single HTTP request and return the decoded JSON body.

        Raises:
            ExternalAPIError: On a non-2xx status or a transport failure
        """
        try:
            response = await self.client.request(
                method=method,
                url=path,
                params=params,
            )
            response.raise_for_status()
            return response.json()

        except httpx.HTTPStatusError as e:
            status = e.response.status_code
            raise ExternalAPIError(
                f"HTTP {status}: {e.response.text[:200]}",
                status_code=status,
            ) from e

        except httpx.RequestError as e:
            logger.warning(f"Request error on {method} {path}: {e!r}")
            raise ExternalAPIError(f"Request failed: {str(e)}") from e

        except ValueError as e:
            # Body was not JSON
            raise ExternalAPIError(
                f"Invalid JSON from {path}",
                code="INVALID_RESPONSE",
                status_code=response.status_code,
            ) from e
