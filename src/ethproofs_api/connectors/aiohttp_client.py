"""Concrete HTTP client implementation for async requests.

Wraps aiohttp behind the IHttpClient abstraction.
"""

import asyncio
from typing import Any

import aiohttp

from ethproofs_api.config.value_objects import HttpClientConfig
from ethproofs_api.exceptions import RequestError
from ethproofs_api.observability import get_transport_logger
from ethproofs_api.ports.http import HttpResponse, IHttpClient
from ethproofs_api.rpc.base import HttpMethod

log = get_transport_logger("aiohttp-client")


class AiohttpClient(IHttpClient):
    """HTTP client implementation using aiohttp."""

    def __init__(self, config: HttpClientConfig | None = None):
        """Initialize HTTP client.

        Args:
            config: HTTP client configuration (defaults: no client-side timeout)
        """
        self.config = config or HttpClientConfig()
        self._session: aiohttp.ClientSession | None = None

    async def _get_session(self) -> aiohttp.ClientSession:
        """Get or create aiohttp session."""
        if self._session is None or self._session.closed:
            timeout = aiohttp.ClientTimeout(
                total=self.config.timeout,
                connect=self.config.connect_timeout,
            )
            self._session = aiohttp.ClientSession(timeout=timeout)
        return self._session

    async def request(
        self,
        method: HttpMethod,
        url: str,
        json: dict[str, Any] | None = None,
        headers: dict[str, str] | None = None,
    ) -> HttpResponse:
        """Execute one request.

        Args:
            method: HTTP method
            url: Absolute URL
            json: JSON body, sent only when not None
            headers: HTTP headers

        Returns:
            HttpResponse with status, raw body text, headers

        Raises:
            RequestError: On connection errors, timeouts or unreadable
                success bodies
        """
        session = await self._get_session()

        try:
            async with session.request(
                method,
                url,
                json=json,
                headers=headers,
                ssl=self.config.verify_ssl,
            ) as resp:
                text = await self._read_text(resp)
                return HttpResponse(
                    status_code=resp.status,
                    text=text,
                    headers=dict(resp.headers),
                    url=str(resp.url),
                )
        except asyncio.TimeoutError as e:
            raise RequestError(f"{method} {url} timed out", cause=e) from e
        except aiohttp.ClientError as e:
            raise RequestError(f"{method} {url} failed: {e}", cause=e) from e

    @staticmethod
    async def _read_text(resp: aiohttp.ClientResponse) -> str | None:
        try:
            return await resp.text()
        except (aiohttp.ClientError, UnicodeDecodeError) as e:
            # Error statuses fall back to a placeholder message upstream
            if 200 <= resp.status < 300:
                raise RequestError(f"Could not read response body: {e}", cause=e) from e
            log.debug("error_body_unreadable", status=resp.status, error=str(e))
            return None

    async def close(self) -> None:
        """Close HTTP session."""
        if self._session:
            await self._session.close()
            self._session = None
