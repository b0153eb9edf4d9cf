"""Async HTTP client with a persistent cookie store."""

from typing import Any, Mapping, Optional

from curl_cffi import CurlError
from curl_cffi.requests import AsyncSession, Response
from loguru import logger

from atcoder_init.domain.exceptions import HTTPStatusError, TransportError

DEFAULT_TIMEOUT = 30
DEFAULT_IMPERSONATE = "chrome"


class AsyncHTTPClient:
    """Thin wrapper around curl_cffi's AsyncSession gating every call on HTTP 200."""

    def __init__(
        self,
        timeout: float = DEFAULT_TIMEOUT,
        impersonate: str = DEFAULT_IMPERSONATE,
        session: Optional[AsyncSession] = None,
    ):
        """
        Initialize client.

        Args:
            timeout: Per-request timeout in seconds
            impersonate: Browser fingerprint passed to curl_cffi
            session: Pre-built session (mainly for tests)
        """
        self.timeout = timeout
        self.session = session or AsyncSession(
            impersonate=impersonate,
            timeout=timeout,
            allow_redirects=True,
        )

    async def __aenter__(self) -> "AsyncHTTPClient":
        return self

    async def __aexit__(self, *exc_info: Any) -> None:
        await self.close()

    async def close(self) -> None:
        """Release the underlying curl handles."""
        await self.session.close()

    async def get(self, url: str, headers: Optional[Mapping[str, str]] = None) -> Response:
        """Send a GET request and require a 200 response."""
        return await self._request("GET", url, headers=headers)

    async def post(
        self,
        url: str,
        headers: Optional[Mapping[str, str]] = None,
        data: Optional[Mapping[str, str]] = None,
    ) -> Response:
        """Send a form-encoded POST request and require a 200 response."""
        return await self._request("POST", url, headers=headers, data=data)

    async def get_text(self, url: str, headers: Optional[Mapping[str, str]] = None) -> str:
        """Get text content from URL."""
        response = await self.get(url, headers=headers)
        try:
            return response.text
        except (CurlError, UnicodeDecodeError) as e:
            raise TransportError(f"Failed to decode response body from {url}: {e}") from e

    async def _request(self, method: str, url: str, **kwargs: Any) -> Response:
        logger.debug(f"{method} {url}")

        try:
            if method == "POST":
                response = await self.session.post(url, **kwargs)
            else:
                response = await self.session.get(url, **kwargs)
        except CurlError as e:
            logger.debug(f"Transport failure on {method} {url}: {e}")
            raise TransportError(f"{method} {url} failed: {e}") from e

        if response.status_code != 200:
            raise HTTPStatusError(response.status_code, url)

        logger.debug(f"{method} {url} -> {response.status_code}")
        return response

    @staticmethod
    def set_cookie_values(response: Response) -> list[str]:
        """Raw Set-Cookie header values carried by a response."""
        return list(response.headers.get_list("set-cookie"))

    def cookie_headers(self) -> list[str]:
        """Cookies accumulated by the session, rendered as ``name=value``."""
        return [f"{cookie.name}={cookie.value}" for cookie in self.session.cookies.jar]

    def clear_cookies(self) -> None:
        """Forget every cookie the session has accumulated."""
        self.session.cookies.clear()
