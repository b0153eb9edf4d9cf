"""Service for logging in to AtCoder."""

from loguru import logger

from atcoder_init.domain.exceptions import InvalidStateError
from atcoder_init.domain.models import COOKIE_HEADER, CookieJar, Credentials
from atcoder_init.infrastructure.parsers import (
    BASE_URL,
    HTTPClientProtocol,
    URLParser,
    cookie_pairs,
    extract_csrf_token,
)


class AuthService:
    """Performs the two-step login handshake and returns the session cookies."""

    def __init__(self, *, http_client: HTTPClientProtocol, base_url: str = BASE_URL):
        """Initialize service with dependencies."""
        self.http_client = http_client
        self.base_url = base_url

    async def login(self, credentials: Credentials) -> CookieJar:
        """
        Log in and return the authenticated cookie jar.

        Both fields of ``credentials`` must be filled in by the caller.

        Raises:
            HTTPStatusError: If either request does not answer 200
            InvalidStateError: If the CSRF token is missing or the login was rejected
        """
        username, password = credentials.username, credentials.password
        if not username or password is None:
            raise InvalidStateError("Username and password are required to login")

        login_url = URLParser.build_login_url(self.base_url)
        logger.info(f"Logging in as {username}")

        login_page = await self.http_client.get(login_url)
        set_cookies = self.http_client.set_cookie_values(login_page)

        csrf_token = extract_csrf_token(set_cookies)
        if csrf_token is None:
            raise InvalidStateError("Could not find csrf_token")
        logger.debug("Found csrf_token in session cookie")

        # The login page cookies are sent explicitly, so the client store
        # only collects what the POST and its redirects set.
        self.http_client.clear_cookies()
        headers = {COOKIE_HEADER: "; ".join(cookie_pairs(set_cookies))}
        form = {
            "username": username,
            "password": password,
            "csrf_token": csrf_token,
        }
        await self.http_client.post(login_url, headers=headers, data=form)

        jar = CookieJar(self.http_client.cookie_headers())
        if not jar.contains(username):
            logger.debug(f"No cookie mentions {username} after login")
            raise InvalidStateError("Failed to login")

        logger.info(f"Logged in as {username}")
        return jar
