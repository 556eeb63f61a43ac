"""Main asynchronous client for the Wattpad API."""

import logging
from typing import Any, Optional

import httpx

from .auth import AuthState
from .config import (
    DEFAULT_BASE_URL,
    DEFAULT_TIMEOUT,
    DEFAULT_USER_AGENT,
    LOGIN_PARAMS,
    LOGIN_PATH,
    LOGOUT_PATH,
)
from .endpoints import StoryClient, UserClient
from .exceptions import AuthenticationFailed
from .request import wrap_transport_error

logger = logging.getLogger(__name__)


def build_headers(user_agent: Optional[str], headers: Optional[dict[str, str]]) -> dict[str, str]:
    """Merge custom headers with the User-Agent, which always wins."""
    merged = dict(headers or {})
    merged["User-Agent"] = user_agent or DEFAULT_USER_AGENT
    return merged


def sets_session_cookie(response: httpx.Response) -> bool:
    """
    True if any response in the redirect chain set a cookie.

    Login redirects on success, so the session cookie usually arrives on an
    intermediate response rather than the final one.
    """
    return any(len(hop.cookies) > 0 for hop in [*response.history, response])


class WattpadClient:
    """
    Asynchronous Python client for the Wattpad API.

    Usage:
        async with WattpadClient() as client:
            story = await client.story.get_story_info(
                12345678,
                [StoryField.TITLE, StoryField.VOTE_COUNT],
            )

            # Fields such as PartStubField.VOTED need a session
            await client.authenticate("username", "password")
            story = await client.story.get_story_info(
                12345678,
                [StoryField.parts(PartStubField.ID, PartStubField.VOTED)],
            )
    """

    def __init__(
        self,
        base_url: str = DEFAULT_BASE_URL,
        user_agent: Optional[str] = None,
        headers: Optional[dict[str, str]] = None,
        timeout: float = DEFAULT_TIMEOUT,
        http_client: Optional[httpx.AsyncClient] = None,
    ):
        """
        Initialize the client.

        Args:
            base_url: API base URL (default: https://www.wattpad.com)
            user_agent: User-Agent header (default: a desktop browser UA)
            headers: Extra headers sent with every request
            timeout: Request timeout in seconds (default: 30.0)
            http_client: Pre-configured httpx.AsyncClient. When given, it is
                used as-is and user_agent, headers and timeout are ignored.
                It should keep cookies, since the session lives in them.
        """
        self.base_url = base_url.rstrip("/")
        self.timeout = timeout
        self._owns_http = http_client is None
        if http_client is None:
            http_client = httpx.AsyncClient(
                headers=build_headers(user_agent, headers),
                timeout=timeout,
                follow_redirects=True,
            )
        self._http = http_client
        self._auth = AuthState()

        self.user = UserClient(self._http, self._auth, self.base_url)
        self.story = StoryClient(self._http, self._auth, self.base_url)

    async def __aenter__(self) -> "WattpadClient":
        """Async context manager entry."""
        return self

    async def __aexit__(self, *args: Any) -> None:
        """Async context manager exit."""
        await self.aclose()

    async def aclose(self) -> None:
        """Close the underlying HTTP client if this client created it."""
        if self._owns_http:
            await self._http.aclose()

    @property
    def is_authenticated(self) -> bool:
        """True after a successful authenticate() and until deauthenticate()."""
        return self._auth.is_authenticated

    async def authenticate(self, username: str, password: str) -> None:
        """
        Log in with a username and password.

        Success is detected by the login response, or any redirect before
        it, setting at least one cookie, whatever the status code. The
        cookies are kept by the HTTP client for later requests. Any other
        outcome leaves the client unauthenticated.

        Raises:
            AuthenticationFailed: No session cookie was returned
            RequestError: The request could not be sent
        """
        try:
            response = await self._http.post(
                f"{self.base_url}{LOGIN_PATH}",
                params=list(LOGIN_PARAMS),
                data={"username": username, "password": password},
            )
        except httpx.HTTPError as e:
            self._auth.set(False)
            raise wrap_transport_error(e) from e

        if not sets_session_cookie(response):
            self._auth.set(False)
            logger.debug("Login returned no session cookies (status %s)", response.status_code)
            raise AuthenticationFailed()

        self._auth.set(True)
        logger.debug("Login succeeded")

    async def deauthenticate(self) -> None:
        """
        Log out and invalidate the session.

        The client is unauthenticated afterwards even if the request fails.

        Raises:
            RequestError: The logout request could not be sent
        """
        try:
            await self._http.get(f"{self.base_url}{LOGOUT_PATH}")
        except httpx.HTTPError as e:
            raise wrap_transport_error(e) from e
        finally:
            self._auth.set(False)
            logger.debug("Logged out")
