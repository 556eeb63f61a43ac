"""Synchronous client wrapper for the Wattpad API."""

import logging
from contextlib import contextmanager
from typing import Any, Generator, Optional

import httpx

from .auth import AuthState
from .client import build_headers, sets_session_cookie
from .config import (
    DEFAULT_BASE_URL,
    DEFAULT_TIMEOUT,
    LOGIN_PARAMS,
    LOGIN_PATH,
    LOGOUT_PATH,
)
from .endpoints import SyncStoryClient, SyncUserClient
from .exceptions import AuthenticationFailed
from .request import wrap_transport_error

logger = logging.getLogger(__name__)


class SyncWattpadClient:
    """
    Synchronous Python client for the Wattpad API.

    Usage:
        with SyncWattpadClient() as client:
            user = client.user.get_user_info("some_writer")
            text = client.story.get_part_content_raw(87654321)
    """

    def __init__(
        self,
        base_url: str = DEFAULT_BASE_URL,
        user_agent: Optional[str] = None,
        headers: Optional[dict[str, str]] = None,
        timeout: float = DEFAULT_TIMEOUT,
        http_client: Optional[httpx.Client] = None,
    ):
        """
        Initialize the client.

        Args:
            base_url: API base URL (default: https://www.wattpad.com)
            user_agent: User-Agent header (default: a desktop browser UA)
            headers: Extra headers sent with every request
            timeout: Request timeout in seconds (default: 30.0)
            http_client: Pre-configured httpx.Client, used as-is
        """
        self.base_url = base_url.rstrip("/")
        self.timeout = timeout
        self._owns_http = http_client is None
        if http_client is None:
            http_client = httpx.Client(
                headers=build_headers(user_agent, headers),
                timeout=timeout,
                follow_redirects=True,
            )
        self._http = http_client
        self._auth = AuthState()

        self.user = SyncUserClient(self._http, self._auth, self.base_url)
        self.story = SyncStoryClient(self._http, self._auth, self.base_url)

    def __enter__(self) -> "SyncWattpadClient":
        """Context manager entry."""
        return self

    def __exit__(self, *args: Any) -> None:
        """Context manager exit."""
        self.close()

    def close(self) -> None:
        """Close the underlying HTTP client if this client created it."""
        if self._owns_http:
            self._http.close()

    @property
    def is_authenticated(self) -> bool:
        return self._auth.is_authenticated

    def authenticate(self, username: str, password: str) -> None:
        """Log in with a username and password. See WattpadClient.authenticate."""
        try:
            response = self._http.post(
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

    def deauthenticate(self) -> None:
        """Log out; the client is unauthenticated afterwards even on failure."""
        try:
            self._http.get(f"{self.base_url}{LOGOUT_PATH}")
        except httpx.HTTPError as e:
            raise wrap_transport_error(e) from e
        finally:
            self._auth.set(False)
            logger.debug("Logged out")


@contextmanager
def sync_client(
    base_url: str = DEFAULT_BASE_URL,
    user_agent: Optional[str] = None,
    headers: Optional[dict[str, str]] = None,
    timeout: float = DEFAULT_TIMEOUT,
) -> Generator[SyncWattpadClient, None, None]:
    """
    Context manager for the synchronous client.

    Example:
        with sync_client() as client:
            story = client.story.get_story_info(12345678)
    """
    client = SyncWattpadClient(
        base_url=base_url,
        user_agent=user_agent,
        headers=headers,
        timeout=timeout,
    )
    with client:
        yield client
