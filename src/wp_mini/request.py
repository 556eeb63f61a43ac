"""
Request construction and execution.

A request is described by an immutable builder: every chained call returns a
new builder, so partially built requests can be shared freely. Field
selection is resolved and gated when ``fields()`` is called; the endpoint
level requirement is checked when the request is executed.

    story = await (
        AsyncRequestBuilder(http, auth, base_url, "GET", "/api/v3/stories/1")
        .fields(StoryField, [StoryField.TITLE])
        .execute(Story)
    )
"""

import logging
from dataclasses import dataclass, replace
from enum import Enum
from typing import Any, Iterable, Optional, Union

import httpx

from .auth import AuthState, check_endpoint, check_fields
from .exceptions import RequestError
from .fields import Field, FieldSet, resolve_selection, serialize_selection
from .resolver import resolve_bytes, resolve_json, resolve_text

logger = logging.getLogger(__name__)


def wrap_transport_error(e: httpx.HTTPError) -> RequestError:
    """Convert an httpx transport failure into a RequestError."""
    if isinstance(e, httpx.TimeoutException):
        return RequestError(f"Request timeout: {e}")
    return RequestError(f"HTTP error: {e}")


def _stringify(value: Any) -> str:
    if isinstance(value, bool):
        return "true" if value else "false"
    if isinstance(value, Enum):
        return str(value.value)
    return str(value)


@dataclass(frozen=True)
class RequestBuilder:
    """Accumulates method, path, query parameters and auth requirements."""

    http: Union[httpx.AsyncClient, httpx.Client]
    auth: AuthState
    base_url: str
    method: str
    path: str
    params: tuple = ()
    auth_required: bool = False

    @property
    def url(self) -> str:
        return f"{self.base_url}{self.path}"

    def param(self, key: str, value: Optional[Any]) -> "RequestBuilder":
        """Add ``key=value`` to the query; a None value adds nothing."""
        if value is None:
            return self
        return replace(self, params=self.params + ((key, _stringify(value)),))

    def fields(self, kind: type[FieldSet], fields: Optional[Iterable[Union[Field, str]]] = None) -> "RequestBuilder":
        """
        Add the ``fields`` parameter for a field selection.

        An empty or missing selection uses the kind's defaults.

        Raises:
            AuthenticationRequired: A top-level field needs authentication
                and the client is not logged in
        """
        selection = resolve_selection(kind, fields)
        check_fields(kind, selection, self.auth.is_authenticated)
        return replace(self, params=self.params + (("fields", serialize_selection(selection)),))

    def requires_auth(self) -> "RequestBuilder":
        """Mark the whole endpoint as requiring authentication."""
        return replace(self, auth_required=True)

    def check_endpoint_auth(self) -> None:
        check_endpoint(self.path, self.auth_required, self.auth.is_authenticated)


class AsyncRequestBuilder(RequestBuilder):
    """Request builder executed over an ``httpx.AsyncClient``."""

    async def _send(self) -> httpx.Response:
        self.check_endpoint_auth()
        logger.debug("%s %s params=%s", self.method, self.path, [key for key, _ in self.params])
        try:
            return await self.http.request(self.method, self.url, params=list(self.params))
        except httpx.HTTPError as e:
            raise wrap_transport_error(e) from e

    async def execute(self, model: Any) -> Any:
        """Execute and decode the JSON body into ``model``."""
        return resolve_json(await self._send(), model)

    async def execute_text(self) -> str:
        """Execute and return the body as text."""
        return resolve_text(await self._send())

    async def execute_bytes(self) -> bytes:
        """Execute and return the raw body, e.g. for archive downloads."""
        return resolve_bytes(await self._send())


class SyncRequestBuilder(RequestBuilder):
    """Request builder executed over an ``httpx.Client``."""

    def _send(self) -> httpx.Response:
        self.check_endpoint_auth()
        logger.debug("%s %s params=%s", self.method, self.path, [key for key, _ in self.params])
        try:
            return self.http.request(self.method, self.url, params=list(self.params))
        except httpx.HTTPError as e:
            raise wrap_transport_error(e) from e

    def execute(self, model: Any) -> Any:
        return resolve_json(self._send(), model)

    def execute_text(self) -> str:
        return resolve_text(self._send())

    def execute_bytes(self) -> bytes:
        return resolve_bytes(self._send())
