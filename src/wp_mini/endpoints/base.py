"""Shared plumbing for endpoint groups."""

from typing import Any, Union
from urllib.parse import quote

import httpx

from ..auth import AuthState
from ..request import AsyncRequestBuilder, RequestBuilder, SyncRequestBuilder


def format_path(template: str, **segments: Any) -> str:
    """
    Fill a path template, percent-encoding each value as a single segment.

    A "/", "?" or "#" in a username or id stays inside its segment instead of
    changing which resource is requested.
    """
    return template.format(**{key: quote(str(value), safe="") for key, value in segments.items()})


class EndpointGroup:
    """
    A set of related endpoints sharing the client's transport and auth state.

    The AuthState is held by reference: a login through the owning client is
    visible to every group at once.
    """

    builder_cls: type = AsyncRequestBuilder

    def __init__(
        self,
        http: Union[httpx.AsyncClient, httpx.Client],
        auth: AuthState,
        base_url: str,
    ) -> None:
        self.http = http
        self.auth = auth
        self.base_url = base_url

    def _request(self, method: str, path: str) -> RequestBuilder:
        return self.builder_cls(self.http, self.auth, self.base_url, method, path)


class SyncEndpointGroup(EndpointGroup):
    builder_cls = SyncRequestBuilder
