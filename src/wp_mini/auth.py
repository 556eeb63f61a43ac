"""
Authentication state and the pre-flight authentication gate.

The gate runs before any network I/O so that an unauthenticated caller
asking for a protected field or endpoint fails fast. It is not a security
boundary: the API remains the final authority, and a login or logout that
races an in-flight request may leave that request gated on the old state.
"""

import threading
from typing import Iterable

from .exceptions import AuthenticationRequired
from .fields import Field, FieldSet, field_token, requires_auth


class AuthState:
    """
    Process-visible authentication flag shared by a client and its endpoint groups.

    Reads and writes are each atomic; nothing spans a check and the request
    that follows it.
    """

    def __init__(self, authenticated: bool = False) -> None:
        self._lock = threading.Lock()
        self._authenticated = authenticated

    @property
    def is_authenticated(self) -> bool:
        with self._lock:
            return self._authenticated

    def set(self, authenticated: bool) -> None:
        with self._lock:
            self._authenticated = authenticated

    def __repr__(self) -> str:
        return f"AuthState(authenticated={self.is_authenticated})"


def check_fields(kind: type[FieldSet], selection: Iterable[Field], is_authenticated: bool) -> None:
    """
    Reject a selection containing auth-gated fields when not logged in.

    Only top-level entries are inspected. Nested selections of composite
    fields are serialized as given and left to the API to reject.

    Raises:
        AuthenticationRequired: For the first gated entry, in selection order
    """
    if is_authenticated:
        return
    for field in selection:
        if requires_auth(kind, field):
            token = field_token(field)
            raise AuthenticationRequired(
                field=token,
                context=f"The field '{token}' requires authentication.",
            )


def check_endpoint(path: str, auth_required: bool, is_authenticated: bool) -> None:
    """
    Reject a call to an auth-gated endpoint when not logged in.

    Raises:
        AuthenticationRequired: With field "Endpoint" and the path in the context
    """
    if auth_required and not is_authenticated:
        raise AuthenticationRequired(
            field="Endpoint",
            context=f"The endpoint at '{path}' requires authentication.",
        )
