"""Custom exceptions for the wp-mini client."""

from types import MappingProxyType
from typing import Optional


class WattpadError(Exception):
    """Base exception for all wp-mini errors."""

    def __init__(self, message: str, status_code: Optional[int] = None) -> None:
        super().__init__(message)
        self.message = message
        self.status_code = status_code


class RequestError(WattpadError):
    """Raised when the HTTP request itself fails (connection, DNS, timeout)."""


class ParseError(WattpadError):
    """Raised when a response body cannot be decoded into the expected shape."""


class AuthenticationFailed(WattpadError):
    """Raised when login does not establish a session."""

    def __init__(self, message: str = "Authentication failed: invalid credentials or missing cookies") -> None:
        super().__init__(message)


class AuthenticationRequired(WattpadError):
    """Raised before any I/O when a field or endpoint needs a logged-in client."""

    def __init__(self, field: str, context: str) -> None:
        super().__init__(f"Authentication required for '{field}': {context}")
        self.field = field
        self.context = context


class MissingRequiredField(WattpadError):
    """Raised when a reference lacks the field needed to fetch the full resource."""

    def __init__(self, field: str, context: str) -> None:
        super().__init__(f"Missing a required field: '{field}'. Context: {context}")
        self.field = field
        self.context = context


class ApiError(WattpadError):
    """Raised when the API answers with an error envelope."""

    def __init__(
        self,
        code: int,
        error_type: str,
        message: str,
        status_code: Optional[int] = None,
    ) -> None:
        super().__init__(f"API Error {code} ({error_type}): {message}", status_code=status_code)
        self.code = code
        self.error_type = error_type
        self.api_message = message


class UserNotFound(ApiError):
    """API error 1014: the requested user does not exist."""


class StoryNotFound(ApiError):
    """API error 1017: the requested story does not exist."""


class PermissionDeniedNotLoggedIn(ApiError):
    """API error 1018: permission denied because the user is not logged in."""


class AccessDenied(ApiError):
    """API error 1154: access to the resource was denied."""


API_ERROR_CODES = MappingProxyType({
    1014: UserNotFound,
    1017: StoryNotFound,
    1018: PermissionDeniedNotLoggedIn,
    1154: AccessDenied,
})


def error_from_response(
    code: int,
    error_type: str,
    message: str,
    status_code: Optional[int] = None,
) -> ApiError:
    """
    Build the exception for an API error envelope.

    Known codes map to their specific subclass; anything else becomes a
    plain ApiError carrying the envelope verbatim.
    """
    error_cls = API_ERROR_CODES.get(code, ApiError)
    return error_cls(code, error_type, message, status_code=status_code)
