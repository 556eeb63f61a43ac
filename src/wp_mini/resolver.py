"""Classification of raw HTTP responses into decoded values or exceptions."""

from typing import Any, TypeVar

import httpx
from pydantic import BaseModel, Field, TypeAdapter, ValidationError

from .exceptions import ParseError, error_from_response

T = TypeVar("T")


class ApiErrorResponse(BaseModel):
    """The generic error envelope returned by the API on failure."""

    code: int
    error_type: str = Field(alias="error")
    message: str


def raise_for_api_error(response: httpx.Response) -> None:
    """
    Raise the mapped API error for a non-2xx response.

    Raises:
        UserNotFound, StoryNotFound, PermissionDeniedNotLoggedIn, AccessDenied:
            For the known error codes
        ApiError: For any other code, carrying the envelope verbatim
        ParseError: The error envelope itself could not be decoded
    """
    if response.is_success:
        return
    try:
        envelope = ApiErrorResponse.model_validate_json(response.content)
    except ValidationError as e:
        raise ParseError(
            f"Failed to parse error response: {e}",
            status_code=response.status_code,
        ) from e
    raise error_from_response(
        envelope.code,
        envelope.error_type,
        envelope.message,
        status_code=response.status_code,
    )


def resolve_json(response: httpx.Response, model: Any) -> Any:
    """Decode a successful JSON body into ``model`` (a model class or any type pydantic accepts)."""
    raise_for_api_error(response)
    try:
        return TypeAdapter(model).validate_json(response.content)
    except ValidationError as e:
        raise ParseError(
            f"Failed to parse JSON response: {e}",
            status_code=response.status_code,
        ) from e


def resolve_text(response: httpx.Response) -> str:
    raise_for_api_error(response)
    return response.text


def resolve_bytes(response: httpx.Response) -> bytes:
    raise_for_api_error(response)
    return response.content
