"""Unit tests for response resolution and error mapping."""

from typing import Any, Callable

import pytest
from httpx import Response

from wp_mini import (
    AccessDenied,
    ApiError,
    ParseError,
    PermissionDeniedNotLoggedIn,
    Story,
    StoryNotFound,
    UserNotFound,
)
from wp_mini.exceptions import API_ERROR_CODES, error_from_response
from wp_mini.resolver import resolve_bytes, resolve_json, resolve_text


@pytest.mark.parametrize(
    ("code", "error_cls"),
    [
        (1014, UserNotFound),
        (1017, StoryNotFound),
        (1018, PermissionDeniedNotLoggedIn),
        (1154, AccessDenied),
    ],
)
def test_known_codes_map_to_specific_errors(
    code: int,
    error_cls: type,
    api_error: Callable[..., dict[str, Any]],
) -> None:
    """Known codes raise their specific variant, still an ApiError."""
    response = Response(400, json=api_error(code))

    with pytest.raises(error_cls) as exc_info:
        resolve_json(response, Story)

    assert isinstance(exc_info.value, ApiError)
    assert exc_info.value.code == code
    assert exc_info.value.status_code == 400


def test_unknown_code_is_generic_api_error(api_error: Callable[..., dict[str, Any]]) -> None:
    """Unmapped codes keep the envelope verbatim."""
    response = Response(500, json=api_error(9999, "WeirdError", "Something odd happened"))

    with pytest.raises(ApiError) as exc_info:
        resolve_json(response, Story)

    assert type(exc_info.value) is ApiError
    assert exc_info.value.code == 9999
    assert exc_info.value.error_type == "WeirdError"
    assert exc_info.value.api_message == "Something odd happened"
    assert str(exc_info.value) == "API Error 9999 (WeirdError): Something odd happened"


def test_code_table_is_fixed() -> None:
    """The remapping table holds exactly the four known codes."""
    assert set(API_ERROR_CODES) == {1014, 1017, 1018, 1154}
    assert type(error_from_response(1, "E", "m")) is ApiError


def test_undecodable_error_envelope_is_parse_error() -> None:
    """A failure body that is not an envelope surfaces as ParseError."""
    with pytest.raises(ParseError):
        resolve_json(Response(502, text="<html>Bad Gateway</html>"), Story)

    with pytest.raises(ParseError):
        resolve_text(Response(404, json={"detail": "missing"}))


def test_error_handling_is_shared_by_all_materializations(api_error: Callable[..., dict[str, Any]]) -> None:
    """Text and bytes results use the same failure mapping."""
    with pytest.raises(StoryNotFound):
        resolve_text(Response(404, json=api_error(1017)))

    with pytest.raises(StoryNotFound):
        resolve_bytes(Response(404, json=api_error(1017)))


def test_success_decodes_model(story_payload: dict[str, Any]) -> None:
    """A 2xx JSON body becomes the requested model."""
    story = resolve_json(Response(200, json=story_payload), Story)

    assert isinstance(story, Story)
    assert story.title == "The Lighthouse Keeper"
    assert story.vote_count == 1520


def test_malformed_json_is_parse_error() -> None:
    """Invalid JSON on success is terminal."""
    with pytest.raises(ParseError):
        resolve_json(Response(200, text="{not json"), Story)


def test_wrong_shape_is_parse_error() -> None:
    """A body of the wrong overall shape cannot be decoded."""
    with pytest.raises(ParseError):
        resolve_json(Response(200, json=[1, 2, 3]), Story)


def test_malformed_field_is_absent() -> None:
    """A single field of the wrong type becomes None instead of failing."""
    story = resolve_json(Response(200, json={"title": "Ok", "voteCount": "lots", "user": "nobody"}), Story)

    assert story.title == "Ok"
    assert story.vote_count is None
    assert story.user is None


def test_text_and_bytes_success() -> None:
    """Raw materializations return the body untouched."""
    assert resolve_text(Response(200, text="Chapter text")) == "Chapter text"
    assert resolve_bytes(Response(200, content=b"PK\x03\x04")) == b"PK\x03\x04"
