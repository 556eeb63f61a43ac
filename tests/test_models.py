"""Unit tests for API record models."""

from typing import Any

import pytest
import respx
from httpx import Response

from wp_mini import (
    MissingRequiredField,
    Part,
    PartField,
    PartReference,
    PartStub,
    Story,
    SyncWattpadClient,
    User,
    UserField,
    UserStub,
)


def test_story_decodes_wire_names(story_payload: dict[str, Any]) -> None:
    """Camel-case and snake-case wire names both land on their attributes."""
    story = Story.model_validate(story_payload)

    assert story.id == "336166598"
    assert story.vote_count == 1520
    assert story.cover_timestamp == "2023-04-05T08:00:00Z"
    assert story.language.name == "English"
    assert story.user.username == "quietwriter"
    assert story.first_published_part.id == 1315441198
    assert story.parts[0].text_url.text.endswith("id=1315441198")
    assert story.parts[1].text_url is None


def test_unselected_fields_are_absent() -> None:
    story = Story.model_validate({"title": "Only a title"})

    assert story.title == "Only a title"
    assert story.user is None
    assert story.parts is None
    assert story.mature is None


def test_numeric_story_id_coerced() -> None:
    """Story ids are strings on the wire but sometimes arrive as numbers."""
    assert Story.model_validate({"id": 336166598}).id == "336166598"


def test_malformed_field_is_absent() -> None:
    """A value of the wrong type is dropped rather than failing the record."""
    user = User.model_validate({"username": "quietwriter", "numFollowers": "many", "badges": "staff"})

    assert user.username == "quietwriter"
    assert user.num_followers is None
    assert user.badges is None


def test_part_embeds_group(part_payload: dict[str, Any]) -> None:
    part = Part.model_validate(part_payload)

    assert part.group_id == "336166598"
    assert isinstance(part.group, Story)
    assert part.group.title == "The Lighthouse Keeper"


def test_models_accept_attribute_names() -> None:
    """Models can be built in code using attribute names."""
    user = User(full_name="Quiet Writer", verified_email=True)
    stub = UserStub(username="quietwriter")

    assert user.full_name == "Quiet Writer"
    assert user.verified_email is True
    assert stub.username == "quietwriter"


@respx.mock
def test_fetch_full_profile(base_url: str, user_payload: dict[str, Any]) -> None:
    """A user stub loads the full profile with the given selection."""
    route = respx.get(f"{base_url}/api/v3/users/quietwriter").mock(return_value=Response(200, json=user_payload))

    with SyncWattpadClient(base_url=base_url) as client:
        user = UserStub(username="quietwriter").fetch_full_profile(client, [UserField.NUM_FOLLOWERS])

    assert user.num_followers == 2048
    assert route.calls.last.request.url.params["fields"] == "numFollowers"


@respx.mock
def test_fetch_full_part_from_reference(
    base_url: str, story_payload: dict[str, Any], part_payload: dict[str, Any]
) -> None:
    respx.get(f"{base_url}/api/v3/story_parts/1315441198").mock(return_value=Response(200, json=part_payload))
    story = Story.model_validate(story_payload)

    with SyncWattpadClient(base_url=base_url) as client:
        part = story.first_published_part.fetch_full_part(client)

    assert part.title == "Chapter 1"


@pytest.mark.parametrize(
    ("fetch", "field"),
    [
        (lambda client: UserStub(avatar="a.png").fetch_full_profile(client), "username"),
        (lambda client: PartReference().fetch_full_part(client), "id"),
    ],
)
def test_fetch_full_without_key_makes_no_request(base_url: str, fetch: Any, field: str) -> None:
    """A stub missing its key field fails before any request."""
    with respx.mock(assert_all_called=False) as respx_mock:
        route = respx_mock.route()

        with SyncWattpadClient(base_url=base_url) as client:
            with pytest.raises(MissingRequiredField) as exc_info:
                fetch(client)

    assert exc_info.value.field == field
    assert not route.called


@respx.mock
def test_fetch_full_part_with_selection(base_url: str, part_payload: dict[str, Any]) -> None:
    """The selection accepts field members and plain field names alike."""
    route = respx.get(f"{base_url}/api/v3/story_parts/1315441198").mock(return_value=Response(200, json=part_payload))

    with SyncWattpadClient(base_url=base_url) as client:
        part = PartStub(id=1315441198).fetch_full_part(client, ["title", PartField.GROUP_ID])

    assert part.group_id == "336166598"
    assert route.calls.last.request.url.params["fields"] == "title,groupId"
