"""Pydantic models for Wattpad API objects."""

from typing import TYPE_CHECKING, Any, Awaitable, Iterable, Optional, Union

from pydantic import BaseModel, ConfigDict, Field, ValidationError, field_validator
from pydantic.alias_generators import to_camel

from .exceptions import MissingRequiredField
from .fields import PartField, UserField

if TYPE_CHECKING:
    from .client import WattpadClient
    from .sync_client import SyncWattpadClient


class WattpadModel(BaseModel):
    """
    Base for all API records.

    Every field is optional: the API only returns what was selected, and a
    field whose value does not fit its type is treated as absent rather than
    failing the whole response.
    """

    model_config = ConfigDict(
        alias_generator=to_camel,
        populate_by_name=True,
        coerce_numbers_to_str=True,
    )

    @field_validator("*", mode="wrap")
    @classmethod
    def _absent_if_malformed(cls, value: Any, handler: Any) -> Any:
        try:
            return handler(value)
        except ValidationError:
            return None


class Language(WattpadModel):
    """A story language."""

    id: Optional[int] = None
    name: Optional[str] = None


class TextUrl(WattpadModel):
    """Expiring links to a part's text content."""

    text: Optional[str] = None
    refresh_token: Optional[str] = Field(default=None, alias="refresh_token")


class PartContent(WattpadModel):
    """The text of a story part as returned by the JSON content endpoint."""

    text: Optional[str] = None
    text_hash: Optional[str] = Field(default=None, alias="text_hash")


class UserStub(WattpadModel):
    """
    Lightweight user summary embedded in other objects (e.g. a story's author).

    Use fetch_full_profile() to load the complete User.
    """

    username: Optional[str] = Field(default=None, alias="name")
    avatar: Optional[str] = None
    fullname: Optional[str] = None
    verified: Optional[bool] = None

    def fetch_full_profile(
        self,
        client: "Union[WattpadClient, SyncWattpadClient]",
        fields: Optional[Iterable[Union[UserField, str]]] = None,
    ) -> Union["User", Awaitable["User"]]:
        """
        Fetch the full profile for this user.

        Args:
            client: WattpadClient or SyncWattpadClient
            fields: Optional UserField selection (defaults when omitted)

        Returns:
            The User from a sync client; an awaitable resolving to the User
            from the async client

        Raises:
            MissingRequiredField: The stub has no username (no request is made)

        Example:
            user = await story.user.fetch_full_profile(client)
        """
        if self.username is None:
            raise MissingRequiredField(
                field="username",
                context="Cannot fetch full profile without a username.",
            )
        return client.user.get_user_info(self.username, fields)


class User(WattpadModel):
    """A full user profile."""

    username: Optional[str] = None
    avatar: Optional[str] = None
    is_private: Optional[bool] = None
    background_url: Optional[str] = None
    name: Optional[str] = None
    full_name: Optional[str] = Field(default=None, alias="fullname")
    description: Optional[str] = None
    badges: Optional[list[str]] = None
    status: Optional[str] = None
    gender: Optional[str] = None
    gender_code: Optional[str] = None
    language: Optional[int] = None
    locale: Optional[str] = None
    create_date: Optional[str] = None
    modify_date: Optional[str] = None
    location: Optional[str] = None
    verified: Optional[bool] = None
    ambassador: Optional[bool] = None
    facebook: Optional[str] = None
    website: Optional[str] = None
    lulu: Optional[str] = None
    smashwords: Optional[str] = None
    bubok: Optional[str] = None
    votes_received: Optional[int] = None
    num_stories_published: Optional[int] = None
    num_following: Optional[int] = None
    num_followers: Optional[int] = None
    num_messages: Optional[int] = None
    num_lists: Optional[int] = None
    verified_email: Optional[bool] = Field(default=None, alias="verified_email")
    preferred_categories: Optional[list[str]] = Field(default=None, alias="preferred_categories")
    allow_crawler: Optional[bool] = None
    deeplink: Optional[str] = None


class PartReference(WattpadModel):
    """Lightweight link to a story part (first/last published part of a story)."""

    id: Optional[int] = None
    create_date: Optional[str] = None

    def fetch_full_part(
        self,
        client: "Union[WattpadClient, SyncWattpadClient]",
        fields: Optional[Iterable[Union[PartField, str]]] = None,
    ) -> Union["Part", Awaitable["Part"]]:
        """
        Fetch the full Part this reference points to.

        Returns the Part from a sync client, or an awaitable from the async
        client. Raises MissingRequiredField, without any request, when the
        reference has no id.
        """
        if self.id is None:
            raise MissingRequiredField(field="id", context="Cannot fetch full part without an id.")
        return client.story.get_part_info(self.id, fields)


class PartStub(WattpadModel):
    """Summary of a story part as listed in Story.parts."""

    id: Optional[int] = None
    title: Optional[str] = None
    url: Optional[str] = None
    text_url: Optional[TextUrl] = Field(default=None, alias="text_url")
    rating: Optional[int] = None
    draft: Optional[bool] = None
    modify_date: Optional[str] = None
    create_date: Optional[str] = None
    has_banned_images: Optional[bool] = None
    length: Optional[int] = None
    video_id: Optional[str] = None
    photo_url: Optional[str] = None
    comment_count: Optional[int] = None
    vote_count: Optional[int] = None
    read_count: Optional[int] = None
    voted: Optional[bool] = None  # only returned to logged-in clients
    deleted: Optional[bool] = None

    def fetch_full_part(
        self,
        client: "Union[WattpadClient, SyncWattpadClient]",
        fields: Optional[Iterable[Union[PartField, str]]] = None,
    ) -> Union["Part", Awaitable["Part"]]:
        """Fetch the full Part for this stub; see PartReference.fetch_full_part."""
        if self.id is None:
            raise MissingRequiredField(field="id", context="Cannot fetch full part without an id.")
        return client.story.get_part_info(self.id, fields)


class Story(WattpadModel):
    """A story with its metadata, author and parts."""

    id: Optional[str] = None
    title: Optional[str] = None
    length: Optional[int] = None
    create_date: Optional[str] = None
    modify_date: Optional[str] = None
    vote_count: Optional[int] = None
    read_count: Optional[int] = None
    comment_count: Optional[int] = None
    language: Optional[Language] = None
    user: Optional[UserStub] = None
    description: Optional[str] = None
    cover: Optional[str] = None
    cover_timestamp: Optional[str] = Field(default=None, alias="cover_timestamp")
    completed: Optional[bool] = None
    categories: Optional[list[int]] = None
    tags: Optional[list[str]] = None
    rating: Optional[int] = None
    mature: Optional[bool] = None
    copyright: Optional[int] = None
    url: Optional[str] = None
    num_parts: Optional[int] = None
    first_part_id: Optional[int] = None
    first_published_part: Optional[PartReference] = None
    last_published_part: Optional[PartReference] = None
    parts: Optional[list[PartStub]] = None
    deleted: Optional[bool] = None


class Part(WattpadModel):
    """A full story part, optionally embedding its parent story."""

    id: Optional[int] = None
    title: Optional[str] = None
    url: Optional[str] = None
    text_url: Optional[TextUrl] = Field(default=None, alias="text_url")
    rating: Optional[int] = None
    draft: Optional[bool] = None
    modify_date: Optional[str] = None
    create_date: Optional[str] = None
    has_banned_images: Optional[bool] = None
    length: Optional[int] = None
    video_id: Optional[str] = None
    photo_url: Optional[str] = None
    comment_count: Optional[int] = None
    vote_count: Optional[int] = None
    read_count: Optional[int] = None
    group_id: Optional[str] = None
    voted: Optional[bool] = None
    group: Optional[Story] = None
    deleted: Optional[bool] = None
