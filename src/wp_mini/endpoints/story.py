"""Story, part and part-content endpoints."""

from typing import Iterable, Optional, Union

from ..config import (
    CONTENT_MODE_STORYTEXT,
    CONTENT_OUTPUT_JSON,
    CONTENT_OUTPUT_ZIP,
    CONTENT_PATH,
    PART_PATH,
    STORY_PATH,
)
from ..fields import PartField, StoryField
from ..models import Part, PartContent, Story
from ..request import RequestBuilder
from .base import EndpointGroup, SyncEndpointGroup, format_path


class _StoryRequests:
    """Request construction shared by the async and sync story groups."""

    def _story_info(self, story_id: int, fields: Optional[Iterable]) -> RequestBuilder:
        return self._request("GET", format_path(STORY_PATH, story_id=story_id)).fields(StoryField, fields)

    def _part_info(self, part_id: int, fields: Optional[Iterable]) -> RequestBuilder:
        return self._request("GET", format_path(PART_PATH, part_id=part_id)).fields(PartField, fields)

    def _part_content(self, part_id: int, output: Optional[str] = None) -> RequestBuilder:
        return (
            self._request("GET", CONTENT_PATH)
            .param("m", CONTENT_MODE_STORYTEXT)
            .param("id", part_id)
            .param("output", output)
        )

    def _story_zip(self, story_id: int) -> RequestBuilder:
        return (
            self._request("GET", CONTENT_PATH)
            .param("m", CONTENT_MODE_STORYTEXT)
            .param("group_id", story_id)
            .param("output", CONTENT_OUTPUT_ZIP)
        )


class StoryClient(_StoryRequests, EndpointGroup):
    """Access to stories, story parts and their content."""

    async def get_story_info(
        self,
        story_id: int,
        fields: Optional[Iterable[Union[StoryField, str]]] = None,
    ) -> Story:
        """
        Fetch a story's metadata.

        Args:
            story_id: The story to fetch
            fields: StoryField selection; the default selection when omitted

        Returns:
            The Story

        Raises:
            AuthenticationRequired: A selected field needs a logged-in client
            StoryNotFound: No such story (API error 1017)
            ApiError: Any other API error

        Example:
            story = await client.story.get_story_info(
                12345678,
                [StoryField.TITLE, StoryField.user(UserStubField.USERNAME)],
            )
        """
        return await self._story_info(story_id, fields).execute(Story)

    async def get_part_info(
        self,
        part_id: int,
        fields: Optional[Iterable[Union[PartField, str]]] = None,
    ) -> Part:
        """
        Fetch a single story part.

        Args:
            part_id: The part to fetch
            fields: PartField selection; the default selection when omitted

        Returns:
            The Part
        """
        return await self._part_info(part_id, fields).execute(Part)

    async def get_part_content_raw(self, part_id: int) -> str:
        """Fetch the plain text of a story part."""
        return await self._part_content(part_id).execute_text()

    async def get_part_content_json(self, part_id: int) -> PartContent:
        """Fetch the text of a story part as a structured PartContent."""
        return await self._part_content(part_id, CONTENT_OUTPUT_JSON).execute(PartContent)

    async def get_story_content_zip(self, story_id: int) -> bytes:
        """
        Download the text of a whole story as a ZIP archive.

        Example:
            data = await client.story.get_story_content_zip(12345678)
            Path("12345678.zip").write_bytes(data)
        """
        return await self._story_zip(story_id).execute_bytes()


class SyncStoryClient(_StoryRequests, SyncEndpointGroup):
    """Synchronous access to stories, story parts and their content."""

    def get_story_info(
        self,
        story_id: int,
        fields: Optional[Iterable[Union[StoryField, str]]] = None,
    ) -> Story:
        return self._story_info(story_id, fields).execute(Story)

    def get_part_info(
        self,
        part_id: int,
        fields: Optional[Iterable[Union[PartField, str]]] = None,
    ) -> Part:
        return self._part_info(part_id, fields).execute(Part)

    def get_part_content_raw(self, part_id: int) -> str:
        return self._part_content(part_id).execute_text()

    def get_part_content_json(self, part_id: int) -> PartContent:
        return self._part_content(part_id, CONTENT_OUTPUT_JSON).execute(PartContent)

    def get_story_content_zip(self, story_id: int) -> bytes:
        return self._story_zip(story_id).execute_bytes()
