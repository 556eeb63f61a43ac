"""Endpoint groups: user and story/part operations."""

from .story import StoryClient, SyncStoryClient
from .user import SyncUserClient, UserClient

__all__ = [
    "StoryClient",
    "SyncStoryClient",
    "SyncUserClient",
    "UserClient",
]
