"""User endpoints."""

from typing import Iterable, Optional, Union

from ..config import USER_PATH
from ..fields import UserField
from ..models import User
from .base import EndpointGroup, SyncEndpointGroup, format_path


class UserClient(EndpointGroup):
    """Access to public user profiles."""

    async def get_user_info(
        self,
        username: str,
        fields: Optional[Iterable[Union[UserField, str]]] = None,
    ) -> User:
        """
        Fetch a user's profile.

        Args:
            username: The user to fetch
            fields: UserField selection; the default selection when omitted

        Returns:
            The User

        Raises:
            AuthenticationRequired: A selected field needs a logged-in client
            UserNotFound: No such user (API error 1014)
            ApiError: Any other API error
            RequestError: The request could not be sent

        Example:
            user = await client.user.get_user_info(
                "some_writer",
                [UserField.USERNAME, UserField.NUM_FOLLOWERS],
            )
        """
        request = self._request("GET", format_path(USER_PATH, username=username)).fields(UserField, fields)
        return await request.execute(User)


class SyncUserClient(SyncEndpointGroup):
    """Synchronous access to public user profiles."""

    def get_user_info(
        self,
        username: str,
        fields: Optional[Iterable[Union[UserField, str]]] = None,
    ) -> User:
        """Fetch a user's profile. See UserClient.get_user_info."""
        request = self._request("GET", format_path(USER_PATH, username=username)).fields(UserField, fields)
        return request.execute(User)
