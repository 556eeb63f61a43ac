"""wp-mini - an unofficial Python client for the Wattpad API."""

from .auth import AuthState
from .client import WattpadClient
from .exceptions import (
    AccessDenied,
    ApiError,
    AuthenticationFailed,
    AuthenticationRequired,
    MissingRequiredField,
    ParseError,
    PermissionDeniedNotLoggedIn,
    RequestError,
    StoryNotFound,
    UserNotFound,
    WattpadError,
)
from .fields import (
    LanguageField,
    NestedField,
    PartContentField,
    PartField,
    PartReferenceField,
    PartStubField,
    StoryField,
    TextUrlField,
    UserField,
    UserStubField,
    default_selection,
    requires_auth,
    serialize,
)
from .models import (
    Language,
    Part,
    PartContent,
    PartReference,
    PartStub,
    Story,
    TextUrl,
    User,
    UserStub,
)
from .sync_client import SyncWattpadClient, sync_client

__version__ = "0.1.0"

__all__ = [
    # Main clients
    "WattpadClient",
    "SyncWattpadClient",
    "sync_client",
    "AuthState",
    # Fields
    "LanguageField",
    "NestedField",
    "PartContentField",
    "PartField",
    "PartReferenceField",
    "PartStubField",
    "StoryField",
    "TextUrlField",
    "UserField",
    "UserStubField",
    "default_selection",
    "requires_auth",
    "serialize",
    # Models
    "Language",
    "Part",
    "PartContent",
    "PartReference",
    "PartStub",
    "Story",
    "TextUrl",
    "User",
    "UserStub",
    # Exceptions
    "WattpadError",
    "RequestError",
    "ParseError",
    "AuthenticationFailed",
    "AuthenticationRequired",
    "MissingRequiredField",
    "ApiError",
    "UserNotFound",
    "StoryNotFound",
    "PermissionDeniedNotLoggedIn",
    "AccessDenied",
]
