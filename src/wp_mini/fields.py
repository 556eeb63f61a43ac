"""
Field selection for Wattpad resources.

Every resource kind has a field set: a str-valued Enum whose members are the
simple (scalar) fields, with the member value being the exact wire token.
Fields that embed another resource are composite; they are built through the
field set's factory methods and carry their own nested selection:

    StoryField.user(UserStubField.USERNAME, UserStubField.AVATAR)
    # serializes as "user(name,avatar)"

The per-kind default selections and authentication requirements are static,
read-only tables exposed through default_selection() and requires_auth().
"""

from dataclasses import dataclass
from enum import Enum
from types import MappingProxyType
from typing import Iterable, Optional, Union


class FieldSet(str, Enum):
    """Base class for the per-resource field enumerations."""

    def __str__(self) -> str:
        return self.value


@dataclass(frozen=True)
class NestedField:
    """A composite field: an embedded resource with its own field selection."""

    kind: type[FieldSet]  # owning field set
    token: str
    sub_fields: tuple["Field", ...] = ()

    def __str__(self) -> str:
        return serialize(self)


Field = Union[FieldSet, NestedField]


def field_kind(field: Field) -> type[FieldSet]:
    """Return the field set a field identifier belongs to."""
    if isinstance(field, NestedField):
        return field.kind
    return type(field)


def field_token(field: Field) -> str:
    """Return the bare wire name of a field, without any nested selection."""
    if isinstance(field, NestedField):
        return field.token
    return field.value


def serialize(field: Field) -> str:
    """
    Render a field identifier in the API's wire format.

    Simple fields become their token; composite fields become
    "token(sub1,sub2,...)", recursively, with "token()" for an empty
    nested selection.
    """
    if isinstance(field, NestedField):
        return f"{field.token}({','.join(serialize(sub) for sub in field.sub_fields)})"
    return field.value


def _nested(
    kind: type[FieldSet],
    token: str,
    sub_kind: type[FieldSet],
    fields: tuple[Field, ...],
) -> NestedField:
    for field in fields:
        if field_kind(field) is not sub_kind:
            raise TypeError(f"'{token}' accepts {sub_kind.__name__} entries, got {field!r}")
    return NestedField(kind=kind, token=token, sub_fields=tuple(fields))


class LanguageField(FieldSet):
    """Fields of a Language object."""

    ID = "id"
    NAME = "name"  # e.g. "English"


class TextUrlField(FieldSet):
    """Fields of a text_url object (expiring links to part text)."""

    TEXT = "text"
    REFRESH_TOKEN = "refresh_token"


class PartContentField(FieldSet):
    """Fields of a PartContent object."""

    TEXT = "text"
    TEXT_HASH = "text_hash"


class PartReferenceField(FieldSet):
    """Fields of a PartReference, the lightweight link to a story part."""

    ID = "id"
    CREATE_DATE = "createDate"


class UserStubField(FieldSet):
    """Fields of a UserStub, the author summary embedded in stories."""

    USERNAME = "name"
    AVATAR = "avatar"
    FULL_NAME = "fullname"
    VERIFIED = "verified"


class UserField(FieldSet):
    """Fields of a full User profile."""

    USERNAME = "username"
    AVATAR = "avatar"
    IS_PRIVATE = "isPrivate"
    BACKGROUND_URL = "backgroundUrl"
    NAME = "name"
    DESCRIPTION = "description"
    BADGES = "badges"
    STATUS = "status"
    GENDER = "gender"
    GENDER_CODE = "genderCode"
    LANGUAGE = "language"
    LOCALE = "locale"
    CREATE_DATE = "createDate"
    MODIFY_DATE = "modifyDate"
    LOCATION = "location"
    VERIFIED = "verified"
    AMBASSADOR = "ambassador"
    FACEBOOK = "facebook"
    WEBSITE = "website"
    LULU = "lulu"
    SMASHWORDS = "smashwords"
    BUBOK = "bubok"
    VOTES_RECEIVED = "votesReceived"
    NUM_STORIES_PUBLISHED = "numStoriesPublished"
    NUM_FOLLOWING = "numFollowing"
    NUM_FOLLOWERS = "numFollowers"
    NUM_MESSAGES = "numMessages"
    NUM_LISTS = "numLists"
    VERIFIED_EMAIL = "verified_email"
    PREFERRED_CATEGORIES = "preferred_categories"
    ALLOW_CRAWLER = "allowCrawler"
    DEEPLINK = "deeplink"


class PartStubField(FieldSet):
    """Fields of a PartStub, the part summary listed inside a story."""

    ID = "id"
    TITLE = "title"
    URL = "url"
    RATING = "rating"
    DRAFT = "draft"
    CREATE_DATE = "createDate"
    MODIFY_DATE = "modifyDate"
    HAS_BANNED_IMAGES = "hasBannedImages"
    LENGTH = "length"  # reading time in seconds
    VIDEO_ID = "videoId"
    PHOTO_URL = "photoUrl"
    COMMENT_COUNT = "commentCount"
    VOTE_COUNT = "voteCount"
    READ_COUNT = "readCount"
    VOTED = "voted"  # requires authentication
    DELETED = "deleted"

    @classmethod
    def text_url(cls, *fields: TextUrlField) -> NestedField:
        """Links to the part's text content."""
        return _nested(cls, "text_url", TextUrlField, fields)


class PartField(FieldSet):
    """Fields of a full story Part."""

    ID = "id"
    TITLE = "title"
    URL = "url"
    RATING = "rating"
    DRAFT = "draft"
    MODIFY_DATE = "modifyDate"
    CREATE_DATE = "createDate"
    HAS_BANNED_IMAGES = "hasBannedImages"
    LENGTH = "length"
    VIDEO_ID = "videoId"
    PHOTO_URL = "photoUrl"
    COMMENT_COUNT = "commentCount"
    VOTE_COUNT = "voteCount"
    READ_COUNT = "readCount"
    GROUP_ID = "groupId"  # id of the parent story
    DELETED = "deleted"

    @classmethod
    def text_url(cls, *fields: TextUrlField) -> NestedField:
        """Links to the part's text content."""
        return _nested(cls, "text_url", TextUrlField, fields)

    @classmethod
    def group(cls, *fields: "StoryField") -> NestedField:
        """The parent story."""
        return _nested(cls, "group", StoryField, fields)


class StoryField(FieldSet):
    """Fields of a Story."""

    ID = "id"
    TITLE = "title"
    LENGTH = "length"
    CREATE_DATE = "createDate"
    MODIFY_DATE = "modifyDate"
    VOTE_COUNT = "voteCount"
    READ_COUNT = "readCount"
    COMMENT_COUNT = "commentCount"
    DESCRIPTION = "description"
    COVER = "cover"
    COVER_TIMESTAMP = "cover_timestamp"
    COMPLETED = "completed"
    CATEGORIES = "categories"
    TAGS = "tags"
    RATING = "rating"
    MATURE = "mature"
    COPYRIGHT = "copyright"
    URL = "url"
    NUM_PARTS = "numParts"
    FIRST_PART_ID = "firstPartId"
    DELETED = "deleted"

    @classmethod
    def language(cls, *fields: LanguageField) -> NestedField:
        return _nested(cls, "language", LanguageField, fields)

    @classmethod
    def user(cls, *fields: UserStubField) -> NestedField:
        """The story's author."""
        return _nested(cls, "user", UserStubField, fields)

    @classmethod
    def first_published_part(cls, *fields: PartReferenceField) -> NestedField:
        return _nested(cls, "firstPublishedPart", PartReferenceField, fields)

    @classmethod
    def last_published_part(cls, *fields: PartReferenceField) -> NestedField:
        return _nested(cls, "lastPublishedPart", PartReferenceField, fields)

    @classmethod
    def parts(cls, *fields: PartStubField) -> NestedField:
        """The story's parts, one stub per part."""
        return _nested(cls, "parts", PartStubField, fields)


FIELD_SETS = (
    LanguageField,
    TextUrlField,
    PartContentField,
    PartReferenceField,
    UserStubField,
    UserField,
    PartStubField,
    PartField,
    StoryField,
)

DEFAULT_FIELDS = MappingProxyType({
    LanguageField: (LanguageField.ID,),
    TextUrlField: (TextUrlField.TEXT,),
    PartContentField: (PartContentField.TEXT,),
    PartReferenceField: (PartReferenceField.ID,),
    UserStubField: (UserStubField.USERNAME, UserStubField.AVATAR),
    UserField: (
        UserField.USERNAME,
        UserField.AVATAR,
        UserField.BACKGROUND_URL,
        UserField.NAME,
        UserField.DESCRIPTION,
        UserField.CREATE_DATE,
        UserField.MODIFY_DATE,
        UserField.VOTES_RECEIVED,
        UserField.NUM_STORIES_PUBLISHED,
        UserField.NUM_FOLLOWING,
        UserField.NUM_FOLLOWERS,
        UserField.NUM_MESSAGES,
        UserField.NUM_LISTS,
    ),
    PartStubField: (
        PartStubField.ID,
        PartStubField.TITLE,
        PartStubField.text_url(TextUrlField.TEXT),
        PartStubField.RATING,
        PartStubField.VIDEO_ID,
        PartStubField.PHOTO_URL,
        PartStubField.MODIFY_DATE,
    ),
    PartField: (PartField.ID, PartField.TITLE, PartField.URL),
    StoryField: (
        StoryField.ID,
        StoryField.TITLE,
        StoryField.LENGTH,
        StoryField.CREATE_DATE,
        StoryField.MODIFY_DATE,
        StoryField.VOTE_COUNT,
        StoryField.READ_COUNT,
        StoryField.COMMENT_COUNT,
        StoryField.language(LanguageField.ID),
        StoryField.DESCRIPTION,
        StoryField.COVER,
        StoryField.COVER_TIMESTAMP,
        StoryField.COMPLETED,
        StoryField.CATEGORIES,
        StoryField.TAGS,
        StoryField.RATING,
        StoryField.MATURE,
        StoryField.COPYRIGHT,
        StoryField.URL,
        StoryField.NUM_PARTS,
        StoryField.first_published_part(PartReferenceField.ID),
        StoryField.last_published_part(PartReferenceField.ID),
        StoryField.parts(PartStubField.ID),
        StoryField.DELETED,
        StoryField.user(UserStubField.USERNAME),
    ),
})

AUTH_REQUIRED_FIELDS = MappingProxyType({
    PartStubField: frozenset({PartStubField.VOTED}),
})

# Keyed by wire token so a composite field matches whatever its nested selection.
_AUTH_REQUIRED_TOKENS = MappingProxyType({
    kind: frozenset(field_token(field) for field in fields)
    for kind, fields in AUTH_REQUIRED_FIELDS.items()
})


def serialize_selection(selection: Iterable[Field]) -> str:
    """Comma-join the serialized fields of a selection, keeping its order."""
    return ",".join(serialize(field) for field in selection)


def _require_kind(kind: type[FieldSet]) -> None:
    if kind not in DEFAULT_FIELDS:
        raise TypeError(f"{kind!r} is not a known field set")


def default_selection(kind: type[FieldSet]) -> tuple[Field, ...]:
    """Return the fixed default selection for a field set."""
    _require_kind(kind)
    return DEFAULT_FIELDS[kind]


def requires_auth(kind: type[FieldSet], field: Field) -> bool:
    """Return True if requesting this field of this kind needs a logged-in client."""
    return field_token(field) in _AUTH_REQUIRED_TOKENS.get(kind, frozenset())


def resolve_selection(
    kind: type[FieldSet],
    fields: Optional[Iterable[Union[Field, str]]] = None,
) -> tuple[Field, ...]:
    """
    Resolve the selection a single request will serialize.

    An empty or missing selection falls back to the kind's defaults. Plain
    strings are looked up as simple fields of the kind. Repeated fields are
    dropped, keeping the first occurrence and its position.

    Raises:
        TypeError: A field belongs to a different field set
        ValueError: A string does not name a field of the kind
    """
    _require_kind(kind)
    requested = tuple(fields or ())
    if not requested:
        return default_selection(kind)

    seen = set()
    resolved = []
    for field in requested:
        if isinstance(field, str) and not isinstance(field, FieldSet):
            field = kind(field)
        if field_kind(field) is not kind:
            raise TypeError(f"{field!r} is not a {kind.__name__}")
        token = field_token(field)
        if token in seen:
            continue
        seen.add(token)
        resolved.append(field)
    return tuple(resolved)
