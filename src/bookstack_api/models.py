"""Typed shapes for the BookStack entities this client understands.

Only the fields the client needs are declared. Unknown keys in a payload
are ignored and missing keys fall back to the field default, so the shapes
keep working when the remote schema grows.
"""

from __future__ import annotations

from dataclasses import dataclass, field, fields
from typing import Any, TypeVar

T = TypeVar("T", bound="Entity")


@dataclass
class Entity:
    """Base for all entity shapes."""

    @classmethod
    def from_dict(cls: type[T], data: dict[str, Any]) -> T:
        """Build an instance from a decoded JSON object.

        Args:
            data: Decoded JSON object

        Returns:
            Instance populated from the known keys of ``data``

        Raises:
            TypeError: If ``data`` is not a JSON object
        """
        if not isinstance(data, dict):
            raise TypeError(f"{cls.__name__} expects a JSON object, got {type(data).__name__}")
        known = {f.name for f in fields(cls)}
        values = {key: value for key, value in data.items() if key in known}
        return cls(**cls._convert(values))

    @classmethod
    def _convert(cls, values: dict[str, Any]) -> dict[str, Any]:
        """Hook for subclasses to turn nested objects into shapes."""
        return values

    def to_dict(self) -> dict[str, Any]:
        """Return the instance as a plain dict."""
        result: dict[str, Any] = {}
        for f in fields(self):
            value = getattr(self, f.name)
            if isinstance(value, Entity):
                value = value.to_dict()
            elif isinstance(value, list):
                value = [item.to_dict() if isinstance(item, Entity) else item for item in value]
            result[f.name] = value
        return result


@dataclass
class Tag(Entity):
    """Name/value tag attached to content."""

    name: str = ""
    value: str = ""
    order: int | None = None


@dataclass
class UserSummary(Entity):
    """Short user reference embedded in detailed responses."""

    id: int = 0
    name: str = ""
    slug: str = ""


@dataclass
class Role(Entity):
    id: int = 0
    display_name: str = ""


@dataclass
class User(Entity):
    """A BookStack user."""

    id: int = 0
    name: str = ""
    slug: str = ""
    email: str = ""
    created_at: str | None = None
    updated_at: str | None = None
    external_auth_id: str = ""
    last_activity_at: str | None = None
    profile_url: str | None = None
    edit_url: str | None = None
    avatar_url: str | None = None
    roles: list[Role] = field(default_factory=list)

    @classmethod
    def _convert(cls, values: dict[str, Any]) -> dict[str, Any]:
        if "roles" in values:
            values["roles"] = [Role.from_dict(role) for role in values["roles"] or []]
        return values


@dataclass
class Book(Entity):
    """A book as returned by the listing endpoint."""

    id: int = 0
    name: str = ""
    slug: str = ""
    description: str = ""
    created_at: str | None = None
    updated_at: str | None = None
    created_by: int | None = None
    updated_by: int | None = None
    owned_by: int | None = None
    default_template_id: int | None = None


@dataclass
class BookContent(Entity):
    """A chapter or page listed in a book's contents."""

    id: int = 0
    name: str = ""
    slug: str = ""
    type: str = ""
    book_id: int | None = None
    priority: int = 0
    created_at: str | None = None
    updated_at: str | None = None
    url: str | None = None
    pages: list[BookContent] = field(default_factory=list)

    @classmethod
    def _convert(cls, values: dict[str, Any]) -> dict[str, Any]:
        if "pages" in values:
            values["pages"] = [BookContent.from_dict(page) for page in values["pages"] or []]
        return values


@dataclass
class BookDetailed(Entity):
    """A book as returned by the read, create and update endpoints."""

    id: int = 0
    name: str = ""
    slug: str = ""
    description: str = ""
    description_html: str = ""
    created_at: str | None = None
    updated_at: str | None = None
    created_by: UserSummary | None = None
    updated_by: UserSummary | None = None
    owned_by: UserSummary | None = None
    default_template_id: int | None = None
    contents: list[BookContent] = field(default_factory=list)
    tags: list[Tag] = field(default_factory=list)
    cover: dict[str, Any] | None = None

    @classmethod
    def _convert(cls, values: dict[str, Any]) -> dict[str, Any]:
        # Create/update return bare ids where read returns user objects
        for key in ("created_by", "updated_by", "owned_by"):
            value = values.get(key)
            if isinstance(value, dict):
                values[key] = UserSummary.from_dict(value)
            elif isinstance(value, int):
                values[key] = UserSummary(id=value)
        if "contents" in values:
            values["contents"] = [BookContent.from_dict(item) for item in values["contents"] or []]
        if "tags" in values:
            values["tags"] = [Tag.from_dict(tag) for tag in values["tags"] or []]
        return values


@dataclass
class ErrorBody(Entity):
    """The ``error`` object of a failed response."""

    code: int | None = None
    message: str = ""


@dataclass
class Envelope:
    """Wrapper the API puts around listing payloads and errors."""

    data: Any = None
    total: int | None = None
    error: ErrorBody | None = None


SINGLE_SHAPES: tuple[type[Entity], ...] = (User, Book, BookDetailed)
MULTIPLE_SHAPES: tuple[type[Entity], ...] = (User, Book)
