"""Domain records for users and their portfolios.

Field names are snake_case in Python and camelCase on the wire, so a
record serialized with ``model_dump(by_alias=True)`` matches the JSON
shape clients send and receive.
"""

from __future__ import annotations

from datetime import UTC, datetime
from typing import Any

from pydantic import BaseModel, ConfigDict, Field, field_validator
from pydantic.alias_generators import to_camel

from folio_builder.constants.themes import DEFAULT_THEME

__all__ = [
    "LIST_FIELDS",
    "PORTFOLIO_FIELDS",
    "Experience",
    "Portfolio",
    "PortfolioUpdate",
    "Project",
    "User",
]


class CamelModel(BaseModel):
    """Base model accepting either snake_case or camelCase keys."""

    model_config = ConfigDict(alias_generator=to_camel, populate_by_name=True)


class User(CamelModel):
    """Registered account. Immutable after creation."""

    model_config = ConfigDict(frozen=True)

    id: int
    username: str
    password_hash: str
    created_at: datetime


class Experience(CamelModel):
    """A single work history entry."""

    id: str
    company: str = ""
    position: str = ""
    start_date: str = ""
    end_date: str | None = None
    is_current: bool = False
    description: str = ""

    @property
    def display_end(self) -> str | None:
        """End label shown to readers; ``Present`` wins over a stored end date."""
        if self.is_current:
            return "Present"
        return self.end_date or None


class Project(CamelModel):
    """A showcased project."""

    id: str
    title: str = ""
    description: str = ""
    image: str | None = None
    technologies: list[str] = Field(default_factory=list)
    demo_link: str | None = None
    github_link: str | None = None
    start_date: str | None = None
    end_date: str | None = None
    is_current: bool = False

    @property
    def display_end(self) -> str | None:
        if self.is_current:
            return "Present"
        return self.end_date or None


class Portfolio(CamelModel):
    """The per-user portfolio record.

    ``theme`` is kept as a plain string so that records written by older
    clients with an unknown theme still load; the renderer falls back to
    the default style for those.
    """

    user_id: int
    theme: str = DEFAULT_THEME.value
    first_name: str = ""
    last_name: str = ""
    title: str = ""
    bio: str = ""
    profile_photo_url: str = ""
    skills: list[str] = Field(default_factory=list)
    experiences: list[Experience] = Field(default_factory=list)
    projects: list[Project] = Field(default_factory=list)
    contact_email: str = ""
    contact_phone: str = ""
    contact_location: str = ""
    social_links: dict[str, str] = Field(default_factory=dict)
    is_published: bool = False
    updated_at: datetime = Field(default_factory=lambda: datetime.now(UTC))

    @property
    def full_name(self) -> str:
        return " ".join(part for part in (self.first_name, self.last_name) if part)


# Fields a client may change through a partial update.
PORTFOLIO_FIELDS = (
    "theme",
    "first_name",
    "last_name",
    "title",
    "bio",
    "profile_photo_url",
    "skills",
    "experiences",
    "projects",
    "contact_email",
    "contact_phone",
    "contact_location",
    "social_links",
    "is_published",
)

LIST_FIELDS = ("skills", "experiences", "projects")

_NON_NULLABLE = (*LIST_FIELDS, "social_links", "is_published", "theme")


def _ensure_unique(values: list[str], label: str) -> None:
    seen: set[str] = set()
    for value in values:
        if value in seen:
            raise ValueError(f"duplicate {label} {value!r}")
        seen.add(value)


class PortfolioUpdate(CamelModel):
    """Partial update payload.

    Only fields the caller actually sent end up in :meth:`changes`. Unknown
    keys are rejected, as is a client-supplied ``updatedAt``.
    """

    model_config = ConfigDict(extra="forbid")

    theme: str | None = None
    first_name: str | None = None
    last_name: str | None = None
    title: str | None = None
    bio: str | None = None
    profile_photo_url: str | None = None
    skills: list[str] | None = None
    experiences: list[Experience] | None = None
    projects: list[Project] | None = None
    contact_email: str | None = None
    contact_phone: str | None = None
    contact_location: str | None = None
    social_links: dict[str, str] | None = None
    is_published: bool | None = None

    @field_validator(*_NON_NULLABLE, mode="before")
    @classmethod
    def _reject_null(cls, value: Any) -> Any:
        if value is None:
            raise ValueError("cannot be null")
        return value

    @field_validator("skills")
    @classmethod
    def _unique_skills(cls, value: list[str] | None) -> list[str] | None:
        if value is not None:
            _ensure_unique(value, "skill")
        return value

    @field_validator("experiences", "projects")
    @classmethod
    def _unique_entry_ids(cls, value: list[Any] | None) -> list[Any] | None:
        if value is not None:
            _ensure_unique([entry.id for entry in value], "entry id")
        return value

    def changes(self) -> dict[str, Any]:
        """Return the explicitly provided fields, with null strings as empty."""
        result: dict[str, Any] = {}
        for name in PORTFOLIO_FIELDS:
            if name not in self.model_fields_set:
                continue
            value = getattr(self, name)
            result[name] = "" if value is None else value
        return result
