"""Input validation for wizard steps and partial updates.

Step forms enforce the input-time constraints (required names, minimum
description length, URL and email syntax). Stored records are not held to
those constraints, so older data always loads.
"""

from __future__ import annotations

import uuid
from collections.abc import Mapping
from typing import Any

import pydantic
from pydantic import AnyHttpUrl, ConfigDict, EmailStr, Field, TypeAdapter, field_validator

from folio_builder.constants.themes import Theme, is_valid_theme
from folio_builder.errors import InvalidThemeError, ValidationError, to_validation_error
from folio_builder.models.portfolio import CamelModel, Experience, PortfolioUpdate, Project

__all__ = [
    "DetailsForm",
    "ExperienceForm",
    "ProjectForm",
    "add_skill",
    "new_entry_id",
    "parse_technologies",
    "to_validation_error",
    "validate_details",
    "validate_entries",
    "validate_experience",
    "validate_project",
    "validate_skills",
    "validate_theme",
    "validate_update",
]

MIN_BIO_LENGTH = 10
MIN_DESCRIPTION_LENGTH = 10

_URL_ADAPTER = TypeAdapter(AnyHttpUrl)
_EMAIL_ADAPTER = TypeAdapter(EmailStr)


def _require(value: str, message: str) -> str:
    if not value:
        raise ValueError(message)
    return value


def _min_length(value: str, length: int, message: str) -> str:
    if len(value) < length:
        raise ValueError(message)
    return value


def _check_url(value: str | None) -> str | None:
    if not value:
        return None
    try:
        _URL_ADAPTER.validate_python(value)
    except pydantic.ValidationError:
        raise ValueError("Please enter a valid URL") from None
    return value


def _check_email(value: str) -> str:
    if not value:
        return value
    try:
        _EMAIL_ADAPTER.validate_python(value)
    except pydantic.ValidationError:
        raise ValueError("Please enter a valid email address") from None
    return value


def new_entry_id() -> str:
    """Return a fresh identifier for an experience or project entry."""
    return uuid.uuid4().hex


def _entry_id(value: object) -> str:
    if isinstance(value, str) and value:
        return value
    return new_entry_id()


def parse_technologies(value: str | list[str] | None) -> list[str]:
    """Split a comma-separated technology string, trimming and dropping empties.

    Raises:
        ValueError: If *value* is neither a string nor a list of strings.
    """
    if value is None:
        return []
    parts = value.split(",") if isinstance(value, str) else value
    if not isinstance(parts, list) or not all(isinstance(part, str) for part in parts):
        raise ValueError("Technologies must be a comma-separated string or a list of strings")
    return [part.strip() for part in parts if part.strip()]


def add_skill(skills: list[str], skill: str) -> list[str]:
    """Return *skills* with *skill* appended unless blank or already present.

    The comparison is case-sensitive, so ``"Go"`` and ``"go"`` are distinct.

    Raises:
        ValidationError: If *skill* is not a string.
    """
    if not isinstance(skill, str):
        raise ValidationError("Skills must be text", ["skills"])
    cleaned = skill.strip()
    if not cleaned or cleaned in skills:
        return list(skills)
    return [*skills, cleaned]


# ----------------------------------------------------------------------
# Step forms
# ----------------------------------------------------------------------


class DetailsForm(CamelModel):
    """Personal details step."""

    model_config = ConfigDict(str_strip_whitespace=True)

    first_name: str = ""
    last_name: str = ""
    title: str = ""
    bio: str = ""
    contact_email: str = ""
    contact_phone: str = ""
    contact_location: str = ""
    profile_photo_url: str = ""
    skills: list[str] = Field(default_factory=list)
    social_links: dict[str, str] = Field(default_factory=dict)

    @field_validator("first_name")
    @classmethod
    def _first_name(cls, value: str) -> str:
        return _require(value, "First name is required")

    @field_validator("last_name")
    @classmethod
    def _last_name(cls, value: str) -> str:
        return _require(value, "Last name is required")

    @field_validator("title")
    @classmethod
    def _title(cls, value: str) -> str:
        return _require(value, "Professional title is required")

    @field_validator("contact_email")
    @classmethod
    def _contact_email(cls, value: str) -> str:
        return _check_email(value)

    @field_validator("bio")
    @classmethod
    def _bio(cls, value: str) -> str:
        return _min_length(
            value, MIN_BIO_LENGTH, f"Bio should be at least {MIN_BIO_LENGTH} characters"
        )

    @field_validator("skills")
    @classmethod
    def _skills(cls, value: list[str]) -> list[str]:
        result: list[str] = []
        for skill in value:
            result = add_skill(result, skill)
        return result

    @field_validator("social_links")
    @classmethod
    def _social_links(cls, value: dict[str, str]) -> dict[str, str]:
        return {platform: url.strip() for platform, url in value.items() if url and url.strip()}


class ExperienceForm(CamelModel):
    """Single experience entry as entered on the Experience step."""

    model_config = ConfigDict(str_strip_whitespace=True)

    company: str = ""
    position: str = ""
    start_date: str = ""
    end_date: str | None = None
    is_current: bool = False
    description: str = ""

    @field_validator("company")
    @classmethod
    def _company(cls, value: str) -> str:
        return _require(value, "Company name is required")

    @field_validator("position")
    @classmethod
    def _position(cls, value: str) -> str:
        return _require(value, "Position is required")

    @field_validator("start_date")
    @classmethod
    def _start_date(cls, value: str) -> str:
        return _require(value, "Start date is required")

    @field_validator("description")
    @classmethod
    def _description(cls, value: str) -> str:
        return _min_length(
            value,
            MIN_DESCRIPTION_LENGTH,
            f"Description should be at least {MIN_DESCRIPTION_LENGTH} characters",
        )

    def to_experience(self, entry_id: str) -> Experience:
        return Experience(
            id=entry_id,
            company=self.company,
            position=self.position,
            start_date=self.start_date,
            end_date=None if self.is_current else (self.end_date or None),
            is_current=self.is_current,
            description=self.description,
        )


class ProjectForm(CamelModel):
    """Single project entry as entered on the Projects step."""

    model_config = ConfigDict(str_strip_whitespace=True)

    title: str = ""
    description: str = ""
    image: str | None = None
    technologies: list[str] = Field(default_factory=list)
    demo_link: str | None = None
    github_link: str | None = None
    start_date: str | None = None
    end_date: str | None = None
    is_current: bool = False

    @field_validator("title")
    @classmethod
    def _title(cls, value: str) -> str:
        return _require(value, "Project title is required")

    @field_validator("description")
    @classmethod
    def _description(cls, value: str) -> str:
        return _min_length(
            value,
            MIN_DESCRIPTION_LENGTH,
            f"Description should be at least {MIN_DESCRIPTION_LENGTH} characters",
        )

    @field_validator("technologies", mode="before")
    @classmethod
    def _technologies(cls, value: Any) -> list[str]:
        return parse_technologies(value)

    @field_validator("demo_link", "github_link")
    @classmethod
    def _links(cls, value: str | None) -> str | None:
        return _check_url(value)

    def to_project(self, entry_id: str) -> Project:
        return Project(
            id=entry_id,
            title=self.title,
            description=self.description,
            image=self.image or None,
            technologies=list(self.technologies),
            demo_link=self.demo_link,
            github_link=self.github_link,
            start_date=self.start_date or None,
            end_date=None if self.is_current else (self.end_date or None),
            is_current=self.is_current,
        )


# ----------------------------------------------------------------------
# Public helpers
# ----------------------------------------------------------------------


def validate_theme(value: object) -> Theme:
    """Return *value* as a :class:`Theme`.

    Raises:
        InvalidThemeError: If *value* is outside the closed theme set.
    """
    if not is_valid_theme(value):
        raise InvalidThemeError(value)
    return Theme(value)


def validate_skills(value: object) -> list[str]:
    """Return *value* as a de-duplicated skill list.

    Raises:
        ValidationError: If *value* is not a list of strings.
    """
    if value is None:
        return []
    if not isinstance(value, list):
        raise ValidationError("Skills must be a list of strings", ["skills"])
    result: list[str] = []
    for skill in value:
        result = add_skill(result, skill)
    return result


def validate_entries(value: object, field_name: str) -> list[Mapping[str, Any]]:
    """Check that *value* is a list of entry objects.

    Raises:
        ValidationError: If *value* is not a list or holds a non-object item.
    """
    if value is None:
        return []
    if not isinstance(value, list) or not all(isinstance(item, Mapping) for item in value):
        raise ValidationError(f"{field_name} must be a list of objects", [field_name])
    return value


def validate_details(payload: Mapping[str, Any]) -> DetailsForm:
    """Validate the Details step payload."""
    try:
        return DetailsForm.model_validate(dict(payload))
    except pydantic.ValidationError as exc:
        raise to_validation_error(exc) from None


def validate_experience(payload: Mapping[str, Any], entry_id: str | None = None) -> Experience:
    """Validate one experience entry and return it with an id assigned."""
    data = dict(payload)
    data.pop("id", None)
    try:
        form = ExperienceForm.model_validate(data)
    except pydantic.ValidationError as exc:
        raise to_validation_error(exc) from None
    return form.to_experience(_entry_id(entry_id))


def validate_project(payload: Mapping[str, Any], entry_id: str | None = None) -> Project:
    """Validate one project entry and return it with an id assigned."""
    data = dict(payload)
    data.pop("id", None)
    try:
        form = ProjectForm.model_validate(data)
    except pydantic.ValidationError as exc:
        raise to_validation_error(exc) from None
    return form.to_project(_entry_id(entry_id))


def validate_update(partial: Mapping[str, Any]) -> dict[str, Any]:
    """Validate a partial update payload and return the fields to merge.

    Raises:
        InvalidThemeError: If a theme is supplied and is not recognized.
        ValidationError: If any other field fails schema validation.
    """
    data = dict(partial)
    if "theme" in data:
        validate_theme(data["theme"])
    try:
        update = PortfolioUpdate.model_validate(data)
    except pydantic.ValidationError as exc:
        raise to_validation_error(exc) from None
    return update.changes()
