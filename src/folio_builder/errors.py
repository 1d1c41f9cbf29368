"""Exception hierarchy shared by the store, services and API layers."""

from __future__ import annotations

import pydantic

__all__ = [
    "AuthenticationError",
    "DuplicateUserError",
    "FolioError",
    "InvalidThemeError",
    "InvalidTransitionError",
    "NotFoundError",
    "ValidationError",
    "to_validation_error",
]


class FolioError(Exception):
    """Base class for all domain errors raised by folio_builder."""


class NotFoundError(FolioError):
    """Requested user or portfolio does not exist."""


class ValidationError(FolioError):
    """Input failed its field constraints.

    Attributes:
        fields: Names of the offending fields, in the order they were found.
    """

    def __init__(self, message: str, fields: list[str] | None = None) -> None:
        super().__init__(message)
        self.message = message
        self.fields = list(fields or [])


class InvalidThemeError(ValidationError):
    """Theme identifier is outside the closed theme set."""

    def __init__(self, theme: object) -> None:
        from folio_builder.constants.themes import theme_ids

        super().__init__(
            f"Unknown theme {theme!r}. Available: {', '.join(theme_ids())}",
            fields=["theme"],
        )
        self.theme = theme


class InvalidTransitionError(FolioError):
    """Wizard navigation was requested from a step that does not allow it."""


class DuplicateUserError(FolioError):
    """A user with the same username already exists."""


class AuthenticationError(FolioError):
    """Credentials did not match a stored user."""


def to_validation_error(exc: pydantic.ValidationError) -> ValidationError:
    """Translate a pydantic error into a :class:`ValidationError`."""
    fields: list[str] = []
    messages: list[str] = []
    for error in exc.errors():
        loc = ".".join(str(part) for part in error.get("loc", ())) or "payload"
        if loc not in fields:
            fields.append(loc)
        message = str(error.get("msg", "invalid value")).removeprefix("Value error, ")
        messages.append(f"{loc}: {message}")
    return ValidationError("; ".join(messages), fields)
