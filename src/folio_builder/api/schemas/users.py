"""Pydantic schemas for account endpoints."""

from __future__ import annotations

from datetime import datetime

from pydantic import Field

from folio_builder.models.portfolio import CamelModel, User


class CredentialsRequest(CamelModel):
    """Request body for register and login."""

    username: str = Field(min_length=1, max_length=255, description="Account name")
    password: str = Field(min_length=1, description="Plain-text password")


class UserInfoResponse(CamelModel):
    """Public account information; never includes the password digest."""

    id: int
    username: str
    created_at: datetime

    @classmethod
    def from_user(cls, user: User) -> UserInfoResponse:
        return cls(id=user.id, username=user.username, created_at=user.created_at)
