"""Pydantic schemas for portfolio endpoints."""

from __future__ import annotations

from pydantic import Field

from folio_builder.constants.themes import THEME_INFO
from folio_builder.models.portfolio import CamelModel


class SampleRequest(CamelModel):
    """Request body for filling a portfolio with sample content."""

    profile: str = Field("general", description="Sample profile: general, developer or designer")
    theme: str | None = Field(None, description="Optional theme to switch to at the same time")


class ThemeInfoResponse(CamelModel):
    """One entry of the theme picker."""

    id: str
    name: str
    description: str


def list_theme_info() -> list[ThemeInfoResponse]:
    return [
        ThemeInfoResponse(id=theme.value, name=info.name, description=info.description)
        for theme, info in THEME_INFO.items()
    ]
