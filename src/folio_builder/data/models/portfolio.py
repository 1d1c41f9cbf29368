"""Portfolio table: one row per user.

List and mapping fields (skills, experiences, projects, social links) are
stored as JSON columns in the camelCase shape clients exchange. The
wizard's resume point lives on the same row.
"""

from __future__ import annotations

from datetime import UTC, datetime
from typing import TYPE_CHECKING, Any

from sqlalchemy import JSON, Boolean, DateTime, ForeignKey, Integer, String, Text
from sqlalchemy.orm import Mapped, mapped_column, relationship

from folio_builder.constants.themes import DEFAULT_THEME
from folio_builder.data.db import Base

if TYPE_CHECKING:
    from folio_builder.data.models.user import UserRecord


class PortfolioRecord(Base):
    """Persisted portfolio document for a single user."""

    __tablename__ = "portfolios"

    user_id: Mapped[int] = mapped_column(
        Integer,
        ForeignKey("users.id", ondelete="CASCADE"),
        primary_key=True,
    )
    theme: Mapped[str] = mapped_column(String(32), nullable=False, default=DEFAULT_THEME.value)
    first_name: Mapped[str] = mapped_column(String(128), nullable=False, default="")
    last_name: Mapped[str] = mapped_column(String(128), nullable=False, default="")
    title: Mapped[str] = mapped_column(String(255), nullable=False, default="")
    bio: Mapped[str] = mapped_column(Text, nullable=False, default="")
    profile_photo_url: Mapped[str] = mapped_column(String(512), nullable=False, default="")
    skills: Mapped[list[str]] = mapped_column(JSON, nullable=False, default=list)
    experiences: Mapped[list[dict[str, Any]]] = mapped_column(JSON, nullable=False, default=list)
    projects: Mapped[list[dict[str, Any]]] = mapped_column(JSON, nullable=False, default=list)
    contact_email: Mapped[str] = mapped_column(String(255), nullable=False, default="")
    contact_phone: Mapped[str] = mapped_column(String(64), nullable=False, default="")
    contact_location: Mapped[str] = mapped_column(String(255), nullable=False, default="")
    social_links: Mapped[dict[str, str]] = mapped_column(JSON, nullable=False, default=dict)
    is_published: Mapped[bool] = mapped_column(Boolean, nullable=False, default=False)
    updated_at: Mapped[datetime] = mapped_column(
        DateTime(timezone=True),
        nullable=False,
        default=lambda: datetime.now(UTC),
    )
    wizard_step: Mapped[int | None] = mapped_column(Integer, nullable=True)
    wizard_furthest_step: Mapped[int | None] = mapped_column(Integer, nullable=True)

    user: Mapped[UserRecord] = relationship("UserRecord", back_populates="portfolio")
