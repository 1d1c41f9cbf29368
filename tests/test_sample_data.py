"""Tests for the canned sample portfolios."""

from __future__ import annotations

import pytest

from folio_builder.errors import InvalidThemeError, ValidationError
from folio_builder.models.portfolio import Portfolio, User
from folio_builder.services.portfolio import PortfolioService
from folio_builder.services.sample_data import (
    SAMPLE_PROFILES,
    apply_sample_portfolio,
    sample_profile,
)


@pytest.mark.parametrize("profile", sorted(SAMPLE_PROFILES))
def test_every_profile_applies(
    profile: str, service: PortfolioService, alice: tuple[User, Portfolio]
) -> None:
    user, _ = alice

    portfolio = apply_sample_portfolio(service, user.id, profile)

    assert portfolio.first_name
    assert portfolio.skills
    assert portfolio.experiences
    assert "None" not in service.render_preview(portfolio)


def test_theme_switch(service: PortfolioService, alice: tuple[User, Portfolio]) -> None:
    user, _ = alice

    portfolio = apply_sample_portfolio(service, user.id, "designer", theme="creative")

    assert portfolio.theme == "creative"
    assert portfolio.title == "UI/UX Designer"


def test_bad_theme_leaves_record_unchanged(
    service: PortfolioService, alice: tuple[User, Portfolio]
) -> None:
    user, before = alice

    with pytest.raises(InvalidThemeError):
        apply_sample_portfolio(service, user.id, "general", theme="neon")

    assert service.get_portfolio(user.id) == before


def test_unknown_profile() -> None:
    with pytest.raises(ValidationError) as exc_info:
        sample_profile("astronaut")
    assert exc_info.value.fields == ["profile"]


def test_profile_is_a_copy() -> None:
    sample_profile("general")["skills"].append("Mutated")
    assert "Mutated" not in SAMPLE_PROFILES["general"]["skills"]
