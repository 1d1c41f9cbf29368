"""Portfolio service: the boundary operations the HTTP layer calls.

All validation happens here, before the repository is touched, so an
invalid payload never reaches the store and never partially applies.
"""

from __future__ import annotations

import logging
from collections.abc import Mapping
from typing import Any

from folio_builder.data.repository import PortfolioRepository, WizardStateData
from folio_builder.errors import AuthenticationError, NotFoundError, ValidationError
from folio_builder.models.portfolio import Portfolio, User
from folio_builder.render.engine import render_preview, render_print
from folio_builder.services.auth import hash_password, verify_password
from folio_builder.services.validation import validate_theme, validate_update

logger = logging.getLogger(__name__)

__all__ = ["PortfolioService"]


class PortfolioService:
    """Coordinates validation, the injected repository and rendering."""

    def __init__(self, repository: PortfolioRepository) -> None:
        self._repository = repository

    @property
    def repository(self) -> PortfolioRepository:
        return self._repository

    # ------------------------------------------------------------------
    # Users
    # ------------------------------------------------------------------

    def create_user_with_portfolio(
        self, username: str, credential_digest: str
    ) -> tuple[User, Portfolio]:
        """Create a user and its default portfolio atomically.

        Raises:
            ValidationError: If the username or digest is empty.
            DuplicateUserError: If the username is taken.
        """
        username_clean = username.strip()
        if not username_clean:
            raise ValidationError("Username cannot be empty.", ["username"])
        if not credential_digest:
            raise ValidationError("Credential digest cannot be empty.", ["password"])
        return self._repository.create_user_with_portfolio(username_clean, credential_digest)

    def register_user(self, username: str, password: str) -> tuple[User, Portfolio]:
        """Hash *password* and create the account with its portfolio."""
        if not password:
            raise ValidationError("Password cannot be empty.", ["password"])
        return self.create_user_with_portfolio(username, hash_password(password))

    def authenticate(self, username: str, password: str) -> User:
        """Return the user whose credentials match.

        Raises:
            AuthenticationError: On unknown user or wrong password.
        """
        username_clean = username.strip()
        if not username_clean or not password:
            raise AuthenticationError("Username and password are required.")

        user = self._repository.get_user_by_username(username_clean)
        if user is None or not verify_password(password, user.password_hash):
            logger.info("Failed login attempt for %r", username_clean)
            raise AuthenticationError("Invalid username or password.")
        return user

    def get_user(self, user_id: int) -> User:
        user = self._repository.get_user(user_id)
        if user is None:
            raise NotFoundError(f"User {user_id} not found")
        return user

    def get_user_by_username(self, username: str) -> User:
        user = self._repository.get_user_by_username(username)
        if user is None:
            raise NotFoundError(f"User '{username}' not found")
        return user

    # ------------------------------------------------------------------
    # Portfolio record
    # ------------------------------------------------------------------

    def get_portfolio(self, user_id: int) -> Portfolio:
        """Return the portfolio for *user_id*.

        Raises:
            NotFoundError: If the user has no portfolio.
        """
        portfolio = self._repository.get_portfolio(user_id)
        if portfolio is None:
            raise NotFoundError(f"Portfolio for user {user_id} not found")
        return portfolio

    def update_portfolio(self, user_id: int, partial: Mapping[str, Any]) -> Portfolio:
        """Validate *partial* and merge it into the stored portfolio.

        Keys may be snake_case or camelCase.

        Raises:
            InvalidThemeError: If a theme outside the closed set is supplied.
            ValidationError: If the payload fails schema validation.
            NotFoundError: If the user has no portfolio.
        """
        changes = validate_update(partial)
        return self._repository.update_portfolio(user_id, changes)

    def set_theme(self, user_id: int, theme: str) -> Portfolio:
        """Select *theme* for the portfolio.

        Raises:
            InvalidThemeError: If *theme* is not recognized; nothing is stored.
            NotFoundError: If the user has no portfolio.
        """
        selected = validate_theme(theme)
        return self._repository.update_portfolio(user_id, {"theme": selected.value})

    def publish(self, user_id: int) -> Portfolio:
        portfolio = self._repository.update_portfolio(user_id, {"is_published": True})
        logger.info("Published portfolio for user %s", user_id)
        return portfolio

    def unpublish(self, user_id: int) -> Portfolio:
        portfolio = self._repository.update_portfolio(user_id, {"is_published": False})
        logger.info("Unpublished portfolio for user %s", user_id)
        return portfolio

    # ------------------------------------------------------------------
    # Wizard resume point
    # ------------------------------------------------------------------

    def get_wizard_state(self, user_id: int) -> WizardStateData | None:
        return self._repository.get_wizard_state(user_id)

    def save_wizard_state(self, user_id: int, state: WizardStateData) -> None:
        self._repository.save_wizard_state(user_id, state)

    # ------------------------------------------------------------------
    # Rendering
    # ------------------------------------------------------------------

    @staticmethod
    def render_preview(portfolio: Portfolio) -> str:
        return render_preview(portfolio)

    @staticmethod
    def render_print(portfolio: Portfolio) -> str:
        return render_print(portfolio)
