"""Portfolio record store.

:class:`PortfolioRepository` is the only mutation path for users and
portfolios. Two backends implement it:

- :class:`InMemoryPortfolioRepository` keeps records in dictionaries keyed
  by user id and is the default for development and tests.
- :class:`SqlPortfolioRepository` persists through SQLAlchemy.

Both merge partial updates field by field and stamp ``updated_at`` from an
injected clock, never from caller data.
"""

from __future__ import annotations

import logging
import threading
from abc import ABC, abstractmethod
from collections.abc import Callable
from datetime import UTC, datetime
from typing import Any

import pydantic
from pydantic.alias_generators import to_camel
from sqlalchemy.exc import IntegrityError
from sqlalchemy.orm import Session, sessionmaker

from folio_builder.data.db import session_scope
from folio_builder.data.models import PortfolioRecord, UserRecord
from folio_builder.errors import (
    DuplicateUserError,
    NotFoundError,
    ValidationError,
    to_validation_error,
)
from folio_builder.models.portfolio import PORTFOLIO_FIELDS, Portfolio, User

logger = logging.getLogger(__name__)

__all__ = [
    "Clock",
    "InMemoryPortfolioRepository",
    "PortfolioRepository",
    "SqlPortfolioRepository",
    "WizardStateData",
    "utcnow",
]

Clock = Callable[[], datetime]

# {"current_step": int, "furthest_step": int}
WizardStateData = dict[str, int]


def utcnow() -> datetime:
    return datetime.now(UTC)


def _as_utc(value: datetime) -> datetime:
    # SQLite drops tzinfo on round trip.
    if value.tzinfo is None:
        return value.replace(tzinfo=UTC)
    return value


class PortfolioRepository(ABC):
    """Interface every portfolio store must implement."""

    def __init__(self, clock: Clock | None = None) -> None:
        self._clock = clock or utcnow

    @abstractmethod
    def create_user_with_portfolio(self, username: str, password_hash: str) -> tuple[User, Portfolio]:
        """Create a user and its default portfolio in one atomic step.

        Raises:
            DuplicateUserError: If *username* is already registered.
        """

    @abstractmethod
    def get_user(self, user_id: int) -> User | None:
        """Return the user with *user_id*, or None."""

    @abstractmethod
    def get_user_by_username(self, username: str) -> User | None:
        """Return the user registered as *username*, or None."""

    @abstractmethod
    def get_portfolio(self, user_id: int) -> Portfolio | None:
        """Return the portfolio owned by *user_id*, or None."""

    @abstractmethod
    def update_portfolio(self, user_id: int, fields: dict[str, Any]) -> Portfolio:
        """Merge *fields* into the stored portfolio and return the result.

        Raises:
            NotFoundError: If no portfolio exists for *user_id*.
        """

    @abstractmethod
    def get_wizard_state(self, user_id: int) -> WizardStateData | None:
        """Return the saved wizard position for *user_id*, or None."""

    @abstractmethod
    def save_wizard_state(self, user_id: int, state: WizardStateData) -> None:
        """Persist the wizard position for *user_id*.

        Raises:
            NotFoundError: If no portfolio exists for *user_id*.
        """

    # ------------------------------------------------------------------
    # Shared helpers
    # ------------------------------------------------------------------

    def _now(self) -> datetime:
        return _as_utc(self._clock())

    def _merge(self, current: Portfolio, fields: dict[str, Any]) -> Portfolio:
        """Return *current* with *fields* applied and a fresh timestamp."""
        unknown = sorted(set(fields) - set(PORTFOLIO_FIELDS))
        if unknown:
            raise ValidationError(f"Unknown portfolio fields: {', '.join(unknown)}", unknown)

        data = current.model_dump()
        data.update(fields)
        data["updated_at"] = self._now()
        try:
            return Portfolio.model_validate(data)
        except pydantic.ValidationError as exc:
            raise to_validation_error(exc) from None

    @staticmethod
    def _default_portfolio(user_id: int, now: datetime) -> Portfolio:
        return Portfolio(user_id=user_id, updated_at=now)


class InMemoryPortfolioRepository(PortfolioRepository):
    """Dictionary-backed store; records are copied in and out."""

    def __init__(self, clock: Clock | None = None) -> None:
        super().__init__(clock)
        self._lock = threading.Lock()
        self._users: dict[int, User] = {}
        self._user_ids: dict[str, int] = {}
        self._portfolios: dict[int, Portfolio] = {}
        self._wizard_states: dict[int, WizardStateData] = {}
        self._next_id = 1

    def create_user_with_portfolio(self, username: str, password_hash: str) -> tuple[User, Portfolio]:
        with self._lock:
            if username in self._user_ids:
                raise DuplicateUserError(f"Username '{username}' already exists")

            now = self._now()
            user = User(
                id=self._next_id,
                username=username,
                password_hash=password_hash,
                created_at=now,
            )
            portfolio = self._default_portfolio(user.id, now)

            self._next_id += 1
            self._users[user.id] = user
            self._user_ids[username] = user.id
            self._portfolios[user.id] = portfolio

        logger.info("Created user %s with default portfolio", user.id)
        return user, portfolio.model_copy(deep=True)

    def get_user(self, user_id: int) -> User | None:
        return self._users.get(user_id)

    def get_user_by_username(self, username: str) -> User | None:
        user_id = self._user_ids.get(username)
        if user_id is None:
            return None
        return self._users.get(user_id)

    def get_portfolio(self, user_id: int) -> Portfolio | None:
        portfolio = self._portfolios.get(user_id)
        if portfolio is None:
            return None
        return portfolio.model_copy(deep=True)

    def update_portfolio(self, user_id: int, fields: dict[str, Any]) -> Portfolio:
        with self._lock:
            current = self._portfolios.get(user_id)
            if current is None:
                raise NotFoundError(f"Portfolio for user {user_id} not found")
            merged = self._merge(current, fields)
            self._portfolios[user_id] = merged.model_copy(deep=True)

        logger.info("Updated portfolio for user %s (%s)", user_id, ", ".join(sorted(fields)))
        return merged

    def get_wizard_state(self, user_id: int) -> WizardStateData | None:
        state = self._wizard_states.get(user_id)
        return dict(state) if state is not None else None

    def save_wizard_state(self, user_id: int, state: WizardStateData) -> None:
        with self._lock:
            if user_id not in self._portfolios:
                raise NotFoundError(f"Portfolio for user {user_id} not found")
            self._wizard_states[user_id] = dict(state)


class SqlPortfolioRepository(PortfolioRepository):
    """SQLAlchemy-backed store; one transaction per operation."""

    def __init__(self, session_factory: sessionmaker[Session], clock: Clock | None = None) -> None:
        super().__init__(clock)
        self._session_factory = session_factory

    def create_user_with_portfolio(self, username: str, password_hash: str) -> tuple[User, Portfolio]:
        now = self._now()
        try:
            with session_scope(self._session_factory) as session:
                existing = session.query(UserRecord).filter(UserRecord.username == username).first()
                if existing is not None:
                    raise DuplicateUserError(f"Username '{username}' already exists")

                record = UserRecord(username=username, password_hash=password_hash, created_at=now)
                session.add(record)
                session.flush()

                portfolio = self._default_portfolio(record.id, now)
                portfolio_record = PortfolioRecord(user_id=record.id)
                _write_portfolio(portfolio_record, portfolio)
                session.add(portfolio_record)
                session.flush()

                user = _to_user(record)
        except IntegrityError as exc:
            raise DuplicateUserError(f"Username '{username}' already exists") from exc

        logger.info("Created user %s with default portfolio", user.id)
        return user, portfolio

    def get_user(self, user_id: int) -> User | None:
        with session_scope(self._session_factory) as session:
            record = session.get(UserRecord, user_id)
            return _to_user(record) if record is not None else None

    def get_user_by_username(self, username: str) -> User | None:
        with session_scope(self._session_factory) as session:
            record = session.query(UserRecord).filter(UserRecord.username == username).first()
            return _to_user(record) if record is not None else None

    def get_portfolio(self, user_id: int) -> Portfolio | None:
        with session_scope(self._session_factory) as session:
            record = session.get(PortfolioRecord, user_id)
            return _to_portfolio(record) if record is not None else None

    def update_portfolio(self, user_id: int, fields: dict[str, Any]) -> Portfolio:
        try:
            with session_scope(self._session_factory) as session:
                record = session.get(PortfolioRecord, user_id, with_for_update=True)
                if record is None:
                    raise NotFoundError(f"Portfolio for user {user_id} not found")

                merged = self._merge(_to_portfolio(record), fields)
                _write_portfolio(record, merged)
        except (NotFoundError, ValidationError):
            raise
        except Exception:
            logger.exception("Failed to update portfolio for user %s", user_id)
            raise

        logger.info("Updated portfolio for user %s (%s)", user_id, ", ".join(sorted(fields)))
        return merged

    def get_wizard_state(self, user_id: int) -> WizardStateData | None:
        with session_scope(self._session_factory) as session:
            record = session.get(PortfolioRecord, user_id)
            if record is None or record.wizard_step is None:
                return None
            return {
                "current_step": record.wizard_step,
                "furthest_step": record.wizard_furthest_step or record.wizard_step,
            }

    def save_wizard_state(self, user_id: int, state: WizardStateData) -> None:
        with session_scope(self._session_factory) as session:
            record = session.get(PortfolioRecord, user_id)
            if record is None:
                raise NotFoundError(f"Portfolio for user {user_id} not found")
            record.wizard_step = state["current_step"]
            record.wizard_furthest_step = state["furthest_step"]


def _to_user(record: UserRecord) -> User:
    return User(
        id=record.id,
        username=record.username,
        password_hash=record.password_hash,
        created_at=_as_utc(record.created_at),
    )


def _to_portfolio(record: PortfolioRecord) -> Portfolio:
    data = {name: getattr(record, name) for name in PORTFOLIO_FIELDS}
    data["user_id"] = record.user_id
    data["updated_at"] = _as_utc(record.updated_at)
    return Portfolio.model_validate(data)


def _write_portfolio(record: PortfolioRecord, portfolio: Portfolio) -> None:
    dumped = portfolio.model_dump(by_alias=True)
    for name in PORTFOLIO_FIELDS:
        if name in ("experiences", "projects", "skills", "social_links"):
            setattr(record, name, dumped[to_camel(name)])
        else:
            setattr(record, name, getattr(portfolio, name))
    record.updated_at = portfolio.updated_at


