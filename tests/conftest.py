from __future__ import annotations

from collections.abc import Iterator
from datetime import UTC, datetime, timedelta
from pathlib import Path

import pytest
from fastapi.testclient import TestClient
from sqlalchemy.orm import Session, sessionmaker

from folio_builder.api.main import create_app
from folio_builder.config import Settings
from folio_builder.data.db import create_db_engine, create_session_factory
from folio_builder.data.repository import InMemoryPortfolioRepository, SqlPortfolioRepository
from folio_builder.models.portfolio import Portfolio, User
from folio_builder.services.portfolio import PortfolioService


class FakeClock:
    """Deterministic clock that moves one second per reading."""

    def __init__(self, start: datetime | None = None) -> None:
        self.current = start or datetime(2024, 1, 1, 12, 0, tzinfo=UTC)

    def __call__(self) -> datetime:
        value = self.current
        self.current += timedelta(seconds=1)
        return value


@pytest.fixture
def clock() -> FakeClock:
    return FakeClock()


@pytest.fixture
def memory_repository(clock: FakeClock) -> InMemoryPortfolioRepository:
    return InMemoryPortfolioRepository(clock=clock)


@pytest.fixture
def session_factory(tmp_path: Path) -> Iterator[sessionmaker[Session]]:
    """Session factory over a temporary SQLite file."""
    engine = create_db_engine(f"sqlite:///{(tmp_path / 'test.db').as_posix()}")
    yield create_session_factory(engine)
    engine.dispose()


@pytest.fixture
def sql_repository(
    session_factory: sessionmaker[Session], clock: FakeClock
) -> SqlPortfolioRepository:
    return SqlPortfolioRepository(session_factory, clock=clock)


@pytest.fixture
def service(memory_repository: InMemoryPortfolioRepository) -> PortfolioService:
    return PortfolioService(memory_repository)


@pytest.fixture
def alice(service: PortfolioService) -> tuple[User, Portfolio]:
    return service.create_user_with_portfolio("alice", "digest")


@pytest.fixture
def client(service: PortfolioService) -> Iterator[TestClient]:
    """API client over a fresh in-memory service."""
    app = create_app(settings=Settings(store="memory"), service=service)
    with TestClient(app) as test_client:
        yield test_client


@pytest.fixture
def registered(client: TestClient) -> dict[str, str]:
    """Register ``alice`` through the API and return the matching auth headers."""
    response = client.post("/api/users/register", json={"username": "alice", "password": "s3cret!"})
    assert response.status_code == 201
    return {"X-Username": "alice"}
