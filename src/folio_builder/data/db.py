"""Database configuration and session management.

This module provides SQLAlchemy 2.x ORM infrastructure including:
- Engine creation (SQLite by default)
- Session factory with proper transaction handling
- Table creation for the ORM models
- Context manager for safe session usage

Nothing here is a module-level singleton: callers build an engine and a
session factory once (see :func:`folio_builder.api.main.create_app`) and
hand the factory to :class:`~folio_builder.data.repository.SqlPortfolioRepository`.
"""

from __future__ import annotations

from collections.abc import Iterator
from contextlib import contextmanager
from pathlib import Path

from sqlalchemy import create_engine
from sqlalchemy.engine import URL, Engine
from sqlalchemy.orm import DeclarativeBase, Session, sessionmaker


class Base(DeclarativeBase):
    """Base class for all SQLAlchemy ORM models."""


def default_database_url() -> str:
    """Return the fallback SQLite URL at ``<project_root>/folio.db``."""
    project_root = Path(__file__).resolve().parents[3]
    db_path = project_root / "folio.db"
    return URL.create("sqlite", database=str(db_path)).render_as_string(hide_password=False)


def create_db_engine(database_url: str) -> Engine:
    """Create an engine for *database_url* and make sure all tables exist."""
    engine = create_engine(database_url, echo=False, future=True)
    init_db(engine)
    return engine


def init_db(engine: Engine) -> None:
    """Create all tables defined on the Base metadata."""
    # Import ORM models so their metadata is registered on Base before create_all.
    from folio_builder.data.models import portfolio, user  # noqa: F401

    Base.metadata.create_all(bind=engine)


def create_session_factory(engine: Engine) -> sessionmaker[Session]:
    """Return a session factory bound to *engine*."""
    return sessionmaker(bind=engine, autoflush=False, expire_on_commit=False)


@contextmanager
def session_scope(factory: sessionmaker[Session]) -> Iterator[Session]:
    """Provide a transactional scope around a series of operations."""
    session = factory()
    try:
        yield session
        session.commit()
    except Exception:
        session.rollback()
        raise
    finally:
        session.close()
