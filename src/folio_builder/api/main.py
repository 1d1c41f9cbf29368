"""FastAPI application entry point for the Folio Builder API."""

from __future__ import annotations

import logging
from contextlib import asynccontextmanager
from typing import TYPE_CHECKING

from fastapi import FastAPI, Request, status
from fastapi.middleware.cors import CORSMiddleware
from fastapi.responses import JSONResponse

from folio_builder.api.routes import health, portfolio, users, wizard
from folio_builder.config import Settings, load_settings
from folio_builder.data.repository import (
    InMemoryPortfolioRepository,
    PortfolioRepository,
    SqlPortfolioRepository,
)
from folio_builder.errors import (
    AuthenticationError,
    DuplicateUserError,
    FolioError,
    InvalidTransitionError,
    NotFoundError,
    ValidationError,
)
from folio_builder.logging_config import setup_logging
from folio_builder.services.portfolio import PortfolioService

if TYPE_CHECKING:
    from collections.abc import AsyncIterator

logger = logging.getLogger(__name__)

_STATUS_BY_ERROR: tuple[tuple[type[FolioError], int], ...] = (
    (NotFoundError, status.HTTP_404_NOT_FOUND),
    (ValidationError, status.HTTP_400_BAD_REQUEST),
    (InvalidTransitionError, status.HTTP_400_BAD_REQUEST),
    (DuplicateUserError, status.HTTP_409_CONFLICT),
    (AuthenticationError, status.HTTP_401_UNAUTHORIZED),
)


def build_repository(settings: Settings) -> PortfolioRepository:
    """Create the repository backend named by *settings*."""
    if settings.store == "sql":
        from folio_builder.data.db import create_db_engine, create_session_factory

        engine = create_db_engine(settings.database_url)
        return SqlPortfolioRepository(create_session_factory(engine))
    return InMemoryPortfolioRepository()


async def _folio_error_handler(request: Request, exc: Exception) -> JSONResponse:
    code = status.HTTP_500_INTERNAL_SERVER_ERROR
    for error_type, error_code in _STATUS_BY_ERROR:
        if isinstance(exc, error_type):
            code = error_code
            break

    body: dict[str, object] = {"detail": str(exc)}
    if isinstance(exc, ValidationError):
        body["fields"] = exc.fields
    if code >= 500:
        logger.error("Unhandled domain error on %s: %s", request.url.path, exc)
    return JSONResponse(status_code=code, content=body)


def create_app(settings: Settings | None = None, service: PortfolioService | None = None) -> FastAPI:
    """Build the application.

    Args:
        settings: Runtime settings; read from the environment when omitted.
        service: Pre-built service, mainly for tests. When omitted, one is
            created over the repository chosen by ``settings.store``.
    """
    settings = settings or load_settings()

    @asynccontextmanager
    async def lifespan(app: FastAPI) -> AsyncIterator[None]:
        """Configure logging on startup."""
        setup_logging(settings.log_level)
        logger.info("Folio Builder API starting with %s store", settings.store)
        yield

    app = FastAPI(
        title="Folio Builder API",
        description="API for building, previewing and publishing personal portfolio pages",
        version="0.1.0",
        lifespan=lifespan,
    )
    app.state.settings = settings
    app.state.service = service or PortfolioService(build_repository(settings))

    app.add_middleware(
        CORSMiddleware,
        allow_origins=["*"],
        allow_credentials=True,
        allow_methods=["*"],
        allow_headers=["*"],
    )
    app.add_exception_handler(FolioError, _folio_error_handler)

    app.include_router(health.router)
    app.include_router(users.router, prefix="/api")
    app.include_router(portfolio.router, prefix="/api")
    app.include_router(wizard.router, prefix="/api")
    return app


app = create_app()


def main() -> None:
    """Start the development server."""
    import uvicorn

    settings = load_settings()
    uvicorn.run(
        "folio_builder.api.main:app",
        host=settings.host,
        port=settings.port,
        reload=True,
    )


if __name__ == "__main__":
    main()
