"""Shared dependencies for API routes."""

from __future__ import annotations

from typing import Annotated

from fastapi import Depends, Header, HTTPException, Request, status

from folio_builder.errors import NotFoundError
from folio_builder.models.portfolio import User
from folio_builder.services.portfolio import PortfolioService


def get_service(request: Request) -> PortfolioService:
    """Return the service instance the app was built with."""
    return request.app.state.service


def get_current_username(
    x_username: Annotated[
        str | None,
        Header(
            description=(
                "Current username. In production, this should be extracted "
                "from an authenticated session or token."
            )
        ),
    ] = None,
) -> str:
    """Get the current username from the X-Username header.

    Raises:
        HTTPException: If the header is missing (401).
    """
    if not x_username or not x_username.strip():
        raise HTTPException(
            status_code=status.HTTP_401_UNAUTHORIZED,
            detail="Missing authentication. Please provide X-Username header.",
        )
    return x_username.strip()


def get_current_user(
    username: Annotated[str, Depends(get_current_username)],
    service: Annotated[PortfolioService, Depends(get_service)],
) -> User:
    """Resolve the header username to a registered user.

    Raises:
        HTTPException: If no user has that name (401).
    """
    try:
        return service.get_user_by_username(username)
    except NotFoundError:
        raise HTTPException(
            status_code=status.HTTP_401_UNAUTHORIZED,
            detail=f"Unknown user '{username}'",
        ) from None


ServiceDep = Annotated[PortfolioService, Depends(get_service)]
CurrentUser = Annotated[User, Depends(get_current_user)]
