"""Liveness route."""

from __future__ import annotations

from fastapi import APIRouter, Request

router = APIRouter(tags=["health"])


@router.get("/health")
def health_check(request: Request) -> dict[str, str]:
    """Report that the API is up and which store backs it."""
    return {"status": "healthy", "store": request.app.state.settings.store}
