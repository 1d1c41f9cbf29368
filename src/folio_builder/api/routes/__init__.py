"""Route handlers for the API."""

from folio_builder.api.routes import health, portfolio, users, wizard

__all__ = [
    "health",
    "portfolio",
    "users",
    "wizard",
]
