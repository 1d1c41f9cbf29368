"""Runtime settings read from the environment."""

from __future__ import annotations

import os
from dataclasses import dataclass

from folio_builder.data.db import default_database_url

STORE_BACKENDS = ("memory", "sql")


@dataclass(frozen=True)
class Settings:
    """Application settings.

    Attributes:
        store: Which repository backend to use, ``memory`` or ``sql``.
        database_url: SQLAlchemy URL used when ``store`` is ``sql``.
        log_level: Root level passed to :func:`setup_logging`.
        host: Bind address for the development server.
        port: Bind port for the development server.
    """

    store: str = "memory"
    database_url: str = ""
    log_level: str = "INFO"
    host: str = "0.0.0.0"
    port: int = 8000


def load_settings() -> Settings:
    """Build :class:`Settings` from ``FOLIO_*`` and ``DB_URL`` variables.

    Raises:
        ValueError: If ``FOLIO_STORE`` names an unknown backend or
            ``FOLIO_PORT`` is not an integer.
    """
    store = os.getenv("FOLIO_STORE", "memory").strip().lower()
    if store not in STORE_BACKENDS:
        raise ValueError(f"FOLIO_STORE must be one of {', '.join(STORE_BACKENDS)}, got {store!r}")

    port_raw = os.getenv("FOLIO_PORT", "8000")
    try:
        port = int(port_raw)
    except ValueError:
        raise ValueError(f"FOLIO_PORT must be an integer, got {port_raw!r}") from None

    return Settings(
        store=store,
        database_url=os.getenv("DB_URL") or default_database_url(),
        log_level=os.getenv("FOLIO_LOG_LEVEL", "INFO").upper(),
        host=os.getenv("FOLIO_HOST", "0.0.0.0"),
        port=port,
    )
