"""Logging setup for the API process."""

from __future__ import annotations

import logging
import sys

_FORMAT = "%(asctime)s %(levelname)s [%(name)s] %(message)s"
_HANDLER_NAME = "folio_builder"


def setup_logging(level: str | int = "INFO") -> None:
    """Attach a stdout handler to the ``folio_builder`` logger.

    Calling this again only updates the level, so app factories used in
    tests do not stack duplicate handlers.
    """
    logger = logging.getLogger("folio_builder")
    logger.setLevel(level.upper() if isinstance(level, str) else level)

    if any(handler.get_name() == _HANDLER_NAME for handler in logger.handlers):
        return

    handler = logging.StreamHandler(sys.stdout)
    handler.set_name(_HANDLER_NAME)
    handler.setFormatter(logging.Formatter(_FORMAT))
    logger.addHandler(handler)
