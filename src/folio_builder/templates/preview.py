"""Screen preview template.

Styled by the portfolio's theme and intended for display inside an
iframe. Unknown themes fall back to the default bundle.
"""

from __future__ import annotations

import logging
from typing import Any

from folio_builder.constants.themes import ThemeStyle, get_theme_style, is_valid_theme
from folio_builder.templates.base import PortfolioTemplate

logger = logging.getLogger(__name__)

__all__ = ["PreviewTemplate"]


class PreviewTemplate(PortfolioTemplate):
    """Theme-styled on-screen rendering."""

    @property
    def name(self) -> str:
        return "preview"

    def style_for(self, theme: str | None) -> ThemeStyle:
        if not is_valid_theme(theme):
            logger.debug("Unknown theme %r; rendering with default style", theme)
        return get_theme_style(theme)

    def page_options(self) -> dict[str, Any]:
        return {}
