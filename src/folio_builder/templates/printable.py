"""Print/PDF template.

Ignores the theme and uses a fixed light style. Projects start on a new
page, and an inline script opens the print dialog and then closes the
window it was opened in.
"""

from __future__ import annotations

from typing import Any

from folio_builder.constants.themes import PRINT_STYLE, ThemeStyle
from folio_builder.render.document import SectionKind
from folio_builder.templates.base import PortfolioTemplate

__all__ = ["PRINT_NOTICE", "PrintTemplate"]

PRINT_NOTICE = (
    "This page will automatically print. "
    "Press Ctrl+P (Cmd+P on Mac) if the print dialog doesn't appear."
)


class PrintTemplate(PortfolioTemplate):
    """Theme-neutral rendering for the browser print dialog."""

    @property
    def name(self) -> str:
        return "print"

    def style_for(self, theme: str | None) -> ThemeStyle:
        return PRINT_STYLE

    def page_options(self) -> dict[str, Any]:
        return {
            "page_break_before": SectionKind.PROJECTS.value,
            "print_notice": PRINT_NOTICE,
            "auto_print": True,
        }
