"""Render engine entry points.

Rendering is a pure function of the portfolio record: the record is
mapped to a :class:`~folio_builder.render.document.PortfolioDocument` and
serialized by the template for the requested mode.
"""

from __future__ import annotations

from typing import TYPE_CHECKING

from folio_builder.render.document import build_document
from folio_builder.templates import get_template

if TYPE_CHECKING:
    from folio_builder.models.portfolio import Portfolio

__all__ = ["RENDER_MODES", "render", "render_preview", "render_print"]

RENDER_MODES = ("preview", "print")


def render(portfolio: Portfolio, mode: str = "preview") -> str:
    """Render *portfolio* as a self-contained HTML document.

    Raises:
        ValueError: If *mode* is not a registered output mode.
    """
    template = get_template(mode)
    return template.build(build_document(portfolio), portfolio.theme)


def render_preview(portfolio: Portfolio) -> str:
    """Theme-styled HTML for on-screen preview."""
    return render(portfolio, "preview")


def render_print(portfolio: Portfolio) -> str:
    """Theme-neutral HTML that opens the print dialog when loaded."""
    return render(portfolio, "print")
