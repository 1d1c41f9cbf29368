"""Template registry for portfolio rendering."""

from __future__ import annotations

from folio_builder.templates.base import PortfolioTemplate
from folio_builder.templates.preview import PreviewTemplate
from folio_builder.templates.printable import PrintTemplate

__all__ = [
    "PortfolioTemplate",
    "get_template",
    "list_templates",
]

_REGISTRY: dict[str, PortfolioTemplate] = {
    "preview": PreviewTemplate(),
    "print": PrintTemplate(),
}


def get_template(name: str) -> PortfolioTemplate:
    """Return the template registered under *name*.

    Raises:
        ValueError: If no template with that name exists.
    """
    try:
        return _REGISTRY[name]
    except KeyError:
        available = ", ".join(sorted(_REGISTRY))
        msg = f"Unknown template {name!r}. Available: {available}"
        raise ValueError(msg) from None


def list_templates() -> list[str]:
    """Return sorted names of all registered templates."""
    return sorted(_REGISTRY)
