"""Theme taxonomy and the style bundles the renderer consumes.

Themes only change presentation. Each member of :class:`Theme` maps to a
:class:`ThemeStyle` holding the fonts, colors and spacing used by the HTML
templates. Print output ignores the theme and uses :data:`PRINT_STYLE`.
"""

from __future__ import annotations

from dataclasses import dataclass
from enum import StrEnum

__all__ = [
    "DEFAULT_THEME",
    "FONT_AWESOME_URL",
    "PRINT_STYLE",
    "THEME_INFO",
    "THEME_STYLES",
    "Theme",
    "ThemeInfo",
    "ThemeStyle",
    "get_theme_style",
    "is_valid_theme",
    "theme_ids",
]

FONT_AWESOME_URL = "https://cdnjs.cloudflare.com/ajax/libs/font-awesome/6.4.0/css/all.min.css"

_INTER_URL = "https://fonts.googleapis.com/css2?family=Inter:wght@300;400;500;600;700&display=swap"
_PLAYFAIR_URL = (
    "https://fonts.googleapis.com/css2?family=Playfair+Display:wght@400;500;600;700&display=swap"
)
_POPPINS_URL = "https://fonts.googleapis.com/css2?family=Poppins:wght@300;400;500;600;700&display=swap"
_MONTSERRAT_URL = (
    "https://fonts.googleapis.com/css2?family=Montserrat:wght@300;400;500;600;700&display=swap"
)

_SHADOW_DEFAULT = "0 4px 6px -1px rgba(0, 0, 0, 0.1), 0 2px 4px -1px rgba(0, 0, 0, 0.06)"


class Theme(StrEnum):
    """Closed set of portfolio themes."""

    MINIMAL = "minimal"
    TECH = "tech"
    CREATIVE = "creative"
    ELEGANT = "elegant"
    NATURE = "nature"
    MODERN = "modern"


DEFAULT_THEME = Theme.MINIMAL


@dataclass(frozen=True)
class ThemeInfo:
    """Display metadata shown by theme pickers."""

    name: str
    description: str


@dataclass(frozen=True)
class ThemeStyle:
    """Presentation attributes for one theme.

    Values are emitted verbatim into CSS, so they must come from this
    module and never from user input.
    """

    font_family: str
    font_url: str
    text_color: str
    background_color: str
    header_padding: str
    header_text_color: str
    header_background: str
    header_border: str
    subtitle_color: str
    photo_border_color: str
    section_background: str
    corner_radius: str
    shadow: str
    title_border_color: str
    heading_color: str
    body_color: str
    skill_background: str
    skill_color: str
    accent_color: str
    muted_color: str


THEME_INFO: dict[Theme, ThemeInfo] = {
    Theme.MINIMAL: ThemeInfo("Minimal", "Clean, modern design with focus on content"),
    Theme.TECH: ThemeInfo("Tech", "Bold design for tech professionals"),
    Theme.CREATIVE: ThemeInfo("Creative", "Vibrant design for creative professionals"),
    Theme.ELEGANT: ThemeInfo("Elegant", "Sophisticated design with a premium feel"),
    Theme.NATURE: ThemeInfo(
        "Nature", "Organic, earthy design for environment-focused professionals"
    ),
    Theme.MODERN: ThemeInfo("Modern", "Contemporary design with bold colors and clean layout"),
}

THEME_STYLES: dict[Theme, ThemeStyle] = {
    Theme.MINIMAL: ThemeStyle(
        font_family="'Inter', sans-serif",
        font_url=_INTER_URL,
        text_color="#334155",
        background_color="#f8fafc",
        header_padding="2rem 1rem",
        header_text_color="#1e293b",
        header_background="transparent",
        header_border="none",
        subtitle_color="#64748b",
        photo_border_color="#e0f2fe",
        section_background="white",
        corner_radius="0.5rem",
        shadow=_SHADOW_DEFAULT,
        title_border_color="#e2e8f0",
        heading_color="#1e293b",
        body_color="#4b5563",
        skill_background="#f1f5f9",
        skill_color="#0f172a",
        accent_color="#0ea5e9",
        muted_color="#64748b",
    ),
    Theme.TECH: ThemeStyle(
        font_family="'Inter', sans-serif",
        font_url=_INTER_URL,
        text_color="#cbd5e1",
        background_color="#0f172a",
        header_padding="2rem 1rem",
        header_text_color="#f8fafc",
        header_background="#0f172a",
        header_border="none",
        subtitle_color="#94a3b8",
        photo_border_color="#38bdf8",
        section_background="#1e293b",
        corner_radius="0.25rem",
        shadow=_SHADOW_DEFAULT,
        title_border_color="#0ea5e9",
        heading_color="#f8fafc",
        body_color="#cbd5e1",
        skill_background="#0c4a6e",
        skill_color="#e0f2fe",
        accent_color="#38bdf8",
        muted_color="#94a3b8",
    ),
    Theme.CREATIVE: ThemeStyle(
        font_family="'Poppins', sans-serif",
        font_url=_POPPINS_URL,
        text_color="#334155",
        background_color="#fef3c7",
        header_padding="2rem 1rem",
        header_text_color="#1e293b",
        header_background="#fef3c7",
        header_border="none",
        subtitle_color="#d97706",
        photo_border_color="#fcd34d",
        section_background="white",
        corner_radius="0.75rem",
        shadow=_SHADOW_DEFAULT,
        title_border_color="#f59e0b",
        heading_color="#1e293b",
        body_color="#4b5563",
        skill_background="#fcd34d",
        skill_color="#92400e",
        accent_color="#d97706",
        muted_color="#64748b",
    ),
    Theme.ELEGANT: ThemeStyle(
        font_family="'Playfair Display', serif",
        font_url=_PLAYFAIR_URL,
        text_color="#374151",
        background_color="#f9fafb",
        header_padding="2rem 1rem 3rem",
        header_text_color="#1e293b",
        header_background="#f9fafb",
        header_border="1px solid #e5e7eb",
        subtitle_color="#6b7280",
        photo_border_color="#e5e7eb",
        section_background="#ffffff",
        corner_radius="0.125rem",
        shadow="0 1px 3px 0 rgba(0, 0, 0, 0.1)",
        title_border_color="#6b7280",
        heading_color="#1e293b",
        body_color="#4b5563",
        skill_background="#f3f4f6",
        skill_color="#374151",
        accent_color="#6b7280",
        muted_color="#64748b",
    ),
    Theme.NATURE: ThemeStyle(
        font_family="'Inter', sans-serif",
        font_url=_INTER_URL,
        text_color="#334155",
        background_color="#f0fdf4",
        header_padding="2rem 1rem",
        header_text_color="#1e293b",
        header_background="#f0fdf4",
        header_border="none",
        subtitle_color="#4d7c0f",
        photo_border_color="#dcfce7",
        section_background="#f8fafc",
        corner_radius="0.5rem",
        shadow=_SHADOW_DEFAULT,
        title_border_color="#4d7c0f",
        heading_color="#1e293b",
        body_color="#4b5563",
        skill_background="#dcfce7",
        skill_color="#166534",
        accent_color="#4d7c0f",
        muted_color="#64748b",
    ),
    Theme.MODERN: ThemeStyle(
        font_family="'Montserrat', sans-serif",
        font_url=_MONTSERRAT_URL,
        text_color="#334155",
        background_color="#f0f4fd",
        header_padding="3rem 1rem 3.5rem",
        header_text_color="#1e293b",
        header_background="#eef2ff",
        header_border="2px solid #4f46e5",
        subtitle_color="#4f46e5",
        photo_border_color="#c7d2fe",
        section_background="#f5f5ff",
        corner_radius="0.5rem",
        shadow=(
            "0 10px 15px -3px rgba(0, 0, 0, 0.05), 0 4px 6px -2px rgba(0, 0, 0, 0.025)"
        ),
        title_border_color="#4f46e5",
        heading_color="#1e293b",
        body_color="#4b5563",
        skill_background="#e0e7ff",
        skill_color="#3730a3",
        accent_color="#4f46e5",
        muted_color="#64748b",
    ),
}

# Theme-neutral light bundle used for print/PDF export.
PRINT_STYLE = ThemeStyle(
    font_family="'Inter', sans-serif",
    font_url=_INTER_URL,
    text_color="#334155",
    background_color="#ffffff",
    header_padding="0",
    header_text_color="#1e293b",
    header_background="transparent",
    header_border="none",
    subtitle_color="#64748b",
    photo_border_color="#e2e8f0",
    section_background="transparent",
    corner_radius="0",
    shadow="none",
    title_border_color="#e2e8f0",
    heading_color="#1e293b",
    body_color="#4b5563",
    skill_background="#f1f5f9",
    skill_color="#334155",
    accent_color="#0ea5e9",
    muted_color="#64748b",
)


def theme_ids() -> list[str]:
    """Return the theme identifiers in declaration order."""
    return [theme.value for theme in Theme]


def is_valid_theme(value: object) -> bool:
    """Return True when *value* names a member of the closed theme set."""
    return isinstance(value, str) and value in theme_ids()


def get_theme_style(value: str | None) -> ThemeStyle:
    """Return the style bundle for *value*, falling back to the default theme."""
    if is_valid_theme(value):
        return THEME_STYLES[Theme(value)]
    return THEME_STYLES[DEFAULT_THEME]
