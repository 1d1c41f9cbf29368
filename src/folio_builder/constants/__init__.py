from __future__ import annotations

from folio_builder.constants.themes import (
    DEFAULT_THEME,
    PRINT_STYLE,
    THEME_INFO,
    THEME_STYLES,
    Theme,
    ThemeInfo,
    ThemeStyle,
    get_theme_style,
    is_valid_theme,
    theme_ids,
)

__all__ = [
    "DEFAULT_THEME",
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
