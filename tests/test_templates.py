"""Tests for the template registry and per-mode options."""

from __future__ import annotations

import pytest

from folio_builder.constants.themes import PRINT_STYLE, THEME_STYLES, Theme
from folio_builder.templates import get_template, list_templates
from folio_builder.templates.preview import PreviewTemplate
from folio_builder.templates.printable import PRINT_NOTICE, PrintTemplate


class TestRegistry:
    def test_list_templates(self) -> None:
        assert list_templates() == ["preview", "print"]

    def test_get_template(self) -> None:
        assert isinstance(get_template("preview"), PreviewTemplate)
        assert isinstance(get_template("print"), PrintTemplate)

    def test_unknown_template(self) -> None:
        with pytest.raises(ValueError, match="Available: preview, print"):
            get_template("latex")


class TestPreviewTemplate:
    def test_style_follows_theme(self) -> None:
        assert PreviewTemplate().style_for("elegant") is THEME_STYLES[Theme.ELEGANT]

    @pytest.mark.parametrize("theme", ["neon", None, ""])
    def test_unknown_theme_uses_default(self, theme: str | None) -> None:
        assert PreviewTemplate().style_for(theme) is THEME_STYLES[Theme.MINIMAL]

    def test_no_print_options(self) -> None:
        assert PreviewTemplate().page_options() == {}


class TestPrintTemplate:
    @pytest.mark.parametrize("theme", [t.value for t in Theme])
    def test_style_ignores_theme(self, theme: str) -> None:
        assert PrintTemplate().style_for(theme) is PRINT_STYLE

    def test_page_options(self) -> None:
        options = PrintTemplate().page_options()

        assert options["page_break_before"] == "projects"
        assert options["print_notice"] == PRINT_NOTICE
        assert options["auto_print"] is True
