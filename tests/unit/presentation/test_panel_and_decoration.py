"""Tests for the preview panel page and terminal decoration styling."""

from __future__ import annotations

import unittest

from linepreview.panel import DISABLED_HTML, NO_PREVIEW_HTML, build_panel_html, theme_body_class
from linepreview.ui_theme import (
    AUTO_STYLE,
    DARK_STYLE,
    PLAIN_STYLE,
    format_decoration,
    normalize_theme,
    resolve_decoration_style,
)


class PanelHtmlTests(unittest.TestCase):
    def test_fragment_is_embedded_in_container(self) -> None:
        page = build_panel_html("<strong>hi</strong>", enabled=True, theme="auto")
        self.assertIn('<div class="container"><strong>hi</strong></div>', page)
        self.assertIn('<body class="">', page)
        self.assertIn("default-src 'none'", page)

    def test_empty_fragment_shows_placeholder(self) -> None:
        page = build_panel_html("", enabled=True, theme="light")
        self.assertIn(NO_PREVIEW_HTML, page)
        self.assertIn('<body class="theme-light">', page)

    def test_disabled_panel_ignores_fragment(self) -> None:
        page = build_panel_html("text", enabled=False, theme="dark")
        self.assertIn(DISABLED_HTML, page)
        self.assertNotIn('<div class="container">text</div>', page)

    def test_unknown_theme_falls_back_to_auto(self) -> None:
        self.assertEqual(theme_body_class("neon"), "")
        self.assertEqual(theme_body_class("DARK"), "theme-dark")


class DecorationStyleTests(unittest.TestCase):
    def test_normalize_theme(self) -> None:
        self.assertEqual(normalize_theme(" Light "), "light")
        self.assertEqual(normalize_theme(None), "auto")
        self.assertEqual(normalize_theme("sepia"), "auto")

    def test_resolve_decoration_style(self) -> None:
        self.assertIs(resolve_decoration_style("auto"), AUTO_STYLE)
        self.assertIs(resolve_decoration_style("dark"), DARK_STYLE)
        self.assertIs(resolve_decoration_style("dark", no_color=True), PLAIN_STYLE)
        self.assertIs(resolve_decoration_style("bogus"), AUTO_STYLE)

    def test_format_decoration_wraps_preview(self) -> None:
        self.assertEqual(format_decoration("Hello", PLAIN_STYLE), " -> Hello")
        self.assertEqual(format_decoration("Hello", AUTO_STYLE), "\033[2;3m -> Hello\033[0m")

    def test_empty_preview_has_no_decoration(self) -> None:
        self.assertEqual(format_decoration("", AUTO_STYLE), "")


if __name__ == "__main__":
    unittest.main()
