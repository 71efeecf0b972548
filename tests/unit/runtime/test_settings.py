"""Tests for settings persistence and input sanitization.

Ensures malformed config data is safely normalized on load and that the
enable toggle is persisted without clobbering other keys.
"""

from __future__ import annotations

import tempfile
import unittest
from pathlib import Path
from unittest import mock

from linepreview.document import RenderMode
from linepreview.preview import PreviewConfig
from linepreview.runtime import config
from linepreview.runtime.config import PreviewSettings


class SettingsBehaviorTests(unittest.TestCase):
    def test_missing_config_yields_defaults(self) -> None:
        with tempfile.TemporaryDirectory() as tmp:
            with mock.patch("linepreview.runtime.config.CONFIG_PATH", Path(tmp) / "config.json"):
                settings = config.load_settings()

        self.assertEqual(settings, PreviewSettings())
        self.assertTrue(settings.enabled)
        self.assertEqual(settings.max_preview_length, 120)
        self.assertEqual(settings.debounce_ms, 150)
        self.assertIs(settings.render_mode, RenderMode.LINE)
        self.assertEqual(settings.theme, "auto")
        self.assertEqual(settings.exclude_languages, frozenset())

    def test_malformed_json_yields_empty_config(self) -> None:
        with tempfile.TemporaryDirectory() as tmp:
            config_path = Path(tmp) / "config.json"
            config_path.write_text("{not json", encoding="utf-8")
            with mock.patch("linepreview.runtime.config.CONFIG_PATH", config_path):
                self.assertEqual(config.load_config(), {})
            config_path.write_text("[1, 2]", encoding="utf-8")
            with mock.patch("linepreview.runtime.config.CONFIG_PATH", config_path):
                self.assertEqual(config.load_config(), {})

    def test_invalid_values_fall_back_per_field(self) -> None:
        settings = config.settings_from_mapping(
            {
                "enabled": "yes",
                "max_preview_length": True,
                "debounce_ms": -20,
                "render_mode": "PARAGRAPH",
                "theme": "solarized",
                "exclude_languages": ["markdown", " ", 7, " mdx "],
            }
        )
        self.assertTrue(settings.enabled)
        self.assertEqual(settings.max_preview_length, 120)
        self.assertEqual(settings.debounce_ms, 0)
        self.assertIs(settings.render_mode, RenderMode.PARAGRAPH)
        self.assertEqual(settings.theme, "auto")
        self.assertEqual(settings.exclude_languages, frozenset({"markdown", "mdx"}))

    def test_save_enabled_keeps_other_keys(self) -> None:
        with tempfile.TemporaryDirectory() as tmp:
            config_path = Path(tmp) / "nested" / "config.json"
            with mock.patch("linepreview.runtime.config.CONFIG_PATH", config_path):
                config.save_config({"theme": "dark", "max_preview_length": 40})
                config.save_enabled(False)

                saved = config.load_config()
                settings = config.load_settings()

        self.assertEqual(saved, {"theme": "dark", "max_preview_length": 40, "enabled": False})
        self.assertFalse(settings.enabled)
        self.assertEqual(settings.theme, "dark")
        self.assertEqual(settings.max_preview_length, 40)

    def test_save_settings_round_trip(self) -> None:
        expected = PreviewSettings(
            enabled=False,
            max_preview_length=64,
            debounce_ms=300,
            render_mode=RenderMode.PARAGRAPH,
            theme="light",
            exclude_languages=frozenset({"mdx", "markdown"}),
        )
        with tempfile.TemporaryDirectory() as tmp:
            with mock.patch("linepreview.runtime.config.CONFIG_PATH", Path(tmp) / "config.json"):
                config.save_settings(expected)
                saved = config.load_config()
                loaded = config.load_settings()

        self.assertEqual(saved["render_mode"], "paragraph")
        self.assertEqual(saved["exclude_languages"], ["markdown", "mdx"])
        self.assertEqual(loaded, expected)

    def test_preview_config_carries_pipeline_fields(self) -> None:
        settings = PreviewSettings(max_preview_length=30, render_mode=RenderMode.PARAGRAPH)
        self.assertEqual(
            settings.preview_config(),
            PreviewConfig(max_preview_length=30, render_mode=RenderMode.PARAGRAPH),
        )

    def test_with_overrides_ignores_none_values(self) -> None:
        settings = PreviewSettings()
        self.assertIs(settings.with_overrides(theme=None, max_preview_length=None), settings)
        updated = settings.with_overrides(theme="dark", max_preview_length=None)
        self.assertEqual(updated.theme, "dark")
        self.assertEqual(updated.max_preview_length, 120)


if __name__ == "__main__":
    unittest.main()
