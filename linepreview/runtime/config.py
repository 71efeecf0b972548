"""Persistent JSON settings for the preview host.

Stores the enable toggle, preview length, debounce delay, render mode, panel
theme, and excluded language ids. All access is defensive: malformed or
missing config falls back to defaults.
"""

from __future__ import annotations

import json
import logging
from dataclasses import dataclass, replace
from pathlib import Path

from platformdirs import user_config_dir

from ..document import RenderMode
from ..preview import DEFAULT_MAX_PREVIEW_LENGTH, PreviewConfig
from ..ui_theme import THEME_NAMES, normalize_theme

logger = logging.getLogger(__name__)

APP_NAME = "linepreview"
CONFIG_FILENAME = "config.json"
DEFAULT_CONFIG_PATH = Path(user_config_dir(APP_NAME, appauthor=False)) / CONFIG_FILENAME
CONFIG_PATH = DEFAULT_CONFIG_PATH

DEFAULT_DEBOUNCE_MS = 150


@dataclass(frozen=True)
class PreviewSettings:
    """Host-level settings; the pipeline only sees ``preview_config()``."""

    enabled: bool = True
    max_preview_length: int = DEFAULT_MAX_PREVIEW_LENGTH
    debounce_ms: int = DEFAULT_DEBOUNCE_MS
    render_mode: RenderMode = RenderMode.LINE
    theme: str = "auto"
    exclude_languages: frozenset[str] = frozenset()

    def preview_config(self) -> PreviewConfig:
        return PreviewConfig(max_preview_length=self.max_preview_length, render_mode=self.render_mode)

    def with_overrides(self, **changes: object) -> "PreviewSettings":
        """Return a copy with non-``None`` ``changes`` applied."""
        applied = {key: value for key, value in changes.items() if value is not None}
        return replace(self, **applied) if applied else self


def load_config() -> dict[str, object]:
    """Load the persisted JSON config object.

    Returns an empty dict when the file is missing, unreadable, malformed, or
    does not decode to a top-level JSON object.
    """
    try:
        data = json.loads(CONFIG_PATH.read_text(encoding="utf-8"))
    except FileNotFoundError:
        return {}
    except Exception:
        logger.debug("ignoring unreadable config at %s", CONFIG_PATH, exc_info=True)
        return {}
    return data if isinstance(data, dict) else {}


def save_config(data: dict[str, object]) -> None:
    """Persist config data as pretty-printed JSON.

    Filesystem and serialization errors are logged and otherwise ignored.
    """
    try:
        CONFIG_PATH.parent.mkdir(parents=True, exist_ok=True)
        CONFIG_PATH.write_text(json.dumps(data, indent=2) + "\n", encoding="utf-8")
    except Exception:
        logger.debug("could not write config to %s", CONFIG_PATH, exc_info=True)


def _coerce_nonnegative_int(value: object, default: int) -> int:
    """Booleans and non-integers are invalid and fall back to ``default``."""
    if isinstance(value, bool) or not isinstance(value, int):
        return default
    return max(0, value)


def _coerce_languages(value: object) -> frozenset[str]:
    if not isinstance(value, list):
        return frozenset()
    return frozenset(item.strip() for item in value if isinstance(item, str) and item.strip())


def settings_from_mapping(data: dict[str, object]) -> PreviewSettings:
    """Build settings from a raw mapping, validating each field separately."""
    defaults = PreviewSettings()
    enabled = data.get("enabled")
    return PreviewSettings(
        enabled=enabled if isinstance(enabled, bool) else defaults.enabled,
        max_preview_length=_coerce_nonnegative_int(data.get("max_preview_length"), defaults.max_preview_length),
        debounce_ms=_coerce_nonnegative_int(data.get("debounce_ms"), defaults.debounce_ms),
        render_mode=RenderMode.parse(data.get("render_mode"), defaults.render_mode),
        theme=normalize_theme(data.get("theme")),
        exclude_languages=_coerce_languages(data.get("exclude_languages")),
    )


def load_settings() -> PreviewSettings:
    """Load persisted settings; absent or invalid values use defaults."""
    return settings_from_mapping(load_config())


def save_enabled(enabled: bool) -> None:
    """Persist the preview enable toggle, keeping other keys intact."""
    config = load_config()
    config["enabled"] = bool(enabled)
    save_config(config)


def save_settings(settings: PreviewSettings) -> None:
    """Persist all settings in normalized JSON form."""
    config = load_config()
    config.update(
        {
            "enabled": settings.enabled,
            "max_preview_length": max(0, settings.max_preview_length),
            "debounce_ms": max(0, settings.debounce_ms),
            "render_mode": settings.render_mode.value,
            "theme": normalize_theme(settings.theme),
            "exclude_languages": sorted(settings.exclude_languages),
        }
    )
    save_config(config)


__all__ = [
    "CONFIG_PATH",
    "PreviewSettings",
    "THEME_NAMES",
    "load_config",
    "load_settings",
    "normalize_theme",
    "save_config",
    "save_enabled",
    "save_settings",
    "settings_from_mapping",
]
