"""Decoration styles for inline previews in a terminal.

Only the appended preview text is styled; the document line itself is printed
as-is.
"""

from __future__ import annotations

from dataclasses import dataclass

THEME_NAMES = ("auto", "light", "dark")

DECORATION_PREFIX = " -> "


def normalize_theme(value: object) -> str:
    """Return a known theme name, falling back to ``"auto"``."""
    if not isinstance(value, str):
        return "auto"
    candidate = value.strip().lower()
    return candidate if candidate in THEME_NAMES else "auto"


@dataclass(frozen=True)
class DecorationStyle:
    """ANSI fragments wrapped around an inline preview decoration."""

    name: str
    preview: str
    reset: str


AUTO_STYLE = DecorationStyle(name="auto", preview="\033[2;3m", reset="\033[0m")
LIGHT_STYLE = DecorationStyle(name="light", preview="\033[3;38;5;240m", reset="\033[0m")
DARK_STYLE = DecorationStyle(name="dark", preview="\033[3;38;5;247m", reset="\033[0m")
PLAIN_STYLE = DecorationStyle(name="plain", preview="", reset="")

_STYLES: dict[str, DecorationStyle] = {
    AUTO_STYLE.name: AUTO_STYLE,
    LIGHT_STYLE.name: LIGHT_STYLE,
    DARK_STYLE.name: DARK_STYLE,
}


def resolve_decoration_style(theme: str | None, *, no_color: bool = False) -> DecorationStyle:
    """Return the concrete style for ``theme`` and color mode."""
    if no_color:
        return PLAIN_STYLE
    return _STYLES[normalize_theme(theme)]


def format_decoration(preview_text: str, style: DecorationStyle) -> str:
    """Return the styled ``" -> preview"`` suffix, or ``""`` for no preview."""
    if not preview_text:
        return ""
    return f"{style.preview}{DECORATION_PREFIX}{preview_text}{style.reset}"


__all__ = [
    "AUTO_STYLE",
    "DARK_STYLE",
    "DECORATION_PREFIX",
    "DecorationStyle",
    "LIGHT_STYLE",
    "PLAIN_STYLE",
    "THEME_NAMES",
    "format_decoration",
    "normalize_theme",
    "resolve_decoration_style",
]
