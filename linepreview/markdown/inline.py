"""Inline markdown span rendering to plain text or a small HTML fragment.

Spans are rewritten by an ordered list of global regex substitutions rather
than a parser. Nested or overlapping spans are handled rule by rule on the
output of earlier rules, so only single-level spans render reliably.
"""

from __future__ import annotations

import re

IMAGE_RE = re.compile(r"!\[([^\]]*)\]\([^)]+\)")
LINK_RE = re.compile(r"\[([^\]]+)\]\([^)]+\)")
CODE_RE = re.compile(r"`([^`]+)`")
BOLD_STAR_RE = re.compile(r"\*\*([^*]+)\*\*")
BOLD_UNDERSCORE_RE = re.compile(r"__([^_]+)__")
ITALIC_STAR_RE = re.compile(r"\*([^*]+)\*")
ITALIC_UNDERSCORE_RE = re.compile(r"_([^_]+)_")
STRIKETHROUGH_RE = re.compile(r"~~([^~]+)~~")

_HTML_ESCAPES = (
    ("&", "&amp;"),
    ("<", "&lt;"),
    (">", "&gt;"),
    ('"', "&quot;"),
    ("'", "&#39;"),
)

_PLAIN_TEXT_RULES: tuple[tuple[re.Pattern[str], str], ...] = (
    (IMAGE_RE, r"\1"),
    (LINK_RE, r"\1"),
    (CODE_RE, r"\1"),
    (BOLD_STAR_RE, r"\1"),
    (BOLD_UNDERSCORE_RE, r"\1"),
    (ITALIC_STAR_RE, r"\1"),
    (ITALIC_UNDERSCORE_RE, r"\1"),
    (STRIKETHROUGH_RE, r"\1"),
)

# Images collapse to alt text; links drop their target.
_HTML_RULES: tuple[tuple[re.Pattern[str], str], ...] = (
    (IMAGE_RE, r"\1"),
    (LINK_RE, r'<span class="link">\1</span>'),
    (CODE_RE, r"<code>\1</code>"),
    (BOLD_STAR_RE, r"<strong>\1</strong>"),
    (BOLD_UNDERSCORE_RE, r"<strong>\1</strong>"),
    (ITALIC_STAR_RE, r"<em>\1</em>"),
    (ITALIC_UNDERSCORE_RE, r"<em>\1</em>"),
    (STRIKETHROUGH_RE, r"<del>\1</del>"),
)


def escape_html(text: str) -> str:
    """Escape ``& < > " '`` as HTML entities."""
    for raw, entity in _HTML_ESCAPES:
        text = text.replace(raw, entity)
    return text


def collapse_whitespace(text: str) -> str:
    """Collapse whitespace runs to one space and trim both ends."""
    return " ".join(text.split())


def _apply_rules(text: str, rules: tuple[tuple[re.Pattern[str], str], ...]) -> str:
    for pattern, replacement in rules:
        text = pattern.sub(replacement, text)
    return collapse_whitespace(text)


def render_to_plain_text(text: str) -> str:
    """Render inline spans of ``text`` as plain text."""
    return _apply_rules(text, _PLAIN_TEXT_RULES)


def render_to_html(text: str) -> str:
    """Render inline spans of ``text`` as an escaped HTML fragment.

    Escaping runs once on the raw text before any substitution, so every tag in
    the result comes from the rules and user ``<``/``&`` never survive raw.
    """
    return _apply_rules(escape_html(text), _HTML_RULES)


__all__ = [
    "collapse_whitespace",
    "escape_html",
    "render_to_html",
    "render_to_plain_text",
]
