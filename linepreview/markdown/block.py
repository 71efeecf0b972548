"""Removal of leading block-level markdown markers from one line."""

from __future__ import annotations

import re

HEADING_MARKER_RE = re.compile(r"^#{1,6}\s+")
BLOCKQUOTE_MARKER_RE = re.compile(r"^>\s?")
ORDERED_LIST_MARKER_RE = re.compile(r"^[0-9]+\.\s+")
BULLET_LIST_MARKER_RE = re.compile(r"^[-*+]\s+")

# Order matters: each pattern runs once against what the previous ones left.
_BLOCK_MARKER_PATTERNS = (
    HEADING_MARKER_RE,
    BLOCKQUOTE_MARKER_RE,
    ORDERED_LIST_MARKER_RE,
    BULLET_LIST_MARKER_RE,
)


def strip_block_syntax(line: str) -> str:
    """Return ``line`` trimmed and without its leading block markers.

    Heading, blockquote, ordered-list, and bullet markers are each removed at
    most once, in that order. ``"> # Title"`` therefore keeps its ``#`` and
    ``">> text"`` loses only one ``>``.
    """
    text = line.strip()
    for pattern in _BLOCK_MARKER_PATTERNS:
        text = pattern.sub("", text, count=1)
    return text


__all__ = ["strip_block_syntax"]
