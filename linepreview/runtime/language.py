"""Language-id detection and the markdown gate for host documents."""

from __future__ import annotations

from pathlib import Path

from pygments.lexers import find_lexer_class_for_filename

MARKDOWN_LANGUAGE_ID = "markdown"
MARKDOWN_EXTENSIONS = frozenset({".md", ".markdown"})
PLAINTEXT_LANGUAGE_ID = "plaintext"


def detect_language_id(path: Path) -> str:
    """Return a language id for ``path`` using Pygments filename lexers.

    The first lexer alias is used (``markdown`` for ``*.md``); files no lexer
    claims are ``plaintext``.
    """
    lexer_class = find_lexer_class_for_filename(path.name)
    if lexer_class is None or not lexer_class.aliases:
        return PLAINTEXT_LANGUAGE_ID
    return lexer_class.aliases[0]


def is_markdown_document(path: Path | None, language_id: str) -> bool:
    """Return whether the document is markdown by language id or extension."""
    if language_id == MARKDOWN_LANGUAGE_ID:
        return True
    if path is None:
        return False
    return path.suffix.lower() in MARKDOWN_EXTENSIONS


__all__ = [
    "MARKDOWN_LANGUAGE_ID",
    "PLAINTEXT_LANGUAGE_ID",
    "detect_language_id",
    "is_markdown_document",
]
