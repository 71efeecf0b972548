"""Markdown de-markup helpers for previews.

Block markers are stripped per line; inline spans render to text or HTML.
"""

from .block import strip_block_syntax
from .inline import escape_html, render_to_html, render_to_plain_text

__all__ = [
    "escape_html",
    "render_to_html",
    "render_to_plain_text",
    "strip_block_syntax",
]
