"""Preview pipeline: span selection, block stripping, inline rendering, truncation.

Every call is a pure function of the document snapshot, cursor line, and
config. Nothing is cached between calls.
"""

from __future__ import annotations

from dataclasses import dataclass

from .document import Document, RenderMode, select_span
from .markdown import render_to_html, render_to_plain_text, strip_block_syntax
from .text import truncate

DEFAULT_MAX_PREVIEW_LENGTH = 120


@dataclass(frozen=True)
class PreviewConfig:
    """Per-render pipeline settings, passed by value."""

    max_preview_length: int = DEFAULT_MAX_PREVIEW_LENGTH
    render_mode: RenderMode = RenderMode.LINE


@dataclass(frozen=True)
class RenderedPreview:
    """Plain-text and HTML renditions of the same preview source."""

    text: str
    html: str

    @property
    def is_empty(self) -> bool:
        return not self.text


def build_preview_source(document: Document, cursor_line: int, mode: RenderMode) -> str:
    """Return block-stripped span lines joined by single spaces."""
    span = select_span(document, cursor_line, mode)
    return " ".join(strip_block_syntax(document.line_at(index)) for index in span.line_indexes())


def render_preview(document: Document, cursor_line: int, config: PreviewConfig) -> RenderedPreview:
    """Render the preview for ``cursor_line`` as plain text and HTML.

    Plain text is truncated after rendering. HTML is truncated on the source
    before rendering so tags and entities are never cut.
    """
    source = build_preview_source(document, cursor_line, config.render_mode)
    text = truncate(render_to_plain_text(source), config.max_preview_length)
    html = render_to_html(truncate(source, config.max_preview_length))
    return RenderedPreview(text=text, html=html)


__all__ = [
    "DEFAULT_MAX_PREVIEW_LENGTH",
    "PreviewConfig",
    "RenderedPreview",
    "build_preview_source",
    "render_preview",
]
