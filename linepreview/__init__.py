"""Public package surface for linepreview.

Exports the preview pipeline and ``main`` for programmatic CLI invocation.
"""

from __future__ import annotations

from .document import Document, RenderMode, Span, select_span
from .markdown import render_to_html, render_to_plain_text, strip_block_syntax
from .preview import PreviewConfig, RenderedPreview, build_preview_source, render_preview
from .text import truncate


def main(*args, **kwargs):
    """Lazily import CLI entrypoint to keep package imports lightweight."""
    from .cli import main as _main

    return _main(*args, **kwargs)


__all__ = [
    "Document",
    "PreviewConfig",
    "RenderMode",
    "RenderedPreview",
    "Span",
    "build_preview_source",
    "main",
    "render_preview",
    "render_to_html",
    "render_to_plain_text",
    "select_span",
    "strip_block_syntax",
    "truncate",
]
