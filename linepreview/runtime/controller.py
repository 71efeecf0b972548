"""Host-side glue between document snapshots and the preview pipeline.

Applies the enable gate, the markdown/excluded-language filters, debounce
scheduling, and failure isolation. The pipeline itself stays pure; this
controller only decides whether to call it and where its output goes.
"""

from __future__ import annotations

import logging
from collections.abc import Callable
from dataclasses import dataclass
from pathlib import Path

from ..document import Document
from ..panel import build_panel_html
from ..preview import RenderedPreview, render_preview
from . import config
from .config import PreviewSettings
from .language import MARKDOWN_LANGUAGE_ID, detect_language_id, is_markdown_document
from .scheduler import RenderScheduler

logger = logging.getLogger(__name__)

EMPTY_PREVIEW = RenderedPreview(text="", html="")


def read_text(path: Path) -> str:
    """Read text using tolerant encoding fallback order.

    ``utf-8-sig`` also decodes plain UTF-8 and drops a leading BOM.
    """
    for encoding in ("utf-8-sig", "latin-1"):
        try:
            return path.read_text(encoding=encoding)
        except UnicodeDecodeError:
            continue
    return path.read_bytes().decode("utf-8", errors="replace")


@dataclass(frozen=True)
class DocumentSnapshot:
    """Immutable view of one document and its cursor line at trigger time."""

    document: Document
    cursor_line: int
    path: Path | None = None
    language_id: str = MARKDOWN_LANGUAGE_ID

    @classmethod
    def from_path(cls, path: Path, cursor_line: int, language_id: str | None = None) -> "DocumentSnapshot":
        """Load ``path`` and clamp ``cursor_line`` into its line range."""
        document = Document.from_text(read_text(path))
        return cls(
            document=document,
            cursor_line=document.clamp_line(cursor_line),
            path=path,
            language_id=language_id or detect_language_id(path),
        )


@dataclass(frozen=True)
class PreviewUpdate:
    """What the host should display after one render."""

    preview: RenderedPreview
    enabled: bool
    theme: str
    cursor_line: int = 0
    line_text: str = ""

    @property
    def panel_html(self) -> str:
        return build_panel_html(self.preview.html, enabled=self.enabled, theme=self.theme)


def status_text(enabled: bool) -> str:
    return "MD Preview: On" if enabled else "MD Preview: Off"


class PreviewController:
    """Render previews for the active document and publish them to the host."""

    def __init__(
        self,
        settings: PreviewSettings,
        snapshot_source: Callable[[], DocumentSnapshot | None],
        on_update: Callable[[PreviewUpdate], None],
        scheduler_factory: Callable[[Callable[[], None]], RenderScheduler] = RenderScheduler,
    ) -> None:
        self._settings = settings
        self._snapshot_source = snapshot_source
        self._on_update = on_update
        self._scheduler = scheduler_factory(self.render)

    @property
    def settings(self) -> PreviewSettings:
        return self._settings

    @property
    def status_text(self) -> str:
        return status_text(self._settings.enabled)

    def _empty_update(self, snapshot: DocumentSnapshot | None = None) -> PreviewUpdate:
        if snapshot is None:
            return PreviewUpdate(EMPTY_PREVIEW, self._settings.enabled, self._settings.theme)
        document = snapshot.document
        in_range = 0 <= snapshot.cursor_line < document.line_count
        return PreviewUpdate(
            EMPTY_PREVIEW,
            self._settings.enabled,
            self._settings.theme,
            cursor_line=snapshot.cursor_line,
            line_text=document.line_at(snapshot.cursor_line) if in_range else "",
        )

    def should_preview(self, snapshot: DocumentSnapshot) -> bool:
        """Return whether ``snapshot`` passes the enable and language gates."""
        if not self._settings.enabled:
            return False
        if not is_markdown_document(snapshot.path, snapshot.language_id):
            return False
        return snapshot.language_id not in self._settings.exclude_languages

    def render_snapshot(self, snapshot: DocumentSnapshot | None) -> PreviewUpdate:
        """Render ``snapshot`` into an update; failures degrade to no preview."""
        if snapshot is None:
            return self._empty_update()
        try:
            if not self.should_preview(snapshot):
                return self._empty_update(snapshot)
            preview = render_preview(snapshot.document, snapshot.cursor_line, self._settings.preview_config())
            line_text = snapshot.document.line_at(snapshot.cursor_line)
        except Exception:
            logger.debug("preview render failed for %s", snapshot.path, exc_info=True)
            return self._empty_update(snapshot)
        return PreviewUpdate(
            preview,
            self._settings.enabled,
            self._settings.theme,
            cursor_line=snapshot.cursor_line,
            line_text=line_text,
        )

    def render(self) -> None:
        """Pull the current snapshot, render it, and publish the update."""
        try:
            snapshot = self._snapshot_source()
        except Exception:
            logger.debug("could not capture document snapshot", exc_info=True)
            snapshot = None
        self._on_update(self.render_snapshot(snapshot))

    def schedule_render(self, immediate: bool = False) -> None:
        self._scheduler.schedule(self._settings.debounce_ms, immediate=immediate)

    def refresh(self) -> None:
        self.schedule_render(immediate=True)

    def reload_settings(self, settings: PreviewSettings) -> None:
        """Swap settings and re-render immediately."""
        self._settings = settings
        self.refresh()

    def toggle_enabled(self) -> bool:
        """Flip and persist the enable toggle; return the new value."""
        enabled = not self._settings.enabled
        config.save_enabled(enabled)
        self.reload_settings(self._settings.with_overrides(enabled=enabled))
        return enabled

    def dispose(self) -> None:
        self._scheduler.cancel()


__all__ = [
    "DocumentSnapshot",
    "EMPTY_PREVIEW",
    "PreviewController",
    "PreviewUpdate",
    "read_text",
    "status_text",
]
