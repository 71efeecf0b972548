"""Command-line front door for linepreview.

Parses CLI options, loads the target markdown file, and prints the preview of
one line (or its paragraph) as a decorated line, plain text, or panel HTML.
"""

from __future__ import annotations

import argparse
import logging
import sys
import threading
from pathlib import Path

from .document import RenderMode
from .runtime import config
from .runtime.controller import DocumentSnapshot, PreviewController, PreviewUpdate, status_text
from .runtime.watch import watch_path
from .ui_theme import THEME_NAMES, format_decoration, resolve_decoration_style


def _positive_int(value: str) -> int:
    """argparse type for positive integer values."""
    try:
        parsed = int(value)
    except ValueError as exc:
        raise argparse.ArgumentTypeError(f"invalid integer value: {value!r}") from exc
    if parsed <= 0:
        raise argparse.ArgumentTypeError("value must be >= 1")
    return parsed


def _nonnegative_int(value: str) -> int:
    """argparse type for integer values >= 0."""
    try:
        parsed = int(value)
    except ValueError as exc:
        raise argparse.ArgumentTypeError(f"invalid integer value: {value!r}") from exc
    if parsed < 0:
        raise argparse.ArgumentTypeError("value must be >= 0")
    return parsed


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        description="Preview the de-markup'd text of one markdown line or paragraph."
    )
    parser.add_argument("path", nargs="?", default=None, help="Markdown file to preview.")
    parser.add_argument("--line", type=_positive_int, default=1, help="1-based cursor line (clamped to the file).")
    parser.add_argument(
        "--mode",
        choices=[mode.value for mode in RenderMode],
        default=None,
        help="Preview the cursor line or its whole paragraph.",
    )
    parser.add_argument("--max-length", type=_nonnegative_int, default=None, help="Maximum preview length.")
    parser.add_argument("--theme", choices=THEME_NAMES, default=None, help="Decoration and panel theme.")
    parser.add_argument("--language", default=None, help="Override the detected language id.")
    output = parser.add_mutually_exclusive_group()
    output.add_argument("--plain", action="store_true", help="Print only the plain-text preview.")
    output.add_argument("--html", action="store_true", help="Print the preview panel as an HTML page.")
    parser.add_argument("--no-color", action="store_true", help="Disable ANSI styling of the decoration.")
    parser.add_argument("--watch", action="store_true", help="Re-render whenever the file changes.")
    parser.add_argument("--toggle", action="store_true", help="Flip the persisted enabled setting and exit.")
    parser.add_argument("--verbose", action="store_true", help="Log debug details to stderr.")
    return parser


def format_update(update: PreviewUpdate, *, plain: bool, html: bool, no_color: bool) -> str:
    """Return the text printed for one preview update."""
    if html:
        return update.panel_html
    if plain:
        return update.preview.text + "\n" if update.preview.text else ""
    style = resolve_decoration_style(update.theme, no_color=no_color)
    return f"{update.line_text}{format_decoration(update.preview.text, style)}\n"


def main() -> None:
    """Parse CLI arguments and print the preview for one file position."""
    parser = build_parser()
    args = parser.parse_args()

    if args.verbose:
        logging.basicConfig(level=logging.DEBUG, format="%(levelname)s %(name)s: %(message)s")

    settings = config.load_settings()
    if args.toggle:
        enabled = not settings.enabled
        config.save_enabled(enabled)
        print(status_text(enabled))
        return

    if args.path is None:
        parser.error("path is required unless --toggle is given")
    path = Path(args.path)
    if not path.is_file():
        raise SystemExit(f"Path not found: {path}")

    settings = settings.with_overrides(
        max_preview_length=args.max_length,
        render_mode=RenderMode.parse(args.mode) if args.mode is not None else None,
        theme=args.theme,
    )

    def snapshot() -> DocumentSnapshot:
        return DocumentSnapshot.from_path(path, args.line - 1, language_id=args.language)

    def publish(update: PreviewUpdate) -> None:
        sys.stdout.write(format_update(update, plain=args.plain, html=args.html, no_color=args.no_color))
        sys.stdout.flush()

    controller = PreviewController(settings, snapshot, publish)
    controller.refresh()
    if not args.watch:
        return

    stop = threading.Event()
    try:
        watch_path(path, controller.schedule_render, stop)
    except KeyboardInterrupt:
        stop.set()
    finally:
        controller.dispose()


if __name__ == "__main__":
    main()
