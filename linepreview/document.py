"""Document snapshot, line spans, and span selection around a cursor line."""

from __future__ import annotations

import re
from dataclasses import dataclass
from enum import Enum

LINE_BREAK_RE = re.compile(r"\r\n|\r|\n")


class RenderMode(str, Enum):
    """How much text around the cursor line is previewed."""

    LINE = "line"
    PARAGRAPH = "paragraph"

    @classmethod
    def parse(cls, value: object, default: "RenderMode | None" = None) -> "RenderMode":
        """Return mode for ``value``, falling back to ``default`` (or ``LINE``)."""
        if isinstance(value, cls):
            return value
        if isinstance(value, str):
            candidate = value.strip().lower()
            for mode in cls:
                if mode.value == candidate:
                    return mode
        return default if default is not None else cls.LINE


@dataclass(frozen=True)
class Span:
    """Inclusive ``[start, end]`` range of line indexes."""

    start: int
    end: int

    def line_indexes(self) -> range:
        return range(self.start, self.end + 1)


@dataclass(frozen=True)
class Document:
    """Immutable snapshot of document lines (0-indexed).

    A document always holds at least one line; empty text maps to ``[""]``
    the way editors report an empty buffer.
    """

    lines: tuple[str, ...]

    @classmethod
    def from_lines(cls, lines) -> "Document":
        materialized = tuple(lines)
        return cls(materialized if materialized else ("",))

    @classmethod
    def from_text(cls, text: str) -> "Document":
        """Split on CRLF, CR, or LF only; a trailing break ends in a blank line."""
        return cls.from_lines(LINE_BREAK_RE.split(text))

    @property
    def line_count(self) -> int:
        return len(self.lines)

    @property
    def last_index(self) -> int:
        return len(self.lines) - 1

    def line_at(self, index: int) -> str:
        return self.lines[index]

    def is_blank(self, index: int) -> bool:
        """Return whether line ``index`` is empty or whitespace-only."""
        return not self.lines[index].strip()

    def clamp_line(self, index: int) -> int:
        """Clamp ``index`` into the valid line range."""
        return max(0, min(index, self.last_index))


def select_span(document: Document, cursor_line: int, mode: RenderMode) -> Span:
    """Return the line range to preview for ``cursor_line``.

    ``LINE`` always selects just the cursor line. ``PARAGRAPH`` grows the range
    over the contiguous non-blank lines around the cursor; a blank cursor line
    stays a single-line span. ``cursor_line`` must be inside the document.
    """
    if mode is not RenderMode.PARAGRAPH or document.is_blank(cursor_line):
        return Span(cursor_line, cursor_line)

    start = cursor_line
    end = cursor_line
    while start > 0 and not document.is_blank(start - 1):
        start -= 1
    while end < document.last_index and not document.is_blank(end + 1):
        end += 1
    return Span(start, end)


__all__ = ["Document", "RenderMode", "Span", "select_span"]
