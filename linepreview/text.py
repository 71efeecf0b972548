"""Length bounding for preview strings."""

from __future__ import annotations

ELLIPSIS = "..."


def truncate(text: str, max_length: int) -> str:
    """Bound ``text`` to ``max_length`` characters.

    Longer text keeps its first ``max_length - 3`` characters, right-trimmed,
    plus ``"..."``. Limits of 1-3 leave no room for an ellipsis and cut
    verbatim. Lengths count code points, so wide or combined characters may
    be split.
    """
    if max_length <= 0:
        return ""
    if len(text) <= max_length:
        return text
    if max_length <= len(ELLIPSIS):
        return text[:max_length]
    return text[: max_length - len(ELLIPSIS)].rstrip() + ELLIPSIS


__all__ = ["ELLIPSIS", "truncate"]
