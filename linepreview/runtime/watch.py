"""Poll-based file change detection for watch mode.

Compares stat signatures between polls instead of subscribing to OS events.
"""

from __future__ import annotations

import threading
import time
from collections.abc import Callable
from pathlib import Path

DEFAULT_POLL_SECONDS = 0.25


def path_stat_signature(path: Path) -> tuple[str, int, int]:
    """Return a stable stat tuple describing ``path`` existence and metadata."""
    try:
        st = path.stat()
    except FileNotFoundError:
        return ("missing", 0, 0)
    except OSError:
        return ("error", 0, 0)
    return ("ok", st.st_mtime_ns, st.st_size)


def watch_path(
    path: Path,
    on_change: Callable[[], None],
    stop: threading.Event,
    poll_seconds: float = DEFAULT_POLL_SECONDS,
    sleep: Callable[[float], None] = time.sleep,
) -> None:
    """Call ``on_change`` each time the stat signature of ``path`` changes.

    Runs until ``stop`` is set. The initial state does not count as a change.
    """
    previous = path_stat_signature(path)
    while not stop.is_set():
        sleep(poll_seconds)
        if stop.is_set():
            return
        current = path_stat_signature(path)
        if current != previous:
            previous = current
            on_change()


__all__ = ["DEFAULT_POLL_SECONDS", "path_stat_signature", "watch_path"]
