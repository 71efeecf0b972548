"""Debounced render scheduling for rapid editor or file events."""

from __future__ import annotations

import threading
from collections.abc import Callable
from functools import partial


class RenderScheduler:
    """Coalesce render requests so only the newest one runs.

    Each ``schedule`` or ``cancel`` call bumps a generation counter. A timer
    whose callback was already running when it got superseded sees a stale
    generation and neither renders nor touches the newer timer.
    """

    def __init__(self, render: Callable[[], None], timer_factory=threading.Timer) -> None:
        self._render = render
        self._timer_factory = timer_factory
        self._lock = threading.Lock()
        self._timer = None
        self._generation = 0

    def schedule(self, delay_ms: int, immediate: bool = False) -> None:
        """Run ``render`` after ``delay_ms`` (clamped at 0), or now if ``immediate``."""
        self.cancel()
        if immediate:
            self._render()
            return

        with self._lock:
            generation = self._generation
        timer = self._timer_factory(max(0, delay_ms) / 1000.0, partial(self._fire, generation))
        timer.daemon = True
        with self._lock:
            if generation != self._generation:
                return
            self._timer = timer
        timer.start()

    def _fire(self, generation: int) -> None:
        with self._lock:
            if generation != self._generation:
                return
            self._timer = None
        self._render()

    def cancel(self) -> None:
        """Drop the pending render, if any."""
        with self._lock:
            self._generation += 1
            timer = self._timer
            self._timer = None
        if timer is not None:
            timer.cancel()

    @property
    def pending(self) -> bool:
        with self._lock:
            return self._timer is not None


__all__ = ["RenderScheduler"]
