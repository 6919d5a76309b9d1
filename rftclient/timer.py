"""Retransmission timer measured in whole milliseconds."""

from __future__ import annotations

import time
from typing import Callable

_NS_PER_MS = 1_000_000


class Timer:
    """A one-shot timer that reports whether its duration has elapsed."""

    def __init__(
        self, milliseconds: int = 0, *, clock: Callable[[], int] = time.monotonic_ns
    ) -> None:
        self._duration_ms = milliseconds
        self._clock = clock
        self._start_ns = 0
        self._running = False

    @property
    def running(self) -> bool:
        return self._running

    def set_duration(self, milliseconds: int) -> None:
        """Change the duration; not allowed while the timer runs."""
        if self._running:
            raise RuntimeError("Cannot set duration while timer is running")
        self._duration_ms = milliseconds

    def start(self) -> None:
        """Start, or restart, the timer from now."""
        self._start_ns = self._clock()
        self._running = True

    def stop(self) -> None:
        self._running = False

    def timeout(self) -> bool:
        """True when the timer runs and its duration has elapsed."""
        if not self._running:
            return False
        elapsed_ms = (self._clock() - self._start_ns) // _NS_PER_MS
        return elapsed_ms >= self._duration_ms