"""A stopwatch measuring elapsed seconds."""

from __future__ import annotations

import time


class Clock:
    """Accumulates running time across start and stop."""

    def __init__(self, start: bool = True) -> None:
        self._elapsed = 0.0
        self._started_at: float | None = None
        if start:
            self.start()

    @property
    def running(self) -> bool:
        """Whether the clock is currently counting."""
        return self._started_at is not None

    def start(self) -> None:
        """Start counting; does nothing if already running."""
        if self._started_at is None:
            self._started_at = time.monotonic()

    def stop(self) -> float:
        """Stop counting and return the accumulated seconds."""
        if self._started_at is not None:
            self._elapsed += time.monotonic() - self._started_at
            self._started_at = None
        return self._elapsed

    def read(self) -> float:
        """Seconds counted so far, including the current run."""
        if self._started_at is None:
            return self._elapsed
        return self._elapsed + (time.monotonic() - self._started_at)

    def __float__(self) -> float:
        return self.read()

    def restart(self) -> float:
        """Return the seconds counted so far and start again from zero."""
        elapsed = self.read()
        self._elapsed = 0.0
        self._started_at = time.monotonic()
        return elapsed