"""A fixed-period tick source that compensates for lateness."""

from __future__ import annotations

from strawberry.clock import Clock


class Metronome:
    """Signals, through its truth value, when the next period has elapsed.

    ``preemption`` lets a tick fire that many seconds early. Ticking late is
    paid back by shortening the following period.
    """

    def __init__(self, frequency: float, preemption: float = 1.0) -> None:
        self.frequency = frequency
        self.preemption = preemption
        self._clock = Clock()
        self._seconds_ahead = 0.0

    def __bool__(self) -> bool:
        return self._clock.read() >= (self.frequency + self._seconds_ahead) - self.preemption

    def tick(self) -> None:
        """Mark a tick, carrying any lateness over to the next period."""
        self._seconds_ahead += self.frequency - self._clock.restart()

    def tick_without_progress(self) -> None:
        """Restart the period without carrying over lateness."""
        self._clock.restart()