"""A condition variable with its own lock."""

from __future__ import annotations

import threading
from collections.abc import Callable


class ConditionVariable:
    """Lets threads sleep until notified or until a predicate holds."""

    def __init__(self) -> None:
        self._condition = threading.Condition(threading.Lock())

    def wait(self, predicate: Callable[[], bool] | None = None) -> bool:
        """Wait for a notification, or until ``predicate`` returns true."""
        with self._condition:
            if predicate is None:
                return self._condition.wait()
            return bool(self._condition.wait_for(predicate))

    def wait_for(self, seconds: float, predicate: Callable[[], bool] | None = None) -> bool:
        """As ``wait`` but give up after ``seconds``; returns whether it was satisfied."""
        with self._condition:
            if predicate is None:
                return self._condition.wait(seconds)
            return bool(self._condition.wait_for(predicate, seconds))

    def notify_one(self) -> None:
        """Wake one waiting thread."""
        with self._condition:
            self._condition.notify()

    def notify_all(self) -> None:
        """Wake every waiting thread."""
        with self._condition:
            self._condition.notify_all()