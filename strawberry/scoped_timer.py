"""Timing of a block of code, reported through the log."""

from __future__ import annotations

from types import TracebackType

from strawberry import log
from strawberry.clock import Clock
from strawberry.log import Level


class ScopedTimer:
    """Context manager that logs, at trace level, how long its block took."""

    def __init__(self, name: str) -> None:
        self.name = name
        self._clock = Clock()

    def __enter__(self) -> ScopedTimer:
        return self

    def __exit__(
        self,
        *args: type[BaseException] | BaseException | TracebackType | None,
    ) -> None:
        log.log(Level.TRACE, "{} ---- {}", self.name, self._clock.read())