"""Errors reported by byte streams."""

from __future__ import annotations

from enum import Enum, auto


class ErrorKind(Enum):
    """What went wrong with a stream operation."""

    UNKNOWN = auto()
    CLOSED = auto()
    END_OF_FILE = auto()
    NOT_FOUND = auto()


class StreamError(Exception):
    """A stream operation failed; ``kind`` says why."""

    def __init__(self, kind: ErrorKind | int) -> None:
        self.kind = ErrorKind(kind)
        super().__init__(self.kind.name.lower().replace("_", " "))