"""Levelled logging to the console and, optionally, to a file."""

from __future__ import annotations

import sys
from dataclasses import dataclass
from enum import IntEnum
from typing import IO, Any


class Level(IntEnum):
    """Severity of a log message, from least to most severe."""

    TRACE = 0
    DEBUG = 1
    INFO = 2
    WARNING = 3
    ERROR = 4


@dataclass
class _State:
    level: Level | None = None
    output: IO[str] | None = None


_state = _State()


def level_to_string(level: Level) -> str:
    """Return the upper-case name shown for a level."""
    return Level(level).name


def get_level() -> Level:
    """Return the minimum level that is logged; TRACE unless set."""
    return _state.level if _state.level is not None else Level.TRACE


def set_level(level: Level) -> None:
    """Set the minimum level that is logged."""
    _state.level = Level(level)


def set_output_file(filename: str | None) -> None:
    """Also write every logged line to ``filename``; ``None`` stops that."""
    if _state.output is not None:
        _state.output.close()
        _state.output = None
    if filename is not None:
        _state.output = open(filename, "w", encoding="utf-8")


def _log_raw(level: Level, message: str) -> None:
    stream = sys.stderr if level == Level.ERROR else sys.stdout
    print(message, file=stream, flush=True)
    if _state.output is not None:
        print(message, file=_state.output, flush=True)


def log(level: Level, message: str, *args: Any) -> None:
    """Format ``message`` with ``args`` and log it if ``level`` is enabled."""
    level = Level(level)
    if get_level() > level:
        return
    formatted = message.format(*args)
    _log_raw(level, f"[{level_to_string(level)}]\t{formatted}")


def trace(message: str, *args: Any) -> None:
    """Log at TRACE level."""
    log(Level.TRACE, message, *args)


def debug(message: str, *args: Any) -> None:
    """Log at DEBUG level."""
    log(Level.DEBUG, message, *args)


def info(message: str, *args: Any) -> None:
    """Log at INFO level."""
    log(Level.INFO, message, *args)


def warning(message: str, *args: Any) -> None:
    """Log at WARNING level."""
    log(Level.WARNING, message, *args)


def error(message: str, *args: Any) -> None:
    """Log at ERROR level, to standard error."""
    log(Level.ERROR, message, *args)