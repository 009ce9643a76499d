"""Starting a child program and collecting its exit code."""

from __future__ import annotations

import subprocess
from collections.abc import Sequence
from dataclasses import dataclass
from types import TracebackType

from strawberry import log


@dataclass(frozen=True)
class ProcessResult:
    """How a finished process ended."""

    exit_code: int

    def __int__(self) -> int:
        return self.exit_code


def format_arguments(arguments: Sequence[str]) -> str:
    """Quote each argument and join them with single spaces."""
    return " ".join(f'"{argument}"' for argument in arguments)


class Process:
    """A running child program; waiting on it yields a ``ProcessResult``."""

    def __init__(self, executable: str, arguments: Sequence[str] = ()) -> None:
        self.executable = executable
        self.arguments = list(arguments)
        self._result: ProcessResult | None = None
        log.info('Running command ["{}" {}]', executable, format_arguments(self.arguments))
        try:
            self._popen = subprocess.Popen([executable, *self.arguments])
        except FileNotFoundError:
            log.error("Could not find file {}", executable)
            raise
        except OSError as exc:
            log.error("Starting the process failed! Error code: {}.", exc.errno)
            raise

    def wait(self) -> ProcessResult:
        """Block until the process ends and return its result; later calls reuse it."""
        if self._result is None:
            self._result = ProcessResult(self._popen.wait())
        return self._result

    def close(self) -> None:
        """Wait for the process to end."""
        self.wait()

    def __enter__(self) -> Process:
        return self

    def __exit__(
        self,
        *args: type[BaseException] | BaseException | TracebackType | None,
    ) -> None:
        self.close()