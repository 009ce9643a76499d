"""Runtime assertions and a marker for code that must never run."""

from __future__ import annotations

from typing import Any, NoReturn

from strawberry import log


class UnreachableError(RuntimeError):
    """Raised when code marked as unreachable is reached."""


def check(value: bool) -> None:
    """Raise ``AssertionError`` if ``value`` is false, logging the failure."""
    if not value:
        log.error("Assertion failed!")
        raise AssertionError("Assertion failed!")


def check_eq(a: Any, b: Any) -> None:
    """Check that ``a == b``."""
    check(a == b)


def check_neq(a: Any, b: Any) -> None:
    """Check that ``a != b``."""
    check(a != b)


def check_implication(a: bool, b: bool) -> None:
    """Check that ``a`` implies ``b``."""
    check(not a or b)


def unreachable() -> NoReturn:
    """Signal that control reached a point that should be impossible."""
    raise UnreachableError("reached code marked unreachable")