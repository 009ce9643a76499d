"""Process-wide broadcasting of values to every live receiver of their type."""

from __future__ import annotations

import weakref
from abc import ABC, abstractmethod
from collections.abc import Callable
from typing import Any

from strawberry.mutex import Mutex

_registry: Mutex[list[weakref.ref[Receiver]]] = Mutex([])


def _check_types(types: tuple[Any, ...]) -> tuple[type, ...]:
    if not types:
        raise TypeError("a receiver needs at least one value type")
    for kind in types:
        if not isinstance(kind, type):
            raise TypeError(f"expected a type, got {kind!r}")
    return tuple(dict.fromkeys(types))


def _live_receivers() -> list[Receiver]:
    with _registry.lock() as guard:
        refs = [ref for ref in guard.value if ref() is not None]
        guard.value = refs
        return [receiver for ref in refs if (receiver := ref()) is not None]


class Receiver(ABC):
    """Receives every value of its types that any ``Broadcaster`` sends.

    A receiver registers itself on creation and stays registered until it is
    closed or garbage collected.
    """

    def __init__(self, *args: type) -> None:
        self.types = _check_types(args)
        self._ref = weakref.ref(self)
        with _registry.lock() as guard:
            guard.value.append(self._ref)

    @abstractmethod
    def receive(self, value: Any) -> None:
        """Handle a broadcast value."""

    def close(self) -> None:
        """Stop receiving broadcasts; later calls do nothing."""
        with _registry.lock() as guard:
            guard.value = [ref for ref in guard.value if ref is not self._ref]


class CallbackReceiver(Receiver):
    """A receiver that hands each value to ``callback``; ``None`` ignores values."""

    def __init__(self, callback: Callable[[Any], Any] | None, *args: type) -> None:
        super().__init__(*args)
        self.callback = callback

    def receive(self, value: Any) -> None:
        if self.callback is not None:
            self.callback(value)


class Broadcaster:
    """Sends values to every live receiver registered for their type."""

    def broadcast(self, value: Any) -> int:
        """Deliver ``value`` and return how many receivers got it."""
        targets = [receiver for receiver in _live_receivers() if isinstance(value, receiver.types)]
        for receiver in targets:
            receiver.receive(value)
        return len(targets)