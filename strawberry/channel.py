"""Broadcasting to receivers that register with a particular broadcaster."""

from __future__ import annotations

import weakref
from abc import ABC, abstractmethod
from collections.abc import Callable
from typing import Any


def _check_types(types: tuple[Any, ...], owner: str) -> tuple[type, ...]:
    if not types:
        raise TypeError(f"a {owner} needs at least one value type")
    for kind in types:
        if not isinstance(kind, type):
            raise TypeError(f"expected a type, got {kind!r}")
    return tuple(dict.fromkeys(types))


class ChannelReceiver(ABC):
    """Receives values of its types from the broadcasters it is registered with."""

    def __init__(self, *args: type) -> None:
        self.types = _check_types(args, "receiver")

    @abstractmethod
    def receive(self, value: Any) -> None:
        """Handle a broadcast value."""


class CallbackChannelReceiver(ChannelReceiver):
    """A channel receiver that hands each value to ``callback``; ``None`` ignores values."""

    def __init__(self, callback: Callable[[Any], Any] | None, *args: type) -> None:
        super().__init__(*args)
        self.callback = callback

    def receive(self, value: Any) -> None:
        if self.callback is not None:
            self.callback(value)


class ChannelBroadcaster:
    """Sends values of its types to the receivers registered with it.

    Receivers are held weakly; a collected receiver simply stops receiving.
    """

    def __init__(self, *args: type) -> None:
        self.types = _check_types(args, "broadcaster")
        self._receivers: dict[type, list[weakref.ref[ChannelReceiver]]] = {
            kind: [] for kind in self.types
        }

    def register(self, receiver: ChannelReceiver) -> None:
        """Register ``receiver`` for the types both it and this broadcaster handle."""
        for kind in self.types:
            if kind not in receiver.types:
                continue
            refs = self._receivers[kind]
            if not any(ref() is receiver for ref in refs):
                refs.append(weakref.ref(receiver))

    def unregister(self, receiver: ChannelReceiver) -> None:
        """Stop sending anything to ``receiver``."""
        for kind, refs in self._receivers.items():
            self._receivers[kind] = [
                ref for ref in refs if (live := ref()) is not None and live is not receiver
            ]

    def broadcast(self, value: Any) -> int:
        """Deliver ``value`` to its registered receivers and return how many got it.

        Raises ``TypeError`` if this broadcaster does not handle the value's type.
        """
        matching = [kind for kind in self.types if isinstance(value, kind)]
        if not matching:
            raise TypeError(f"this broadcaster does not send {type(value).__name__} values")
        targets: list[ChannelReceiver] = []
        for kind in matching:
            live_refs = [ref for ref in self._receivers[kind] if ref() is not None]
            self._receivers[kind] = live_refs
            for ref in live_refs:
                receiver = ref()
                if receiver is not None and all(receiver is not seen for seen in targets):
                    targets.append(receiver)
        for receiver in targets:
            receiver.receive(value)
        return len(targets)