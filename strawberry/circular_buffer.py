"""First-in first-out ring buffers."""

from __future__ import annotations

from collections import deque
from typing import Generic, TypeVar

T = TypeVar("T")

_INITIAL_CAPACITY = 16


class CircularBuffer(Generic[T]):
    """A queue of fixed capacity; pushing when full drops the oldest item."""

    def __init__(self, capacity: int) -> None:
        if capacity < 1:
            raise ValueError(f"capacity must be positive, got {capacity}")
        self._items: deque[T] = deque(maxlen=capacity)

    def push(self, value: T) -> None:
        """Append ``value``, discarding the oldest item if the buffer is full."""
        self._items.append(value)

    def pop(self) -> T | None:
        """Remove and return the oldest item, or ``None`` when empty."""
        return self._items.popleft() if self._items else None

    def __len__(self) -> int:
        return len(self._items)

    def empty(self) -> bool:
        """Whether the buffer holds nothing."""
        return not self._items

    def capacity(self) -> int:
        """Maximum number of items held."""
        return self._items.maxlen or 0

    def at_capacity(self) -> bool:
        """Whether the next push will discard an item."""
        return len(self._items) == self.capacity()

    def resize(self, new_size: int) -> None:
        """Change the capacity to ``new_size``, which must exceed the current size."""
        if new_size <= len(self._items):
            raise ValueError(
                f"new size {new_size} must be greater than the current size {len(self._items)}"
            )
        self._items = deque(self._items, maxlen=new_size)

    def clear(self) -> None:
        """Remove every item."""
        self._items.clear()


class DynamicCircularBuffer(Generic[T]):
    """A queue whose capacity starts at 16 and doubles whenever it fills."""

    def __init__(self) -> None:
        self._items: deque[T] = deque()
        self._capacity = _INITIAL_CAPACITY

    def push(self, value: T) -> None:
        """Append ``value``, growing the capacity first if the buffer is full."""
        if self.at_capacity():
            self._capacity *= 2
        self._items.append(value)

    def pop(self) -> T | None:
        """Remove and return the oldest item, or ``None`` when empty."""
        return self._items.popleft() if self._items else None

    def __len__(self) -> int:
        return len(self._items)

    def empty(self) -> bool:
        """Whether the buffer holds nothing."""
        return not self._items

    def capacity(self) -> int:
        """Number of items that fit before the next growth."""
        return self._capacity

    def at_capacity(self) -> bool:
        """Whether the next push will grow the buffer."""
        return len(self._items) == self._capacity

    def clear(self) -> None:
        """Remove every item; the capacity is kept."""
        self._items.clear()