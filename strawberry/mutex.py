"""Values that can only be reached while holding their lock."""

from __future__ import annotations

import copy
import threading
from types import TracebackType
from typing import Any, Generic, TypeVar

T = TypeVar("T")


class MutexGuard(Generic[T]):
    """Access to a locked value; the lock is held until ``release``."""

    def __init__(self, mutex: Mutex[T]) -> None:
        self._mutex = mutex
        self._held = True

    @property
    def value(self) -> T:
        """The protected value."""
        self._check_held()
        return self._mutex._payload

    @value.setter
    def value(self, new_value: T) -> None:
        self._check_held()
        self._mutex._payload = new_value

    def _check_held(self) -> None:
        if not self._held:
            raise RuntimeError("the guard has been released")

    def release(self) -> None:
        """Release the lock; later calls do nothing."""
        if self._held:
            self._held = False
            self._mutex._lock.release()

    def __enter__(self) -> MutexGuard[T]:
        return self

    def __exit__(
        self,
        *args: type[BaseException] | BaseException | TracebackType | None,
    ) -> None:
        self.release()


class Mutex(Generic[T]):
    """A value guarded by a re-entrant lock."""

    def __init__(self, value: T) -> None:
        self._lock = threading.RLock()
        self._payload = value
        self._taken = False

    def _check_present(self) -> None:
        if self._taken:
            raise RuntimeError("the value has been taken out of this mutex")

    def lock(self) -> MutexGuard[T]:
        """Block until the lock is held and return a guard for the value."""
        self._lock.acquire()
        if self._taken:
            self._lock.release()
            self._check_present()
        return MutexGuard(self)

    def try_lock(self) -> MutexGuard[T] | None:
        """Return a guard if the lock is free now, otherwise ``None``."""
        if not self._lock.acquire(blocking=False):
            return None
        if self._taken:
            self._lock.release()
            self._check_present()
        return MutexGuard(self)

    def clone(self) -> Mutex[T]:
        """A new mutex holding an independent copy of the value."""
        with self.lock() as guard:
            return Mutex(copy.deepcopy(guard.value))

    def take(self) -> T:
        """Remove and return the value; the mutex cannot be locked afterwards."""
        with self.lock() as guard:
            value = guard.value
            self._taken = True
            self._payload = None  # type: ignore[assignment]
            return value


class SharedMutex(Generic[T]):
    """A handle to a mutex that copies of the handle share; it may be empty."""

    def __init__(self, *args: Any) -> None:
        if len(args) > 1:
            raise TypeError(f"SharedMutex takes at most one value, got {len(args)}")
        self._mutex: Mutex[T] | None = None
        if args and args[0] is not None:
            self._mutex = Mutex(args[0])

    def has_value(self) -> bool:
        """Whether a mutex is held."""
        return self._mutex is not None

    def __bool__(self) -> bool:
        return self.has_value()

    def emplace(self, value: T) -> None:
        """Point this handle at a new mutex holding ``value``."""
        self._mutex = Mutex(value)

    def reset(self) -> None:
        """Make this handle empty."""
        self._mutex = None

    def _require(self) -> Mutex[T]:
        if self._mutex is None:
            raise RuntimeError("the shared mutex is empty")
        return self._mutex

    def lock(self) -> MutexGuard[T]:
        """Lock the shared mutex."""
        return self._require().lock()

    def try_lock(self) -> MutexGuard[T] | None:
        """Try to lock the shared mutex without blocking."""
        return self._require().try_lock()