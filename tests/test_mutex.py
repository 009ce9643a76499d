import copy
import threading

import pytest

from strawberry.mutex import Mutex, SharedMutex


def _try_lock_elsewhere(mutex):
    outcome = []

    def worker():
        guard = mutex.try_lock()
        outcome.append(guard is not None)
        if guard is not None:
            guard.release()

    thread = threading.Thread(target=worker)
    thread.start()
    thread.join()
    return outcome[0]


def test_value_changes_persist():
    mutex = Mutex(1)
    with mutex.lock() as guard:
        guard.value = 2
    with mutex.lock() as guard:
        assert guard.value == 2


def test_in_place_mutation():
    mutex = Mutex([1])
    with mutex.lock() as guard:
        guard.value.append(2)
    with mutex.lock() as guard:
        assert guard.value == [1, 2]


def test_held_lock_blocks_other_threads():
    mutex = Mutex(0)
    guard = mutex.lock()
    assert _try_lock_elsewhere(mutex) is False
    guard.release()
    assert _try_lock_elsewhere(mutex) is True


def test_lock_is_reentrant():
    mutex = Mutex("x")
    with mutex.lock() as outer:
        inner = mutex.try_lock()
        assert inner is not None
        assert inner.value == outer.value
        inner.release()


def test_released_guard_refuses_access():
    mutex = Mutex(3)
    guard = mutex.lock()
    assert guard.value == 3
    guard.release()
    guard.release()
    with pytest.raises(RuntimeError):
        guard.value
    assert _try_lock_elsewhere(mutex) is True


def test_clone_is_independent():
    mutex = Mutex([1])
    cloned = mutex.clone()
    with cloned.lock() as guard:
        guard.value.append(9)
    with mutex.lock() as guard:
        assert guard.value == [1]


def test_take_returns_value_and_empties():
    mutex = Mutex({"k": 1})
    assert mutex.take() == {"k": 1}
    with pytest.raises(RuntimeError):
        mutex.lock()
    with pytest.raises(RuntimeError):
        mutex.try_lock()


def test_shared_mutex_empty():
    shared = SharedMutex(None)
    assert not shared
    assert shared.has_value() is False
    with pytest.raises(RuntimeError):
        shared.lock()


def test_shared_mutex_copies_share_value():
    shared = SharedMutex(10)
    other = copy.copy(shared)
    with other.lock() as guard:
        guard.value = 11
    with shared.lock() as guard:
        assert guard.value == 11


def test_shared_mutex_emplace_and_reset():
    shared = SharedMutex()
    shared.emplace("v")
    assert shared.has_value() is True
    guard = shared.try_lock()
    assert guard.value == "v"
    guard.release()
    shared.reset()
    assert bool(shared) is False


def test_shared_mutex_too_many_args():
    with pytest.raises(TypeError):
        SharedMutex(1, 2)