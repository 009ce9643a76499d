import gc

import pytest

from strawberry.broadcaster import Broadcaster, CallbackReceiver, Receiver


class Ping:
    def __init__(self, payload):
        self.payload = payload


class Pong:
    def __init__(self, payload):
        self.payload = payload


class Other:
    pass


@pytest.fixture
def receivers():
    created = []
    yield created
    for receiver in created:
        receiver.close()


def test_callback_receiver_gets_broadcast_value(receivers):
    got = []
    receivers.append(CallbackReceiver(got.append, Ping))
    message = Ping(1)
    Broadcaster().broadcast(message)
    assert got == [message]


def test_receiver_of_other_type_is_skipped(receivers):
    got = []
    receivers.append(CallbackReceiver(got.append, Other))
    Broadcaster().broadcast(Ping(1))
    assert got == []


def test_multi_type_receiver_gets_each_type(receivers):
    got = []
    receivers.append(CallbackReceiver(got.append, Ping, Pong))
    ping, pong = Ping(1), Pong(2)
    broadcaster = Broadcaster()
    broadcaster.broadcast(ping)
    broadcaster.broadcast(pong)
    assert got == [ping, pong]


def test_every_receiver_gets_the_value(receivers):
    first, second = [], []
    receivers.append(CallbackReceiver(first.append, Pong))
    receivers.append(CallbackReceiver(second.append, Pong))
    message = Pong("x")
    count = Broadcaster().broadcast(message)
    assert count == 2
    assert first == [message]
    assert second == [message]


def test_closed_receiver_gets_nothing(receivers):
    got = []
    receiver = CallbackReceiver(got.append, Ping)
    receivers.append(receiver)
    receiver.close()
    receiver.close()
    assert Broadcaster().broadcast(Ping(1)) == 0
    assert got == []


def test_collected_receiver_is_dropped():
    got = []
    receiver = CallbackReceiver(got.append, Pong)
    del receiver
    gc.collect()
    assert Broadcaster().broadcast(Pong(1)) == 0
    assert got == []


def test_subclass_receiver(receivers):
    class Collector(Receiver):
        def __init__(self):
            super().__init__(Ping)
            self.items = []

        def receive(self, value):
            self.items.append(value.payload)

    collector = Collector()
    receivers.append(collector)
    count = Broadcaster().broadcast(Ping("hello"))
    assert count == 1
    assert collector.items == ["hello"]


def test_none_callback_ignores_values(receivers):
    receivers.append(CallbackReceiver(None, Ping))
    assert Broadcaster().broadcast(Ping(1)) == 1


def test_receiver_base_is_abstract():
    with pytest.raises(TypeError):
        Receiver(Ping)


def test_receiver_needs_a_type():
    with pytest.raises(TypeError):
        CallbackReceiver(print)


def test_receiver_rejects_non_types():
    with pytest.raises(TypeError):
        CallbackReceiver(print, 5)