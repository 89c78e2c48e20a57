from trace_timeline.channel import (
    HostChannel, QtHostChannel, copy_path_message, open_file_message, update_message
)
from tests.helpers import FakeChannel


def test_message_builders():
    assert open_file_message('/a.h:3') == {'command': 'openFile', 'path': '/a.h:3'}
    assert copy_path_message('/a.h') == {'command': 'copyPath', 'path': '/a.h'}
    assert update_message([]) == {'command': 'update', 'data': []}


def test_post_without_handler_is_dropped():
    channel = FakeChannel()

    channel.post(update_message([]))

    assert channel.sent == []


def test_post_reaches_registered_handler():
    channel = FakeChannel()
    received = []
    channel.set_inbound_handler(received.append)

    channel.post(update_message({'traceEvents': []}))

    assert received == [{'command': 'update', 'data': {'traceEvents': []}}]


def test_qt_channel_emits_outbound_signals():
    channel = QtHostChannel()
    opened, copied = [], []
    channel.open_file_requested.connect(opened.append)
    channel.copy_path_requested.connect(copied.append)

    channel.send(open_file_message('/src/a.cpp:4'))
    channel.send(copy_path_message('/src/a.cpp'))
    channel.send({'command': 'reveal', 'path': '/src'})

    assert isinstance(channel, HostChannel)
    assert opened == ['/src/a.cpp:4']
    assert copied == ['/src/a.cpp']


def test_qt_channel_delivers_inbound_messages():
    channel = QtHostChannel()
    received = []
    channel.set_inbound_handler(received.append)

    channel.post(update_message([]))

    assert received == [update_message([])]
