import socket
import time

import pytest

from rftclient.datagram import DATAGRAM_SIZE, Datagram
from rftclient.transport import UnreliableTransport


@pytest.fixture
def server():
    sock = socket.socket(socket.AF_INET, socket.SOCK_DGRAM)
    sock.bind(("127.0.0.1", 0))
    sock.settimeout(5)
    yield sock
    sock.close()


def _poll(transport, seconds=5.0):
    deadline = time.monotonic() + seconds
    while time.monotonic() < deadline:
        datagram = transport.receive()
        if datagram is not None:
            return datagram
        time.sleep(0.001)
    return None


def test_resolves_localhost(server):
    port = server.getsockname()[1]
    with UnreliableTransport("localhost", port) as transport:
        assert transport.address == ("127.0.0.1", port)


def test_send_delivers_packed_datagram(server):
    sent = Datagram(seq_num=3, payload_length=4, data=b"abcd")
    with UnreliableTransport("127.0.0.1", server.getsockname()[1]) as transport:
        transport.send(sent)
        raw, _ = server.recvfrom(4096)
    assert len(raw) == DATAGRAM_SIZE
    assert Datagram.unpack(raw) == sent


def test_receive_without_data_returns_none(server):
    with UnreliableTransport("127.0.0.1", server.getsockname()[1]) as transport:
        transport.send(Datagram())
        assert transport.receive() is None


def test_receive_returns_reply(server):
    reply = Datagram(ack_num=7, payload_length=0)
    with UnreliableTransport("127.0.0.1", server.getsockname()[1]) as transport:
        transport.send(Datagram(seq_num=7))
        _, client_address = server.recvfrom(4096)
        assert client_address[1] == transport.local_address[1]
        server.sendto(reply.pack(), client_address)
        assert _poll(transport) == reply


def test_send_after_close_raises(server):
    transport = UnreliableTransport("127.0.0.1", server.getsockname()[1])
    transport.close()
    with pytest.raises(OSError):
        transport.send(Datagram())


def test_context_manager_closes(server):
    with UnreliableTransport("127.0.0.1", server.getsockname()[1]) as transport:
        pass
    with pytest.raises(OSError):
        transport.send(Datagram())


def test_rejects_out_of_range_port():
    with pytest.raises(ValueError):
        UnreliableTransport("127.0.0.1", 70000)