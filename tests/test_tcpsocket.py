import socket

import pytest

from infrakit.endpoint import EndPoint
from infrakit.ipaddr import Family, IpAddress
from infrakit.sockets import SocketState
from infrakit.tcpsocket import TcpSocket


@pytest.fixture
def server():
    listener = socket.socket(socket.AF_INET, socket.SOCK_STREAM)
    listener.bind(("127.0.0.1", 0))
    listener.listen(4)
    listener.settimeout(5)
    yield listener
    listener.close()


@pytest.fixture
def client():
    tcp = TcpSocket.create()
    yield tcp
    tcp.close()


def _endpoint_of(listener):
    return EndPoint(IpAddress.V4_LOCAL_HOST, listener.getsockname()[1])


def _free_port():
    probe = socket.socket(socket.AF_INET, socket.SOCK_STREAM)
    probe.bind(("127.0.0.1", 0))
    port = probe.getsockname()[1]
    probe.close()
    return port


def test_endpoint_from_parsed_address():
    target = IpAddress.try_parse("10.12.16.56")
    endpoint = EndPoint(target, 4869)
    assert str(endpoint.ip) == "10.12.16.56"
    assert endpoint.port == 4869
    assert endpoint.address_family is Family.IPV4


def test_create_gives_blocking_ipv4_socket(client):
    assert client.family is Family.IPV4
    assert client.is_blocking is True
    assert client.socket.getblocking() is True
    assert client.socket.type == socket.SOCK_STREAM


def test_connect_and_remote_endpoint(server, client):
    endpoint = _endpoint_of(server)
    assert client.connect(endpoint) is SocketState.SUCCESS
    conn, _ = server.accept()
    with conn:
        assert client.get_remote_endpoint() == endpoint


def test_connect_with_timeout_restores_blocking(server, client):
    endpoint = _endpoint_of(server)
    assert client.connect(endpoint, 2000) is SocketState.SUCCESS
    assert client.is_blocking is True
    assert client.socket.getblocking() is True
    conn, _ = server.accept()
    with conn:
        assert client.get_remote_endpoint() == endpoint


def test_non_blocking_connect_is_started(server, client):
    client.set_blocking(False)
    state = client.connect(_endpoint_of(server))
    assert state in (SocketState.SUCCESS, SocketState.BUSY)
    assert client.is_blocking is False


def test_send_and_receive_round_trip(server, client):
    assert client.connect(_endpoint_of(server)) is SocketState.SUCCESS
    conn, _ = server.accept()
    with conn:
        state, sent = client.send(b"hello")
        assert state is SocketState.SUCCESS
        assert sent == len(b"hello")
        assert conn.recv(16) == b"hello"

        conn.sendall(b"world")
        state, data = client.receive(16)
        assert state is SocketState.SUCCESS
        assert data == b"world"


def test_receive_after_peer_closes_is_disconnect(server, client):
    assert client.connect(_endpoint_of(server)) is SocketState.SUCCESS
    conn, _ = server.accept()
    conn.close()
    assert client.receive(16) == (SocketState.DISCONNECT, b"")


def test_send_empty_is_error(client):
    assert client.send(b"") == (SocketState.ERROR, 0)


@pytest.mark.parametrize("size", [0, -5])
def test_receive_without_room_is_error(client, size):
    assert client.receive(size) == (SocketState.ERROR, b"")


def test_connect_family_mismatch_is_error(client):
    v6 = IpAddress.try_parse("::1")
    assert client.connect(EndPoint(v6, 80)) is SocketState.ERROR


def test_connect_refused_is_error(client):
    endpoint = EndPoint(IpAddress.V4_LOCAL_HOST, _free_port())
    assert client.connect(endpoint) is SocketState.ERROR


def test_connect_refused_with_timeout_is_error(client):
    endpoint = EndPoint(IpAddress.V4_LOCAL_HOST, _free_port())
    assert client.connect(endpoint, 2000) is SocketState.ERROR
    assert client.is_blocking is True


def test_remote_endpoint_before_connect_is_none(client):
    assert client.get_remote_endpoint() is None


def test_disconnect_drops_connection(server, client):
    assert client.connect(_endpoint_of(server)) is SocketState.SUCCESS
    conn, _ = server.accept()
    with conn:
        client.disconnect()
        assert client.closed is True
        assert client.get_remote_endpoint() is None
        assert client.send(b"data") == (SocketState.ERROR, 0)


def test_reconnect_after_disconnect(server, client):
    endpoint = _endpoint_of(server)
    assert client.connect(endpoint) is SocketState.SUCCESS
    first, _ = server.accept()
    client.disconnect()
    assert client.connect(endpoint) is SocketState.SUCCESS
    second, _ = server.accept()
    with first, second:
        assert client.get_remote_endpoint() == endpoint
        assert client.closed is False