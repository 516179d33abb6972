"""A TCP client socket returning SocketState values instead of raising."""

from __future__ import annotations

import socket
from typing import Optional

from infrakit.endpoint import EndPoint
from infrakit.ipaddr import Family, IpAddress
from infrakit.sockets import Socket, SocketState, error_state


def _native_family(family: Family) -> int:
    return socket.AF_INET6 if family is Family.IPV6 else socket.AF_INET


def _new_tcp_socket(family: Family) -> socket.socket:
    return socket.socket(_native_family(family), socket.SOCK_STREAM, socket.IPPROTO_TCP)


class TcpSocket(Socket):
    """A TCP connection to one remote end point."""

    @classmethod
    def create(cls, family: Family = Family.IPV4) -> Optional["TcpSocket"]:
        """Open a blocking TCP socket, or return None if the system refuses."""
        family = Family(family)
        try:
            raw = _new_tcp_socket(family)
        except OSError:
            return None
        tcp = cls(family, raw)
        tcp.set_blocking(True, True)
        return tcp

    def _reopen(self) -> bool:
        self.disconnect()
        try:
            raw = _new_tcp_socket(self.family)
        except OSError:
            return False
        self._sock = raw
        self.set_blocking(self._is_blocking, True)
        return True

    def _sockaddr(self, endpoint: EndPoint) -> tuple:
        host = str(endpoint.ip)
        if self.family is Family.IPV6:
            return host, endpoint.port, 0, endpoint.v6_scope_id
        return host, endpoint.port

    def _connect_once(self, address: tuple) -> SocketState:
        try:
            code = self._sock.connect_ex(address)
        except OSError as exc:
            return error_state(exc.errno)
        return SocketState.SUCCESS if code == 0 else error_state(code)

    def connect(self, endpoint: EndPoint, timeout_in_ms: int = -1) -> SocketState:
        """Connect to ``endpoint``, dropping any earlier connection first.

        With a positive timeout on a blocking socket, the socket is made
        non-blocking for the attempt and waited on for at most that long.
        """
        if endpoint.address_family is not self.family:
            return SocketState.ERROR
        if not self._reopen():
            return SocketState.ERROR

        address = self._sockaddr(endpoint)
        if timeout_in_ms <= 0 or not self.is_blocking:
            return self._connect_once(address)

        self.set_blocking(False)
        try:
            state = self._connect_once(address)
            if state is SocketState.SUCCESS:
                return state
            state = self.select_write(timeout_in_ms)
            if state is not SocketState.SUCCESS:
                return state
            pending = self._sock.getsockopt(socket.SOL_SOCKET, socket.SO_ERROR)
            return SocketState.SUCCESS if pending == 0 else error_state(pending)
        finally:
            self.set_blocking(True)

    def disconnect(self) -> None:
        """Close the connection."""
        self.close()

    def get_remote_endpoint(self) -> Optional[EndPoint]:
        """Return the connected peer's address and port, or None."""
        if self.closed:
            return None
        try:
            peer = self._sock.getpeername()
        except OSError:
            return None
        ip = IpAddress.try_parse(str(peer[0]).split("%", 1)[0])
        if ip is None:
            return None
        return EndPoint(ip, peer[1])

    def send(self, data: bytes) -> tuple[SocketState, int]:
        """Send ``data``; return the state and the number of bytes sent."""
        if not data:
            return SocketState.ERROR, 0
        try:
            sent = self._sock.send(data)
        except OSError as exc:
            return error_state(exc.errno), 0
        return SocketState.SUCCESS, sent

    def receive(self, size: int) -> tuple[SocketState, bytes]:
        """Receive at most ``size`` bytes; an orderly close gives DISCONNECT."""
        if size <= 0:
            return SocketState.ERROR, b""
        try:
            data = self._sock.recv(size)
        except OSError as exc:
            return error_state(exc.errno), b""
        if not data:
            return SocketState.DISCONNECT, b""
        return SocketState.SUCCESS, data