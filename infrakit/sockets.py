"""Socket states, error classification and a thin socket wrapper."""

from __future__ import annotations

import enum
import errno
import select
import socket
from types import TracebackType
from typing import Optional

from infrakit.ipaddr import Family


class SocketState(enum.Enum):
    """Outcome of a socket operation."""

    SUCCESS = "success"
    BUSY = "busy"
    DISCONNECT = "disconnect"
    ERROR = "error"


def _codes(*names: str) -> frozenset[int]:
    return frozenset(
        code for code in (getattr(errno, name, None) for name in names) if code is not None
    )


_BUSY_CODES = _codes(
    "EWOULDBLOCK",
    "EAGAIN",
    "EALREADY",
    "EINPROGRESS",
    "WSAEWOULDBLOCK",
    "WSAEALREADY",
    "WSAEINPROGRESS",
)
_DISCONNECT_CODES = _codes(
    "ECONNABORTED",
    "ECONNRESET",
    "ETIMEDOUT",
    "ENETRESET",
    "ENOTCONN",
    "WSAECONNABORTED",
    "WSAECONNRESET",
    "WSAETIMEDOUT",
    "WSAENETRESET",
    "WSAENOTCONN",
)
_SUCCESS_CODES = _codes("EISCONN", "WSAEISCONN")


def error_state(error_code: Optional[int]) -> SocketState:
    """Classify an operating-system error number as a socket state.

    "Would block" and "already in progress" mean busy; aborted, reset,
    timed-out and not-connected mean disconnected; "already connected"
    counts as success. Anything else is an error.
    """
    if error_code is None:
        return SocketState.ERROR
    if error_code in _BUSY_CODES:
        return SocketState.BUSY
    if error_code in _DISCONNECT_CODES:
        return SocketState.DISCONNECT
    if error_code in _SUCCESS_CODES:
        return SocketState.SUCCESS
    return SocketState.ERROR


class Socket:
    """Wraps a socket object together with its address family and blocking mode."""

    def __init__(self, family: Family, sock: socket.socket) -> None:
        self._family = Family(family)
        self._sock = sock
        self._is_blocking = False

    @property
    def family(self) -> Family:
        return self._family

    @property
    def native_handle(self) -> int:
        """The operating-system handle, -1 once closed."""
        return self._sock.fileno()

    @property
    def socket(self) -> socket.socket:
        return self._sock

    @property
    def is_blocking(self) -> bool:
        return self._is_blocking

    @property
    def closed(self) -> bool:
        return self._sock.fileno() == -1

    def set_blocking(self, block: bool, force: bool = False) -> bool:
        """Switch blocking mode; return False if the system refused."""
        if not force and block == self._is_blocking:
            return True
        try:
            self._sock.setblocking(block)
        except OSError:
            return False
        self._is_blocking = block
        return True

    def close(self) -> None:
        """Close the socket."""
        self._sock.close()

    def _select(self, timeout_in_ms: int, for_write: bool) -> SocketState:
        if timeout_in_ms <= 0 or self.closed:
            return SocketState.ERROR
        watched = [self._sock]
        try:
            if for_write:
                _, ready, _ = select.select([], watched, [], timeout_in_ms / 1000)
            else:
                ready, _, _ = select.select(watched, [], [], timeout_in_ms / 1000)
        except OSError as exc:
            return error_state(exc.errno)
        except ValueError:
            return SocketState.ERROR
        # Nothing became ready before the timeout ran out.
        return SocketState.SUCCESS if ready else SocketState.BUSY

    def select_read(self, timeout_in_ms: int = -1) -> SocketState:
        """Wait up to ``timeout_in_ms`` for the socket to become readable."""
        return self._select(timeout_in_ms, for_write=False)

    def select_write(self, timeout_in_ms: int = -1) -> SocketState:
        """Wait up to ``timeout_in_ms`` for the socket to become writable."""
        return self._select(timeout_in_ms, for_write=True)

    def __enter__(self) -> "Socket":
        return self

    def __exit__(
        self,
        exc_type: Optional[type[BaseException]],
        exc: Optional[BaseException],
        tb: Optional[TracebackType],
    ) -> None:
        self.close()

    def __repr__(self) -> str:
        return (
            f"{type(self).__name__}(family={self._family.value}, "
            f"handle={self.native_handle}, blocking={self._is_blocking})"
        )