"""Host name lookup returning IpAddress values."""

from __future__ import annotations

import socket
from typing import Optional

from infrakit.ipaddr import IpAddress


def _address_from_sockaddr(family: int, sockaddr: tuple) -> Optional[IpAddress]:
    if family not in (socket.AF_INET, socket.AF_INET6):
        return None
    host = str(sockaddr[0]).split("%", 1)[0]
    return IpAddress.try_parse(host)


def _get_ip_address_by_name(name: str) -> list[IpAddress]:
    try:
        entries = socket.getaddrinfo(name, None, socket.AF_UNSPEC)
    except (OSError, UnicodeError):
        return []
    result = []
    for family, _type, _proto, _canonname, sockaddr in entries:
        address = _address_from_sockaddr(family, sockaddr)
        if address is not None:
            result.append(address)
    return result


def get_host_name() -> str:
    """Return this machine's host name, or '' if it cannot be read."""
    try:
        return socket.gethostname()
    except OSError:
        return ""


def get_local_ip_address() -> list[IpAddress]:
    """Return the addresses this machine's host name resolves to."""
    return _get_ip_address_by_name(get_host_name())


def get_ip_address(text: str) -> list[IpAddress]:
    """Return the address written in ``text``, or those its name resolves to."""
    address = IpAddress.try_parse(text)
    if address is not None:
        return [address]
    return _get_ip_address_by_name(text)