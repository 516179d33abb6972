"""IPv4 and IPv6 addresses held in network byte order."""

from __future__ import annotations

import enum
import socket
from typing import ClassVar, Optional, Union

BytesLike = Union[bytes, bytearray, memoryview]

IPV4_ADDR_SIZE_BYTE = 4
IPV6_ADDR_SIZE_BYTE = 16


class Family(enum.Enum):
    """Address family of an IP address."""

    IPV4 = "ipv4"
    IPV6 = "ipv6"


_SIZES = {Family.IPV4: IPV4_ADDR_SIZE_BYTE, Family.IPV6: IPV6_ADDR_SIZE_BYTE}
_SOCKET_FAMILIES = {Family.IPV4: socket.AF_INET, Family.IPV6: socket.AF_INET6}


class IpAddress:
    """An immutable IPv4 or IPv6 address."""

    __slots__ = ("_family", "_packed")

    V4_ANY: ClassVar["IpAddress"]
    V4_BROADCAST: ClassVar["IpAddress"]
    V4_LOCAL_HOST: ClassVar["IpAddress"]

    def __init__(self, family: Family, packed: BytesLike) -> None:
        family = Family(family)
        raw = bytes(packed)
        if len(raw) != _SIZES[family]:
            raise ValueError(
                f"{family.value} address needs {_SIZES[family]} bytes, got {len(raw)}"
            )
        self._family = family
        self._packed = raw

    @classmethod
    def from_host_order(cls, host_order_ip: int) -> "IpAddress":
        """Build an IPv4 address from a 32-bit integer in host order."""
        if not 0 <= host_order_ip <= 0xFFFFFFFF:
            raise ValueError(f"IPv4 address out of 32-bit range: {host_order_ip}")
        return cls(Family.IPV4, host_order_ip.to_bytes(IPV4_ADDR_SIZE_BYTE, "big"))

    @classmethod
    def from_octets(cls, byte1: int, byte2: int, byte3: int, byte4: int) -> "IpAddress":
        """Build an IPv4 address from its four octets, most significant first."""
        octets = (byte1, byte2, byte3, byte4)
        for octet in octets:
            if not 0 <= octet <= 0xFF:
                raise ValueError(f"IPv4 octet out of range 0..255: {octet}")
        return cls(Family.IPV4, bytes(octets))

    @classmethod
    def from_v6_bytes(cls, addr: BytesLike) -> "IpAddress":
        """Build an IPv6 address from its 16 bytes in network order."""
        return cls(Family.IPV6, addr)

    @classmethod
    def try_parse(cls, text: str) -> Optional["IpAddress"]:
        """Parse dotted IPv4 or textual IPv6; return None if it is neither."""
        for family in (Family.IPV4, Family.IPV6):
            try:
                packed = socket.inet_pton(_SOCKET_FAMILIES[family], text)
            except (OSError, ValueError):
                continue
            return cls(family, packed)
        return None

    @property
    def family(self) -> Family:
        return self._family

    @property
    def packed(self) -> bytes:
        """The address bytes in network order."""
        return self._packed

    @property
    def v4_addr(self) -> int:
        """The IPv4 address as an integer in host order."""
        if self._family is not Family.IPV4:
            raise ValueError("not an IPv4 address")
        return int.from_bytes(self._packed, "big")

    @property
    def v6_addr(self) -> bytes:
        """The 16 bytes of an IPv6 address."""
        if self._family is not Family.IPV6:
            raise ValueError("not an IPv6 address")
        return self._packed

    def __str__(self) -> str:
        return socket.inet_ntop(_SOCKET_FAMILIES[self._family], self._packed)

    def __repr__(self) -> str:
        return f"IpAddress({str(self)!r})"

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, IpAddress):
            return NotImplemented
        return self._family is other._family and self._packed == other._packed

    def __hash__(self) -> int:
        return hash((self._family, self._packed))


IpAddress.V4_ANY = IpAddress.from_octets(0, 0, 0, 0)
IpAddress.V4_BROADCAST = IpAddress.from_octets(255, 255, 255, 255)
IpAddress.V4_LOCAL_HOST = IpAddress.from_octets(127, 0, 0, 1)