"""An IP address paired with a port and, for IPv6, a scope id."""

from __future__ import annotations

from dataclasses import dataclass

from infrakit.ipaddr import Family, IpAddress


@dataclass(frozen=True, eq=False)
class EndPoint:
    """A network end point; the scope id only matters for IPv6."""

    ip: IpAddress
    port: int
    v6_scope_id: int = 0

    def __post_init__(self) -> None:
        if not 0 <= self.port <= 0xFFFF:
            raise ValueError(f"port out of range 0..65535: {self.port}")
        if not 0 <= self.v6_scope_id <= 0xFFFFFFFF:
            raise ValueError(f"scope id out of 32-bit range: {self.v6_scope_id}")

    @property
    def address_family(self) -> Family:
        return self.ip.family

    def _relevant_scope(self) -> int:
        return self.v6_scope_id if self.address_family is Family.IPV6 else 0

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, EndPoint):
            return NotImplemented
        if self.port != other.port or self.ip != other.ip:
            return False
        return self._relevant_scope() == other._relevant_scope()

    def __hash__(self) -> int:
        return hash((self.ip, self.port, self._relevant_scope()))