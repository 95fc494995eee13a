"""Fake IP addresses and socket addresses."""

from __future__ import annotations

from dataclasses import dataclass
from ipaddress import IPv4Address, IPv6Address

from .primitives import IntType, Uniform, fake_bool, fake_int
from .rng import RandomSource

_OCTET = Uniform(0, 0xFF, inclusive=True)
_HEXTET = Uniform(0, 0xFFFF, inclusive=True)


@dataclass(frozen=True)
class SocketAddrV4:
    ip: IPv4Address
    port: int

    def __str__(self) -> str:
        return f"{self.ip}:{self.port}"


@dataclass(frozen=True)
class SocketAddrV6:
    ip: IPv6Address
    port: int
    flowinfo: int = 0
    scope_id: int = 0

    def __str__(self) -> str:
        scope = f"%{self.scope_id}" if self.scope_id else ""
        return f"[{self.ip}{scope}]:{self.port}"


def fake_ipv4(rng: RandomSource) -> IPv4Address:
    return IPv4Address(bytes(_OCTET.sample(rng) for _ in range(4)))


def fake_ipv6(rng: RandomSource) -> IPv6Address:
    value = 0
    for _ in range(8):
        value = (value << 16) | _HEXTET.sample(rng)
    return IPv6Address(value)


def fake_ip(rng: RandomSource) -> IPv4Address | IPv6Address:
    """An IPv4 or IPv6 address with even odds."""
    return fake_ipv4(rng) if fake_bool(rng) else fake_ipv6(rng)


def fake_socket_v4(rng: RandomSource) -> SocketAddrV4:
    ip = fake_ipv4(rng)
    port = fake_int(IntType.U16, None, rng)
    return SocketAddrV4(ip, port)


def fake_socket_v6(rng: RandomSource) -> SocketAddrV6:
    ip = fake_ipv6(rng)
    port = fake_int(IntType.U16, None, rng)
    flowinfo = fake_int(IntType.U32, None, rng)
    scope_id = fake_int(IntType.U32, None, rng)
    return SocketAddrV6(ip, port, flowinfo, scope_id)