"""Fake UUIDs in the layouts of versions 1, 3, 4 and 5, or from any 128 bits."""

from __future__ import annotations

from enum import Enum
from uuid import UUID

from .primitives import IntType, fake_int
from .rng import RandomSource

# 100-nanosecond intervals between 1582-10-15 and 1970-01-01.
UUID_TICKS_BETWEEN_EPOCHS = 0x01B21DD213814000
_U64_MAX = (1 << 64) - 1


class UuidVersion(Enum):
    """The UUID layout to generate."""

    V1 = 1
    V3 = 3
    V4 = 4
    V5 = 5


def _random_bytes(count: int, rng: RandomSource) -> bytes:
    return bytes(fake_int(IntType.U8, None, rng) for _ in range(count))


def _time_based(rng: RandomSource) -> UUID:
    ticks = fake_int(IntType.U64, range(UUID_TICKS_BETWEEN_EPOCHS, _U64_MAX), rng)
    counter = fake_int(IntType.U16, None, rng)
    node = int.from_bytes(_random_bytes(6, rng), "big")
    return UUID(
        fields=(
            ticks & 0xFFFFFFFF,
            (ticks >> 32) & 0xFFFF,
            ((ticks >> 48) & 0x0FFF) | 0x1000,
            ((counter >> 8) & 0x3F) | 0x80,
            counter & 0xFF,
            node,
        )
    )


def fake_uuid(version: UuidVersion | None, rng: RandomSource) -> UUID:
    """Generate a UUID.

    Version 1 gets a random timestamp after the Unix epoch, a random clock
    sequence and node. Versions 3, 4 and 5 are random bytes with the RFC 4122
    variant and the version stamped in. ``None`` gives any 128-bit value.
    """
    if version is None:
        return UUID(int=fake_int(IntType.U128, None, rng))
    if version is UuidVersion.V1:
        return _time_based(rng)
    return UUID(bytes=_random_bytes(16, rng), version=version.value)


def fake_uuid_string(version: UuidVersion | None, rng: RandomSource) -> str:
    """Generate a UUID in its hyphenated text form."""
    return str(fake_uuid(version, rng))