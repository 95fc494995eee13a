"""Random-number helpers shared by the value generators.

Every generator takes an ``rng`` argument: any object with a
``getrandbits(k)`` method, such as :class:`random.Random`, the
:mod:`random` module itself, or :class:`AlwaysTrueRng`.
"""

from __future__ import annotations

from typing import Protocol

_U64_MASK = (1 << 64) - 1
_U32_MASK = (1 << 32) - 1
_BIT_31 = 1 << 31


class RandomSource(Protocol):
    """The one method a generator needs from its random source."""

    def getrandbits(self, k: int) -> int: ...


class AlwaysTrueRng:
    """Deterministic stepping source whose boolean draws are always true.

    Each 64-bit draw returns the current state and then advances it by
    ``increment`` (wrapping at 64 bits). Whenever a draw would have bit 31
    clear, the state is restarted with that bit set, so every boolean
    (decided by bit 31) comes out true while integers still vary.
    """

    def __init__(self, initial: int = 1 << 31, increment: int = (1 << 31) + 1) -> None:
        self._state = initial & _U64_MASK
        self._increment = increment & _U64_MASK

    def _step(self) -> int:
        value = self._state
        self._state = (value + self._increment) & _U64_MASK
        return value

    def next_u64(self) -> int:
        """Return the next 64-bit value, always with bit 31 set."""
        value = self._step()
        if not value & _BIT_31:
            self._state = value | _BIT_31
            value = self._step()
        return value

    def next_u32(self) -> int:
        """Return the low 32 bits of the next 64-bit value."""
        return self.next_u64() & _U32_MASK

    def getrandbits(self, k: int) -> int:
        """Return a ``k``-bit integer built from successive draws."""
        if k < 0:
            raise ValueError("number of bits must be non-negative")
        if k == 0:
            return 0
        mask = (1 << k) - 1
        if k <= 32:
            return self.next_u32() & mask
        if k <= 64:
            return self.next_u64() & mask
        result = 0
        for shift in range(0, k, 64):
            result |= self.next_u64() << shift
        return result & mask

    def random(self) -> float:
        """Return a float in ``[0, 1)`` from the top 53 bits of a draw."""
        return (self.next_u64() >> 11) * (1.0 / (1 << 53))

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, AlwaysTrueRng):
            return NotImplemented
        return (self._state, self._increment) == (other._state, other._increment)

    def __repr__(self) -> str:
        return f"AlwaysTrueRng(state={self._state}, increment={self._increment})"


def gen_bool(rng: RandomSource) -> bool:
    """Draw a boolean from bit 31 of a 32-bit draw."""
    return bool(rng.getrandbits(32) >> 31)


def gen_bits(rng: RandomSource, bits: int) -> int:
    """Draw an unsigned integer of ``bits`` random bits."""
    if bits < 0:
        raise ValueError("number of bits must be non-negative")
    if bits == 0:
        return 0
    return rng.getrandbits(bits)