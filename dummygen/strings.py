"""Fake strings: alphanumeric text and strings from a custom charset."""

from __future__ import annotations

from dataclasses import dataclass
from typing import Any

from .primitives import IntType, fake_int
from .rng import RandomSource, gen_bits

ALPHANUMERIC = "ABCDEFGHIJKLMNOPQRSTUVWXYZabcdefghijklmnopqrstuvwxyz0123456789"
DEFAULT_LENGTH = range(5, 20)


def alphanumeric(length: int, rng: RandomSource) -> str:
    """Generate ``length`` characters drawn uniformly from ASCII letters and digits."""
    if length < 0:
        raise ValueError("length must be non-negative")
    chars: list[str] = []
    while len(chars) < length:
        index = gen_bits(rng, 32) >> 26
        if index < len(ALPHANUMERIC):
            chars.append(ALPHANUMERIC[index])
    return "".join(chars)


def fake_string(spec: Any, rng: RandomSource) -> str:
    """Generate an alphanumeric string.

    ``spec`` gives the length: ``None`` for 5 to 19 characters, otherwise any
    integer specification accepted by :func:`~dummygen.primitives.fake_int`.
    """
    length = fake_int(IntType.USIZE, DEFAULT_LENGTH if spec is None else spec, rng)
    return alphanumeric(length, rng)


@dataclass(frozen=True)
class StringFaker:
    """Generates strings of characters picked from ``charset``.

    ``length`` is an integer specification; ``None`` means any ``usize``.
    A ``bytes`` charset is read one byte per character.
    """

    charset: str
    length: Any = None

    def __post_init__(self) -> None:
        if isinstance(self.charset, (bytes, bytearray)):
            object.__setattr__(self, "charset", bytes(self.charset).decode("latin-1"))

    @classmethod
    def with_charset(cls, charset: str | bytes) -> StringFaker:
        """A faker over ``charset`` with an unconstrained length."""
        return cls(charset)

    def fake(self, rng: RandomSource) -> str:
        length = fake_int(IntType.USIZE, self.length, rng)
        if not self.charset:
            return ""
        choices = range(len(self.charset))
        return "".join(self.charset[fake_int(IntType.USIZE, choices, rng)] for _ in range(length))