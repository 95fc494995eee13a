"""Fake booleans, characters and fixed-width integers."""

from __future__ import annotations

from dataclasses import dataclass
from enum import Enum
from typing import Union

from .rng import RandomSource, gen_bits, gen_bool

_SURROGATE_GAP = 0xDFFF - 0xD800 + 1


class IntType(Enum):
    """Fixed-width integer kinds with their bit width and signedness."""

    U8 = ("u8", 8, False)
    U16 = ("u16", 16, False)
    U32 = ("u32", 32, False)
    U64 = ("u64", 64, False)
    U128 = ("u128", 128, False)
    USIZE = ("usize", 64, False)
    I8 = ("i8", 8, True)
    I16 = ("i16", 16, True)
    I32 = ("i32", 32, True)
    I64 = ("i64", 64, True)
    I128 = ("i128", 128, True)
    ISIZE = ("isize", 64, True)

    def __init__(self, label: str, bits: int, signed: bool) -> None:
        self.label = label
        self.bits = bits
        self.signed = signed

    def minimum(self) -> int:
        """Smallest value of this kind."""
        return -(1 << (self.bits - 1)) if self.signed else 0

    def maximum(self) -> int:
        """Largest value of this kind."""
        return (1 << (self.bits - 1)) - 1 if self.signed else (1 << self.bits) - 1

    def contains(self, value: int) -> bool:
        return self.minimum() <= value <= self.maximum()

    def from_bits(self, raw: int) -> int:
        """Interpret ``raw`` unsigned bits as a value of this kind."""
        raw &= (1 << self.bits) - 1
        if self.signed and raw >= 1 << (self.bits - 1):
            raw -= 1 << self.bits
        return raw


def _uniform(rng: RandomSource, low: int, high: int) -> int:
    """Draw uniformly from ``low..=high`` by rejection sampling."""
    span = high - low + 1
    width = (span - 1).bit_length()
    if width == 0:
        return low
    while True:
        candidate = gen_bits(rng, width)
        if candidate < span:
            return low + candidate


@dataclass(frozen=True)
class Span:
    """An integer range with optional ends.

    ``Span(a, b)`` is ``a..b``, ``Span(a, b, inclusive=True)`` is ``a..=b``;
    a missing start or end stands for the kind's minimum or maximum.
    """

    start: int | None = None
    end: int | None = None
    inclusive: bool = False

    def bounds(self, kind: IntType) -> tuple[int, int]:
        """Return the inclusive ``(low, high)`` bounds for ``kind``."""
        low = kind.minimum() if self.start is None else self.start
        if self.end is None:
            high = kind.maximum()
        elif self.inclusive:
            high = self.end
        else:
            if low >= self.end:
                raise ValueError("cannot sample empty range")
            high = self.end - 1
        if low > high:
            raise ValueError("cannot sample empty range")
        if not (kind.contains(low) and kind.contains(high)):
            raise ValueError(f"range {self} does not fit in {kind.label}")
        return low, high


@dataclass(frozen=True)
class Uniform:
    """A uniform integer distribution over ``low..high`` or ``low..=high``."""

    low: int
    high: int
    inclusive: bool = False

    def __post_init__(self) -> None:
        if self.inclusive and self.low > self.high:
            raise ValueError("Uniform::new_inclusive called with `low > high`")
        if not self.inclusive and self.low >= self.high:
            raise ValueError("Uniform::new called with `low >= high`")

    def sample(self, rng: RandomSource) -> int:
        high = self.high if self.inclusive else self.high - 1
        return _uniform(rng, self.low, high)


IntSpec = Union[None, int, range, Span, Uniform]


def fake_int(kind: IntType, spec: IntSpec, rng: RandomSource) -> int:
    """Generate an integer of ``kind``.

    ``spec`` may be ``None`` (any value of the kind), an int (returned
    unchanged), a ``range`` with step 1, a :class:`Span` or a :class:`Uniform`.
    """
    if spec is None:
        return kind.from_bits(gen_bits(rng, kind.bits))
    if isinstance(spec, bool):
        raise TypeError("a bool is not an integer specification")
    if isinstance(spec, int):
        if not kind.contains(spec):
            raise ValueError(f"{spec} does not fit in {kind.label}")
        return spec
    if isinstance(spec, Uniform):
        return spec.sample(rng)
    if isinstance(spec, range):
        if spec.step != 1:
            raise ValueError("only ranges with step 1 are supported")
        spec = Span(spec.start, spec.stop)
    if isinstance(spec, Span):
        low, high = spec.bounds(kind)
        return _uniform(rng, low, high)
    raise TypeError(f"unsupported integer specification: {spec!r}")


def fake_bool(rng: RandomSource) -> bool:
    """Generate a fair boolean."""
    return gen_bool(rng)


def fake_char(rng: RandomSource) -> str:
    """Generate any Unicode scalar value, never a surrogate."""
    code = _uniform(rng, _SURROGATE_GAP, 0x10FFFF)
    if code <= 0xDFFF:
        code -= _SURROGATE_GAP
    return chr(code)