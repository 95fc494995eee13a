"""Fake exact decimal numbers built from a 96-bit mantissa and a scale."""

from __future__ import annotations

from decimal import ROUND_HALF_EVEN, Context, Decimal
from enum import Enum

from .primitives import IntType, fake_bool, fake_int
from .rng import RandomSource

MAX_SCALE = 28
_U32_MAX = 0xFFFFFFFF
_ROUNDING = Context(prec=60, rounding=ROUND_HALF_EVEN)


class DecimalKind(Enum):
    """Which decimals :func:`fake_decimal` produces."""

    ANY = "any"
    NEGATIVE = "negative"
    POSITIVE = "positive"
    NO_DECIMAL_POINTS = "no_decimal_points"


def from_parts(lo: int, mid: int, hi: int, negative: bool, scale: int) -> Decimal:
    """Build ``±(hi:mid:lo) / 10**scale`` from three 32-bit words.

    The scale wraps modulo 29. Zero never carries a minus sign.
    """
    for name, part in (("lo", lo), ("mid", mid), ("hi", hi)):
        if not 0 <= part <= _U32_MAX:
            raise ValueError(f"{name} must fit in 32 bits, got {part}")
    if scale < 0:
        raise ValueError("scale must be non-negative")
    mantissa = (hi << 64) | (mid << 32) | lo
    sign = 1 if negative and mantissa else 0
    digits = tuple(int(c) for c in str(mantissa))
    return Decimal((sign, digits, -(scale % (MAX_SCALE + 1))))


def _round_integral(value: Decimal) -> Decimal:
    rounded = value.quantize(Decimal(1), context=_ROUNDING)
    return rounded.copy_abs() if rounded.is_zero() else rounded


def fake_decimal(kind: DecimalKind, rng: RandomSource) -> Decimal:
    """Generate a decimal of the given kind from random parts."""
    lo, mid, hi = (fake_int(IntType.U32, None, rng) for _ in range(3))
    if kind is DecimalKind.NEGATIVE:
        negative = True
    elif kind is DecimalKind.POSITIVE:
        negative = False
    else:
        negative = fake_bool(rng)
    scale = fake_int(IntType.U32, None, rng)
    value = from_parts(lo, mid, hi, negative, scale)
    if kind is DecimalKind.NO_DECIMAL_POINTS:
        value = _round_integral(value)
    return value