"""Fake JSON values built from Python's plain data types."""

from __future__ import annotations

from typing import Any, Dict, List, Union

from .collections import fake_dict, fake_list
from .primitives import IntType, fake_bool, fake_int
from .rng import RandomSource, gen_bits
from .strings import fake_string

JsonScalar = Union[None, bool, int, float, str]
JsonValue = Union[JsonScalar, List[Any], Dict[str, Any]]

_SCALAR_KINDS = range(0, 4)
_ALL_KINDS = range(0, 6)


def _number(rng: RandomSource) -> int | float:
    """A float in ``[0, 1)`` or a 32-bit signed integer, with even odds."""
    if fake_bool(rng):
        return gen_bits(rng, 53) / (1 << 53)
    return fake_int(IntType.I32, None, rng)


def _any_string(rng: RandomSource) -> str:
    return fake_string(None, rng)


def fake_scalar(rng: RandomSource) -> JsonScalar:
    """``None``, a boolean, a number or a string, each a quarter of the time."""
    kind = fake_int(IntType.USIZE, _SCALAR_KINDS, rng)
    if kind == 0:
        return None
    if kind == 1:
        return fake_bool(rng)
    if kind == 2:
        return _number(rng)
    return _any_string(rng)


def fake_object(rng: RandomSource) -> dict[str, JsonScalar]:
    """An object of up to nine string keys; its values are never containers."""
    return fake_dict(_any_string, fake_scalar, None, rng)


def fake_json(rng: RandomSource) -> JsonValue:
    """Any JSON value; arrays nest further values, objects hold only scalars."""
    kind = fake_int(IntType.USIZE, _ALL_KINDS, rng)
    if kind == 0:
        return None
    if kind == 1:
        return fake_bool(rng)
    if kind == 2:
        return _number(rng)
    if kind == 3:
        return _any_string(rng)
    if kind == 4:
        return fake_list(fake_json, None, rng)
    return fake_object(rng)