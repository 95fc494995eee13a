"""Fake optional values and success-or-failure results."""

from __future__ import annotations

from dataclasses import dataclass
from typing import Any, Callable, Generic, TypeVar, Union

from .primitives import IntType, fake_bool, fake_int
from .rng import RandomSource

T = TypeVar("T")
E = TypeVar("E")

Element = Callable[[RandomSource], T]


@dataclass(frozen=True)
class Ok(Generic[T]):
    """A successful result."""

    value: T


@dataclass(frozen=True)
class Err(Generic[E]):
    """A failed result."""

    value: E


Result = Union[Ok[T], Err[E]]


def ratio_bool(ratio: int, rng: RandomSource) -> bool:
    """Return ``True`` with a probability of ``ratio`` percent (0 to 100)."""
    if not 0 <= ratio <= 100:
        raise ValueError(f"ratio must be between 0 and 100, got {ratio}")
    return fake_int(IntType.U8, range(0, 100), rng) < ratio


def fake_option(element: Element[T], rng: RandomSource) -> T | None:
    """Generate a value half of the time and ``None`` otherwise."""
    if fake_bool(rng):
        return element(rng)
    return None


def fake_result(ok: Element[T], err: Element[E], rng: RandomSource) -> Ok[T] | Err[E]:
    """Generate :class:`Ok` or :class:`Err` with even odds."""
    if fake_bool(rng):
        return Ok(ok(rng))
    return Err(err(rng))


@dataclass(frozen=True)
class Opt(Generic[T]):
    """Generates ``element`` with a ``ratio`` percent chance, else ``None``."""

    element: Element[T]
    ratio: int

    def fake(self, rng: RandomSource) -> T | None:
        if ratio_bool(self.ratio, rng):
            return self.element(rng)
        return None


def _any_u8(rng: RandomSource) -> int:
    return fake_int(IntType.U8, None, rng)


@dataclass(frozen=True)
class ResultFaker:
    """Generates results failing ``err_rate`` percent of the time.

    ``err_rate`` is an integer specification, drawn anew for each result.
    A generator left unset produces an unsigned byte.
    """

    ok_element: Element[Any] = _any_u8
    err_element: Element[Any] = _any_u8
    err_rate: Any = 50

    @classmethod
    def ok(cls, ok: Element[Any]) -> ResultFaker:
        return cls(ok_element=ok)

    @classmethod
    def err(cls, err: Element[Any]) -> ResultFaker:
        return cls(err_element=err)

    @classmethod
    def with_(cls, ok: Element[Any], err: Element[Any]) -> ResultFaker:
        return cls(ok_element=ok, err_element=err)

    def fake(self, rng: RandomSource) -> Ok[Any] | Err[Any]:
        rate = fake_int(IntType.U8, self.err_rate, rng)
        if ratio_bool(rate, rng):
            return Err(self.err_element(rng))
        return Ok(self.ok_element(rng))