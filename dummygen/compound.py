"""Fake fixed-size arrays, tuples and values wrapped in a container."""

from __future__ import annotations

from typing import Any, Callable, Sequence, TypeVar

from .rng import RandomSource

T = TypeVar("T")
W = TypeVar("W")

Element = Callable[[RandomSource], T]

MAX_ARRAY_SIZE = 32
MAX_TUPLE_SIZE = 12


def fake_array(element: Element[T], size: int, rng: RandomSource) -> list[T]:
    """Generate exactly ``size`` elements (0 to 32), drawn in order."""
    if not 0 <= size <= MAX_ARRAY_SIZE:
        raise ValueError(f"array size must be between 0 and {MAX_ARRAY_SIZE}, got {size}")
    return [element(rng) for _ in range(size)]


def fake_tuple(elements: Sequence[Element[Any]], rng: RandomSource) -> tuple[Any, ...]:
    """Generate one value per generator, left to right (1 to 12 generators)."""
    if not 1 <= len(elements) <= MAX_TUPLE_SIZE:
        raise ValueError(
            f"a tuple holds between 1 and {MAX_TUPLE_SIZE} elements, got {len(elements)}"
        )
    return tuple(element(rng) for element in elements)


def fake_wrapped(wrapper: Callable[[T], W], element: Element[T], rng: RandomSource) -> W:
    """Generate a value and pass it to ``wrapper``."""
    return wrapper(element(rng))