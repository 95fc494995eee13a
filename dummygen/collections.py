"""Fake collections whose elements come from caller-supplied generators.

An element generator is any callable taking the ``rng`` and returning a
value. A length is ``None`` (0 to 9 elements) or any integer
specification accepted by :func:`~dummygen.primitives.fake_int`.
"""

from __future__ import annotations

import heapq
from collections import deque
from typing import Any, Callable, Iterator, Sequence, TypeVar

from .primitives import IntType, fake_int
from .rng import RandomSource

T = TypeVar("T")
K = TypeVar("K")
V = TypeVar("V")

Element = Callable[[RandomSource], T]

DEFAULT_LENGTH = range(0, 10)


def default_length(rng: RandomSource) -> int:
    """Draw a collection length from 0 to 9."""
    return fake_int(IntType.USIZE, DEFAULT_LENGTH, rng)


def _count(length: Any, rng: RandomSource) -> int:
    return default_length(rng) if length is None else fake_int(IntType.USIZE, length, rng)


def _draw(element: Element[T], length: Any, rng: RandomSource) -> Iterator[T]:
    count = _count(length, rng)
    return (element(rng) for _ in range(count))


def fake_list(element: Element[T], length: Any, rng: RandomSource) -> list[T]:
    return list(_draw(element, length, rng))


def fake_deque(element: Element[T], length: Any, rng: RandomSource) -> deque[T]:
    return deque(_draw(element, length, rng))


def fake_heap(element: Element[T], length: Any, rng: RandomSource) -> list[T]:
    """Return a list arranged as a :mod:`heapq` min-heap."""
    items = list(_draw(element, length, rng))
    heapq.heapify(items)
    return items


def fake_set(element: Element[T], length: Any, rng: RandomSource) -> set[T]:
    """Insert ``length`` drawn elements; duplicates collapse."""
    return set(_draw(element, length, rng))


def fake_sorted_set(element: Element[T], length: Any, rng: RandomSource) -> list[T]:
    """Return the distinct drawn elements in ascending order."""
    return sorted(set(_draw(element, length, rng)))


def fake_dict(key: Element[K], value: Element[V], length: Any, rng: RandomSource) -> dict[K, V]:
    """Insert ``length`` drawn pairs; a repeated key keeps its last value."""
    result: dict[K, V] = {}
    for _ in range(_count(length, rng)):
        k = key(rng)
        result[k] = value(rng)
    return result


def fake_sorted_dict(
    key: Element[K], value: Element[V], length: Any, rng: RandomSource
) -> dict[K, V]:
    """Like :func:`fake_dict`, with keys in ascending order."""
    return dict(sorted(fake_dict(key, value, length, rng).items()))


def nested_list(element: Element[T], lengths: Sequence[Any], rng: RandomSource) -> list[Any]:
    """Build nested lists, ``lengths[0]`` being the outermost length."""
    if not lengths:
        raise ValueError("at least one length is required")
    outer, *inner = lengths
    if not inner:
        return fake_list(element, outer, rng)
    return fake_list(lambda r: nested_list(element, inner, r), outer, rng)