import random
from dataclasses import dataclass

import pytest
from hypothesis import given
from hypothesis import strategies as st

from dummygen.compound import fake_array, fake_tuple, fake_wrapped
from dummygen.primitives import IntType, fake_int


def _byte(rng):
    return fake_int(IntType.U8, None, rng)


@dataclass
class Box:
    value: int


def test_array_has_requested_size():
    values = fake_array(_byte, 3, random.Random(1))
    assert len(values) == 3
    assert all(0 <= v <= 255 for v in values)


def test_array_of_zero_never_draws():
    calls = []
    assert fake_array(lambda rng: calls.append(rng), 0, random.Random(0)) == []
    assert calls == []


def test_array_of_largest_size():
    assert len(fake_array(_byte, 32, random.Random(0))) == 32


@pytest.mark.parametrize("size", [-1, 33])
def test_array_size_out_of_bounds(size):
    with pytest.raises(ValueError):
        fake_array(_byte, size, random.Random(0))


def test_nested_arrays():
    def row(rng):
        return fake_array(lambda r: fake_int(IntType.U8, range(1, 10), r), 2, rng)

    grid = fake_array(row, 3, random.Random(5))
    assert [len(r) for r in grid] == [2, 2, 2]
    assert all(1 <= v < 10 for r in grid for v in r)


def test_tuple_keeps_order():
    result = fake_tuple([lambda r: "a", lambda r: 7, lambda r: None], random.Random(0))
    assert result == ("a", 7, None)


def test_tuple_mixed_specs():
    result = fake_tuple(
        [
            lambda r: fake_int(IntType.U8, range(1, 10), r),
            _byte,
            lambda r: fake_int(IntType.I32, range(-5, 5), r),
        ],
        random.Random(3),
    )
    assert len(result) == 3
    assert 1 <= result[0] < 10
    assert -5 <= result[2] < 5


@given(st.integers(0, 2**32))
def test_tuple_deterministic(seed):
    elements = [_byte] * 4
    first = fake_tuple(elements, random.Random(seed))
    second = fake_tuple(elements, random.Random(seed))
    assert len(first) == 4
    assert all(0 <= v <= 255 for v in first)
    assert first == second


def test_tuple_of_twelve():
    assert len(fake_tuple([_byte] * 12, random.Random(0))) == 12


@pytest.mark.parametrize("count", [0, 13])
def test_tuple_size_limits(count):
    with pytest.raises(ValueError):
        fake_tuple([_byte] * count, random.Random(0))


def test_wrapped_value():
    box = fake_wrapped(Box, lambda r: fake_int(IntType.U8, range(3, 4), r), random.Random(0))
    assert box == Box(3)


def test_wrapped_nested():
    result = fake_wrapped(lambda v: [v], lambda r: fake_wrapped(Box, _byte, r), random.Random(9))
    assert len(result) == 1
    assert 0 <= result[0].value <= 255