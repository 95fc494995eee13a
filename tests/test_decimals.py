import random
from decimal import Decimal

import pytest
from hypothesis import given
from hypothesis import strategies as st

from dummygen.decimals import MAX_SCALE, DecimalKind, fake_decimal, from_parts


def test_from_parts_simple():
    assert from_parts(1, 0, 0, False, 0) == Decimal(1)


def test_from_parts_middle_word():
    assert from_parts(0, 1, 0, False, 0) == Decimal(1 << 32)


def test_from_parts_sign_and_scale():
    assert from_parts(5, 0, 0, True, 1) == Decimal("-0.5")


def test_from_parts_scale_wraps():
    assert from_parts(3, 0, 0, False, MAX_SCALE + 1) == from_parts(3, 0, 0, False, 0)


def test_from_parts_largest_scale():
    assert from_parts(1, 0, 0, False, MAX_SCALE).as_tuple().exponent == -MAX_SCALE


def test_from_parts_zero_has_no_sign():
    value = from_parts(0, 0, 0, True, 3)
    assert value == 0
    assert not value.is_signed()


@pytest.mark.parametrize("parts", [(2**32, 0, 0), (0, -1, 0), (0, 0, 2**32)])
def test_from_parts_rejects_wide_words(parts):
    with pytest.raises(ValueError):
        from_parts(*parts, False, 0)


def test_from_parts_rejects_negative_scale():
    with pytest.raises(ValueError):
        from_parts(1, 0, 0, False, -1)


def test_negative_kind():
    rng = random.Random(1)
    assert all(fake_decimal(DecimalKind.NEGATIVE, rng) <= 0 for _ in range(100))


def test_positive_kind():
    rng = random.Random(2)
    for _ in range(100):
        value = fake_decimal(DecimalKind.POSITIVE, rng)
        assert value >= 0
        assert not value.is_signed()


def test_no_decimal_points_kind():
    rng = random.Random(3)
    for _ in range(100):
        value = fake_decimal(DecimalKind.NO_DECIMAL_POINTS, rng)
        assert value.as_tuple().exponent == 0
        assert value == value.to_integral_value()


def test_any_kind_bounds_and_signs():
    rng = random.Random(4)
    values = [fake_decimal(DecimalKind.ANY, rng) for _ in range(200)]
    assert all(abs(v) < 2**96 for v in values)
    assert all(-MAX_SCALE <= v.as_tuple().exponent <= 0 for v in values)
    assert any(v < 0 for v in values) and any(v > 0 for v in values)


@given(st.integers(0, 2**32), st.sampled_from(list(DecimalKind)))
def test_deterministic(seed, kind):
    first = fake_decimal(kind, random.Random(seed))
    assert abs(first) < 2**96
    assert first == fake_decimal(kind, random.Random(seed))