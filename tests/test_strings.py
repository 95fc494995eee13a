import random

import pytest

from dummygen.primitives import Span
from dummygen.strings import ALPHANUMERIC, StringFaker, alphanumeric, fake_string

ASCII = "0123456789abcdefghijklmnopqrstuvwxyzABCDEFGHIJKLMNOPQRSTUVWXYZ!\"#$%&'()*+,-./:;<=>?@"


def test_alphanumeric_length_and_charset():
    value = alphanumeric(10, random.Random(1))
    assert len(value) == 10
    assert set(value) <= set(ALPHANUMERIC)


def test_alphanumeric_negative_length_raises():
    with pytest.raises(ValueError):
        alphanumeric(-1, random.Random(1))


def test_default_length_range():
    rng = random.Random(2)
    values = [fake_string(None, rng) for _ in range(100)]
    assert all(5 <= len(v) < 20 for v in values)
    assert all(set(v) <= set(ALPHANUMERIC) for v in values)


def test_exact_length():
    assert len(fake_string(10, random.Random(3))) == 10


def test_range_lengths():
    rng = random.Random(4)
    assert all(8 <= len(fake_string(range(8, 20), rng)) < 20 for _ in range(50))
    assert all(len(fake_string(Span(3, 4, inclusive=True), rng)) in {3, 4} for _ in range(50))


def test_empty_range_raises():
    with pytest.raises(ValueError):
        fake_string(range(3, 3), random.Random(0))


def test_deterministic_with_same_seed():
    first = fake_string(None, random.Random(42))
    second = fake_string(None, random.Random(42))
    assert 5 <= len(first) < 20
    assert set(first) <= set(ALPHANUMERIC)
    assert first == second


def test_string_faker_weak_password():
    faker = StringFaker(ASCII, range(8, 12))
    rng = random.Random(5)
    for _ in range(50):
        value = faker.fake(rng)
        assert 8 <= len(value) < 12
        assert set(value) <= set(ASCII)


def test_string_faker_bytes_charset():
    value = StringFaker(b"ab", 6).fake(random.Random(6))
    assert len(value) == 6
    assert set(value) <= {"a", "b"}


def test_empty_charset_gives_empty_string():
    assert StringFaker.with_charset("").fake(random.Random(7)) == ""
    assert StringFaker("", 5).fake(random.Random(7)) == ""


def test_with_charset_has_unconstrained_length():
    faker = StringFaker.with_charset("xyz")
    assert faker.charset == "xyz"
    assert faker.length is None