import random
from datetime import datetime, timedelta, timezone
from zoneinfo import available_timezones

import pytest
from hypothesis import given
from hypothesis import strategies as st

from dummygen.datetimes import (
    YEAR_MAG,
    fake_aware_datetime,
    fake_date,
    fake_datetime,
    fake_duration,
    fake_time,
    fake_timezone,
    is_leap,
)

_LIMIT = timedelta(microseconds=2**63 // 1000 + 1)
_EPOCH = datetime(1970, 1, 1, tzinfo=timezone.utc)


@pytest.mark.parametrize("year, expected", [(2000, True), (1900, False), (2023, False)])
def test_is_leap(year, expected):
    assert is_leap(year) is expected


def test_is_leap_agrees_with_calendar_length():
    for year in range(1, 3000, 7):
        days = (datetime(year + 1, 1, 1) - datetime(year, 1, 1)).days
        assert is_leap(year) == (days == 366)


def test_date_range_and_no_last_day():
    rng = random.Random(4)
    for _ in range(500):
        day = fake_date(rng)
        assert 1 <= day.year < YEAR_MAG
        assert (day.month, day.day) != (12, 31)


def test_time_whole_seconds():
    rng = random.Random(5)
    for _ in range(200):
        moment = fake_time(rng)
        assert moment.microsecond == 0
        assert 0 <= moment.hour < 24


def test_datetime_is_naive():
    value = fake_datetime(random.Random(6))
    assert value.tzinfo is None
    assert value.microsecond == 0
    assert value.year < YEAR_MAG


def test_aware_datetime_in_utc_and_range():
    rng = random.Random(7)
    for _ in range(200):
        value = fake_aware_datetime(rng)
        assert value.utcoffset() == timedelta(0)
        assert abs(value - _EPOCH) <= _LIMIT


def test_duration_range():
    rng = random.Random(8)
    durations = [fake_duration(rng) for _ in range(200)]
    assert all(abs(d) <= _LIMIT for d in durations)
    assert any(d < timedelta(0) for d in durations)


def test_timezone_is_known():
    zone = fake_timezone(random.Random(9))
    assert zone.key in available_timezones()


@given(st.integers(0, 2**32))
def test_deterministic(seed):
    first_moment = fake_datetime(random.Random(seed))
    assert first_moment.year < YEAR_MAG
    assert first_moment.microsecond == 0
    assert first_moment == fake_datetime(random.Random(seed))
    first_span = fake_duration(random.Random(seed))
    assert abs(first_span) <= _LIMIT
    assert first_span == fake_duration(random.Random(seed))