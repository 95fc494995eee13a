"""Fake dates, times, durations and time zones."""

from __future__ import annotations

from datetime import MINYEAR, date, datetime, time, timedelta, timezone
from functools import lru_cache
from zoneinfo import ZoneInfo, available_timezones

from .primitives import IntType, fake_int
from .rng import RandomSource

YEAR_MAG = 3000
_EPOCH = datetime(1970, 1, 1, tzinfo=timezone.utc)


def is_leap(year: int) -> bool:
    """Whether ``year`` is a Gregorian leap year."""
    if year % 400 == 0:
        return True
    if year % 100 == 0:
        return False
    return year % 4 == 0


def fake_date(rng: RandomSource) -> date:
    """A date before the year 3000.

    Years start at 1, the first year the calendar can represent. The day of
    year is drawn below the year's length, so 31 December never comes up.
    """
    year = fake_int(IntType.I32, range(MINYEAR, YEAR_MAG), rng)
    end = 366 if is_leap(year) else 365
    ordinal = fake_int(IntType.U32, range(1, end), rng)
    return date(year, 1, 1) + timedelta(days=ordinal - 1)


def fake_time(rng: RandomSource) -> time:
    """A time of day with whole seconds."""
    hour = fake_int(IntType.U32, range(0, 24), rng)
    minute = fake_int(IntType.U32, range(0, 60), rng)
    second = fake_int(IntType.U32, range(0, 60), rng)
    return time(hour, minute, second)


def fake_datetime(rng: RandomSource) -> datetime:
    """A naive date and time, the date drawn first."""
    day = fake_date(rng)
    moment = fake_time(rng)
    return datetime.combine(day, moment)


def fake_aware_datetime(rng: RandomSource) -> datetime:
    """A UTC datetime any signed 64-bit count of nanoseconds from the epoch.

    Nanoseconds below a microsecond are dropped.
    """
    nanos = fake_int(IntType.I64, None, rng)
    return _EPOCH + timedelta(microseconds=nanos // 1000)


def fake_duration(rng: RandomSource) -> timedelta:
    """A duration of any signed 64-bit count of nanoseconds, to the microsecond."""
    nanos = fake_int(IntType.I64, None, rng)
    return timedelta(microseconds=nanos // 1000)


@lru_cache(maxsize=1)
def _zone_names() -> tuple[str, ...]:
    return tuple(sorted(available_timezones()))


def fake_timezone(rng: RandomSource) -> ZoneInfo:
    """One of the IANA time zones known to this system."""
    names = _zone_names()
    if not names:
        raise LookupError("no time zone data available")
    return ZoneInfo(names[fake_int(IntType.USIZE, range(len(names)), rng)])