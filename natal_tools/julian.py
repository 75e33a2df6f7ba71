"""Civil calendar date/time to Julian Day conversion."""

from __future__ import annotations

import math
from datetime import datetime, timedelta, timezone

from .models import BirthData, Instant


def julian_day(year: int, month: int, day: int, hour_utc: float) -> float:
    """
    Julian Day for a proleptic Gregorian date and a decimal UTC hour.

    The day is not checked against the month length; an out-of-range day simply
    shifts the result.
    """

    # January and February count as months 13 and 14 of the previous year.
    if month <= 2:
        year -= 1
        month += 12
    day_fraction = day + hour_utc / 24.0
    century = math.floor(year / 100)
    gregorian_correction = 2 - century + math.floor(century / 4)
    return (
        math.floor(365.25 * (year + 4716))
        + math.floor(30.6001 * (month + 1))
        + day_fraction
        + gregorian_correction
        - 1524.5
    )


def julian_day_from_instant(instant: Instant) -> float:
    return julian_day(instant.year, instant.month, instant.day, instant.hour_utc)


def instant_from_datetime(dt: datetime) -> Instant:
    """Convert a datetime into a UTC Instant (naive values are taken as UTC)."""

    dt_utc = dt
    if dt_utc.tzinfo is not None:
        dt_utc = dt_utc.astimezone(timezone.utc).replace(tzinfo=None)

    hour_utc = (
        dt_utc.hour
        + dt_utc.minute / 60.0
        + dt_utc.second / 3600.0
        + dt_utc.microsecond / 3_600_000_000.0
    )
    return Instant(year=dt_utc.year, month=dt_utc.month, day=dt_utc.day, hour_utc=hour_utc)


def birth_datetime_utc(birth: BirthData) -> datetime:
    """
    Local civil birth time shifted to UTC; day/month/year rollovers included.

    Raises OverflowError when the shift leaves the years 1..9999 that datetime supports.
    """

    dt_utc = birth.local_datetime - timedelta(hours=birth.tz_offset_hours)
    return dt_utc.replace(tzinfo=timezone.utc)


def instant_from_birth(birth: BirthData) -> Instant:
    return instant_from_datetime(birth_datetime_utc(birth))
