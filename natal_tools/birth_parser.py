"""Turn raw form/CLI strings into validated BirthData."""

from __future__ import annotations

import logging
import math
from datetime import date

from .errors import InvalidBirthDataError
from .julian import birth_datetime_utc
from .models import BirthData

logger = logging.getLogger(__name__)

# Range accepted by the offset field: UTC-12 (Baker Island) to UTC+14 (Kiribati).
MIN_TZ_OFFSET = -12.0
MAX_TZ_OFFSET = 14.0

INVALID_DATE_TIME = "Please enter a valid date and time."


def parse_date(value: str) -> tuple[int, int, int]:
    """Parse "YYYY-MM-DD" and check the day exists in that month."""

    raw = (value or "").strip()
    parts = raw.split("-")
    if len(parts) != 3:
        raise InvalidBirthDataError(f"{INVALID_DATE_TIME} (date {value!r}, expected YYYY-MM-DD)")
    try:
        year, month, day = (int(p) for p in parts)
        date(year, month, day)
    except ValueError as exc:
        raise InvalidBirthDataError(f"{INVALID_DATE_TIME} (date {value!r}: {exc})") from None
    return year, month, day


def parse_time(value: str | None) -> tuple[int, int]:
    """
    Parse "HH:MM" local time.

    An empty value means midnight; a missing minute part means minute 0.
    """

    raw = (value or "").strip() or "00:00"
    hour_str, _, minute_str = raw.partition(":")
    try:
        hour = int(hour_str)
        minute = int(minute_str or "0")
    except ValueError:
        raise InvalidBirthDataError(f"{INVALID_DATE_TIME} (time {value!r}, expected HH:MM)") from None
    if not (0 <= hour < 24 and 0 <= minute < 60):
        raise InvalidBirthDataError(f"{INVALID_DATE_TIME} (time {value!r} out of range)")
    return hour, minute


def _as_float(value, label: str) -> float:
    try:
        return float(value)
    except (TypeError, ValueError):
        raise InvalidBirthDataError(f"{label} must be a number, got {value!r}.") from None


def validate_tz_offset(offset_hours: float) -> float:
    offset = _as_float(offset_hours, "UTC offset")
    if not math.isfinite(offset) or not (MIN_TZ_OFFSET <= offset <= MAX_TZ_OFFSET):
        raise InvalidBirthDataError(
            f"UTC offset must be between {MIN_TZ_OFFSET:+g} and {MAX_TZ_OFFSET:+g} hours, got {offset_hours!r}."
        )
    return offset


def validate_coordinates(latitude: float, longitude: float) -> tuple[float, float]:
    """Latitude in [-90, 90] (north positive), longitude in [-180, 180] (east positive)."""

    lat = _as_float(latitude, "Latitude")
    lon = _as_float(longitude, "Longitude")
    if not math.isfinite(lat) or not (-90.0 <= lat <= 90.0):
        raise InvalidBirthDataError(f"Latitude must be between -90 and 90 degrees, got {latitude!r}.")
    if not math.isfinite(lon) or not (-180.0 <= lon <= 180.0):
        raise InvalidBirthDataError(f"Longitude must be between -180 and 180 degrees, got {longitude!r}.")
    return lat, lon


def build_birth_data(
    date_str: str,
    time_str: str | None,
    tz_offset_hours: float,
    latitude: float,
    longitude: float,
    name: str = "",
) -> BirthData:
    """Validate every field and return a BirthData ready for chart computation."""

    try:
        year, month, day = parse_date(date_str)
        hour, minute = parse_time(time_str)
        offset = validate_tz_offset(tz_offset_hours)
        lat, lon = validate_coordinates(latitude, longitude)
    except InvalidBirthDataError as exc:
        logger.debug("Rejected birth data: %s", exc)
        raise

    birth = BirthData(
        name=name.strip(),
        year=year,
        month=month,
        day=day,
        hour=hour,
        minute=minute,
        tz_offset_hours=offset,
        latitude=lat,
        longitude=lon,
    )
    try:
        birth_datetime_utc(birth)
    except OverflowError:
        logger.debug("Rejected birth data: UTC shift of %s leaves the calendar range", date_str)
        raise InvalidBirthDataError(f"{INVALID_DATE_TIME} (UTC time falls outside years 1-9999)") from None
    return birth
