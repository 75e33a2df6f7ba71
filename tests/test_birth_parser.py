from datetime import datetime, timezone

import pytest

from natal_tools.birth_parser import (
    build_birth_data,
    parse_date,
    parse_time,
    validate_coordinates,
    validate_tz_offset,
)
from natal_tools.errors import ChartError, InvalidBirthDataError
from natal_tools.julian import birth_datetime_utc, instant_from_birth
from natal_tools.models import Instant


def test_parse_date():
    assert parse_date("1990-06-15") == (1990, 6, 15)
    assert parse_date(" 2000-2-29 ") == (2000, 2, 29)


@pytest.mark.parametrize("raw", ["", "15/06/1990", "1990-06", "1990-13-01", "2001-02-29", "abcd-ef-gh", None])
def test_parse_date_rejects(raw):
    with pytest.raises(InvalidBirthDataError):
        parse_date(raw)


def test_parse_time():
    assert parse_time("14:30") == (14, 30)
    assert parse_time("7") == (7, 0)
    assert parse_time("") == (0, 0)
    assert parse_time(None) == (0, 0)


@pytest.mark.parametrize("raw", ["24:00", "12:60", "-1:00", "noon", "12:xx"])
def test_parse_time_rejects(raw):
    with pytest.raises(InvalidBirthDataError):
        parse_time(raw)


def test_offset_range():
    assert validate_tz_offset(5.75) == 5.75
    assert validate_tz_offset("-3.5") == -3.5
    for bad in (-12.5, 14.25, float("nan"), "east"):
        with pytest.raises(InvalidBirthDataError):
            validate_tz_offset(bad)


def test_coordinate_range():
    assert validate_coordinates(-90, 180) == (-90.0, 180.0)
    for lat, lon in [(90.1, 0.0), (0.0, -180.5), (float("inf"), 0.0), (0.0, float("nan")), ("north", 0.0)]:
        with pytest.raises(InvalidBirthDataError):
            validate_coordinates(lat, lon)


def test_errors_are_value_errors():
    with pytest.raises(ValueError):
        parse_date("nope")
    assert issubclass(InvalidBirthDataError, ChartError)


def test_build_birth_data_rolls_back_across_new_year():
    birth = build_birth_data("2000-01-01", "00:30", 1, 48.8566, 2.3522, name="  Marie Dupont ")
    assert birth.name == "Marie Dupont"
    assert birth_datetime_utc(birth) == datetime(1999, 12, 31, 23, 30, tzinfo=timezone.utc)
    assert instant_from_birth(birth) == Instant(1999, 12, 31, 23.5)


def test_build_birth_data_rolls_forward_across_month_end():
    birth = build_birth_data("2024-02-29", "23:00", -5, 46.8139, -71.2080)
    assert instant_from_birth(birth) == Instant(2024, 3, 1, 4.0)


def test_fractional_offset():
    birth = build_birth_data("1990-06-15", "12:00", 5.5, 28.6139, 77.2090)
    assert instant_from_birth(birth) == Instant(1990, 6, 15, 6.5)


def test_build_birth_data_message_is_user_readable():
    with pytest.raises(InvalidBirthDataError, match="valid date and time"):
        build_birth_data("1990-02-30", "10:00", 0, 0, 0)


@pytest.mark.parametrize(
    "date_str, time_str, offset",
    [("0001-01-01", "00:30", 1), ("9999-12-31", "23:30", -5)],
)
def test_build_birth_data_rejects_utc_outside_calendar(date_str, time_str, offset):
    with pytest.raises(InvalidBirthDataError, match="outside years 1-9999"):
        build_birth_data(date_str, time_str, offset, 48.8566, 2.3522)


def test_build_birth_data_accepts_calendar_edges_that_stay_in_range():
    first = build_birth_data("0001-01-01", "00:30", -1, 48.8566, 2.3522)
    last = build_birth_data("9999-12-31", "23:30", 5, 48.8566, 2.3522)
    assert instant_from_birth(first) == Instant(1, 1, 1, 1.5)
    assert instant_from_birth(last) == Instant(9999, 12, 31, 18.5)
