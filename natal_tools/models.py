"""Dataclasses that carry birth data and computed chart values through the project."""

from __future__ import annotations

from dataclasses import dataclass
from datetime import datetime


@dataclass(frozen=True)
class Instant:
    """A UTC calendar instant; hour_utc is a decimal hour in [0, 24)."""

    year: int
    month: int
    day: int
    hour_utc: float


@dataclass(frozen=True)
class BirthData:
    """Validated civil birth data as entered by the user."""

    name: str
    year: int
    month: int
    day: int
    hour: int
    minute: int
    tz_offset_hours: float  # local minus UTC, e.g. 1.0 for Paris in winter
    latitude: float  # degrees, north positive
    longitude: float  # degrees, east positive

    @property
    def local_datetime(self) -> datetime:
        return datetime(self.year, self.month, self.day, self.hour, self.minute)


@dataclass(frozen=True)
class ZodiacPosition:
    """An ecliptic longitude expressed as sign + whole degree + arc-minutes."""

    sign: str
    sign_index: int
    degree: int
    minutes: int

    def to_longitude(self) -> float:
        return self.sign_index * 30.0 + self.degree + self.minutes / 60.0


@dataclass(frozen=True)
class ChartResult:
    """
    One computed chart.

    Longitudes are ecliptic degrees in [0, 360). houses holds the twelve Equal
    house cusps, houses[0] being the Ascendant itself.
    """

    jd: float
    sun_longitude: float
    ascendant: float
    midheaven: float
    houses: tuple[float, ...]
    sun_sign: str
    asc_sign: str
    mc_sign: str
    sun_house: int


@dataclass(frozen=True)
class ReferencePositions:
    """Sun, Ascendant and MC as computed by Swiss Ephemeris, for cross-checking."""

    sun_longitude: float
    ascendant: float
    midheaven: float
    source: str  # "swisseph" (ephemeris files) or "moshier" (built-in)
