"""Chart angles (Ascendant, Midheaven) and Equal house cusps."""

from __future__ import annotations

import math

from .angles import deg_to_rad, normalize_degrees, rad_to_deg
from .ephemeris import local_sidereal_time, obliquity_ecliptic
from .errors import PoleSingularityError

# Latitudes closer than this to +/-90° have no defined Ascendant.
POLE_TOLERANCE_DEG = 1e-6

HOUSE_COUNT = 12
HOUSE_SPAN_DEG = 30.0


def ascendant_from_sidereal(theta_deg: float, obliquity_deg: float, latitude_deg: float) -> float:
    """
    Ecliptic longitude rising on the eastern horizon.

    theta_deg is the local sidereal time. Raises PoleSingularityError at the
    poles, where tan(latitude) diverges.
    """

    if abs(latitude_deg) > 90.0 - POLE_TOLERANCE_DEG:
        raise PoleSingularityError(latitude_deg)

    theta_rad = deg_to_rad(theta_deg)
    eps_rad = deg_to_rad(obliquity_deg)
    phi_rad = deg_to_rad(latitude_deg)
    numerator = -math.cos(theta_rad)
    denominator = math.sin(theta_rad) * math.cos(eps_rad) + math.tan(phi_rad) * math.sin(eps_rad)
    # atan2 alone lands on the western intersection; +pi flips to the eastern one.
    lambda_rad = math.atan2(numerator, denominator) + math.pi
    return normalize_degrees(rad_to_deg(lambda_rad))


def midheaven_from_sidereal(theta_deg: float, obliquity_deg: float) -> float:
    """Ecliptic longitude culminating on the meridian. Latitude plays no part."""

    theta_rad = deg_to_rad(theta_deg)
    eps_rad = deg_to_rad(obliquity_deg)
    lambda_rad = math.atan2(math.sin(theta_rad), math.cos(theta_rad) * math.cos(eps_rad))
    return normalize_degrees(rad_to_deg(lambda_rad))


def ascendant_longitude(jd: float, latitude_deg: float, longitude_deg_east: float) -> float:
    return ascendant_from_sidereal(
        local_sidereal_time(jd, longitude_deg_east),
        obliquity_ecliptic(jd),
        latitude_deg,
    )


def midheaven_longitude(jd: float, longitude_deg_east: float) -> float:
    return midheaven_from_sidereal(local_sidereal_time(jd, longitude_deg_east), obliquity_ecliptic(jd))


def equal_house_cusps(ascendant_deg: float) -> tuple[float, ...]:
    """Twelve cusps at 30° steps from the Ascendant; index 0 is the Ascendant."""
    return tuple(normalize_degrees(ascendant_deg + i * HOUSE_SPAN_DEG) for i in range(HOUSE_COUNT))


def house_for_longitude(longitude_deg: float, ascendant_deg: float) -> int:
    """Return the 1-based Equal house that contains a longitude."""

    offset = normalize_degrees(longitude_deg - ascendant_deg)
    return min(int(offset // HOUSE_SPAN_DEG), HOUSE_COUNT - 1) + 1
