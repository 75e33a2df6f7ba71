"""
Low-precision solar ephemeris and sidereal time.

Formulas follow the standard low-accuracy solar position algorithm (Meeus,
"Astronomical Algorithms", ch. 12, 22 and 25): apparent Sun longitude good to
about 0.01°, mean obliquity with the leading nutation term, and mean sidereal
time. All angles returned are degrees.
"""

from __future__ import annotations

import math

from .angles import deg_to_rad, normalize_degrees

J2000 = 2451545.0
DAYS_PER_CENTURY = 36525.0


def julian_centuries(jd: float) -> float:
    """Julian centuries elapsed since J2000.0."""
    return (jd - J2000) / DAYS_PER_CENTURY


def _lunar_node_deg(t: float) -> float:
    """Longitude of the Moon's ascending node (drives the nutation terms)."""
    return 125.04 - 1934.136 * t


def obliquity_ecliptic(jd: float) -> float:
    """Mean obliquity of the ecliptic plus the main nutation correction."""

    t = julian_centuries(jd)
    seconds = 21.448 - t * (46.8150 + t * (0.00059 - t * 0.001813))
    eps0_deg = 23.0 + 26.0 / 60.0 + seconds / 3600.0
    return eps0_deg + 0.00256 * math.cos(deg_to_rad(_lunar_node_deg(t)))


def sun_mean_longitude(jd: float) -> float:
    t = julian_centuries(jd)
    return normalize_degrees(280.46646 + t * (36000.76983 + t * 0.0003032))


def sun_mean_anomaly(jd: float) -> float:
    t = julian_centuries(jd)
    return normalize_degrees(357.52911 + t * (35999.05029 - 0.0001537 * t))


def earth_orbit_eccentricity(jd: float) -> float:
    t = julian_centuries(jd)
    return 0.016708634 - t * (0.000042037 + 0.0000001267 * t)


def sun_equation_of_center(jd: float) -> float:
    t = julian_centuries(jd)
    m_rad = deg_to_rad(sun_mean_anomaly(jd))
    return (
        (1.914602 - t * (0.004817 + 0.000014 * t)) * math.sin(m_rad)
        + (0.019993 - 0.000101 * t) * math.sin(2 * m_rad)
        + 0.000289 * math.sin(3 * m_rad)
    )


def sun_apparent_longitude(jd: float) -> float:
    """
    Apparent geocentric ecliptic longitude of the Sun.

    True longitude (mean longitude + equation of center), corrected for
    nutation and aberration.
    """

    t = julian_centuries(jd)
    true_longitude_deg = sun_mean_longitude(jd) + sun_equation_of_center(jd)
    omega_rad = deg_to_rad(_lunar_node_deg(t))
    apparent_deg = true_longitude_deg - 0.00569 - 0.00478 * math.sin(omega_rad)
    return normalize_degrees(apparent_deg)


def greenwich_mean_sidereal_time(jd: float) -> float:
    """Greenwich mean sidereal time, as an angle in degrees."""

    t = julian_centuries(jd)
    theta_deg = (
        280.46061837
        + 360.98564736629 * (jd - J2000)
        + 0.000387933 * t * t
        - (t * t * t) / 38710000.0
    )
    return normalize_degrees(theta_deg)


def local_sidereal_time(jd: float, longitude_deg_east: float) -> float:
    return normalize_degrees(greenwich_mean_sidereal_time(jd) + longitude_deg_east)
