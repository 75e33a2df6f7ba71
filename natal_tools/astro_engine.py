"""Chart assembly, plus a Swiss Ephemeris cross-check of the computed points."""

from __future__ import annotations

import logging
import os

import swisseph as swe

from .ephemeris import sun_apparent_longitude
from .geometry import ascendant_longitude, equal_house_cusps, house_for_longitude, midheaven_longitude
from .julian import instant_from_birth, julian_day_from_instant
from .models import BirthData, ChartResult, ReferencePositions
from .zodiac import zodiac_sign

logger = logging.getLogger(__name__)

EPHE_PATH = os.environ.get("SWISSEPH_EPHE")


def set_ephe_path(path: str | None) -> None:
    """Override the ephemeris directory used for Swiss Ephemeris cross-checks."""

    global EPHE_PATH
    EPHE_PATH = path


def compute_chart(jd: float, latitude_deg: float, longitude_deg_east: float) -> ChartResult:
    """
    Compute Sun, Ascendant, Midheaven and Equal houses for a Julian Day and place.

    Raises PoleSingularityError when latitude is at a geographic pole.
    """

    sun_longitude = sun_apparent_longitude(jd)
    ascendant = ascendant_longitude(jd, latitude_deg, longitude_deg_east)
    midheaven = midheaven_longitude(jd, longitude_deg_east)
    houses = equal_house_cusps(ascendant)

    chart = ChartResult(
        jd=jd,
        sun_longitude=sun_longitude,
        ascendant=ascendant,
        midheaven=midheaven,
        houses=houses,
        sun_sign=zodiac_sign(sun_longitude),
        asc_sign=zodiac_sign(ascendant),
        mc_sign=zodiac_sign(midheaven),
        sun_house=house_for_longitude(sun_longitude, ascendant),
    )
    logger.debug(
        "Chart jd=%.5f lat=%.4f lon=%.4f: sun=%.4f asc=%.4f mc=%.4f",
        jd,
        latitude_deg,
        longitude_deg_east,
        sun_longitude,
        ascendant,
        midheaven,
    )
    return chart


def compute_chart_for_birth(birth: BirthData) -> ChartResult:
    """Convert validated birth data to a Julian Day and compute its chart."""

    jd = julian_day_from_instant(instant_from_birth(birth))
    return compute_chart(jd, birth.latitude, birth.longitude)


def reference_positions(jd: float, latitude_deg: float, longitude_deg_east: float) -> ReferencePositions:
    """
    Compute Sun, Ascendant and MC with Swiss Ephemeris for the same moment and place.

    Uses the ephemeris files when EPHE_PATH is set, the built-in Moshier
    ephemeris otherwise. Swiss Ephemeris falls back to Moshier on its own when
    the files are missing, so the source is read from the returned flags.
    """

    if EPHE_PATH:
        swe.set_ephe_path(EPHE_PATH)
        flags = swe.FLG_SWIEPH
    else:
        flags = swe.FLG_MOSEPH

    result = swe.calc_ut(jd, swe.SUN, flags)
    # pyswisseph returns either a flat tuple of floats or (position_tuple, retflag).
    if len(result) == 2 and isinstance(result[0], (tuple, list)):
        position, retflag = result
    else:
        position, retflag = result, flags
    source = "moshier" if retflag & swe.FLG_MOSEPH else "swisseph"

    _cusps, ascmc = swe.houses_ex(jd, latitude_deg, longitude_deg_east, b"E")
    reference = ReferencePositions(
        sun_longitude=float(position[0]),
        ascendant=float(ascmc[0]),
        midheaven=float(ascmc[1]),
        source=source,
    )
    logger.debug("Swiss Ephemeris reference (%s): %s", source, reference)
    return reference
