"""Natal chart tools: Sun, Ascendant, Midheaven and Equal houses from birth data."""

from .astro_engine import compute_chart, compute_chart_for_birth, reference_positions
from .birth_parser import build_birth_data
from .errors import ChartError, InvalidBirthDataError, PoleSingularityError
from .julian import julian_day
from .models import BirthData, ChartResult, Instant, ReferencePositions, ZodiacPosition
from .zodiac import format_degree_minute, zodiac_sign

__all__ = [
    "BirthData",
    "ChartError",
    "ChartResult",
    "Instant",
    "InvalidBirthDataError",
    "PoleSingularityError",
    "ReferencePositions",
    "ZodiacPosition",
    "build_birth_data",
    "compute_chart",
    "compute_chart_for_birth",
    "format_degree_minute",
    "julian_day",
    "reference_positions",
    "zodiac_sign",
]
