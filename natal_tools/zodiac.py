"""Zodiac sign lookup and sign/degree/minute formatting."""

from __future__ import annotations

import math
from types import MappingProxyType

from .angles import normalize_degrees
from .models import ZodiacPosition

SIGNS: tuple[str, ...] = (
    "Aries",
    "Taurus",
    "Gemini",
    "Cancer",
    "Leo",
    "Virgo",
    "Libra",
    "Scorpio",
    "Sagittarius",
    "Capricorn",
    "Aquarius",
    "Pisces",
)

SIGN_SYMBOLS = MappingProxyType(
    {
        "Aries": "♈",
        "Taurus": "♉",
        "Gemini": "♊",
        "Cancer": "♋",
        "Leo": "♌",
        "Virgo": "♍",
        "Libra": "♎",
        "Scorpio": "♏",
        "Sagittarius": "♐",
        "Capricorn": "♑",
        "Aquarius": "♒",
        "Pisces": "♓",
    }
)

SIGN_SPAN_DEG = 30.0


def sign_index(longitude_deg: float) -> int:
    """0 for Aries through 11 for Pisces."""
    return int(normalize_degrees(longitude_deg) // SIGN_SPAN_DEG) % 12


def zodiac_sign(longitude_deg: float) -> str:
    return SIGNS[sign_index(longitude_deg)]


def format_degree_minute(longitude_deg: float) -> ZodiacPosition:
    """
    Split a longitude into sign, whole degree in sign and rounded arc-minutes.

    Rounding up to 60 minutes carries into the next whole degree. A carry that
    would reach the next sign is clamped to 29°59' instead, so the sign always
    matches zodiac_sign().
    """

    lon = normalize_degrees(longitude_deg)
    idx = sign_index(lon)
    offset = lon % SIGN_SPAN_DEG
    degree = math.floor(offset)
    minutes = int(round((offset - degree) * 60))
    if minutes == 60:
        if degree + 1 < SIGN_SPAN_DEG:
            degree += 1
            minutes = 0
        else:
            minutes = 59
    return ZodiacPosition(sign=SIGNS[idx], sign_index=idx, degree=int(degree), minutes=minutes)


def sign_label(sign: str, use_symbol: bool = True) -> str:
    """Return a sign label, optionally prefixed with its glyph."""
    if not use_symbol:
        return sign
    symbol = SIGN_SYMBOLS.get(sign)
    return f"{symbol} {sign}" if symbol else sign


def format_longitude(longitude_deg: float, use_symbol: bool = False) -> str:
    """Return e.g. "09°22' Capricorn" for a raw longitude."""
    pos = format_degree_minute(longitude_deg)
    return f"{pos.degree:02d}°{pos.minutes:02d}' {sign_label(pos.sign, use_symbol)}"
