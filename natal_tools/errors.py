"""Exceptions raised by natal_tools."""

from __future__ import annotations


class ChartError(Exception):
    """Base class for every error natal_tools raises on purpose."""


class InvalidBirthDataError(ChartError, ValueError):
    """Raw birth data (date, time, offset or coordinates) failed validation."""


class PoleSingularityError(ChartError, ValueError):
    """The Ascendant is undefined because the observer stands on a pole."""

    def __init__(self, latitude: float) -> None:
        self.latitude = latitude
        super().__init__(
            f"Ascendant is undefined at latitude {latitude:+.6f}° (geographic pole)."
        )
