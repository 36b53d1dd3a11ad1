"""Geographic utility functions — pure Python, no external deps."""

from __future__ import annotations

import enum
import math

# One degree of arc on the reference sphere, in statute miles
MILES_PER_DEGREE = 60 * 1.1515
KILOMETERS_PER_MILE = 1.609344
NAUTICAL_MILES_PER_MILE = 0.8684


class DistanceUnit(enum.Enum):
    MILES = "M"
    KILOMETERS = "K"
    NAUTICAL_MILES = "N"

    @property
    def factor(self) -> float:
        """Multiplier from statute miles into this unit."""
        if self is DistanceUnit.KILOMETERS:
            return KILOMETERS_PER_MILE
        if self is DistanceUnit.NAUTICAL_MILES:
            return NAUTICAL_MILES_PER_MILE
        return 1.0

    @property
    def label(self) -> str:
        return _LABELS[self]

    @classmethod
    def parse(cls, value: str) -> DistanceUnit:
        """Accept a one-letter code ("K") or a name ("kilometers")."""
        key = value.strip().upper()
        for unit in cls:
            if key in (unit.value, unit.name, unit.name.replace("_", "-"), unit.name.replace("_", " ")):
                return unit
        raise ValueError(f"unknown distance unit {value!r} (expected M, K or N)")


_LABELS = {
    DistanceUnit.MILES: "mi",
    DistanceUnit.KILOMETERS: "km",
    DistanceUnit.NAUTICAL_MILES: "nmi",
}


def great_circle_distance(
    lat1: float,
    lon1: float,
    lat2: float,
    lon2: float,
    unit: DistanceUnit = DistanceUnit.MILES,
) -> float:
    """Great-circle distance between two points, in ``unit``.

    Uses the spherical law of cosines. Inputs are decimal degrees, south
    latitudes and west longitudes negative.
    """
    if lat1 == lat2 and lon1 == lon2:
        return 0.0

    rlat1, rlat2 = math.radians(lat1), math.radians(lat2)
    theta = math.radians(lon1 - lon2)

    d = math.sin(rlat1) * math.sin(rlat2) + math.cos(rlat1) * math.cos(rlat2) * math.cos(theta)
    # Rounding can push d just past ±1 for near-identical or antipodal points
    d = max(-1.0, min(1.0, d))

    miles = math.degrees(math.acos(d)) * MILES_PER_DEGREE
    return miles * unit.factor


def convert_miles(miles: float, unit: DistanceUnit) -> float:
    return miles * unit.factor
