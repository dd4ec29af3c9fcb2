"""Great-circle distance on a spherical Earth and its display formatting.

Everything here is pure: no I/O, no shared state. Coordinates are not
range-checked, so NaN or out-of-range input yields a NaN result instead of
an exception. Use :func:`is_displayable` before rendering a value.
"""
from __future__ import annotations

import math
from dataclasses import dataclass

from domain.models import Coordinate, DistanceUnit

# Mean Earth radius
EARTH_RADIUS_KM = 6371.0
MILES_PER_KM = 0.621371
FEET_PER_MILE = 5280
METERS_PER_KM = 1000


def distance(a: Coordinate, b: Coordinate) -> float:
    """Return the Haversine distance in kilometers between ``a`` and ``b``."""
    if any(math.isinf(v) for v in (a.latitude, a.longitude, b.latitude, b.longitude)):
        return math.nan

    lat1 = math.radians(a.latitude)
    lat2 = math.radians(b.latitude)
    d_lat = lat2 - lat1
    d_lon = math.radians(b.longitude - a.longitude)

    h = (
        math.sin(d_lat / 2) ** 2
        + math.cos(lat1) * math.cos(lat2) * math.sin(d_lon / 2) ** 2
    )
    # rounding (or out-of-range latitudes) can push h outside [0, 1]; NaN passes through
    if h < 0.0:
        h = 0.0
    elif h > 1.0:
        h = 1.0
    c = 2 * math.atan2(math.sqrt(h), math.sqrt(1 - h))
    return EARTH_RADIUS_KM * c


def to_miles(km: float) -> float:
    return km * MILES_PER_KM


def distance_miles(a: Coordinate, b: Coordinate) -> float:
    return to_miles(distance(a, b))


def _round_half_up(value: float) -> int:
    return int(math.floor(value + 0.5))


def format_distance(km: float, unit: DistanceUnit | str = DistanceUnit.METRIC) -> str:
    """Render ``km`` for display.

    Metric: whole meters below 1 km, otherwise kilometers with one decimal.
    Imperial: whole feet below 1 mile, otherwise miles with one decimal.
    ``unit`` also accepts the short names ``"km"`` and ``"mi"``.
    """
    unit = DistanceUnit(unit)
    if unit is DistanceUnit.IMPERIAL:
        miles = to_miles(km)
        if miles < 1 and math.isfinite(miles):
            return f"{_round_half_up(miles * FEET_PER_MILE)} ft"
        return f"{miles:.1f} mi"

    if km < 1 and math.isfinite(km):
        return f"{_round_half_up(km * METERS_PER_KM)} m"
    return f"{km:.1f} km"


def is_displayable(km: float | None) -> bool:
    return km is not None and math.isfinite(km) and km >= 0


@dataclass(frozen=True, slots=True)
class DistanceResult:
    kilometers: float

    @classmethod
    def between(cls, a: Coordinate, b: Coordinate) -> DistanceResult:
        return cls(distance(a, b))

    @property
    def miles(self) -> float:
        return to_miles(self.kilometers)

    def format(self, unit: DistanceUnit | str = DistanceUnit.METRIC) -> str:
        return format_distance(self.kilometers, unit)

    def __str__(self) -> str:
        return self.format()
