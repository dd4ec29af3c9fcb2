from __future__ import annotations

from dataclasses import dataclass, field
from enum import Enum


@dataclass(frozen=True, slots=True)
class Coordinate:
    latitude: float
    longitude: float


@dataclass(frozen=True, slots=True)
class LocatableEntity:
    id: str
    coordinate: Coordinate | None = None


class DistanceUnit(str, Enum):
    METRIC = "metric"
    IMPERIAL = "imperial"

    @classmethod
    def _missing_(cls, value):
        # accepts "km" / "mi" and any casing of the full names
        if not isinstance(value, str):
            return None
        key = value.strip().lower()
        aliases = {"km": cls.METRIC, "mi": cls.IMPERIAL}
        for member in cls:
            if member.value == key:
                return member
        return aliases.get(key)


@dataclass(slots=True)
class Gym:
    id: str
    name: str
    address: str
    city: str | None = None
    state: str | None = None
    latitude: float | None = None
    longitude: float | None = None
    phone: str | None = None
    website: str | None = None
    description: str | None = None
    facilities: list[str] = field(default_factory=list)
    average_rating: float = 0.0
    total_reviews: int = 0

    @property
    def coordinate(self) -> Coordinate | None:
        if self.latitude is None or self.longitude is None:
            return None
        return Coordinate(self.latitude, self.longitude)


@dataclass(slots=True)
class GymListing:
    gym: Gym
    distance_km: float | None = None
    distance_label: str | None = None
