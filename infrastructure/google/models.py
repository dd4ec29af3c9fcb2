from __future__ import annotations

from dataclasses import dataclass, field
from typing import Any, Mapping

from domain.models import Coordinate


@dataclass(frozen=True, slots=True)
class GeocodeResult:
    latitude: float
    longitude: float
    formatted_address: str | None = None

    @property
    def coordinate(self) -> Coordinate:
        return Coordinate(self.latitude, self.longitude)


@dataclass(slots=True)
class Place:
    place_id: str
    name: str
    formatted_address: str
    latitude: float | None = None
    longitude: float | None = None
    rating: float | None = None
    user_ratings_total: int | None = None
    phone: str | None = None
    website: str | None = None
    types: list[str] = field(default_factory=list)
    open_now: bool | None = None
    weekday_text: list[str] = field(default_factory=list)

    @classmethod
    def from_api(cls, item: Mapping[str, Any], place_id: str | None = None) -> Place:
        """Build a place from a Places API result; nearby search only sends ``vicinity``."""
        location = (item.get("geometry") or {}).get("location") or {}
        hours = item.get("opening_hours") or {}
        return cls(
            place_id=item.get("place_id") or place_id or "",
            name=item.get("name", ""),
            formatted_address=item.get("formatted_address") or item.get("vicinity") or "",
            latitude=location.get("lat"),
            longitude=location.get("lng"),
            rating=item.get("rating"),
            user_ratings_total=item.get("user_ratings_total"),
            phone=item.get("formatted_phone_number"),
            website=item.get("website"),
            types=list(item.get("types") or []),
            open_now=hours.get("open_now"),
            weekday_text=list(hours.get("weekday_text") or []),
        )
