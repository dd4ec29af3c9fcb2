from __future__ import annotations

import logging
from typing import Any

import requests

from core.config import DEFAULT_TIMEOUT
from core.exceptions import PlacesApiError
from domain.models import Coordinate, Gym
from infrastructure.google.client import GoogleMapsClient
from infrastructure.google.constants import (
    DEFAULT_AREA_RADIUS,
    FACILITY_NAMES,
    NEARBY_MAX_RADIUS,
    NEARBY_SEARCH_URL,
    PLACE_DETAIL_FIELDS,
    PLACE_DETAILS_URL,
    TEXT_SEARCH_URL,
)
from infrastructure.google.geocoding import Geocoder
from infrastructure.google.models import Place


def _latlng(location: Coordinate) -> str:
    return f"{location.latitude},{location.longitude}"


class PlacesClient(GoogleMapsClient):
    """Gym searches against the Google Places web service."""

    def __init__(
        self,
        api_key: str,
        session: requests.Session | None = None,
        timeout: float = DEFAULT_TIMEOUT,
        geocoder: Geocoder | None = None,
    ):
        super().__init__(api_key, session=session, timeout=timeout)
        self.geocoder = geocoder or Geocoder(api_key, session=self.session, timeout=timeout)

    def _results(self, url: str, params: dict[str, Any], label: str) -> list[Place]:
        data = self._get_json(url, params, PlacesApiError)
        status = data.get("status")

        if status == "OK":
            places = [Place.from_api(item) for item in data.get("results") or []]
            logging.info("%s found %s results", label, len(places))
            return places
        if status == "ZERO_RESULTS":
            logging.info("%s: no results", label)
            return []

        logging.warning("%s failed: %s %s", label, status, data.get("error_message", ""))
        return []

    def search_gyms(
        self,
        query: str,
        location: Coordinate | None = None,
        radius: int | None = None,
    ) -> list[Place]:
        params: dict[str, Any] = {"query": query, "type": "gym"}
        if location is not None:
            params["location"] = _latlng(location)
        if radius:
            params["radius"] = radius
        return self._results(TEXT_SEARCH_URL, params, "Text search")

    def search_gyms_nearby(self, location: Coordinate, radius: int) -> list[Place]:
        params = {
            "location": _latlng(location),
            "radius": min(int(radius), NEARBY_MAX_RADIUS),
            "type": "gym",
        }
        return self._results(NEARBY_SEARCH_URL, params, "Nearby search")

    def get_place_details(self, place_id: str) -> Place | None:
        data = self._get_json(
            PLACE_DETAILS_URL,
            {"place_id": place_id, "fields": ",".join(PLACE_DETAIL_FIELDS)},
            PlacesApiError,
        )
        if data.get("status") == "OK" and data.get("result"):
            return Place.from_api(data["result"], place_id=place_id)
        logging.warning("Place details failed for %s: %s", place_id, data.get("status"))
        return None

    def search_gyms_in_area(
        self, location_query: str, radius: int = DEFAULT_AREA_RADIUS
    ) -> list[Place]:
        """
        Find gyms around a free-text location such as "Toronto downtown".

        The query is geocoded and searched with Nearby Search. A text search
        for "gym in <query>" is used when geocoding finds nothing, or when the
        nearby search comes back empty (then biased to the geocoded point).
        """
        logging.info("Searching gyms in %r (radius %s m)", location_query, radius)
        text_query = f"gym in {location_query}"

        geocoded = self.geocoder.geocode_address(location_query)
        if geocoded is None:
            logging.info("Falling back to text search for %r", location_query)
            return self.search_gyms(text_query)

        nearby = self.search_gyms_nearby(geocoded.coordinate, radius)
        if nearby:
            return nearby

        logging.info("Nearby search empty, trying text search for %r", location_query)
        return self.search_gyms(text_query, location=geocoded.coordinate, radius=radius)


def _facilities(types: list[str]) -> list[str]:
    facilities: list[str] = []
    for place_type in types:
        lowered = place_type.lower()
        label = next((name for key, name in FACILITY_NAMES.items() if key in lowered), None)
        if label is not None and label not in facilities:
            facilities.append(label)
    return facilities


def place_to_gym(place: Place) -> Gym:
    """Map a Places result onto a directory gym; city and state come from the address tail."""
    parts = place.formatted_address.split(",")
    city = parts[-2].strip() if len(parts) > 1 else None
    state = parts[-1].strip() if len(parts) > 2 else None

    description = None
    if place.rating:
        description = f"Rating: {place.rating}/5 ({place.user_ratings_total or 0} reviews)"

    return Gym(
        id=place.place_id,
        name=place.name,
        address=place.formatted_address,
        city=city,
        state=state,
        latitude=place.latitude,
        longitude=place.longitude,
        phone=place.phone or None,
        website=place.website or None,
        description=description,
        facilities=_facilities(place.types),
    )
