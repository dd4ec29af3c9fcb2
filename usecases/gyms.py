from __future__ import annotations

import logging
from typing import Sequence

from domain.distance import format_distance, is_displayable
from domain.models import Coordinate, DistanceUnit, Gym, GymListing
from domain.ranking import filter_by_term, rank_with_distances
from domain.repositories import GymRepository
from infrastructure.google.constants import DEFAULT_AREA_RADIUS
from infrastructure.google.places import PlacesClient, place_to_gym


def build_listings(
    gyms: Sequence[Gym],
    origin: Coordinate | None = None,
    unit: DistanceUnit | str = DistanceUnit.METRIC,
) -> list[GymListing]:
    """Rank ``gyms`` around ``origin`` and attach display distances.

    Without an origin the input order is kept and no distances are set.
    """
    if origin is None:
        return [GymListing(gym) for gym in gyms]

    listings = []
    for gym, km in rank_with_distances(origin, gyms):
        label = format_distance(km, unit) if is_displayable(km) else None
        listings.append(GymListing(gym, km, label))
    return listings


def locate_gyms(
    repo: GymRepository,
    origin: Coordinate | None = None,
    search_term: str = "",
    unit: DistanceUnit | str = DistanceUnit.METRIC,
) -> list[GymListing]:
    """Return the directory filtered by ``search_term``, nearest first when ``origin`` is known."""
    gyms = filter_by_term(repo.list_gyms(), search_term)
    logging.debug("%s gyms match %r", len(gyms), search_term)
    return build_listings(gyms, origin, unit)


def find_nearest_gyms(
    repo: GymRepository,
    origin: Coordinate,
    k: int = 5,
    unit: DistanceUnit | str = DistanceUnit.METRIC,
) -> list[GymListing]:
    """Return the ``k`` nearest gyms that have a location."""
    listings = locate_gyms(repo, origin, unit=unit)
    return [listing for listing in listings if listing.distance_km is not None][:k]


def import_gyms(
    places: PlacesClient,
    repo: GymRepository,
    location_query: str,
    radius: int = DEFAULT_AREA_RADIUS,
) -> list[Gym]:
    """Search gyms around ``location_query`` and upsert them into the directory."""
    found = places.search_gyms_in_area(location_query, radius)
    gyms = [place_to_gym(place) for place in found if place.place_id]
    if not gyms:
        logging.info("No gyms found for %r", location_query)
        return []
    written = repo.upsert_gyms(gyms)
    logging.info("Imported %s gyms for %r", written, location_query)
    return gyms
