from __future__ import annotations
from typing import Sequence

import folium
import pandas as pd

from domain.models import Coordinate, GymListing

LISTING_COLUMNS = ["Gym", "Address", "City", "Rating", "Reviews", "Distance"]


def listings_frame(listings: Sequence[GymListing]) -> pd.DataFrame:
    """Tabular view of the locator results, one row per gym in listing order."""
    rows = []
    for listing in listings:
        gym = listing.gym
        rows.append(
            {
                "Gym": gym.name,
                "Address": gym.address,
                "City": ", ".join(p for p in (gym.city, gym.state) if p),
                "Rating": round(gym.average_rating, 1) if gym.total_reviews else None,
                "Reviews": gym.total_reviews,
                "Distance": listing.distance_label or "",
            }
        )
    return pd.DataFrame(rows, columns=LISTING_COLUMNS)


def gym_map(
    center: Coordinate,
    listings: Sequence[GymListing],
    origin: Coordinate | None = None,
    zoom: int = 13,
) -> folium.Map:
    fmap = folium.Map(location=[center.latitude, center.longitude], zoom_start=zoom, control_scale=True)
    if origin is not None:
        folium.Marker(
            [origin.latitude, origin.longitude],
            tooltip="You",
            icon=folium.Icon(color="red"),
        ).add_to(fmap)

    for listing in listings:
        point = listing.gym.coordinate
        if point is None:
            continue
        tooltip = listing.gym.name
        if listing.distance_label:
            tooltip = f"{tooltip} ({listing.distance_label})"
        folium.Marker(
            [point.latitude, point.longitude],
            tooltip=tooltip,
            popup=listing.gym.address,
            icon=folium.Icon(color="blue"),
        ).add_to(fmap)
    return fmap
