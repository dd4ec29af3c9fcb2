from __future__ import annotations

import math
from operator import attrgetter
from typing import Callable, Iterable, Sequence, TypeVar

from domain.distance import distance
from domain.models import Coordinate, Gym

T = TypeVar("T")

_coordinate_attr = attrgetter("coordinate")


def _sort_key(item: tuple[object, float | None]) -> tuple[int, float]:
    km = item[1]
    if km is None or math.isnan(km):
        return (1, 0.0)
    return (0, km)


def rank_with_distances(
    origin: Coordinate,
    entities: Iterable[T],
    coordinate: Callable[[T], Coordinate | None] = _coordinate_attr,
) -> list[tuple[T, float | None]]:
    """Pair each entity with its distance from ``origin`` (km), nearest first.

    Entities whose ``coordinate`` is ``None`` come last with a distance of
    ``None``, followed in input order by entities whose distance is NaN.
    The sort is stable, so equal distances and unlocated entities keep their
    input order.
    """
    scored = []
    for entity in entities:
        point = coordinate(entity)
        scored.append((entity, None if point is None else distance(origin, point)))
    return sorted(scored, key=_sort_key)


def rank(
    origin: Coordinate,
    entities: Iterable[T],
    coordinate: Callable[[T], Coordinate | None] = _coordinate_attr,
) -> list[T]:
    """Return ``entities`` ordered by proximity to ``origin``."""
    return [entity for entity, _ in rank_with_distances(origin, entities, coordinate)]


def filter_by_term(gyms: Sequence[Gym], term: str | None) -> list[Gym]:
    """Case-insensitive substring match on name, address or city."""
    needle = (term or "").strip().lower()
    if not needle:
        return list(gyms)
    return [
        gym
        for gym in gyms
        if any(needle in (value or "").lower() for value in (gym.name, gym.address, gym.city))
    ]
