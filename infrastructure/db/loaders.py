from __future__ import annotations

import logging
from typing import Iterable

from sqlalchemy.orm import Session

from domain.models import Gym
from infrastructure.db.models import GymRecord


def join_facilities(facilities: Iterable[str] | None) -> str | None:
    joined = ",".join(f.strip() for f in facilities or [] if f and f.strip())
    return joined or None


def split_facilities(value: str | None) -> list[str]:
    if not value:
        return []
    return [part.strip() for part in value.split(",") if part.strip()]


def upsert_gyms(session: Session, gyms: Iterable[Gym]) -> int:
    """Insert or update gyms keyed by id. The caller commits."""
    count = 0
    for gym in gyms:
        session.merge(
            GymRecord(
                id=gym.id,
                name=gym.name,
                address=gym.address,
                city=gym.city,
                state=gym.state,
                latitude=gym.latitude,
                longitude=gym.longitude,
                phone=gym.phone,
                website=gym.website,
                description=gym.description,
                facilities=join_facilities(gym.facilities),
            )
        )
        count += 1
    logging.info("Upserted %s gyms", count)
    return count
