from __future__ import annotations

from contextlib import contextmanager
from typing import Iterable

from sqlalchemy import func, select
from sqlalchemy.exc import SQLAlchemyError

from core.base import Base
from core.db import get_engine, get_session, get_session_factory
from core.exceptions import DirectoryUnavailableError
from domain.models import Gym
from domain.repositories import GymRepository
from .loaders import split_facilities, upsert_gyms
from .models import GymRecord, GymReviewRecord


def create_tables(engine=None) -> None:
    """Create the ``gyms`` and ``gym_reviews`` tables if they do not exist."""
    Base.metadata.create_all(engine or get_engine())


def _gyms_with_ratings():
    return (
        select(
            GymRecord,
            func.avg(GymReviewRecord.rating).label("average_rating"),
            func.count(GymReviewRecord.id).label("total_reviews"),
        )
        .outerjoin(GymReviewRecord, GymReviewRecord.gym_id == GymRecord.id)
        .group_by(GymRecord.id)
    )


def _to_gym(record: GymRecord, average_rating, total_reviews) -> Gym:
    return Gym(
        id=record.id,
        name=record.name,
        address=record.address,
        city=record.city,
        state=record.state,
        latitude=record.latitude,
        longitude=record.longitude,
        phone=record.phone,
        website=record.website,
        description=record.description,
        facilities=split_facilities(record.facilities),
        average_rating=float(average_rating or 0.0),
        total_reviews=int(total_reviews or 0),
    )


class SqlGymRepository(GymRepository):
    """Gym directory backed by SQLAlchemy (Postgres in production, SQLite locally)."""

    def __init__(self, session_factory=None):
        self.session_factory = session_factory or get_session_factory()

    @contextmanager
    def _session(self):
        try:
            with get_session(self.session_factory) as session:
                yield session
        except SQLAlchemyError as exc:
            raise DirectoryUnavailableError(f"Gym directory query failed: {exc}") from exc

    def list_gyms(self) -> list[Gym]:
        with self._session() as session:
            rows = session.execute(_gyms_with_ratings().order_by(GymRecord.name.asc())).all()
            return [_to_gym(record, avg, total) for record, avg, total in rows]

    def get_gym(self, gym_id: str) -> Gym | None:
        with self._session() as session:
            row = session.execute(
                _gyms_with_ratings().where(GymRecord.id == gym_id)
            ).first()
            if row is None:
                return None
            return _to_gym(*row)

    def upsert_gyms(self, gyms: Iterable[Gym]) -> int:
        with self._session() as session:
            return upsert_gyms(session, gyms)

    def close(self):
        remove = getattr(self.session_factory, "remove", None)
        if remove is not None:
            remove()

    def __enter__(self):
        return self

    def __exit__(self, exc_type, exc, tb):
        self.close()
