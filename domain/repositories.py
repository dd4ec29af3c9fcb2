from __future__ import annotations
from abc import ABC, abstractmethod
from typing import Iterable, Sequence

from domain.models import Gym


class GymRepository(ABC):
    """Abstraction for gym directory access."""

    @abstractmethod
    def list_gyms(self) -> Sequence[Gym]:
        """Return all gyms ordered by name, with rating aggregates filled in."""
        raise NotImplementedError

    @abstractmethod
    def get_gym(self, gym_id: str) -> Gym | None:
        """Return a single gym or ``None`` if the id is unknown."""
        raise NotImplementedError

    @abstractmethod
    def upsert_gyms(self, gyms: Iterable[Gym]) -> int:
        """Insert or update gyms by id and return how many were written."""
        raise NotImplementedError
