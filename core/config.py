from __future__ import annotations

import logging
import os
from dataclasses import dataclass

from dotenv import find_dotenv, load_dotenv

DEFAULT_DATABASE_URL = "sqlite:///gyms.db"
DEFAULT_TIMEOUT = 30
DEFAULT_CACHE_EXPIRE = 3600
LOG_FORMAT = "%(asctime)s [%(levelname)s] %(message)s"


@dataclass(frozen=True, slots=True)
class Settings:
    database_url: str = DEFAULT_DATABASE_URL
    google_maps_api_key: str = ""
    google_maps_timeout: float = DEFAULT_TIMEOUT
    http_cache_expire: int = DEFAULT_CACHE_EXPIRE
    log_level: str = "INFO"


def load_settings(use_dotenv: bool = True) -> Settings:
    """Read settings from the environment, seeded from a ``.env`` file if present."""
    if use_dotenv:
        load_dotenv(find_dotenv(usecwd=True))
    return Settings(
        database_url=os.getenv("DATABASE_URL", DEFAULT_DATABASE_URL),
        google_maps_api_key=os.getenv("GOOGLE_MAPS_API_KEY", ""),
        google_maps_timeout=float(os.getenv("GOOGLE_MAPS_TIMEOUT", DEFAULT_TIMEOUT)),
        http_cache_expire=int(os.getenv("HTTP_CACHE_EXPIRE", DEFAULT_CACHE_EXPIRE)),
        log_level=os.getenv("LOG_LEVEL", "INFO").upper(),
    )


def configure_logging(settings: Settings | None = None) -> None:
    settings = settings or load_settings()
    logging.basicConfig(level=settings.log_level, format=LOG_FORMAT)
