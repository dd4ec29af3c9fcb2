"""Import gyms around a location from Google Places into the gym directory.

    python -m scripts.run_gym_import "Toronto downtown" --radius 3000
"""
from __future__ import annotations

import argparse
import logging

from core.config import configure_logging, load_settings
from core.exceptions import LocatorError
from infrastructure.db import SqlGymRepository, create_tables
from infrastructure.google.constants import DEFAULT_AREA_RADIUS
from infrastructure.google.places import PlacesClient
from usecases.gyms import import_gyms


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(description=__doc__.splitlines()[0])
    parser.add_argument("query", help='area to search, e.g. "Toronto downtown"')
    parser.add_argument(
        "--radius",
        type=int,
        default=DEFAULT_AREA_RADIUS,
        help="search radius in meters (max 50000)",
    )
    return parser


def main(argv: list[str] | None = None) -> int:
    args = build_parser().parse_args(argv)
    settings = load_settings()
    configure_logging(settings)

    try:
        places = PlacesClient.from_settings(settings)
        create_tables()
        with SqlGymRepository() as repo:
            gyms = import_gyms(places, repo, args.query, radius=args.radius)
    except LocatorError as exc:
        logging.error("Gym import failed: %r", exc)
        return 1

    for gym in gyms:
        print(f"{gym.name} - {gym.address}")
    return 0


if __name__ == "__main__":
    raise SystemExit(main())
