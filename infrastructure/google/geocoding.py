"""Address <-> coordinate lookups through the Google Geocoding API."""
from __future__ import annotations

import logging
import time
from typing import Callable, Iterable

import requests

from core.config import DEFAULT_TIMEOUT
from core.exceptions import GeocodingError
from domain.models import Coordinate
from infrastructure.google.client import GoogleMapsClient
from infrastructure.google.constants import GEOCODE_DELAY, GEOCODE_URL
from infrastructure.google.models import GeocodeResult


class Geocoder(GoogleMapsClient):

    def __init__(
        self,
        api_key: str,
        session: requests.Session | None = None,
        timeout: float = DEFAULT_TIMEOUT,
        sleep: Callable[[float], None] = time.sleep,
    ):
        super().__init__(api_key, session=session, timeout=timeout)
        self.sleep = sleep

    def geocode_address(self, address: str) -> GeocodeResult | None:
        """Return the first match for ``address`` or ``None`` if the API found nothing."""
        data = self._get_json(GEOCODE_URL, {"address": address}, GeocodingError)
        results = data.get("results") or []
        if data.get("status") == "OK" and results:
            first = results[0]
            location = first["geometry"]["location"]
            return GeocodeResult(
                latitude=location["lat"],
                longitude=location["lng"],
                formatted_address=first.get("formatted_address"),
            )

        logging.warning(
            "Geocoding failed for %r: %s %s",
            address,
            data.get("status"),
            data.get("error_message", ""),
        )
        return None

    def geocode_addresses(self, addresses: Iterable[str]) -> list[GeocodeResult | None]:
        """Geocode sequentially, pausing between requests to stay under the rate limit."""
        results = []
        for address in addresses:
            results.append(self.geocode_address(address))
            self.sleep(GEOCODE_DELAY)
        logging.info(
            "Geocoded %s of %s addresses",
            sum(r is not None for r in results),
            len(results),
        )
        return results

    def reverse_geocode(self, coordinate: Coordinate) -> str | None:
        data = self._get_json(
            GEOCODE_URL,
            {"latlng": f"{coordinate.latitude},{coordinate.longitude}"},
            GeocodingError,
        )
        results = data.get("results") or []
        if data.get("status") == "OK" and results:
            return results[0].get("formatted_address")
        logging.debug("Reverse geocoding returned %s", data.get("status"))
        return None
