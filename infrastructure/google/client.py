from __future__ import annotations

import logging
from typing import Any, Mapping

import requests
import requests_cache
from retry_requests import retry

from core.config import DEFAULT_CACHE_EXPIRE, DEFAULT_TIMEOUT, Settings, load_settings
from core.exceptions import LocatorError, MissingApiKeyError
from infrastructure.google.constants import CACHE_NAME, REDACTED


def build_session(expire_after: int = DEFAULT_CACHE_EXPIRE) -> requests.Session:
    """Cached session with retries on 5xx, shared by all Maps clients."""
    return retry(requests_cache.CachedSession(CACHE_NAME, expire_after=expire_after))


class GoogleMapsClient:
    """Thin JSON-over-HTTP wrapper around the Google Maps web services."""

    def __init__(
        self,
        api_key: str,
        session: requests.Session | None = None,
        timeout: float = DEFAULT_TIMEOUT,
    ):
        if not api_key:
            raise MissingApiKeyError()
        self.api_key = api_key
        self.session = session or build_session()
        self.timeout = timeout

    @classmethod
    def from_settings(cls, settings: Settings | None = None, session: requests.Session | None = None, **kwargs):
        settings = settings or load_settings()
        return cls(
            settings.google_maps_api_key,
            session=session or build_session(settings.http_cache_expire),
            timeout=settings.google_maps_timeout,
            **kwargs,
        )

    def redact(self, text: str) -> str:
        return text.replace(self.api_key, REDACTED)

    def _get_json(
        self, url: str, params: Mapping[str, Any], error_cls: type[LocatorError]
    ) -> dict:
        logging.debug("GET %s %s", url, dict(params))
        try:
            r = self.session.get(url, params={**params, "key": self.api_key}, timeout=self.timeout)
            r.raise_for_status()
            return r.json()
        except (requests.RequestException, ValueError) as exc:
            raise error_cls(self.redact(f"Request to {url} failed: {exc}")) from exc
