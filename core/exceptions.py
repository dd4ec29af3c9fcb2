from __future__ import annotations
from enum import Enum


class ErrorCode(str, Enum):
    OK = "OK"
    NOT_CONFIGURED = "NOT_CONFIGURED"
    GEOCODING_FAILED = "GEOCODING_FAILED"
    PLACES_FAILED = "PLACES_FAILED"
    DIRECTORY_UNAVAILABLE = "DIRECTORY_UNAVAILABLE"
    INTERNAL = "INTERNAL"


class LocatorError(Exception):
    """Base class for all gym-locator related errors."""

    def __init__(self, code: ErrorCode, message: str):
        super().__init__(message)
        self.code: ErrorCode = code
        self.message: str = message

    def __repr__(self) -> str:
        return f"{self.__class__.__name__}(code={self.code.value}, msg={self.message})"


class MissingApiKeyError(LocatorError):
    def __init__(self) -> None:
        super().__init__(
            ErrorCode.NOT_CONFIGURED,
            "No Google Maps API key configured (set GOOGLE_MAPS_API_KEY)",
        )


class GeocodingError(LocatorError):
    def __init__(self, msg: str):
        super().__init__(ErrorCode.GEOCODING_FAILED, msg)


class PlacesApiError(LocatorError):
    def __init__(self, msg: str):
        super().__init__(ErrorCode.PLACES_FAILED, msg)


class DirectoryUnavailableError(LocatorError):
    def __init__(self, msg: str):
        super().__init__(ErrorCode.DIRECTORY_UNAVAILABLE, msg)
