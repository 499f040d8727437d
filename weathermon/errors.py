"""Error taxonomy for the weather monitor."""
from __future__ import annotations

from enum import Enum
from typing import Optional


class ErrorKind(str, Enum):
    NETWORK = "network"
    STATUS = "status"
    PARSE = "parse"


class WeatherMonitorError(Exception):
    """Base error for the package."""


class ImproperlyConfigured(WeatherMonitorError):
    """Raised when an environment value cannot be used."""


class InputFormatError(WeatherMonitorError, ValueError):
    """Raised when a menu choice is not a number."""


class WeatherClientError(WeatherMonitorError):
    """Base client error. ``kind`` tells callers what went wrong."""

    kind: ErrorKind


class TransportError(WeatherClientError):
    """The request never produced an HTTP response."""

    kind = ErrorKind.NETWORK


class RemoteRequestError(WeatherClientError):
    """The endpoint answered with a status other than 200."""

    kind = ErrorKind.STATUS

    def __init__(self, status_code: int, message: Optional[str] = None) -> None:
        super().__init__(message or f"Failed to get weather data: {status_code}")
        self.status_code = status_code


class MalformedResponseError(WeatherClientError):
    """The body was not JSON or lacked an expected field."""

    kind = ErrorKind.PARSE


__all__ = [
    "ErrorKind",
    "WeatherMonitorError",
    "ImproperlyConfigured",
    "InputFormatError",
    "WeatherClientError",
    "TransportError",
    "RemoteRequestError",
    "MalformedResponseError",
]
