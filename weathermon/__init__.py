"""Interactive current-weather lookup backed by OpenWeather."""
from __future__ import annotations

from .entities import Location, WeatherSnapshot
from .errors import (
    ErrorKind,
    ImproperlyConfigured,
    InputFormatError,
    MalformedResponseError,
    RemoteRequestError,
    TransportError,
    WeatherClientError,
    WeatherMonitorError,
)

__version__ = "0.1.0"

__all__ = [
    "Location",
    "WeatherSnapshot",
    "ErrorKind",
    "ImproperlyConfigured",
    "InputFormatError",
    "MalformedResponseError",
    "RemoteRequestError",
    "TransportError",
    "WeatherClientError",
    "WeatherMonitorError",
]
