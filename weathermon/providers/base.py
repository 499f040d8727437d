from __future__ import annotations

import logging
from typing import Any, Optional, Protocol

import requests
from requests import Response

from ..entities import Location, WeatherSnapshot
from ..errors import MalformedResponseError, RemoteRequestError, TransportError


logger = logging.getLogger(__name__)


class WeatherClient(Protocol):
    """A data source capable of returning current conditions for a location."""

    name: str

    def fetch(self, location: Location) -> WeatherSnapshot:
        """Fetch one snapshot for the provided location."""
        ...


class HttpWeatherClient:
    """Base class for HTTP clients: one session, one timeout, no retries."""

    name = "http"

    def __init__(self, session: Optional[requests.Session] = None, timeout: float = 10.0) -> None:
        self.session = session or requests.Session()
        self.timeout = timeout
        self._log = logging.getLogger(self.__class__.__name__)

    def close(self) -> None:
        self.session.close()

    def __enter__(self):
        return self

    def __exit__(self, *exc_info) -> None:
        self.close()

    def _handle_response(self, response: Response) -> Response:
        if response.status_code != 200:
            self._log.warning("Provider returned %s: %s", response.status_code, response.text[:200])
            raise RemoteRequestError(response.status_code)
        return response

    def _request(self, method: str, url: str, **kwargs) -> Response:
        try:
            response = self.session.request(method, url, timeout=self.timeout, **kwargs)
        except requests.Timeout as exc:
            self._log.error("Request timed out", exc_info=exc)
            raise TransportError(f"Request timed out after {self.timeout}s") from exc
        except requests.RequestException as exc:
            self._log.error("Request failed", exc_info=exc)
            raise TransportError(f"Request failed: {exc}") from exc
        return self._handle_response(response)

    def _json(self, response: Response) -> dict:
        try:
            data: Any = response.json()
        except ValueError as exc:
            self._log.error("Failed to decode JSON", exc_info=exc)
            raise MalformedResponseError("Response body is not valid JSON") from exc
        if not isinstance(data, dict):
            self._log.error("Expected a JSON object, got %s", type(data).__name__)
            raise MalformedResponseError("Response body is not a JSON object")
        return data


__all__ = ["WeatherClient", "HttpWeatherClient"]
