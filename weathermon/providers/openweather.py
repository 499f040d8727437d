"""OpenWeather current weather client."""
from __future__ import annotations

from dataclasses import dataclass
from typing import Optional

import requests

from .base import HttpWeatherClient
from ..entities import Location, WeatherSnapshot
from ..errors import ErrorKind, MalformedResponseError, WeatherClientError
from ..settings import DEFAULT_BASE_URL, DEFAULT_TIMEOUT, Settings


@dataclass(frozen=True)
class FetchOutcome:
    """Result of :meth:`OpenWeatherClient.try_fetch`: a snapshot or an error."""

    snapshot: Optional[WeatherSnapshot] = None
    error: Optional[WeatherClientError] = None

    @property
    def ok(self) -> bool:
        return self.error is None

    @property
    def kind(self) -> Optional[ErrorKind]:
        return self.error.kind if self.error is not None else None


class OpenWeatherClient(HttpWeatherClient):
    """Integration with the OpenWeather current weather endpoint."""

    name = "openweather"

    def __init__(
        self,
        *,
        api_key: str,
        base_url: str = DEFAULT_BASE_URL,
        units: str = "metric",
        timeout: float = DEFAULT_TIMEOUT,
        session: Optional[requests.Session] = None,
    ) -> None:
        super().__init__(session=session, timeout=timeout)
        self.api_key = api_key
        self.base_url = base_url
        self.units = units

    @classmethod
    def from_settings(cls, settings: Settings, session: Optional[requests.Session] = None) -> "OpenWeatherClient":
        return cls(
            api_key=settings.api_key,
            base_url=settings.base_url,
            units=settings.units,
            timeout=settings.timeout,
            session=session,
        )

    def fetch(self, location: Location) -> WeatherSnapshot:  # noqa: D401
        """Return current conditions for ``location`` from OpenWeather."""
        params = {"q": f"{location.city},{location.country}", "units": self.units, "appid": self.api_key}
        self._log.debug("GET %s q=%s units=%s", self.base_url, params["q"], self.units)
        response = self._request("GET", self.base_url, params=params)

        data = self._json(response)
        try:
            main = data.get("main")
            wind = data.get("wind")
            if not isinstance(main, dict) or not isinstance(wind, dict):
                raise MalformedResponseError("Response is missing 'main' or 'wind'")

            return WeatherSnapshot(
                temperature=_required_float(main, "temp", "main.temp"),
                humidity=_required_float(main, "humidity", "main.humidity"),
                wind_speed=_required_float(wind, "speed", "wind.speed"),
                location=location,
            )
        except MalformedResponseError as exc:
            self._log.error("Unexpected payload for %s: %s", location, exc)
            raise

    def try_fetch(self, location: Location) -> FetchOutcome:
        try:
            return FetchOutcome(snapshot=self.fetch(location))
        except WeatherClientError as exc:
            return FetchOutcome(error=exc)


def _required_float(payload: dict, key: str, path: str) -> float:
    value = payload.get(key)
    if value is None:
        raise MalformedResponseError(f"Response field {path} is missing")
    # bool is an int subclass
    if isinstance(value, bool):
        raise MalformedResponseError(f"Response field {path} is not numeric: {value!r}")
    try:
        return float(value)
    except (TypeError, ValueError) as exc:
        raise MalformedResponseError(f"Response field {path} is not numeric: {value!r}") from exc


__all__ = ["OpenWeatherClient", "FetchOutcome"]
