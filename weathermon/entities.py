from __future__ import annotations

from dataclasses import dataclass


@dataclass(frozen=True)
class Location:
    """A city/country pair used as the lookup key for a weather query.

    Equality and hashing are structural and case-sensitive.
    """

    city: str
    country: str

    def __str__(self) -> str:
        return f"{self.city}, {self.country}"


@dataclass(frozen=True)
class WeatherSnapshot:
    """Current conditions for a location.

    Values are stored in metric units:
    - temperature in Celsius
    - humidity in percent
    - wind speed in metres per second (m/s)
    """

    temperature: float
    humidity: float
    wind_speed: float
    location: Location

    def __str__(self) -> str:
        return (
            f"Location: {self.location}\n"
            f"Temperature: {self.temperature}°C\n"
            f"Humidity: {self.humidity}%\n"
            f"Wind Speed: {self.wind_speed} m/s"
        )


__all__ = ["Location", "WeatherSnapshot"]
