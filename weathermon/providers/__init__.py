from .base import HttpWeatherClient, WeatherClient
from .openweather import FetchOutcome, OpenWeatherClient

__all__ = ["HttpWeatherClient", "WeatherClient", "FetchOutcome", "OpenWeatherClient"]
