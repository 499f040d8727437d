"""Runtime configuration for the weather monitor, read from the environment."""
from __future__ import annotations

import logging
import os
from dataclasses import dataclass
from typing import Mapping, Optional

from .errors import ImproperlyConfigured

DEFAULT_BASE_URL = "https://api.openweathermap.org/data/2.5/weather"
DEFAULT_TIMEOUT = 10.0
DEFAULT_LOG_LEVEL = "WARNING"


def env(name: str, default: str | None = None, environ: Optional[Mapping[str, str]] = None) -> str:
    """Fetch environment variables while allowing explicit defaults."""

    source = os.environ if environ is None else environ
    value = source.get(name, default)
    if value is None:
        raise ImproperlyConfigured(f"Environment variable {name} is required")
    return value


@dataclass(frozen=True)
class Settings:
    api_key: str = ""
    base_url: str = DEFAULT_BASE_URL
    timeout: float = DEFAULT_TIMEOUT
    units: str = "metric"
    log_level: str = DEFAULT_LOG_LEVEL

    @classmethod
    def from_env(cls, environ: Optional[Mapping[str, str]] = None) -> "Settings":
        raw_timeout = env("OPENWEATHER_TIMEOUT", str(DEFAULT_TIMEOUT), environ)
        try:
            timeout = float(raw_timeout)
        except ValueError as exc:
            raise ImproperlyConfigured(f"OPENWEATHER_TIMEOUT must be a number, got {raw_timeout!r}") from exc
        if timeout <= 0:
            raise ImproperlyConfigured("OPENWEATHER_TIMEOUT must be positive")

        log_level = env("WEATHERMON_LOG_LEVEL", DEFAULT_LOG_LEVEL, environ).upper()
        if not isinstance(logging.getLevelName(log_level), int):
            raise ImproperlyConfigured(f"Unknown log level {log_level!r}")

        return cls(
            api_key=env("OPENWEATHER_API_KEY", "", environ),
            base_url=env("OPENWEATHER_BASE_URL", DEFAULT_BASE_URL, environ),
            timeout=timeout,
            log_level=log_level,
        )


__all__ = ["Settings", "env", "DEFAULT_BASE_URL", "DEFAULT_TIMEOUT"]
