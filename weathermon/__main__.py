#!/usr/bin/env python
"""Command-line entry point for the weather monitor."""
from __future__ import annotations

import logging
import sys

from .errors import ImproperlyConfigured
from .logging_setup import configure_logging
from .providers.openweather import OpenWeatherClient
from .settings import Settings
from .shell import InteractiveShell


logger = logging.getLogger(__name__)


def main() -> int:
    try:
        settings = Settings.from_env()
    except ImproperlyConfigured as exc:
        sys.stderr.write(f"Configuration error: {exc}\n")
        return 2

    configure_logging(settings.log_level)
    if not settings.api_key:
        logger.warning("OPENWEATHER_API_KEY is not set; requests will be rejected upstream")

    with OpenWeatherClient.from_settings(settings) as client:
        shell = InteractiveShell(client)
        try:
            shell.run()
        except SystemExit as exc:
            return exc.code if isinstance(exc.code, int) else 0
    return 0


if __name__ == "__main__":
    sys.exit(main())
