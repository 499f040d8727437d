"""Interactive text menu for looking up current weather."""
from __future__ import annotations

import logging
import re
import sys
from enum import Enum
from typing import Optional, TextIO

from .entities import Location
from .errors import InputFormatError, WeatherClientError
from .providers.base import WeatherClient


logger = logging.getLogger(__name__)

TERMINAL_WIDTH = 145
BANNER_SEPARATOR = "=" * 138
RESULT_SEPARATOR = "=" * 33
WELCOME_MESSAGE = "Welcome to Weather Monitoring System created by http-UmerAhsan"
GOODBYE_MESSAGE = "Thank you for using our weather monitoring system! Stay weather aware!"

MENU_VIEW_WEATHER = 1
MENU_EXIT = 2

_CHOICE_RE = re.compile(r"[+-]?[0-9]+")


class ShellState(str, Enum):
    AWAITING_MENU_CHOICE = "awaiting_menu_choice"
    AWAITING_CITY = "awaiting_city"
    AWAITING_COUNTRY = "awaiting_country"
    TERMINATED = "terminated"


class _EndOfInput(Exception):
    """Input stream closed while a line was expected."""


def centered(message: str, width: int = TERMINAL_WIDTH) -> str:
    padding = max(0, (width - len(message)) // 2)
    return " " * padding + message


def parse_choice(raw: str) -> int:
    # ASCII digits only, no surrounding whitespace or underscores
    if not _CHOICE_RE.fullmatch(raw):
        raise InputFormatError(f"Menu choice must be a number, got {raw!r}")
    return int(raw)


class InteractiveShell:
    """Reads menu choices from ``stdin`` and prints weather to ``stdout``.

    The loop only ends through :class:`SystemExit` with status 0, raised on
    the exit choice, on end of input, or on Ctrl-C.
    """

    def __init__(
        self,
        client: WeatherClient,
        *,
        stdin: Optional[TextIO] = None,
        stdout: Optional[TextIO] = None,
    ) -> None:
        self.client = client
        self.stdin = stdin or sys.stdin
        self.stdout = stdout or sys.stdout
        self.state = ShellState.AWAITING_MENU_CHOICE

    # -- Public API -----------------------------------------------------
    def run(self) -> None:
        self.display_welcome()
        try:
            while True:
                self._menu_step()
        except (_EndOfInput, KeyboardInterrupt):
            logger.info("Input closed, leaving the menu")
            self._write("")
            self._terminate()

    def view_current_weather(self) -> None:
        self._write("")
        self.state = ShellState.AWAITING_CITY
        city = self._prompt("Enter city name: ")
        self.state = ShellState.AWAITING_COUNTRY
        country = self._prompt("Enter country name: ")
        self.state = ShellState.AWAITING_MENU_CHOICE

        location = Location(city, country)
        try:
            snapshot = self.client.fetch(location)
        except WeatherClientError as exc:
            logger.info("Lookup for %s failed (%s): %s", location, type(exc).__name__, exc)
            self._write(f"Error fetching weather data: {exc}")
            return

        self._write(RESULT_SEPARATOR)
        self._write(f"Current Weather:\n{snapshot}")
        self._write(RESULT_SEPARATOR)

    def display_welcome(self) -> None:
        self._banner(WELCOME_MESSAGE)

    def display_goodbye(self) -> None:
        self._banner(GOODBYE_MESSAGE)

    # -- Helpers --------------------------------------------------------
    def _menu_step(self) -> None:
        self.state = ShellState.AWAITING_MENU_CHOICE
        self._write("1. View Current Weather")
        self._write("2. Exit")
        raw = self._prompt("Enter Choice: ")
        try:
            choice = parse_choice(raw)
        except InputFormatError:
            self._write("Invalid choice, Try again!")
            return

        if choice == MENU_VIEW_WEATHER:
            self.view_current_weather()
        elif choice == MENU_EXIT:
            self._terminate()
        else:
            self._write("Invalid choice, try again.")

    def _terminate(self) -> None:
        self.display_goodbye()
        self.state = ShellState.TERMINATED
        raise SystemExit(0)

    def _prompt(self, text: str) -> str:
        self.stdout.write(text)
        self.stdout.flush()
        line = self.stdin.readline()
        if not line:
            raise _EndOfInput()
        return line.rstrip("\r\n")

    def _banner(self, message: str) -> None:
        self._write(BANNER_SEPARATOR)
        self._write(centered(message))
        self._write(BANNER_SEPARATOR)

    def _write(self, text: str) -> None:
        self.stdout.write(text + "\n")


__all__ = ["InteractiveShell", "ShellState", "centered", "parse_choice", "TERMINAL_WIDTH"]
