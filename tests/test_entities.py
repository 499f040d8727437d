from __future__ import annotations

import dataclasses

import pytest

from weathermon.entities import Location, WeatherSnapshot


def test_location_equality_is_structural_and_case_sensitive() -> None:
    assert Location("London", "UK") == Location("London", "UK")
    assert hash(Location("London", "UK")) == hash(Location("London", "UK"))
    assert Location("London", "UK") != Location("london", "UK")
    assert Location("London", "UK") != Location("London", "CA")


def test_location_is_usable_as_dict_key() -> None:
    seen = {Location("Paris", "FR"): 1}

    assert seen[Location("Paris", "FR")] == 1


def test_location_is_immutable() -> None:
    location = Location("Oslo", "NO")

    with pytest.raises(dataclasses.FrozenInstanceError):
        location.city = "Bergen"  # type: ignore[misc]


def test_snapshot_renders_display_block() -> None:
    snapshot = WeatherSnapshot(temperature=15.0, humidity=72.0, wind_speed=4.1, location=Location("London", "UK"))

    assert str(snapshot) == (
        "Location: London, UK\n"
        "Temperature: 15.0°C\n"
        "Humidity: 72.0%\n"
        "Wind Speed: 4.1 m/s"
    )
