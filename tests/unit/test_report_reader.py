# -*- coding: utf-8 -*-
"""
Тесты для scripts/weather/_processes/report_reader.py и formatter.py
"""
import copy

import pytest

from core.models.location import Location
from core.models.weather_response import Measurement
from core.utils.error_handler import SchemaError
from scripts.weather._processes.formatter import format_location, format_weather_report
from scripts.weather._processes.report_reader import read_weather_report


def make_document():
    return {
        "latitude": 37.4,
        "longitude": -122.1,
        "current": {"temperature_2m": 13.2, "apparent_temperature": 11.85, "relative_humidity_2m": 71},
        "current_units": {"temperature_2m": "°C", "apparent_temperature": "°C", "relative_humidity_2m": "%"},
        "daily": {"time": ["2025-10-17"], "temperature_2m_max": [18.5], "temperature_2m_min": [9]},
        "daily_units": {"temperature_2m_max": "°C", "temperature_2m_min": "°C"},
    }


def test_read_weather_report():
    report = read_weather_report(make_document())
    assert report.temperature == Measurement(13.2, "°C")
    assert report.apparent_temperature == Measurement(11.85, "°C")
    assert report.maximum_temperature == Measurement(18.5, "°C")
    assert report.minimum_temperature == Measurement(9, "°C")
    assert report.relative_humidity == Measurement(71, "%")


def test_read_is_idempotent():
    document = make_document()
    snapshot = copy.deepcopy(document)
    assert read_weather_report(document) == read_weather_report(document)
    assert document == snapshot


@pytest.mark.parametrize("container, key, path", [
    ("current_units", "temperature_2m", "current_units.temperature_2m"),
    ("current", "apparent_temperature", "current.apparent_temperature"),
    ("daily", "temperature_2m_max", "daily.temperature_2m_max"),
    ("daily_units", "temperature_2m_min", "daily_units.temperature_2m_min"),
    ("current", "relative_humidity_2m", "current.relative_humidity_2m"),
])
def test_missing_field(container, key, path):
    document = make_document()
    del document[container][key]
    with pytest.raises(SchemaError) as excinfo:
        read_weather_report(document)
    assert excinfo.value.path == path


@pytest.mark.parametrize("missing", ["current", "current_units", "daily", "daily_units"])
def test_missing_section(missing):
    document = make_document()
    del document[missing]
    with pytest.raises(SchemaError) as excinfo:
        read_weather_report(document)
    assert excinfo.value.path == missing


def test_first_failure_wins():
    # current-поля проверяются раньше daily
    document = make_document()
    del document["daily"]
    del document["current_units"]["temperature_2m"]
    with pytest.raises(SchemaError) as excinfo:
        read_weather_report(document)
    assert excinfo.value.path == "current_units.temperature_2m"

    # влажность проверяется последней
    document = make_document()
    document["current"]["relative_humidity_2m"] = 71.5
    del document["daily_units"]["temperature_2m_min"]
    with pytest.raises(SchemaError) as excinfo:
        read_weather_report(document)
    assert excinfo.value.path == "daily_units.temperature_2m_min"


def test_retyped_fields():
    document = make_document()
    document["current"]["relative_humidity_2m"] = 71.5
    with pytest.raises(SchemaError):
        read_weather_report(document)

    document = make_document()
    document["current"]["temperature_2m"] = "13.2"
    with pytest.raises(SchemaError):
        read_weather_report(document)

    document = make_document()
    document["daily"]["temperature_2m_max"] = 18.5
    with pytest.raises(SchemaError):
        read_weather_report(document)

    with pytest.raises(SchemaError) as excinfo:
        read_weather_report([make_document()])
    assert excinfo.value.path == "root"


def test_format_location():
    assert format_location(Location(37.4, -122.1)) == "Location:\n\tLatitude: 37.4\n\tLongitude: -122.1\n"
    assert format_location(Location()) == "Location:\n\tLatitude: 0\n\tLongitude: 0\n"
    # %g: шесть значащих цифр
    assert "Longitude: -122.084\n" in format_location(Location(37.422, -122.0838))


def test_format_weather_report():
    text = format_weather_report(read_weather_report(make_document()))
    assert text == (
        "\tTemperature: 13.2°C\n"
        "\tApparent Temperature: 11.85°C\n"
        "\tMaximum Temperature: 18.5°C\n"
        "\tMinimum Temperature: 9°C\n"
        "\tRelative Humidity: 71%\n"
    )


if __name__ == "__main__":
    test_read_weather_report()
    test_read_is_idempotent()
    test_first_failure_wins()
    test_retyped_fields()
    test_format_location()
    test_format_weather_report()
