# -*- coding: utf-8 -*-
"""
Форматирование отчёта для консоли.
"""

from core.models.location import Location
from core.models.weather_response import WeatherReport


def format_location(location: Location) -> str:
    return (
        "Location:\n"
        f"\tLatitude: {location.latitude:g}\n"
        f"\tLongitude: {location.longitude:g}\n"
    )


def format_weather_report(report: WeatherReport) -> str:
    """
    Текстовый блок погоды (без заголовка "Weather:").

    Числа печатаются как %g, влажность как целое.
    """
    lines = [
        ("Temperature", report.temperature),
        ("Apparent Temperature", report.apparent_temperature),
        ("Maximum Temperature", report.maximum_temperature),
        ("Minimum Temperature", report.minimum_temperature),
    ]
    text = "".join(f"\t{label}: {m.value:g}{m.unit}\n" for label, m in lines)
    text += f"\tRelative Humidity: {report.relative_humidity.value:d}{report.relative_humidity.unit}\n"
    return text
