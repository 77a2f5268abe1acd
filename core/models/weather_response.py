# core/models/weather_response.py
from dataclasses import dataclass
from typing import Union


@dataclass(frozen=True)
class Measurement:
    value: Union[int, float]
    unit: str  # как прислал API: "°C", "%"


@dataclass(frozen=True)
class WeatherReport:
    temperature: Measurement
    apparent_temperature: Measurement
    maximum_temperature: Measurement  # daily[0]
    minimum_temperature: Measurement  # daily[0]
    relative_humidity: Measurement
