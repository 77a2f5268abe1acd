# -*- coding: utf-8 -*-
"""
Чтение погодного отчёта из ответа Open-Meteo.

Поля проверяются строго по порядку, первая же ошибка останавливает разбор:
current → current_units → температура → ощущаемая → daily → daily_units →
максимум → минимум → влажность.
"""

import logging

from core.models.weather_response import Measurement, WeatherReport
from core.utils.validator import (
    expect_array_number,
    expect_integer,
    expect_number,
    expect_object,
    expect_string,
)

logger = logging.getLogger("report_reader")


def read_weather_report(document) -> WeatherReport:
    """
    Собирает WeatherReport из разобранного JSON.

    Raises:
        SchemaError: первое отсутствующее или неверно типизированное поле
    """
    current = expect_object(document, "current")
    current_units = expect_object(document, "current_units")

    temperature = Measurement(
        expect_number(current, "temperature_2m", "current"),
        expect_string(current_units, "temperature_2m", "current_units"),
    )
    apparent_temperature = Measurement(
        expect_number(current, "apparent_temperature", "current"),
        expect_string(current_units, "apparent_temperature", "current_units"),
    )

    daily = expect_object(document, "daily")
    daily_units = expect_object(document, "daily_units")

    maximum_temperature = Measurement(
        expect_array_number(daily, "temperature_2m_max", 0, "daily"),
        expect_string(daily_units, "temperature_2m_max", "daily_units"),
    )
    minimum_temperature = Measurement(
        expect_array_number(daily, "temperature_2m_min", 0, "daily"),
        expect_string(daily_units, "temperature_2m_min", "daily_units"),
    )

    relative_humidity = Measurement(
        expect_integer(current, "relative_humidity_2m", "current"),
        expect_string(current_units, "relative_humidity_2m", "current_units"),
    )

    logger.info("✅ Отчёт о погоде прочитан")
    return WeatherReport(
        temperature=temperature,
        apparent_temperature=apparent_temperature,
        maximum_temperature=maximum_temperature,
        minimum_temperature=minimum_temperature,
        relative_humidity=relative_humidity,
    )
