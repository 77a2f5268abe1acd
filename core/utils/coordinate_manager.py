# -*- coding: utf-8 -*-
"""
Менеджер координат: определение местоположения по IP.

Функции:
- Разбор строки "<lat>,<lon>" (как отдаёт ipinfo.io в поле loc)
- Запрос к геолокационному API

Использование:
>>> from core.utils.coordinate_manager import parse_location_string
>>> parse_location_string("55.7558,37.6173")
Location(latitude=55.7558, longitude=37.6173)
"""

import logging
import re
from typing import Any

from config.app_config import LOCATION_URL
from core.models.location import Location
from core.utils.api_client import API_TIMEOUT, fetch_json
from core.utils.error_handler import LocationFormatError, log_and_raise
from core.utils.validator import expect_string

logger = logging.getLogger("coordinate_manager")

# Десятичное число без учёта локали: float() всегда ждёт точку
_NUMBER = r"[+-]?(?:\d+\.?\d*|\.\d+)(?:[eE][+-]?\d+)?"
# Как "%lf,%lf" у scanf: пробелы перед числами допустимы, запятая сразу после
# первого числа, хвост после второго числа игнорируется
LOCATION_PATTERN = re.compile(rf"\s*({_NUMBER}),\s*({_NUMBER})")


def parse_location_string(loc: str) -> Location:
    """
    Разбирает "<lat>,<lon>" в Location.

    Raises:
        LocationFormatError: удалось прочитать меньше двух чисел
    """
    match = LOCATION_PATTERN.match(loc)
    if not match:
        log_and_raise("Не удалось разобрать локацию", LocationFormatError(loc), {"loc": loc})
    return Location(latitude=float(match.group(1)), longitude=float(match.group(2)))


def location_from_document(document: Any) -> Location:
    """Достаёт Location из ответа ipinfo.io ({"loc": "<lat>,<lon>", ...})."""
    loc = expect_string(document, "loc")
    return parse_location_string(loc)


def get_location(url: str = LOCATION_URL, timeout: float = API_TIMEOUT) -> Location:
    """
    Определяет местоположение по IP.

    Args:
        url (str): Адрес геолокационного API
        timeout (float): Таймаут запроса

    Returns:
        Location: Координаты

    Raises:
        WeatherReportError: любой сбой запроса, разбора или формата
    """
    document = fetch_json(url, timeout=timeout)
    location = location_from_document(document)
    logger.info(f"🌍 Местоположение: lat={location.latitude}, lon={location.longitude}")
    return location
