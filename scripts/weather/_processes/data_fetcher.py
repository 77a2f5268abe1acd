# -*- coding: utf-8 -*-
"""
Получение данных погоды через api_client.
"""

import logging

from config.app_config import WEATHER_URL_FORMAT
from core.models.location import Location
from core.utils.api_client import API_TIMEOUT, fetch
from core.utils.validator import parse_json

logger = logging.getLogger("data_fetcher")


def build_weather_url(location: Location, url_format: str = WEATHER_URL_FORMAT) -> str:
    """
    Подставляет координаты в шаблон URL Open-Meteo.

    repr(float) не зависит от локали и не теряет точность.
    """
    return url_format.format(latitude=repr(float(location.latitude)), longitude=repr(float(location.longitude)))


def fetch_weather_data(location: Location, url_format: str = WEATHER_URL_FORMAT, timeout: float = API_TIMEOUT) -> dict:
    """
    Получает погодные данные.

    Args:
        location (Location): Координаты
        url_format (str): Шаблон URL
        timeout (float): Таймаут запроса

    Returns:
        dict: Разобранный JSON-ответ
    """
    data = parse_json(fetch(build_weather_url(location, url_format), timeout=timeout), source="open_meteo")
    logger.info(f"✅ Данные получены для ({location.latitude}, {location.longitude})")
    return data
