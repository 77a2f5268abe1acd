# -*- coding: utf-8 -*-
"""
Скрипт прогноза погоды на сегодня для текущего местоположения.

Местоположение определяется по IP (ipinfo.io), погода берётся
из Open-Meteo. Отчёт печатается в stdout, ошибки уходят в лог (stderr).
Код выхода: 0, если всё получилось, 1, если был хотя бы один сбой.
"""

import logging
import sys
from typing import Optional, TextIO

from config.app_config import AppConfig
from config.logging_config import setup_logging
from core.models.location import Location
from core.utils.coordinate_manager import get_location
from core.utils.error_handler import WeatherReportError, log_exception
from scripts.weather._processes.data_fetcher import fetch_weather_data
from scripts.weather._processes.formatter import format_location, format_weather_report
from scripts.weather._processes.report_reader import read_weather_report

logger = logging.getLogger("weather_today_script")

EXIT_SUCCESS = 0
EXIT_FAILURE = 1


def run(out: Optional[TextIO] = None) -> int:
    """
    Локация → погода → отчёт.

    Сбой локации не останавливает скрипт: берётся Location() (0, 0),
    но код выхода всё равно будет EXIT_FAILURE.

    Returns:
        int: Код выхода
    """
    out = out or sys.stdout
    status = EXIT_SUCCESS

    try:
        location = get_location()
    except WeatherReportError as e:
        log_exception(e, "Не удалось определить местоположение")
        location = Location()
        status = EXIT_FAILURE

    out.write(format_location(location) + "\n")

    try:
        document = fetch_weather_data(location)
        out.write("Weather:\n")
        report = read_weather_report(document)
    except WeatherReportError as e:
        log_exception(e, "Не удалось получить погоду")
        return EXIT_FAILURE

    out.write(format_weather_report(report))
    logger.info("✅ Отчёт выведен")
    return status


def main():
    config = AppConfig.load()
    setup_logging(config.log_level, config.log_dir)
    logger.info("🚀 Запуск скрипта прогноза погоды")
    sys.exit(run())


if __name__ == "__main__":
    main()
