# -*- coding: utf-8 -*-
"""
Утилита для централизованной обработки ошибок.

Каждый сбой описывается своим классом исключения. Ошибка логируется
там, где она обнаружена (log_and_raise), и поднимается до скрипта,
который решает, чем завершить процесс.
"""

import logging
from typing import Optional

logger = logging.getLogger("error_handler")


class WeatherReportError(Exception):
    """Базовая ошибка цепочки «локация → погода → отчёт»."""


class TransportInitError(WeatherReportError):
    """Запрос невозможно подготовить (некорректный или неподдерживаемый URL)."""


class NetworkError(WeatherReportError):
    """Ошибка транспортного уровня (DNS, соединение, таймаут)."""


class HttpStatusError(WeatherReportError):
    """Сервер ответил кодом, отличным от 200."""

    def __init__(self, url: str, status_code: int):
        super().__init__(f"сервер {url} ответил кодом {status_code}")
        self.url = url
        self.status_code = status_code


class BufferOverflowError(WeatherReportError):
    """Размер данных превышает максимально представимый размер буфера."""


class AllocationError(WeatherReportError):
    """Не удалось выделить память под буфер."""


class JsonParseError(WeatherReportError):
    """Ответ не является корректным JSON."""

    def __init__(self, message: str, line: int = 0, column: int = 0):
        super().__init__(f"{line}:{column}: {message}")
        self.line = line
        self.column = column


class SchemaError(WeatherReportError):
    """В документе нет ожидаемого поля или у поля другой тип."""

    def __init__(self, path: str, message: Optional[str] = None):
        super().__init__(message or f"нет поля {path}")
        self.path = path


class LocationFormatError(WeatherReportError):
    """Строка координат не разбирается как "<lat>,<lon>"."""

    def __init__(self, value):
        super().__init__(f"не удалось разобрать координаты: {value!r}")
        self.value = value


def log_and_raise(message: str, exception: Exception, context: Optional[dict] = None):
    """
    Логирует ошибку одной строкой и выбрасывает её дальше.

    Args:
        message (str): Пользовательское сообщение
        exception (Exception): Исключение, которое обрабатывается
        context (dict): Дополнительный контекст (например, url, path)
    """
    log_context = f" | Контекст: {context}" if context else ""
    logger.error(f"❌ {message}{log_context} | Ошибка: {exception}")
    raise exception


def log_exception(exception: Exception, message: str = "Необработанное исключение", context: Optional[dict] = None):
    """
    Просто логирует исключение без выбрасывания.

    Args:
        exception (Exception): Исключение
        message (str): Описание
        context (dict): Контекст
    """
    log_context = f" | Контекст: {context}" if context else ""
    logger.error(f"❌ {message}{log_context} | Ошибка: {exception}")
