# -*- coding: utf-8 -*-
"""
HTTP-клиент для внешних API (ipinfo.io, Open-Meteo).

Поддерживает:
- Один синхронный GET: fetch(url) -> bytes
- Накопление тела ответа по кускам в ResponseBuffer
- Проверку кода ответа (только 200)
- fetch_json(url): запрос + разбор JSON
"""
import logging

import requests

from core.utils.error_handler import (
    HttpStatusError,
    NetworkError,
    TransportInitError,
    log_and_raise,
)
from core.utils.response_buffer import RESPONSE_INITIAL_CAPACITY, ResponseBuffer
from core.utils.validator import parse_json

logger = logging.getLogger("api_client")

# === КОНФИГУРАЦИЯ API ===
API_TIMEOUT = 30  # секунд
CHUNK_SIZE = 16 * 1024  # байт
RESPONSE_CODE_OK = 200
USER_AGENT = "WeatherToday/1.0"


def _perform(session: requests.Session, url: str, buffer: ResponseBuffer, timeout: float) -> int:
    """
    Выполняет GET и передаёт тело ответа в buffer.write по кускам.

    Returns:
        int: HTTP-код ответа
    """
    with session.get(url, stream=True, timeout=timeout) as response:
        for chunk in response.iter_content(chunk_size=CHUNK_SIZE):
            buffer.write(chunk)
        return response.status_code


def fetch(url: str, timeout: float = API_TIMEOUT, initial_capacity: int = RESPONSE_INITIAL_CAPACITY) -> bytes:
    """
    Получает тело ответа целиком.

    Сессия requests создаётся и закрывается внутри вызова,
    между вызовами состояние не хранится.

    Args:
        url (str): Адрес запроса
        timeout (float): Таймаут в секундах
        initial_capacity (int): Начальная ёмкость буфера

    Returns:
        bytes: Тело ответа

    Raises:
        TransportInitError: URL не подходит для запроса
        NetworkError: ошибка соединения или чтения
        HttpStatusError: код ответа не 200
        BufferOverflowError, AllocationError: ошибки буфера
    """
    buffer = ResponseBuffer(initial_capacity)

    with requests.Session() as session:
        session.headers["User-Agent"] = USER_AGENT
        try:
            status_code = _perform(session, url, buffer, timeout)
        except (requests.exceptions.MissingSchema,
                requests.exceptions.InvalidSchema,
                requests.exceptions.InvalidURL) as e:
            log_and_raise(f"Не удалось подготовить запрос к {url}", TransportInitError(str(e)), {"url": url})
        except requests.exceptions.RequestException as e:
            log_and_raise(f"Не удалось получить данные с {url}", NetworkError(str(e)), {"url": url})

    if status_code != RESPONSE_CODE_OK:
        log_and_raise(
            f"Сервер ответил кодом {status_code}",
            HttpStatusError(url, status_code),
            {"url": url},
        )

    body = buffer.finalize()
    logger.info(f"✅ Получено {len(body)} байт с {url}")
    return body


def fetch_json(url: str, timeout: float = API_TIMEOUT):
    """Удобная функция: fetch + разбор JSON."""
    return parse_json(fetch(url, timeout=timeout), source=url)
