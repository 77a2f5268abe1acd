# -*- coding: utf-8 -*-
"""
Безопасное чтение полей из JSON-ответов внешних API.

Ответу сервера не доверяем: перед каждым обращением проверяем, что
контейнер является объектом, а поле есть и имеет нужный тип. Любое
расхождение превращается в SchemaError с путём до поля.

Функции ничего не меняют в документе, повторный вызов даёт тот же результат.
"""
import json
import logging
from typing import Any, Optional, Union

from core.utils.error_handler import JsonParseError, SchemaError, log_and_raise

logger = logging.getLogger("validator")


def parse_json(raw: Union[bytes, str], source: str = "response") -> Any:
    """
    Разбирает JSON-документ.

    Args:
        raw (bytes | str): Тело ответа
        source (str): Откуда документ (для сообщения об ошибке)

    Returns:
        Any: Разобранный документ

    Raises:
        JsonParseError: документ некорректен (с номером строки и колонки)
    """
    if isinstance(raw, (bytes, bytearray)):
        try:
            raw = raw.decode("utf-8")
        except UnicodeDecodeError as e:
            log_and_raise(
                "Не удалось разобрать JSON",
                JsonParseError(f"некорректный UTF-8: {e.reason}", 1, e.start + 1),
                {"source": source},
            )
    try:
        return json.loads(raw)
    except json.JSONDecodeError as e:
        log_and_raise(
            "Не удалось разобрать JSON",
            JsonParseError(e.msg, e.lineno, e.colno),
            {"source": source},
        )
    except (ValueError, RecursionError) as e:
        # слишком длинное целое (лимит цифр int) или слишком глубокая вложенность
        log_and_raise(
            "Не удалось разобрать JSON",
            JsonParseError(str(e) or type(e).__name__),
            {"source": source},
        )


def is_object(value: Any) -> bool:
    return isinstance(value, dict)


def is_number(value: Any) -> bool:
    # bool в Python является подклассом int, в JSON это разные типы
    return isinstance(value, (int, float)) and not isinstance(value, bool)


def is_integer(value: Any) -> bool:
    return isinstance(value, int) and not isinstance(value, bool)


def is_string(value: Any) -> bool:
    return isinstance(value, str)


def get_object_field(obj: Any, key: str) -> Optional[Any]:
    """Возвращает obj[key] или None, если obj не объект или поля нет."""
    if not is_object(obj):
        return None
    return obj.get(key)


def _schema_failure(container_name: str, key: str):
    path = f"{container_name}.{key}" if container_name != "root" else key
    log_and_raise(
        f"{container_name} не содержит {key}",
        SchemaError(path, f"{container_name} не содержит {key}"),
        {"path": path},
    )


def _check_container(container: Any, container_name: str):
    if not is_object(container):
        log_and_raise(
            f"Не найден объект {container_name}",
            SchemaError(container_name, f"{container_name} не является объектом"),
            {"path": container_name},
        )


def expect_object(container: Any, key: str, container_name: str = "root") -> dict:
    """
    Возвращает вложенный объект container[key].

    Args:
        container (dict): Объект-контейнер
        key (str): Имя поля
        container_name (str): Имя контейнера для сообщений (путь)

    Returns:
        dict: Вложенный объект

    Raises:
        SchemaError: контейнер не объект, поля нет или оно не объект
    """
    _check_container(container, container_name)
    value = get_object_field(container, key)
    if not is_object(value):
        _schema_failure(container_name, key)
    return value


def expect_number(container: Any, key: str, container_name: str = "root") -> Union[int, float]:
    """Число (целое или дробное) из container[key]."""
    _check_container(container, container_name)
    value = get_object_field(container, key)
    if not is_number(value):
        _schema_failure(container_name, key)
    return value


def expect_integer(container: Any, key: str, container_name: str = "root") -> int:
    """Целое число из container[key]."""
    _check_container(container, container_name)
    value = get_object_field(container, key)
    if not is_integer(value):
        _schema_failure(container_name, key)
    return value


def expect_string(container: Any, key: str, container_name: str = "root") -> str:
    """Строка из container[key]."""
    _check_container(container, container_name)
    value = get_object_field(container, key)
    if not is_string(value):
        _schema_failure(container_name, key)
    return value


def expect_array_number(container: Any, key: str, index: int = 0, container_name: str = "root") -> Union[int, float]:
    """
    Число из массива container[key][index].

    Open-Meteo отдаёт daily-поля массивами по дням, при forecast_days=1
    нужен элемент 0.
    """
    _check_container(container, container_name)
    array = get_object_field(container, key)
    if not isinstance(array, list) or not (0 <= index < len(array)) or not is_number(array[index]):
        _schema_failure(container_name, key)
    return array[index]
