# -*- coding: utf-8 -*-
"""
Растущий буфер для тела HTTP-ответа.

Транспорт отдаёт тело кусками (chunk), буфер складывает их в заранее
выделенный массив и удваивает ёмкость, когда место заканчивается.
Длина (size) и ёмкость (capacity) хранятся отдельно, чтобы политику
роста можно было проверить тестами.

Использование:
>>> buffer = ResponseBuffer()
>>> buffer.write(b'{"loc": "55.75,37.62"}')
22
>>> buffer.finalize()
b'{"loc": "55.75,37.62"}'
"""

import logging
import sys
from typing import Optional

from core.utils.error_handler import AllocationError, BufferOverflowError, log_and_raise

logger = logging.getLogger("response_buffer")

# === КОНФИГУРАЦИЯ ===
RESPONSE_INITIAL_CAPACITY = 1024  # байт
MAX_BUFFER_SIZE = sys.maxsize  # максимальный представимый размер на платформе


def next_capacity(capacity: int, required: int, max_size: int = MAX_BUFFER_SIZE) -> int:
    """
    Считает новую ёмкость: удваивает, пока она не станет больше required.

    Удвоение насыщается на max_size. Вызывающий код гарантирует, что
    required < max_size, иначе цикл не завершится.

    Args:
        capacity (int): Текущая ёмкость
        required (int): Сколько байт должно поместиться
        max_size (int): Максимальный размер

    Returns:
        int: Новая ёмкость (> required)
    """
    while True:
        if not capacity:
            capacity = 1
        elif capacity > max_size // 2:
            capacity = max_size
        else:
            capacity *= 2
        if required < capacity:
            return capacity


class ResponseBuffer:
    """Буфер ответа: массив байт, длина и ёмкость."""

    def __init__(self, initial_capacity: int = RESPONSE_INITIAL_CAPACITY, max_size: int = MAX_BUFFER_SIZE):
        self.max_size = max_size
        self.size = 0
        self.finalized = False
        try:
            self._data = bytearray(initial_capacity)
        except MemoryError as e:
            log_and_raise(
                f"Не удалось выделить начальный буфер {initial_capacity} байт",
                AllocationError(str(e) or "MemoryError"),
            )
        self.capacity = initial_capacity

    def __len__(self) -> int:
        return self.size

    def write(self, chunk: bytes, item_size: int = 1, count: Optional[int] = None) -> int:
        """
        Callback записи: добавляет кусок тела ответа.

        Args:
            chunk (bytes): Данные от транспорта
            item_size (int): Размер элемента в байтах
            count (int): Количество элементов (по умолчанию len(chunk) // item_size)

        Returns:
            int: Сколько байт записано

        Raises:
            BufferOverflowError: item_size * count или size + item_size * count
                не помещается в max_size
            AllocationError: не удалось выделить память под новую ёмкость
        """
        if item_size <= 0:
            raise ValueError(f"item_size должен быть положительным: {item_size}")
        if count is None:
            count = len(chunk) // item_size

        # Проверяем до умножения и сложения, буфер при этом не трогаем
        if count >= self.max_size // item_size or self.size >= self.max_size - item_size * count:
            log_and_raise(
                "Переполнение ёмкости буфера",
                BufferOverflowError(f"size={self.size}, item_size={item_size}, count={count}"),
            )

        n = item_size * count
        if n != len(chunk):
            raise ValueError(f"Транспорт заявил {n} байт, передано {len(chunk)}")

        if self.size + n >= self.capacity:
            capacity = next_capacity(self.capacity, self.size + n, self.max_size)
            try:
                data = bytearray(capacity)
            except (MemoryError, OverflowError) as e:
                log_and_raise(
                    f"Не удалось увеличить ёмкость буфера до {capacity}",
                    AllocationError(str(e) or type(e).__name__),
                )
            data[:self.size] = memoryview(self._data)[:self.size]
            self._data = data
            self.capacity = capacity
            logger.debug(f"📈 Ёмкость буфера: {capacity} байт")

        self._data[self.size:self.size + n] = chunk
        self.size += n
        return n

    def getvalue(self) -> bytes:
        """Возвращает записанные байты (без терминатора)."""
        return bytes(memoryview(self._data)[:self.size])

    def finalize(self) -> bytes:
        """
        Ужимает буфер до size + 1 и дописывает нулевой байт.

        Если ужать не удалось, остаётся исходный (больший) массив,
        это не считается ошибкой.

        Returns:
            bytes: Тело ответа
        """
        try:
            data = bytearray(self.size + 1)
            data[:self.size] = memoryview(self._data)[:self.size]
            self._data = data
            self.capacity = self.size + 1
        except MemoryError:
            logger.warning(f"⚠️  Не удалось ужать буфер до {self.size + 1} байт, оставляем {self.capacity}")
        self._data[self.size] = 0
        self.finalized = True
        return self.getvalue()
