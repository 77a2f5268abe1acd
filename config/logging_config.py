# config/logging_config.py
import logging
import logging.handlers
from pathlib import Path
from typing import Optional

from config.app_config import DEFAULT_LOG_DIR


def setup_logging(log_level: str = "INFO", log_dir: Optional[Path] = None):
    """Настраивает глобальное логирование с ротацией."""
    log_dir = Path(log_dir) if log_dir else DEFAULT_LOG_DIR
    log_dir.mkdir(parents=True, exist_ok=True)
    log_file = log_dir / "app.log"

    # Создаём root-логгер
    logger = logging.getLogger()
    logger.setLevel(getattr(logging, log_level.upper(), logging.INFO))

    # Форматтер
    formatter = logging.Formatter(
        fmt="%(asctime)s | %(levelname)-8s | %(name)-15s | %(funcName)-20s | %(message)s",
        datefmt="%Y-%m-%d %H:%M:%S"
    )

    # Обработчик для файла (с ротацией 10 МБ, 5 файлов)
    file_handler = logging.handlers.RotatingFileHandler(
        log_file,
        maxBytes=10 * 1024 * 1024,  # 10 MB
        backupCount=5,
        encoding="utf-8"
    )
    file_handler.setLevel(logging.DEBUG)
    file_handler.setFormatter(formatter)

    # Консоль (stderr): только предупреждения и ошибки, stdout занят отчётом
    console_handler = logging.StreamHandler()
    console_handler.setLevel(logging.WARNING)
    console_handler.setFormatter(formatter)

    if not logger.handlers:
        logger.addHandler(file_handler)
        logger.addHandler(console_handler)

    # Подавляем отладочные логи пула соединений requests
    logging.getLogger("urllib3").setLevel(logging.WARNING)

    logging.debug("🔧 Логирование инициализировано")
