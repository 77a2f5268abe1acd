# config/app_config.py
import os
from dataclasses import dataclass
from pathlib import Path

from dotenv import load_dotenv

# Адреса API фиксированы, через окружение не переопределяются
LOCATION_URL = "https://ipinfo.io/json"
WEATHER_URL_FORMAT = (
    "https://api.open-meteo.com/v1/forecast"
    "?latitude={latitude}&longitude={longitude}&timezone=auto"
    "&current=temperature_2m,apparent_temperature,relative_humidity_2m"
    "&daily=temperature_2m_max,temperature_2m_min&forecast_days=1"
)
# Относительно текущего каталога: пакет может лежать в read-only site-packages
DEFAULT_LOG_DIR = Path("logs")


@dataclass
class AppConfig:
    log_level: str = "INFO"
    log_dir: Path = DEFAULT_LOG_DIR

    @classmethod
    def load(cls):
        load_dotenv()
        return cls(
            log_level=os.getenv("LOG_LEVEL", "INFO"),
            log_dir=Path(os.getenv("LOG_DIR", str(DEFAULT_LOG_DIR)))
        )
