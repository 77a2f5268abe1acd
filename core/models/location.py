# core/models/location.py
from dataclasses import dataclass


@dataclass(frozen=True)
class Location:
    """Координаты. Location() = (0, 0) означает «неизвестно», это обычное значение по умолчанию."""
    latitude: float = 0.0
    longitude: float = 0.0
