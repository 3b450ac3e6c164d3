# simplesky/core/utils/validator.py
from typing import Optional

from simplesky.core.models.forecast_response import Coordinates
from simplesky.core.utils.error_handler import InvalidArgumentsError


def validate_coordinates(lat, lon) -> bool:
    """Проверяет, что координаты в допустимом диапазоне."""
    try:
        lat, lon = float(lat), float(lon)
    except (TypeError, ValueError):
        return False
    return -90 <= lat <= 90 and -180 <= lon <= 180


def normalize_location(location: Optional[str]) -> Optional[str]:
    """Пустая строка или строка из пробелов считается отсутствующей локацией."""
    if location is None:
        return None
    if not isinstance(location, str):
        raise InvalidArgumentsError("location must be a string")
    location = location.strip()
    return location or None


def coordinates_from_args(lat, lng) -> Coordinates:
    """
    Собирает Coordinates из пары аргументов.

    Raises:
        InvalidArgumentsError: если одна из координат не задана или вне диапазона
    """
    if lat is None or lng is None:
        raise InvalidArgumentsError("incomplete input parameters")
    if not validate_coordinates(lat, lng):
        raise InvalidArgumentsError(f"coordinates out of range: lat={lat}, lng={lng}")
    return Coordinates(float(lat), float(lng))
