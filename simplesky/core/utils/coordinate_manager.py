# -*- coding: utf-8 -*-
"""
Прямое геокодирование: название места → координаты.

Функции:
- Запрос к геокодеру (Google Geocoding API) по произвольной строке
- Разбор статуса ответа и первого результата
- Перевод сетевых ошибок в ConnectionError

Использование:
>>> async with httpx.AsyncClient() as http:
...     coords = await geocode_location(http, config, "Austin's Pizza Campus")
>>> coords
Coordinates(latitude=30.2870213, longitude=-97.7418409)
"""

import logging
from urllib.parse import quote

import httpx

from simplesky.config.sky_config import SkyConfig
from simplesky.core.models.forecast_response import Coordinates
from simplesky.core.utils.error_handler import (
    ConnectionError,
    InvalidArgumentsError,
    NotFoundError,
    ResolverError,
    log_and_raise,
)

logger = logging.getLogger("coordinate_manager")

# === СТАТУСЫ ГЕОКОДЕРА ===
STATUS_OK = "OK"
STATUS_ZERO_RESULTS = "ZERO_RESULTS"


def build_geocode_url(config: SkyConfig, location: str) -> str:
    return f"{config.geocode_url}?address={quote(location, safe='')}&key={config.geocoding_api_key}"


def parse_geocode_body(body) -> Coordinates:
    """
    Извлекает координаты первого результата из ответа геокодера.

    Raises:
        NotFoundError: статус ZERO_RESULTS
        ResolverError: любой другой статус или повреждённый результат
    """
    if not isinstance(body, dict):
        raise ResolverError("unexpected response from geocoding service")

    status = body.get("status")
    if status == STATUS_ZERO_RESULTS:
        raise NotFoundError("unable to find specified location", status=status)
    if status != STATUS_OK:
        details = body.get("error_message")
        message = f"geocoding service returned status {status!r}"
        if details:
            message += f": {details}"
        raise ResolverError(message, status=status)

    try:
        location = body["results"][0]["geometry"]["location"]
        return Coordinates(float(location["lat"]), float(location["lng"]))
    except (KeyError, IndexError, TypeError, ValueError):
        raise ResolverError("geocoding service returned a malformed result", status=status)


async def geocode_location(http: httpx.AsyncClient, config: SkyConfig, location: str) -> Coordinates:
    """
    Получает координаты места через геокодер.

    Args:
        http (httpx.AsyncClient): Открытый HTTP-клиент
        config (SkyConfig): Конфигурация с ключом геокодера
        location (str): Название места на естественном языке

    Returns:
        Coordinates: Широта и долгота первого результата
    """
    if not location or not location.strip():
        raise InvalidArgumentsError("incomplete input parameters")

    url = build_geocode_url(config, location)
    logger.debug(f"🌍 Геокодирование: {location!r}")
    try:
        response = await http.get(url)
    except httpx.RequestError as e:
        log_and_raise(
            "❌ Геокодер недоступен",
            ConnectionError("unable to connect to geocoding service", service="geocoding"),
            context={"location": location},
            cause=e
        )

    try:
        body = response.json()
    except ValueError as e:
        log_and_raise(
            "❌ Ответ геокодера не является JSON",
            ResolverError("unexpected response from geocoding service"),
            context={"location": location, "http_status": response.status_code},
            cause=e
        )

    try:
        coordinates = parse_geocode_body(body)
    except ResolverError as e:
        logger.warning(f"⚠️ Геокодер не вернул координаты для {location!r}: {e}")
        raise

    logger.info(f"📍 {location!r} → ({coordinates.latitude}, {coordinates.longitude})")
    return coordinates
