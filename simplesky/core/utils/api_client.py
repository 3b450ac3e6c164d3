# -*- coding: utf-8 -*-
"""
Обёртка для сервиса прогнозов (Dark Sky Forecast API).
Поддерживает:
- Прогноз на текущий момент: /<lat>,<lng>
- Запрос "time machine": /<lat>,<lng>,<timestamp>
- Параметры lang, units, exclude, extend через QueryOptions
"""

import logging
from typing import Any, Dict, Optional

import httpx

from simplesky.config.sky_config import SkyConfig
from simplesky.core.models.forecast_response import Coordinates, QueryOptions
from simplesky.core.utils.error_handler import ConnectionError, log_and_raise

logger = logging.getLogger("api_client")

# Сервис отдаёт gzip, httpx распаковывает его прозрачно
DEFAULT_HEADERS = {
    "Accept": "application/json",
    "Accept-Encoding": "gzip, deflate",
}


def build_forecast_url(config: SkyConfig, coordinates: Coordinates, options: QueryOptions) -> str:
    """Собирает URL прогноза, при наличии timestamp это запрос "time machine"."""
    point = coordinates.as_path()
    if options.timestamp is not None:
        point = f"{point},{options.timestamp}"
    url = f"{config.forecast_url.rstrip('/')}/{config.forecast_api_key}/{point}"
    query = options.query_string
    return f"{url}?{query}" if query else url


def _masked(url: str, secret: str) -> str:
    return url.replace(secret, "***") if secret else url


def open_http_client(config: SkyConfig, transport: Optional[httpx.AsyncBaseTransport] = None) -> httpx.AsyncClient:
    """HTTP-клиент на один публичный вызов (геокодирование + прогноз)."""
    return httpx.AsyncClient(
        headers=DEFAULT_HEADERS,
        timeout=httpx.Timeout(config.timeout),
        transport=transport
    )


async def fetch_forecast(
    http: httpx.AsyncClient,
    config: SkyConfig,
    coordinates: Coordinates,
    options: QueryOptions
) -> Dict[str, Any]:
    """
    Запрашивает прогноз для точки.

    Args:
        http (httpx.AsyncClient): Открытый HTTP-клиент
        config (SkyConfig): Конфигурация с ключом сервиса прогнозов
        coordinates (Coordinates): Точка
        options (QueryOptions): Параметры запроса

    Returns:
        dict: Разобранный JSON без проверки HTTP-статуса
    """
    url = build_forecast_url(config, coordinates, options)
    logger.debug(f"🌐 Запрос прогноза: {_masked(url, config.forecast_api_key)}")
    context = {"lat": coordinates.latitude, "lon": coordinates.longitude, "timestamp": options.timestamp}

    try:
        response = await http.get(url)
    except httpx.RequestError as e:
        log_and_raise(
            "❌ Сервис прогнозов недоступен",
            ConnectionError("unable to connect to forecast service", service="forecast"),
            context=context,
            cause=e
        )

    try:
        body = response.json()
    except ValueError as e:
        log_and_raise(
            "❌ Ответ сервиса прогнозов не является JSON",
            ConnectionError("invalid response from forecast service", service="forecast"),
            context={**context, "http_status": response.status_code},
            cause=e
        )

    if response.status_code != httpx.codes.OK:
        logger.warning(f"⚠️ Сервис прогнозов ответил {response.status_code} для ({coordinates.latitude}, {coordinates.longitude})")
    else:
        logger.info(f"✅ Прогноз получен для ({coordinates.latitude}, {coordinates.longitude})")
    return body
