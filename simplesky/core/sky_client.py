# -*- coding: utf-8 -*-
"""
Единый клиент погоды: геокодирование + прогноз.

Каждый публичный метод:
1. Собирает QueryOptions из конфигурации и переопределений вызова
2. Если задано название места, получает координаты через геокодер
   (переданные lat/lng при этом игнорируются)
3. Иначе использует lat/lng, а без полной пары падает с InvalidArgumentsError
   до любого сетевого запроса
4. Запрашивает прогноз и при необходимости вырезает один блок

Использование:
>>> sky = SimpleSky(SkyConfig.load())
>>> currently = await sky.get_currently("Taco Bell Las Vegas")
>>> hourly = await sky.get_hourly(lat=36.17, lng=-115.14, extend_hourly=True)
"""

import asyncio
import logging
from datetime import datetime
from typing import Any, Dict, Iterable, Optional, Union

import httpx

from simplesky.config.sky_config import SkyConfig
from simplesky.core.models.forecast_response import Coordinates, ForecastResponse, QueryOptions
from simplesky.core.utils.api_client import fetch_forecast, open_http_client
from simplesky.core.utils.coordinate_manager import geocode_location
from simplesky.core.utils.error_handler import (
    InvalidArgumentsError,
    MissingFieldError,
    UnsupportedLocationError,
)
from simplesky.core.utils.time_offset import parse_time_offset
from simplesky.core.utils.validator import coordinates_from_args, normalize_location

logger = logging.getLogger("sky_client")

# === НАБОРЫ ИСКЛЮЧАЕМЫХ БЛОКОВ ===
EXCLUDE_FOR_CURRENTLY = ("minutely", "hourly", "daily", "alerts", "flags")
EXCLUDE_FOR_HOURLY = ("currently", "minutely", "daily", "alerts", "flags")
EXCLUDE_FOR_MINUTELY = ("currently", "hourly", "daily", "alerts", "flags")
EXCLUDE_FOR_DAILY = ("currently", "minutely", "hourly", "alerts", "flags")

TimeOffset = Union[str, int, datetime]


class SimpleSky:
    """Клиент для получения погоды по названию места или координатам."""

    def __init__(self, config: SkyConfig, transport: Optional[httpx.AsyncBaseTransport] = None):
        self.config = config.validate()
        self._transport = transport

    def _options(
        self,
        exclude: Iterable[str] = (),
        extend_hourly: bool = False,
        timestamp: Optional[int] = None,
        language: Optional[str] = None,
        units: Optional[str] = None
    ) -> QueryOptions:
        return QueryOptions(
            language=self.config.language if language is None else language,
            units=self.config.units if units is None else units,
            exclude=exclude or (),
            extend_hourly=extend_hourly,
            timestamp=timestamp
        )

    async def _request(self, location: Optional[str], lat, lng, options: QueryOptions) -> Dict[str, Any]:
        location = normalize_location(location)
        coordinates = None
        if location is None:
            try:
                coordinates = coordinates_from_args(lat, lng)
            except InvalidArgumentsError as e:
                logger.error(f"❌ {e}: location=None, lat={lat}, lng={lng}")
                raise

        async with open_http_client(self.config, self._transport) as http:
            if coordinates is None:
                coordinates = await geocode_location(http, self.config, location)
            return await fetch_forecast(http, self.config, coordinates, options)

    @staticmethod
    def _extract(body: Dict[str, Any], block: str, missing_error=MissingFieldError):
        forecast = ForecastResponse.from_dict(body)
        section = forecast.section(block)
        if section is None:
            logger.warning(f"⚠️ В ответе нет блока '{block}'")
            raise missing_error(block)
        return section

    # === ОБЩИЙ ЗАПРОС ===
    async def get_coordinates(self, location: str) -> Coordinates:
        """Возвращает координаты места без запроса прогноза."""
        location = normalize_location(location)
        if location is None:
            raise InvalidArgumentsError("incomplete input parameters")
        async with open_http_client(self.config, self._transport) as http:
            return await geocode_location(http, self.config, location)

    async def get_weather(
        self,
        location: Optional[str] = None,
        lat: Optional[float] = None,
        lng: Optional[float] = None,
        exclude: Iterable[str] = (),
        extend_hourly: bool = False,
        language: Optional[str] = None,
        units: Optional[str] = None
    ) -> Dict[str, Any]:
        """
        Прогноз с произвольным набором исключаемых блоков.

        Args:
            location (str): Название места, приоритетнее координат
            lat (float): Широта, если location не задан
            lng (float): Долгота, если location не задан
            exclude: Блоки, которые сервис не должен возвращать
            extend_hourly (bool): 168 часов почасовых данных вместо 48
            language (str): Переопределение языка из конфигурации
            units (str): Переопределение единиц из конфигурации

        Returns:
            dict: Ответ сервиса как есть
        """
        options = self._options(exclude, extend_hourly, language=language, units=units)
        return await self._request(location, lat, lng, options)

    # === ПРОГНОЗЫ ПО БЛОКАМ ===
    async def get_full(self, location=None, lat=None, lng=None, language=None, units=None) -> ForecastResponse:
        """Полный прогноз без исключений."""
        body = await self.get_weather(location, lat, lng, language=language, units=units)
        return ForecastResponse.from_dict(body)

    async def get_currently(self, location=None, lat=None, lng=None, language=None, units=None) -> Dict[str, Any]:
        """Только текущие условия (блок currently)."""
        body = await self.get_weather(location, lat, lng, EXCLUDE_FOR_CURRENTLY, language=language, units=units)
        return self._extract(body, "currently")

    async def get_hourly(
        self, location=None, lat=None, lng=None, extend_hourly: bool = False, language=None, units=None
    ) -> Dict[str, Any]:
        """Почасовой прогноз: 48 часов, с extend_hourly 168."""
        body = await self.get_weather(
            location, lat, lng, EXCLUDE_FOR_HOURLY, extend_hourly, language=language, units=units
        )
        return self._extract(body, "hourly")

    async def get_minutely(self, location=None, lat=None, lng=None, language=None, units=None) -> Dict[str, Any]:
        """Поминутный прогноз на час. Есть не для всех мест."""
        body = await self.get_weather(location, lat, lng, EXCLUDE_FOR_MINUTELY, language=language, units=units)
        return self._extract(body, "minutely", UnsupportedLocationError)

    async def get_daily(self, location=None, lat=None, lng=None, language=None, units=None) -> Dict[str, Any]:
        body = await self.get_weather(location, lat, lng, EXCLUDE_FOR_DAILY, language=language, units=units)
        return self._extract(body, "daily")

    async def get_time_machine(
        self,
        location: Optional[str] = None,
        lat: Optional[float] = None,
        lng: Optional[float] = None,
        time_offset: Optional[TimeOffset] = None,
        exclude: Iterable[str] = (),
        language: Optional[str] = None,
        units: Optional[str] = None
    ) -> ForecastResponse:
        """
        Прогноз или наблюдения на заданный момент.

        Args:
            time_offset: "-1 day", "+3 hour", unix timestamp или datetime (обязателен)
        """
        if time_offset is None:
            logger.error("❌ Не задано смещение времени для time machine")
            raise InvalidArgumentsError("a time offset is required for time machine requests")
        timestamp = parse_time_offset(time_offset)
        options = self._options(exclude, timestamp=timestamp, language=language, units=units)
        body = await self._request(location, lat, lng, options)
        return ForecastResponse.from_dict(body)


# === УДОБНЫЕ ФУНКЦИИ ===
def get_forecast(location: Optional[str] = None, lat=None, lng=None, config: Optional[SkyConfig] = None) -> ForecastResponse:
    """
    Синхронный полный прогноз, конфигурация по умолчанию берётся из окружения.

    Логирование не настраивается: вызовите setup_logging(config.log_level) заранее.
    """
    client = SimpleSky(config or SkyConfig.load())
    return asyncio.run(client.get_full(location, lat, lng))


def get_current_weather(location: Optional[str] = None, lat=None, lng=None, config: Optional[SkyConfig] = None) -> Dict[str, Any]:
    """Синхронный запрос текущих условий."""
    client = SimpleSky(config or SkyConfig.load())
    return asyncio.run(client.get_currently(location, lat, lng))
