# -*- coding: utf-8 -*-
"""
SimpleSky: погода по названию места или координатам.

Геокодер (Google Geocoding API) + сервис прогнозов (Dark Sky Forecast API).
"""

from simplesky.config.logging_config import setup_logging
from simplesky.config.sky_config import SkyConfig
from simplesky.core.models.forecast_response import Coordinates, ForecastResponse, QueryOptions
from simplesky.core.sky_client import SimpleSky, get_current_weather, get_forecast
from simplesky.core.utils.error_handler import (
    ConnectionError,
    InvalidArgumentsError,
    MissingFieldError,
    NotFoundError,
    ResolverError,
    SimpleSkyError,
    UnsupportedLocationError,
)

__version__ = "1.0.0"

__all__ = [
    "SimpleSky",
    "SkyConfig",
    "Coordinates",
    "ForecastResponse",
    "QueryOptions",
    "get_forecast",
    "get_current_weather",
    "setup_logging",
    "SimpleSkyError",
    "ConnectionError",
    "ResolverError",
    "NotFoundError",
    "InvalidArgumentsError",
    "MissingFieldError",
    "UnsupportedLocationError",
]
