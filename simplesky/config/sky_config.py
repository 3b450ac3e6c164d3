# simplesky/config/sky_config.py
import os
from dataclasses import dataclass
from typing import Optional

from dotenv import load_dotenv

from simplesky.config.logging_config import LOG_LEVELS
from simplesky.core.utils.error_handler import InvalidArgumentsError

GEOCODE_URL = "https://maps.googleapis.com/maps/api/geocode/json"
FORECAST_URL = "https://api.darksky.net/forecast"
DEFAULT_TIMEOUT = 30.0  # секунд


def _parse_timeout(raw: Optional[str]) -> Optional[float]:
    """Пустое значение или 'none' означает запрос без ограничения по времени."""
    if raw is None:
        return DEFAULT_TIMEOUT
    raw = raw.strip()
    if not raw or raw.lower() == "none":
        return None
    try:
        return float(raw)
    except ValueError:
        raise InvalidArgumentsError(f"SKY_TIMEOUT must be a number, got {raw!r}")


@dataclass(frozen=True)
class SkyConfig:
    geocoding_api_key: str
    forecast_api_key: str
    language: str = "en"
    units: str = "auto"
    timeout: Optional[float] = DEFAULT_TIMEOUT
    geocode_url: str = GEOCODE_URL
    forecast_url: str = FORECAST_URL
    log_level: str = "INFO"

    @classmethod
    def load(cls):
        load_dotenv()
        return cls(
            geocoding_api_key=os.getenv("GEOCODING_API_KEY", ""),
            forecast_api_key=os.getenv("FORECAST_API_KEY", ""),
            language=os.getenv("SKY_LANGUAGE", "en"),
            units=os.getenv("SKY_UNITS", "auto"),
            timeout=_parse_timeout(os.getenv("SKY_TIMEOUT")),
            log_level=os.getenv("LOG_LEVEL", "INFO")
        )

    def validate(self) -> "SkyConfig":
        if not self.geocoding_api_key:
            raise InvalidArgumentsError("geocoding API key is required")
        if not self.forecast_api_key:
            raise InvalidArgumentsError("forecast API key is required")
        if self.timeout is not None and self.timeout <= 0:
            raise InvalidArgumentsError(f"timeout must be positive, got {self.timeout}")
        if str(self.log_level).strip().upper() not in LOG_LEVELS:
            raise InvalidArgumentsError(f"unknown log level: {self.log_level!r}")
        return self

