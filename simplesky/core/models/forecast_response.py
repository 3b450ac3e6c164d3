# simplesky/core/models/forecast_response.py
from dataclasses import dataclass, field
from typing import Any, Dict, List, Optional, Tuple

from simplesky.core.utils.query_builder import BLOCKS, build_query_string, normalize_exclude


def _plain_decimal(value: float) -> str:
    """Десятичная запись без экспоненты: 1e-05 -> 0.00001, 30.0 -> 30."""
    text = format(value, ".10f").rstrip("0").rstrip(".")
    return "0" if text in ("", "-0") else text


@dataclass(frozen=True)
class Coordinates:
    latitude: float
    longitude: float

    def as_path(self) -> str:
        return f"{_plain_decimal(self.latitude)},{_plain_decimal(self.longitude)}"


@dataclass(frozen=True)
class QueryOptions:
    language: str = "en"
    units: str = "auto"
    exclude: Tuple[str, ...] = ()
    extend_hourly: bool = False
    timestamp: Optional[int] = None

    def __post_init__(self):
        object.__setattr__(self, "exclude", normalize_exclude(self.exclude))

    @property
    def query_string(self) -> str:
        return build_query_string(self.language, self.units, self.exclude, self.extend_hourly)


@dataclass
class ForecastResponse:
    """Ответ сервиса прогнозов. Блоки, которых нет в ответе, равны None."""
    latitude: Optional[float] = None
    longitude: Optional[float] = None
    timezone: Optional[str] = None
    offset: Optional[float] = None
    currently: Optional[Dict[str, Any]] = None
    minutely: Optional[Dict[str, Any]] = None
    hourly: Optional[Dict[str, Any]] = None
    daily: Optional[Dict[str, Any]] = None
    alerts: Optional[List[Dict[str, Any]]] = None
    flags: Optional[Dict[str, Any]] = None
    raw: Dict[str, Any] = field(default_factory=dict, repr=False)

    @classmethod
    def from_dict(cls, body: Dict[str, Any]) -> "ForecastResponse":
        data = body if isinstance(body, dict) else {}
        return cls(
            latitude=data.get("latitude"),
            longitude=data.get("longitude"),
            timezone=data.get("timezone"),
            offset=data.get("offset"),
            currently=data.get("currently"),
            minutely=data.get("minutely"),
            hourly=data.get("hourly"),
            daily=data.get("daily"),
            alerts=data.get("alerts"),
            flags=data.get("flags"),
            raw=body
        )

    def section(self, name: str):
        if name not in BLOCKS:
            raise ValueError(f"unknown forecast block: {name!r}")
        return getattr(self, name)

    @property
    def coordinates(self) -> Optional[Coordinates]:
        if self.latitude is None or self.longitude is None:
            return None
        return Coordinates(self.latitude, self.longitude)
