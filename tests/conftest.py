# -*- coding: utf-8 -*-
"""
Общие фикстуры: конфигурация и поддельные геокодер/сервис прогнозов
поверх httpx.MockTransport.
"""

import httpx
import pytest

from simplesky.config.sky_config import SkyConfig
from simplesky.core.sky_client import SimpleSky

GEOCODE_HOST = "maps.googleapis.com"
FORECAST_HOST = "api.darksky.net"

AUSTIN = {"lat": 30.2870213, "lng": -97.7418409}


def geocode_ok(lat: float, lng: float) -> dict:
    return {
        "status": "OK",
        "results": [{"geometry": {"location": {"lat": lat, "lng": lng}}}],
    }


def make_forecast_body(lat: float, lng: float, hours: int = 49, minutely: bool = True) -> dict:
    body = {
        "latitude": lat,
        "longitude": lng,
        "timezone": "America/Chicago",
        "offset": -5,
        "currently": {"time": 1500000000, "temperature": 88.1, "summary": "Clear"},
        "hourly": {"summary": "Clear", "data": [{"time": 1500000000 + i * 3600} for i in range(hours)]},
        "daily": {"summary": "Sunny", "data": [{"time": 1500000000 + i * 86400} for i in range(8)]},
        "alerts": [],
        "flags": {"units": "us"},
    }
    if minutely:
        body["minutely"] = {"summary": "Clear", "data": [{"time": 1500000000 + i * 60} for i in range(61)]}
    return body


class FakeServices:
    """
    Поддельные сервисы. Записывает все запросы и отдаёт ответ прогноза
    без исключённых блоков, как настоящий сервис.
    """

    def __init__(self):
        self.requests = []
        self.geocode_body = geocode_ok(**AUSTIN)
        self.forecast_body = None
        self.minutely_supported = True
        self.fail_host = None
        self.raw_forecast = None

    def _forecast(self, request: httpx.Request) -> httpx.Response:
        if self.raw_forecast is not None:
            return httpx.Response(200, content=self.raw_forecast)
        point = request.url.path.rsplit("/", 1)[-1].split(",")
        lat, lng = float(point[0]), float(point[1])
        extend = request.url.params.get("extend") == "hourly"
        body = dict(self.forecast_body or make_forecast_body(
            lat, lng, hours=169 if extend else 49, minutely=self.minutely_supported
        ))
        excluded = request.url.params.get("exclude", "")
        for block in filter(None, excluded.split(",")):
            body.pop(block, None)
        return httpx.Response(200, json=body)

    def handler(self, request: httpx.Request) -> httpx.Response:
        self.requests.append(request)
        if self.fail_host == request.url.host:
            raise httpx.ConnectError("connection refused", request=request)
        if request.url.host == GEOCODE_HOST:
            return httpx.Response(200, json=self.geocode_body)
        if request.url.host == FORECAST_HOST:
            return self._forecast(request)
        return httpx.Response(404)

    @property
    def transport(self) -> httpx.MockTransport:
        return httpx.MockTransport(self.handler)

    def hosts(self) -> list:
        return [request.url.host for request in self.requests]


@pytest.fixture
def config():
    return SkyConfig(geocoding_api_key="geo-key", forecast_api_key="sky-key")


@pytest.fixture
def services():
    return FakeServices()


@pytest.fixture
def sky(config, services):
    return SimpleSky(config, transport=services.transport)
