# -*- coding: utf-8 -*-
"""
Интеграционные тесты против настоящих геокодера и сервиса прогнозов.
Нужны GEOCODING_API_KEY и FORECAST_API_KEY в окружении или в .env.
"""
import pytest

from simplesky.config.sky_config import SkyConfig
from simplesky.core.sky_client import SimpleSky
from simplesky.core.utils.error_handler import InvalidArgumentsError, UnsupportedLocationError

CONFIG = SkyConfig.load()

pytestmark = [
    pytest.mark.integration,
    pytest.mark.skipif(
        not (CONFIG.geocoding_api_key and CONFIG.forecast_api_key),
        reason="GEOCODING_API_KEY / FORECAST_API_KEY не заданы"
    ),
]


@pytest.fixture
def sky():
    return SimpleSky(CONFIG)


async def test_full_returns_resolved_coordinates(sky):
    coordinates = await sky.get_coordinates("Austin's Pizza Campus")
    full = await sky.get_full("Austin's Pizza Campus")
    assert full.latitude == pytest.approx(coordinates.latitude)
    assert full.longitude == pytest.approx(coordinates.longitude)
    print(f"✅ Координаты: ({full.latitude}, {full.longitude})")


async def test_currently_has_only_current_block(sky):
    currently = await sky.get_currently("Austin's Pizza Campus")
    assert "time" in currently
    for block in ("minutely", "hourly", "daily"):
        assert block not in currently


async def test_hourly_lengths(sky):
    hourly = await sky.get_hourly("Taco Bell Las Vegas")
    assert len(hourly["data"]) == 49
    extended = await sky.get_hourly("Taco Bell Las Vegas", None, None, True)
    assert len(extended["data"]) == 169


async def test_daily_and_time_machine(sky):
    daily = await sky.get_daily("Taco Bell Las Vegas")
    assert daily["data"]
    yesterday = await sky.get_time_machine("Taco Bell Las Vegas", time_offset="-1 day")
    assert yesterday.currently is not None


async def test_minutely_unsupported_location(sky):
    with pytest.raises(UnsupportedLocationError):
        await sky.get_minutely(None, 30, 30)


async def test_incomplete_input(sky):
    with pytest.raises(InvalidArgumentsError):
        await sky.get_currently(None, 1233, None)
