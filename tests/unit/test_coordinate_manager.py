# -*- coding: utf-8 -*-
"""
Тесты для simplesky/core/utils/coordinate_manager.py
Тестирует:
- Разбор статусов геокодера
- Кодирование адреса и ключ в запросе
- Перевод сетевых ошибок в ConnectionError
"""
import httpx
import pytest

from simplesky.core.models.forecast_response import Coordinates
from simplesky.core.utils.coordinate_manager import geocode_location, parse_geocode_body
from simplesky.core.utils.error_handler import (
    ConnectionError,
    InvalidArgumentsError,
    NotFoundError,
    ResolverError,
)
from tests.conftest import AUSTIN, GEOCODE_HOST


def test_parse_ok_takes_first_result():
    body = {
        "status": "OK",
        "results": [
            {"geometry": {"location": {"lat": 1.5, "lng": 2.5}}},
            {"geometry": {"location": {"lat": 9.0, "lng": 9.0}}},
        ],
    }
    assert parse_geocode_body(body) == Coordinates(1.5, 2.5)


def test_parse_zero_results():
    with pytest.raises(NotFoundError) as exc_info:
        parse_geocode_body({"status": "ZERO_RESULTS", "results": []})
    assert str(exc_info.value) == "unable to find specified location"
    assert exc_info.value.status == "ZERO_RESULTS"


@pytest.mark.parametrize("status", ["OVER_QUERY_LIMIT", "REQUEST_DENIED", "INVALID_REQUEST", "UNKNOWN_ERROR", None])
def test_parse_other_statuses_fail_explicitly(status):
    body = {"status": status, "results": [], "error_message": "The provided API key is invalid."}
    with pytest.raises(ResolverError) as exc_info:
        parse_geocode_body(body)
    assert not isinstance(exc_info.value, NotFoundError)
    assert exc_info.value.status == status


def test_parse_ok_with_malformed_results():
    with pytest.raises(ResolverError):
        parse_geocode_body({"status": "OK", "results": []})
    with pytest.raises(ResolverError):
        parse_geocode_body({"status": "OK", "results": [{"geometry": {}}]})


async def test_geocode_sends_encoded_address_and_key(config, services):
    async with httpx.AsyncClient(transport=services.transport) as http:
        coordinates = await geocode_location(http, config, "Austin's Pizza Campus")

    assert coordinates == Coordinates(AUSTIN["lat"], AUSTIN["lng"])
    request = services.requests[0]
    assert request.url.host == GEOCODE_HOST
    assert request.url.path == "/maps/api/geocode/json"
    assert request.url.params["address"] == "Austin's Pizza Campus"
    assert request.url.params["key"] == "geo-key"
    assert " " not in str(request.url)


async def test_geocode_transport_failure(config, services):
    services.fail_host = GEOCODE_HOST
    async with httpx.AsyncClient(transport=services.transport) as http:
        with pytest.raises(ConnectionError) as exc_info:
            await geocode_location(http, config, "Austin")
    assert str(exc_info.value) == "unable to connect to geocoding service"
    assert isinstance(exc_info.value.__cause__, httpx.ConnectError)


async def test_geocode_non_json_body(config):
    transport = httpx.MockTransport(lambda request: httpx.Response(502, content=b"<html>Bad Gateway</html>"))
    async with httpx.AsyncClient(transport=transport) as http:
        with pytest.raises(ResolverError):
            await geocode_location(http, config, "Austin")


async def test_geocode_blank_location_makes_no_request(config, services):
    async with httpx.AsyncClient(transport=services.transport) as http:
        with pytest.raises(InvalidArgumentsError):
            await geocode_location(http, config, "   ")
    assert services.requests == []
