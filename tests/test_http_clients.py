"""Tests for HTTP-based adapters."""

import asyncio

import httpx
import pytest

from menu_ranker.adapters.menu_api_client import (
    HttpxMenuApiClient,
    status_code_from_exception,
)
from menu_ranker.domain.providers import Provider, ProviderRegistry


def test_menu_client_sends_menu_query() -> None:
    seen: list[httpx.Request] = []

    def handler(request: httpx.Request) -> httpx.Response:
        seen.append(request)
        return httpx.Response(200, json={"dayOfWeek": "Keskiviikko"})

    transport = httpx.MockTransport(handler)
    client = HttpxMenuApiClient(
        registry=ProviderRegistry(),
        http_client=httpx.AsyncClient(transport=transport),
    )

    payload = asyncio.run(
        client.get_day_menu(Provider.COMPASS, "0301", "2025-10-29", "fi")
    )

    assert payload == {"dayOfWeek": "Keskiviikko"}
    request = seen[0]
    assert request.url.host == "www.compass-group.fi"
    assert request.url.path == "/menuapi/day-menus"
    assert request.url.params["costCenter"] == "0301"
    assert request.url.params["date"] == "2025-10-29"
    assert request.url.params["language"] == "fi"


def test_menu_client_fetches_recipe_by_path() -> None:
    seen: list[httpx.Request] = []

    def handler(request: httpx.Request) -> httpx.Response:
        seen.append(request)
        return httpx.Response(200, json={"recipeId": 42})

    transport = httpx.MockTransport(handler)
    client = HttpxMenuApiClient(
        registry=ProviderRegistry(),
        http_client=httpx.AsyncClient(transport=transport),
    )

    payload = asyncio.run(client.get_recipe(Provider.SEMMA, 42, "fi"))

    assert payload["recipeId"] == 42
    assert str(seen[0].url) == "https://www.semma.fi/menuapi/recipes/42?language=fi"


def test_menu_client_raises_on_error_status() -> None:
    def handler(request: httpx.Request) -> httpx.Response:
        return httpx.Response(503, json={"error": "down"})

    transport = httpx.MockTransport(handler)
    client = HttpxMenuApiClient(
        registry=ProviderRegistry(),
        http_client=httpx.AsyncClient(transport=transport),
    )

    with pytest.raises(httpx.HTTPStatusError) as excinfo:
        asyncio.run(client.get_recipe(Provider.SEMMA, 1, "fi"))

    assert status_code_from_exception(excinfo.value) == "503"


def test_status_code_from_transport_error() -> None:
    assert status_code_from_exception(httpx.ConnectError("refused")) == "n/a"


def test_menu_client_applies_configured_timeout() -> None:
    seen: list[httpx.Request] = []

    def handler(request: httpx.Request) -> httpx.Response:
        seen.append(request)
        return httpx.Response(200, json={})

    transport = httpx.MockTransport(handler)
    client = HttpxMenuApiClient(
        registry=ProviderRegistry(),
        http_client=httpx.AsyncClient(transport=transport),
        timeout_seconds=2.5,
    )

    asyncio.run(client.get_day_menu(Provider.SEMMA, "1408", "2025-10-29", "fi"))
    asyncio.run(client.get_recipe(Provider.SEMMA, 42, "fi"))

    for request in seen:
        assert request.extensions["timeout"] == {
            "connect": 2.5,
            "read": 2.5,
            "write": 2.5,
            "pool": 2.5,
        }
