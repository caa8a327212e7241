"""
Pytest configuration for the Game Revenue Estimator.

Provides fixtures for:
- Settings overrides and cache isolation
- A fake HTTP backend (httpx.MockTransport) standing in for the game catalog,
  developer registry, and player-count provider
- Collaborator clients wired to that backend
"""

from __future__ import annotations

from datetime import datetime, timezone
from typing import Any, AsyncGenerator, Callable, Dict, List, Union

import httpx
import pytest
import pytest_asyncio

from game_revenue.config import Settings, get_settings
from game_revenue.infrastructure.catalog import CatalogClient
from game_revenue.infrastructure.player_series import PlayerSeriesClient

CATALOG_BASE_URL = "https://catalog.test/games"
SERIES_BASE_URL = "https://series.test"

Route = Union[httpx.Response, Exception, Callable[[httpx.Request], httpx.Response]]


def epoch_millis(year: int, month: int, day: int) -> int:
    return int(datetime(year, month, day, tzinfo=timezone.utc).timestamp() * 1000)


class FakeBackend:
    """Routes requests by host + path and records every request it sees."""

    def __init__(self) -> None:
        self.routes: Dict[str, Route] = {}
        self.requests: List[httpx.Request] = []

    def add_json(self, url: str, payload: Any, status: int = 200) -> None:
        self.routes[url] = httpx.Response(status, json=payload)

    def add_error(self, url: str, exc: Exception) -> None:
        self.routes[url] = exc

    def add(self, url: str, route: Route) -> None:
        self.routes[url] = route

    def paths(self) -> List[str]:
        return [f"{r.url.host}{r.url.path}" for r in self.requests]

    def handler(self, request: httpx.Request) -> httpx.Response:
        self.requests.append(request)
        key = f"https://{request.url.host}{request.url.path}"
        route = self.routes.get(key)
        if route is None:
            return httpx.Response(404, json={"detail": "Not found."})
        if isinstance(route, Exception):
            raise route
        if callable(route):
            return route(request)
        return route


@pytest.fixture(autouse=True)
def clear_settings_cache():
    """Keep cached settings from leaking between tests that patch the environment."""
    get_settings.cache_clear()
    yield
    get_settings.cache_clear()


@pytest.fixture
def test_settings() -> Settings:
    """
    Settings fixture with test-specific overrides.
    """
    return Settings(
        catalog_base_url=CATALOG_BASE_URL,
        player_series_base_url=SERIES_BASE_URL,
        http_retry_attempts=1,
        log_level="DEBUG",
        random_seed=7,
    )


@pytest.fixture
def fake_backend() -> FakeBackend:
    return FakeBackend()


@pytest_asyncio.fixture
async def http_client(fake_backend: FakeBackend) -> AsyncGenerator[httpx.AsyncClient, None]:
    async with httpx.AsyncClient(transport=httpx.MockTransport(fake_backend.handler)) as client:
        yield client


@pytest.fixture
def catalog_client(http_client: httpx.AsyncClient) -> CatalogClient:
    return CatalogClient(base_url=CATALOG_BASE_URL, client=http_client, attempts=1)


@pytest.fixture
def series_client(http_client: httpx.AsyncClient) -> PlayerSeriesClient:
    return PlayerSeriesClient(base_url=SERIES_BASE_URL, client=http_client, attempts=1)


@pytest.fixture
def rpg_game_payload() -> Dict[str, Any]:
    """Catalog detail payload for a free-to-play RPG with a player history."""
    return {
        "id": 42,
        "title": "Lost Ark",
        "genres": [{"value": "rpg"}, {"value": "action"}],
        "developers": [{"slug": "smilegate-rpg", "name": "Smilegate RPG"}],
        "avg_monthly_active_user": 200_000,
        "revenue": 5_000_000,
        "units_sold": 1_200,
        "steam_id": "1599340",
    }


@pytest.fixture
def raw_chart_data() -> List[List[int]]:
    """SteamCharts-style chart data: two samples in January, one in February."""
    return [
        [epoch_millis(2024, 2, 3), 1_500],
        [epoch_millis(2024, 1, 2), 1_000],
        [epoch_millis(2024, 1, 20), 9_999],
    ]
