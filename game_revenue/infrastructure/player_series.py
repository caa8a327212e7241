"""
Historical player-count provider client.

Fetches SteamCharts-style chart data (`GET {base}/app/{id}/chart-data.json`),
a JSON list of `[epoch_millis, player_count]` pairs. The raw pairs are returned
untouched; normalization belongs to the engine.
"""

from __future__ import annotations

from typing import Any, Optional

import httpx

from game_revenue.config import get_settings
from game_revenue.infrastructure.http_factory import build_async_client, fetch_json

PLAYER_SERIES_SERVICE = "player-series"


class PlayerSeriesClient:
    """Async client for the player-count provider."""

    def __init__(
        self,
        base_url: Optional[str] = None,
        client: Optional[httpx.AsyncClient] = None,
        attempts: Optional[int] = None,
    ) -> None:
        settings = get_settings()
        self.base_url = (base_url or settings.player_series_base_url).rstrip("/")
        self._client = client
        self._owns_client = client is None
        self._attempts = attempts

    def _get_client(self) -> httpx.AsyncClient:
        if self._client is None:
            self._client = build_async_client()
        return self._client

    async def close(self) -> None:
        if self._client is not None and self._owns_client:
            await self._client.aclose()
            self._client = None

    async def __aenter__(self) -> "PlayerSeriesClient":
        return self

    async def __aexit__(self, exc_type, exc, tb) -> None:
        await self.close()

    async def fetch_series(self, external_id: str) -> Any:
        """
        Return the raw chart data for an external series id.

        Raises
        ------
        CollaboratorUnavailable
            If the provider cannot be reached or answers with an error.
        """
        return await fetch_json(
            self._get_client(),
            f"{self.base_url}/app/{external_id}/chart-data.json",
            service=PLAYER_SERIES_SERVICE,
            attempts=self._attempts,
        )


__all__ = ["PLAYER_SERIES_SERVICE", "PlayerSeriesClient"]
