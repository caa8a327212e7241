"""
Game catalog and developer registry client.

Wraps the catalog's REST endpoints:

- GET {base}/games/                          -> {"results": [...]}
- GET {base}/search/?query=...               -> {"game": {"results": [...]}}
- GET {base}/games/{id}/                      -> game object
- GET {base}/companies/developers/?slug=...   -> {"results": [{"employees_number": ...}]}

Usage:
    async with CatalogClient() as catalog:
        games = await catalog.search_games("dota")
        record = await catalog.get_game(games[0].id)
"""

from __future__ import annotations

from typing import Any, Dict, List, Optional

import httpx
from pydantic import ValidationError

from game_revenue.config import get_settings
from game_revenue.domain.models import DeveloperScale, GameRecord
from game_revenue.infrastructure.http_factory import (
    CollaboratorUnavailable,
    build_async_client,
    fetch_json,
)
from game_revenue.utils.logging import get_logger

log = get_logger(__name__)

CATALOG_SERVICE = "game-catalog"
REGISTRY_SERVICE = "developer-registry"


def _parse_games(results: Any) -> List[GameRecord]:
    if not isinstance(results, list):
        return []
    games: List[GameRecord] = []
    for item in results:
        if not isinstance(item, dict) or item.get("id") is None:
            continue
        try:
            games.append(GameRecord.from_api(item))
        except ValidationError:
            log.warning("Skipping malformed catalog entry", extra={"game_id": item.get("id")})
    return games


class CatalogClient:
    """
    Async client for the game catalog and developer registry.

    The client owns its httpx.AsyncClient unless one is passed in.
    """

    def __init__(
        self,
        base_url: Optional[str] = None,
        client: Optional[httpx.AsyncClient] = None,
        attempts: Optional[int] = None,
    ) -> None:
        settings = get_settings()
        self.base_url = (base_url or settings.catalog_base_url).rstrip("/")
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

    async def __aenter__(self) -> "CatalogClient":
        return self

    async def __aexit__(self, exc_type, exc, tb) -> None:
        await self.close()

    async def _get(self, path: str, service: str, params: Optional[Dict[str, Any]] = None) -> Any:
        return await fetch_json(
            self._get_client(),
            f"{self.base_url}{path}",
            service=service,
            params=params,
            attempts=self._attempts,
        )

    async def list_games(self) -> List[GameRecord]:
        """Return the catalog's default game listing."""
        payload = await self._get("/games/", CATALOG_SERVICE)
        return _parse_games(payload.get("results") if isinstance(payload, dict) else None)

    async def search_games(self, query: str) -> List[GameRecord]:
        """Search the catalog by free text. An empty query lists games instead."""
        if not query.strip():
            return await self.list_games()
        payload = await self._get("/search/", CATALOG_SERVICE, params={"query": query})
        game_block = payload.get("game") if isinstance(payload, dict) else None
        return _parse_games(game_block.get("results") if isinstance(game_block, dict) else None)

    async def get_game(self, game_id: str) -> GameRecord:
        """
        Fetch the detailed record for one game.

        Raises
        ------
        CollaboratorUnavailable
            If the catalog fails or returns something that is not a game object.
        """
        payload = await self._get(f"/games/{game_id}/", CATALOG_SERVICE)
        if not isinstance(payload, dict):
            raise CollaboratorUnavailable(CATALOG_SERVICE, f"game {game_id} payload is not an object")
        payload.setdefault("id", game_id)
        try:
            return GameRecord.from_api(payload)
        except ValidationError as exc:
            raise CollaboratorUnavailable(CATALOG_SERVICE, f"game {game_id} payload is invalid") from exc

    async def get_developer_scale(self, slug: str) -> DeveloperScale:
        """
        Look up a studio's headcount bucket by slug.

        An unknown studio yields DeveloperScale() (unknown bucket), not an error.
        """
        payload = await self._get(
            "/companies/developers/", REGISTRY_SERVICE, params={"slug": slug}
        )
        results = payload.get("results") if isinstance(payload, dict) else None
        if not isinstance(results, list) or not results or not isinstance(results[0], dict):
            log.info("Developer not found in registry", extra={"slug": slug})
            return DeveloperScale()
        return DeveloperScale.from_api(results[0])


__all__ = ["CATALOG_SERVICE", "REGISTRY_SERVICE", "CatalogClient"]
