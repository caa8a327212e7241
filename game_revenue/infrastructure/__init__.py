"""
Infrastructure package for the Game Revenue Estimator.

Centralizes HTTP access to the external collaborators (game catalog, developer
registry, player-count provider). Keep this layer focused on I/O, decoupled
from the engine.
"""

from game_revenue.infrastructure.catalog import CatalogClient
from game_revenue.infrastructure.http_factory import (
    CollaboratorUnavailable,
    build_async_client,
    fetch_json,
)
from game_revenue.infrastructure.player_series import PlayerSeriesClient

__all__ = [
    "CatalogClient",
    "CollaboratorUnavailable",
    "PlayerSeriesClient",
    "build_async_client",
    "fetch_json",
]
