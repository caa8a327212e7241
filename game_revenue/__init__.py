"""
Game Revenue Estimator - recurring revenue estimates for video games.

This package estimates a game's monthly revenue from sparse public signals:

- Title and genre tags (monetization archetype, genre conversion/ARPPU tables)
- Developer headcount (studio-scale ARPPU multiplier)
- Reported lifetime revenue and units sold
- An optional historical player-count series (SteamCharts style)

The estimation engine is a set of pure functions; collaborator clients, the
orchestrator, and the CLI wrap it with HTTP access, logging, and rendering.
"""

from __future__ import annotations

__version__ = "0.1.0"
__license__ = "MIT"

# Public API exports
from game_revenue.config import Settings, get_settings
from game_revenue.domain.models import (
    DeveloperScale,
    GameRecord,
    GameType,
    PlayerSeries,
    RevenueMetrics,
    RevenueReport,
)
from game_revenue.engine import classify, compute_metrics, normalize, synthesize
from game_revenue.orchestrator import RevenueSession, build_report, estimate_revenue
from game_revenue.utils.logging import configure_logging, get_logger

__all__ = [
    # Version info
    "__version__",
    "__license__",
    # Configuration
    "Settings",
    "get_settings",
    # Domain
    "DeveloperScale",
    "GameRecord",
    "GameType",
    "PlayerSeries",
    "RevenueMetrics",
    "RevenueReport",
    # Engine
    "classify",
    "compute_metrics",
    "normalize",
    "synthesize",
    # Orchestration
    "RevenueSession",
    "build_report",
    "estimate_revenue",
    # Logging
    "configure_logging",
    "get_logger",
]
