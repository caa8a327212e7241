"""
Domain package for the Game Revenue Estimator.

Exports the immutable records shared by the engine, collaborator clients, and
presentation. Keep this package focused on data definitions and validation.
"""

from game_revenue.domain.models import (
    DeveloperRef,
    DeveloperScale,
    EmployeesBucket,
    GameRecord,
    GameType,
    GenreTag,
    PlayerSeries,
    PlayerSeriesPoint,
    RevenueMetrics,
    RevenueReport,
)

__all__ = [
    "DeveloperRef",
    "DeveloperScale",
    "EmployeesBucket",
    "GameRecord",
    "GameType",
    "GenreTag",
    "PlayerSeries",
    "PlayerSeriesPoint",
    "RevenueMetrics",
    "RevenueReport",
]
