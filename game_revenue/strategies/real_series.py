"""
Real-series projection: revenue driven by a historical player-count series.

Each monthly player-count sample becomes a month of revenue using the
free-to-play formula `players * conversion_rate * arppu`. The sum of those
months replaces whatever lifetime revenue the catalog reported.
"""

from __future__ import annotations

from game_revenue.domain.models import PlayerSeries, RevenueMetrics
from game_revenue.strategies.abstract import AbstractProjectionStrategy, ProjectionResult


class RealSeriesProjection(AbstractProjectionStrategy):
    """
    Project revenue month by month from a normalized player series.

    Units sold have no historical series, so lifetime units are spread evenly
    across the months of the player series.
    """

    name: str = "real_series"
    description: str = "Monthly revenue from historical player counts (players x CR x ARPPU)."

    def __init__(self, series: PlayerSeries) -> None:
        if not series.points:
            raise ValueError("RealSeriesProjection requires a non-empty player series")
        self.series = series

    def project(self, metrics: RevenueMetrics, mau: float, units_sold: int) -> ProjectionResult:
        monthly_revenue = []
        for players in self.series.player_counts:
            paying_users = players * metrics.conversion_rate
            monthly_revenue.append(paying_users * metrics.arppu)

        months = len(monthly_revenue)
        units_per_month = units_sold / months if units_sold else 0.0

        return ProjectionResult(
            monthly_revenue=monthly_revenue,
            monthly_units_sold=[units_per_month] * months,
            labels=list(self.series.labels),
            player_counts=list(self.series.player_counts),
            total_revenue=sum(monthly_revenue),
        )


__all__ = ["RealSeriesProjection"]
