"""
Synthetic projection: a flat monthly baseline with random month-to-month variance.

Used when no historical player series is available. Every month of revenue and
units sold is the baseline multiplied by its own uniform draw from the variation
bounds. The random source is injectable so callers can make runs reproducible.
"""

from __future__ import annotations

import random
from typing import Optional, Tuple

from game_revenue.domain.models import RevenueMetrics
from game_revenue.strategies.abstract import AbstractProjectionStrategy, ProjectionResult

DEFAULT_VARIATION: Tuple[float, float] = (0.8, 1.2)
DEFAULT_MONTHS = 12
MONTH_LABELS: Tuple[str, ...] = (
    "Jan", "Feb", "Mar", "Apr", "May", "Jun",
    "Jul", "Aug", "Sep", "Oct", "Nov", "Dec",
)


def _month_labels(months: int) -> list[str]:
    return [MONTH_LABELS[i % len(MONTH_LABELS)] for i in range(months)]


class SyntheticProjection(AbstractProjectionStrategy):
    """
    Vary a flat baseline month by month.

    Revenue baseline is `mau * conversion_rate * arppu`; units baseline is
    `units_sold / months`. Reported revenue is left to the caller.
    """

    name: str = "synthetic"
    description: str = "Flat monthly baseline with independent uniform variation per month."

    def __init__(
        self,
        rng: Optional[random.Random] = None,
        variation: Tuple[float, float] = DEFAULT_VARIATION,
        months: int = DEFAULT_MONTHS,
    ) -> None:
        low, high = variation
        if low < 0 or high < low:
            raise ValueError(f"Invalid variation bounds {variation!r}: need 0 <= low <= high")
        if months < 1:
            raise ValueError(f"months must be positive, got {months}")
        self.rng = rng or random.Random()
        self.variation = (low, high)
        self.months = months

    def _vary(self, baseline: float) -> list[float]:
        low, high = self.variation
        return [baseline * self.rng.uniform(low, high) for _ in range(self.months)]

    def project(self, metrics: RevenueMetrics, mau: float, units_sold: int) -> ProjectionResult:
        estimated_monthly_revenue = (mau or 0) * metrics.conversion_rate * metrics.arppu
        monthly_revenue = self._vary(estimated_monthly_revenue)
        monthly_units = self._vary((units_sold or 0) / self.months)

        return ProjectionResult(
            monthly_revenue=monthly_revenue,
            monthly_units_sold=monthly_units,
            labels=_month_labels(self.months),
            player_counts=[],
            total_revenue=None,
        )


__all__ = ["DEFAULT_MONTHS", "DEFAULT_VARIATION", "MONTH_LABELS", "SyntheticProjection"]
