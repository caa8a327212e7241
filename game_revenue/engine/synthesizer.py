"""
Revenue projection synthesis.

Combines a game's metrics with either its normalized player history or the
synthetic variation model, and assembles the RevenueReport handed to the
presentation layer.
"""

from __future__ import annotations

import math
import random
from typing import Optional, Tuple

from game_revenue.domain.models import GameRecord, PlayerSeries, RevenueMetrics, RevenueReport
from game_revenue.strategies.abstract import ProjectionStrategy
from game_revenue.strategies.real_series import RealSeriesProjection
from game_revenue.strategies.synthetic import (
    DEFAULT_MONTHS,
    DEFAULT_VARIATION,
    SyntheticProjection,
)


def _round_half_up(value: float) -> int:
    return int(math.floor(value + 0.5))


def select_strategy(
    real_series: Optional[PlayerSeries],
    rng: Optional[random.Random] = None,
    variation: Tuple[float, float] = DEFAULT_VARIATION,
    months: int = DEFAULT_MONTHS,
) -> ProjectionStrategy:
    """Use the real series when it has at least one point, otherwise go synthetic."""
    if real_series is not None and real_series.points:
        return RealSeriesProjection(real_series)
    return SyntheticProjection(rng=rng, variation=variation, months=months)


def synthesize(
    game: GameRecord,
    metrics: RevenueMetrics,
    mau: Optional[float],
    real_series: Optional[PlayerSeries],
    reported_revenue: Optional[float],
    units_sold: Optional[int],
    *,
    rng: Optional[random.Random] = None,
    variation: Tuple[float, float] = DEFAULT_VARIATION,
    months: int = DEFAULT_MONTHS,
) -> RevenueReport:
    """
    Produce the revenue report for one game.

    Parameters
    ----------
    game : GameRecord
        The game being reported on (id, title, external series id).
    metrics : RevenueMetrics
        Conversion rate and ARPPU from the metrics engine.
    mau : float | None
        Current monthly active users; None or 0 means no active users.
    real_series : PlayerSeries | None
        Normalized player history; None or empty selects the synthetic model.
    reported_revenue : float | None
        Catalog lifetime revenue, used as the total in synthetic mode.
    units_sold : int | None
        Catalog lifetime units, spread over the monthly units series.
    rng : random.Random | None
        Random source for the synthetic model. Defaults to an unseeded one.
    variation : tuple[float, float]
        Uniform bounds for the per-month synthetic factor.
    months : int
        Number of synthetic months.

    Returns
    -------
    RevenueReport
        Always produced; figures degrade to zero when inputs are missing.
    """
    mau = mau or 0.0
    units_sold = units_sold or 0

    strategy = select_strategy(real_series, rng=rng, variation=variation, months=months)
    projection = strategy.project(metrics, mau, units_sold)

    total_revenue = projection.get("total_revenue")
    if total_revenue is None:
        total_revenue = reported_revenue or 0.0

    # Paying users are based on current MAU even when history drives the totals.
    return RevenueReport(
        game_id=game.id,
        title=game.title,
        game_type=metrics.game_type,
        conversion_rate=metrics.conversion_rate,
        arppu=metrics.arppu,
        mau=mau,
        paying_users=_round_half_up(mau * metrics.conversion_rate),
        estimated_monthly_revenue=mau * metrics.conversion_rate * metrics.arppu,
        total_revenue=total_revenue,
        total_units_sold=units_sold,
        monthly_revenue=tuple(projection.get("monthly_revenue", [])),
        monthly_units_sold=tuple(projection.get("monthly_units_sold", [])),
        labels=tuple(projection.get("labels", [])),
        mode=strategy.name,
        player_counts=tuple(projection.get("player_counts", [])),
        external_series_id=game.external_series_id,
    )


__all__ = ["select_strategy", "synthesize"]
