from __future__ import annotations

import random
from datetime import datetime, timezone

import pytest

from game_revenue.domain.models import GameRecord, GameType, RevenueMetrics
from game_revenue.engine.metrics import compute_metrics
from game_revenue.engine.normalizer import normalize
from game_revenue.engine.synthesizer import select_strategy, synthesize
from game_revenue.strategies import RealSeriesProjection, SyntheticProjection

UTC = timezone.utc
MONTHS = 12
RPG_MONTHLY_REVENUE = 337_500.0
PUBG_MONTHLY_REVENUE = 14_400_000.0


class _FixedRandom(random.Random):
    """Always draws the same factor so baselines are exact."""

    def __init__(self, factor: float) -> None:
        super().__init__(0)
        self.factor = factor
        self.calls = 0

    def uniform(self, a: float, b: float) -> float:
        self.calls += 1
        return self.factor


def _series(*counts: int):
    return normalize([(datetime(2024, m + 1, 1, tzinfo=UTC), c) for m, c in enumerate(counts)])


def test_rpg_scenario_synthetic_baseline() -> None:
    game = GameRecord(id="1", title="Generic Quest", genres=["RPG"], avg_monthly_active_users=100_000)
    metrics = compute_metrics(game)
    report = synthesize(game, metrics, 100_000, None, None, None, rng=_FixedRandom(1.0))

    assert report.mode == "synthetic"
    assert report.conversion_rate == pytest.approx(0.045)
    assert report.arppu == pytest.approx(75)
    assert report.estimated_monthly_revenue == pytest.approx(RPG_MONTHLY_REVENUE)
    assert list(report.monthly_revenue) == pytest.approx([RPG_MONTHLY_REVENUE] * MONTHS)
    assert report.paying_users == 4_500
    assert report.total_revenue == 0
    assert report.monthly_units_sold == (0.0,) * MONTHS
    assert report.labels[0] == "Jan" and report.labels[-1] == "Dec"


def test_pubg_scenario() -> None:
    game = GameRecord(id="2", title="PUBG: Battlegrounds", genres=[])
    metrics = compute_metrics(game)
    report = synthesize(game, metrics, 1_000_000, None, 0, 0)

    assert report.game_type is GameType.BATTLE_ROYALE
    assert report.conversion_rate == 0.20
    assert report.arppu == 72
    assert report.estimated_monthly_revenue == pytest.approx(PUBG_MONTHLY_REVENUE)


def test_synthetic_samples_stay_within_variation_bounds() -> None:
    game = GameRecord(id="3", title="Generic", genres=["RPG"])
    metrics = compute_metrics(game)
    report = synthesize(
        game, metrics, 100_000, None, 1_000, 1_200, rng=random.Random(1234)
    )
    for value in report.monthly_revenue:
        assert RPG_MONTHLY_REVENUE * 0.8 <= value <= RPG_MONTHLY_REVENUE * 1.2
    for units in report.monthly_units_sold:
        assert 100 * 0.8 <= units <= 100 * 1.2
    assert report.total_revenue == 1_000
    assert report.total_units_sold == 1_200


def test_seeded_rng_is_reproducible() -> None:
    game = GameRecord(id="3", title="Generic", genres=["RPG"])
    metrics = compute_metrics(game)
    first = synthesize(game, metrics, 5_000, None, 0, 600, rng=random.Random(99))
    second = synthesize(game, metrics, 5_000, None, 0, 600, rng=random.Random(99))
    assert first.monthly_revenue == second.monthly_revenue
    assert first.monthly_units_sold == second.monthly_units_sold


def test_each_month_draws_independently_for_revenue_and_units() -> None:
    rng = _FixedRandom(1.1)
    game = GameRecord(id="4", genres=["RPG"])
    synthesize(game, compute_metrics(game), 10, None, 0, 12, rng=rng)
    assert rng.calls == 2 * MONTHS


def test_zero_mau_gives_zero_revenue_but_keeps_metrics() -> None:
    game = GameRecord(id="5", title="Quiet Game", genres=["STRATEGY"])
    metrics = compute_metrics(game)
    report = synthesize(game, metrics, None, None, None, None)

    assert report.estimated_monthly_revenue == 0
    assert report.paying_users == 0
    assert all(value == 0 for value in report.monthly_revenue)
    assert report.conversion_rate == pytest.approx(0.040)
    assert report.arppu == pytest.approx(65)
    assert report.game_type is GameType.FREE_TO_PLAY


def test_real_series_total_is_exact_sum_and_overrides_reported_revenue() -> None:
    metrics = RevenueMetrics(conversion_rate=0.05, arppu=40.0, game_type=GameType.FREE_TO_PLAY)
    series = _series(1_000, 2_000, 500)
    game = GameRecord(id="6", title="Tracked", external_series_id="730")
    report = synthesize(game, metrics, 3_000, series, 9_999_999, 300)

    expected = [c * 0.05 * 40.0 for c in (1_000, 2_000, 500)]
    assert report.mode == "real_series"
    assert list(report.monthly_revenue) == expected
    assert report.total_revenue == sum(expected)
    assert report.labels == ("2024-01", "2024-02", "2024-03")
    assert report.player_counts == (1_000, 2_000, 500)
    assert report.monthly_units_sold == (100.0, 100.0, 100.0)
    assert report.external_series_id == "730"


def test_real_series_paying_users_use_current_mau() -> None:
    metrics = RevenueMetrics(conversion_rate=0.1, arppu=10.0, game_type=GameType.FREE_TO_PLAY)
    game = GameRecord(id="7")
    report = synthesize(game, metrics, 2_500, _series(100_000), 0, 0)
    assert report.paying_users == 250
    assert report.estimated_monthly_revenue == pytest.approx(2_500)
    assert report.total_revenue == pytest.approx(100_000 * 0.1 * 10.0)


@pytest.mark.parametrize(
    ("mau", "conversion_rate", "expected"),
    [(12.5, 0.2, 3), (5, 0.1, 1), (35, 0.1, 4)],
)
def test_paying_users_round_half_up(mau, conversion_rate, expected) -> None:
    metrics = RevenueMetrics(
        conversion_rate=conversion_rate, arppu=10.0, game_type=GameType.FREE_TO_PLAY
    )
    report = synthesize(GameRecord(id="8"), metrics, mau, None, 0, 0, rng=_FixedRandom(1.0))
    assert report.paying_users == expected


def test_empty_series_falls_back_to_synthetic() -> None:
    assert isinstance(select_strategy(normalize([])), SyntheticProjection)
    assert isinstance(select_strategy(None), SyntheticProjection)
    assert isinstance(select_strategy(_series(1)), RealSeriesProjection)


@pytest.mark.parametrize("variation", [(1.2, 0.8), (-0.1, 1.0)])
def test_invalid_variation_bounds_raise(variation) -> None:
    game = GameRecord(id="8")
    with pytest.raises(ValueError, match="variation"):
        synthesize(game, compute_metrics(game), 10, None, 0, 0, variation=variation)
