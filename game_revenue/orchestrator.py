"""
Orchestrator for "get revenue" requests.

Usage (example from CLI):
    from game_revenue.orchestrator import estimate_revenue

    async with CatalogClient() as catalog, PlayerSeriesClient() as series:
        report = await estimate_revenue("1234", catalog, series)

Flow per request:
1. Fetch the game record from the catalog (fall back to what the caller already
   knows about the game when the catalog is down).
2. Look up the primary developer's scale and fetch the player-count history
   concurrently; either failing degrades instead of aborting.
3. Compute metrics, normalize the series, and synthesize the report.
"""

from __future__ import annotations

import asyncio
import random
from typing import Any, Awaitable, Callable, Optional, Tuple

from game_revenue.config import Settings, get_settings
from game_revenue.domain.models import DeveloperScale, GameRecord, RevenueReport
from game_revenue.engine.metrics import compute_metrics
from game_revenue.engine.normalizer import normalize
from game_revenue.engine.synthesizer import synthesize
from game_revenue.infrastructure.catalog import CatalogClient
from game_revenue.infrastructure.http_factory import CollaboratorUnavailable
from game_revenue.infrastructure.player_series import PlayerSeriesClient
from game_revenue.strategies.synthetic import DEFAULT_MONTHS, DEFAULT_VARIATION
from game_revenue.utils.logging import get_logger

log = get_logger(__name__)


def make_rng(seed: Optional[int]) -> Optional[random.Random]:
    """Seeded random source, or None to let the synthetic model pick an unseeded one."""
    return random.Random(seed) if seed is not None else None


def build_report(
    game: GameRecord,
    developer_scale: Optional[DeveloperScale],
    raw_series: Any,
    rng: Optional[random.Random] = None,
    variation: Tuple[float, float] = DEFAULT_VARIATION,
    months: int = DEFAULT_MONTHS,
) -> RevenueReport:
    """
    Run the estimation engine over already-fetched inputs.

    Parameters
    ----------
    game : GameRecord
        The selected game.
    developer_scale : DeveloperScale | None
        Primary studio size, None when unknown or unavailable.
    raw_series : Any
        Raw `(timestamp, count)` pairs from the player-count provider, or None.
        Malformed input falls back to the synthetic projection.
    """
    metrics = compute_metrics(game, developer_scale)
    series = normalize(raw_series)
    if raw_series is not None and series is None:
        log.info(
            "Player series malformed, using synthetic projection",
            extra={"game_id": game.id, "external_series_id": game.external_series_id},
        )

    return synthesize(
        game,
        metrics,
        mau=game.avg_monthly_active_users,
        real_series=series,
        reported_revenue=game.reported_revenue,
        units_sold=game.units_sold,
        rng=rng,
        variation=variation,
        months=months,
    )


async def _load_game(
    game_id: str, catalog: CatalogClient, summary: Optional[GameRecord]
) -> GameRecord:
    try:
        return await catalog.get_game(game_id)
    except CollaboratorUnavailable as exc:
        log.warning(
            "Game details unavailable, continuing with known fields",
            extra={"game_id": game_id, "error": str(exc)},
        )
        return summary if summary is not None else GameRecord(id=game_id)


async def _lookup_developer_scale(
    catalog: CatalogClient, game: GameRecord
) -> Optional[DeveloperScale]:
    developer = game.primary_developer
    if developer is None or not developer.slug:
        return None
    try:
        return await catalog.get_developer_scale(developer.slug)
    except CollaboratorUnavailable as exc:
        log.warning(
            "Developer registry unavailable, using neutral studio multiplier",
            extra={"game_id": game.id, "slug": developer.slug, "error": str(exc)},
        )
        return None


async def _fetch_raw_series(series_client: PlayerSeriesClient, game: GameRecord) -> Any:
    if not game.external_series_id:
        return None
    try:
        return await series_client.fetch_series(game.external_series_id)
    except CollaboratorUnavailable as exc:
        log.warning(
            "Player series unavailable, using synthetic projection",
            extra={
                "game_id": game.id,
                "external_series_id": game.external_series_id,
                "error": str(exc),
            },
        )
        return None


async def estimate_revenue(
    game_id: str,
    catalog: CatalogClient,
    series_client: PlayerSeriesClient,
    summary: Optional[GameRecord] = None,
    rng: Optional[random.Random] = None,
    settings: Optional[Settings] = None,
) -> RevenueReport:
    """
    Fetch everything a game's report needs and run the engine.

    Parameters
    ----------
    game_id : str
        Catalog identifier of the selected game.
    catalog : CatalogClient
        Game catalog and developer registry client.
    series_client : PlayerSeriesClient
        Player-count provider client.
    summary : GameRecord | None
        What the caller already knows about the game (e.g. from a listing),
        used if the detail fetch fails.
    rng : random.Random | None
        Random source for the synthetic projection. Defaults to one seeded
        from settings.random_seed (unseeded when that is unset).
    settings : Settings | None
        Settings override; defaults to get_settings().

    Returns
    -------
    RevenueReport
        Always returned; collaborator failures only lower its fidelity.
    """
    settings = settings or get_settings()
    log.info("[REVENUE START] game %s", game_id, extra={"game_id": game_id})

    game = await _load_game(game_id, catalog, summary)
    developer_scale, raw_series = await asyncio.gather(
        _lookup_developer_scale(catalog, game),
        _fetch_raw_series(series_client, game),
    )

    report = build_report(
        game,
        developer_scale,
        raw_series,
        rng=rng if rng is not None else make_rng(settings.random_seed),
        variation=settings.variation,
        months=settings.synthetic_months,
    )
    log.info(
        "[REVENUE COMPLETE] game %s",
        game_id,
        extra={
            "game_id": game_id,
            "game_type": report.game_type.value,
            "mode": report.mode,
            "total_revenue": report.total_revenue,
        },
    )
    return report


class RevenueSession:
    """
    Presentation-side holder of the selected game and its current report.

    Selecting a game discards the previous report. When requests overlap, the
    last selection wins: a request that finishes after a newer one started is
    dropped. In-flight requests are not cancelled.
    """

    def __init__(self, estimator: Callable[[str], Awaitable[RevenueReport]]) -> None:
        self._estimator = estimator
        self._token = 0
        self.selected_game_id: Optional[str] = None
        self.report: Optional[RevenueReport] = None

    async def get_revenue(self, game_id: str) -> Optional[RevenueReport]:
        """
        Select a game and estimate its revenue.

        Returns the report, or None if the request was superseded or failed.
        """
        self._token += 1
        token = self._token
        self.selected_game_id = game_id
        self.report = None

        try:
            report = await self._estimator(game_id)
        except Exception:  # noqa: BLE001 - a failed request only clears the report
            log.exception("[REVENUE FAILED] game %s", game_id, extra={"game_id": game_id})
            report = None

        if token != self._token:
            log.info(
                "Discarding stale revenue report",
                extra={"game_id": game_id, "selected_game_id": self.selected_game_id},
            )
            return None

        self.report = report
        return report


__all__ = [
    "RevenueSession",
    "build_report",
    "estimate_revenue",
    "make_rng",
]
