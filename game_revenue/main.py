from __future__ import annotations

import asyncio
import sys
from typing import List, Optional

import typer

from game_revenue.config import get_settings
from game_revenue.domain.models import DeveloperScale, GameRecord, RevenueReport
from game_revenue.infrastructure.catalog import CatalogClient
from game_revenue.infrastructure.http_factory import CollaboratorUnavailable
from game_revenue.infrastructure.player_series import PlayerSeriesClient
from game_revenue.orchestrator import RevenueSession, build_report, estimate_revenue, make_rng
from game_revenue.reporter import print_games, print_report
from game_revenue.utils.logging import configure_logging

app = typer.Typer(help="Game Revenue Estimator CLI.")


def _setup_logging() -> None:
    settings = get_settings()
    configure_logging(level=settings.log_level, json_logs=settings.log_json)


def _emit(report: Optional[RevenueReport], as_json: bool) -> None:
    if as_json:
        typer.echo(report.model_dump_json(indent=2) if report else "null")
    else:
        print_report(report)


@app.command()
def info() -> None:
    """
    Show effective configuration values.
    """
    settings = get_settings()
    typer.echo(
        f"catalog={settings.catalog_base_url} | series={settings.player_series_base_url} | "
        f"timeout={settings.http_timeout_seconds}s retries={settings.http_retry_attempts} | "
        f"variation={settings.variation_low}-{settings.variation_high} "
        f"months={settings.synthetic_months} seed={settings.random_seed}"
    )


@app.command()
def games(
    search: str = typer.Option("", "--search", "-q", help="Free-text catalog search."),
) -> None:
    """
    List catalog games, or search them.
    """
    _setup_logging()

    async def _run() -> List[GameRecord]:
        async with CatalogClient() as catalog:
            return await catalog.search_games(search)

    try:
        results = asyncio.run(_run())
    except CollaboratorUnavailable as exc:
        typer.echo(f"Error: {exc}", err=True)
        raise typer.Exit(code=1) from exc
    print_games(results)


@app.command()
def revenue(
    game_id: str = typer.Argument(..., help="Catalog id of the game."),
    as_json: bool = typer.Option(False, "--json", help="Print the report as JSON."),
    seed: Optional[int] = typer.Option(
        None, "--seed", help="Seed the synthetic variation (default from settings)."
    ),
) -> None:
    """
    Fetch a game and estimate its revenue.
    """
    _setup_logging()
    settings = get_settings()
    rng = make_rng(seed if seed is not None else settings.random_seed)

    async def _run() -> Optional[RevenueReport]:
        async with CatalogClient() as catalog, PlayerSeriesClient() as series:
            session = RevenueSession(
                lambda selected: estimate_revenue(selected, catalog, series, rng=rng)
            )
            return await session.get_revenue(game_id)

    _emit(asyncio.run(_run()), as_json)


@app.command()
def estimate(
    title: str = typer.Option("", "--title", "-t", help="Game title."),
    genre: List[str] = typer.Option([], "--genre", "-g", help="Genre tag (repeatable)."),
    mau: float = typer.Option(0.0, "--mau", help="Average monthly active users."),
    employees: Optional[str] = typer.Option(
        None, "--employees", "-e", help='Primary studio headcount bucket, e.g. "101-250".'
    ),
    reported_revenue: float = typer.Option(0.0, "--revenue", help="Reported lifetime revenue."),
    units: int = typer.Option(0, "--units", help="Reported lifetime units sold."),
    as_json: bool = typer.Option(False, "--json", help="Print the report as JSON."),
    seed: Optional[int] = typer.Option(None, "--seed", help="Seed the synthetic variation."),
) -> None:
    """
    Estimate revenue offline from explicit inputs (no network).
    """
    _setup_logging()
    settings = get_settings()
    game = GameRecord(
        id="offline",
        title=title,
        genres=genre,
        avg_monthly_active_users=mau,
        reported_revenue=reported_revenue,
        units_sold=units,
    )
    report = build_report(
        game,
        DeveloperScale(employees_bucket=employees),
        raw_series=None,
        rng=make_rng(seed if seed is not None else settings.random_seed),
        variation=settings.variation,
        months=settings.synthetic_months,
    )
    _emit(report, as_json)


def main() -> None:
    try:
        app()
    except KeyboardInterrupt:
        typer.echo("Cancelled by user.", err=True)
        sys.exit(130)


if __name__ == "__main__":
    main()
