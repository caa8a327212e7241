from __future__ import annotations

from typing import Iterable, List, Optional, Sequence

from rich import box
from rich.console import Console
from rich.table import Table

from game_revenue.domain.models import GameRecord, RevenueReport


def format_currency(amount: float) -> str:
    """US dollars with no cents, e.g. $1,234,568."""
    sign = "-" if amount < 0 else ""
    return f"{sign}${abs(amount):,.0f}"


def format_number(value: float) -> str:
    return f"{value:,.0f}" if isinstance(value, float) else f"{value:,}"


def format_percentage(rate: float) -> str:
    return f"{rate * 100:.2f}%"


def align_labels(labels: Sequence[str], length: int) -> List[str]:
    """
    Make x-axis labels match the longest data series.

    Missing labels are filled with "Period N" (1-based position); extra labels
    are cut off.
    """
    aligned = list(labels[:length])
    for index in range(len(aligned), length):
        aligned.append(f"Period {index + 1}")
    return aligned


def print_games(games: Iterable[GameRecord], console: Optional[Console] = None) -> None:
    """Render a game listing as a rich table."""
    console = console or Console()
    games = list(games)

    if not games:
        console.print("[yellow]No games found.[/yellow]")
        return

    table = Table(title="Games", box=box.ROUNDED)
    table.add_column("ID", style="cyan", no_wrap=True)
    table.add_column("Title", style="bold")
    table.add_column("Developers", style="magenta")

    for game in games:
        developers = ", ".join(d.name or d.slug for d in game.developers)
        table.add_row(game.id, game.title, developers)

    console.print(table)


def print_report(report: Optional[RevenueReport], console: Optional[Console] = None) -> None:
    """
    Render a revenue report: a summary table followed by the monthly series.

    The monthly table includes a player-count column only when the report was
    driven by a real player series.
    """
    console = console or Console()

    if report is None:
        console.print("[yellow]Select a game to view revenue.[/yellow]")
        return

    summary = Table(title=report.title or f"Game {report.game_id}", box=box.ROUNDED, show_header=False)
    summary.add_column("Field", style="cyan", no_wrap=True)
    summary.add_column("Value", justify="right")

    summary.add_row("Game ID", report.game_id)
    summary.add_row("Game Type", report.game_type.display_name)
    if report.external_series_id:
        summary.add_row("Steam ID", report.external_series_id)
    summary.add_row(
        "Estimated Monthly Revenue",
        f"[bold green]{format_currency(report.estimated_monthly_revenue)}[/bold green]",
    )
    summary.add_row("Avg Monthly Active Users (MAU)", format_number(report.mau))
    summary.add_row("Conversion Rate", format_percentage(report.conversion_rate))
    summary.add_row("Paying Users", format_number(report.paying_users))
    summary.add_row("ARPPU (per month)", format_currency(report.arppu))
    summary.add_row("Total Revenue", format_currency(report.total_revenue))
    summary.add_row("Units Sold", format_number(report.total_units_sold))
    summary.add_row("Projection", report.mode.replace("_", " "))
    console.print(summary)

    length = max(len(report.monthly_revenue), len(report.monthly_units_sold), len(report.player_counts))
    if length == 0:
        return

    labels = align_labels(report.labels, length)
    monthly = Table(
        title=f"{report.title or report.game_id} - Revenue Analysis",
        box=box.SIMPLE_HEAVY,
    )
    monthly.add_column("Month", style="cyan", no_wrap=True)
    monthly.add_column("Revenue", justify="right", style="bold green")
    monthly.add_column("Units Sold", justify="right", style="magenta")
    if report.player_counts:
        monthly.add_column("Players", justify="right", style="yellow")

    for index, label in enumerate(labels):
        revenue = report.monthly_revenue[index] if index < len(report.monthly_revenue) else 0.0
        units = report.monthly_units_sold[index] if index < len(report.monthly_units_sold) else 0.0
        row = [label, format_currency(revenue), format_number(units)]
        if report.player_counts:
            players = report.player_counts[index] if index < len(report.player_counts) else 0
            row.append(format_number(players))
        monthly.add_row(*row)

    console.print(monthly)


__all__ = [
    "align_labels",
    "format_currency",
    "format_number",
    "format_percentage",
    "print_games",
    "print_report",
]
