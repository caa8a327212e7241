from __future__ import annotations

from rich.console import Console

from game_revenue.domain.models import DeveloperRef, GameRecord, GameType, RevenueReport
from game_revenue.reporter import (
    align_labels,
    format_currency,
    format_number,
    format_percentage,
    print_games,
    print_report,
)


def _console() -> Console:
    return Console(record=True, width=160)


def test_align_labels_extends_with_period_names():
    assert align_labels(["Jan", "Feb"], 4) == ["Jan", "Feb", "Period 3", "Period 4"]


def test_align_labels_truncates_extra_labels():
    assert align_labels(["2024-01", "2024-02", "2024-03"], 2) == ["2024-01", "2024-02"]


def test_formatters():
    assert format_currency(1234567.89) == "$1,234,568"
    assert format_currency(0) == "$0"
    assert format_number(100000.0) == "100,000"
    assert format_number(4500) == "4,500"
    assert format_percentage(0.045) == "4.50%"


def test_print_report_renders_summary_and_months():
    report = RevenueReport(
        game_id="42",
        title="Lost Ark",
        game_type=GameType.FREE_TO_PLAY,
        conversion_rate=0.0375,
        arppu=60.0,
        mau=200_000,
        paying_users=7_500,
        estimated_monthly_revenue=450_000.0,
        total_revenue=600.0,
        total_units_sold=1_200,
        monthly_revenue=(300.0, 300.0),
        monthly_units_sold=(600.0, 600.0),
        labels=("2024-01", "2024-02"),
        mode="real_series",
        player_counts=(1_000, 1_000),
        external_series_id="1599340",
    )
    console = _console()
    print_report(report, console=console)
    text = console.export_text()

    assert "FREE TO PLAY" in text
    assert "$450,000" in text
    assert "3.75%" in text
    assert "Steam ID" in text and "1599340" in text
    assert "2024-02" in text
    assert "Players" in text


def test_print_report_without_report_prompts_for_selection():
    console = _console()
    print_report(None, console=console)
    assert "Select a game" in console.export_text()


def test_print_games_lists_developers():
    console = _console()
    games = [
        GameRecord(
            id="1",
            title="Dota 2",
            developers=(DeveloperRef(slug="valve", name="Valve"),),
        )
    ]
    print_games(games, console=console)
    text = console.export_text()
    assert "Dota 2" in text and "Valve" in text


def test_print_games_empty():
    console = _console()
    print_games([], console=console)
    assert "No games found" in console.export_text()
