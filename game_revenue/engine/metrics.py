"""
Conversion-rate and ARPPU model.

Archetype games (battle royale, premium + DLC, MOBA) get fixed metrics. Every
other game is free-to-play: its conversion rate and ARPPU are the arithmetic
mean of per-genre table values, and the ARPPU is then scaled by the size of the
primary developer studio. Conversion rate is never scaled by studio size.
"""

from __future__ import annotations

from typing import Dict, Mapping, Optional, Tuple

from game_revenue.domain.models import (
    DeveloperScale,
    EmployeesBucket,
    GameRecord,
    GameType,
    GenreTag,
    RevenueMetrics,
)
from game_revenue.engine.classifier import classify

DEFAULT_CONVERSION_RATE = 0.030
DEFAULT_ARPPU = 40.0
NEUTRAL_STUDIO_MULTIPLIER = 1.00

# (conversion_rate, arppu)
ARCHETYPE_METRICS: Dict[GameType, Tuple[float, float]] = {
    GameType.BATTLE_ROYALE: (0.20, 72.0),
    GameType.PREMIUM_DLC: (0.30, 60.0),
    GameType.MOBA: (0.12, 60.0),
}

GENRE_CONVERSION_RATES: Dict[str, float] = {
    GenreTag.INDIE.value: 0.020,
    GenreTag.ACTION.value: 0.030,
    GenreTag.ADVENTURE.value: 0.025,
    GenreTag.RPG.value: 0.045,
    GenreTag.SPORTS.value: 0.040,
    GenreTag.RACING.value: 0.030,
    GenreTag.PUZZLE.value: 0.020,
    GenreTag.QUIZ_AND_TRIVIA.value: 0.015,
    GenreTag.STRATEGY.value: 0.040,
    GenreTag.HORROR_AND_SURVIVAL.value: 0.025,
    GenreTag.PLATFORMER.value: 0.020,
    GenreTag.FIGHTING.value: 0.035,
    GenreTag.BEAT_EM_UP.value: 0.025,
    GenreTag.MUSIC.value: 0.020,
    GenreTag.SHOOTER.value: 0.035,
    GenreTag.PINBALL.value: 0.015,
    GenreTag.ARCADE.value: 0.020,
    GenreTag.CARD_AND_BOARD_GAME.value: 0.060,
    GenreTag.POINT_AND_CLICK.value: 0.020,
    GenreTag.TACTICAL.value: 0.040,
    GenreTag.VISUAL_NOVEL.value: 0.030,
}

GENRE_ARPPU: Dict[str, float] = {
    GenreTag.INDIE.value: 25.0,
    GenreTag.ACTION.value: 45.0,
    GenreTag.ADVENTURE.value: 40.0,
    GenreTag.RPG.value: 75.0,
    GenreTag.SPORTS.value: 60.0,
    GenreTag.RACING.value: 45.0,
    GenreTag.PUZZLE.value: 20.0,
    GenreTag.QUIZ_AND_TRIVIA.value: 15.0,
    GenreTag.STRATEGY.value: 65.0,
    GenreTag.HORROR_AND_SURVIVAL.value: 35.0,
    GenreTag.PLATFORMER.value: 25.0,
    GenreTag.FIGHTING.value: 50.0,
    GenreTag.BEAT_EM_UP.value: 30.0,
    GenreTag.MUSIC.value: 25.0,
    GenreTag.SHOOTER.value: 55.0,
    GenreTag.PINBALL.value: 15.0,
    GenreTag.ARCADE.value: 20.0,
    GenreTag.CARD_AND_BOARD_GAME.value: 50.0,
    GenreTag.POINT_AND_CLICK.value: 25.0,
    GenreTag.TACTICAL.value: 60.0,
    GenreTag.VISUAL_NOVEL.value: 30.0,
}

# Ordered smallest to largest studio; values never decrease.
STUDIO_MULTIPLIERS: Dict[EmployeesBucket, float] = {
    EmployeesBucket.B1_10: 0.70,
    EmployeesBucket.B11_50: 0.85,
    EmployeesBucket.B51_100: 1.00,
    EmployeesBucket.B101_250: 1.20,
    EmployeesBucket.B251_500: 1.40,
    EmployeesBucket.B501_1000: 1.70,
    EmployeesBucket.B1001_5000: 2.00,
    EmployeesBucket.B5001_10000: 2.50,
    EmployeesBucket.B10001_PLUS: 3.00,
}


def studio_multiplier(developer_scale: Optional[DeveloperScale]) -> float:
    """Return the ARPPU multiplier for a studio; 1.00 when the size is unknown."""
    if developer_scale is None or developer_scale.employees_bucket is None:
        return NEUTRAL_STUDIO_MULTIPLIER
    return STUDIO_MULTIPLIERS.get(developer_scale.employees_bucket, NEUTRAL_STUDIO_MULTIPLIER)


def _average(genres: Tuple[str, ...], table: Mapping[str, float], default: float) -> float:
    if not genres:
        return default
    return sum(table.get(genre, default) for genre in genres) / len(genres)


def genre_averages(genres: Tuple[str, ...]) -> Tuple[float, float]:
    """
    Average conversion rate and ARPPU across a game's genre keys.

    Unknown genres contribute the defaults; no genres at all means the defaults.
    """
    return (
        _average(genres, GENRE_CONVERSION_RATES, DEFAULT_CONVERSION_RATE),
        _average(genres, GENRE_ARPPU, DEFAULT_ARPPU),
    )


def compute_metrics(
    game: GameRecord, developer_scale: Optional[DeveloperScale] = None
) -> RevenueMetrics:
    """
    Compute the conversion rate and monthly ARPPU for a game.

    Parameters
    ----------
    game : GameRecord
        The game to model. Only `title` and `genres` are read.
    developer_scale : DeveloperScale | None
        Primary studio size; None (or an unknown bucket) is neutral.

    Returns
    -------
    RevenueMetrics
        Fixed archetype metrics, or genre-averaged metrics with the studio
        multiplier applied to ARPPU for free-to-play games.
    """
    game_type = classify(game.title, game.genres)

    if game_type in ARCHETYPE_METRICS:
        conversion_rate, arppu = ARCHETYPE_METRICS[game_type]
        return RevenueMetrics(
            conversion_rate=conversion_rate,
            arppu=arppu,
            game_type=game_type,
            studio_multiplier=NEUTRAL_STUDIO_MULTIPLIER,
        )

    conversion_rate, arppu = genre_averages(game.genres)
    multiplier = studio_multiplier(developer_scale)
    return RevenueMetrics(
        conversion_rate=conversion_rate,
        arppu=arppu * multiplier,
        game_type=GameType.FREE_TO_PLAY,
        studio_multiplier=multiplier,
    )


__all__ = [
    "ARCHETYPE_METRICS",
    "DEFAULT_ARPPU",
    "DEFAULT_CONVERSION_RATE",
    "GENRE_ARPPU",
    "GENRE_CONVERSION_RATES",
    "NEUTRAL_STUDIO_MULTIPLIER",
    "STUDIO_MULTIPLIERS",
    "compute_metrics",
    "genre_averages",
    "studio_multiplier",
]
