"""
Domain models for the Game Revenue Estimator.

Defines the immutable records exchanged between the collaborator clients, the
estimation engine, and the presentation layer. Catalog and registry payloads are
parsed here (`from_api`) so the engine only ever sees already-validated values.
"""
from __future__ import annotations

import re
from datetime import datetime
from enum import Enum
from typing import Any, Dict, Iterable, Optional, Tuple

from pydantic import BaseModel, Field, field_validator

_FROZEN = {
    "frozen": True,
    "populate_by_name": True,
    "arbitrary_types_allowed": False,
}


class GenreTag(str, Enum):
    """Genre tags published by the game catalog."""

    INDIE = "INDIE"
    ACTION = "ACTION"
    ADVENTURE = "ADVENTURE"
    RPG = "RPG"
    SPORTS = "SPORTS"
    RACING = "RACING"
    PUZZLE = "PUZZLE"
    QUIZ_AND_TRIVIA = "QUIZ_AND_TRIVIA"
    STRATEGY = "STRATEGY"
    HORROR_AND_SURVIVAL = "HORROR_AND_SURVIVAL"
    PLATFORMER = "PLATFORMER"
    FIGHTING = "FIGHTING"
    BEAT_EM_UP = "BEAT_EM_UP"
    MUSIC = "MUSIC"
    SHOOTER = "SHOOTER"
    PINBALL = "PINBALL"
    ARCADE = "ARCADE"
    CARD_AND_BOARD_GAME = "CARD_AND_BOARD_GAME"
    POINT_AND_CLICK = "POINT_AND_CLICK"
    TACTICAL = "TACTICAL"
    VISUAL_NOVEL = "VISUAL_NOVEL"
    MOBA = "MOBA"


def normalize_genre(value: Any) -> str:
    """
    Turn a raw catalog genre value into an upper-snake-case key.

    Accepts plain strings ("rpg", "Card & Board Game", "beat-em-up"),
    GenreTag members, and catalog objects of the form {"value": "..."}.
    """
    if isinstance(value, GenreTag):
        return value.value
    if isinstance(value, dict):
        value = value.get("value") or value.get("name") or ""
    text = str(value).strip().upper().replace("&", "AND").replace("'", "")
    return re.sub(r"[^A-Z0-9]+", "_", text).strip("_")


class EmployeesBucket(str, Enum):
    """Developer headcount ranges, smallest to largest."""

    B1_10 = "1-10"
    B11_50 = "11-50"
    B51_100 = "51-100"
    B101_250 = "101-250"
    B251_500 = "251-500"
    B501_1000 = "501-1000"
    B1001_5000 = "1001-5000"
    B5001_10000 = "5001-10000"
    B10001_PLUS = "10001+"

    @classmethod
    def parse(cls, value: Any) -> Optional["EmployeesBucket"]:
        """Parse the registry's `employees_number` ("1 - 10", "10001+"); None if unknown."""
        if value is None:
            return None
        if isinstance(value, cls):
            return value
        key = re.sub(r"\s+", "", str(value))
        try:
            return cls(key)
        except ValueError:
            return None


class GameType(str, Enum):
    """Monetization archetypes. FREE_TO_PLAY is the default."""

    BATTLE_ROYALE = "battle_royale"
    PREMIUM_DLC = "premium_dlc"
    MOBA = "moba"
    FREE_TO_PLAY = "free_to_play"

    @property
    def display_name(self) -> str:
        return self.value.replace("_", " ").upper()


class DeveloperRef(BaseModel):
    """Reference to a developer studio as listed on a game record."""

    slug: str = Field("", description="Registry lookup key.")
    name: str = Field("", description="Display name.")

    model_config = _FROZEN


class GameRecord(BaseModel):
    """
    A game as returned by the catalog. Read-only to the engine.

    Zero `reported_revenue` / `units_sold` mean "unknown".
    """

    id: str = Field(..., description="Opaque catalog identifier.")
    title: str = Field("", description="Display title.")
    genres: Tuple[str, ...] = Field((), description="Normalized genre keys.")
    developers: Tuple[DeveloperRef, ...] = Field((), description="First entry is primary.")
    avg_monthly_active_users: float = Field(0.0, ge=0)
    reported_revenue: float = Field(0.0, ge=0)
    units_sold: int = Field(0, ge=0)
    external_series_id: Optional[str] = Field(
        None, description="Identifier for the historical player-count provider."
    )

    model_config = _FROZEN

    @field_validator("id", mode="before")
    @classmethod
    def _coerce_id(cls, value: Any) -> str:
        return str(value)

    @field_validator("title", mode="before")
    @classmethod
    def _coerce_title(cls, value: Any) -> str:
        return "" if value is None else str(value)

    @field_validator("genres", mode="before")
    @classmethod
    def _normalize_genres(cls, value: Any) -> Tuple[str, ...]:
        if value is None:
            return ()
        if isinstance(value, (str, dict, GenreTag)):
            value = [value]
        if not isinstance(value, Iterable):
            raise ValueError(f"genres must be a list, got {type(value).__name__}")
        seen: Dict[str, None] = {}
        for item in value:
            key = normalize_genre(item)
            if key:
                seen.setdefault(key, None)
        return tuple(seen)

    @field_validator("units_sold", mode="before")
    @classmethod
    def _coerce_units_sold(cls, value: Any) -> Any:
        if value is None or value == "":
            return 0
        if isinstance(value, float):
            return int(value)
        return value

    @field_validator("external_series_id", mode="before")
    @classmethod
    def _coerce_series_id(cls, value: Any) -> Optional[str]:
        if value is None or value == "":
            return None
        return str(value)

    @property
    def primary_developer(self) -> Optional[DeveloperRef]:
        return self.developers[0] if self.developers else None

    @classmethod
    def from_api(cls, payload: Dict[str, Any]) -> "GameRecord":
        """
        Build a record from the catalog JSON shape.

        Nulls are treated as absent fields.
        """
        raw_developers = payload.get("developers")
        if not isinstance(raw_developers, list):
            raw_developers = []
        developers = [
            DeveloperRef(slug=d.get("slug") or "", name=d.get("name") or "")
            for d in raw_developers
            if isinstance(d, dict)
        ]
        return cls(
            id=payload.get("id", ""),
            title=payload.get("title"),
            genres=payload.get("genres"),
            developers=tuple(developers),
            avg_monthly_active_users=payload.get("avg_monthly_active_user") or 0,
            reported_revenue=payload.get("revenue") or 0,
            units_sold=payload.get("units_sold"),
            external_series_id=payload.get("steam_id"),
        )


class DeveloperScale(BaseModel):
    """Studio size as reported by the developer registry. None bucket means unknown."""

    employees_bucket: Optional[EmployeesBucket] = None

    model_config = _FROZEN

    @field_validator("employees_bucket", mode="before")
    @classmethod
    def _parse_bucket(cls, value: Any) -> Optional[EmployeesBucket]:
        return EmployeesBucket.parse(value)

    @classmethod
    def from_api(cls, payload: Dict[str, Any]) -> "DeveloperScale":
        return cls(employees_bucket=payload.get("employees_number"))


class RevenueMetrics(BaseModel):
    """Conversion rate and monthly ARPPU for one game."""

    conversion_rate: float = Field(..., gt=0, le=1)
    arppu: float = Field(..., ge=0)
    game_type: GameType
    studio_multiplier: float = Field(1.0, ge=0)

    model_config = _FROZEN


class PlayerSeriesPoint(BaseModel):
    timestamp: datetime
    player_count: int = Field(..., ge=0)

    model_config = _FROZEN


class PlayerSeries(BaseModel):
    """
    One player-count sample per calendar month, oldest first.

    `labels` runs parallel to `points` and holds "YYYY-MM" strings.
    """

    points: Tuple[PlayerSeriesPoint, ...] = ()
    labels: Tuple[str, ...] = ()

    model_config = _FROZEN

    def __len__(self) -> int:
        return len(self.points)

    @property
    def player_counts(self) -> Tuple[int, ...]:
        return tuple(p.player_count for p in self.points)

    def as_pairs(self) -> Iterable[Tuple[datetime, int]]:
        return [(p.timestamp, p.player_count) for p in self.points]


class RevenueReport(BaseModel):
    """
    Output of one "get revenue" request, consumed by presentation layers.

    `mode` is "real_series" when a historical player series drove the
    projection, "synthetic" otherwise.
    """

    game_id: str
    title: str = ""
    game_type: GameType
    conversion_rate: float
    arppu: float
    mau: float = 0.0
    paying_users: int = 0
    estimated_monthly_revenue: float = 0.0
    total_revenue: float = 0.0
    total_units_sold: int = 0
    monthly_revenue: Tuple[float, ...] = ()
    monthly_units_sold: Tuple[float, ...] = ()
    labels: Tuple[str, ...] = ()
    mode: str = "synthetic"
    player_counts: Tuple[int, ...] = ()
    external_series_id: Optional[str] = None

    model_config = _FROZEN


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
    "normalize_genre",
]
