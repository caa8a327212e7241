"""
Game-type classification.

Maps a title and its genre tags to one monetization archetype. Keyword lists are
checked in priority order and the first hit wins; anything unrecognised is
FREE_TO_PLAY.
"""

from __future__ import annotations

from typing import Iterable, Optional, Tuple

from game_revenue.domain.models import GameType, GenreTag, normalize_genre

BATTLE_ROYALE_KEYWORDS: Tuple[str, ...] = (
    "pubg",
    "battlegrounds",
    "fortnite",
    "apex legends",
    "warzone",
    "battle royale",
    "fall guys",
    "naraka",
)

PREMIUM_DLC_KEYWORDS: Tuple[str, ...] = (
    "elden ring",
    "the sims",
    "civilization",
    "crusader kings",
    "europa universalis",
    "hearts of iron",
    "stellaris",
    "cities: skylines",
    "destiny 2",
    "monster hunter",
)

MOBA_KEYWORDS: Tuple[str, ...] = (
    "dota",
    "league of legends",
    "smite",
    "heroes of the storm",
    "pokemon unite",
    "predecessor",
)


def _contains_any(title: str, keywords: Iterable[str]) -> bool:
    return any(keyword in title for keyword in keywords)


def classify(title: Optional[str], genres: Iterable[object] = ()) -> GameType:
    """
    Classify a game into a GameType.

    Parameters
    ----------
    title : str | None
        Game title; matched case-insensitively by substring.
    genres : iterable
        Genre tags (GenreTag members, raw strings, or catalog objects).

    Returns
    -------
    GameType
        The first matching archetype in priority order
        (BATTLE_ROYALE, PREMIUM_DLC, MOBA), otherwise FREE_TO_PLAY.
    """
    lowered = (title or "").lower()

    if _contains_any(lowered, BATTLE_ROYALE_KEYWORDS):
        return GameType.BATTLE_ROYALE
    if _contains_any(lowered, PREMIUM_DLC_KEYWORDS):
        return GameType.PREMIUM_DLC

    genre_keys = {normalize_genre(g) for g in genres or ()}
    if GenreTag.MOBA.value in genre_keys or _contains_any(lowered, MOBA_KEYWORDS):
        return GameType.MOBA

    return GameType.FREE_TO_PLAY


__all__ = [
    "BATTLE_ROYALE_KEYWORDS",
    "MOBA_KEYWORDS",
    "PREMIUM_DLC_KEYWORDS",
    "classify",
]
