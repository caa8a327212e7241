from __future__ import annotations

import pytest

from game_revenue.domain.models import GameType, GenreTag
from game_revenue.engine.classifier import (
    BATTLE_ROYALE_KEYWORDS,
    MOBA_KEYWORDS,
    PREMIUM_DLC_KEYWORDS,
    classify,
)


@pytest.mark.parametrize(
    ("title", "expected"),
    [
        ("PUBG: Battlegrounds", GameType.BATTLE_ROYALE),
        ("FORTNITE", GameType.BATTLE_ROYALE),
        ("Call of Duty: Warzone", GameType.BATTLE_ROYALE),
        ("ELDEN RING", GameType.PREMIUM_DLC),
        ("Sid Meier's Civilization VI", GameType.PREMIUM_DLC),
        ("Dota 2", GameType.MOBA),
        ("League of Legends", GameType.MOBA),
        ("Stardew Valley", GameType.FREE_TO_PLAY),
    ],
)
def test_classify_by_title_keyword(title: str, expected: GameType) -> None:
    assert classify(title, []) is expected


def test_battle_royale_wins_over_premium_dlc() -> None:
    title = "Elden Ring Battle Royale"
    assert classify(title, []) is GameType.BATTLE_ROYALE


def test_premium_dlc_wins_over_moba_genre() -> None:
    assert classify("Stellaris", [GenreTag.MOBA]) is GameType.PREMIUM_DLC


def test_moba_genre_tag_without_keyword() -> None:
    assert classify("Some Arena Game", ["moba"]) is GameType.MOBA
    assert classify("Some Arena Game", [{"value": "MOBA"}]) is GameType.MOBA


def test_missing_title_and_genres_default_to_free_to_play() -> None:
    assert classify(None, None) is GameType.FREE_TO_PLAY
    assert classify("", []) is GameType.FREE_TO_PLAY


def test_keyword_lists_are_disjoint() -> None:
    lists = [set(BATTLE_ROYALE_KEYWORDS), set(PREMIUM_DLC_KEYWORDS), set(MOBA_KEYWORDS)]
    for i, left in enumerate(lists):
        for right in lists[i + 1 :]:
            assert not left & right
