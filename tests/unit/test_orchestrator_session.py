from __future__ import annotations

import asyncio

import pytest

from game_revenue.domain.models import GameType, RevenueReport
from game_revenue.orchestrator import RevenueSession


def _report(game_id: str) -> RevenueReport:
    return RevenueReport(
        game_id=game_id,
        game_type=GameType.FREE_TO_PLAY,
        conversion_rate=0.03,
        arppu=40.0,
    )


@pytest.mark.asyncio
async def test_session_stores_report_for_selected_game():
    async def estimator(game_id: str) -> RevenueReport:
        return _report(game_id)

    session = RevenueSession(estimator)
    report = await session.get_revenue("1")

    assert report is not None and report.game_id == "1"
    assert session.report is report
    assert session.selected_game_id == "1"


@pytest.mark.asyncio
async def test_last_selection_wins_when_requests_overlap():
    slow_started = asyncio.Event()
    release_slow = asyncio.Event()

    async def estimator(game_id: str) -> RevenueReport:
        if game_id == "slow":
            slow_started.set()
            await release_slow.wait()
        return _report(game_id)

    session = RevenueSession(estimator)
    slow_task = asyncio.create_task(session.get_revenue("slow"))
    await slow_started.wait()

    fast = await session.get_revenue("fast")
    release_slow.set()
    stale = await slow_task

    assert stale is None
    assert fast is not None and fast.game_id == "fast"
    assert session.report.game_id == "fast"
    assert session.selected_game_id == "fast"


@pytest.mark.asyncio
async def test_new_selection_discards_previous_report_before_completion():
    gate = asyncio.Event()

    async def estimator(game_id: str) -> RevenueReport:
        if game_id == "second":
            await gate.wait()
        return _report(game_id)

    session = RevenueSession(estimator)
    await session.get_revenue("first")
    pending = asyncio.create_task(session.get_revenue("second"))
    await asyncio.sleep(0)

    assert session.report is None
    gate.set()
    await pending
    assert session.report.game_id == "second"


@pytest.mark.asyncio
async def test_failed_request_clears_report():
    async def estimator(game_id: str) -> RevenueReport:
        raise RuntimeError("unexpected")

    session = RevenueSession(estimator)
    assert await session.get_revenue("1") is None
    assert session.report is None
