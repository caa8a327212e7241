"""
Player-count series normalization.

Turns a raw, possibly noisy `(timestamp, count)` series into one sample per
calendar month. Points are sorted by timestamp and the first sample of each
month is kept; later samples in the same month are dropped, not averaged.
"""

from __future__ import annotations

from datetime import date, datetime, timezone
from numbers import Integral, Real
from typing import Any, Dict, List, Optional, Sequence, Tuple

from game_revenue.domain.models import PlayerSeries, PlayerSeriesPoint

# Epoch values above this are milliseconds (SteamCharts chart-data format).
_EPOCH_MILLIS_THRESHOLD = 10**11


def _as_utc(value: datetime) -> datetime:
    if value.tzinfo is None:
        return value.replace(tzinfo=timezone.utc)
    return value.astimezone(timezone.utc)


def _parse_timestamp(value: Any) -> Optional[datetime]:
    if isinstance(value, bool):
        return None
    if isinstance(value, datetime):
        return _as_utc(value)
    if isinstance(value, date):
        return datetime(value.year, value.month, value.day, tzinfo=timezone.utc)
    if isinstance(value, Real):
        seconds = float(value)
        if abs(seconds) > _EPOCH_MILLIS_THRESHOLD:
            seconds /= 1000.0
        try:
            return datetime.fromtimestamp(seconds, tz=timezone.utc)
        except (OverflowError, OSError, ValueError):
            return None
    if isinstance(value, str):
        try:
            parsed = datetime.fromisoformat(value.strip().replace("Z", "+00:00"))
        except ValueError:
            return None
        return _as_utc(parsed)
    return None


def _parse_count(value: Any) -> Optional[int]:
    if isinstance(value, bool):
        return None
    if isinstance(value, Integral):
        count = int(value)
    elif isinstance(value, Real) and float(value).is_integer():
        count = int(value)
    else:
        return None
    return count if count >= 0 else None


def _parse_pairs(raw: Any) -> Optional[List[Tuple[datetime, int]]]:
    if raw is None or isinstance(raw, (str, bytes, dict)) or not isinstance(raw, Sequence):
        return None

    pairs: List[Tuple[datetime, int]] = []
    for item in raw:
        if isinstance(item, (str, bytes)) or not isinstance(item, Sequence) or len(item) != 2:
            return None
        timestamp = _parse_timestamp(item[0])
        count = _parse_count(item[1])
        if timestamp is None or count is None:
            return None
        pairs.append((timestamp, count))
    return pairs


def normalize(raw: Any) -> Optional[PlayerSeries]:
    """
    Downsample a raw player-count series to one point per month.

    Parameters
    ----------
    raw : sequence of (timestamp, count) pairs
        Timestamps may be datetimes, dates, epoch seconds/milliseconds, or
        ISO-8601 strings. Counts must be non-negative integers.
        An already-normalized PlayerSeries is accepted as well.

    Returns
    -------
    PlayerSeries | None
        Chronological series with "YYYY-MM" labels, or None when the input is
        missing or not a sequence of well-formed pairs.
    """
    if isinstance(raw, PlayerSeries):
        raw = raw.as_pairs()
    pairs = _parse_pairs(raw)
    if pairs is None:
        return None

    # sorted() is stable, so equal timestamps keep their input order.
    by_month: Dict[Tuple[int, int], Tuple[datetime, int]] = {}
    for timestamp, count in sorted(pairs, key=lambda pair: pair[0]):
        by_month.setdefault((timestamp.year, timestamp.month), (timestamp, count))

    points = tuple(
        PlayerSeriesPoint(timestamp=timestamp, player_count=count)
        for timestamp, count in by_month.values()
    )
    labels = tuple(f"{year:04d}-{month:02d}" for year, month in by_month)
    return PlayerSeries(points=points, labels=labels)


__all__ = ["normalize"]
