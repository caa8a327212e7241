"""
Abstract projection interfaces and result contracts for the Game Revenue Estimator.

A projection strategy turns revenue metrics plus the game's usage figures into
monthly revenue and units-sold series. Concrete strategies (real player series,
synthetic variation) implement the ProjectionStrategy protocol and return a
ProjectionResult TypedDict so the synthesizer can assemble a report the same way
regardless of which one ran.
"""

from __future__ import annotations

import abc
from typing import List, Optional, Protocol, TypedDict, runtime_checkable

from game_revenue.domain.models import RevenueMetrics


class ProjectionResult(TypedDict, total=False):
    """
    Series contract returned by strategies.

    `total_revenue` is only set when the strategy has a better figure than the
    catalog's reported revenue; the synthesizer falls back otherwise.
    """

    monthly_revenue: List[float]
    monthly_units_sold: List[float]
    labels: List[str]
    player_counts: List[int]
    total_revenue: Optional[float]


@runtime_checkable
class ProjectionStrategy(Protocol):
    """
    Common interface all projection strategies must implement.

    Attributes
    ----------
    name : str
        A short machine-friendly identifier, reported as the report `mode`.
    description : str
        A human-friendly summary of the approach.
    """

    name: str
    description: str

    def project(self, metrics: RevenueMetrics, mau: float, units_sold: int) -> ProjectionResult:
        """
        Build monthly series for one game.

        Parameters
        ----------
        metrics : RevenueMetrics
            Conversion rate and ARPPU to apply.
        mau : float
            Current monthly active users.
        units_sold : int
            Lifetime units sold; 0 means unknown.

        Returns
        -------
        ProjectionResult
            Monthly revenue and units series with parallel labels.
        """
        ...


class AbstractProjectionStrategy(abc.ABC):
    """
    Optional ABC helper for class-based implementations.

    Subclasses should set `name` and `description` and implement `project`.
    """

    name: str
    description: str

    @abc.abstractmethod
    def project(
        self, metrics: RevenueMetrics, mau: float, units_sold: int
    ) -> ProjectionResult:  # pragma: no cover - interface only
        """Run the projection and return monthly series."""
        raise NotImplementedError


__all__ = [
    "AbstractProjectionStrategy",
    "ProjectionResult",
    "ProjectionStrategy",
]
