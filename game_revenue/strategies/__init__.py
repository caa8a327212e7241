"""
Strategies package for the Game Revenue Estimator.

Re-exports the projection interfaces and the concrete projection classes so
downstream code can import from `game_revenue.strategies` directly.
"""

from game_revenue.strategies.abstract import (
    AbstractProjectionStrategy,
    ProjectionResult,
    ProjectionStrategy,
)
from game_revenue.strategies.real_series import RealSeriesProjection
from game_revenue.strategies.synthetic import SyntheticProjection

__all__ = [
    # Abstracts
    "AbstractProjectionStrategy",
    "ProjectionResult",
    "ProjectionStrategy",
    # Concrete strategies
    "RealSeriesProjection",
    "SyntheticProjection",
]
