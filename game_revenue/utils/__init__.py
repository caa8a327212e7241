"""
Utilities package for the Game Revenue Estimator.

Exports shared helpers for cross-cutting concerns. Keep this package
lightweight and free of domain-specific logic.
"""

from game_revenue.utils.logging import configure_logging, get_logger

__all__ = [
    "configure_logging",
    "get_logger",
]
