"""
Revenue estimation engine.

Pure functions only: classification, metrics, series normalization, and report
synthesis. No I/O and no state between calls.
"""

from game_revenue.engine.classifier import classify
from game_revenue.engine.metrics import compute_metrics, studio_multiplier
from game_revenue.engine.normalizer import normalize
from game_revenue.engine.synthesizer import select_strategy, synthesize

__all__ = [
    "classify",
    "compute_metrics",
    "normalize",
    "select_strategy",
    "studio_multiplier",
    "synthesize",
]
