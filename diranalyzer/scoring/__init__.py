"""Directory and package scoring."""

from .directory_scorer import analyze_directory, compute_score
from .score_calculator import ScoringError, WEIGHTS, calculate_score

__all__ = [
    "analyze_directory",
    "compute_score",
    "ScoringError",
    "WEIGHTS",
    "calculate_score",
]
