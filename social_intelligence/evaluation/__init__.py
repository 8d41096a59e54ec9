"""Evaluation module for score distribution reports."""

from .metrics import (
    ScoreDistributionStats,
    ScoreReport,
    compute_score_distribution_stats,
    compatibility_frame,
    create_score_report,
    create_compatibility_report,
    summarize_interaction_scores,
)

__all__ = [
    "ScoreDistributionStats",
    "ScoreReport",
    "compute_score_distribution_stats",
    "compatibility_frame",
    "create_score_report",
    "create_compatibility_report",
    "summarize_interaction_scores",
]
