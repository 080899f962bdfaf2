"""Evaluation module for batches of affinity scores."""

from .metrics import (
    compute_score_distribution_stats,
    check_symmetry,
    ScoreDistributionStats,
    SymmetryCheck,
    EvaluationReport,
    create_evaluation_report
)

__all__ = [
    "compute_score_distribution_stats",
    "check_symmetry",
    "ScoreDistributionStats",
    "SymmetryCheck",
    "EvaluationReport",
    "create_evaluation_report"
]
