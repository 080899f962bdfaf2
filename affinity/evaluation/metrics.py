"""
Evaluation metrics for batches of affinity scores.

Evaluation focuses on:
1. Score distribution analysis across scored pairs
2. Sanity checks (symmetry: scoring (A, B) and (B, A) must agree)

This module DOES NOT claim the scores predict real-world compatibility.
"""

import logging
from dataclasses import dataclass, field
from typing import Dict, List, Any, Optional, Sequence
import json

import numpy as np
import pandas as pd

from ..configs.defaults import DEFAULT_QUANTILES, DEFAULT_SYMMETRY_TOLERANCE
from ..data_loading.loaders import Survey
from ..scoring.scorer import Affinity

logger = logging.getLogger(__name__)


@dataclass
class ScoreDistributionStats:
    """Statistics about score distribution."""
    count: int
    mean: float
    std: float
    min: float
    max: float
    quantiles: Dict[str, float]  # e.g., {"p10": 20.0, "p50": 50.0, "p90": 80.0}

    def to_dict(self) -> Dict[str, Any]:
        return {
            "count": int(self.count),
            "mean": float(self.mean),
            "std": float(self.std),
            "min": float(self.min),
            "max": float(self.max),
            "quantiles": {k: float(v) for k, v in self.quantiles.items()}
        }


@dataclass
class SymmetryCheck:
    """Results of symmetry sanity check."""
    n_pairs: int
    max_deviation: float
    n_violations: int
    tolerance: float

    @property
    def is_symmetric(self) -> bool:
        return self.n_violations == 0

    def to_dict(self) -> Dict[str, Any]:
        return {
            "n_pairs": int(self.n_pairs),
            "max_deviation": float(self.max_deviation),
            "n_violations": int(self.n_violations),
            "tolerance": float(self.tolerance),
            "is_symmetric": self.is_symmetric
        }


@dataclass
class EvaluationReport:
    """
    Evaluation report for a batch of scored pairs.

    Contains distribution statistics and the symmetry sanity check.
    """
    name: str
    distribution_stats: ScoreDistributionStats
    symmetry_check: Optional[SymmetryCheck] = None
    additional_metrics: Dict[str, Any] = field(default_factory=dict)

    def to_dict(self) -> Dict[str, Any]:
        result = {
            "name": self.name,
            "distribution_stats": self.distribution_stats.to_dict(),
            "additional_metrics": self.additional_metrics
        }
        if self.symmetry_check:
            result["symmetry_check"] = self.symmetry_check.to_dict()
        return result

    def save(self, filepath: str) -> None:
        """Save report to JSON file."""
        with open(filepath, "w") as f:
            json.dump(self.to_dict(), f, indent=2)
        logger.info(f"Saved evaluation report to {filepath}")

    def summary(self) -> str:
        """Generate text summary of the report."""
        stats = self.distribution_stats
        lines = [
            f"Evaluation Report: {self.name}",
            "=" * 50,
            "",
            f"Affinity Distribution ({stats.count} pairs):",
            f"  Mean: {stats.mean:.4f}",
            f"  Std:  {stats.std:.4f}",
            f"  Min:  {stats.min:.4f}",
            f"  Max:  {stats.max:.4f}",
        ]

        for q_name, q_value in stats.quantiles.items():
            lines.append(f"  {q_name}: {q_value:.4f}")

        if self.symmetry_check:
            lines.extend([
                "",
                "Symmetry Check:",
                f"  Max deviation: {self.symmetry_check.max_deviation:.2e}",
                f"  Violations: {self.symmetry_check.n_violations}/{self.symmetry_check.n_pairs}",
                f"  Is symmetric: {self.symmetry_check.is_symmetric}",
            ])

        return "\n".join(lines)


def compute_score_distribution_stats(
    scores: Sequence[float],
    quantiles: Sequence[float] = DEFAULT_QUANTILES
) -> ScoreDistributionStats:
    """
    Compute distribution statistics for scores.

    Args:
        scores: Affinity scores
        quantiles: Quantile values to compute (default: p10, p25, p50, p75, p90)

    Returns:
        ScoreDistributionStats instance

    Raises:
        ValueError: If scores is empty or two quantiles share a name
    """
    scores = np.asarray(scores, dtype=float)
    if scores.size == 0:
        raise ValueError("Cannot compute distribution statistics of zero scores")

    # Names keep fractional percentiles, e.g. 0.001 -> "p0.1"
    quantile_dict = {}
    for q in quantiles:
        key = f"p{q * 100:g}"
        if key in quantile_dict:
            raise ValueError(f"Duplicate quantile {q} (named {key})")
        quantile_dict[key] = float(np.percentile(scores, q * 100))

    return ScoreDistributionStats(
        count=int(scores.size),
        mean=float(np.mean(scores)),
        std=float(np.std(scores)),
        min=float(np.min(scores)),
        max=float(np.max(scores)),
        quantiles=quantile_dict
    )


def check_symmetry(
    survey: Survey,
    pairs: pd.DataFrame,
    tolerance: float = DEFAULT_SYMMETRY_TOLERANCE
) -> SymmetryCheck:
    """
    Rescore every pair with the roles swapped and compare.

    Args:
        survey: Survey the pairs were scored from
        pairs: Output of score_survey_pairs
        tolerance: Maximum allowed absolute difference

    Returns:
        SymmetryCheck instance
    """
    deviations = []
    for row in pairs.itertuples(index=False):
        reversed_score = Affinity(
            questions=survey.questions,
            importance=survey.importance,
            me=survey.respondents[row.person_b],
            you=survey.respondents[row.person_a]
        ).score()
        deviations.append(abs(reversed_score - row.affinity))

    deviations = np.asarray(deviations, dtype=float)
    n_violations = int(np.sum(deviations > tolerance))
    if n_violations:
        logger.warning(f"Symmetry violated for {n_violations} of {len(deviations)} pairs")

    return SymmetryCheck(
        n_pairs=len(deviations),
        max_deviation=float(deviations.max()) if deviations.size else 0.0,
        n_violations=n_violations,
        tolerance=tolerance
    )


def create_evaluation_report(
    name: str,
    survey: Survey,
    pairs: pd.DataFrame,
    config: Optional[Dict[str, Any]] = None
) -> EvaluationReport:
    """
    Create an evaluation report for a batch of scored pairs.

    Args:
        name: Report name
        survey: Survey the pairs were scored from
        pairs: Output of score_survey_pairs
        config: Main config dictionary (reads the evaluation section)

    Returns:
        EvaluationReport instance
    """
    eval_config = (config or {}).get("evaluation") or {}
    quantiles: List[float] = eval_config.get("quantiles", list(DEFAULT_QUANTILES))
    tolerance = eval_config.get("symmetry_tolerance", DEFAULT_SYMMETRY_TOLERANCE)

    logger.info(f"Creating evaluation report for {name}")

    distribution_stats = compute_score_distribution_stats(pairs["affinity"].to_numpy(), quantiles)
    symmetry_check = check_symmetry(survey, pairs, tolerance)

    additional_metrics = {
        "n_respondents": len(survey.respondents),
        "n_questions": len(survey.questions),
        "perfect_matches": int((pairs["affinity"] == 100.0).sum()),
        "zero_matches": int((pairs["affinity"] == 0.0).sum()),
    }

    return EvaluationReport(
        name=name,
        distribution_stats=distribution_stats,
        symmetry_check=symmetry_check,
        additional_metrics=additional_metrics
    )
