"""
Scoring module for pairwise affinity.

This module provides the affinity scorer, its input schema and the
errors it raises.
"""

from .errors import (
    AffinityError,
    InvalidShapeError,
    UnknownImportanceLevelError,
    ZeroQuestionsError,
    MismatchedResponsesError,
)
from .schema import Question, ResponseTriple
from .scorer import Affinity, AffinityResult, compute_affinity_score, directional_match_ratio

__all__ = [
    "AffinityError",
    "InvalidShapeError",
    "UnknownImportanceLevelError",
    "ZeroQuestionsError",
    "MismatchedResponsesError",
    "Question",
    "ResponseTriple",
    "Affinity",
    "AffinityResult",
    "compute_affinity_score",
    "directional_match_ratio",
]
