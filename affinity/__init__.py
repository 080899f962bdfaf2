"""
Affinity Scoring

Computes a symmetric affinity percentage between two people who answer
the same questions, state the answer they want from each other, and
weight each question by importance.

Key Design Decisions:
- Directional match ratios are computed per person with exact fractions
- Ratios combine as a geometric mean whose root degree is the question count
- Inputs are validated once at the boundary and never coerced
- Scoring is pure; no state is kept between calls
"""

from .configs.defaults import DEFAULT_IMPORTANCE
from .scoring import Affinity, AffinityResult, compute_affinity_score

__version__ = "1.0.0"
__all__ = ["DEFAULT_IMPORTANCE", "Affinity", "AffinityResult", "compute_affinity_score"]
