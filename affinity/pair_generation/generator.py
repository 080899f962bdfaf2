"""
Pair generation and batch scoring for surveys.

This module enumerates (Person A, Person B) pairs among the respondents
of a survey and scores each pair with the affinity scorer.

Key Design Decisions:
- Pairs are unordered: (A, B) and (B, A) are the same pair, since the
  affinity score is symmetric
- Self-pairs are excluded: (A, A) is never generated
- When more pairs exist than max_pairs, a uniform sample is drawn
- Reproducible given a random seed
"""

import logging
from typing import Dict, Any, Optional, Tuple

import numpy as np
import pandas as pd

from ..data_loading.loaders import Survey
from ..scoring.schema import validate_importance
from ..scoring.scorer import combine_ratios, directional_match_ratio

logger = logging.getLogger(__name__)

PAIR_COLUMNS = ["person_a", "person_b", "ratio_a_to_b", "ratio_b_to_a", "affinity"]


class PairGenerator:
    """
    Generator for respondent pairs.

    Ensures:
    - No self-pairs (i != j)
    - No duplicate pairs (indices_a[i] < indices_b[i])
    - Reproducible sampling given a random seed

    Attributes:
        max_pairs: Maximum number of pairs to generate
        random_state: Numpy RandomState for reproducibility
    """

    def __init__(self, max_pairs: Optional[int] = None, random_seed: Optional[int] = None):
        """
        Initialize the pair generator.

        Args:
            max_pairs: Maximum number of pairs to generate (None for all pairs)
            random_seed: Random seed for reproducibility
        """
        if max_pairs is not None and max_pairs < 1:
            raise ValueError(f"max_pairs must be positive, got {max_pairs}")
        self.max_pairs = max_pairs
        self.random_state = np.random.RandomState(random_seed)

    def generate_pairs(self, n_persons: int) -> Tuple[np.ndarray, np.ndarray]:
        """
        Generate pairs of person indices.

        All n * (n - 1) / 2 pairs are returned unless that exceeds max_pairs,
        otherwise max_pairs of them are sampled without replacement.

        Args:
            n_persons: Number of respondents

        Returns:
            Tuple of (indices_a, indices_b) arrays, with indices_a[i] < indices_b[i]
        """
        indices_a, indices_b = np.triu_indices(n_persons, k=1)

        if self.max_pairs is not None and len(indices_a) > self.max_pairs:
            sample_idx = self.random_state.choice(
                len(indices_a), size=self.max_pairs, replace=False
            )
            sample_idx.sort()
            indices_a = indices_a[sample_idx]
            indices_b = indices_b[sample_idx]

        logger.info(f"Generated {len(indices_a)} pairs from {n_persons} persons")
        return indices_a, indices_b

    @classmethod
    def from_config(cls, config: Dict[str, Any]) -> "PairGenerator":
        """Create from main config dictionary."""
        pair_config = config.get("pair_generation") or {}
        return cls(
            max_pairs=pair_config.get("max_pairs", 10000),
            random_seed=pair_config.get("random_seed")
        )


def score_survey_pairs(
    survey: Survey,
    generator: Optional[PairGenerator] = None
) -> pd.DataFrame:
    """
    Score respondent pairs of a survey.

    Args:
        survey: Loaded survey
        generator: Pair generator (default: all pairs, no sampling)

    Returns:
        DataFrame with columns person_a, person_b, ratio_a_to_b,
        ratio_b_to_a and affinity, sorted by affinity descending

    Raises:
        ZeroQuestionsError: If the survey has no questions and at least one pair
        UnknownImportanceLevelError: If a response uses an unknown level
    """
    generator = generator or PairGenerator()
    names = survey.names

    if len(names) < 2:
        logger.warning(f"Need at least 2 respondents to score pairs, got {len(names)}")
        return pd.DataFrame(columns=PAIR_COLUMNS)

    weights = validate_importance(survey.importance)
    question_count = len(survey.questions)
    indices_a, indices_b = generator.generate_pairs(len(names))

    rows = []
    for i, j in zip(indices_a, indices_b):
        responses_a = survey.respondents[names[i]]
        responses_b = survey.respondents[names[j]]
        a_to_b = directional_match_ratio(responses_a, responses_b, weights)
        b_to_a = directional_match_ratio(responses_b, responses_a, weights)
        rows.append({
            "person_a": names[i],
            "person_b": names[j],
            "ratio_a_to_b": float(a_to_b),
            "ratio_b_to_a": float(b_to_a),
            "affinity": combine_ratios(a_to_b, b_to_a, question_count),
        })

    df = pd.DataFrame(rows, columns=PAIR_COLUMNS)
    df = df.sort_values("affinity", ascending=False, kind="mergesort").reset_index(drop=True)

    logger.info(
        f"Scored {len(df)} pairs: mean affinity={df['affinity'].mean():.2f}, "
        f"max={df['affinity'].max():.2f}"
    )
    return df
