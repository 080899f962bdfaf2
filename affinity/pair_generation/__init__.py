"""Pair generation module for scoring survey respondents."""

from .generator import PairGenerator, score_survey_pairs, PAIR_COLUMNS

__all__ = ["PairGenerator", "score_survey_pairs", "PAIR_COLUMNS"]
