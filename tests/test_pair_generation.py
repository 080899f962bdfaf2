"""
Tests for pair generation and survey pair scoring.
"""

import math

import numpy as np
import pytest

from affinity.data_loading import Survey, load_survey
from affinity.pair_generation import PAIR_COLUMNS, PairGenerator, score_survey_pairs
from affinity.scoring import UnknownImportanceLevelError


class TestPairGenerator:
    """Test pair enumeration and sampling."""

    def test_all_pairs(self):
        a, b = PairGenerator().generate_pairs(4)
        assert list(zip(a, b)) == [(0, 1), (0, 2), (0, 3), (1, 2), (1, 3), (2, 3)]

    def test_no_pairs_for_small_inputs(self):
        for n in (0, 1):
            a, b = PairGenerator().generate_pairs(n)
            assert len(a) == len(b) == 0

    def test_sampling_caps_and_is_unique(self):
        a, b = PairGenerator(max_pairs=10, random_seed=3).generate_pairs(20)
        assert len(a) == 10
        assert np.all(a < b)
        assert len(set(zip(a, b))) == 10

    def test_sampling_is_reproducible(self):
        first = PairGenerator(max_pairs=5, random_seed=42).generate_pairs(10)
        second = PairGenerator(max_pairs=5, random_seed=42).generate_pairs(10)
        np.testing.assert_array_equal(first[0], second[0])
        np.testing.assert_array_equal(first[1], second[1])

    def test_invalid_max_pairs(self):
        with pytest.raises(ValueError):
            PairGenerator(max_pairs=0)

    def test_from_config(self):
        generator = PairGenerator.from_config({"pair_generation": {"max_pairs": 2, "random_seed": 1}})
        assert generator.max_pairs == 2

    def test_from_config_null_section(self):
        """An empty pair_generation section falls back to the defaults."""
        assert PairGenerator.from_config({"pair_generation": None}).max_pairs == 10000


class TestScoreSurveyPairs:
    """Test scoring every pair of a survey."""

    def test_example_survey(self, example_survey_path):
        survey = load_survey(str(example_survey_path))
        df = score_survey_pairs(survey)

        assert list(df.columns) == PAIR_COLUMNS
        assert len(df) == 6

        top = df.iloc[0]
        assert {top["person_a"], top["person_b"]} == {"bob", "carol"}
        assert top["affinity"] == 100.0

        second = df.iloc[1]
        assert (second["person_a"], second["person_b"]) == ("alice", "bob")
        assert second["affinity"] == pytest.approx(math.sqrt(500 / 561) * 100, abs=1e-9)
        assert second["ratio_a_to_b"] == pytest.approx(50 / 51)
        assert second["ratio_b_to_a"] == pytest.approx(10 / 11)

        third = df.iloc[2]
        assert (third["person_a"], third["person_b"]) == ("alice", "carol")
        assert third["affinity"] == pytest.approx(math.sqrt(25 / 1326) * 100, abs=1e-9)

        # dave rates everything irrelevant, so every pair with him scores 0
        zero_pairs = df[df["affinity"] == 0.0]
        assert len(zero_pairs) == 3
        assert all("dave" in (a, b) for a, b in zip(zero_pairs["person_a"], zero_pairs["person_b"]))

    def test_scores_sorted_descending(self, survey_data):
        df = score_survey_pairs(Survey.from_dict(survey_data))
        assert df["affinity"].is_monotonic_decreasing
        assert df.iloc[0]["affinity"] == 100.0
        assert df.iloc[1]["affinity"] == pytest.approx(math.sqrt(5 / 12) * 100, abs=1e-9)
        assert df.iloc[2]["affinity"] == pytest.approx(math.sqrt(1 / 12) * 100, abs=1e-9)

    def test_single_respondent(self, survey_data):
        survey_data["respondents"] = {"ann": survey_data["respondents"]["ann"]}
        df = score_survey_pairs(Survey.from_dict(survey_data))
        assert df.empty
        assert list(df.columns) == PAIR_COLUMNS

    def test_sampled_pairs(self, survey_data):
        generator = PairGenerator(max_pairs=2, random_seed=0)
        df = score_survey_pairs(Survey.from_dict(survey_data), generator)
        assert len(df) == 2

    def test_unknown_level(self, survey_data):
        survey_data["importance"] = {"mandatory": 250, "very important": 50}
        with pytest.raises(UnknownImportanceLevelError):
            score_survey_pairs(Survey.from_dict(survey_data))
