"""
Tests for configuration loading and validation.
"""

import pytest

from affinity.configs import (
    DEFAULT_IMPORTANCE,
    get_config_value,
    importance_from_config,
    load_config,
    validate_config,
)


class TestLoadConfig:
    """Test YAML config loading."""

    def test_shipped_config_is_valid(self, config_path):
        config = load_config(str(config_path))
        assert validate_config(config) == []
        assert config["importance"] == dict(DEFAULT_IMPORTANCE)

    def test_missing_file(self, tmp_path):
        with pytest.raises(FileNotFoundError):
            load_config(str(tmp_path / "missing.yaml"))

    def test_empty_file(self, tmp_path):
        path = tmp_path / "empty.yaml"
        path.write_text("")
        with pytest.raises(ValueError, match="empty"):
            load_config(str(path))

    def test_non_mapping_file(self, tmp_path):
        path = tmp_path / "list.yaml"
        path.write_text("- a\n- b\n")
        with pytest.raises(ValueError, match="mapping"):
            load_config(str(path))


class TestValidateConfig:
    """Test config validation issues."""

    def test_empty_config_is_valid(self):
        assert validate_config({}) == []

    def test_negative_weight(self):
        issues = validate_config({"importance": {"bad": -1}})
        assert any("importance.bad" in issue for issue in issues)

    def test_non_numeric_weight(self):
        issues = validate_config({"importance": {"bad": "high"}})
        assert any("must be a number" in issue for issue in issues)

    def test_importance_not_mapping(self):
        issues = validate_config({"importance": [1, 2]})
        assert any("importance must be a mapping" in issue for issue in issues)

    def test_bad_max_pairs(self):
        issues = validate_config({"pair_generation": {"max_pairs": 0}})
        assert any("max_pairs" in issue for issue in issues)

    def test_bad_quantile(self):
        issues = validate_config({"evaluation": {"quantiles": [0.5, 1.5]}})
        assert len(issues) == 1

    def test_bad_log_level(self):
        issues = validate_config({"global": {"log_level": "LOUD"}})
        assert any("log_level" in issue for issue in issues)

    def test_null_sections(self):
        """Sections left empty in YAML are reported, not crashed on."""
        issues = validate_config({"pair_generation": None, "evaluation": None, "global": None})
        assert len(issues) == 3
        assert all("must be a mapping" in issue for issue in issues)

    def test_non_numeric_quantile(self):
        issues = validate_config({"evaluation": {"quantiles": ["high", 0.5]}})
        assert issues == ["evaluation.quantiles must be numbers, got 'high'"]

    def test_quantiles_not_list(self):
        issues = validate_config({"evaluation": {"quantiles": 0.5}})
        assert any("must be a list" in issue for issue in issues)

    def test_non_numeric_tolerance(self):
        issues = validate_config({"evaluation": {"symmetry_tolerance": "tiny"}})
        assert any("symmetry_tolerance must be a number" in issue for issue in issues)

    def test_negative_tolerance(self):
        issues = validate_config({"evaluation": {"symmetry_tolerance": -1e-9}})
        assert any("non-negative" in issue for issue in issues)

    def test_bool_max_pairs(self):
        issues = validate_config({"pair_generation": {"max_pairs": True}})
        assert any("max_pairs" in issue for issue in issues)


class TestConfigValues:
    """Test nested lookups and importance extraction."""

    def test_get_config_value(self):
        config = {"pair_generation": {"max_pairs": 5}}
        assert get_config_value(config, "pair_generation.max_pairs") == 5
        assert get_config_value(config, "pair_generation.random_seed", 7) == 7
        assert get_config_value(config, "missing.path") is None

    def test_importance_fallback(self):
        importance = importance_from_config({})
        assert importance == dict(DEFAULT_IMPORTANCE)
        importance["mandatory"] = 1
        assert DEFAULT_IMPORTANCE["mandatory"] == 250

    def test_importance_override(self):
        assert importance_from_config({"importance": {"only": 3}}) == {"only": 3}
