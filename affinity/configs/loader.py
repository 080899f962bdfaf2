"""
Configuration loading and validation.

This module handles loading of YAML configuration files and
validates that the importance table and batch settings are usable.
"""

import logging
from numbers import Real
from pathlib import Path
from typing import Dict, Any, List

import yaml

from .defaults import DEFAULT_IMPORTANCE

logger = logging.getLogger(__name__)


def load_config(filepath: str) -> Dict[str, Any]:
    """
    Load configuration from YAML file.

    Args:
        filepath: Path to the YAML configuration file

    Returns:
        Configuration dictionary

    Raises:
        FileNotFoundError: If config file doesn't exist
        yaml.YAMLError: If YAML is invalid
        ValueError: If the file is empty or not a mapping
    """
    path = Path(filepath)
    if not path.exists():
        raise FileNotFoundError(f"Configuration file not found: {filepath}")

    logger.info(f"Loading configuration from {filepath}")
    with open(filepath, "r") as f:
        config = yaml.safe_load(f)

    if config is None:
        raise ValueError(f"Configuration file is empty: {filepath}")
    if not isinstance(config, dict):
        raise ValueError(f"Configuration file must contain a mapping: {filepath}")

    return config


def validate_config(config: Dict[str, Any]) -> List[str]:
    """
    Validate configuration and return list of warnings/errors.

    Args:
        config: Configuration dictionary

    Returns:
        List of warning/error messages (empty if valid)
    """
    issues = []

    # Importance table is optional; when given it must be a usable table
    if "importance" in config:
        importance = config["importance"]
        if not isinstance(importance, dict):
            issues.append("importance must be a mapping of level name to weight")
        else:
            for level, weight in importance.items():
                if isinstance(weight, bool) or not isinstance(weight, Real):
                    issues.append(f"importance.{level} must be a number, got {weight!r}")
                elif weight < 0:
                    issues.append(f"importance.{level} must be non-negative, got {weight}")

    # Remaining sections must be mappings when present
    for section in ["pair_generation", "evaluation", "global"]:
        if section in config and not isinstance(config[section], dict):
            issues.append(f"{section} must be a mapping, got {config[section]!r}")

    pair_config = config.get("pair_generation")
    if isinstance(pair_config, dict):
        max_pairs = pair_config.get("max_pairs", 1)
        if isinstance(max_pairs, bool) or not isinstance(max_pairs, int) or max_pairs < 1:
            issues.append(f"pair_generation.max_pairs must be a positive integer, got {max_pairs!r}")

    evaluation = config.get("evaluation")
    if isinstance(evaluation, dict):
        quantiles = evaluation.get("quantiles", [])
        if not isinstance(quantiles, list):
            issues.append(f"evaluation.quantiles must be a list, got {quantiles!r}")
            quantiles = []
        for q in quantiles:
            if isinstance(q, bool) or not isinstance(q, Real):
                issues.append(f"evaluation.quantiles must be numbers, got {q!r}")
            elif not 0 <= q <= 1:
                issues.append(f"evaluation.quantiles must be in [0, 1], got {q}")
        tolerance = evaluation.get("symmetry_tolerance", 0)
        if isinstance(tolerance, bool) or not isinstance(tolerance, Real):
            issues.append(f"evaluation.symmetry_tolerance must be a number, got {tolerance!r}")
        elif tolerance < 0:
            issues.append(f"evaluation.symmetry_tolerance must be non-negative, got {tolerance}")

    global_config = config.get("global")
    if isinstance(global_config, dict):
        log_level = global_config.get("log_level", "INFO")
        if str(log_level).upper() not in ["DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL"]:
            issues.append(f"Unknown global.log_level: {log_level}")

    return issues


def get_config_value(config: Dict[str, Any], path: str, default: Any = None) -> Any:
    """
    Get a nested configuration value using dot notation.

    Args:
        config: Configuration dictionary
        path: Dot-separated path (e.g., "pair_generation.max_pairs")
        default: Default value if path doesn't exist

    Returns:
        Configuration value or default
    """
    keys = path.split(".")
    value = config
    for key in keys:
        if isinstance(value, dict) and key in value:
            value = value[key]
        else:
            return default
    return value


def importance_from_config(config: Dict[str, Any]) -> Dict[str, Any]:
    """
    Importance table from a config, falling back to DEFAULT_IMPORTANCE.

    The returned dict is a fresh copy; mutating it never affects the default.
    """
    importance = config.get("importance")
    if importance is None:
        return dict(DEFAULT_IMPORTANCE)
    return dict(importance)
