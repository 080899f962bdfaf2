"""Configuration module for affinity scoring."""

from .defaults import DEFAULT_IMPORTANCE, ROOT_PRECISION
from .loader import load_config, validate_config, get_config_value, importance_from_config

__all__ = [
    "DEFAULT_IMPORTANCE",
    "ROOT_PRECISION",
    "load_config",
    "validate_config",
    "get_config_value",
    "importance_from_config",
]
