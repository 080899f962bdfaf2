"""Data loading module for affinity surveys."""

from .loaders import Survey, load_survey, save_survey

__all__ = ["Survey", "load_survey", "save_survey"]
