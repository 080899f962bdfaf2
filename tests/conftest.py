"""
Pytest configuration and shared fixtures.
"""

from pathlib import Path
from typing import Any, Dict, List

import pytest

PROJECT_ROOT = Path(__file__).parent.parent


@pytest.fixture
def project_root() -> Path:
    return PROJECT_ROOT


@pytest.fixture
def config_path() -> Path:
    return PROJECT_ROOT / "configs" / "config.yaml"


@pytest.fixture
def example_survey_path() -> Path:
    return PROJECT_ROOT / "configs" / "example_survey.yaml"


@pytest.fixture
def questions() -> List[Dict[str, List[str]]]:
    """Two questions in the single-entry mapping form."""
    return [
        {"how messy are you": ["very messy", "average", "very organized"]},
        {"do you like to be the center of attention": ["yes", "no"]},
    ]


@pytest.fixture
def me() -> List[tuple]:
    return [
        ("very organized", "very organized", "very important"),
        ("no", "no", "a little important"),
    ]


@pytest.fixture
def you() -> List[tuple]:
    return [
        ("very organized", "average", "a little important"),
        ("yes", "no", "somewhat important"),
    ]


@pytest.fixture
def survey_data() -> Dict[str, Any]:
    """Parsed survey document with three respondents."""
    return {
        "questions": [
            {"pets": ["cats", "dogs"]},
            {"mornings": ["early", "late"]},
        ],
        "respondents": {
            "ann": [["cats", "dogs", "mandatory"], ["early", "late", "very important"]],
            "ben": [["dogs", "cats", "mandatory"], ["late", "early", "very important"]],
            "cid": [["cats", "cats", "a little important"], ["late", "late", "a little important"]],
        },
    }
