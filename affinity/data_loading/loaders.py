"""
Survey loading for affinity scoring.

A survey file is a YAML document with:
- questions: list of questions, e.g. {"how messy are you": ["messy", "tidy"]}
- importance: optional importance table (defaults to DEFAULT_IMPORTANCE)
- respondents: mapping of respondent name to their list of
  [own answer, desired answer, importance level] triples

No scoring is done here - that's handled by the scoring module.
"""

import logging
from dataclasses import dataclass, field
from pathlib import Path
from typing import Any, Dict, List, Mapping, Optional, Tuple

import yaml

from ..configs.defaults import DEFAULT_IMPORTANCE
from ..scoring.errors import InvalidShapeError, MismatchedResponsesError
from ..scoring.schema import (
    Question,
    ResponseTriple,
    validate_importance,
    validate_questions,
    validate_responses,
)

logger = logging.getLogger(__name__)


@dataclass
class Survey:
    """
    A question list together with every respondent's response set.

    Attributes:
        questions: Validated questions
        respondents: Respondent name -> validated response set, in file order
        importance: Importance table shared by all respondents
    """
    questions: Tuple[Question, ...]
    respondents: Dict[str, Tuple[ResponseTriple, ...]]
    importance: Mapping[str, Any] = field(default_factory=lambda: dict(DEFAULT_IMPORTANCE))

    def __post_init__(self):
        """Validate shapes and require aligned response sets."""
        self.questions = validate_questions(self.questions)
        validate_importance(self.importance)
        if not isinstance(self.respondents, Mapping):
            raise InvalidShapeError(
                f"respondents must be a mapping, got {type(self.respondents).__name__}"
            )
        self.respondents = {
            str(name): validate_responses(responses, str(name))
            for name, responses in self.respondents.items()
        }

        for name, responses in self.respondents.items():
            if len(responses) != len(self.questions):
                raise MismatchedResponsesError(
                    f"Respondent {name!r} has {len(responses)} responses "
                    f"for {len(self.questions)} questions"
                )

    @property
    def names(self) -> List[str]:
        return list(self.respondents)

    def to_dict(self) -> Dict[str, Any]:
        """Convert to the survey file structure."""
        return {
            "questions": [q.to_dict() for q in self.questions],
            "importance": dict(self.importance),
            "respondents": {
                name: [list(r.to_tuple()) for r in responses]
                for name, responses in self.respondents.items()
            }
        }

    @classmethod
    def from_dict(
        cls,
        data: Dict[str, Any],
        default_importance: Optional[Mapping[str, Any]] = None
    ) -> "Survey":
        """
        Create from a parsed survey document.

        The survey's own importance section wins over default_importance,
        which in turn wins over DEFAULT_IMPORTANCE.
        """
        if "questions" not in data:
            raise ValueError("Survey is missing required section: questions")
        if "respondents" not in data:
            raise ValueError("Survey is missing required section: respondents")

        importance = data.get("importance")
        if importance is None:
            importance = dict(DEFAULT_IMPORTANCE if default_importance is None else default_importance)

        return cls(
            questions=data["questions"],
            respondents=data["respondents"],
            importance=importance
        )


def load_survey(filepath: str, default_importance: Optional[Mapping[str, Any]] = None) -> Survey:
    """
    Load a survey from a YAML file.

    Args:
        filepath: Path to the survey file
        default_importance: Importance table used when the survey has none

    Returns:
        Validated Survey

    Raises:
        FileNotFoundError: If the file doesn't exist
        ValueError: If the file is empty or misses a required section
        InvalidShapeError: If a section has the wrong shape
        MismatchedResponsesError: If a respondent's responses don't match the questions
    """
    path = Path(filepath)
    if not path.exists():
        raise FileNotFoundError(f"Survey file not found: {filepath}")

    logger.info(f"Loading survey from {filepath}")
    with open(filepath, "r") as f:
        data = yaml.safe_load(f)

    if data is None:
        raise ValueError(f"Survey file is empty: {filepath}")
    if not isinstance(data, dict):
        raise ValueError(f"Survey file must contain a mapping: {filepath}")

    survey = Survey.from_dict(data, default_importance)
    logger.info(
        f"Loaded {len(survey.respondents)} respondents "
        f"answering {len(survey.questions)} questions"
    )
    return survey


def save_survey(survey: Survey, filepath: str) -> None:
    """Save a survey to a YAML file."""
    with open(filepath, "w") as f:
        yaml.safe_dump(survey.to_dict(), f, sort_keys=False)
    logger.info(f"Saved survey to {filepath}")
