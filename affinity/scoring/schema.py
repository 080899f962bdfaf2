"""
Input schema for affinity scoring.

Defines the data structures consumed by the scorer:
- Question: a label and its ordered permissible answers
- ResponseTriple: one person's own answer, the answer they want from the
  other person, and how important the question is to them
- Importance tables: importance-level name to non-negative weight

All structures are validated once at the boundary and are immutable
afterwards. Shape violations raise InvalidShapeError; nothing is coerced
silently.
"""

from collections.abc import Mapping, Sequence
from dataclasses import dataclass
from decimal import Decimal
from fractions import Fraction
from numbers import Real
from typing import Any, Dict, List, Tuple

from .errors import InvalidShapeError


def _is_sequence(value: Any) -> bool:
    """True for list-like containers, excluding strings and bytes."""
    return isinstance(value, Sequence) and not isinstance(value, (str, bytes))


@dataclass(frozen=True)
class Question:
    """
    A single survey question.

    Attributes:
        label: Question text, e.g. "how messy are you"
        answers: Ordered permissible answers, e.g. ("very messy", "average")
    """
    label: str
    answers: Tuple[str, ...] = ()

    def __post_init__(self):
        """Validate label and answers, freezing answers into a tuple."""
        if not isinstance(self.label, str):
            raise InvalidShapeError(f"Question label must be a string, got {type(self.label).__name__}")
        if not _is_sequence(self.answers):
            raise InvalidShapeError(
                f"Answers for question {self.label!r} must be a sequence, "
                f"got {type(self.answers).__name__}"
            )
        for answer in self.answers:
            if not isinstance(answer, str):
                raise InvalidShapeError(
                    f"Answers for question {self.label!r} must be strings, got {answer!r}"
                )
        object.__setattr__(self, "answers", tuple(self.answers))

    def to_dict(self) -> Dict[str, List[str]]:
        """Convert to the single-entry mapping form."""
        return {self.label: list(self.answers)}

    @classmethod
    def from_obj(cls, obj: Any) -> "Question":
        """
        Build a Question from any accepted shape.

        Accepted shapes:
            Question instance
            {"how messy are you": ["very messy", "average", "very organized"]}
            {"label": "how messy are you", "answers": [...]}
        """
        if isinstance(obj, Question):
            return obj
        if not isinstance(obj, Mapping):
            raise InvalidShapeError(f"Question must be a mapping, got {type(obj).__name__}")
        if "label" in obj:
            return cls(label=obj["label"], answers=obj.get("answers", ()))
        if len(obj) != 1:
            raise InvalidShapeError(
                f"Question mapping must have exactly one entry, got {len(obj)}"
            )
        (label, answers), = obj.items()
        return cls(label=label, answers=answers)


@dataclass(frozen=True)
class ResponseTriple:
    """
    One person's response to one question.

    Attributes:
        own_answer: The answer this person gave
        desired_answer: The answer this person wants from the other person
        importance: Importance level name, a key of the importance table
    """
    own_answer: str
    desired_answer: str
    importance: str

    def __post_init__(self):
        """Require all three fields to be strings."""
        for attr in ["own_answer", "desired_answer", "importance"]:
            val = getattr(self, attr)
            if not isinstance(val, str):
                raise InvalidShapeError(f"{attr} must be a string, got {val!r}")

    def to_tuple(self) -> Tuple[str, str, str]:
        return (self.own_answer, self.desired_answer, self.importance)

    @classmethod
    def from_obj(cls, obj: Any) -> "ResponseTriple":
        """Build from a ResponseTriple or any 3-item sequence."""
        if isinstance(obj, ResponseTriple):
            return obj
        if not _is_sequence(obj) or len(obj) != 3:
            raise InvalidShapeError(
                f"Response must be a (own_answer, desired_answer, importance) triple, got {obj!r}"
            )
        return cls(*obj)


def validate_questions(questions: Any) -> Tuple[Question, ...]:
    """
    Validate a question list.

    Args:
        questions: Sequence of questions in any shape accepted by Question.from_obj

    Returns:
        Tuple of Question instances

    Raises:
        InvalidShapeError: If questions is not a sequence or an item is malformed
    """
    if not _is_sequence(questions):
        raise InvalidShapeError(f"questions must be a sequence, got {type(questions).__name__}")
    return tuple(Question.from_obj(q) for q in questions)


def validate_responses(responses: Any, name: str = "responses") -> Tuple[ResponseTriple, ...]:
    """
    Validate one person's response set.

    Args:
        responses: Sequence of response triples
        name: Name used in error messages (e.g. "me", "you")

    Returns:
        Tuple of ResponseTriple instances

    Raises:
        InvalidShapeError: If responses is not a sequence or a triple is malformed
    """
    if not _is_sequence(responses):
        raise InvalidShapeError(f"{name} must be a sequence, got {type(responses).__name__}")
    return tuple(ResponseTriple.from_obj(r) for r in responses)


def validate_importance(importance: Any) -> Dict[str, Fraction]:
    """
    Validate an importance table and convert weights to exact fractions.

    Other numbers (floats, numpy scalars, decimals) are converted
    through their string representation so that 0.1 becomes exactly 1/10.

    Raises:
        InvalidShapeError: If importance is not a mapping, a key is not a
            string, or a weight is not a non-negative real number
    """
    if not isinstance(importance, Mapping):
        raise InvalidShapeError(f"importance must be a mapping, got {type(importance).__name__}")

    table = {}
    for level, weight in importance.items():
        if not isinstance(level, str):
            raise InvalidShapeError(f"Importance level names must be strings, got {level!r}")
        if isinstance(weight, bool) or not isinstance(weight, (Real, Decimal)):
            raise InvalidShapeError(f"Weight for {level!r} must be a number, got {weight!r}")
        try:
            weight = Fraction(weight) if isinstance(weight, (int, Fraction)) else Fraction(str(weight))
        except (ValueError, OverflowError, TypeError) as e:
            raise InvalidShapeError(f"Weight for {level!r} must be a finite number, got {weight!r}") from e
        if weight < 0:
            raise InvalidShapeError(f"Weight for {level!r} must be non-negative, got {weight}")
        table[level] = weight
    return table
