"""
Affinity scoring between two people.

Each person answers the same questions, states the answer they want from
the other person, and rates how important each question is. The score is
computed in two steps:

1. Directional match ratio, once per person:
       ratio = sum(w_i for matched questions) / sum(w_i for all questions)
   where w_i is the weight of that person's importance level for question i
   and a question matches when their desired answer equals the other
   person's own answer. A zero total yields a ratio of exactly 0.

2. Combined score:
       affinity = (ratio_me * ratio_you) ** (1 / n) * 100
   where n is the number of questions. The root degree is the question
   count, not 2.

The ratio product is computed exactly with fractions; the root is extracted
with decimal arithmetic at ROOT_PRECISION significant digits before the
final conversion to float.
"""

import logging
from dataclasses import dataclass, asdict
from decimal import Decimal, localcontext
from fractions import Fraction
from typing import Any, Dict, Mapping, Sequence

from ..configs.defaults import DEFAULT_IMPORTANCE, ROOT_PRECISION
from .errors import MismatchedResponsesError, UnknownImportanceLevelError, ZeroQuestionsError
from .schema import (
    ResponseTriple,
    validate_importance,
    validate_questions,
    validate_responses,
)

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class AffinityResult:
    """
    Result of affinity scoring.

    Attributes:
        me_to_you: Fraction of my weighted desires that you satisfy [0, 1]
        you_to_me: Fraction of your weighted desires that I satisfy [0, 1]
        question_count: Number of questions (root degree)
        score: Combined affinity percentage [0, 100]
    """
    me_to_you: float
    you_to_me: float
    question_count: int
    score: float

    def to_dict(self) -> Dict[str, Any]:
        return asdict(self)


def _weight(importance: Mapping[str, Fraction], level: str) -> Fraction:
    try:
        return importance[level]
    except KeyError:
        raise UnknownImportanceLevelError(level) from None


def directional_match_ratio(
    own: Sequence[ResponseTriple],
    other: Sequence[ResponseTriple],
    importance: Mapping[str, Fraction]
) -> Fraction:
    """
    Weighted fraction of one person's desires satisfied by the other.

    Args:
        own: Response set whose desires and importance levels are used
        other: Response set whose own answers are checked
        importance: Validated importance table (level -> Fraction weight)

    Returns:
        Ratio in [0, 1]; exactly 0 when every weight involved is zero

    Raises:
        MismatchedResponsesError: If the response sets differ in length
        UnknownImportanceLevelError: If a level in `own` is not in the table
    """
    if len(own) != len(other):
        raise MismatchedResponsesError(
            f"Mismatched response counts: {len(own)} vs {len(other)}"
        )

    matched = Fraction(0)
    total = Fraction(0)
    for mine, theirs in zip(own, other):
        weight = _weight(importance, mine.importance)
        total += weight
        if mine.desired_answer == theirs.own_answer:
            matched += weight

    if total == 0:
        return Fraction(0)
    return matched / total


def combine_ratios(me_to_you: Fraction, you_to_me: Fraction, question_count: int) -> float:
    """
    Combine two directional ratios into an affinity percentage.

    Computes (me_to_you * you_to_me) ** (1 / question_count) * 100.

    Raises:
        ZeroQuestionsError: If question_count is zero
    """
    if question_count <= 0:
        raise ZeroQuestionsError()

    product = Fraction(me_to_you) * Fraction(you_to_me)
    if product == 0:
        return 0.0

    with localcontext() as ctx:
        ctx.prec = ROOT_PRECISION
        value = Decimal(product.numerator) / Decimal(product.denominator)
        root = value ** (Decimal(1) / Decimal(question_count))
        return float(root * 100)


class Affinity:
    """
    Affinity between two people answering a common list of questions.

    Example:
        affinity = Affinity(
            questions=[
                {"how messy are you": ["very messy", "average", "very organized"]},
                {"do you like to be the center of attention": ["yes", "no"]},
            ],
            me=[
                ("very organized", "very organized", "very important"),
                ("no", "no", "a little important"),
            ],
            you=[
                ("very organized", "average", "a little important"),
                ("yes", "no", "somewhat important"),
            ],
        )
        affinity.score()  # 94.4087...

    Attributes:
        questions: Validated questions (informational only)
        importance: Importance table as given (defaults to DEFAULT_IMPORTANCE)
        me: Validated response set for person A
        you: Validated response set for person B
    """

    def __init__(
        self,
        questions: Sequence[Any] = (),
        importance: Mapping[str, Any] = DEFAULT_IMPORTANCE,
        me: Sequence[Any] = (),
        you: Sequence[Any] = ()
    ):
        """
        Validate and store the inputs.

        Raises:
            InvalidShapeError: If any input has the wrong container type or shape
            MismatchedResponsesError: If `me` and `you` differ in length, or a
                non-empty question list differs in length from non-empty responses
        """
        self.questions = validate_questions(questions)
        self._weights = validate_importance(importance)
        self.importance = importance
        self.me = validate_responses(me, "me")
        self.you = validate_responses(you, "you")

        if len(self.me) != len(self.you):
            raise MismatchedResponsesError(
                f"Mismatched response counts: me has {len(self.me)}, you has {len(self.you)}"
            )
        # Empty response sets are left for breakdown() to reject as zero questions
        if self.questions and self.me and len(self.questions) != len(self.me):
            raise MismatchedResponsesError(
                f"Mismatched response counts: {len(self.questions)} questions "
                f"but {len(self.me)} responses"
            )

    @property
    def question_count(self) -> int:
        return len(self.me)

    def breakdown(self) -> AffinityResult:
        """
        Compute both directional ratios and the combined score.

        Raises:
            ZeroQuestionsError: If there are no responses
            UnknownImportanceLevelError: If a response uses an unknown level
        """
        if self.question_count == 0:
            raise ZeroQuestionsError()

        me_to_you = directional_match_ratio(self.me, self.you, self._weights)
        you_to_me = directional_match_ratio(self.you, self.me, self._weights)
        score = combine_ratios(me_to_you, you_to_me, self.question_count)

        logger.debug(
            f"Affinity over {self.question_count} questions: "
            f"me_to_you={me_to_you}, you_to_me={you_to_me}, score={score:.4f}"
        )

        return AffinityResult(
            me_to_you=float(me_to_you),
            you_to_me=float(you_to_me),
            question_count=self.question_count,
            score=score
        )

    def score(self) -> float:
        """Compute the affinity percentage for the two given people."""
        return self.breakdown().score


def compute_affinity_score(
    questions: Sequence[Any],
    importance: Mapping[str, Any],
    me: Sequence[Any],
    you: Sequence[Any]
) -> float:
    """
    Compute the mutual affinity percentage between two people.

    Args:
        questions: Question list (validated, not used by the arithmetic)
        importance: Importance level name -> non-negative weight
        me: Response triples (own answer, desired answer, importance) for person A
        you: Response triples for person B, index-aligned with `me`

    Returns:
        Affinity percentage, 100 for a perfect mutual match

    Raises:
        InvalidShapeError, MismatchedResponsesError, ZeroQuestionsError,
        UnknownImportanceLevelError
    """
    return Affinity(questions=questions, importance=importance, me=me, you=you).score()
