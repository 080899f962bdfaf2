"""Exceptions raised by the affinity scorer."""


class AffinityError(ValueError):
    """Base class for all affinity scoring errors."""


class InvalidShapeError(AffinityError):
    """Input container is not of the expected type or structure."""


class UnknownImportanceLevelError(AffinityError):
    """A response triple references an importance level missing from the table."""

    def __init__(self, level: str):
        self.level = level
        super().__init__(f"Unknown importance level: {level!r}")


class ZeroQuestionsError(AffinityError):
    """Affinity is undefined when there are no questions."""

    def __init__(self):
        super().__init__("Cannot compute affinity with zero questions")


class MismatchedResponsesError(AffinityError):
    """Response sets do not line up with each other or with the questions."""
