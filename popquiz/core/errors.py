"""
Error taxonomy for quiz loading and scheduling.

Every load/validation failure is fatal to the quiz it came from and names
the offending question and field. Grading never raises.
"""

from __future__ import annotations


class QuizError(Exception):
    """Base class for all errors surfaced to the driver."""
    pass


class ParseError(QuizError):
    """Raised when a raw quiz document cannot be turned into questions."""

    def __init__(self, message: str, question_index: int | None = None, field: str | None = None):
        self.question_index = question_index
        self.field = field
        location = []
        if question_index is not None:
            location.append(f"question {question_index + 1}")
        if field:
            location.append(f"field '{field}'")
        prefix = f"{', '.join(location)}: " if location else ""
        super().__init__(f"{prefix}{message}")


class MissingField(ParseError):
    """A field required by the question's kind is absent."""
    pass


class UnknownKind(ParseError):
    """The `kind` value is not one of the supported question kinds."""
    pass


class TypeMismatch(ParseError):
    """A field has the wrong shape (e.g. `depends` given as a list)."""
    pass


class DuplicateId(ParseError):
    """Two questions share the same non-empty id."""
    pass


class DanglingDependency(ParseError):
    """A `depends` value does not match any question id in the set."""
    pass


class SchedulingError(QuizError):
    """Reserved for cycle detection in the dependency scheduler."""
    pass


# Driver-side errors


class QuizNotFound(QuizError):
    pass


class QuizAlreadyExists(QuizError):
    pass


class EmptyQuiz(QuizError):
    """No question survived tag filtering."""
    pass


class ResultsFormatError(QuizError):
    """A stored results file could not be read back."""
    pass
