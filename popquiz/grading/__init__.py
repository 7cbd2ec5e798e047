"""
Grading handlers for each question kind.

Each kind has its own module with:
- check(): Classify a response as correct, incorrect or ungraded
- correct_answer(): Canonical answer text for feedback
"""

from typing import TYPE_CHECKING

from popquiz.core.questions import AnyQuestion, QuestionKind

from .base import Correct, GradeResult, Incorrect, UngradedResult

if TYPE_CHECKING:
    from .base import GradeHandler


# Handler registry - populated by @register decorator
HANDLERS: dict[QuestionKind, "GradeHandler"] = {}


def register(kind: QuestionKind):
    """Decorator to register a grading handler."""
    def decorator(cls):
        HANDLERS[kind] = cls()
        return cls
    return decorator


def get_handler(kind: str | QuestionKind) -> "GradeHandler | None":
    """Get the handler for a question kind."""
    if isinstance(kind, str) and not isinstance(kind, QuestionKind):
        try:
            kind = QuestionKind(kind)
        except ValueError:
            return None
    return HANDLERS.get(kind)


def grade(question: AnyQuestion, response: str) -> GradeResult:
    """Grade one response to one question. Pure and total."""
    return HANDLERS[question.kind].check(question, response)


# Import handlers to trigger registration
from . import short_answer
from . import multiple_choice
from . import list_answer
from . import ordered_list_answer
from . import ungraded

__all__ = [
    "HANDLERS",
    "Correct",
    "GradeResult",
    "Incorrect",
    "UngradedResult",
    "get_handler",
    "grade",
    "register",
]
