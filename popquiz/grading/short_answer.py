"""
Short answer handler.

Correct when the response matches any answer variant, ignoring case and
surrounding whitespace. Wrong answers may carry a specific explanation.
"""

from popquiz.core.answers import normalize
from popquiz.core.questions import QuestionKind, ShortAnswer

from . import register
from .base import Correct, GradeResult, Incorrect


def check_variants(question, response: str) -> GradeResult:
    """Shared by short answer and multiple choice questions."""
    if question.answer.matches(response):
        return Correct()
    return Incorrect(explanation=question.explanations.get(normalize(response)))


@register(QuestionKind.SHORT_ANSWER)
class ShortAnswerHandler:
    """Handler for short answer questions."""

    def check(self, question: ShortAnswer, response: str) -> GradeResult:
        return check_variants(question, response)

    def correct_answer(self, question: ShortAnswer) -> str:
        return question.answer.canonical
