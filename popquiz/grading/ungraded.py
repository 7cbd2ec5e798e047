"""
Ungraded handler: always returns the sample answer, whatever the response.
"""

from popquiz.core.questions import QuestionKind, Ungraded

from . import register
from .base import GradeResult, UngradedResult


@register(QuestionKind.UNGRADED)
class UngradedHandler:
    """Handler for questions without a comparable answer."""

    def check(self, question: Ungraded, response: str) -> GradeResult:
        return UngradedResult(sample_answer=question.sample_answer)

    def correct_answer(self, question: Ungraded) -> str:
        return question.sample_answer
