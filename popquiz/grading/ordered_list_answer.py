"""
Ordered list answer handler.

Position-by-position grading: item i of the response must match slot i.
"""

from popquiz.core.questions import OrderedListAnswer, QuestionKind

from . import register
from .base import Correct, GradeResult, Incorrect, drop_no_credit, split_items


@register(QuestionKind.ORDERED_LIST_ANSWER)
class OrderedListAnswerHandler:
    """Handler for ordered list questions."""

    def check(self, question: OrderedListAnswer, response: str) -> GradeResult:
        items = drop_no_credit(split_items(response), question.no_credit)
        slots = question.answer_items

        # zip stops at the shorter side; missing or extra items never count
        correct_positions = sum(1 for item, slot in zip(items, slots) if slot.matches(item))

        if len(items) == len(slots) and correct_positions == len(slots):
            return Correct()
        return Incorrect(score=correct_positions / len(slots))

    def correct_answer(self, question: OrderedListAnswer) -> str:
        return "\n".join(
            f"{i}. {slot.canonical}" for i, slot in enumerate(question.answer_items, start=1)
        )
