"""
List answer handler.

Order-independent list grading. The response holds one item per line.
Because answer slots may share variants, items are paired with slots by
maximum bipartite matching rather than by set comparison: the answer is
correct only when every item and every slot are matched one to one.
"""

from popquiz.core.answers import AnswerVariantSet
from popquiz.core.questions import ListAnswer, QuestionKind

from . import register
from .base import Correct, GradeResult, Incorrect, drop_no_credit, split_items


def max_matching(items: list[str], slots: tuple[AnswerVariantSet, ...]) -> int:
    """Size of the largest pairing of response items with answer slots they match."""
    edges = [[j for j, slot in enumerate(slots) if slot.matches(item)] for item in items]
    slot_owner: list[int | None] = [None] * len(slots)

    def augment(i: int, seen: set[int]) -> bool:
        for j in edges[i]:
            if j in seen:
                continue
            seen.add(j)
            owner = slot_owner[j]
            if owner is None or augment(owner, seen):
                slot_owner[j] = i
                return True
        return False

    return sum(1 for i in range(len(items)) if augment(i, set()))


@register(QuestionKind.LIST_ANSWER)
class ListAnswerHandler:
    """Handler for unordered list questions."""

    def check(self, question: ListAnswer, response: str) -> GradeResult:
        items = drop_no_credit(split_items(response), question.no_credit)
        slots = question.answer_items
        matched = max_matching(items, slots)

        if matched == len(slots) == len(items):
            return Correct()
        return Incorrect(score=matched / len(slots))

    def correct_answer(self, question: ListAnswer) -> str:
        return "\n".join(slot.canonical for slot in question.answer_items)
