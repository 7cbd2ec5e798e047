"""
Multiple choice handler.

The response is the text of the chosen option; the driver maps the
displayed letter back to it before grading.
"""

import random

from popquiz.core.questions import MultipleChoice, QuestionKind

from . import register
from .base import GradeResult
from .short_answer import check_variants


def build_choices(question: MultipleChoice, rng: random.Random, max_candidates: int = 3) -> list[str]:
    """
    Pick the options to display.

    Shuffles the candidates so the first few listed are not always shown,
    keeps `max_candidates` of them, adds one answer variant and shuffles
    again so the correct option's position is random.
    """
    candidates = list(question.candidates)
    rng.shuffle(candidates)
    choices = candidates[:max_candidates]
    choices.append(question.answer.choose(rng))
    rng.shuffle(choices)
    return choices


def choice_label(index: int) -> str:
    """Letter shown for the option at `index` (a, b, c, ...)."""
    return chr(ord("a") + index)


def resolve_choice(choices: list[str], response: str) -> str | None:
    """Map a typed letter to its option text; None if the letter is out of range."""
    letter = response.strip().lower()
    if len(letter) != 1:
        return None
    index = ord(letter) - ord("a")
    if 0 <= index < len(choices):
        return choices[index]
    return None


@register(QuestionKind.MULTIPLE_CHOICE)
class MultipleChoiceHandler:
    """Handler for multiple choice questions."""

    def check(self, question: MultipleChoice, response: str) -> GradeResult:
        return check_variants(question, response)

    def correct_answer(self, question: MultipleChoice) -> str:
        return question.answer.canonical
