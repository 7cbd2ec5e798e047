"""
Grade results and the handler protocol.
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import Protocol, Union

from popquiz.core.answers import normalize
from popquiz.core.questions import AnyQuestion


@dataclass(frozen=True)
class Correct:
    score: float = 1.0


@dataclass(frozen=True)
class Incorrect:
    """A wrong answer, with the explanation for that specific answer if the quiz has one."""
    explanation: str | None = None
    score: float = 0.0  # partial credit for list kinds


@dataclass(frozen=True)
class UngradedResult:
    """Returned for ungraded questions; carries the sample answer instead of a verdict."""
    sample_answer: str

    @property
    def score(self) -> None:
        return None


GradeResult = Union[Correct, Incorrect, UngradedResult]


def split_items(response: str) -> list[str]:
    """Split a list response into items: one per line, trimmed, blank lines dropped."""
    return [line.strip() for line in response.split("\n") if line.strip()]


def drop_no_credit(items: list[str], no_credit: tuple[str, ...]) -> list[str]:
    """Remove items that earn neither credit nor penalty."""
    if not no_credit:
        return items
    ignored = {normalize(s) for s in no_credit}
    return [item for item in items if normalize(item) not in ignored]


class GradeHandler(Protocol):
    """Protocol for per-kind grading handlers."""

    def check(self, question: AnyQuestion, response: str) -> GradeResult:
        """Classify a raw response. Never raises."""
        ...

    def correct_answer(self, question: AnyQuestion) -> str:
        """Canonical answer for display after a wrong response."""
        ...
