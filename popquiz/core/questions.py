"""
Question data model.

A question is one of five kinds, each a frozen dataclass sharing the
metadata fields of `Question`. Consumers dispatch on `kind`; the grading
registry covers every member of `QuestionKind`.
"""

from __future__ import annotations

from collections.abc import Mapping
from dataclasses import dataclass, field
from enum import Enum
from types import MappingProxyType
from typing import ClassVar, Union

from .answers import AnswerVariantSet, QuestionText


class QuestionKind(str, Enum):
    """Supported question kinds, by their name in quiz documents."""
    SHORT_ANSWER = "ShortAnswer"
    MULTIPLE_CHOICE = "MultipleChoice"
    LIST_ANSWER = "ListAnswer"
    ORDERED_LIST_ANSWER = "OrderedListAnswer"
    UNGRADED = "Ungraded"


@dataclass(frozen=True, kw_only=True)
class Question:
    """Fields shared by every question kind."""

    kind: ClassVar[QuestionKind]

    text: QuestionText
    id: str | None = None
    depends: str | None = None
    tags: frozenset[str] = frozenset()
    # Read-only; left out of the hash
    explanations: Mapping[str, str] = field(default_factory=lambda: MappingProxyType({}), hash=False)

    @property
    def key(self) -> str:
        """Identifier used for stored results: the id, else the primary phrasing."""
        return self.id or self.text.primary

    def has_any_tag(self, tags: set[str] | frozenset[str]) -> bool:
        return not self.tags.isdisjoint(tags)


@dataclass(frozen=True, kw_only=True)
class ShortAnswer(Question):
    kind: ClassVar[QuestionKind] = QuestionKind.SHORT_ANSWER

    answer: AnswerVariantSet
    timeout: int | None = None  # seconds for full credit


@dataclass(frozen=True, kw_only=True)
class MultipleChoice(Question):
    kind: ClassVar[QuestionKind] = QuestionKind.MULTIPLE_CHOICE

    # Wrong options only; the canonical answer is added at display time.
    candidates: tuple[str, ...]
    answer: AnswerVariantSet
    timeout: int | None = None


@dataclass(frozen=True, kw_only=True)
class ListAnswer(Question):
    """Items compared as an unordered collection."""

    kind: ClassVar[QuestionKind] = QuestionKind.LIST_ANSWER

    answer_items: tuple[AnswerVariantSet, ...]
    no_credit: tuple[str, ...] = ()


@dataclass(frozen=True, kw_only=True)
class OrderedListAnswer(Question):
    """Items compared position by position."""

    kind: ClassVar[QuestionKind] = QuestionKind.ORDERED_LIST_ANSWER

    answer_items: tuple[AnswerVariantSet, ...]
    no_credit: tuple[str, ...] = ()


@dataclass(frozen=True, kw_only=True)
class Ungraded(Question):
    """Carries a sample answer only; never compared against a response."""

    kind: ClassVar[QuestionKind] = QuestionKind.UNGRADED

    sample_answer: str


AnyQuestion = Union[ShortAnswer, MultipleChoice, ListAnswer, OrderedListAnswer, Ungraded]

QUESTION_CLASSES: dict[QuestionKind, type[Question]] = {
    cls.kind: cls
    for cls in (ShortAnswer, MultipleChoice, ListAnswer, OrderedListAnswer, Ungraded)
}


@dataclass(frozen=True)
class Quiz:
    """A validated quiz set and its optional instructions."""

    questions: tuple[AnyQuestion, ...]
    instructions: str | None = None

    def __len__(self) -> int:
        return len(self.questions)
