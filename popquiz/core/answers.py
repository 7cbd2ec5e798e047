"""
Answer variant sets and question phrasings.

Both are normalized once at parse time from "string or list of strings"
fields and never change afterwards.
"""

from __future__ import annotations

import random
from collections.abc import Iterable, Iterator
from dataclasses import dataclass


def normalize(text: str) -> str:
    """Normalize a string for comparison: trimmed and lowercased."""
    return text.strip().lower()


@dataclass(frozen=True)
class AnswerVariantSet:
    """
    Interchangeable acceptable strings for one answer slot.

    The first variant is the canonical form shown to the user,
    e.g. ("Mount Everest", "Everest").
    """

    variants: tuple[str, ...]

    def __post_init__(self) -> None:
        if not self.variants:
            raise ValueError("AnswerVariantSet requires at least one variant")

    @classmethod
    def of(cls, values: str | Iterable[str]) -> AnswerVariantSet:
        if isinstance(values, str):
            return cls((values,))
        return cls(tuple(values))

    @property
    def canonical(self) -> str:
        return self.variants[0]

    def matches(self, candidate: str) -> bool:
        """True if `candidate` equals any variant, ignoring case and surrounding whitespace."""
        guess = normalize(candidate)
        return any(normalize(v) == guess for v in self.variants)

    def choose(self, rng: random.Random) -> str:
        return rng.choice(self.variants)

    def __iter__(self) -> Iterator[str]:
        return iter(self.variants)

    def __len__(self) -> int:
        return len(self.variants)

    def __str__(self) -> str:
        return self.canonical


@dataclass(frozen=True)
class QuestionText:
    """One or more phrasings of the same prompt."""

    phrasings: tuple[str, ...]

    def __post_init__(self) -> None:
        if not self.phrasings:
            raise ValueError("QuestionText requires at least one phrasing")

    @classmethod
    def of(cls, values: str | Iterable[str]) -> QuestionText:
        if isinstance(values, str):
            return cls((values,))
        return cls(tuple(values))

    @property
    def primary(self) -> str:
        return self.phrasings[0]

    def choose(self, rng: random.Random | None = None) -> str:
        """Pick a phrasing for display; the first one when no rng is given."""
        if rng is None:
            return self.primary
        return rng.choice(self.phrasings)

    def __str__(self) -> str:
        return self.primary
