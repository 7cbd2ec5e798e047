"""
Tag filter: selects the questions eligible for a session.
"""

from __future__ import annotations

from collections.abc import Iterable, Sequence

from .questions import AnyQuestion


def is_selected(
    question: AnyQuestion,
    include: set[str] | frozenset[str],
    exclude: set[str] | frozenset[str],
) -> bool:
    """True if the question carries an included tag (or none are required) and no excluded tag."""
    if include and not question.has_any_tag(include):
        return False
    if exclude and question.has_any_tag(exclude):
        return False
    return True


def select(
    questions: Sequence[AnyQuestion],
    include: Iterable[str] = (),
    exclude: Iterable[str] = (),
) -> list[AnyQuestion]:
    """Filter questions by tag, preserving their relative order. May return an empty list."""
    include = frozenset(include)
    exclude = frozenset(exclude)
    return [q for q in questions if is_selected(q, include, exclude)]
