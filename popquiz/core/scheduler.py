"""
Dependency scheduler.

Produces the take-order for a session. A question with `depends = X` is
placed directly after the question whose id is X. Resolution is one hop:

1. Questions are split into dependents (have `depends`) and the rest.
2. The rest are walked in their given order (or after the caller's shuffle).
   Each time a question with an id is placed, every dependent declaring
   `depends` on that id is spliced in right after it, in original order.
3. Dependents that were never spliced (their target was filtered out, or
   their target is itself a dependent) are appended at the end in
   original order.

Chains longer than one hop and several dependents on one target are not
otherwise ordered. There is no cycle detection; quiz files are expected to
have passed `validate_question_set` first.
"""

from __future__ import annotations

from collections import defaultdict
from collections.abc import Callable, Iterable, Sequence

from loguru import logger

from .questions import AnyQuestion
from .tag_filter import select

Shuffle = Callable[[list], None]


def order(
    questions: Sequence[AnyQuestion],
    shuffle: Shuffle | None = None,
) -> list[AnyQuestion]:
    """
    Order questions so that dependencies come first.

    Args:
        questions: Validated, already filtered questions
        shuffle: In-place shuffle applied to the independent questions
            (e.g. `random.Random(seed).shuffle`); None keeps the given order

    Returns:
        A permutation of `questions`
    """
    independent: list[AnyQuestion] = []
    dependents: dict[str, list[AnyQuestion]] = defaultdict(list)
    for question in questions:
        if question.depends is None:
            independent.append(question)
        else:
            dependents[question.depends].append(question)

    if shuffle is not None:
        shuffle(independent)

    ordered: list[AnyQuestion] = []
    for question in independent:
        ordered.append(question)
        if question.id is not None and question.id in dependents:
            ordered.extend(dependents.pop(question.id))

    if dependents:
        leftover_ids = {id(q) for group in dependents.values() for q in group}
        leftovers = [q for q in questions if id(q) in leftover_ids]
        logger.debug(f"Appending {len(leftovers)} questions whose dependency was not placed")
        ordered.extend(leftovers)

    return ordered


def filter_and_order(
    questions: Sequence[AnyQuestion],
    include: Iterable[str] = (),
    exclude: Iterable[str] = (),
    shuffle: Shuffle | None = None,
    limit: int | None = None,
) -> list[AnyQuestion]:
    """
    Select questions by tag, then order them for a session.

    `limit` keeps only the first N questions of the final order, which never
    separates a dependent from an earlier target.
    """
    selected = select(questions, include, exclude)
    logger.debug(f"{len(selected)} of {len(questions)} questions selected by tag filter")
    ordered = order(selected, shuffle=shuffle)
    if limit is not None:
        ordered = ordered[:limit]
    return ordered
