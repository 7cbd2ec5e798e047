"""
Question parser.

Turns the raw, JSON-like quiz document into typed questions. Parsing is
two-pass: each record is built on its own, then the whole set is checked
for duplicate ids and dangling dependencies.

Document shapes accepted:
- a list of question records
- an object {"instructions": str, "questions": [records]}
"""

from __future__ import annotations

from collections.abc import Mapping, Sequence
from types import MappingProxyType
from typing import Any

from loguru import logger

from .answers import AnswerVariantSet, QuestionText, normalize
from .errors import (
    DanglingDependency,
    DuplicateId,
    MissingField,
    TypeMismatch,
    UnknownKind,
)
from .questions import (
    AnyQuestion,
    ListAnswer,
    MultipleChoice,
    OrderedListAnswer,
    QuestionKind,
    Quiz,
    ShortAnswer,
    Ungraded,
)

KNOWN_FIELDS = {
    "kind",
    "text",
    "answer",
    "answer_list",
    "candidates",
    "tags",
    "explanations",
    "id",
    "depends",
    "timeout",
    "no_credit",
}


# =============================================================================
# Field Readers
# =============================================================================


def _is_str_list(value: Any) -> bool:
    return isinstance(value, list) and all(isinstance(v, str) for v in value)


def _require(record: dict, name: str, index: int) -> Any:
    value = record.get(name)
    if value is None or value == "" or value == []:
        raise MissingField("required field is missing or empty", index, name)
    return value


def _read_strings(value: Any, index: int, name: str) -> tuple[str, ...]:
    """Read a "string or list of strings" field."""
    if isinstance(value, str):
        return (value,)
    if _is_str_list(value):
        if not value:
            raise MissingField("expected at least one string", index, name)
        return tuple(value)
    raise TypeMismatch(
        f"expected a string or a list of strings, got {type(value).__name__}", index, name
    )


def _read_text(record: dict, index: int) -> QuestionText:
    return QuestionText(_read_strings(_require(record, "text", index), index, "text"))


def _read_answer(record: dict, index: int) -> AnswerVariantSet:
    return AnswerVariantSet(_read_strings(_require(record, "answer", index), index, "answer"))


def _read_answer_list(record: dict, index: int) -> tuple[AnswerVariantSet, ...]:
    value = _require(record, "answer_list", index)
    if not isinstance(value, list):
        raise TypeMismatch(
            f"expected a list of answers, got {type(value).__name__}", index, "answer_list"
        )
    items = []
    for item in value:
        variants = _read_strings(item, index, "answer_list")
        # blank lines are dropped from responses
        if any(not v.strip() for v in variants):
            raise MissingField("answer items must not be empty", index, "answer_list")
        items.append(AnswerVariantSet(variants))
    return tuple(items)


def _read_string_list(record: dict, name: str, index: int) -> tuple[str, ...]:
    value = record.get(name)
    if value is None:
        return ()
    if not _is_str_list(value):
        raise TypeMismatch(
            f"expected a list of strings, got {type(value).__name__}", index, name
        )
    return tuple(value)


def _read_optional_str(record: dict, name: str, index: int) -> str | None:
    value = record.get(name)
    if value is None or value == "":
        return None
    if isinstance(value, list):
        # A list here would hide all but one value
        raise TypeMismatch("expected a single string, got a list", index, name)
    if not isinstance(value, str):
        raise TypeMismatch(f"expected a string, got {type(value).__name__}", index, name)
    return value


def _read_explanations(record: dict, index: int) -> Mapping[str, str]:
    value = record.get("explanations")
    if value is None:
        return MappingProxyType({})
    if not isinstance(value, dict):
        raise TypeMismatch(
            f"expected a mapping, got {type(value).__name__}", index, "explanations"
        )

    explanations: dict[str, str] = {}
    for key, text in value.items():
        if not isinstance(key, str) or not isinstance(text, str):
            raise TypeMismatch("keys and values must be strings", index, "explanations")
        normalized = normalize(key)
        if normalized != key:
            logger.debug(f"Question {index + 1}: explanation key {key!r} stored as {normalized!r}")
        explanations[normalized] = text
    return MappingProxyType(explanations)


def _read_timeout(record: dict, index: int) -> int | None:
    value = record.get("timeout")
    if value is None:
        return None
    if isinstance(value, bool) or not isinstance(value, int) or value <= 0:
        raise TypeMismatch("expected a positive number of seconds", index, "timeout")
    return value


def _read_kind(record: dict, index: int) -> QuestionKind:
    value = record.get("kind")
    if value is None:
        return QuestionKind.SHORT_ANSWER
    if not isinstance(value, str):
        raise TypeMismatch(f"expected a string, got {type(value).__name__}", index, "kind")
    try:
        return QuestionKind(value)
    except ValueError:
        known = ", ".join(k.value for k in QuestionKind)
        raise UnknownKind(f"unknown kind {value!r} (expected one of: {known})", index, "kind") from None


# =============================================================================
# Parsing
# =============================================================================


def parse(record: Any, index: int = 0) -> AnyQuestion:
    """
    Parse one raw record into a question.

    Args:
        record: Mapping from the quiz document
        index: Position of the record in the document, used in error messages

    Raises:
        ParseError subclass naming the offending field
    """
    if not isinstance(record, dict):
        raise TypeMismatch(f"expected a mapping, got {type(record).__name__}", index)

    for name in record.keys() - KNOWN_FIELDS:
        logger.warning(f"Question {index + 1}: ignoring unknown field {name!r}")

    kind = _read_kind(record, index)
    common = {
        "text": _read_text(record, index),
        "id": _read_optional_str(record, "id", index),
        "depends": _read_optional_str(record, "depends", index),
        "tags": frozenset(_read_string_list(record, "tags", index)),
        "explanations": _read_explanations(record, index),
    }

    if kind is QuestionKind.SHORT_ANSWER:
        return ShortAnswer(
            answer=_read_answer(record, index),
            timeout=_read_timeout(record, index),
            **common,
        )
    elif kind is QuestionKind.MULTIPLE_CHOICE:
        answer = _read_answer(record, index)
        _require(record, "candidates", index)
        candidates = _read_string_list(record, "candidates", index)
        if any(answer.matches(c) for c in candidates):
            logger.warning(f"Question {index + 1}: candidates include the canonical answer")
        return MultipleChoice(
            candidates=candidates,
            answer=answer,
            timeout=_read_timeout(record, index),
            **common,
        )
    elif kind is QuestionKind.LIST_ANSWER:
        return ListAnswer(
            answer_items=_read_answer_list(record, index),
            no_credit=_read_string_list(record, "no_credit", index),
            **common,
        )
    elif kind is QuestionKind.ORDERED_LIST_ANSWER:
        return OrderedListAnswer(
            answer_items=_read_answer_list(record, index),
            no_credit=_read_string_list(record, "no_credit", index),
            **common,
        )
    elif kind is QuestionKind.UNGRADED:
        sample = _read_strings(_require(record, "answer", index), index, "answer")
        return Ungraded(sample_answer=" / ".join(sample), **common)

    raise UnknownKind(f"unhandled kind {kind.value!r}", index, "kind")


def validate_question_set(questions: Sequence[AnyQuestion]) -> dict[str, AnyQuestion]:
    """
    Check ids are unique and every dependency resolves.

    Returns:
        Lookup from id to question
    """
    by_id: dict[str, AnyQuestion] = {}
    for index, question in enumerate(questions):
        if question.id is None:
            continue
        if question.id in by_id:
            raise DuplicateId(f"id {question.id!r} is used more than once", index, "id")
        by_id[question.id] = question

    for index, question in enumerate(questions):
        if question.depends is not None and question.depends not in by_id:
            raise DanglingDependency(
                f"depends on {question.depends!r}, which is not the id of any question",
                index,
                "depends",
            )

    return by_id


def _records(document: Any) -> tuple[list, str | None]:
    if isinstance(document, list):
        return document, None
    if isinstance(document, dict):
        records = document.get("questions")
        if records is None:
            raise MissingField("quiz document has no questions", field="questions")
        if not isinstance(records, list):
            raise TypeMismatch("expected a list of questions", field="questions")
        instructions = document.get("instructions")
        if instructions is not None and not isinstance(instructions, str):
            raise TypeMismatch("expected a string", field="instructions")
        return records, instructions
    raise TypeMismatch(
        f"quiz document must be a list or a mapping, got {type(document).__name__}"
    )


def load_quiz(document: Any) -> Quiz:
    """Parse and cross-validate a whole quiz document."""
    records, instructions = _records(document)
    questions = [parse(record, index) for index, record in enumerate(records)]
    validate_question_set(questions)
    logger.debug(f"Loaded {len(questions)} questions")
    return Quiz(questions=tuple(questions), instructions=instructions)


def load_questions(document: Any) -> list[AnyQuestion]:
    """Parse and cross-validate a quiz document, returning its questions in order."""
    return list(load_quiz(document).questions)
