"""
Core quiz model: parsing, tag filtering, dependency ordering.
"""

from .answers import AnswerVariantSet, QuestionText, normalize
from .errors import (
    DanglingDependency,
    DuplicateId,
    EmptyQuiz,
    MissingField,
    ParseError,
    QuizAlreadyExists,
    QuizError,
    QuizNotFound,
    ResultsFormatError,
    SchedulingError,
    TypeMismatch,
    UnknownKind,
)
from .parser import load_questions, load_quiz, parse, validate_question_set
from .questions import (
    AnyQuestion,
    ListAnswer,
    MultipleChoice,
    OrderedListAnswer,
    Question,
    QuestionKind,
    Quiz,
    ShortAnswer,
    Ungraded,
)
from .scheduler import filter_and_order, order
from .tag_filter import select

__all__ = [
    "AnswerVariantSet",
    "QuestionText",
    "normalize",
    # Errors
    "QuizError",
    "ParseError",
    "MissingField",
    "UnknownKind",
    "TypeMismatch",
    "DuplicateId",
    "DanglingDependency",
    "SchedulingError",
    "QuizNotFound",
    "QuizAlreadyExists",
    "EmptyQuiz",
    "ResultsFormatError",
    # Model
    "AnyQuestion",
    "Question",
    "QuestionKind",
    "Quiz",
    "ShortAnswer",
    "MultipleChoice",
    "ListAnswer",
    "OrderedListAnswer",
    "Ungraded",
    # Operations
    "parse",
    "load_quiz",
    "load_questions",
    "validate_question_set",
    "select",
    "order",
    "filter_and_order",
]
