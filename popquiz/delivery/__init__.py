"""
Quiz delivery: file storage, results persistence, the interactive
session and the command-line interface.
"""

from .quiz_store import QuizStore
from .results_store import QuestionResult, QuizResult, ResultsStore
from .session import QuizSession, TakeOptions, calculate_score, take_quiz

__all__ = [
    "QuizStore",
    "ResultsStore",
    "QuestionResult",
    "QuizResult",
    "QuizSession",
    "TakeOptions",
    "calculate_score",
    "take_quiz",
]
