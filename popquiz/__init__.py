"""
popquiz: author quizzes as JSON question sets and take them in the terminal.

Core operations:
- load_questions(document): parse and validate a quiz document
- filter_and_order(questions, include, exclude, shuffle): pick and order a session
- grade(question, response): classify one response
"""

from .core import filter_and_order, load_questions, load_quiz
from .grading import grade

__version__ = "1.0.0"

__all__ = [
    "filter_and_order",
    "grade",
    "load_questions",
    "load_quiz",
]
