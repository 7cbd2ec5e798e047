"""
Quiz Session: the interactive take loop.

Presents each scheduled question, reads the response, grades it and
collects per-question results. Input and the clock are injectable so the
loop can run without a terminal.
"""

from __future__ import annotations

import random
import time
from collections.abc import Callable
from dataclasses import dataclass, field
from datetime import datetime, timezone

from loguru import logger
from rich.console import Console
from rich.prompt import Prompt

from popquiz.core.answers import normalize
from popquiz.core.errors import EmptyQuiz
from popquiz.core.questions import (
    AnyQuestion,
    ListAnswer,
    MultipleChoice,
    OrderedListAnswer,
    Quiz,
    ShortAnswer,
    Ungraded,
)
from popquiz.core.scheduler import filter_and_order
from popquiz.grading import Correct, Incorrect, UngradedResult, get_handler, grade
from popquiz.grading.base import drop_no_credit
from popquiz.grading.multiple_choice import build_choices, resolve_choice

from . import display
from .results_store import QuestionResult, QuizResult

Ask = Callable[[str], str]


@dataclass
class TakeOptions:
    """Options for one quiz session."""
    include_tags: set[str] = field(default_factory=set)
    exclude_tags: set[str] = field(default_factory=set)
    random: bool = False
    num_to_ask: int | None = None
    save: bool = True


def calculate_score(base_score: float, timeout: int | None, elapsed: float) -> tuple[float, bool]:
    """
    Apply a question's time limit to its score.

    Full credit within `timeout` seconds, decaying linearly to zero at
    `2 * timeout`, zero afterwards.

    Returns:
        (score, timed_out)
    """
    if timeout is None or elapsed <= timeout:
        return base_score, False
    if elapsed < 2 * timeout:
        return base_score * (2 * timeout - elapsed) / timeout, True
    return 0.0, True


class QuizSession:
    """Runs one pass over an ordered list of questions."""

    def __init__(
        self,
        questions: list[AnyQuestion],
        console: Console | None = None,
        ask: Ask | None = None,
        rng: random.Random | None = None,
        max_choices: int = 3,
        clock: Callable[[], float] = time.monotonic,
    ):
        self.questions = questions
        self.console = console or Console()
        self.ask = ask or self._prompt
        self.rng = rng or random.Random()
        self.max_choices = max_choices
        self.clock = clock

    def _prompt(self, prompt: str) -> str:
        return Prompt.ask(prompt, console=self.console, default="", show_default=False)

    # =========================================================================
    # Loop
    # =========================================================================

    def run(self) -> QuizResult:
        """Ask every question; Ctrl-C or end of input stops early."""
        results: list[QuestionResult] = []
        total = len(self.questions)

        for index, question in enumerate(self.questions, start=1):
            display.show_question(
                self.console, question.kind, question.text.choose(self.rng), index, total
            )
            try:
                results.append(self.ask_question(question))
            except (KeyboardInterrupt, EOFError):
                self.console.print()
                logger.info(f"Session interrupted after {len(results)} of {total} questions")
                break

        return QuizResult(time_finished=datetime.now(timezone.utc), per_question=results)

    def ask_question(self, question: AnyQuestion) -> QuestionResult:
        if isinstance(question, MultipleChoice):
            return self._ask_multiple_choice(question)
        if isinstance(question, (ListAnswer, OrderedListAnswer)):
            return self._ask_list(question)
        if isinstance(question, ShortAnswer):
            return self._ask_short_answer(question)
        if isinstance(question, Ungraded):
            return self._ask_ungraded(question)
        raise TypeError(f"Unsupported question type: {type(question).__name__}")

    # =========================================================================
    # Per-kind input
    # =========================================================================

    def _ask_short_answer(self, question: ShortAnswer) -> QuestionResult:
        start = self.clock()
        response = self.ask(">")
        score = self._feedback(question, response, question.timeout, self.clock() - start)
        return QuestionResult(id=question.key, response=response, score=score)

    def _ask_multiple_choice(self, question: MultipleChoice) -> QuestionResult:
        choices = build_choices(question, self.rng, self.max_choices)
        display.show_choices(self.console, choices)

        start = self.clock()
        while True:
            chosen = resolve_choice(choices, self.ask(">"))
            if chosen is not None:
                break
            self.console.print(f"[dim]Enter a letter from a to {chr(ord('a') + len(choices) - 1)}.[/dim]")

        score = self._feedback(question, chosen, question.timeout, self.clock() - start)
        return QuestionResult(id=question.key, response=chosen, score=score)

    def _ask_list(self, question: ListAnswer | OrderedListAnswer) -> QuestionResult:
        expected = len(question.answer_items)
        self.console.print(f"[dim]Enter {expected} items, one per prompt. Blank line to finish early.[/dim]")

        responses: list[str] = []
        accepted: set[str] = set()
        counted = 0
        while counted < expected:
            item = self.ask(f"[{counted + 1}/{expected}]").strip()
            if not item:
                break
            # Unordered lists take each item once
            if isinstance(question, ListAnswer) and normalize(item) in accepted:
                self.console.print("[dim]Repeat, try another.[/dim]")
                continue
            accepted.add(normalize(item))
            responses.append(item)
            if drop_no_credit([item], question.no_credit):
                counted += 1
            else:
                self.console.print("[dim]No credit, try another.[/dim]")

        score = self._feedback(question, "\n".join(responses))
        return QuestionResult(id=question.key, response_list=responses, score=score)

    def _ask_ungraded(self, question: Ungraded) -> QuestionResult:
        response = self.ask(">")
        self._feedback(question, response)
        return QuestionResult(id=question.key, response=response, score=None)

    # =========================================================================
    # Grading feedback
    # =========================================================================

    def _feedback(
        self,
        question: AnyQuestion,
        response: str,
        timeout: int | None = None,
        elapsed: float = 0.0,
    ) -> float | None:
        """Grade, print feedback and return the question's score."""
        result = grade(question, response)

        if isinstance(result, UngradedResult):
            display.show_sample_answer(self.console, result.sample_answer)
            return None

        if isinstance(result, Correct):
            display.show_correct(self.console)
        elif isinstance(result, Incorrect):
            handler = get_handler(question.kind)
            display.show_incorrect(self.console, handler.correct_answer(question), result.explanation)

        score, timed_out = calculate_score(result.score, timeout, elapsed)
        display.show_score(self.console, score, timed_out)
        return score


def take_quiz(
    quiz: Quiz,
    options: TakeOptions,
    console: Console | None = None,
    ask: Ask | None = None,
    rng: random.Random | None = None,
    max_choices: int = 3,
) -> QuizResult:
    """
    Filter, order and run a quiz.

    Raises:
        EmptyQuiz: if no question is left after tag filtering
    """
    console = console or Console()
    rng = rng or random.Random()

    questions = filter_and_order(
        quiz.questions,
        include=options.include_tags,
        exclude=options.exclude_tags,
        shuffle=rng.shuffle if options.random else None,
        limit=options.num_to_ask,
    )
    if not questions:
        raise EmptyQuiz("No questions match the given tags")

    if quiz.instructions:
        display.show_instructions(console, quiz.instructions)

    if any(getattr(q, "timeout", None) for q in questions):
        display.show_warning(console, "This quiz contains timed questions!")

    session = QuizSession(questions, console=console, ask=ask, rng=rng, max_choices=max_choices)
    result = session.run()
    display.show_results(console, result)
    return result
