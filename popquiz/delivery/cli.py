"""
popquiz: take quizzes from the command line.

Commands:
- popquiz take NAME     - Take a quiz
- popquiz count NAME    - Count questions matching the tag filters
- popquiz results NAME  - Show stored results
- popquiz ls            - List quizzes
- popquiz path NAME     - Print a quiz's file path
- popquiz edit NAME     - Open a quiz in the editor
- popquiz rm NAME       - Delete a quiz
- popquiz mv OLD NEW    - Rename a quiz
"""
from __future__ import annotations

import random
import shlex
import subprocess
import sys
from typing import List, Optional

import typer
from loguru import logger
from rich.console import Console
from rich.markup import escape
from rich.prompt import Confirm

from popquiz.config import Settings, get_settings
from popquiz.core.errors import QuizError, QuizNotFound
from popquiz.core.scheduler import filter_and_order

from . import display
from .quiz_store import QuizStore
from .results_store import ResultsStore
from .session import TakeOptions, take_quiz

# =============================================================================
# CLI Setup
# =============================================================================

app = typer.Typer(
    name="popquiz",
    help="Take pop quizzes from the command line.",
    no_args_is_help=True,
)
console = Console()
err_console = Console(stderr=True)


def _store(settings: Settings) -> QuizStore:
    return QuizStore(settings.data_dir, suffix=settings.quiz_suffix)


# =============================================================================
# Commands
# =============================================================================


@app.command()
def take(
    name: str = typer.Argument(..., help="Name of the quiz"),
    tag: Optional[List[str]] = typer.Option(None, "--tag", "-t", help="Only ask questions with one of these tags"),
    exclude: Optional[List[str]] = typer.Option(None, "--exclude", "-x", help="Skip questions with any of these tags"),
    shuffle: bool = typer.Option(False, "--random", "-r", help="Ask questions in random order"),
    num: Optional[int] = typer.Option(None, "--num", "-n", min=1, help="Ask at most N questions"),
    save: bool = typer.Option(True, "--save/--no-save", help="Save results when finished"),
) -> None:
    """Take a quiz."""
    settings = get_settings()
    quiz = _store(settings).load(name)
    options = TakeOptions(
        include_tags=set(tag or []),
        exclude_tags=set(exclude or []),
        random=shuffle,
        num_to_ask=num,
        save=save,
    )

    result = take_quiz(
        quiz,
        options,
        console=console,
        rng=random.Random(settings.random_seed),
        max_choices=settings.max_choices,
    )

    if options.save and result.per_question:
        ResultsStore(settings.results_dir).save(name, result)


@app.command()
def count(
    name: str = typer.Argument(..., help="Name of the quiz"),
    tag: Optional[List[str]] = typer.Option(None, "--tag", "-t", help="Only ask questions with one of these tags"),
    exclude: Optional[List[str]] = typer.Option(None, "--exclude", "-x", help="Skip questions with any of these tags"),
) -> None:
    """Count the questions in a quiz."""
    quiz = _store(get_settings()).load(name)
    questions = filter_and_order(quiz.questions, include=tag or [], exclude=exclude or [])
    console.print(len(questions))


@app.command()
def results(name: str = typer.Argument(..., help="Name of the quiz")) -> None:
    """Show stored results for a quiz."""
    settings = get_settings()
    if not _store(settings).exists(name):
        raise QuizNotFound(f"Quiz '{name}' not found")

    stored = ResultsStore(settings.results_dir).load(name)
    if not stored:
        console.print(f"[dim]No results for {name}.[/dim]")
        return
    display.show_stored_results(console, name, stored)


@app.command("ls")
def list_quizzes() -> None:
    """List available quizzes."""
    names = _store(get_settings()).list_quizzes()
    if not names:
        console.print("[dim]No quizzes found.[/dim]")
        return
    for quiz_name in names:
        console.print(quiz_name)


@app.command()
def path(name: str = typer.Argument(..., help="Name of the quiz")) -> None:
    """Print the path of a quiz file."""
    console.print(str(_store(get_settings()).path(name)), soft_wrap=True)


@app.command()
def edit(name: str = typer.Argument(..., help="Name of the quiz")) -> None:
    """Open a quiz in the editor, creating it if needed."""
    settings = get_settings()
    store = _store(settings)
    if not store.exists(name):
        store.create_empty(name)
        logger.info(f"Created empty quiz '{name}'")

    command = shlex.split(settings.editor) + [str(store.path(name))]
    completed = subprocess.run(command)
    if completed.returncode != 0:
        raise typer.Exit(completed.returncode)


@app.command()
def rm(
    name: str = typer.Argument(..., help="Name of the quiz"),
    force: bool = typer.Option(False, "--force", "-f", help="Do not ask for confirmation"),
) -> None:
    """Delete a quiz."""
    store = _store(get_settings())
    if not force and not Confirm.ask(f"Delete quiz '{name}'?", console=console):
        return
    store.remove(name)


@app.command()
def mv(
    old: str = typer.Argument(..., help="Current name"),
    new: str = typer.Argument(..., help="New name"),
) -> None:
    """Rename a quiz."""
    _store(get_settings()).rename(old, new)


# =============================================================================
# Entry Point
# =============================================================================


def main() -> None:
    """CLI entry point."""
    settings = get_settings()

    # Configure logging
    logger.remove()
    logger.add(
        sys.stderr,
        level=settings.log_level.upper(),
        format="<level>{message}</level>",
    )

    try:
        app()
    except QuizError as e:
        err_console.print(f"[bold red]Error:[/bold red] {escape(str(e))}")
        sys.exit(2)


if __name__ == "__main__":
    main()
