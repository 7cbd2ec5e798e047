"""
Terminal rendering for quiz sessions.
"""

from __future__ import annotations

from rich import box
from rich.console import Console
from rich.markup import escape
from rich.panel import Panel
from rich.table import Table

from popquiz.core.questions import QuestionKind
from popquiz.grading.multiple_choice import choice_label

from .results_store import QuizResult, StoredResults

STYLES = {
    "correct": "bold green",
    "incorrect": "bold red",
    "partial": "bold yellow",
    "info": "bold cyan",
    "warning": "bold yellow",
    "dim": "dim",
    "kind": {
        QuestionKind.SHORT_ANSWER: "blue",
        QuestionKind.MULTIPLE_CHOICE: "green",
        QuestionKind.LIST_ANSWER: "cyan",
        QuestionKind.ORDERED_LIST_ANSWER: "magenta",
        QuestionKind.UNGRADED: "white",
    },
}

KIND_TITLES = {
    QuestionKind.SHORT_ANSWER: "SHORT ANSWER",
    QuestionKind.MULTIPLE_CHOICE: "MULTIPLE CHOICE",
    QuestionKind.LIST_ANSWER: "LIST",
    QuestionKind.ORDERED_LIST_ANSWER: "LIST (order matters)",
    QuestionKind.UNGRADED: "UNGRADED",
}


def show_question(console: Console, kind: QuestionKind, text: str, index: int, total: int) -> None:
    color = STYLES["kind"][kind]
    panel = Panel(
        escape(text),
        title=f"[bold {color}]({index}/{total}) {KIND_TITLES[kind]}[/bold {color}]",
        title_align="left",
        border_style=color,
        box=box.HEAVY,
        padding=(1, 2),
    )
    console.print(panel)


def show_choices(console: Console, choices: list[str]) -> None:
    for i, choice in enumerate(choices):
        console.print(f"  [bold]({choice_label(i)})[/bold] {escape(choice)}")


def show_instructions(console: Console, instructions: str) -> None:
    console.print(Panel(escape(instructions), title="Instructions", border_style="cyan"))


def show_warning(console: Console, message: str) -> None:
    console.print(f"[{STYLES['warning']}]Warning:[/{STYLES['warning']}] {message}")


def show_correct(console: Console) -> None:
    console.print(f"[{STYLES['correct']}]Correct![/{STYLES['correct']}]")


def show_incorrect(console: Console, correct_answer: str, explanation: str | None = None) -> None:
    console.print(f"[{STYLES['incorrect']}]Incorrect.[/{STYLES['incorrect']}] The correct answer was:")
    console.print(f"  [bold]{escape(correct_answer)}[/bold]")
    if explanation:
        console.print(f"[dim]{escape(explanation)}[/dim]")


def show_sample_answer(console: Console, sample_answer: str) -> None:
    console.print("[dim]Sample answer:[/dim]")
    console.print(f"  [bold]{escape(sample_answer)}[/bold]")


def show_score(console: Console, score: float, timed_out: bool = False) -> None:
    style = STYLES["correct"] if score == 1.0 else STYLES["partial"] if score > 0 else STYLES["incorrect"]
    message = f"Score for this question: [{style}]{score * 100:.1f}%[/{style}]"
    if timed_out:
        message += " [dim](exceeded time limit)[/dim]"
    console.print(message)


def show_results(console: Console, result: QuizResult) -> None:
    """Summary table shown at the end of a session."""
    table = Table(title="Results", box=box.SIMPLE_HEAVY)
    table.add_column("Outcome")
    table.add_column("Count", justify="right")
    table.add_row(f"[{STYLES['correct']}]Correct[/]", str(result.total_correct))
    table.add_row(f"[{STYLES['partial']}]Partially correct[/]", str(result.total_partially_correct))
    table.add_row(f"[{STYLES['incorrect']}]Incorrect[/]", str(result.total_incorrect))
    if result.total_ungraded:
        table.add_row("Ungraded", str(result.total_ungraded))
    table.add_row("[bold]Total[/bold]", str(result.total))
    console.print(table)
    console.print(f"[{STYLES['info']}]Score: {result.score:.1f}%[/{STYLES['info']}]")


def show_stored_results(console: Console, name: str, results: StoredResults) -> None:
    """Per-question history table for `popquiz results`."""
    table = Table(title=f"Results for {name}", box=box.SIMPLE_HEAVY)
    table.add_column("Question")
    table.add_column("Attempts", justify="right")
    table.add_column("Average", justify="right")
    table.add_column("Last asked")

    for key, entries in sorted(results.items()):
        scores = [e.score for e in entries if e.score is not None]
        average = f"{sum(scores) / len(scores) * 100:.1f}%" if scores else "-"
        last = max(e.time_asked for e in entries).strftime("%Y-%m-%d %H:%M") if entries else "-"
        table.add_row(escape(key), str(len(entries)), average, last)

    console.print(table)
