"""
Quiz file storage.

Quizzes are JSON files named `<name><suffix>` in the data directory.
"""

from __future__ import annotations

import json
from pathlib import Path

from loguru import logger

from popquiz.core.errors import ParseError, QuizAlreadyExists, QuizNotFound
from popquiz.core.parser import load_quiz
from popquiz.core.questions import Quiz

EMPTY_QUIZ_DOCUMENT = {"instructions": "", "questions": []}


class QuizStore:
    """Locate, load and manage quiz files in one directory."""

    def __init__(self, data_dir: Path | str, suffix: str = ".json"):
        self.data_dir = Path(data_dir).expanduser()
        self.suffix = suffix

    def path(self, name: str) -> Path:
        return self.data_dir / f"{name}{self.suffix}"

    def exists(self, name: str) -> bool:
        return self.path(name).is_file()

    def read_document(self, name: str):
        """Read the raw JSON document of a quiz."""
        path = self.path(name)
        if not path.is_file():
            raise QuizNotFound(f"Quiz '{name}' not found at {path}")
        try:
            return json.loads(path.read_text(encoding="utf-8"))
        except json.JSONDecodeError as e:
            raise ParseError(f"{path} is not valid JSON: {e}") from e

    def load(self, name: str) -> Quiz:
        """Load, parse and validate a quiz."""
        quiz = load_quiz(self.read_document(name))
        logger.info(f"Loaded quiz '{name}' ({len(quiz)} questions)")
        return quiz

    def list_quizzes(self) -> list[str]:
        """Names of available quizzes, sorted."""
        if not self.data_dir.exists():
            return []
        return sorted(p.stem for p in self.data_dir.glob(f"*{self.suffix}") if p.is_file())

    def create_empty(self, name: str) -> Path:
        """Create a quiz file with no questions, for editing."""
        path = self.path(name)
        if path.exists():
            raise QuizAlreadyExists(f"Quiz '{name}' already exists")
        path.parent.mkdir(parents=True, exist_ok=True)
        path.write_text(json.dumps(EMPTY_QUIZ_DOCUMENT, indent=2) + "\n", encoding="utf-8")
        return path

    def remove(self, name: str) -> None:
        path = self.path(name)
        if not path.is_file():
            raise QuizNotFound(f"Quiz '{name}' not found")
        path.unlink()
        logger.info(f"Removed quiz '{name}'")

    def rename(self, old: str, new: str) -> None:
        source = self.path(old)
        target = self.path(new)
        if not source.is_file():
            raise QuizNotFound(f"Quiz '{old}' not found")
        if target.exists():
            raise QuizAlreadyExists(f"Quiz '{new}' already exists")
        source.rename(target)
        logger.info(f"Renamed quiz '{old}' to '{new}'")
