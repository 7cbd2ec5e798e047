"""
Results persistence.

Each quiz has a results file `<name>_results.json` mapping a question's
key (its id, or its text when it has none) to the list of time-stamped
results of every time it was asked. New results are appended.
"""

from __future__ import annotations

import json
from dataclasses import dataclass, field
from datetime import datetime, timezone
from pathlib import Path

from loguru import logger
from pydantic import BaseModel, ConfigDict, Field, TypeAdapter, ValidationError

from popquiz.core.errors import ResultsFormatError


class QuestionResult(BaseModel):
    """Result of answering a question on a particular occasion."""

    model_config = ConfigDict(extra="forbid")

    id: str = Field(default="", exclude=True)
    time_asked: datetime = Field(default_factory=lambda: datetime.now(timezone.utc))
    # Short answer and multiple choice responses
    response: str | None = None
    # List responses
    response_list: list[str] | None = None
    # None for ungraded questions
    score: float | None = None


@dataclass
class QuizResult:
    """Results of taking a quiz on a particular occasion."""

    time_finished: datetime
    per_question: list[QuestionResult] = field(default_factory=list)

    @property
    def graded(self) -> list[QuestionResult]:
        return [r for r in self.per_question if r.score is not None]

    @property
    def total(self) -> int:
        return len(self.per_question)

    @property
    def total_correct(self) -> int:
        return sum(1 for r in self.graded if r.score == 1.0)

    @property
    def total_partially_correct(self) -> int:
        return sum(1 for r in self.graded if 0.0 < r.score < 1.0)

    @property
    def total_incorrect(self) -> int:
        return sum(1 for r in self.graded if r.score == 0.0)

    @property
    def total_ungraded(self) -> int:
        return self.total - len(self.graded)

    @property
    def score(self) -> float:
        """Aggregate score as a percentage of graded questions."""
        graded = self.graded
        if not graded:
            return 0.0
        return sum(r.score for r in graded) / len(graded) * 100.0


StoredResults = dict[str, list[QuestionResult]]

_stored_results_adapter = TypeAdapter(StoredResults)


class ResultsStore:
    """Read and append quiz results under one directory."""

    def __init__(self, results_dir: Path | str):
        self.results_dir = Path(results_dir).expanduser()

    def path(self, name: str) -> Path:
        return self.results_dir / f"{name}_results.json"

    def load(self, name: str) -> StoredResults:
        """Load stored results; a quiz that was never taken has none."""
        path = self.path(name)
        if not path.is_file():
            return {}
        try:
            results = _stored_results_adapter.validate_json(path.read_text(encoding="utf-8"))
        except ValidationError as e:
            raise ResultsFormatError(f"Could not read results from {path}: {e}") from e
        for key, entries in results.items():
            for entry in entries:
                entry.id = key
        return results

    def save(self, name: str, result: QuizResult) -> Path:
        """Append a quiz result to the stored results."""
        stored = self.load(name)
        for entry in result.per_question:
            stored.setdefault(entry.id, []).append(entry)

        self.results_dir.mkdir(parents=True, exist_ok=True)
        path = self.path(name)
        data = {
            key: [entry.model_dump(mode="json", exclude_none=True) for entry in entries]
            for key, entries in sorted(stored.items())
        }
        path.write_text(json.dumps(data, indent=2) + "\n", encoding="utf-8")
        logger.info(f"Saved {len(result.per_question)} results to {path}")
        return path
