"""
Unit tests for quiz file storage and results persistence.
"""

import io
import json
from datetime import datetime, timezone

import pytest
from popquiz.core.errors import ParseError, QuizAlreadyExists, QuizNotFound, ResultsFormatError
from popquiz.delivery import display
from popquiz.delivery.quiz_store import QuizStore
from popquiz.delivery.results_store import QuestionResult, QuizResult, ResultsStore
from rich.console import Console


@pytest.fixture
def store(tmp_path, geography_document):
    store = QuizStore(tmp_path)
    store.path("geography").write_text(json.dumps(geography_document), encoding="utf-8")
    return store


class TestQuizStore:
    def test_load(self, store):
        quiz = store.load("geography")
        assert len(quiz) == 5

    def test_missing_quiz(self, store):
        with pytest.raises(QuizNotFound):
            store.load("nope")

    def test_invalid_json(self, store):
        store.path("broken").write_text("{not json", encoding="utf-8")

        with pytest.raises(ParseError):
            store.load("broken")

    def test_list_quizzes(self, store):
        store.create_empty("astronomy")
        assert store.list_quizzes() == ["astronomy", "geography"]

    def test_create_empty_is_loadable(self, store):
        store.create_empty("blank")
        assert len(store.load("blank")) == 0

    def test_create_existing(self, store):
        with pytest.raises(QuizAlreadyExists):
            store.create_empty("geography")

    def test_rename(self, store):
        store.rename("geography", "world")

        assert store.exists("world")
        assert not store.exists("geography")

    def test_rename_onto_existing(self, store):
        store.create_empty("world")
        with pytest.raises(QuizAlreadyExists):
            store.rename("geography", "world")

    def test_remove(self, store):
        store.remove("geography")
        assert store.list_quizzes() == []

    def test_remove_missing(self, store):
        with pytest.raises(QuizNotFound):
            store.remove("nope")


class TestQuizResult:
    def test_totals(self):
        result = QuizResult(
            time_finished=datetime.now(timezone.utc),
            per_question=[
                QuestionResult(id="a", response="x", score=1.0),
                QuestionResult(id="b", response_list=["x"], score=0.5),
                QuestionResult(id="c", response="y", score=0.0),
                QuestionResult(id="d", response="z", score=None),
            ],
        )

        assert result.total == 4
        assert result.total_correct == 1
        assert result.total_partially_correct == 1
        assert result.total_incorrect == 1
        assert result.total_ungraded == 1
        assert result.score == pytest.approx(50.0)

    def test_empty_score(self):
        assert QuizResult(time_finished=datetime.now(timezone.utc)).score == 0.0


class TestResultsStore:
    def _result(self, *entries):
        return QuizResult(time_finished=datetime.now(timezone.utc), per_question=list(entries))

    def test_load_without_file(self, tmp_path):
        assert ResultsStore(tmp_path / "results").load("geography") == {}

    def test_save_and_append(self, tmp_path):
        results = ResultsStore(tmp_path / "results")
        results.save("geo", self._result(QuestionResult(id="q1", response="Paris", score=1.0)))
        results.save("geo", self._result(
            QuestionResult(id="q1", response="Lyon", score=0.0),
            QuestionResult(id="q2", response_list=["a", "b"], score=0.5),
        ))

        stored = results.load("geo")

        assert [r.response for r in stored["q1"]] == ["Paris", "Lyon"]
        assert stored["q2"][0].response_list == ["a", "b"]
        assert stored["q2"][0].id == "q2"

    def test_file_format(self, tmp_path):
        results = ResultsStore(tmp_path)
        path = results.save("geo", self._result(QuestionResult(id="q1", response="Paris", score=1.0)))

        data = json.loads(path.read_text(encoding="utf-8"))

        assert path.name == "geo_results.json"
        assert set(data["q1"][0]) == {"time_asked", "response", "score"}

    def test_ungraded_results_round_trip(self, tmp_path):
        results = ResultsStore(tmp_path)
        results.save("geo", self._result(QuestionResult(id="essay", response="...", score=None)))

        assert results.load("geo")["essay"][0].score is None

    def test_corrupt_results(self, tmp_path):
        results = ResultsStore(tmp_path)
        results.path("geo").write_text('{"q1": [{"unexpected": 1}]}', encoding="utf-8")

        with pytest.raises(ResultsFormatError):
            results.load("geo")


class TestShowStoredResults:
    def _render(self, results):
        console = Console(file=io.StringIO(), width=100)
        display.show_stored_results(console, "geo", results)
        return console.file.getvalue()

    def test_table_lists_each_question(self):
        asked = datetime(2024, 3, 1, 9, 30, tzinfo=timezone.utc)
        text = self._render({
            "q1": [QuestionResult(time_asked=asked, response="Paris", score=1.0)],
        })

        assert "q1" in text
        assert "100.0%" in text
        assert "2024-03-01 09:30" in text

    def test_question_without_attempts(self):
        text = self._render({"q1": []})

        row = next(line for line in text.splitlines() if "q1" in line)
        assert row.split() == ["q1", "0", "-", "-"]
