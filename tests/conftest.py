"""
Pytest Configuration and Fixtures.

This file configures pytest and provides shared fixtures for all tests.
"""
import pytest
import sys
from pathlib import Path

# Add project root to path
PROJECT_ROOT = Path(__file__).parent.parent
sys.path.insert(0, str(PROJECT_ROOT))


def pytest_configure(config):
    """Configure pytest markers."""
    config.addinivalue_line("markers", "unit: Unit tests")
    config.addinivalue_line("markers", "smoke: Smoke tests for CLI commands")


def pytest_collection_modifyitems(config, items):
    """Automatically mark tests based on their location."""
    for item in items:
        if "unit" in str(item.fspath):
            item.add_marker(pytest.mark.unit)
        elif "smoke" in str(item.fspath):
            item.add_marker(pytest.mark.smoke)


@pytest.fixture(scope="session")
def project_root():
    """Return the project root directory."""
    return PROJECT_ROOT


@pytest.fixture
def geography_document():
    """A quiz document covering every question kind."""
    return {
        "instructions": "Answer each question.",
        "questions": [
            {
                "text": ["What is the capital of South Carolina?", "Name South Carolina's capital."],
                "answer": "Columbia",
                "tags": ["geography", "us"],
                "explanations": {
                    "charleston": "Charleston is the capital of West Virginia, not South Carolina."
                },
            },
            {
                "kind": "MultipleChoice",
                "text": "What is the tallest mountain on Earth?",
                "answer": ["Mount Everest", "Everest"],
                "candidates": ["K2", "Kangchenjunga", "Denali", "Aconcagua"],
                "tags": ["geography"],
            },
            {
                "kind": "ListAnswer",
                "text": "Name the four main islands of Japan.",
                "answer_list": ["Hokkaido", "Honshu", "Shikoku", "Kyushu"],
                "tags": ["geography", "japan"],
                "id": "islands",
            },
            {
                "kind": "OrderedListAnswer",
                "text": "List the first three US presidents in order.",
                "answer_list": [
                    ["George Washington", "Washington"],
                    ["John Adams", "Adams"],
                    ["Thomas Jefferson", "Jefferson"],
                ],
                "tags": ["history", "us"],
            },
            {
                "kind": "Ungraded",
                "text": "Why did the Roman Republic fall?",
                "answer": "A combination of political violence and civil war.",
                "tags": ["history"],
                "depends": "islands",
            },
        ],
    }
