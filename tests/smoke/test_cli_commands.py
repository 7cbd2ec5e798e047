"""
Smoke Tests for CLI Commands.

These tests verify that CLI commands run without errors and produce output.
They don't validate correctness deeply - just that commands work.

Usage:
    pytest tests/smoke/test_cli_commands.py -v
    pytest tests/smoke/test_cli_commands.py -v -m smoke
"""

import json
import os
import subprocess
import sys
from pathlib import Path

import pytest

# Mark all tests in this module as smoke tests
pytestmark = pytest.mark.smoke

# Project root
PROJECT_ROOT = Path(__file__).parent.parent.parent


@pytest.fixture
def data_dir(tmp_path, geography_document):
    (tmp_path / "geography.json").write_text(json.dumps(geography_document), encoding="utf-8")
    return tmp_path


def run_cli_command(args: list[str], data_dir: Path, stdin: str = "", timeout: int = 30) -> tuple[int, str, str]:
    """
    Run a CLI command and return exit code, stdout, stderr.

    Args:
        args: Arguments after 'python -m popquiz'
        data_dir: Quiz directory for this run
        stdin: Text fed to the command's standard input
        timeout: Maximum time to wait

    Returns:
        Tuple of (exit_code, stdout, stderr)
    """
    env = {**os.environ, "POPQUIZ_DATA_DIR": str(data_dir), "POPQUIZ_RANDOM_SEED": "1"}
    result = subprocess.run(
        [sys.executable, "-m", "popquiz", *args],
        cwd=PROJECT_ROOT,
        env=env,
        input=stdin,
        capture_output=True,
        text=True,
        timeout=timeout,
    )

    return result.returncode, result.stdout, result.stderr


class TestCLIHelp:
    """Test that help commands work."""

    def test_main_help(self, data_dir):
        code, stdout, stderr = run_cli_command(["--help"], data_dir)

        assert code == 0, f"Help failed: {stderr}"
        assert "take" in stdout
        assert "Commands" in stdout

    def test_take_help(self, data_dir):
        code, stdout, stderr = run_cli_command(["take", "--help"], data_dir)

        assert code == 0, f"Help failed: {stderr}"
        assert "--tag" in stdout


class TestCLICommands:
    """Test commands against a temporary quiz directory."""

    def test_ls(self, data_dir):
        code, stdout, stderr = run_cli_command(["ls"], data_dir)

        assert code == 0, stderr
        assert "geography" in stdout

    def test_count(self, data_dir):
        code, stdout, _ = run_cli_command(["count", "geography"], data_dir)
        assert code == 0
        assert stdout.strip() == "5"

    def test_count_with_tags(self, data_dir):
        code, stdout, _ = run_cli_command(
            ["count", "geography", "--tag", "geography", "--exclude", "japan"], data_dir
        )
        assert code == 0
        assert stdout.strip() == "2"

    def test_path(self, data_dir):
        code, stdout, _ = run_cli_command(["path", "geography"], data_dir)
        assert code == 0
        assert stdout.strip().endswith("geography.json")

    def test_missing_quiz_reports_error(self, data_dir):
        code, _, stderr = run_cli_command(["count", "nope"], data_dir)

        assert code == 2
        assert "Error" in stderr

    def test_invalid_quiz_reports_error(self, data_dir):
        (data_dir / "bad.json").write_text(
            json.dumps([{"text": "Q?", "answer": "A", "depends": ["x", "y"]}]), encoding="utf-8"
        )

        code, _, stderr = run_cli_command(["count", "bad"], data_dir)

        assert code == 2
        assert "depends" in stderr

    def test_take_and_results(self, data_dir):
        stdin = "Columbia\nGeorge Washington\nJohn Adams\nThomas Jefferson\n"
        code, stdout, stderr = run_cli_command(["take", "geography", "--tag", "us"], data_dir, stdin)

        assert code == 0, stderr
        assert "Score" in stdout
        assert (data_dir / "results" / "geography_results.json").exists()

        code, stdout, stderr = run_cli_command(["results", "geography"], data_dir)
        assert code == 0, stderr
        assert "Results for geography" in stdout

    def test_mv_and_rm(self, data_dir):
        code, _, _ = run_cli_command(["mv", "geography", "world"], data_dir)
        assert code == 0
        assert (data_dir / "world.json").exists()

        code, _, _ = run_cli_command(["rm", "world", "--force"], data_dir)
        assert code == 0
        assert not (data_dir / "world.json").exists()
