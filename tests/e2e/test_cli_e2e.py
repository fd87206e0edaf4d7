from __future__ import annotations

"""
End-to-End (E2E) CLI Tests.

Invokes the entry point script via subprocess and validates exit codes
and stream output (stdout/stderr) against a real directory tree.
"""

import json
import os
import subprocess
import sys
from pathlib import Path
from typing import List

import pytest

PROJECT_ROOT = Path(__file__).resolve().parent.parent.parent
SRC_DIR = PROJECT_ROOT / "src"
ENTRY_POINT = SRC_DIR / "pathtree" / "main.py"


def run_cli(args: List[str], cwd: Path | None = None, stdin: str | None = None) -> subprocess.CompletedProcess[str]:
    """
    Helper to execute the CLI in a separate process.

    Injects the 'src' directory into PYTHONPATH and always passes
    --use-defaults so the user's persisted configuration is ignored.

    Args:
        args: Command line arguments (excluding 'python' and script path).
        cwd: Optional working directory for the subprocess.
        stdin: Optional text piped to the process.

    Returns:
        subprocess.CompletedProcess: returncode, stdout and stderr.
    """
    env = os.environ.copy()
    env["PYTHONPATH"] = str(SRC_DIR) + os.pathsep + env.get("PYTHONPATH", "")

    cmd = [sys.executable, str(ENTRY_POINT), "--use-defaults"] + args

    return subprocess.run(
        cmd,
        cwd=cwd,
        env=env,
        input=stdin,
        capture_output=True,
        text=True,
        encoding="utf-8"
    )


@pytest.fixture
def sample_project(tmp_path: Path) -> Path:
    """
    Create a dummy project structure for E2E testing.

    Structure:
    /input
      /src
        main.py
      /tests
        test_main.py
      README.md
    """
    input_dir = tmp_path / "input"
    input_dir.mkdir()

    src_dir = input_dir / "src"
    src_dir.mkdir()
    (src_dir / "main.py").write_text("def main(): pass", encoding="utf-8")

    test_dir = input_dir / "tests"
    test_dir.mkdir()
    (test_dir / "test_main.py").write_text("def test_main(): assert True", encoding="utf-8")

    (input_dir / "README.md").write_text("# Dummy Project", encoding="utf-8")

    return input_dir


def test_cli_files_execution(sample_project: Path) -> None:
    """
    TC-01: Verify 'files' lists every file relative to the root (Exit Code 0).
    """
    result = run_cli(["files", str(sample_project)])

    assert result.returncode == 0, f"CLI failed with stderr: {result.stderr}"
    lines = result.stdout.splitlines()
    assert sorted(lines) == ["README.md", "src/main.py", "tests/test_main.py"]
    # Deepest entries come first
    assert lines[-1] == "README.md"


def test_cli_handles_missing_input(tmp_path: Path) -> None:
    """
    TC-02: Verify CLI returns error code 2 when the input path is invalid.
    """
    missing_path = tmp_path / "non_existent_folder"

    result = run_cli(["tree", str(missing_path)])

    assert result.returncode == 2
    assert "does not exist" in result.stderr


def test_cli_tree_json_structure(sample_project: Path) -> None:
    """
    TC-03: Verify structure of the JSON tree output.
    """
    result = run_cli(["tree", str(sample_project), "--json"])
    assert result.returncode == 0

    try:
        data = json.loads(result.stdout)
    except json.JSONDecodeError:
        pytest.fail(f"Failed to decode JSON output: {result.stdout}")

    assert data == {
        "README.md": None,
        "src/": {"main.py": None},
        "tests/": {"test_main.py": None},
    }


def test_cli_depth_limit_override(sample_project: Path) -> None:
    """
    TC-04: Verify --max-depth placed before the command still applies.
    """
    result = run_cli(["--max-depth", "0", "files", str(sample_project)])

    assert result.returncode == 0
    assert result.stdout.splitlines() == ["README.md"]


def test_cli_sort_reads_stdin() -> None:
    """
    TC-05: Verify 'sort' consumes paths from stdin when none are given.
    """
    result = run_cli(["sort"], stdin="a\nb/c\nd/e/f\n")

    assert result.returncode == 0
    assert result.stdout.splitlines() == ["d/e/f", "b/c", "a"]


def test_cli_without_command_prints_usage() -> None:
    """
    TC-06: Verify a missing command is a usage error.
    """
    result = run_cli([])

    assert result.returncode == 2
    assert "usage" in result.stderr.lower()
