# SPDX-License-Identifier: MIT
# Copyright (c) 2025 Blackcat Informatics® Inc.

"""End-to-end tests for the ``hookqa phpcs`` command using stub executables."""

from __future__ import annotations

import json
import os
from pathlib import Path

import pytest
from typer.testing import CliRunner

from hookqa.cli import CLILogger, app, emit_result
from hookqa.context import TaskContext
from hookqa.results import TaskResult

pytestmark = pytest.mark.skipif(os.name == "nt", reason="stub executables are POSIX shell scripts")

_REPORT = json.dumps(
    {
        "totals": {"errors": 1, "warnings": 0, "fixable": 1},
        "files": {"src/a.php": {"errors": 1, "warnings": 0, "messages": [{"message": "m", "fixable": True}]}},
    },
)


def _write_stub(bin_dir: Path, name: str, body: str) -> Path:
    bin_dir.mkdir(parents=True, exist_ok=True)
    path = bin_dir / name
    path.write_text(f"#!/bin/sh\n{body}\n", encoding="utf-8")
    path.chmod(0o755)
    return path


def _invoke(*args: str):
    return CliRunner().invoke(app, ["phpcs", "--no-emoji", *args])


def test_passes_when_phpcs_succeeds(tmp_path: Path) -> None:
    bin_dir = tmp_path / "bin"
    log = tmp_path / "phpcs.args"
    _write_stub(bin_dir, "phpcs", f'printf "%s\\n" "$@" > "{log}"\nexit 0')

    result = _invoke("--bin-dir", str(bin_dir), "--standard", "PSR12", "src/a.php", "README.md")

    assert result.exit_code == 0, result.output
    assert "phpcs: passed" in result.stdout
    assert log.read_text(encoding="utf-8").splitlines() == [
        "--standard=PSR12",
        "--extensions=php",
        "--report=full",
        "--report-json",
        "src/a.php",
    ]


def test_skips_without_applicable_files(tmp_path: Path) -> None:
    result = _invoke("--bin-dir", str(tmp_path), "notes.txt")

    assert result.exit_code == 0
    assert "skipped" in result.stdout


def test_other_context_is_skipped(tmp_path: Path) -> None:
    result = _invoke("--context", "other", "src/a.php")

    assert result.exit_code == 0
    assert "skipped" in result.stdout


def test_failure_with_fix_suggestion(tmp_path: Path) -> None:
    bin_dir = tmp_path / "bin"
    _write_stub(bin_dir, "phpcs", f"echo 'FOUND 1 ERROR'\necho '{_REPORT}'\nexit 2")
    phpcbf = _write_stub(bin_dir, "phpcbf", "exit 0")

    result = _invoke("--bin-dir", str(bin_dir), "src/a.php")

    assert result.exit_code == 1
    assert "automatic fixes are available" in result.stdout
    assert "FOUND 1 ERROR" in result.stdout
    assert "You can fix some errors automatically" in result.stdout
    assert f"{phpcbf.resolve()} --extensions=php src/a.php" in result.stdout


def test_failure_without_fixer_installed(tmp_path: Path, monkeypatch: pytest.MonkeyPatch) -> None:
    bin_dir = tmp_path / "bin"
    _write_stub(bin_dir, "phpcs", f"echo 'FOUND 1 ERROR'\necho '{_REPORT}'\nexit 2")
    monkeypatch.setenv("PATH", str(tmp_path / "empty"))

    result = _invoke("--bin-dir", str(bin_dir), "src/a.php")

    assert result.exit_code == 1
    assert "phpcs: failed" in result.stdout
    assert "phpcbf could not get found" in result.stdout


def test_missing_phpcs_is_a_usage_error(tmp_path: Path, monkeypatch: pytest.MonkeyPatch) -> None:
    monkeypatch.setenv("PATH", str(tmp_path / "empty"))

    result = _invoke("--bin-dir", str(tmp_path), "src/a.php")

    assert result.exit_code == 2
    assert "phpcs" in result.stdout


def test_invalid_option_is_a_usage_error(tmp_path: Path) -> None:
    result = _invoke("--bin-dir", str(tmp_path), "--severity=-3", "src/a.php")

    assert result.exit_code == 2
    assert "Invalid configuration" in result.stdout


def test_empty_report_is_a_usage_error(tmp_path: Path) -> None:
    bin_dir = tmp_path / "bin"
    log = tmp_path / "phpcs.args"
    _write_stub(bin_dir, "phpcs", f'touch "{log}"\nexit 0')

    result = _invoke("--bin-dir", str(bin_dir), "--report", "", "src/a.php")

    assert result.exit_code == 2
    assert "report" in result.stdout
    assert not log.exists()


def test_emit_result_exit_codes() -> None:
    logger = CLILogger(use_emoji=False)
    context = TaskContext.run(["a.php"])

    assert emit_result(TaskResult.passed("phpcs", context), logger) == 0
    assert emit_result(TaskResult.skipped("phpcs", context), logger) == 0
    assert emit_result(TaskResult.failed("phpcs", context, "nope"), logger) == 1
    assert emit_result(TaskResult.failed_with_fix_suggestion("phpcs", context, "nope", "phpcbf a.php"), logger) == 1
