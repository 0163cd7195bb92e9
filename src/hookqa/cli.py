# SPDX-License-Identifier: MIT
# Copyright (c) 2025 Blackcat Informatics® Inc.
"""Command-line entry point running hookqa tasks from git hooks."""

from __future__ import annotations

from dataclasses import dataclass
from pathlib import Path
from typing import Annotated, Any

import typer

from .context import ContextKind, FilesCollection, TaskContext
from .errors import CommandNotFoundError, ConfigError
from .formatter import PhpcsFormatter
from .logging import fail, info, ok, warn
from .process import ProcessBuilder
from .results import TaskResult, TaskResultKind
from .tasks import Phpcs

EXIT_OK = 0
EXIT_BLOCKED = 1
EXIT_USAGE = 2

app = typer.Typer(
    name="hookqa",
    help="Quality gate tasks for git hooks.",
    no_args_is_help=True,
    add_completion=False,
)


@dataclass(slots=True)
class CLILogger:
    """Adapter around project logging helpers respecting CLI emoji settings."""

    use_emoji: bool

    def fail(self, message: str) -> None:
        fail(message, use_emoji=self.use_emoji)

    def warn(self, message: str) -> None:
        warn(message, use_emoji=self.use_emoji)

    def ok(self, message: str) -> None:
        ok(message, use_emoji=self.use_emoji)

    def info(self, message: str) -> None:
        info(message, use_emoji=self.use_emoji)

    def echo(self, message: str) -> None:
        """Write ``message`` to stdout without styling."""

        typer.echo(message)


def emit_result(result: TaskResult, logger: CLILogger) -> int:
    """Render ``result`` and return the matching process exit status.

    Args:
        result: Outcome of a task invocation.
        logger: Logger used for user-facing output.

    Returns:
        int: ``0`` when the commit may proceed, ``1`` otherwise.
    """

    if result.kind is TaskResultKind.SKIPPED:
        logger.info(f"{result.task}: skipped, no applicable files")
        return EXIT_OK
    if result.kind is TaskResultKind.PASSED:
        logger.ok(f"{result.task}: passed")
        return EXIT_OK
    if result.kind is TaskResultKind.FAILED_WITH_FIX_SUGGESTION:
        logger.warn(f"{result.task}: failed, automatic fixes are available")
    else:
        logger.fail(f"{result.task}: failed")
    if result.message:
        logger.echo(result.message)
    return EXIT_BLOCKED


def _phpcs_options(
    *,
    standard: list[str] | None,
    tab_width: int | None,
    encoding: str | None,
    whitelist_patterns: list[str] | None,
    ignore_patterns: list[str] | None,
    sniffs: list[str] | None,
    severity: int | None,
    error_severity: int | None,
    warning_severity: int | None,
    triggered_by: list[str] | None,
    report: str | None,
    report_width: int | None,
    exclude: list[str] | None,
) -> dict[str, Any]:
    """Return the raw task options the user actually supplied."""

    supplied: dict[str, Any] = {
        "standard": standard,
        "tab_width": tab_width,
        "encoding": encoding,
        "whitelist_patterns": whitelist_patterns,
        "ignore_patterns": ignore_patterns,
        "sniffs": sniffs,
        "severity": severity,
        "error_severity": error_severity,
        "warning_severity": warning_severity,
        "triggered_by": triggered_by,
        "report": report,
        "report_width": report_width,
        "exclude": exclude,
    }
    return {key: value for key, value in supplied.items() if value not in (None, [])}


@app.callback()
def main() -> None:
    """Quality gate tasks for git hooks."""


@app.command("phpcs")
def phpcs_command(
    files: Annotated[list[Path] | None, typer.Argument(help="Files to inspect.")] = None,
    context: Annotated[ContextKind, typer.Option("--context", help="Run kind the task is invoked under.")] = (
        ContextKind.RUN
    ),
    standard: Annotated[list[str] | None, typer.Option("--standard", help="Coding standard (repeatable).")] = None,
    tab_width: Annotated[int | None, typer.Option("--tab-width")] = None,
    encoding: Annotated[str | None, typer.Option("--encoding")] = None,
    whitelist_patterns: Annotated[
        list[str] | None,
        typer.Option("--whitelist-pattern", help="Only inspect matching paths (repeatable)."),
    ] = None,
    ignore_patterns: Annotated[
        list[str] | None,
        typer.Option("--ignore-pattern", help="Skip matching paths (repeatable)."),
    ] = None,
    sniffs: Annotated[list[str] | None, typer.Option("--sniff", help="Restrict to a sniff (repeatable).")] = None,
    severity: Annotated[int | None, typer.Option("--severity")] = None,
    error_severity: Annotated[int | None, typer.Option("--error-severity")] = None,
    warning_severity: Annotated[int | None, typer.Option("--warning-severity")] = None,
    triggered_by: Annotated[
        list[str] | None,
        typer.Option("--triggered-by", help="File extension to inspect (repeatable)."),
    ] = None,
    report: Annotated[str | None, typer.Option("--report", help="phpcs report format.")] = None,
    report_width: Annotated[int | None, typer.Option("--report-width")] = None,
    exclude: Annotated[list[str] | None, typer.Option("--exclude", help="Sniff to exclude (repeatable).")] = None,
    bin_dir: Annotated[
        list[Path] | None,
        typer.Option("--bin-dir", help="Directory searched for phpcs/phpcbf before PATH (repeatable)."),
    ] = None,
    root: Annotated[Path | None, typer.Option("--root", help="Working directory for spawned tools.")] = None,
    timeout: Annotated[float | None, typer.Option("--timeout", min=0, help="Per-process timeout in seconds.")] = None,
    emoji: Annotated[bool, typer.Option("--emoji/--no-emoji")] = True,
) -> None:
    """Run PHP_CodeSniffer and suggest phpcbf fixes."""

    logger = CLILogger(use_emoji=emoji)
    options = _phpcs_options(
        standard=standard,
        tab_width=tab_width,
        encoding=encoding,
        whitelist_patterns=whitelist_patterns,
        ignore_patterns=ignore_patterns,
        sniffs=sniffs,
        severity=severity,
        error_severity=error_severity,
        warning_severity=warning_severity,
        triggered_by=triggered_by,
        report=report,
        report_width=report_width,
        exclude=exclude,
    )
    builder = ProcessBuilder(bin_dirs=bin_dir or (), cwd=root, timeout=timeout)
    task_context = TaskContext(kind=context, files=FilesCollection.of(files or ()))
    try:
        task = Phpcs(builder, PhpcsFormatter(), options)
        result = task.run(task_context)
    except (ConfigError, CommandNotFoundError) as exc:
        logger.fail(str(exc))
        raise typer.Exit(code=EXIT_USAGE) from exc

    raise typer.Exit(code=emit_result(result, logger))


__all__ = ["CLILogger", "app", "emit_result"]
