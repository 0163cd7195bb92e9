# SPDX-License-Identifier: MIT
# Copyright (c) 2025 Blackcat Informatics® Inc.
"""Outcome values returned by tasks."""

from __future__ import annotations

from dataclasses import dataclass
from enum import Enum

from .context import TaskContext


class TaskResultKind(str, Enum):
    """Enumerate the ways a task invocation can end."""

    SKIPPED = "skipped"
    PASSED = "passed"
    FAILED = "failed"
    FAILED_WITH_FIX_SUGGESTION = "failed_with_fix_suggestion"


@dataclass(frozen=True, slots=True)
class TaskResult:
    """Result of a single task invocation.

    ``message`` holds the diagnostic text for failed results and is empty for
    skipped and passed ones. ``fix_command`` is only populated for
    :attr:`TaskResultKind.FAILED_WITH_FIX_SUGGESTION` and carries the command
    line a developer can run to apply the suggested fixes.
    """

    kind: TaskResultKind
    task: str
    context: TaskContext
    message: str = ""
    fix_command: str | None = None

    @classmethod
    def skipped(cls, task: str, context: TaskContext) -> TaskResult:
        """Return a result for a task that did not run."""

        return cls(TaskResultKind.SKIPPED, task, context)

    @classmethod
    def passed(cls, task: str, context: TaskContext) -> TaskResult:
        """Return a result for a task that found nothing to report."""

        return cls(TaskResultKind.PASSED, task, context)

    @classmethod
    def failed(cls, task: str, context: TaskContext, message: str) -> TaskResult:
        """Return a failed result carrying ``message``."""

        return cls(TaskResultKind.FAILED, task, context, message)

    @classmethod
    def failed_with_fix_suggestion(
        cls,
        task: str,
        context: TaskContext,
        message: str,
        fix_command: str,
    ) -> TaskResult:
        """Return a failed result whose violations can be fixed by ``fix_command``.

        Args:
            task: Name of the task producing the result.
            context: Context the task ran under.
            message: Diagnostic text followed by the manual fixing instructions.
            fix_command: Command line that applies the suggested fixes.

        Returns:
            TaskResult: Result flagged as fixable.
        """

        return cls(TaskResultKind.FAILED_WITH_FIX_SUGGESTION, task, context, message, fix_command)

    def is_passed(self) -> bool:
        """Return whether the task ran and passed."""

        return self.kind is TaskResultKind.PASSED

    def is_skipped(self) -> bool:
        """Return whether the task did not run."""

        return self.kind is TaskResultKind.SKIPPED

    def is_blocking(self) -> bool:
        """Return whether the result should stop a commit."""

        return self.kind in (TaskResultKind.FAILED, TaskResultKind.FAILED_WITH_FIX_SUGGESTION)

    def has_fix_suggestion(self) -> bool:
        """Return whether an automatic fix was suggested."""

        return self.kind is TaskResultKind.FAILED_WITH_FIX_SUGGESTION


__all__ = ["TaskResult", "TaskResultKind"]
