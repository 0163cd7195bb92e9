# SPDX-License-Identifier: MIT
# Copyright (c) 2025 Blackcat Informatics® Inc.

"""Tests for task result helpers."""

from __future__ import annotations

from hookqa.context import TaskContext
from hookqa.results import TaskResult, TaskResultKind


def test_result_predicates() -> None:
    context = TaskContext.run(["a.php"])

    skipped = TaskResult.skipped("phpcs", context)
    passed = TaskResult.passed("phpcs", context)
    failed = TaskResult.failed("phpcs", context, "nope")
    fixable = TaskResult.failed_with_fix_suggestion("phpcs", context, "nope + fix", "phpcbf a.php")

    assert skipped.is_skipped() and not skipped.is_blocking()
    assert passed.is_passed() and not passed.is_blocking()
    assert failed.is_blocking() and not failed.has_fix_suggestion()
    assert fixable.is_blocking() and fixable.has_fix_suggestion()
    assert fixable.kind is TaskResultKind.FAILED_WITH_FIX_SUGGESTION
    assert fixable.fix_command == "phpcbf a.php"
    assert passed.message == ""
    assert failed.fix_command is None
