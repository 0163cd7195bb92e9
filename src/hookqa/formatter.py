# SPDX-License-Identifier: MIT
# Copyright (c) 2025 Blackcat Informatics® Inc.
"""Formatters translating PHP_CodeSniffer output into user-facing text."""

from __future__ import annotations

from collections.abc import Sequence
from typing import Final

from pydantic import BaseModel, ConfigDict, Field, ValidationError, field_validator

from .interfaces import ProcessLike

MANUAL_FIX_HEADER: Final[str] = "You can fix some errors automatically by running following command:"


class PhpcsMessage(BaseModel):
    """Single violation entry from the phpcs JSON report."""

    model_config = ConfigDict(extra="ignore")

    message: str = ""
    source: str | None = None
    severity: int | None = None
    type: str | None = None
    line: int | None = None
    column: int | None = None
    fixable: bool = False


class PhpcsFileReport(BaseModel):
    """Violations reported for a single file."""

    model_config = ConfigDict(extra="ignore")

    errors: int = 0
    warnings: int = 0
    messages: list[PhpcsMessage] = Field(default_factory=list)


class PhpcsTotals(BaseModel):
    """Aggregate counters from the phpcs JSON report."""

    model_config = ConfigDict(extra="ignore")

    errors: int = 0
    warnings: int = 0
    fixable: int = 0


class PhpcsReport(BaseModel):
    """The ``--report-json`` document emitted by phpcs."""

    model_config = ConfigDict(extra="ignore")

    totals: PhpcsTotals | None = None
    files: dict[str, PhpcsFileReport] = Field(default_factory=dict)

    @field_validator("files", mode="before")
    @classmethod
    def _coerce_empty_files(cls, value: object) -> object:
        # PHP encodes an empty map as a JSON list.
        if isinstance(value, list) and not value:
            return {}
        return value

    def fixable_files(self) -> list[str]:
        """Return files with at least one fixable message, in report order.

        Returns:
            list[str]: Paths as reported by phpcs. Empty when the totals claim
            nothing is fixable.
        """

        if self.totals is None or self.totals.fixable == 0:
            return []
        return [path for path, report in self.files.items() if any(item.fixable for item in report.messages)]


class PhpcsFormatter:
    """Split phpcs output into the human report and its JSON trailer.

    phpcs is invoked with both a human report and ``--report-json``; the JSON
    document is written on the last line of stdout.
    """

    def __init__(self) -> None:
        self._suggested_files: list[str] = []

    @property
    def suggested_files(self) -> Sequence[str]:
        """Return fixable files found by the most recent :meth:`format` call."""

        return tuple(self._suggested_files)

    def format(self, process: ProcessLike) -> str:
        """Return the human-readable part of ``process`` output.

        Args:
            process: Finished phpcs process.

        Returns:
            str: Diagnostic text. Falls back to stderr when stdout is empty and
            to the full stdout when no JSON trailer can be parsed.
        """

        self._suggested_files = []
        output = process.stdout
        if not output:
            return process.stderr

        body, separator, last_line = output.rstrip("\n").rpartition("\n")
        if not separator:
            return output
        try:
            report = PhpcsReport.model_validate_json(last_line)
        except ValidationError:
            return output

        self._suggested_files = report.fixable_files()
        return body.strip()

    def format_manual_fixing_output(self, fixer_process: ProcessLike) -> str:
        """Return instructions for running ``fixer_process`` by hand.

        Args:
            fixer_process: The phpcbf process the task ran.

        Returns:
            str: A blank line, a header, and the fixer command line.
        """

        return f"\n\n{MANUAL_FIX_HEADER}\n{fixer_process.command_line}"


__all__ = [
    "MANUAL_FIX_HEADER",
    "PhpcsFileReport",
    "PhpcsFormatter",
    "PhpcsMessage",
    "PhpcsReport",
    "PhpcsTotals",
]
